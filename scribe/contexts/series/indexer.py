"""
Series Indexer

Groups content items into ordered per-series sequences and answers navigation
queries against them.

All functions are pure. A lookup that finds nothing returns None; callers
render the absence (e.g., omit a "next" link).

Notes:
    An item without `part` sorts as part 0, so it can share position with an
    explicit part-0 introduction. It is never matched by previous/next lookups.
    Members sharing a part keep their input order and the first one wins lookups.
"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from scribe.contexts.content.content_item import SERIES_TAG, ContentItem

SeriesGroups = Dict[str, Tuple[ContentItem, ...]]


def _part_sort_key(item: ContentItem) -> int:
    return item.part or 0


def _find_part(members: Sequence[ContentItem], part: int) -> Optional[ContentItem]:
    for item in members:
        if item.part == part:
            return item
    return None


def build_groups(all_items: Iterable[ContentItem]) -> SeriesGroups:
    """
    Group series members by series id, ordered by part.

    Overview pages (tagged "series") and items without a series id are left out.

    Args:
        all_items: Every content item of the site

    Returns:
        Mapping of series id to members sorted ascending by part (missing part as 0)

    Example:
        groups = build_groups(items)
        groups["galactic-archives"]
        # (intro, setup, ...)
    """
    grouped: Dict[str, List[ContentItem]] = {}
    for item in all_items:
        if not item.series_id or item.has_tag(SERIES_TAG):
            continue
        grouped.setdefault(item.series_id, []).append(item)

    return {
        series_id: tuple(sorted(members, key=_part_sort_key))
        for series_id, members in grouped.items()
    }


def get_series_overview(
    series_id: str, overview_items: Iterable[ContentItem]
) -> Optional[ContentItem]:
    """Return the first overview item for a series, in the order supplied."""
    for item in overview_items:
        if item.series_id == series_id:
            return item
    return None


def get_previous_in_series(part: int, series_id: str, groups: SeriesGroups) -> Optional[ContentItem]:
    """Return the member of a series whose part is `part - 1`."""
    return _find_part(groups.get(series_id, ()), part - 1)


def get_next_in_series(part: int, series_id: str, groups: SeriesGroups) -> Optional[ContentItem]:
    """Return the member of a series whose part is `part + 1`."""
    return _find_part(groups.get(series_id, ()), part + 1)


class SeriesIndexer:
    """
    Read-only query layer over one build's series groups.

    Built once from a complete set of content items and never updated.
    """

    def __init__(
        self,
        items: Iterable[ContentItem],
        overview_items: Optional[Iterable[ContentItem]] = None,
    ):
        """
        Args:
            items: Every content item of the site
            overview_items: Series landing pages. Defaults to the items tagged "series",
                            in the order given.
        """
        items = list(items)
        if overview_items is None:
            overview_items = [item for item in items if item.has_tag(SERIES_TAG)]

        self.groups = build_groups(items)
        self.overview_items = tuple(overview_items)

    def series_ids(self) -> List[str]:
        """Series ids in sorted order."""
        return sorted(self.groups)

    def members(self, series_id: str) -> Tuple[ContentItem, ...]:
        return self.groups.get(series_id, ())

    def overview(self, series_id: str) -> Optional[ContentItem]:
        return get_series_overview(series_id, self.overview_items)

    def previous(self, part: int, series_id: str) -> Optional[ContentItem]:
        return get_previous_in_series(part, series_id, self.groups)

    def next(self, part: int, series_id: str) -> Optional[ContentItem]:
        return get_next_in_series(part, series_id, self.groups)
