"""
Series Navigation Helpers

Plain functions a template layer calls to render series context on a page:
previous/next links, the series overview link, and "part N of M" labels.
Also hosts the small display helpers pages need (date and path formatting).
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from scribe.contexts.content.content_item import ContentItem
from scribe.contexts.series.snapshot import ContentSnapshot
from scribe.utils.timestamp import format_date


@dataclass(frozen=True)
class SeriesNavigation:
    """
    Navigation context for one page of a series.

    Attributes:
        series_id: Series the page belongs to
        item: The page itself
        overview: Series landing page, if one exists
        previous: Member with part one lower, if any
        next: Member with part one higher, if any
        members: Every member of the series in order
        position: 1-based position of the page among members; None for overview pages
    """

    series_id: str
    item: ContentItem
    overview: Optional[ContentItem]
    previous: Optional[ContentItem]
    next: Optional[ContentItem]
    members: Tuple[ContentItem, ...]
    position: Optional[int]

    @property
    def total(self) -> int:
        return len(self.members)

    @property
    def is_overview(self) -> bool:
        return self.item.is_series_overview

    @property
    def breadcrumbs(self) -> List[Tuple[str, str]]:
        """(segment, url) pairs for each leading path of the page URL, page included."""
        segments = split_path(self.item.url)
        return [
            (segment, "/" + "/".join(segments[: index + 1]) + "/")
            for index, segment in enumerate(segments)
        ]


def series_navigation(item: ContentItem, snapshot: ContentSnapshot) -> Optional[SeriesNavigation]:
    """
    Compute series navigation for a page.

    Args:
        item: Page being rendered
        snapshot: Collections of the current build

    Returns:
        SeriesNavigation, or None if the page is not part of a series.
        Pages without a part get no previous/next links.
    """
    if not item.series_id:
        return None

    indexer = snapshot.indexer
    members = indexer.members(item.series_id)

    previous = next_item = None
    if item.part is not None and not item.is_series_overview:
        previous = indexer.previous(item.part, item.series_id)
        next_item = indexer.next(item.part, item.series_id)

    position = None
    if item in members:
        position = members.index(item) + 1

    return SeriesNavigation(
        series_id=item.series_id,
        item=item,
        overview=indexer.overview(item.series_id),
        previous=previous,
        next=next_item,
        members=members,
        position=position,
    )


def split_path(value: str) -> List[str]:
    """
    Split a URL path into its non-empty segments.

    Example:
        split_path("/series/galactic-archives/")
        # ["series", "galactic-archives"]
    """
    return [segment for segment in value.split("/") if segment]


__all__ = ["SeriesNavigation", "series_navigation", "split_path", "format_date"]
