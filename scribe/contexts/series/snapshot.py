"""
Content Snapshot

Immutable set of site collections built once per build and passed explicitly to
every navigation query:

- all: every content item, ordered by date then source path
- musings: blog posts selected by the musings glob
- series: series overview pages (tagged "series")
- series_content: series members grouped by series id and ordered by part
"""

from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional, Tuple

from scribe.contexts.content.content_item import SERIES_TAG, ContentItem
from scribe.contexts.content.loader import DEFAULT_CONTENT_PATTERN, load_content_items
from scribe.contexts.series.indexer import SeriesGroups, SeriesIndexer

DEFAULT_MUSINGS_GLOB = "musings/*.md"


def matches_glob(source_path: str, pattern: str) -> bool:
    """
    Match a relative POSIX path against a glob.

    Without "**" each segment is matched separately, so "musings/*.md" does not
    reach into subdirectories of musings/.
    """
    if "**" in pattern:
        return fnmatchcase(source_path, pattern)

    path_parts = PurePosixPath(source_path).parts
    pattern_parts = PurePosixPath(pattern).parts
    if len(path_parts) != len(pattern_parts):
        return False
    return all(fnmatchcase(part, glob) for part, glob in zip(path_parts, pattern_parts))


def _collection_sort_key(item: ContentItem) -> Tuple[str, str]:
    return (item.date or "", item.source_path)


@dataclass(frozen=True)
class ContentSnapshot:
    """Collections of one build. Never mutated after construction."""

    all: Tuple[ContentItem, ...]
    musings: Tuple[ContentItem, ...]
    series: Tuple[ContentItem, ...]
    indexer: SeriesIndexer

    @property
    def series_content(self) -> SeriesGroups:
        return self.indexer.groups

    def find(self, source_path: str) -> Optional[ContentItem]:
        """Look up an item by its path relative to the input directory."""
        for item in self.all:
            if item.source_path == source_path:
                return item
        return None


def build_snapshot(
    items: Iterable[ContentItem], musings_glob: str = DEFAULT_MUSINGS_GLOB
) -> ContentSnapshot:
    """
    Build all collections from a complete set of content items.

    Args:
        items: Every content item of the site
        musings_glob: Glob (relative to the input directory) selecting blog posts

    Returns:
        ContentSnapshot
    """
    all_items = tuple(sorted(items, key=_collection_sort_key))
    overviews = tuple(item for item in all_items if item.has_tag(SERIES_TAG))

    return ContentSnapshot(
        all=all_items,
        musings=tuple(item for item in all_items if matches_glob(item.source_path, musings_glob)),
        series=overviews,
        indexer=SeriesIndexer(all_items, overview_items=overviews),
    )


def load_snapshot(
    input_dir: Path,
    musings_glob: str = DEFAULT_MUSINGS_GLOB,
    pattern: str = DEFAULT_CONTENT_PATTERN,
) -> ContentSnapshot:
    """Load every content file under input_dir and build its collections."""
    return build_snapshot(load_content_items(input_dir, pattern=pattern), musings_glob=musings_glob)
