"""
Series Context

Responsibilities:
- Groups content items into ordered series by series id and part
- Builds the immutable collections snapshot for one build
- Answers previous/next/overview navigation queries

Owns: Series grouping, collection snapshot, navigation helpers
Never: Reads files directly or renders output
"""

from scribe.contexts.series.indexer import (
    SeriesGroups,
    SeriesIndexer,
    build_groups,
    get_next_in_series,
    get_previous_in_series,
    get_series_overview,
)
from scribe.contexts.series.navigation import SeriesNavigation, series_navigation, split_path
from scribe.contexts.series.snapshot import ContentSnapshot, build_snapshot, load_snapshot

__all__ = [
    # Core grouping and queries
    "build_groups",
    "get_series_overview",
    "get_previous_in_series",
    "get_next_in_series",
    "SeriesGroups",
    "SeriesIndexer",
    # Collections
    "ContentSnapshot",
    "build_snapshot",
    "load_snapshot",
    # Page helpers
    "SeriesNavigation",
    "series_navigation",
    "split_path",
]
