"""
Site Build Orchestration

Runs one build of the series navigation output:
1. Load content into an immutable snapshot
2. Render the series listing page
3. Render one navigation fragment per series page (members and overviews)
4. Write the JSON navigation manifest
5. Copy passthrough files

Content problems (unparseable front matter, missing assets) are reported as
warnings and never abort the build. I/O and template failures are reported
through BuildResult instead of being raised.
"""

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from scribe.contexts.content.content_item import ContentItem
from scribe.contexts.rendering.config import SiteConfig
from scribe.contexts.rendering.defaults import (
    MANIFEST_PATH,
    NAV_FRAGMENTS_DIR,
    SERIES_LISTING_PATH,
)
from scribe.contexts.rendering.logger import (
    _log_debug,
    _log_error,
    _log_info,
    _log_warning,
    log_build_result,
    log_build_start,
    setup_rendering_logger,
)
from scribe.contexts.rendering.passthrough import copy_passthrough
from scribe.contexts.rendering.registries import TemplateRegistry
from scribe.contexts.series.navigation import format_date, series_navigation
from scribe.contexts.series.snapshot import ContentSnapshot, load_snapshot

LISTING_TITLE = "Series"


@dataclass
class BuildResult:
    """Result from build_site() orchestration function."""

    success: bool
    input_path: Optional[Path] = None
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    log_file: Optional[Path] = None
    items_loaded: int = 0
    series_count: int = 0
    fragments_written: int = 0
    copied: List[Path] = field(default_factory=list)


def _item_summary(item: ContentItem) -> Dict[str, Any]:
    return {
        "title": item.title,
        "url": item.url,
        "part": item.part,
        "date": item.date,
        "date_display": format_date(item.date),
        "source_path": item.source_path,
    }


def build_listing_context(snapshot: ContentSnapshot) -> List[Dict[str, Any]]:
    """
    Build the template context for the series listing page.

    Returns:
        One entry per series (sorted by series id) with its overview item and member summaries
    """
    indexer = snapshot.indexer
    return [
        {
            "series_id": series_id,
            "overview": indexer.overview(series_id),
            "members": [_item_summary(item) for item in indexer.members(series_id)],
        }
        for series_id in indexer.series_ids()
    ]


def build_manifest(snapshot: ContentSnapshot) -> Dict[str, Any]:
    """
    Build the JSON navigation manifest.

    Maps each series id to its overview URL and ordered members, each member
    carrying the URLs of its previous and next pages.
    """
    manifest = {}
    for series_id in snapshot.indexer.series_ids():
        overview = snapshot.indexer.overview(series_id)
        members = []
        for item in snapshot.indexer.members(series_id):
            nav = series_navigation(item, snapshot)
            members.append(
                {
                    "title": item.title,
                    "url": item.url,
                    "part": item.part,
                    "source_path": item.source_path,
                    "previous": nav.previous.url if nav.previous else None,
                    "next": nav.next.url if nav.next else None,
                }
            )
        manifest[series_id] = {
            "overview": overview.url if overview else None,
            "members": members,
        }
    return manifest


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_navigation_fragments(
    snapshot: ContentSnapshot, registry: TemplateRegistry, output_dir: Path
) -> int:
    """
    Render a navigation fragment for every page that belongs to a series.

    Fragments are written to {output_dir}/_nav/{page url}.html.
    Pages whose URL would place the fragment outside output_dir are skipped.

    Returns:
        Number of fragments written
    """
    root = output_dir.resolve()
    count = 0
    for item in snapshot.all:
        nav = series_navigation(item, snapshot)
        if nav is None:
            continue
        target = (output_dir / NAV_FRAGMENTS_DIR / f"{item.output_stem}.html").resolve()
        if root not in target.parents:
            _log_warning(f"Skipping navigation for {item.source_path}: URL {item.url!r} leaves the output directory")
            continue
        fragment = registry.render("series_nav", nav=nav)
        _write_text(target, fragment)
        _log_debug(f"Wrote navigation for {item.source_path}")
        count += 1
    return count


def build_site(
    config: SiteConfig,
    registry: TemplateRegistry = None,
    log_dir: Path = None,
) -> BuildResult:
    """
    Build series navigation output for a site.

    Args:
        config: Resolved site configuration
        registry: Template registry (defaults to one over config.templates_dir or packaged templates)
        log_dir: If given, configure file + console logging into this directory

    Returns:
        BuildResult with counts, output path, and error message on failure
    """
    start = time.time()
    log_file = setup_rendering_logger(log_dir, config.input_dir) if log_dir else None
    log_build_start(config.input_dir, config.output_dir, log_file)

    if registry is None:
        registry = TemplateRegistry(config.templates_dir)

    try:
        snapshot = load_snapshot(
            config.input_dir,
            musings_glob=config.musings_glob,
            pattern=config.content_pattern,
        )
        series_count = len(snapshot.series_content)
        _log_info(f"Indexed {series_count} series ({len(snapshot.series)} overview page(s))")

        listing = registry.render(
            "series_listing", title=LISTING_TITLE, series=build_listing_context(snapshot)
        )
        _write_text(config.output_dir / SERIES_LISTING_PATH, listing)

        fragments = write_navigation_fragments(snapshot, registry, config.output_dir)

        manifest = build_manifest(snapshot)
        _write_text(
            config.output_dir / MANIFEST_PATH,
            json.dumps(manifest, indent=2, ensure_ascii=False) + "\n",
        )

        copied = copy_passthrough(config.passthrough, config.project_root, config.output_dir)

        result = BuildResult(
            success=True,
            input_path=config.input_dir,
            output_path=config.output_dir,
            time_s=time.time() - start,
            log_file=log_file,
            items_loaded=len(snapshot.all),
            series_count=series_count,
            fragments_written=fragments,
            copied=copied,
        )
    except Exception as e:
        _log_error(f"Build aborted: {type(e).__name__}")
        result = BuildResult(
            success=False,
            input_path=config.input_dir,
            output_path=config.output_dir,
            error=str(e),
            time_s=time.time() - start,
            log_file=log_file,
        )

    log_build_result(result, result.time_s)
    return result
