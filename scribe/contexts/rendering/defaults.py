"""
Default values for SCRIBE site builds.

Provides the baseline site configuration that load_site_config() merges user
YAML and command-line overrides onto.
"""

from typing import Any, Dict

from scribe.contexts.content.loader import DEFAULT_CONTENT_PATTERN
from scribe.contexts.series.snapshot import DEFAULT_MUSINGS_GLOB

DEFAULT_INPUT_DIR = "src"
DEFAULT_OUTPUT_DIR = "_site"

# Static files copied verbatim into the output (source relative to project root -> destination
# relative to output dir). Sources containing glob characters copy each match into the destination.
DEFAULT_PASSTHROUGH = {
    "src/assets/css/*.css": "assets/css",
    "src/assets/js": "assets/js",
    "src/assets/img": "assets/img",
    "src/assets/ico": "assets/ico",
    # Fonts sit under css/ to match the relative paths in the stylesheet
    "src/assets/et-book": "assets/css/et-book",
    "CNAME": "CNAME",
    "robots.txt": "robots.txt",
    "humans.txt": "humans.txt",
}

# Output locations inside the output directory
SERIES_LISTING_PATH = "series/index.html"
NAV_FRAGMENTS_DIR = "_nav"
MANIFEST_PATH = "series.json"


def get_default_site_config() -> Dict[str, Any]:
    """
    Get complete default site configuration with all expected keys.

    Returns:
        Dict with every key load_site_config() accepts
    """
    return {
        "input_dir": DEFAULT_INPUT_DIR,
        "output_dir": DEFAULT_OUTPUT_DIR,
        "content_pattern": DEFAULT_CONTENT_PATTERN,
        "musings_glob": DEFAULT_MUSINGS_GLOB,
        "templates_dir": None,
        "passthrough": DEFAULT_PASSTHROUGH.copy(),
    }
