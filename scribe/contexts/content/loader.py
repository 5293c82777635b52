"""
Content Loading

Loads every markdown document under the site input directory into ContentItem
instances. Files inside directories starting with "_" (layouts, includes, data)
are not content and are skipped.
"""

import warnings
from pathlib import Path
from typing import List

from scribe.contexts.content.content_item import ContentItem
from scribe.contexts.content.exceptions import FrontMatterError
from scribe.contexts.content.logger import _log_debug, _log_info, _log_warning

DEFAULT_CONTENT_PATTERN = "**/*.md"
IGNORED_DIR_PREFIX = "_"


def is_content_file(path: Path, input_dir: Path) -> bool:
    """Check that a file is content rather than a layout, include, or data file."""
    if not path.is_file():
        return False
    relative_dirs = path.relative_to(input_dir).parts[:-1]
    return not any(part.startswith(IGNORED_DIR_PREFIX) for part in relative_dirs)


def load_content_items(input_dir: Path, pattern: str = DEFAULT_CONTENT_PATTERN) -> List[ContentItem]:
    """
    Load all content items from the input directory.

    Files are loaded in sorted path order. Files whose front matter fails to
    parse are skipped and reported together in a single warning.

    Args:
        input_dir: Site input directory (e.g., src/)
        pattern: Glob pattern relative to input_dir selecting content files

    Returns:
        List of successfully loaded ContentItem instances
    """
    if not input_dir.exists():
        warnings.warn(f"Content directory not found: {input_dir}", UserWarning)
        return []

    files = sorted(p for p in input_dir.glob(pattern) if is_content_file(p, input_dir))
    items = []
    errors = []

    for path in files:
        try:
            items.append(ContentItem.from_file(path, input_dir))
            _log_debug(f"Loaded {path.relative_to(input_dir).as_posix()}")
        except (FrontMatterError, UnicodeDecodeError) as e:
            errors.append((path.relative_to(input_dir).as_posix(), str(e).splitlines()[0]))

    if errors:
        error_summary = "\n".join(f"  - {name}: {error}" for name, error in errors[:10])
        if len(errors) > 10:
            error_summary += f"\n  ... and {len(errors) - 10} more"

        _log_warning(f"Skipped {len(errors)}/{len(files)} content file(s)")
        warnings.warn(
            f"Failed to load {len(errors)}/{len(files)} content file(s):\n{error_summary}",
            UserWarning,
        )

    _log_info(f"Loaded {len(items)} content item(s) from {input_dir}")
    return items
