"""
Passthrough Copy

Copies static files (stylesheets, scripts, images, CNAME, robots.txt) verbatim
into the output directory.

Mapping entries are `source -> destination`:
- source is relative to the project root; destination is relative to the output dir
- a file source is copied to exactly the destination path
- a directory source is copied recursively into the destination directory
- a glob source (containing *, ? or [) copies each match into the destination directory
"""

import shutil
from pathlib import Path
from typing import Dict, List

from scribe.contexts.rendering.logger import _log_debug, _log_warning

GLOB_CHARS = set("*?[")


def _copy_path(source: Path, target: Path) -> None:
    if source.is_dir():
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)


def copy_passthrough(mapping: Dict[str, str], project_root: Path, output_dir: Path) -> List[Path]:
    """
    Copy every passthrough entry into the output directory.

    Missing sources are logged as warnings and skipped.

    Args:
        mapping: Source path or glob -> destination path
        project_root: Base for source paths
        output_dir: Base for destination paths

    Returns:
        Paths written in the output directory, in mapping order
    """
    written = []

    for source, destination in mapping.items():
        target = output_dir / destination

        if GLOB_CHARS & set(source):
            matches = sorted(project_root.glob(source))
            if not matches:
                _log_warning(f"Passthrough glob matched nothing: {source}")
                continue
            for match in matches:
                _copy_path(match, target / match.name)
                written.append(target / match.name)
            _log_debug(f"Copied {len(matches)} match(es) of {source} -> {destination}")
            continue

        source_path = project_root / source
        if not source_path.exists():
            _log_warning(f"Passthrough source not found: {source}")
            continue

        _copy_path(source_path, target)
        written.append(target)
        _log_debug(f"Copied {source} -> {destination}")

    return written
