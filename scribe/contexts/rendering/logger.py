"""
Rendering context logger.

Provides logging interface for the rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from scribe.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, input_dir: Path = None) -> Path:
    """
    Setup logger for the rendering context.

    Args:
        log_dir: Directory for this build session
        input_dir: Site input directory, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Input": input_dir} if input_dir else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_build_start(input_dir: Path, output_dir: Path, log_file: Path = None) -> None:
    """Log start of a site build with context."""
    _log_info(f"Starting build of {input_dir}")
    if log_file:
        _log_info(f"Log file: {log_file}")
    _log_debug(f"Output: {output_dir}")


def log_build_result(result, elapsed_time: float) -> None:
    """
    Log build result with summary counts.

    Args:
        result: BuildResult from build_site()
        elapsed_time: Time taken
    """
    if result.success:
        _log_success(
            f"Build succeeded ({elapsed_time:.2f}s): {result.items_loaded} item(s), "
            f"{result.series_count} series, {result.fragments_written} navigation fragment(s), "
            f"{len(result.copied)} passthrough copy(ies)"
        )
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
    else:
        _log_error(f"Build failed ({elapsed_time:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
