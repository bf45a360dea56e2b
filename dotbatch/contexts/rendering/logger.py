"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from dotbatch.utils.logger import setup_logger as _setup_logger
from dotbatch.utils.timestamp import format_duration

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Optional[Path] = None, renderer: str = "dot", verbose: bool = False
) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session (None for console only)
        renderer: Rendering executable, recorded in the provenance header
        verbose: Show DEBUG output on the console instead of warnings only

    Returns:
        Path to log file, or None when no log_dir was given
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        console_level="DEBUG" if verbose else "WARNING",
        extra_provenance={"Renderer": renderer},
    )


# Wrapper functions with automatic [render] prefix


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


# High-level rendering-specific logging helpers


def log_batch_start(directory: Path, file_count: int, output_format: str, renderer) -> None:
    """Log start of a batch with context."""
    _log_info(f"Rendering {file_count} file(s) in {directory} to {output_format}")
    _log_debug(f"  Renderer: {renderer!r}")


def log_render_result(result, verbose: bool = False) -> None:
    """
    Log the outcome of a single render with diagnostics.

    Args:
        result: RenderResult from GraphRenderer.render()
        verbose: Dump the tool's output even on success
    """
    name = result.input_path.name
    elapsed = format_duration(result.elapsed_s)

    if result.success:
        _log_success(f"{name} -> {result.output_path.name} ({elapsed})")
    else:
        _log_error(f"{name}: {len(result.errors)} errors ({elapsed})")
        for i, err in enumerate(result.errors[:5], 1):
            _log_error(f"  Error {i}: {err}")
        if len(result.errors) > 5:
            _log_error(f"  ... and {len(result.errors) - 5} more errors")

    # opt(raw=True) keeps multi-line tool output free of per-line prefixes
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDOUT ({name}):\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nRENDERER STDERR ({name}):\n{'=' * 80}\n{result.stderr}\n"
            )


def log_batch_summary(batch) -> None:
    """Log totals for a finished batch."""
    total = len(batch.results)
    if batch.failed:
        _log_warning(f"{len(batch.succeeded)}/{total} converted, {len(batch.failed)} failed")
    else:
        _log_info(f"{total}/{total} converted")
