"""
Generic logger setup utilities.

Provides reusable loguru configuration with provenance tracking.
Context-specific wrappers should be defined in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Default level colors for console output
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"


def setup_logger(
    context_name: str,
    log_dir: Optional[Path] = None,
    console_level: str = "WARNING",
    extra_provenance: Optional[dict] = None,
    level_colors: Optional[dict] = None,
) -> Optional[Path]:
    """
    Configure loguru for a context with provenance tracking.

    Console output goes to stderr so it never interleaves with the status lines
    a command prints on stdout. When log_dir is given, a DEBUG-level file sink
    is added and the provenance header (script, command, working directory,
    Python version, plus any extra context) is written to it.

    Args:
        context_name: Context identifier (e.g., "render")
        log_dir: Directory for this logging session (None for console only)
        console_level: Minimum level shown on the console
        extra_provenance: Additional key-value pairs for provenance header
        level_colors: Override default level colors (e.g., {"INFO": "<cyan>"})

    Returns:
        Path to log file, or None when logging to the console only

    Example:
        from dotbatch.utils.logger import setup_logger

        log_file = setup_logger(
            context_name="render",
            log_dir=Path("outs/logs/render_20251114_123456"),
            extra_provenance={"Renderer": "dot"},
        )
    """
    # Remove default logger
    logger.remove()

    # Apply level colors (defaults + overrides)
    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    # File handler captures everything
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """
    Log execution provenance to current logger.

    Logs standard context (script, command, working directory, Python version)
    plus any additional context provided.

    Args:
        extra_context: Additional key-value pairs to log
    """
    logger.debug("=" * 80)
    logger.debug(f"Script: {sys.argv[0]}")
    logger.debug(f"Command: {' '.join(sys.argv)}")
    logger.debug(f"Working directory: {Path.cwd()}")
    logger.debug(f"Python: {sys.version.split()[0]}")

    if extra_context:
        for key, value in extra_context.items():
            logger.debug(f"{key}: {value}")

    logger.debug("=" * 80)
