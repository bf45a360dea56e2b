"""
Batch Conversion Module

Renders every graph description in a directory, one file at a time.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from dotenv import load_dotenv

from dotbatch.contexts.rendering.exceptions import (
    InputDirectoryError,
    NoInputFilesError,
    RendererNotFoundError,
)
from dotbatch.contexts.rendering.logger import (
    _log_debug,
    _log_warning,
    log_batch_start,
    log_batch_summary,
    log_render_result,
)
from dotbatch.contexts.rendering.renderer import GraphRenderer, GraphvizRenderer, RenderResult

load_dotenv()

GRAPH_INPUT_SUFFIX = os.getenv("GRAPH_INPUT_SUFFIX", ".dot")
GRAPH_OUTPUT_FORMAT = os.getenv("GRAPH_OUTPUT_FORMAT", "pdf")


@dataclass
class BatchResult:
    """
    Outcome of converting one directory.

    Attributes:
        directory: Directory whose files were converted
        output_format: Format every file was rendered to
        results: One RenderResult per input file, in conversion order
        aborted: Whether the batch stopped before attempting every input file
    """

    directory: Path
    output_format: str
    results: List[RenderResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def succeeded(self) -> List[RenderResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[RenderResult]:
        return [r for r in self.results if not r.success]

    @property
    def success(self) -> bool:
        return not self.failed


def find_input_files(directory: Path, input_suffix: str = GRAPH_INPUT_SUFFIX) -> List[Path]:
    """
    List graph description files directly inside directory.

    Mirrors shell globbing of `*<suffix>`: case-sensitive, hidden files
    skipped, subdirectories not entered. Sorted by name.

    Args:
        directory: Directory to search
        input_suffix: Required file suffix, including the dot (e.g., ".dot")

    Returns:
        Matching file paths
    """
    return sorted(
        path
        for path in Path(directory).iterdir()
        if path.name.endswith(input_suffix)
        and not path.name.startswith(".")
        and path.is_file()
    )


def convert_directory(
    directory: Optional[Path] = None,
    output_format: str = GRAPH_OUTPUT_FORMAT,
    input_suffix: str = GRAPH_INPUT_SUFFIX,
    renderer: Optional[GraphRenderer] = None,
    on_result: Optional[Callable[[RenderResult], None]] = None,
    fail_fast: bool = False,
    verbose: bool = False,
) -> BatchResult:
    """
    Render every input file in directory next to its source.

    Checks run in order and abort before any file is touched: the directory
    must exist, the renderer must be available, and at least one input file
    must be present. Files are then rendered sequentially; a failed file is
    logged and the batch moves on unless fail_fast is set, in which case
    the batch stops and is marked aborted.

    Args:
        directory: Directory to convert (default: current working directory)
        output_format: Renderer output format, also used as the output extension
        input_suffix: Suffix identifying input files
        renderer: Backend to render with (default: GraphvizRenderer())
        on_result: Called with each RenderResult right after the file is rendered
        fail_fast: Stop after the first failed file
        verbose: Log the renderer's output for successful files too

    Returns:
        BatchResult with one entry per attempted file

    Raises:
        InputDirectoryError: directory does not exist or is not a directory
        RendererNotFoundError: renderer.is_available() is false
        NoInputFilesError: no files in directory end with input_suffix
    """
    directory = Path.cwd() if directory is None else Path(directory)
    renderer = renderer if renderer is not None else GraphvizRenderer()

    if not directory.is_dir():
        raise InputDirectoryError(directory)

    if not renderer.is_available():
        raise RendererNotFoundError(renderer.executable)

    input_files = find_input_files(directory, input_suffix)
    if not input_files:
        raise NoInputFilesError(directory, input_suffix)

    log_batch_start(directory, len(input_files), output_format, renderer)
    batch = BatchResult(directory=directory, output_format=output_format)

    for input_path in input_files:
        _log_debug(f"Rendering {input_path.name}")
        result = renderer.render(input_path, output_format, input_suffix)
        batch.results.append(result)

        log_render_result(result, verbose=verbose)
        if on_result is not None:
            on_result(result)

        if fail_fast and not result.success:
            remaining = len(input_files) - len(batch.results)
            _log_warning(f"Stopping after failed render of {input_path.name} ({remaining} skipped)")
            batch.aborted = remaining > 0
            break

    log_batch_summary(batch)
    return batch
