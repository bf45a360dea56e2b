"""
Rendering Context

Responsibilities:
- Checks the external rendering tool is installed
- Finds graph description files in a directory
- Renders each file to a document next to its source
- Reports per-file success and failure

Owns: renderer invocation, output file naming, rendering logs
Never: Interprets or modifies graph descriptions
"""

from dotbatch.contexts.rendering.converter import BatchResult, convert_directory, find_input_files
from dotbatch.contexts.rendering.exceptions import (
    BatchConversionError,
    InputDirectoryError,
    NoInputFilesError,
    RendererNotFoundError,
)
from dotbatch.contexts.rendering.renderer import (
    GraphRenderer,
    GraphvizRenderer,
    RenderResult,
    derive_output_path,
)

__all__ = [
    "BatchConversionError",
    "BatchResult",
    "GraphRenderer",
    "GraphvizRenderer",
    "InputDirectoryError",
    "NoInputFilesError",
    "RenderResult",
    "RendererNotFoundError",
    "convert_directory",
    "derive_output_path",
    "find_input_files",
]
