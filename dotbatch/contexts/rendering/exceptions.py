"""Custom exceptions for the rendering context."""

from pathlib import Path


class BatchConversionError(RuntimeError):
    """Base class for failures that abort a batch before any file is converted."""

    pass


class RendererNotFoundError(BatchConversionError):
    """
    Exception raised when the rendering executable cannot be resolved on PATH.

    Attributes:
        executable: Name or path of the executable that was looked up
    """

    def __init__(self, executable: str):
        self.executable = executable
        tool = "Graphviz" if Path(executable).name == "dot" else "Renderer"
        super().__init__(f"{tool} ({executable}) is not installed. Install it first.")


class NoInputFilesError(BatchConversionError):
    """
    Exception raised when the target directory holds no matching input files.

    Attributes:
        directory: Directory that was searched
        input_suffix: Suffix input files were expected to have (e.g., ".dot")
    """

    def __init__(self, directory: Path, input_suffix: str):
        self.directory = directory
        self.input_suffix = input_suffix
        super().__init__(f"No {input_suffix} files found.")


class InputDirectoryError(BatchConversionError):
    """
    Exception raised when the target directory does not exist or is not a directory.

    Attributes:
        directory: The offending path
    """

    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"Directory not found: {directory}")
