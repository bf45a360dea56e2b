"""
Graph Rendering Module

Wraps the external layout tool (Graphviz dot) behind a small renderer interface
so the batch converter never shells out directly.
"""

import os
import shutil
import subprocess
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from loguru import logger

load_dotenv()


def _env_timeout(name: str = "GRAPH_RENDER_TIMEOUT") -> Optional[float]:
    """Read a timeout in seconds from the environment; unset or invalid means no timeout."""
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not a number of seconds")
        return None


GRAPH_RENDERER = os.getenv("GRAPH_RENDERER", "dot")
GRAPH_RENDER_TIMEOUT = _env_timeout()


@dataclass
class RenderResult:
    """
    Result of rendering a single graph file.

    Attributes:
        success: Whether the tool exited cleanly and the output file exists
        input_path: Graph description that was rendered
        output_path: Path the rendered document was written to (or should have been)
        returncode: Exit status of the tool (None if it never finished)
        stdout: Standard output from the tool
        stderr: Standard error from the tool
        errors: Human-readable failure reasons
        elapsed_s: Wall-clock time spent on this file
    """

    success: bool
    input_path: Path
    output_path: Path
    returncode: Optional[int] = None
    stdout: str = ""
    stderr: str = ""
    errors: List[str] = field(default_factory=list)
    elapsed_s: float = 0.0


def derive_output_path(
    input_path: Path, output_format: str, input_suffix: Optional[str] = None
) -> Path:
    """
    Swap the input suffix for the output format, keeping the same directory.

    graph1.dot + "pdf" -> graph1.pdf. When input_suffix is given and the name
    ends with it, that whole suffix is stripped (x_graph.dot with suffix
    "_graph.dot" -> x.pdf); otherwise only the final extension is replaced.
    """
    input_path = Path(input_path)
    if input_suffix and input_path.name.endswith(input_suffix):
        base = input_path.name[: -len(input_suffix)]
        return input_path.with_name(f"{base}.{output_format}")
    return input_path.with_suffix(f".{output_format}")


class GraphRenderer(ABC):
    """
    Interface for anything that turns a graph description into a document.

    Implementations must be synchronous: render() returns only once the
    output file is written or the attempt has failed.
    """

    executable: str

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the backend can be invoked at all."""
        raise NotImplementedError

    @abstractmethod
    def render(
        self, input_path: Path, output_format: str, input_suffix: Optional[str] = None
    ) -> RenderResult:
        """Render input_path to derive_output_path(input_path, output_format, input_suffix)."""
        raise NotImplementedError


class GraphvizRenderer(GraphRenderer):
    """Renders graphs by running `<executable> -T<format> <input> -o <output>`."""

    def __init__(
        self,
        executable: str = GRAPH_RENDERER,
        timeout_s: Optional[float] = GRAPH_RENDER_TIMEOUT,
    ):
        self.executable = executable
        self.timeout_s = timeout_s

    def __repr__(self) -> str:
        return f"GraphvizRenderer(executable={self.executable!r}, timeout_s={self.timeout_s!r})"

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def build_command(self, input_path: Path, output_path: Path, output_format: str) -> List[str]:
        return [self.executable, f"-T{output_format}", str(input_path), "-o", str(output_path)]

    def render(
        self, input_path: Path, output_format: str, input_suffix: Optional[str] = None
    ) -> RenderResult:
        input_path = Path(input_path)
        output_path = derive_output_path(input_path, output_format, input_suffix)

        if output_path.resolve() == input_path.resolve():
            return RenderResult(
                success=False,
                input_path=input_path,
                output_path=output_path,
                errors=[f"Output {output_path.name} would overwrite its input file"],
            )

        cmd = self.build_command(input_path, output_path, output_format)
        start_time = time.time()

        try:
            # Clear any previous output so a leftover file can't mask a failed run
            if output_path.exists() or output_path.is_symlink():
                output_path.unlink()

            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_s,
            )
        except subprocess.TimeoutExpired as e:
            return RenderResult(
                success=False,
                input_path=input_path,
                output_path=output_path,
                stdout=_as_text(e.stdout),
                stderr=_as_text(e.stderr),
                errors=[f"{self.executable} timed out after {self.timeout_s}s"],
                elapsed_s=time.time() - start_time,
            )
        except OSError as e:
            return RenderResult(
                success=False,
                input_path=input_path,
                output_path=output_path,
                errors=[str(e)],
                elapsed_s=time.time() - start_time,
            )

        elapsed_s = time.time() - start_time
        errors = []

        if proc.returncode != 0:
            errors = [line.strip() for line in proc.stderr.splitlines() if line.strip()]
            if not errors:
                errors.append(f"{self.executable} exited with status {proc.returncode}")
        elif not output_path.exists():
            errors.append("Output file was not generated")

        return RenderResult(
            success=not errors,
            input_path=input_path,
            output_path=output_path,
            returncode=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
            errors=errors,
            elapsed_s=elapsed_s,
        )


def _as_text(output) -> str:
    # TimeoutExpired carries bytes even when text=True was requested
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace")
    return output
