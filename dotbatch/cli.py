"""
Graph Rendering CLI

Renders every Graphviz file in a directory to a document, one file at a time.

Examples:\n

    dotbatch                          # Render ./*.dot to PDF

    dotbatch docs/graphs -T svg       # Render docs/graphs/*.dot to SVG

    dotbatch --suffix .gv --strict    # Render *.gv, exit 1 if any file fails
"""

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from dotbatch.contexts.rendering import (
    BatchConversionError,
    GraphvizRenderer,
    RenderResult,
    convert_directory,
)
from dotbatch.contexts.rendering.logger import setup_rendering_logger
from dotbatch.utils.timestamp import now

load_dotenv()


app = typer.Typer(
    help="Render Graphviz graph descriptions in a directory to documents",
    add_completion=False,
)


def print_status(result: RenderResult) -> None:
    """Print the one-line status for a rendered file."""
    line = f"{result.input_path.name} -> {result.output_path.name}"
    if result.success:
        typer.echo(f"Converted {line}")
    else:
        typer.secho(f"Failed {line}", fg=typer.colors.RED)
        for error in result.errors[:5]:
            typer.secho(f"  - {error}", fg=typer.colors.RED)


@app.command()
def convert(
    directory: Annotated[
        Path,
        typer.Argument(help="Directory holding the graph files (default: current directory)"),
    ] = Path("."),
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-T",
            help="Output format passed to the renderer",
            envvar="GRAPH_OUTPUT_FORMAT",
        ),
    ] = "pdf",
    input_suffix: Annotated[
        str,
        typer.Option("--suffix", "-s", help="Suffix of input files", envvar="GRAPH_INPUT_SUFFIX"),
    ] = ".dot",
    renderer: Annotated[
        str,
        typer.Option("--renderer", "-r", help="Rendering executable", envvar="GRAPH_RENDERER"),
    ] = "dot",
    timeout: Annotated[
        Optional[float],
        typer.Option(
            "--timeout",
            help="Per-file timeout in seconds",
            min=0,
            envvar="GRAPH_RENDER_TIMEOUT",
        ),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with status 1 if any file fails to render"),
    ] = False,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Stop at the first file that fails to render"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed rendering logs"),
    ] = False,
    log_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--log-dir",
            help="Write a session log under this directory",
            envvar="LOGS_PATH",
        ),
    ] = None,
):
    """
    Render every graph file in DIRECTORY next to its source.

    Each a.dot becomes a.<format>, overwriting any existing file of that name.
    Exits with status 1 if the renderer is missing, no input files exist, or
    --fail-fast stopped the run early.
    """
    session_dir = log_dir / f"render_{now()}" if log_dir is not None else None
    log_file = setup_rendering_logger(session_dir, renderer=renderer, verbose=verbose)

    try:
        batch = convert_directory(
            directory=directory,
            output_format=output_format.lstrip("."),
            input_suffix=input_suffix,
            renderer=GraphvizRenderer(executable=renderer, timeout_s=timeout),
            on_result=print_status,
            fail_fast=fail_fast,
            verbose=verbose,
        )
    except BatchConversionError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if batch.failed:
        typer.secho(
            f"{len(batch.failed)} of {len(batch.results)} files failed to render",
            fg=typer.colors.YELLOW,
            err=True,
        )
    if log_file is not None:
        typer.echo(f"Log: {log_file}", err=True)

    if batch.aborted:
        typer.secho("Stopped early: not every file was attempted", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    raise typer.Exit(code=1 if strict and not batch.success else 0)


if __name__ == "__main__":
    app()
