"""
Integration tests for rendering context - tests real Graphviz rendering.
"""

import shutil

import pytest

from dotbatch.contexts.rendering import GraphvizRenderer, convert_directory

# Check if Graphviz dot is available
DOT_AVAILABLE = shutil.which("dot") is not None
skip_if_no_dot = pytest.mark.skipif(
    not DOT_AVAILABLE,
    reason="dot not installed - install Graphviz",
)

SIMPLE_GRAPH = "digraph G { a -> b; b -> c; }\n"


@pytest.mark.integration
@pytest.mark.graphviz
@skip_if_no_dot
def test_render_simple_graph(tmp_path):
    """Test a valid graph renders to a non-empty PDF."""
    dot_file = tmp_path / "simple.dot"
    dot_file.write_text(SIMPLE_GRAPH)

    result = GraphvizRenderer(executable="dot").render(dot_file, "pdf")

    assert result.success, f"Rendering failed with errors: {result.errors}"
    assert result.output_path == tmp_path / "simple.pdf"
    assert result.output_path.read_bytes().startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.graphviz
@skip_if_no_dot
def test_render_with_syntax_error(tmp_path):
    """Test that rendering properly detects and reports a malformed graph."""
    broken = tmp_path / "broken.dot"
    broken.write_text("digraph G { a -> ; \n")

    result = GraphvizRenderer(executable="dot").render(broken, "pdf")

    assert result.success is False
    assert result.returncode != 0
    assert len(result.errors) > 0


@pytest.mark.integration
@pytest.mark.graphviz
@skip_if_no_dot
@pytest.mark.parametrize("output_format", ["pdf", "svg", "png"])
def test_convert_directory_formats(tmp_path, output_format):
    """Test every input in a directory renders to the requested format."""
    for name in ["a", "b"]:
        (tmp_path / f"{name}.dot").write_text(SIMPLE_GRAPH)

    batch = convert_directory(tmp_path, output_format=output_format)

    assert batch.success, [r.errors for r in batch.failed]
    for name in ["a", "b"]:
        output = tmp_path / f"{name}.{output_format}"
        assert output.exists()
        assert output.stat().st_size > 0


@pytest.mark.integration
@pytest.mark.graphviz
@skip_if_no_dot
def test_convert_directory_overwrites_existing_output(tmp_path):
    """Test an existing output file is replaced by the fresh render."""
    (tmp_path / "a.dot").write_text(SIMPLE_GRAPH)
    (tmp_path / "a.svg").write_text("stale")

    batch = convert_directory(tmp_path, output_format="svg")

    assert batch.success
    assert "<svg" in (tmp_path / "a.svg").read_text()
