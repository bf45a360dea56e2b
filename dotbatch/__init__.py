"""
dotbatch - batch rendering of Graphviz graph descriptions

Converts every graph description file in a directory into a rendered document
by invoking an external layout tool (Graphviz ``dot``) once per file.

Architecture:
- Rendering Context: renderer backends, batch conversion, rendering logs
- Utils: logger setup and timestamp helpers shared across the package
"""

__version__ = "0.1.0"
