"""Path I/O layer for pathfit.

This module handles reading centerline paths and writing fitted outlines
using fontTools' SVG path parser and pens. It provides a clean abstraction
layer between fontTools and the domain models.

Key responsibilities:
- Parse SVG path data and SVG documents into outlines
- Serialize outlines as SVG path data
- Write preview SVG documents

Key classes:
- PathReader: Load centerline paths
- SvgWriter: Save fitted outlines
- OutlinePen: fontTools pen recording into an Outline
"""

from pathfit.io.converter import OutlinePen, outline_to_svg_path, parse_svg_path
from pathfit.io.reader import PathReader
from pathfit.io.writer import SvgWriter

__all__ = [
    "OutlinePen",
    "PathReader",
    "SvgWriter",
    "outline_to_svg_path",
    "parse_svg_path",
]
