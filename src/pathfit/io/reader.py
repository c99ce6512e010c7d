"""Path reader for loading centerline paths.

This module provides the PathReader class for loading centerline paths
from SVG documents or from plain files holding SVG path data.
"""

from pathlib import Path

from fontTools.svgLib import SVGPath

from pathfit.domain import Outline
from pathfit.exceptions import PathParseError
from pathfit.io.converter import OutlinePen, parse_svg_path


class PathReader:
    """Loads centerline paths into Outline values.

    ``.svg`` files are read with fontTools' SVG loader, which draws every
    shape element (with its transforms) into one outline. Any other
    file is taken to contain raw path data.

    Example:
        reader = PathReader(Path("curve.svg"))
        outline = reader.read()
    """

    def __init__(self, source_path: Path) -> None:
        """Initialize the path reader.

        Args:
            source_path: Path to an SVG document or a path-data text file
        """
        self._source_path = source_path

    @property
    def is_svg_document(self) -> bool:
        """Whether the source is an SVG document."""
        return self._source_path.suffix.lower() == ".svg"

    def read(self) -> Outline:
        """Read the source into an outline.

        Returns:
            Centerline outline

        Raises:
            FileNotFoundError: If the source does not exist
            PathParseError: If the content cannot be parsed
        """
        if not self._source_path.exists():
            raise FileNotFoundError(f"Path source not found: {self._source_path}")

        if not self.is_svg_document:
            return parse_svg_path(self._source_path.read_text(encoding="utf-8").strip())

        pen = OutlinePen()
        try:
            SVGPath(str(self._source_path)).draw(pen)
        except (ValueError, IndexError, AssertionError) as e:
            raise PathParseError(str(self._source_path), str(e)) from e
        except SyntaxError as e:
            # XML parse errors from malformed documents
            raise PathParseError(str(self._source_path), f"invalid SVG document: {e}") from e
        return pen.outline
