"""Converters between fontTools pens and domain models.

This module handles the conversion between fontTools drawing commands and
our Outline model, in both directions:

- OutlinePen records pen calls into an Outline
- parse_svg_path parses SVG path data into an Outline
- outline_to_svg_path serializes an Outline as SVG path data
"""

from fontTools.pens.basePen import BasePen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import parse_path

from pathfit.domain import Outline, Point, Segment, SegmentKind
from pathfit.exceptions import PathParseError


class OutlinePen(BasePen):
    """fontTools pen that records drawing commands as Outline segments.

    Quadratic splines with several off-curve points are decomposed into
    single quadratic segments by BasePen. Quadratics are kept as QUAD
    segments, not promoted to cubics.

    Example:
        pen = OutlinePen()
        parse_path("M0 0 L10 0 L10 10 Z", pen)
        outline = pen.outline
    """

    def __init__(self, glyphSet=None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self._segments: list[Segment] = []

    @property
    def outline(self) -> Outline:
        """Outline recorded so far."""
        return Outline(tuple(self._segments))

    def _add(self, kind: SegmentKind, *pts: tuple[float, float]) -> None:
        self._segments.append(Segment(kind, tuple(Point.from_tuple(p) for p in pts)))

    def _moveTo(self, pt):  # noqa: N802
        self._add(SegmentKind.MOVE, pt)

    def _lineTo(self, pt):  # noqa: N802
        self._add(SegmentKind.LINE, pt)

    def _curveToOne(self, pt1, pt2, pt3):  # noqa: N802
        self._add(SegmentKind.CUBIC, pt1, pt2, pt3)

    def _qCurveToOne(self, pt1, pt2):  # noqa: N802
        self._add(SegmentKind.QUAD, pt1, pt2)

    def _closePath(self):  # noqa: N802
        self._add(SegmentKind.CLOSE)

    def _endPath(self):  # noqa: N802
        pass


def parse_svg_path(path_data: str) -> Outline:
    """Parse SVG path data (the ``d`` attribute) into an Outline.

    Elliptical arcs are converted to cubic curves.

    Args:
        path_data: SVG path data string

    Returns:
        Outline with the parsed segments

    Raises:
        PathParseError: If the path data is malformed
    """
    pen = OutlinePen()
    try:
        parse_path(path_data, pen)
    except (ValueError, IndexError, AssertionError) as e:
        raise PathParseError(path_data, str(e) or type(e).__name__) from e
    return pen.outline


def _format_number(value: float) -> str:
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def outline_to_svg_path(outline: Outline) -> str:
    """Serialize an Outline as SVG path data.

    Args:
        outline: Outline to serialize

    Returns:
        SVG path data with absolute commands, coordinates rounded to 3 decimals
    """
    pen = SVGPathPen(None, ntos=_format_number)
    outline.draw(pen)
    return pen.getCommands()
