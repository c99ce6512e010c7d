"""Stroke expansion: centerline path + stroke style -> filled outline.

The centerline is flattened into polylines (curves by recursive
subdivision), each polyline is buffered by half the line width with
shapely, and the pieces are unioned. The result is returned as an outline
of closed straight-line contours, exteriors counter-clockwise and holes
clockwise.

Closed contours are buffered as rings, so they get joins but no caps.
Dash patterns are not supported.
"""

import math

from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from pathfit.core._bezier import flatten_bezier
from pathfit.domain import LineCap, LineJoin, Outline, Point, SegmentKind, StrokeStyle
from pathfit.exceptions import StrokeError

_CAP_STYLES = {
    LineCap.BUTT: "flat",
    LineCap.ROUND: "round",
    LineCap.SQUARE: "square",
}

_JOIN_STYLES = {
    LineJoin.MITER: "mitre",
    LineJoin.ROUND: "round",
    LineJoin.BEVEL: "bevel",
}


def flatten_outline(
    outline: Outline, tolerance: float = 0.25
) -> list[tuple[list[tuple[float, float]], bool]]:
    """Flatten every contour of an outline into a polyline.

    Args:
        outline: Centerline outline, possibly with curves
        tolerance: Maximum deviation of the polyline from the curves

    Returns:
        List of (vertices, closed) pairs, one per contour
    """
    polylines: list[tuple[list[tuple[float, float]], bool]] = []

    for contour in outline.contours():
        vertices: list[Point] = []
        closed = False
        current: Point | None = None
        start: Point | None = None

        for segment in contour:
            if segment.kind is SegmentKind.MOVE:
                current = start = segment.points[0]
                vertices.append(current)
            elif current is None:
                # Contour without a leading MOVE starts at the origin
                current = start = Point(0.0, 0.0)
                vertices.append(current)

            if segment.kind is SegmentKind.LINE:
                current = segment.points[0]
                vertices.append(current)
            elif segment.kind is SegmentKind.QUAD:
                control, end = segment.points
                vertices.extend(flatten_bezier([current, control, end], tolerance)[1:])
                current = end
            elif segment.kind is SegmentKind.CUBIC:
                c1, c2, end = segment.points
                vertices.extend(flatten_bezier([current, c1, c2, end], tolerance)[1:])
                current = end
            elif segment.kind is SegmentKind.CLOSE:
                closed = True
                current = start

        polylines.append(([v.to_tuple() for v in vertices], closed))

    return polylines


def _polygons(geometry: BaseGeometry) -> list[Polygon]:
    if isinstance(geometry, Polygon):
        return [] if geometry.is_empty else [geometry]
    if isinstance(geometry, MultiPolygon):
        return [g for g in geometry.geoms if not g.is_empty]
    if hasattr(geometry, "geoms"):
        polygons: list[Polygon] = []
        for part in geometry.geoms:
            polygons.extend(_polygons(part))
        return polygons
    return []


class Stroker:
    """Expands centerline outlines into filled stroke outlines.

    Example:
        stroker = Stroker(tolerance=0.25)
        filled = stroker.stroke(path, StrokeStyle(line_width=24, line_cap=LineCap.ROUND))
    """

    def __init__(self, tolerance: float = 0.25, quad_segs: int = 16) -> None:
        """Initialize stroker.

        Args:
            tolerance: Curve flattening tolerance in path units
            quad_segs: Segments per quarter circle for round caps and joins
        """
        self.tolerance = tolerance
        self.quad_segs = quad_segs

    def stroke(self, path: Outline, style: StrokeStyle) -> Outline:
        """Expand ``path`` under ``style``.

        Args:
            path: Centerline outline
            style: Stroke parameters

        Returns:
            Filled outline; empty when the width is not positive or the
            path has no geometry

        Raises:
            StrokeError: If the style is invalid or buffering fails
        """
        if not math.isfinite(style.line_width):
            raise StrokeError(f"line width must be finite, got {style.line_width}")
        if not style.miter_limit >= 1.0:
            raise StrokeError(f"miter limit must be at least 1, got {style.miter_limit}")

        if style.line_width <= 0 or path.is_empty():
            return Outline()

        radius = style.line_width / 2
        cap_style = _CAP_STYLES[style.line_cap]
        join_style = _JOIN_STYLES[style.line_join]

        pieces: list[BaseGeometry] = []
        try:
            for vertices, closed in flatten_outline(path, self.tolerance):
                if len(vertices) == 1 or len(set(vertices)) == 1:
                    if style.line_cap is LineCap.BUTT:
                        continue
                    piece = ShapelyPoint(vertices[0]).buffer(
                        radius, quad_segs=self.quad_segs, cap_style=cap_style
                    )
                else:
                    if closed and vertices[0] != vertices[-1]:
                        vertices = vertices + [vertices[0]]
                    piece = LineString(vertices).buffer(
                        radius,
                        quad_segs=self.quad_segs,
                        cap_style=cap_style,
                        join_style=join_style,
                        mitre_limit=style.miter_limit,
                    )
                if not piece.is_empty:
                    pieces.append(piece)

            if not pieces:
                return Outline()

            merged = unary_union(pieces)
        except (GEOSException, ValueError) as e:
            raise StrokeError(str(e)) from e

        rings: list[list[tuple[float, float]]] = []
        for polygon in _polygons(merged):
            polygon = orient(polygon, sign=1.0)
            rings.append(list(polygon.exterior.coords)[:-1])
            rings.extend(list(interior.coords)[:-1] for interior in polygon.interiors)

        return Outline.from_polylines(rings, closed=True)


def stroke_outline(
    path: Outline,
    style: StrokeStyle,
    tolerance: float = 0.25,
    quad_segs: int = 16,
) -> Outline:
    """Expand a centerline outline into a filled stroke outline.

    Args:
        path: Centerline outline
        style: Stroke parameters
        tolerance: Curve flattening tolerance
        quad_segs: Segments per quarter circle for round geometry

    Returns:
        Filled outline
    """
    return Stroker(tolerance=tolerance, quad_segs=quad_segs).stroke(path, style)
