"""Internal Bezier curve flattening.

Helpers for the stroker. Not intended for public use.
"""

import math

from pathfit.domain import Point

# Recursion stops here even if the curve never gets flat (non-finite input)
_MAX_DEPTH = 16


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def split_bezier(points: list[Point]) -> tuple[list[Point], list[Point]]:
    """Split a Bezier curve of any degree at t=0.5.

    Uses De Casteljau's algorithm.

    Args:
        points: Control points, first and last on the curve

    Returns:
        Tuple (left, right) of control point lists sharing the curve midpoint
    """
    left = [points[0]]
    right = [points[-1]]
    level = list(points)
    while len(level) > 1:
        level = [_midpoint(a, b) for a, b in zip(level, level[1:])]
        left.append(level[0])
        right.append(level[-1])
    return left, right[::-1]


def _flatness(points: list[Point]) -> float:
    """Largest distance of an inner control point from the chord."""
    start, end = points[0], points[-1]
    dx = end.x - start.x
    dy = end.y - start.y
    chord = math.hypot(dx, dy)
    inner = points[1:-1]
    if chord == 0:
        return max(math.hypot(p.x - start.x, p.y - start.y) for p in inner)
    return max(abs((p.x - start.x) * dy - (p.y - start.y) * dx) / chord for p in inner)


def flatten_bezier(points: list[Point], tolerance: float, _depth: int = 0) -> list[Point]:
    """Flatten a quadratic or cubic Bezier curve using recursive subdivision.

    A curve lies inside the hull of its control points, so once every
    control point is within ``tolerance`` of the chord the chord is used.

    Args:
        points: Control points [p0, ..., pn]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve, both end points included
    """
    if not _flatness(points) > tolerance or _depth >= _MAX_DEPTH:
        return [points[0], points[-1]]

    left, right = split_bezier(points)
    head = flatten_bezier(left, tolerance, _depth + 1)
    tail = flatten_bezier(right, tolerance, _depth + 1)

    # Combine, avoiding duplicate midpoint
    return head[:-1] + tail
