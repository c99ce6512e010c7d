"""Core geometric types for outline representation.

This module defines the fundamental geometric types used throughout pathfit:
- Point: A 2D point
- SegmentKind: Enum for the drawing command a segment encodes
- Segment: A single path segment (move, line, quadratic, cubic, close)
- Outline: An immutable sequence of segments forming one or more contours

Outlines speak the fontTools pen protocol, so any fontTools pen (bounds,
SVG, recording, transform) can consume them via ``Outline.draw``.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fontTools.misc.transform import Offset, Scale, Transform
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen

from pathfit.domain.rect import Rect


class SegmentKind(str, Enum):
    """Drawing command encoded by a segment.

    - MOVE: Start a new contour at a point
    - LINE: Straight line to a point
    - QUAD: Quadratic Bezier (one control point, then the end point)
    - CUBIC: Cubic Bezier (two control points, then the end point)
    - CLOSE: Close the current contour back to its start
    """

    MOVE = "move"
    LINE = "line"
    QUAD = "quad"
    CUBIC = "cubic"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, pt: tuple[float, float]) -> "Point":
        """Build a point from an (x, y) pair."""
        return cls(float(pt[0]), float(pt[1]))


@dataclass(frozen=True, slots=True)
class Segment:
    """A single path segment.

    The points of a segment are everything the drawing command needs after
    the current point: the end point for MOVE/LINE, control + end for QUAD,
    two controls + end for CUBIC, nothing for CLOSE.

    Attributes:
        kind: Drawing command
        points: Points consumed by the command
    """

    kind: SegmentKind
    points: tuple[Point, ...] = ()

    def transformed(self, transformation: Transform) -> "Segment":
        """Return a copy with every point mapped through ``transformation``."""
        return Segment(
            kind=self.kind,
            points=tuple(
                Point.from_tuple(transformation.transformPoint(p.to_tuple()))
                for p in self.points
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with kind and points fields
        """
        return {
            "kind": self.kind.value,
            "points": [list(p.to_tuple()) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with kind and points fields

        Returns:
            Segment instance
        """
        return cls(
            kind=SegmentKind(data["kind"]),
            points=tuple(Point.from_tuple(p) for p in data.get("points", [])),
        )


@dataclass(frozen=True)
class Outline:
    """An ordered sequence of planar path segments.

    An outline is a value: every transformation returns a new outline and the
    segment structure (kinds, contour count, control points per segment) is
    carried over unchanged. The bounding rectangle is recomputed on each call.

    Attributes:
        segments: Segments in drawing order
    """

    segments: tuple[Segment, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def is_empty(self) -> bool:
        """Check if the outline has no segments."""
        return len(self.segments) == 0

    @property
    def contour_count(self) -> int:
        """Number of contours (one per MOVE segment)."""
        return sum(1 for s in self.segments if s.kind is SegmentKind.MOVE)

    @property
    def point_count(self) -> int:
        """Total number of on- and off-curve points."""
        return sum(len(s.points) for s in self.segments)

    def contours(self) -> list[tuple[Segment, ...]]:
        """Split the outline into contours, each starting with a MOVE.

        Returns:
            List of segment tuples, one per contour
        """
        contours: list[tuple[Segment, ...]] = []
        current: list[Segment] = []
        for segment in self.segments:
            if segment.kind is SegmentKind.MOVE and current:
                contours.append(tuple(current))
                current = []
            current.append(segment)
        if current:
            contours.append(tuple(current))
        return contours

    def draw(self, pen: AbstractPen) -> None:
        """Replay the outline into a fontTools pen.

        Open contours are terminated with ``endPath``.

        Args:
            pen: Any object implementing the fontTools pen protocol
        """
        open_contour = False
        for segment in self.segments:
            pts = [p.to_tuple() for p in segment.points]
            if segment.kind is SegmentKind.MOVE:
                if open_contour:
                    pen.endPath()
                pen.moveTo(pts[0])
                open_contour = True
            elif segment.kind is SegmentKind.LINE:
                pen.lineTo(pts[0])
            elif segment.kind is SegmentKind.QUAD:
                pen.qCurveTo(*pts)
            elif segment.kind is SegmentKind.CUBIC:
                pen.curveTo(*pts)
            elif segment.kind is SegmentKind.CLOSE:
                pen.closePath()
                open_contour = False
        if open_contour:
            pen.endPath()

    def bounding_rect(self) -> Rect:
        """Calculate the tight bounding rectangle of the outline.

        Curve extrema are included, off-curve control points are not.
        An empty outline has a zero rectangle at the origin.

        Returns:
            Axis-aligned bounding rectangle
        """
        pen = BoundsPen(None)
        self.draw(pen)
        if pen.bounds is None:
            return Rect.zero()
        return Rect.from_bounds(*pen.bounds)

    def transform(self, transformation: Transform) -> "Outline":
        """Apply an affine transformation to every point.

        Args:
            transformation: fontTools affine transform

        Returns:
            New outline with the same segment structure
        """
        return Outline(tuple(s.transformed(transformation) for s in self.segments))

    def scaled(self, factor: float) -> "Outline":
        """Scale uniformly about the origin."""
        return self.transform(Scale(factor))

    def offset_by(self, dx: float, dy: float) -> "Outline":
        """Translate rigidly by (dx, dy)."""
        return self.transform(Offset(dx, dy))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the outline
        """
        return {"segments": [s.to_dict() for s in self.segments]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            Outline instance
        """
        return cls(tuple(Segment.from_dict(s) for s in data["segments"]))

    @classmethod
    def from_polylines(
        cls,
        polylines: list[list[tuple[float, float]]],
        closed: bool = True,
    ) -> "Outline":
        """Build an outline of straight-line contours.

        Args:
            polylines: One list of (x, y) vertices per contour
            closed: Whether to close each contour

        Returns:
            Outline made of MOVE/LINE(/CLOSE) segments
        """
        segments: list[Segment] = []
        for vertices in polylines:
            if not vertices:
                continue
            segments.append(Segment(SegmentKind.MOVE, (Point.from_tuple(vertices[0]),)))
            segments.extend(
                Segment(SegmentKind.LINE, (Point.from_tuple(v),)) for v in vertices[1:]
            )
            if closed:
                segments.append(Segment(SegmentKind.CLOSE))
        return cls(tuple(segments))
