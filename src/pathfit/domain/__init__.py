"""Domain models for pathfit.

This module contains the value types the fitter and stroker work on.
All models are immutable frozen dataclasses with structural equality.

Key classes:
- Point: A 2D point
- Segment: A single drawing command with its points
- Outline: A sequence of segments forming one or more contours
- Rect: An axis-aligned rectangle (bounding or reference)
- Anchor: One of nine alignment positions
- AsIs, ScaleFit, Align, ScaleAndAlign: Fit policy cases
- StrokeStyle: Width, cap, join and miter limit of a stroke
"""

from pathfit.domain.outline import Outline, Point, Segment, SegmentKind
from pathfit.domain.policy import (
    Align,
    Anchor,
    AsIs,
    FitPolicy,
    ScaleAndAlign,
    ScaleFit,
    format_policy,
    parse_anchor,
    parse_policy,
)
from pathfit.domain.rect import Rect
from pathfit.domain.stroke import LineCap, LineJoin, StrokeStyle

__all__: list[str] = [
    # Enums
    "Anchor",
    "LineCap",
    "LineJoin",
    "SegmentKind",
    # Core types
    "Outline",
    "Point",
    "Rect",
    "Segment",
    "StrokeStyle",
    # Policies
    "Align",
    "AsIs",
    "FitPolicy",
    "ScaleAndAlign",
    "ScaleFit",
    "format_policy",
    "parse_anchor",
    "parse_policy",
]
