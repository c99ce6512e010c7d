"""Core algorithms for pathfit.

This module contains the core algorithms for:

- Fitting (scale-to-fit, anchor alignment, policy dispatch)
- Stroke expansion (centerline + style -> filled outline)
- Shapes combining a path, a stroke style and a fit policy
- Preview rendering orchestration

The fitter and stroker are:
- Stateless (safe to share across threads)
- Pure (inputs are never modified)

Key functions:
- fit_outline: Fit an outline under a policy
- scale_factors: Per-axis ratios between reference rect and bounds
- alignment_offset: Translation for one of the nine anchors
- stroke_outline: Expand a centerline into a filled outline

Key classes:
- PathFitter: Applies fit policies
- Stroker: Expands centerlines
- StrokedShape: Path + style + policy, fitted on demand
- PreviewRenderer: Writes one preview per policy
"""

from pathfit.core.fitter import PathFitter, alignment_offset, fit_outline, scale_factors
from pathfit.core.renderer import PreviewRenderer, render_policy
from pathfit.core.shape import PICKER_PRESETS, StrokedShape, demo_path, demo_style
from pathfit.core.stroker import Stroker, flatten_outline, stroke_outline

__all__ = [
    # Fitting
    "PathFitter",
    "alignment_offset",
    "fit_outline",
    "scale_factors",
    # Stroking
    "Stroker",
    "flatten_outline",
    "stroke_outline",
    # Shapes
    "PICKER_PRESETS",
    "StrokedShape",
    "demo_path",
    "demo_style",
    # Rendering
    "PreviewRenderer",
    "render_policy",
]
