"""pathfit - Fit stroked vector paths into a reference rectangle.

pathfit expands a centerline path with a stroke style into a filled outline
and places that outline inside a target rectangle under one of four fit
policies: as-is, uniform scale-to-fit, align to an anchor, or scale and align.

Example:
    $ pathfit render --policy scale_and_align:center

This renders the demo curve into pathfit-scale_and_align-center.svg.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
