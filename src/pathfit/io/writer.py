"""SVG writer for saving fitted outlines.

This module provides the SvgWriter class for writing fitted outlines as
standalone SVG documents, with the reference rectangle as the canvas.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from pathfit.domain import FitPolicy, Outline, Rect, format_policy
from pathfit.exceptions import SvgWriteError
from pathfit.io.converter import outline_to_svg_path

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class SvgWriter:
    """Writes outlines as SVG documents.

    Example:
        writer = SvgWriter(Rect(0, 0, 400, 300))
        writer.write(outline, Path("preview.svg"))
    """

    def __init__(
        self,
        canvas: Rect,
        fill: str = "#e4572e",
        background: str | None = "#fffbe6",
        show_reference: bool = True,
    ) -> None:
        """Initialize the SVG writer.

        Args:
            canvas: Reference rectangle; becomes the document viewBox
            fill: Fill color of the outline
            background: Background color (None for transparent)
            show_reference: Draw the reference rectangle as a dashed frame
        """
        self._canvas = canvas
        self._fill = fill
        self._background = background
        self._show_reference = show_reference

    def to_element(self, outline: Outline) -> ET.Element:
        """Build the SVG document tree for ``outline``."""
        canvas = self._canvas
        root = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "viewBox": f"{canvas.x:g} {canvas.y:g} {canvas.width:g} {canvas.height:g}",
                "width": f"{canvas.width:g}",
                "height": f"{canvas.height:g}",
            },
        )
        frame = {
            "x": f"{canvas.x:g}",
            "y": f"{canvas.y:g}",
            "width": f"{canvas.width:g}",
            "height": f"{canvas.height:g}",
        }
        if self._background is not None:
            ET.SubElement(root, "rect", {**frame, "fill": self._background})
        if self._show_reference:
            ET.SubElement(
                root,
                "rect",
                {**frame, "fill": "none", "stroke": "#999999", "stroke-dasharray": "4 4"},
            )
        ET.SubElement(
            root,
            "path",
            {"d": outline_to_svg_path(outline), "fill": self._fill, "fill-rule": "nonzero"},
        )
        return root

    def to_string(self, outline: Outline) -> str:
        """Serialize ``outline`` as an SVG document string."""
        return ET.tostring(self.to_element(outline), encoding="unicode")

    def write(self, outline: Outline, output_path: Path) -> None:
        """Write ``outline`` to ``output_path``.

        Raises:
            SvgWriteError: If the file cannot be written
        """
        tree = ET.ElementTree(self.to_element(outline))
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            tree.write(output_path, encoding="utf-8", xml_declaration=True)
        except OSError as e:
            raise SvgWriteError(str(output_path), str(e)) from e

    @staticmethod
    def get_preview_path(output_dir: Path, stem: str, policy: FitPolicy) -> Path:
        """Generate the output path for a policy preview.

        Converts: (out, "curve", Align(CENTER)) -> out/curve-align-center.svg

        Args:
            output_dir: Directory for previews
            stem: File name prefix
            policy: Policy the preview shows

        Returns:
            Path of the preview file
        """
        slug = format_policy(policy).replace(":", "-")
        return output_dir / f"{stem}-{slug}.svg"
