"""Tests for path I/O: SVG path parsing, reading and writing."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from pathfit.domain import Align, Anchor, AsIs, Outline, Rect, ScaleAndAlign, SegmentKind
from pathfit.exceptions import PathParseError, SvgWriteError
from pathfit.io import OutlinePen, PathReader, SvgWriter, outline_to_svg_path, parse_svg_path

SVG_NS = "{http://www.w3.org/2000/svg}"


class TestParseSvgPath:
    """Tests for SVG path data parsing."""

    def test_parse_commands(self) -> None:
        """Test absolute move, line, cubic and close commands."""
        outline = parse_svg_path("M0 0 L100 0 C120 10 120 40 100 50 L0 0 Z")
        assert [s.kind for s in outline] == [
            SegmentKind.MOVE,
            SegmentKind.LINE,
            SegmentKind.CUBIC,
            SegmentKind.LINE,
            SegmentKind.CLOSE,
        ]
        assert outline.segments[2].points[-1].to_tuple() == (100, 50)

    def test_close_adds_line_to_start(self) -> None:
        """Test Z away from the start point draws the closing line explicitly."""
        outline = parse_svg_path("M0 0 L100 0 C120 10 120 40 100 50 Z")
        assert [s.kind for s in outline][-2:] == [SegmentKind.LINE, SegmentKind.CLOSE]
        assert outline.segments[-2].points[0].to_tuple() == (0, 0)

    def test_parse_quadratic(self) -> None:
        """Test quadratics are kept as QUAD segments."""
        outline = parse_svg_path("M0 0 Q50 100 100 0")
        assert outline.segments[1].kind is SegmentKind.QUAD
        assert len(outline.segments[1].points) == 2

    def test_parse_relative(self) -> None:
        """Test relative commands resolve to absolute points."""
        outline = parse_svg_path("m10 10 l20 0 l0 20")
        assert outline.bounding_rect() == Rect(10, 10, 20, 20)

    def test_parse_open_and_closed(self) -> None:
        """Test contour split for mixed open and closed subpaths."""
        outline = parse_svg_path("M0 0 L10 0 L10 10 Z M20 0 L30 0")
        assert outline.contour_count == 2

    def test_parse_empty(self) -> None:
        assert parse_svg_path("").is_empty()

    @pytest.mark.parametrize("path_data", ["10 20", "M 10"])
    def test_parse_malformed(self, path_data: str) -> None:
        """Test malformed path data raises PathParseError."""
        with pytest.raises(PathParseError) as exc_info:
            parse_svg_path(path_data)
        assert exc_info.value.path_data == path_data


class TestOutlineToSvgPath:
    """Tests for SVG path data serialization."""

    def test_serialize_lines(self) -> None:
        """Test absolute commands with the close command kept."""
        path_data = outline_to_svg_path(parse_svg_path("M0 0 L100 0 L100 50 Z"))
        assert path_data.startswith("M0 0")
        assert path_data.endswith("Z")
        assert parse_svg_path(path_data).bounding_rect() == Rect(0, 0, 100, 50)

    def test_numbers_rounded(self) -> None:
        """Test coordinates are written with at most 3 decimals."""
        path_data = outline_to_svg_path(parse_svg_path("M0.12345 -0.0001 L1.5 2"))
        assert path_data.startswith("M0.123 0")
        assert "0.1234" not in path_data
        assert "-0" not in path_data

    def test_reparse_keeps_bounds(self) -> None:
        """Test serialized data parses back to the same geometry."""
        outline = parse_svg_path("M50 150 C150 250 250 50 350 150 Q360 160 370 150 Z")
        again = parse_svg_path(outline_to_svg_path(outline))
        assert again.bounding_rect() == outline.bounding_rect()
        assert [s.kind for s in again] == [s.kind for s in outline]

    def test_empty(self) -> None:
        assert outline_to_svg_path(Outline()) == ""


class TestOutlinePen:
    """Tests for recording pen calls."""

    def test_records_segments(self) -> None:
        pen = OutlinePen()
        pen.moveTo((0, 0))
        pen.lineTo((10, 0))
        pen.curveTo((15, 0), (20, 5), (20, 10))
        pen.closePath()
        assert [s.kind for s in pen.outline] == [
            SegmentKind.MOVE,
            SegmentKind.LINE,
            SegmentKind.CUBIC,
            SegmentKind.CLOSE,
        ]

    def test_replays_outline(self) -> None:
        """Test drawing an outline into the pen reproduces it."""
        outline = parse_svg_path("M0 0 L10 0 Q15 5 10 10 Z M20 20 L30 30")
        pen = OutlinePen()
        outline.draw(pen)
        assert pen.outline == outline


class TestPathReader:
    """Tests for reading centerlines from files."""

    def test_read_svg_document(self, tmp_path: Path) -> None:
        """Test paths in an SVG document are loaded."""
        source = tmp_path / "curve.svg"
        source.write_text(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 400 300">'
            '<path d="M50 150 C150 250 250 50 350 150"/>'
            "</svg>",
            encoding="utf-8",
        )
        outline = PathReader(source).read()
        assert [s.kind for s in outline] == [SegmentKind.MOVE, SegmentKind.CUBIC]
        assert outline.bounding_rect().min_x == pytest.approx(50)

    def test_read_path_data_file(self, tmp_path: Path) -> None:
        """Test non-SVG files hold raw path data."""
        source = tmp_path / "curve.txt"
        source.write_text("M0 0 L100 50\n", encoding="utf-8")
        assert PathReader(source).read().bounding_rect() == Rect(0, 0, 100, 50)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            PathReader(tmp_path / "missing.svg").read()

    def test_malformed_document(self, tmp_path: Path) -> None:
        """Test broken XML raises PathParseError."""
        source = tmp_path / "broken.svg"
        source.write_text("<svg><path d=", encoding="utf-8")
        with pytest.raises(PathParseError):
            PathReader(source).read()

    def test_malformed_path_data_file(self, tmp_path: Path) -> None:
        source = tmp_path / "bad.txt"
        source.write_text("10 20", encoding="utf-8")
        with pytest.raises(PathParseError):
            PathReader(source).read()


class TestSvgWriter:
    """Tests for writing preview documents."""

    @pytest.fixture
    def outline(self) -> Outline:
        return parse_svg_path("M10 10 L50 10 L50 40 Z")

    def test_document_structure(self, outline: Outline) -> None:
        """Test viewBox, background, reference frame and path."""
        writer = SvgWriter(Rect(0, 0, 400, 300))
        root = ET.fromstring(writer.to_string(outline))
        assert root.tag == f"{SVG_NS}svg"
        assert root.get("viewBox") == "0 0 400 300"
        rects = root.findall(f"{SVG_NS}rect")
        assert len(rects) == 2
        assert rects[1].get("stroke-dasharray") == "4 4"
        path = root.find(f"{SVG_NS}path")
        assert path is not None
        assert parse_svg_path(path.get("d")).bounding_rect() == outline.bounding_rect()
        assert path.get("fill-rule") == "nonzero"

    def test_transparent_without_frame(self, outline: Outline) -> None:
        writer = SvgWriter(Rect(0, 0, 400, 300), background=None, show_reference=False)
        root = ET.fromstring(writer.to_string(outline))
        assert root.findall(f"{SVG_NS}rect") == []

    def test_write_creates_directories(self, tmp_path: Path, outline: Outline) -> None:
        """Test output directories are created as needed."""
        output = tmp_path / "nested" / "preview.svg"
        SvgWriter(Rect(0, 0, 400, 300)).write(outline, output)
        assert output.exists()
        root = ET.parse(output).getroot()
        assert root.find(f"{SVG_NS}path").get("d") == outline_to_svg_path(outline)

    def test_write_error(self, tmp_path: Path, outline: Outline) -> None:
        """Test an unwritable target raises SvgWriteError."""
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(SvgWriteError):
            SvgWriter(Rect(0, 0, 400, 300)).write(outline, blocker / "preview.svg")

    @pytest.mark.parametrize(
        ("policy", "name"),
        [
            (AsIs(), "curve-as_is.svg"),
            (Align(Anchor.CENTER), "curve-align-center.svg"),
            (ScaleAndAlign(Anchor.TOP_LEADING), "curve-scale_and_align-top_leading.svg"),
        ],
    )
    def test_get_preview_path(self, policy, name: str) -> None:
        assert SvgWriter.get_preview_path(Path("out"), "curve", policy) == Path("out") / name
