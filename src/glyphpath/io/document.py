"""SVG document output.

This module wraps converted glyph paths in an SVG document using svgwrite,
with optional debug overlays showing the raw outline points.
"""

import math
from pathlib import Path as FilePath

import svgwrite
from svgwrite.container import Group

from glyphpath.config import DocumentConfig, Overlay, PathStyle
from glyphpath.core.layout import TextLayout
from glyphpath.domain.glyph import Glyph
from glyphpath.domain.outline import Outline
from glyphpath.domain.path import Path


class SvgDocument:
    """An SVG document holding glyph paths.

    All glyph content is placed in one group translated by ``origin`` so
    that outlines with negative coordinates (y is flipped, so everything
    above the baseline is negative) land inside the viewport.

    Example:
        doc = SvgDocument(width=1200, height=800, origin=(100, 900))
        doc.add_path(path)
        doc.save(Path("out.svg"))
    """

    def __init__(
        self,
        width: int,
        height: int,
        style: PathStyle | None = None,
        origin: tuple[float, float] = (0, 0),
    ) -> None:
        """Initialize the document.

        Args:
            width: Document width in px
            height: Document height in px
            style: Presentation attributes for glyph paths
            origin: Translation applied to all glyph content
        """
        self.width = width
        self.height = height
        self.style = style or PathStyle()
        self._drawing = svgwrite.Drawing(
            size=(f"{width}px", f"{height}px"),
            profile="full",
            debug=False,
        )
        self._content: Group = self._drawing.g(
            fill_rule="nonzero",
            transform=f"translate({origin[0]} {origin[1]})",
        )
        self._drawing.add(self._content)

    @property
    def drawing(self) -> svgwrite.Drawing:
        """Get the underlying svgwrite drawing."""
        return self._drawing

    def add_path(self, path: Path) -> None:
        """Add a glyph path.

        An empty path adds a group described by the path's note instead of
        a path element.

        Args:
            path: Path to add
        """
        if path.is_empty():
            placeholder = self._drawing.g(class_="empty-glyph")
            placeholder.set_desc(desc=path.note or "empty path")
            self._content.add(placeholder)
            return

        self._content.add(
            self._drawing.path(
                d=path.to_svg(),
                fill=self.style.fill,
                stroke=self.style.stroke,
                fill_opacity=self.style.fill_opacity,
                stroke_width=self.style.stroke_width,
            )
        )

    def add_border(self) -> None:
        """Draw a rectangle along the document edge."""
        self._drawing.add(
            self._drawing.rect(
                insert=(0, 0),
                size=(self.width - 1, self.height - 1),
                fill="none",
                stroke="black",
            )
        )

    def add_axes(self) -> None:
        """Draw dashed x and y axes through the content origin."""
        w, h = self.width, self.height
        self._content.add(
            self._drawing.path(
                d=f"M {-w},0 L {w},0 M 0,{-h} L 0,{h}",
                stroke="blue",
                stroke_dasharray="5,5",
                fill="none",
            )
        )

    def add_points(self, outline: Outline, offset_x: float = 0, offset_y: float = 0) -> None:
        """Draw every outline point as a circle.

        On-curve points are filled blue, control points are hollow. The first
        point of the outline is drawn larger. Between two consecutive control
        points a small dot marks the implicit on-curve midpoint.

        Args:
            outline: Outline whose points to draw
            offset_x: Horizontal placement of the glyph
            offset_y: Vertical placement of the glyph
        """
        group = self._drawing.g(class_="points")
        index = 0
        for start, end in outline.contour_ranges():
            count = end - start + 1
            for j in range(count):
                point = outline.points[start + j]
                following = outline.points[start + (j + 1) % count]
                x = math.trunc(point.x + offset_x)
                y = math.trunc(point.y + offset_y)

                if not point.on_curve and not following.on_curve:
                    nx = math.trunc(following.x + offset_x)
                    ny = math.trunc(following.y + offset_y)
                    group.add(
                        self._drawing.circle(
                            center=((x + nx) / 2, (y + ny) / 2),
                            r=2,
                            fill="blue",
                            stroke="black",
                        )
                    )

                group.add(
                    self._drawing.circle(
                        center=(x, y),
                        r=10 if index == 0 else 5,
                        fill="blue" if point.on_curve else "none",
                        stroke="black",
                    )
                )
                index += 1
        self._content.add(group)

    def add_point_lines(self, outline: Outline, offset_x: float = 0, offset_y: float = 0) -> None:
        """Draw straight segments between consecutive points of each contour.

        The closing segment of each contour is dashed.
        """
        group = self._drawing.g(class_="point-lines", fill="none", stroke="green")
        for start, end in outline.contour_ranges():
            count = end - start + 1
            for j in range(count):
                a = outline.points[start + j]
                b = outline.points[start + (j + 1) % count]
                line = self._drawing.line(
                    start=(math.trunc(a.x + offset_x), math.trunc(a.y + offset_y)),
                    end=(math.trunc(b.x + offset_x), math.trunc(b.y + offset_y)),
                )
                if j == count - 1:
                    line["stroke-dasharray"] = "3"
                group.add(line)
        self._content.add(group)

    def add_typography_box(self, glyph: Glyph, offset_x: float = 0, offset_y: float = 0) -> None:
        """Draw a glyph's advance box and left side bearing.

        The dashed box spans the advance width horizontally and the
        outline's vertical extent; a glyph without points gets a flat box on
        the baseline. A finer dashed line marks the left side bearing.

        Args:
            glyph: Glyph whose metrics to draw
            offset_x: Horizontal placement of the glyph
            offset_y: Vertical placement of the glyph
        """
        ys = [p.y for p in glyph.outline.points]
        x1 = math.trunc(offset_x)
        x2 = math.trunc(offset_x + glyph.metadata.advance_width)
        y1 = math.trunc(min(ys, default=0) + offset_y)
        y2 = math.trunc(max(ys, default=0) + offset_y)
        bearing = math.trunc(offset_x + glyph.metadata.left_side_bearing)

        group = self._drawing.g(class_="typography-box", fill="none", stroke="blue")
        group.add(
            self._drawing.path(
                d=f"M {x1},{y1} L {x2},{y1} L {x2},{y2} L {x1},{y2} Z",
                stroke_dasharray="10,16",
            )
        )
        group.add(
            self._drawing.line(
                start=(bearing, y1),
                end=(bearing, y2),
                stroke_dasharray="2,4",
            )
        )
        self._content.add(group)

    def add_labels(self, outline: Outline, offset_x: float = 0, offset_y: float = 0) -> None:
        """Label every point with its design-unit coordinates."""
        group = self._drawing.g(
            font_family="SVGFreeSansASCII,sans-serif",
            font_size=10,
            fill="darkgreen",
            stroke="none",
        )
        for point in outline.points:
            x = math.trunc(point.x + offset_x)
            y = math.trunc(point.y + offset_y)
            group.add(self._drawing.text(f"{point.x},{point.y}", insert=(x + 5, y - 5)))
        self._content.add(group)

    def tostring(self) -> str:
        """Serialize the document to an SVG string."""
        return self._drawing.tostring()

    def save(self, path: FilePath) -> None:
        """Write the document to a file.

        Args:
            path: Output file path
        """
        self._drawing.saveas(str(path), pretty=True)


def render_document(
    text_layout: TextLayout,
    bounding_box: tuple[int, int, int, int],
    config: DocumentConfig | None = None,
) -> SvgDocument:
    """Build an SVG document for a laid out message.

    The document is as wide as the message (or the font bounding box, if
    wider) and as tall as the font bounding box, plus the margin on every
    side.

    Args:
        text_layout: Converted glyphs with their positions
        bounding_box: Font bounding box (x_min, y_min, x_max, y_max)
        config: Document settings

    Returns:
        SvgDocument with one path per glyph and the requested overlays
    """
    config = config or DocumentConfig()
    x_min, y_min, x_max, y_max = bounding_box
    margin = config.margin

    width = math.ceil(max(x_max - x_min, text_layout.advance)) + 2 * margin
    height = (y_max - y_min) + 2 * margin
    doc = SvgDocument(
        width=width,
        height=height,
        style=config.style,
        origin=(margin - x_min, y_max + margin),
    )

    overlays = set(config.overlays)
    if Overlay.BORDER in overlays:
        doc.add_border()
    if Overlay.AXES in overlays:
        doc.add_axes()

    for placed in text_layout.glyphs:
        doc.add_path(placed.path)
        outline = placed.glyph.outline
        if Overlay.LINES in overlays:
            doc.add_point_lines(outline, placed.offset_x, placed.offset_y)
        if Overlay.POINTS in overlays:
            doc.add_points(outline, placed.offset_x, placed.offset_y)
        if Overlay.LABELS in overlays:
            doc.add_labels(outline, placed.offset_x, placed.offset_y)
        if Overlay.TYPOGRAPHY in overlays:
            doc.add_typography_box(placed.glyph, placed.offset_x, placed.offset_y)

    return doc
