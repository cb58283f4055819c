"""Outline types for glyph contour data.

This module defines the read-only outline model handed to the path builder:
- OutlinePoint: A point in design units with its on-curve flag
- Outline: A flat point list split into contours by end indices

Contours are not stored as separate point lists. A contour is an inclusive
index range into ``Outline.points``, exactly as TrueType's ``endPtsOfContours``
describes it, so the builder can walk it with modulo arithmetic.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from glyphpath.exceptions import OutlineError

Number = int | float

# Bit 0 of a TrueType point flag marks an on-curve point
ON_CURVE_BIT = 0x01


@dataclass(frozen=True, slots=True)
class OutlinePoint:
    """A point of a glyph outline.

    Attributes:
        x: X coordinate in design units
        y: Y coordinate in design units
        on_curve: True for on-curve points, False for quadratic control points
    """

    x: Number
    y: Number
    on_curve: bool = True

    @classmethod
    def from_tag(cls, x: Number, y: Number, tag: int) -> "OutlinePoint":
        """Create a point from a raw TrueType tag byte.

        Args:
            x: X coordinate
            y: Y coordinate
            tag: Point flag byte; only bit 0 is significant

        Returns:
            OutlinePoint instance
        """
        return cls(x, y, bool(tag & ON_CURVE_BIT))

    def to_tuple(self) -> tuple[Number, Number]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


@dataclass(frozen=True)
class Outline:
    """A glyph outline: flat points plus contour end indices.

    Attributes:
        points: All outline points, contour after contour
        contour_ends: Inclusive index of the last point of each contour
    """

    points: tuple[OutlinePoint, ...] = ()
    contour_ends: tuple[int, ...] = ()

    @classmethod
    def from_arrays(
        cls,
        coordinates: Iterable[tuple[Number, Number]],
        tags: Iterable[int],
        contour_ends: Iterable[int],
    ) -> "Outline":
        """Build an outline from parser arrays.

        The arrays are copied into tuples; the caller keeps ownership of
        whatever buffers it passed in.

        Args:
            coordinates: (x, y) pairs for every point
            tags: Flag byte for every point
            contour_ends: End point index of each contour

        Returns:
            Outline instance
        """
        points = tuple(
            OutlinePoint.from_tag(x, y, tag)
            for (x, y), tag in zip(coordinates, tags, strict=True)
        )
        return cls(points=points, contour_ends=tuple(int(e) for e in contour_ends))

    @classmethod
    def from_contours(cls, contours: Sequence[Sequence[OutlinePoint]]) -> "Outline":
        """Build an outline from per-contour point lists."""
        points: list[OutlinePoint] = []
        ends: list[int] = []
        for contour in contours:
            points.extend(contour)
            ends.append(len(points) - 1)
        return cls(points=tuple(points), contour_ends=tuple(ends))

    @classmethod
    def concat(cls, *outlines: "Outline") -> "Outline":
        """Join outlines, keeping their contours in order.

        Args:
            outlines: Outlines to join

        Returns:
            Outline whose contours are those of each input, in input order
        """
        points: list[OutlinePoint] = []
        ends: list[int] = []
        for outline in outlines:
            base = len(points)
            points.extend(outline.points)
            ends.extend(base + end for end in outline.contour_ends)
        return cls(points=tuple(points), contour_ends=tuple(ends))

    @property
    def contour_count(self) -> int:
        return len(self.contour_ends)

    def is_empty(self) -> bool:
        """Check if the outline has nothing to draw.

        Glyphs such as space have no points and no contours.

        Returns:
            True if there are no points or no contours
        """
        return not self.points or not self.contour_ends

    def contour_ranges(self) -> Iterator[tuple[int, int]]:
        """Yield the inclusive (start, end) index range of each contour."""
        start = 0
        for end in self.contour_ends:
            yield start, end
            start = end + 1

    def contour_points(self, index: int) -> tuple[OutlinePoint, ...]:
        """Get the points of one contour.

        Args:
            index: Contour index

        Returns:
            Tuple of the contour's points
        """
        start = self.contour_ends[index - 1] + 1 if index > 0 else 0
        return self.points[start : self.contour_ends[index] + 1]

    def validate(self) -> None:
        """Check the contour ranges against the point list.

        Raises:
            OutlineError: If ranges are empty, unordered, or do not end at
                the last point
        """
        previous = -1
        for i, end in enumerate(self.contour_ends):
            if end <= previous:
                raise OutlineError(
                    f"Contour {i} ends at index {end}, not after previous end {previous}"
                )
            previous = end

        if self.contour_ends and previous != len(self.points) - 1:
            raise OutlineError(
                f"Last contour ends at index {previous} but outline has "
                f"{len(self.points)} points"
            )
