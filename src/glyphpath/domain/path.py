"""Path command types.

A Path is what the builder produces: an ordered list of the four command
kinds below, one ``MoveTo ... ClosePath`` subpath per contour. All
coordinates are integers.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: int
    y: int

    def to_svg(self) -> str:
        return f"M {self.x},{self.y}"

    def translated(self, dx: int, dy: int) -> "MoveTo":
        return MoveTo(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment to (x, y)."""

    x: int
    y: int

    def to_svg(self) -> str:
        return f"L {self.x},{self.y}"

    def translated(self, dx: int, dy: int) -> "LineTo":
        return LineTo(self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier segment with control (cx, cy) ending at (x, y)."""

    cx: int
    cy: int
    x: int
    y: int

    def to_svg(self) -> str:
        return f"Q {self.cx},{self.cy} {self.x},{self.y}"

    def translated(self, dx: int, dy: int) -> "QuadCurveTo":
        return QuadCurveTo(self.cx + dx, self.cy + dy, self.x + dx, self.y + dy)


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""

    def to_svg(self) -> str:
        return "Z"

    def translated(self, dx: int, dy: int) -> "ClosePath":  # noqa: ARG002
        return self


PathCommand = MoveTo | LineTo | QuadCurveTo | ClosePath


@dataclass
class Path:
    """An ordered sequence of path commands.

    Attributes:
        commands: Commands in drawing order
        note: Why the path is empty (None for non-empty paths)
    """

    commands: list[PathCommand] = field(default_factory=list)
    note: str | None = None

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def is_empty(self) -> bool:
        """Check if the path has no commands."""
        return not self.commands

    def append(self, command: PathCommand) -> None:
        self.commands.append(command)

    def subpaths(self) -> list[list[PathCommand]]:
        """Split the path into per-contour command lists.

        Each subpath ends with its ClosePath. Trailing commands without a
        ClosePath form a final, open subpath.

        Returns:
            List of command lists, one per contour
        """
        result: list[list[PathCommand]] = []
        current: list[PathCommand] = []
        for command in self.commands:
            current.append(command)
            if isinstance(command, ClosePath):
                result.append(current)
                current = []
        if current:
            result.append(current)
        return result

    def translated(self, dx: int, dy: int) -> "Path":
        """Return a copy with every coordinate shifted by (dx, dy)."""
        return Path(
            commands=[c.translated(dx, dy) for c in self.commands],
            note=self.note,
        )

    def count(self, kind: type) -> int:
        """Count commands of one kind."""
        return sum(1 for c in self.commands if isinstance(c, kind))

    def to_svg(self) -> str:
        """Render the path in SVG path-data syntax.

        Commands are separated by newlines. An empty path renders as an XML
        comment carrying its note, so it can still be embedded in a document.

        Returns:
            Path data string, or the no-op marker for an empty path
        """
        if self.is_empty():
            return f"<!-- {self.note or 'empty path'} -->"
        return "\n".join(c.to_svg() for c in self.commands)
