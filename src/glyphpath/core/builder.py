"""Outline to path conversion.

Walks every contour of an outline cyclically and emits path commands. Each
point is classified together with the one or two points after it:

    this    next    nextnext    emitted
    ----    ----    --------    -------------------------------------------
    off     off     -           this becomes midpoint(this, next), on-curve
    on      off     on          curve to nextnext, controlled by next
    on      off     off         curve to midpoint(next, nextnext)
    on      on      -           line to next
    off     on      -           nothing (this was a control point)

The first rule runs before the others, so a synthesized midpoint can start a
curve in the same iteration. Classification never looks behind, which means
each control point is consumed exactly once, by the iteration in which it is
``next``.

All coordinates are truncated toward zero after the offset is applied.
"""

import math

from structlog.typing import BindableLogger

from glyphpath.core.tessellator import DEFAULT_STEP, sample_quadratic
from glyphpath.domain.outline import Outline
from glyphpath.domain.path import ClosePath, LineTo, MoveTo, Path, QuadCurveTo
from glyphpath.utils.logging import null_logger

NO_POINTS_NOTE = "font had 0 points"
NO_CONTOURS_NOTE = "font had 0 contours"


def _halve(total: int) -> int:
    """Integer division by two, truncating toward zero."""
    half = abs(total) // 2
    return half if total >= 0 else -half


def midpoint(ax: int, ay: int, bx: int, by: int) -> tuple[int, int]:
    """Integer midpoint of two points, truncated toward zero.

    Args:
        ax: X coordinate of the first point
        ay: Y coordinate of the first point
        bx: X coordinate of the second point
        by: Y coordinate of the second point

    Returns:
        (x, y) of the synthesized on-curve point
    """
    return _halve(ax + bx), _halve(ay + by)


def _emit_curve(
    path: Path,
    start: tuple[int, int],
    control: tuple[int, int],
    end: tuple[int, int],
    emit_curves: bool,
    step: float,
) -> None:
    if emit_curves:
        path.append(QuadCurveTo(control[0], control[1], end[0], end[1]))
        return

    for sx, sy in sample_quadratic(start, control, end, step):
        path.append(LineTo(math.trunc(sx), math.trunc(sy)))


def build_path(
    outline: Outline,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    emit_curves: bool = True,
    *,
    step: float = DEFAULT_STEP,
    logger: BindableLogger | None = None,
) -> Path:
    """Convert an outline to path commands.

    Contours are converted independently and concatenated in order, each as
    ``MoveTo ... ClosePath``. The first command of a contour moves to its
    first point even when that point is off-curve; only a leading pair of
    off-curve points is corrected, by an extra MoveTo to their midpoint.

    The outline's contour ranges are not validated here. Outlines built by
    the font reader are validated on construction.

    Args:
        outline: Outline to convert
        offset_x: Horizontal translation applied before truncation
        offset_y: Vertical translation applied before truncation
        emit_curves: Emit QuadCurveTo commands; if False, each curve is
            replaced by LineTo commands through sampled curve points
        step: Parameter increment for curve sampling
        logger: Debug sink; events are discarded if None

    Returns:
        A new Path. For an outline with no points or no contours the path is
        empty and carries a note saying which.
    """
    log = logger if logger is not None else null_logger()

    if not outline.points:
        log.debug("Empty outline", reason=NO_POINTS_NOTE)
        return Path(note=NO_POINTS_NOTE)
    if not outline.contour_ends:
        log.debug("Empty outline", reason=NO_CONTOURS_NOTE)
        return Path(note=NO_CONTOURS_NOTE)

    points = outline.points
    path = Path()

    for contour_idx, (start, end) in enumerate(outline.contour_ranges()):
        offset = start
        npts = end - start + 1
        log.debug("Contour start", contour=contour_idx, start=start, end=end, points=npts)

        first = points[offset]
        path.append(MoveTo(math.trunc(first.x + offset_x), math.trunc(first.y + offset_y)))

        for j in range(npts):
            this = points[offset + j % npts]
            nxt = points[offset + (j + 1) % npts]
            nextnext = points[offset + (j + 2) % npts]

            x = math.trunc(this.x + offset_x)
            y = math.trunc(this.y + offset_y)
            nx = math.trunc(nxt.x + offset_x)
            ny = math.trunc(nxt.y + offset_y)
            nnx = math.trunc(nextnext.x + offset_x)
            nny = math.trunc(nextnext.y + offset_y)

            this_on = this.on_curve
            next_on = nxt.on_curve
            nextnext_on = nextnext.on_curve

            if not this_on and not next_on:
                x, y = midpoint(x, y, nx, ny)
                this_on = True
                log.debug("Synthesized on-curve point", index=offset + j, x=x, y=y)
                if j == 0:
                    path.append(MoveTo(x, y))

            if this_on and not next_on and nextnext_on:
                _emit_curve(path, (x, y), (nx, ny), (nnx, nny), emit_curves, step)
                log.debug("Curve", index=offset + j, control=(nx, ny), end=(nnx, nny))
            elif this_on and not next_on and not nextnext_on:
                nnx, nny = midpoint(nx, ny, nnx, nny)
                _emit_curve(path, (x, y), (nx, ny), (nnx, nny), emit_curves, step)
                log.debug("Curve to midpoint", index=offset + j, control=(nx, ny), end=(nnx, nny))
            elif this_on and next_on:
                path.append(LineTo(nx, ny))
                log.debug("Line", index=offset + j, end=(nx, ny))
            else:
                log.debug("Control point skipped", index=offset + j)

        path.append(ClosePath())

    return path


def outline_to_svg(
    outline: Outline,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    emit_curves: bool = True,
    *,
    step: float = DEFAULT_STEP,
    logger: BindableLogger | None = None,
) -> str:
    """Convert an outline straight to SVG path data.

    Returns:
        Path data string, or the no-op marker for an empty outline
    """
    return build_path(
        outline, offset_x, offset_y, emit_curves, step=step, logger=logger
    ).to_svg()
