"""Quadratic Bezier sampling.

Used by the path builder when curve commands are not wanted: each quadratic
segment is replaced by straight segments through points sampled at fixed
parameter increments.
"""

from collections.abc import Iterator

Point2D = tuple[float, float]

DEFAULT_STEP = 0.1


def quadratic_point(p0: Point2D, p1: Point2D, p2: Point2D, t: float) -> Point2D:
    """Evaluate a quadratic Bezier curve at parameter t.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        t: Curve parameter in [0, 1]

    Returns:
        The (x, y) point on the curve
    """
    u = 1.0 - t
    a = u * u
    b = 2.0 * u * t
    c = t * t
    return (
        a * p0[0] + b * p1[0] + c * p2[0],
        a * p0[1] + b * p1[1] + c * p2[1],
    )


def sample_quadratic(
    p0: Point2D,
    p1: Point2D,
    p2: Point2D,
    step: float = DEFAULT_STEP,
) -> Iterator[Point2D]:
    """Sample a quadratic Bezier curve at t = 0, step, 2*step, ... below 1.

    The start point (t = 0) is included and the end point (t = 1) is not;
    the caller draws to the end point with its next command.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        step: Parameter increment, expected in (0, 1]

    Yields:
        Sampled (x, y) points in increasing t order
    """
    if step <= 0:
        return

    i = 0
    t = 0.0
    while t < 1.0:
        yield quadratic_point(p0, p1, p2, t)
        i += 1
        t = i * step
