"""glyphpath - Convert TrueType glyph outlines to vector paths.

glyphpath reads the quadratic outline of each glyph (on-curve and off-curve
points grouped into closed contours) and turns it into move, line and
quadratic-curve path commands, or into line segments only when curves are
tessellated.

Example:
    $ glyphpath DejaVuSans.ttf "Hello" -o hello.svg

This writes hello.svg with one path per glyph, laid out left to right.
"""

__version__ = "0.1.0"
__author__ = "glyphpath contributors"

__all__ = ["__author__", "__version__"]
