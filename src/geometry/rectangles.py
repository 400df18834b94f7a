# geometry/rectangles.py
"""
Set operations on axis-aligned integer rectangles.

Inputs only need min_x/min_y/max_x/max_y; the destination only needs
set_bounds(x, y, width, height). The destination's previous contents are
ignored and it is returned for chaining.
"""
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geometry.rectangle import IRectangle, Rectangle

logger = logging.getLogger(__name__)


def intersect(src1: "IRectangle", src2: "IRectangle", dst: "Rectangle") -> "Rectangle":
    """
    Writes the intersection of src1 and src2 into dst.

    Disjoint rectangles are not an error: dst ends up with a negative width
    and/or height, which is how "no intersection" is reported.
    """
    x1 = max(src1.min_x, src2.min_x)
    y1 = max(src1.min_y, src2.min_y)
    x2 = min(src1.max_x, src2.max_x)
    y2 = min(src1.max_y, src2.max_y)
    if x2 < x1 or y2 < y1:
        logger.debug("Rectangles %s and %s do not intersect", src1, src2)
    dst.set_bounds(x1, y1, x2 - x1, y2 - y1)
    return dst


def union(src1: "IRectangle", src2: "IRectangle", dst: "Rectangle") -> "Rectangle":
    """
    Writes the smallest rectangle covering both src1 and src2 into dst.
    """
    x1 = min(src1.min_x, src2.min_x)
    y1 = min(src1.min_y, src2.min_y)
    x2 = max(src1.max_x, src2.max_x)
    y2 = max(src1.max_y, src2.max_y)
    dst.set_bounds(x1, y1, x2 - x1, y2 - y1)
    return dst
