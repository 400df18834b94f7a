# geometry/__init__.py
from geometry import rectangles
from geometry.rectangle import IRectangle, Rectangle
from geometry.rectangles import intersect, union

__all__ = [
    "IRectangle",
    "Rectangle",
    "intersect",
    "union",
    "rectangles",
]
