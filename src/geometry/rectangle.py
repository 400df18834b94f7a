# geometry/rectangle.py
from geometry import rectangles


class IRectangle:
    """
    Read-only view of an axis-aligned integer rectangle given by its origin
    (x, y) and its width and height. Subclasses provide the four fields;
    bounds and the set operations are derived from them.

    A rectangle with a non-positive width or height is empty. Intersecting
    two disjoint rectangles produces negative extents on purpose, so check
    is_empty() before using such a result as an area.
    """
    @property
    def x(self) -> int:
        raise NotImplementedError("x must be implemented by subclasses.")

    @property
    def y(self) -> int:
        raise NotImplementedError("y must be implemented by subclasses.")

    @property
    def width(self) -> int:
        raise NotImplementedError("width must be implemented by subclasses.")

    @property
    def height(self) -> int:
        raise NotImplementedError("height must be implemented by subclasses.")

    @property
    def min_x(self) -> int:
        return self.x

    @property
    def min_y(self) -> int:
        return self.y

    @property
    def max_x(self) -> int:
        return self.x + self.width

    @property
    def max_y(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: int, py: int) -> bool:
        """True if the point lies inside; the max edges are exclusive."""
        if self.is_empty():
            return False
        return self.min_x <= px < self.max_x and self.min_y <= py < self.max_y

    def intersects(self, other: "IRectangle") -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return (other.max_x > self.min_x and other.min_x < self.max_x and
                other.max_y > self.min_y and other.min_y < self.max_y)

    def intersection(self, other: "IRectangle") -> "Rectangle":
        return rectangles.intersect(self, other, Rectangle())

    def union(self, other: "IRectangle") -> "Rectangle":
        return rectangles.union(self, other, Rectangle())

    def __eq__(self, other) -> bool:
        if not isinstance(other, IRectangle):
            return NotImplemented
        return (self.x == other.x and self.y == other.y and
                self.width == other.width and self.height == other.height)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.width, self.height))

    def __str__(self) -> str:
        return f"{self.width}x{self.height}{self.x:+d}{self.y:+d}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.width}, {self.height})"


class Rectangle(IRectangle):
    """
    Mutable integer rectangle. Also the output type of intersect() and
    union(), which only ever call set_bounds() on it.
    """
    def __init__(self, x: int = 0, y: int = 0, width: int = 0, height: int = 0):
        self.set_bounds(x, y, width, height)

    @property
    def x(self) -> int:
        return self._x

    @x.setter
    def x(self, value: int):
        self._x = int(value)

    @property
    def y(self) -> int:
        return self._y

    @y.setter
    def y(self, value: int):
        self._y = int(value)

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int):
        self._width = int(value)

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int):
        self._height = int(value)

    def set_bounds(self, x: int, y: int, width: int, height: int) -> "Rectangle":
        self._x = int(x)
        self._y = int(y)
        self._width = int(width)
        self._height = int(height)
        return self

    def set_from(self, other: IRectangle) -> "Rectangle":
        return self.set_bounds(other.x, other.y, other.width, other.height)
