# core/vector.py
import logging
import numbers
import operator
from typing import MutableSequence, Optional, Sequence
import numpy as np

from core import config
from core.errors import ComponentIndexError, ReadOnlyVectorError

logger = logging.getLogger(__name__)

_f32 = config.FLOAT_DTYPE


class IVector3:
    """
    Read-only view of a 3D vector. Implementations only have to provide the
    x, y and z accessors; everything else is derived from them in
    AbstractVector3. Any object with x, y and z attributes can be passed
    where another vector is expected.
    """
    @property
    def x(self) -> float:
        raise NotImplementedError("x must be implemented by subclasses.")

    @property
    def y(self) -> float:
        raise NotImplementedError("y must be implemented by subclasses.")

    @property
    def z(self) -> float:
        raise NotImplementedError("z must be implemented by subclasses.")


def _scalar_hash(value) -> int:
    # all NaNs share one hash
    if value != value:
        return 0
    return hash(float(value))


def _result(result: Optional["Vector3"]) -> "Vector3":
    return Vector3() if result is None else result


class AbstractVector3(IVector3):
    """
    Implements the vector arithmetic on top of the three accessors.

    Every operation that produces a vector takes an optional result. When it
    is given, the answer is written into it and it is returned, so call
    chains can run without allocating. When it is omitted a new Vector3 is
    returned. The vector itself is never modified.
    """
    # keeps numpy scalars from treating vectors as sequences in binary ops
    __array_ufunc__ = None

    def dot(self, other: IVector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: IVector3, result: Optional["Vector3"] = None) -> "Vector3":
        x, y, z = self.x, self.y, self.z
        ox, oy, oz = other.x, other.y, other.z
        return _result(result).set(y * oz - z * oy, z * ox - x * oz, x * oy - y * ox)

    def triple(self, b: IVector3, c: IVector3) -> float:
        """
        Scalar triple product self . (b x c), the signed volume of the
        parallelepiped spanned by the three vectors.
        """
        bx, by, bz = b.x, b.y, b.z
        cx, cy, cz = c.x, c.y, c.z
        return (self.x * (by * cz - bz * cy)
                + self.y * (bz * cx - bx * cz)
                + self.z * (bx * cy - by * cx))

    def negate(self, result: Optional["Vector3"] = None) -> "Vector3":
        return _result(result).set(-self.x, -self.y, -self.z)

    def normalize(self, result: Optional["Vector3"] = None) -> "Vector3":
        """
        Scales the vector to unit length. A zero-length vector is not
        special-cased: the result holds infinities or NaNs.
        """
        length = self.length()
        if length == 0:
            logger.debug("Normalizing zero-length vector %s", self)
        with np.errstate(divide="ignore", invalid="ignore"):
            return self.mult(_f32(1) / length, result)

    def angle(self, other: IVector3) -> float:
        """
        Angle in radians between this vector and other. The cosine is clamped
        to [-1, 1] so rounding on (anti-)parallel vectors cannot produce NaN.
        The result is NaN when either vector has zero length.
        """
        ox, oy, oz = other.x, other.y, other.z
        other_length = np.sqrt(_f32(ox * ox + oy * oy + oz * oz))
        with np.errstate(divide="ignore", invalid="ignore"):
            cosine = self.dot(other) / (self.length() * other_length)
            return np.arccos(np.clip(cosine, -1, 1))

    def length(self) -> float:
        return np.sqrt(self.length_squared())

    def length_squared(self) -> float:
        x, y, z = self.x, self.y, self.z
        return x * x + y * y + z * z

    def distance(self, other: IVector3) -> float:
        return np.sqrt(self.distance_squared(other))

    def distance_squared(self, other: IVector3) -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def manhattan_distance(self, other: IVector3) -> float:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def mult(self, v, result: Optional["Vector3"] = None) -> "Vector3":
        """
        Multiplies by a scalar, or componentwise when v is another vector.
        """
        if isinstance(v, numbers.Real):
            return _result(result).set(self.x * v, self.y * v, self.z * v)
        return _result(result).set(self.x * v.x, self.y * v.y, self.z * v.z)

    def add(self, other: IVector3, result: Optional["Vector3"] = None) -> "Vector3":
        return self.add_components(other.x, other.y, other.z, result)

    def subtract(self, other: IVector3, result: Optional["Vector3"] = None) -> "Vector3":
        return self.add_components(-other.x, -other.y, -other.z, result)

    def add_components(self, x: float, y: float, z: float,
                       result: Optional["Vector3"] = None) -> "Vector3":
        return _result(result).set(self.x + x, self.y + y, self.z + z)

    def add_scaled(self, other: IVector3, v: float,
                   result: Optional["Vector3"] = None) -> "Vector3":
        return _result(result).set(self.x + other.x * v,
                                   self.y + other.y * v,
                                   self.z + other.z * v)

    def lerp(self, other: IVector3, t: float, result: Optional["Vector3"] = None) -> "Vector3":
        """
        Linear interpolation self + t * (other - self). t is not restricted to
        [0, 1]; values outside it extrapolate along the line.
        """
        x, y, z = self.x, self.y, self.z
        return _result(result).set(x + t * (other.x - x),
                                   y + t * (other.y - y),
                                   z + t * (other.z - z))

    # Component access and export, always in (x, y, z) order.

    def get(self, idx: int) -> float:
        """Component by index; anything but the integers 0, 1, 2 is rejected."""
        if isinstance(idx, bool):
            raise ComponentIndexError(idx)
        try:
            idx = operator.index(idx)
        except TypeError:
            raise ComponentIndexError(idx) from None
        if idx == 0:
            return self.x
        if idx == 1:
            return self.y
        if idx == 2:
            return self.z
        raise ComponentIndexError(idx)

    __getitem__ = get

    def get_values(self, values: MutableSequence[float]) -> MutableSequence[float]:
        """Fills the first three slots of values and returns it."""
        values[0] = self.x
        values[1] = self.y
        values[2] = self.z
        return values

    def put(self, buf):
        """
        Appends the components to a growable buffer (FloatBuffer, list,
        array.array, ...) and returns the buffer.
        """
        if hasattr(buf, "extend"):
            buf.extend((self.x, self.y, self.z))
        else:
            buf.append(self.x)
            buf.append(self.y)
            buf.append(self.z)
        return buf

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=_f32)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    # Operator sugar over the allocating forms.

    def __add__(self, other: IVector3) -> "Vector3":
        return self.add(other)

    def __sub__(self, other: IVector3) -> "Vector3":
        return self.subtract(other)

    def __mul__(self, other) -> "Vector3":
        return self.mult(other)

    def __rmul__(self, other) -> "Vector3":
        if isinstance(other, numbers.Real):
            return self.mult(other)
        return NotImplemented

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __neg__(self) -> "Vector3":
        return self.negate()

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}, {self.z}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}, {self.z})"

    def __hash__(self) -> int:
        return _scalar_hash(self.x) ^ _scalar_hash(self.y) ^ _scalar_hash(self.z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AbstractVector3):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)


class Vector3(AbstractVector3):
    """
    Mutable 3D vector with single precision components.
    """
    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._x = _f32(x)
        self._y = _f32(y)
        self._z = _f32(z)

    @classmethod
    def copy_of(cls, other: IVector3) -> "Vector3":
        return cls(other.x, other.y, other.z)

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "Vector3":
        return cls(values[0], values[1], values[2])

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float):
        self._x = _f32(value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float):
        self._y = _f32(value)

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float):
        self._z = _f32(value)

    def set(self, x: float, y: float, z: float) -> "Vector3":
        self._x = _f32(x)
        self._y = _f32(y)
        self._z = _f32(z)
        return self

    def set_from(self, other: IVector3) -> "Vector3":
        return self.set(other.x, other.y, other.z)

    def set_from_values(self, values: Sequence[float]) -> "Vector3":
        return self.set(values[0], values[1], values[2])

    # In-place variants: the derived operation with this vector as result.

    def cross_local(self, other: IVector3) -> "Vector3":
        return self.cross(other, self)

    def negate_local(self) -> "Vector3":
        return self.negate(self)

    def normalize_local(self) -> "Vector3":
        return self.normalize(self)

    def mult_local(self, v) -> "Vector3":
        return self.mult(v, self)

    def add_local(self, other: IVector3) -> "Vector3":
        return self.add(other, self)

    def subtract_local(self, other: IVector3) -> "Vector3":
        return self.subtract(other, self)

    def add_scaled_local(self, other: IVector3, v: float) -> "Vector3":
        return self.add_scaled(other, v, self)

    def lerp_local(self, other: IVector3, t: float) -> "Vector3":
        return self.lerp(other, t, self)


class ImmutableVector3(AbstractVector3):
    """
    Vector whose components are fixed at construction. Used for the shared
    constants below; any attempt to assign to it raises ReadOnlyVectorError.
    """
    def __init__(self, x: float, y: float, z: float):
        object.__setattr__(self, "_xyz", (_f32(x), _f32(y), _f32(z)))

    @property
    def x(self) -> float:
        return self._xyz[0]

    @property
    def y(self) -> float:
        return self._xyz[1]

    @property
    def z(self) -> float:
        return self._xyz[2]

    def __setattr__(self, name, value):
        raise ReadOnlyVectorError(f"cannot assign {name!r} on a read-only vector")

    def __delattr__(self, name):
        raise ReadOnlyVectorError(f"cannot delete {name!r} on a read-only vector")


ZERO = ImmutableVector3(0, 0, 0)
ONE = ImmutableVector3(1, 1, 1)
UNIT_X = ImmutableVector3(1, 0, 0)
UNIT_Y = ImmutableVector3(0, 1, 0)
UNIT_Z = ImmutableVector3(0, 0, 1)

Vector3.ZERO = ZERO
Vector3.ONE = ONE
Vector3.UNIT_X = UNIT_X
Vector3.UNIT_Y = UNIT_Y
Vector3.UNIT_Z = UNIT_Z
