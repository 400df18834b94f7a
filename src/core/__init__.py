# core/__init__.py
from core.buffer import FloatBuffer
from core.errors import ComponentIndexError, GeometryError, ReadOnlyVectorError
from core.vector import AbstractVector3, ImmutableVector3, IVector3, Vector3

__all__ = [
    "IVector3",
    "AbstractVector3",
    "Vector3",
    "ImmutableVector3",
    "FloatBuffer",
    "GeometryError",
    "ComponentIndexError",
    "ReadOnlyVectorError",
]
