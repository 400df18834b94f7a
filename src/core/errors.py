# core/errors.py


class GeometryError(Exception):
    """Base class for errors raised by the geometry primitives."""


class ComponentIndexError(GeometryError, IndexError):
    """
    Raised when a vector component is requested by an index outside 0..2.
    The offending index is kept on the exception.
    """
    def __init__(self, index):
        super().__init__(str(index))
        self.index = index


class ReadOnlyVectorError(GeometryError, AttributeError):
    """Raised when one of the shared constant vectors is mutated."""
