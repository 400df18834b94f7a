# core/buffer.py
from typing import Iterable
import numpy as np

from core import config


class FloatBuffer:
    """
    Append-only buffer of single precision scalars backed by a numpy array.
    The backing store doubles whenever it fills up, so appends are amortized
    O(1). Only the written prefix is visible through array().
    """
    def __init__(self, capacity: int = config.BUFFER_INITIAL_CAPACITY):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._data = np.empty(capacity, dtype=config.FLOAT_DTYPE)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of scalars written so far."""
        return self._position

    @property
    def capacity(self) -> int:
        return len(self._data)

    def _reserve(self, extra: int):
        needed = self._position + extra
        if needed <= len(self._data):
            return
        new_capacity = max(needed, 2 * len(self._data), 1)
        grown = np.empty(new_capacity, dtype=config.FLOAT_DTYPE)
        grown[:self._position] = self._data[:self._position]
        self._data = grown

    def put(self, value: float) -> "FloatBuffer":
        self._reserve(1)
        self._data[self._position] = value
        self._position += 1
        return self

    # list-style alias so the buffer can stand in wherever append() is used
    append = put

    def extend(self, values: Iterable[float]) -> "FloatBuffer":
        values = np.asarray(list(values), dtype=config.FLOAT_DTYPE)
        self._reserve(len(values))
        self._data[self._position:self._position + len(values)] = values
        self._position += len(values)
        return self

    def array(self) -> np.ndarray:
        """Returns a copy of the written scalars."""
        return self._data[:self._position].copy()

    def clear(self):
        self._position = 0

    def __len__(self) -> int:
        return self._position

    def __getitem__(self, idx):
        return self.array()[idx]

    def __repr__(self) -> str:
        return f"FloatBuffer({self.array().tolist()})"
