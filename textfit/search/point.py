"""search/point.py — Immutable coordinate vector."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray


class Point:
    """A fixed-dimension point in parameter space.

    The coordinates are held in a private read-only ``float64`` array; every
    accessor that hands out a mutable array returns a fresh copy.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[float] | NDArray[np.float64]) -> None:
        arr = np.array(values, dtype=np.float64)
        arr.flags.writeable = False
        self._values = arr

    @property
    def dimensions(self) -> int:
        return int(self._values.shape[0])

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only view of the coordinates."""
        return self._values

    def get_values(self) -> NDArray[np.float64]:
        """Return a writable copy of the coordinates."""
        return self._values.copy()

    def replace(self, axis: int, value: float) -> Point:
        """Return a new point with coordinate *axis* set to *value*."""
        vals = self.get_values()
        vals[axis] = value
        return Point(vals)

    def __getitem__(self, axis: int) -> float:
        return float(self._values[axis])

    def __len__(self) -> int:
        return self.dimensions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0, which compare equal.
        return hash(tuple((self._values + 0.0).tolist()))

    def __str__(self) -> str:
        return ",".join(f"{v:g}" for v in self._values)

    def __repr__(self) -> str:
        return f"Point({self._values.tolist()})"
