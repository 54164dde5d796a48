"""search/space.py — Axis-aligned search rectangles.

A ``Space`` is the hyper-rectangle ``[min, max]`` together with the
feasibility validator and the per-axis minimum edge lengths.  The minimum
sizes are computed once, on the root rectangle, and the *same* array is handed
down to every child produced by :meth:`Space.split`.  Tolerances therefore stay
relative to the root extent, which gives the recursion a fixed absolute floor
instead of an asymptotic one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .point import Point

# Fraction of the root extent below which an axis is no longer refined.
DEFAULT_MIN_SIZE_FRACTION = 0.05


@dataclass(frozen=True)
class Verdict:
    """Validator answer for one rectangle.

    ``candidate`` is the feasible point the validator committed, if any.
    """

    valid: bool
    candidate: Point | None = None

    def __bool__(self) -> bool:
        return self.valid


Validator = Callable[[Any, Point, Point], Union[Verdict, bool]]

_REJECT = Verdict(False)


class Space:
    """Hyper-rectangle with a feasibility validator.

    Parameters
    ----------
    min, max:
        Lower and upper corners.  ``min[i] <= max[i]`` on every axis is the
        caller's responsibility.
    validator:
        ``validator(state, min, max)`` returning a :class:`Verdict` or a bool.
        A bare ``True`` means the validator left *state* at the min corner.
    min_sizes:
        Per-axis minimum edge length.  Missing entries (``None``/``NaN``) are
        filled in place from ``min_size_fraction`` of this rectangle's size.
        A ``float64`` array is shared, not copied.
    """

    def __init__(
        self,
        min: Point,
        max: Point,
        validator: Validator,
        min_sizes: Sequence[float | None] | NDArray[np.float64] | None = None,
        min_size_fraction: float = DEFAULT_MIN_SIZE_FRACTION,
    ) -> None:
        self.dimensions = min.dimensions
        self.min = min
        self.max = max
        self.validator = validator
        self.size: NDArray[np.float64] = max.values - min.values

        if min_sizes is None:
            self.min_sizes = self.size * min_size_fraction
        else:
            self.min_sizes = np.asarray(min_sizes, dtype=np.float64)
            missing = np.isnan(self.min_sizes)
            if missing.any():
                self.min_sizes[missing] = self.size[missing] * min_size_fraction

    def split(self, axis: int) -> tuple[Space, Space]:
        """Halve the rectangle along *axis*; returns ``(lower, upper)``."""
        lo = self.min[axis]
        mid = (self.max[axis] - lo) / 2 + lo
        lower = Space(self.min, self.max.replace(axis, mid), self.validator, self.min_sizes)
        upper = Space(self.min.replace(axis, mid), self.max, self.validator, self.min_sizes)
        return lower, upper

    def too_small(self) -> bool:
        """True once any edge is shorter than its minimum size."""
        return bool(np.any(self.size < self.min_sizes))

    def is_valid(self, state: Any) -> Verdict:
        """Check the rectangle; runs the validator unless it is too small."""
        if self.too_small():
            return _REJECT
        result = self.validator(state, self.min, self.max)
        if isinstance(result, Verdict):
            return result
        return Verdict(True, self.min) if result else _REJECT

    def __str__(self) -> str:
        return "{" + str(self.min) + ":" + str(self.max) + "}"

    def __repr__(self) -> str:
        return f"Space(min={self.min!r}, max={self.max!r})"
