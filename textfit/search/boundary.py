"""
search/boundary.py — Recursive N-dimensional boundary search.

Binary search generalised to a hyper-rectangle.  A rectangle is *valid* when
the validator reports that the feasibility boundary passes through it (the
max corner is infeasible, the min corner feasible).  A valid rectangle is
halved along one axis and the search descends into the first half that is
still valid; the sibling and the remaining axes are skipped, so the work is
a single path of length ``O(dimensions * log2(1 / tolerance))``.

Design notes
------------
* **Rotation counter** — the axis tried first at each level is
  ``(rotation + i) % dimensions`` and the counter moves on every axis
  attempt.  It belongs to one :class:`BoundarySearch` session; callers that
  want the counter to drift across searches pass ``SearchResult.rotation``
  into the next session.
* **Result threading** — the best committed point travels back up the
  recursion in the return value.  Validators still leave their state at the
  committed point, but callers do not have to rely on it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .point import Point
from .space import Space

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one boundary search."""

    valid: bool
    best: Point | None
    rotation: int
    evaluations: int
    pruned: int
    depth: int

    @property
    def found(self) -> bool:
        return self.best is not None


class BoundarySearch:
    """One search session.

    Parameters
    ----------
    rotation:
        Starting value of the axis rotation counter.
    """

    def __init__(self, rotation: int = 0) -> None:
        self.rotation = rotation
        self.evaluations = 0
        self.pruned = 0
        self.depth = 0

    def run(self, space: Space, state: Any) -> SearchResult:
        valid, best = self._descend(space, state, 0)
        logger.debug(
            "Boundary search %s: valid=%s best=%s evaluations=%d pruned=%d depth=%d",
            space, valid, best, self.evaluations, self.pruned, self.depth,
        )
        return SearchResult(
            valid=valid,
            best=best,
            rotation=self.rotation,
            evaluations=self.evaluations,
            pruned=self.pruned,
            depth=self.depth,
        )

    def _descend(self, space: Space, state: Any, level: int) -> tuple[bool, Point | None]:
        self.depth = max(self.depth, level)
        if space.too_small():
            self.pruned += 1
        else:
            self.evaluations += 1

        verdict = space.is_valid(state)
        if not verdict:
            return False, None

        best = verdict.candidate
        for i in range(space.dimensions):
            axis = (self.rotation + i) % space.dimensions
            self.rotation += 1
            for half in space.split(axis):
                valid, found = self._descend(half, state, level + 1)
                if valid:
                    if found is not None:
                        best = found
                    return True, best
        return True, best


def split_space(space: Space, state: Any, rotation: int = 0) -> SearchResult:
    """Run a boundary search over *space* and return its result."""
    return BoundarySearch(rotation).run(space, state)
