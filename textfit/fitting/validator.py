"""fitting/validator.py — Line-count validator for the boundary search.

The validator is the only place that touches the paragraph.  For a rectangle
``[min, max]`` it:

1. sets the paragraph to the max corner; if the text already fits there the
   rectangle holds no boundary;
2. sets it to the min corner; if the text fits, the paragraph is left at
   ``min`` and that point is reported as the committed candidate;
3. otherwise restores the values the paragraph had before the call.

A rejected rectangle always leaves the paragraph as it found it.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..search.point import Point
from ..search.space import Verdict

logger = logging.getLogger(__name__)


class PropertyAdapter:
    """Reads and writes an ordered set of numeric attributes on a paragraph."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)

    def get(self, target: Any) -> list[float]:
        return [float(getattr(target, n)) for n in self.names]

    def apply(self, target: Any, values: Sequence[float]) -> None:
        for name, value in zip(self.names, values):
            setattr(target, name, float(value))
        target.recompose()


class LineCountValidator:
    """Feasibility test ``line_count <= target_lines``."""

    def __init__(self, target_lines: int, adapter: PropertyAdapter) -> None:
        self.target_lines = target_lines
        self.adapter = adapter
        self.calls = 0
        self.commits = 0

    def fits(self, paragraph: Any) -> bool:
        return paragraph.line_count <= self.target_lines

    def __call__(self, paragraph: Any, min: Point, max: Point) -> Verdict:
        self.calls += 1
        previous = self.adapter.get(paragraph)

        self.adapter.apply(paragraph, max.values)
        if self.fits(paragraph):
            # Max already fits: no boundary in here.
            self.adapter.apply(paragraph, previous)
            return Verdict(False)

        self.adapter.apply(paragraph, min.values)
        if self.fits(paragraph):
            self.commits += 1
            logger.debug("Committed %s (%d lines)", min, paragraph.line_count)
            return Verdict(True, min)

        self.adapter.apply(paragraph, previous)
        return Verdict(False)
