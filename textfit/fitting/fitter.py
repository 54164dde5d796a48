"""
fitting/fitter.py — Fit a paragraph back into a target number of lines.

The root rectangle is centred on the paragraph *style* values with one axis
per property in ``FitConfig.axes``.  Lowering every property tightens the
text, so the min corner is the most permissive point and the max corner the
laxest one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from ..config import FitConfig
from ..layout.model import Paragraph
from ..search.boundary import split_space
from ..search.point import Point
from ..search.space import Space, Validator
from .validator import LineCountValidator, PropertyAdapter

logger = logging.getLogger(__name__)


class FitOutcome(str, Enum):
    FITS = "fits"
    CANNOT_FIT = "cannot_fit"


@dataclass
class FitReport:
    """Result of fitting one paragraph."""

    outcome: FitOutcome
    target_lines: int
    lines: int
    original_values: tuple[float, ...]
    values: tuple[float, ...]
    adjusted: bool
    evaluations: int = 0
    depth: int = 0


class TextFitter:
    """Adjusts tracking, horizontal scale and letter spacing of paragraphs.

    Parameters
    ----------
    config:
        Axes and search settings.
    rotation:
        Initial axis rotation counter; only carried between paragraphs when
        ``config.search.carry_rotation`` is set.
    """

    def __init__(self, config: FitConfig | None = None, rotation: int = 0) -> None:
        self.config = config if config is not None else FitConfig()
        self.adapter = PropertyAdapter(self.config.axis_names)
        self.rotation = rotation

    def root_space(self, base: Sequence[float], validator: Validator) -> Space:
        """Rectangle ``base ± half_width`` on every configured axis."""
        base_arr = np.asarray(base, dtype=np.float64)
        half = np.array([a.half_width for a in self.config.axes], dtype=np.float64)
        min_sizes = [a.min_size for a in self.config.axes]
        return Space(
            Point(base_arr - half),
            Point(base_arr + half),
            validator,
            min_sizes=min_sizes,
            min_size_fraction=self.config.search.min_size_fraction,
        )

    def fit(self, paragraph: Paragraph, target_lines: int) -> FitReport:
        original = tuple(self.adapter.get(paragraph))

        if paragraph.line_count <= target_lines:
            return FitReport(
                outcome=FitOutcome.FITS,
                target_lines=target_lines,
                lines=paragraph.line_count,
                original_values=original,
                values=original,
                adjusted=False,
            )

        validator = LineCountValidator(target_lines, self.adapter)
        space = self.root_space(self.adapter.get(paragraph.style), validator)
        start = self.rotation if self.config.search.carry_rotation else 0
        result = split_space(space, paragraph, rotation=start)
        if self.config.search.carry_rotation:
            self.rotation = result.rotation

        best = result.best
        if best is None and not result.valid:
            # The root max corner already fits; the current values lie past it.
            self.adapter.apply(paragraph, space.max.values)
            if validator.fits(paragraph):
                logger.info("Laxest corner %s already fits; using it", space.max)
                best = space.max

        if best is None:
            self.adapter.apply(paragraph, original)
            logger.info(
                "Cannot fit %d lines into %d within %s", paragraph.line_count, target_lines, space,
            )
            return FitReport(
                outcome=FitOutcome.CANNOT_FIT,
                target_lines=target_lines,
                lines=paragraph.line_count,
                original_values=original,
                values=original,
                adjusted=False,
                evaluations=result.evaluations,
                depth=result.depth,
            )

        self.adapter.apply(paragraph, best.values)
        values = tuple(float(v) for v in best.values)
        logger.info(
            "Fitted into %d lines: %s → %s  (%d evaluations, depth %d)",
            target_lines,
            dict(zip(self.adapter.names, original)),
            dict(zip(self.adapter.names, (round(v, 3) for v in values))),
            result.evaluations,
            result.depth,
        )
        return FitReport(
            outcome=FitOutcome.FITS,
            target_lines=target_lines,
            lines=paragraph.line_count,
            original_values=original,
            values=values,
            adjusted=True,
            evaluations=result.evaluations,
            depth=result.depth,
        )
