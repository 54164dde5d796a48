"""layout/metrics.py — Glyph widths and greedy line breaking.

Widths are in points.  A glyph's advance is its em width scaled by the font
size and the horizontal scale, plus tracking (1/1000 em) and letter spacing
(percent of the space width).  Every term grows with every fitted property,
so the line count is monotone in each of them.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from ..config import LayoutConfig

SPACE_EM = 0.28
HYPHEN_EM = 0.33
_DEFAULT_EM = 0.5

_EM_WIDTHS: dict[str, float] = {}
for _chars, _w in (
    ("ijl.,;:'!|", 0.25),
    ("frt()-", 0.33),
    ("abcdeghknopqsuvxyz", 0.52),
    ("mw", 0.8),
    ("ABCDEFGHIJKLNOPQRSTUVXYZ", 0.66),
    ("MW", 0.85),
    ("0123456789", 0.55),
):
    for _c in _chars:
        _EM_WIDTHS[_c] = _w
_EM_WIDTHS[" "] = SPACE_EM


@dataclass(frozen=True)
class TypeSettings:
    """Resolved properties used to measure one paragraph."""

    font_size: float = 10.0
    tracking: float = 0.0
    horizontal_scale: float = 100.0
    letter_spacing: float = 0.0

    @property
    def glyph_extra(self) -> float:
        """Points added after every glyph."""
        return self.font_size * (self.tracking / 1000.0 + self.letter_spacing / 100.0 * SPACE_EM)

    def advances(self, text: str) -> NDArray[np.float64]:
        em = np.fromiter((_EM_WIDTHS.get(c, _DEFAULT_EM) for c in text), dtype=np.float64, count=len(text))
        return em * self.font_size * self.horizontal_scale / 100.0 + self.glyph_extra

    def width(self, text: str) -> float:
        return float(self.advances(text).sum())

    @property
    def space_width(self) -> float:
        return self.width(" ")

    @property
    def hyphen_width(self) -> float:
        return self.width("-")


def _best_prefix(
    word: str,
    available: float,
    settings: TypeSettings,
    rules: LayoutConfig,
) -> int:
    """Longest hyphenation prefix of *word* that fits in *available* points, or 0."""
    if len(word) < rules.hyphen_min_word:
        return 0
    cum = np.cumsum(settings.advances(word)) + settings.hyphen_width
    lo = rules.hyphen_min_prefix
    hi = len(word) - rules.hyphen_min_suffix
    if hi < lo:
        return 0
    fits = np.nonzero(cum[lo - 1:hi] <= available)[0]
    if fits.size == 0:
        return 0
    return int(fits[-1]) + lo


def break_lines(
    text: str,
    width: float,
    settings: TypeSettings,
    hyphenate: bool = False,
    rules: LayoutConfig | None = None,
) -> list[str]:
    """Greedy first-fit line breaking.

    Words longer than a line are left overflowing on a line of their own.
    An empty paragraph still occupies one line.
    """
    if rules is None:
        rules = LayoutConfig()
    words = text.split()
    if not words:
        return [""]

    space = settings.space_width
    lines: list[str] = []
    current: list[str] = []
    used = 0.0

    pending = list(reversed(words))
    while pending:
        word = pending.pop()
        w = settings.width(word)
        needed = w if not current else used + space + w
        if needed <= width:
            current.append(word)
            used = needed
            continue

        if hyphenate:
            avail = width - (used + space if current else 0.0)
            k = _best_prefix(word, avail, settings, rules)
            if k:
                current.append(word[:k] + "-")
                lines.append(" ".join(current))
                current, used = [], 0.0
                pending.append(word[k:])
                continue

        if current:
            lines.append(" ".join(current))
            current, used = [], 0.0
            pending.append(word)
        else:
            lines.append(word)

    if current:
        lines.append(" ".join(current))
    return lines
