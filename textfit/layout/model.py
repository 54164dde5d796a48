"""layout/model.py — Paragraphs, stories and documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import LayoutConfig
from .metrics import TypeSettings, break_lines


@dataclass(frozen=True)
class ParagraphStyle:
    """Named style the fitting range is centred on."""

    name: str = "Body"
    tracking: float = 0.0
    horizontal_scale: float = 100.0
    letter_spacing: float = 0.0


@dataclass(eq=False)
class Paragraph:
    """A paragraph set in a column of fixed width.

    Local property values start from the style and are what the fitter
    adjusts.  ``lines`` is refreshed by :meth:`recompose`.
    """

    text: str
    width: float
    font_size: float = 10.0
    style: ParagraphStyle = field(default_factory=ParagraphStyle)
    hyphenation: bool = True
    tracking: float | None = None
    horizontal_scale: float | None = None
    letter_spacing: float | None = None
    rules: LayoutConfig = field(default_factory=LayoutConfig, repr=False)
    lines: list[str] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self) -> None:
        for name in ("tracking", "horizontal_scale", "letter_spacing"):
            if getattr(self, name) is None:
                setattr(self, name, getattr(self.style, name))
        self.recompose()

    @property
    def settings(self) -> TypeSettings:
        return TypeSettings(
            font_size=self.font_size,
            tracking=self.tracking,
            horizontal_scale=self.horizontal_scale,
            letter_spacing=self.letter_spacing,
        )

    def recompose(self) -> None:
        self.lines = break_lines(
            self.text, self.width, self.settings, hyphenate=self.hyphenation, rules=self.rules,
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)


@dataclass(eq=False)
class Story:
    """A chain of paragraphs flowing through frames of fixed line capacity."""

    paragraphs: list[Paragraph]
    capacity_lines: int | None = None
    on_master_page: bool = False
    name: str = ""

    def is_overset(self, index: int) -> bool:
        """True if paragraph *index* does not end inside the story's frames."""
        if self.capacity_lines is None:
            return False
        end = sum(p.line_count for p in self.paragraphs[: index + 1])
        return end > self.capacity_lines

    @property
    def line_count(self) -> int:
        return sum(p.line_count for p in self.paragraphs)


@dataclass(eq=False)
class Document:
    stories: list[Story] = field(default_factory=list)
    styles: dict[str, ParagraphStyle] = field(default_factory=dict)
