"""Configuration dataclasses for the text-fitting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AxisConfig:
    """One adjustable typographic property and its search range."""

    name: str
    # Root rectangle spans style value ± half_width.
    half_width: float
    # Absolute refinement floor; None → SearchConfig.min_size_fraction of the extent.
    min_size: float | None = None

    def __post_init__(self) -> None:
        if not self.half_width > 0:
            raise ValueError(f"axis {self.name!r}: half_width must be positive, got {self.half_width!r}")
        if self.min_size is not None and not self.min_size > 0:
            raise ValueError(f"axis {self.name!r}: min_size must be positive, got {self.min_size!r}")


@dataclass(frozen=True)
class SearchConfig:
    """Boundary-search knobs."""

    min_size_fraction: float = 0.05
    # Chain the axis rotation counter from one paragraph to the next.
    carry_rotation: bool = False

    def __post_init__(self) -> None:
        # A zero floor never stops the bisection.
        if not self.min_size_fraction > 0:
            raise ValueError(
                f"min_size_fraction must be positive, got {self.min_size_fraction!r}"
            )


@dataclass(frozen=True)
class LayoutConfig:
    """Hyphenation rules for the reference line breaker."""

    hyphen_min_word: int = 6
    hyphen_min_prefix: int = 3
    hyphen_min_suffix: int = 3


DEFAULT_AXES: tuple[AxisConfig, ...] = (
    AxisConfig("tracking", 15.0),  # 1/1000 em
    AxisConfig("horizontal_scale", 6.0),  # %
    AxisConfig("letter_spacing", 5.0),  # % of the space width
)


@dataclass
class FitConfig:
    """Top-level knobs for a fitting run."""

    axes: tuple[AxisConfig, ...] = DEFAULT_AXES
    search: SearchConfig = field(default_factory=SearchConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    @property
    def axis_names(self) -> tuple[str, ...]:
        return tuple(a.name for a in self.axes)
