import math

import pytest

from textfit.config import AxisConfig, FitConfig, SearchConfig


def test_defaults_are_accepted():
    cfg = FitConfig()
    assert cfg.axis_names == ("tracking", "horizontal_scale", "letter_spacing")
    assert cfg.search.min_size_fraction == 0.05


@pytest.mark.parametrize("fraction", [0.0, -0.05, math.nan])
def test_non_positive_tolerance_is_rejected(fraction):
    with pytest.raises(ValueError, match="min_size_fraction"):
        SearchConfig(min_size_fraction=fraction)


@pytest.mark.parametrize("min_size", [0.0, -1.0])
def test_non_positive_axis_min_size_is_rejected(min_size):
    with pytest.raises(ValueError, match="min_size"):
        AxisConfig("tracking", 15.0, min_size=min_size)


def test_zero_half_width_is_rejected():
    with pytest.raises(ValueError, match="half_width"):
        AxisConfig("tracking", 0.0)
