import numpy as np

from textfit.search.point import Point
from textfit.search.space import Space, Verdict


def _never(state, lo, hi):
    return False


def test_default_min_sizes_are_five_percent_of_extent():
    s = Space(Point([0, 0]), Point([10, 2]), _never)
    assert np.allclose(s.size, [10, 2])
    assert np.allclose(s.min_sizes, [0.5, 0.1])


def test_missing_min_sizes_are_filled_present_ones_kept():
    s = Space(Point([0, 0]), Point([10, 2]), _never, min_sizes=[None, 0.3])
    assert np.allclose(s.min_sizes, [0.5, 0.3])


def test_min_size_fraction_is_configurable():
    s = Space(Point([0]), Point([10]), _never, min_size_fraction=0.1)
    assert np.allclose(s.min_sizes, [1.0])


def test_split_partitions_exactly():
    parent = Space(Point([0, -4, 1]), Point([10, 4, 3]), _never)
    lower, upper = parent.split(1)
    assert lower.max[1] == upper.min[1] == 0.0
    assert lower.min == parent.min
    assert upper.max == parent.max
    for axis in (0, 2):
        assert lower.max[axis] == parent.max[axis]
        assert upper.min[axis] == parent.min[axis]


def test_children_share_root_min_sizes():
    root = Space(Point([0, 0]), Point([8, 8]), _never)
    lower, upper = root.split(0)
    grand, _ = upper.split(1)
    assert lower.min_sizes is root.min_sizes
    assert upper.min_sizes is root.min_sizes
    assert grand.min_sizes is root.min_sizes
    # Not recomputed from the smaller child extent.
    assert np.allclose(grand.min_sizes, [0.4, 0.4])
    root.min_sizes[0] = 1.25
    assert grand.min_sizes[0] == 1.25


def test_children_share_validator():
    root = Space(Point([0]), Point([1]), _never)
    lower, upper = root.split(0)
    assert lower.validator is _never and upper.validator is _never


def test_too_small_space_skips_validator():
    calls = []

    def validator(state, lo, hi):
        calls.append((lo, hi))
        return True

    s = Space(Point([0]), Point([0.5]), validator, min_sizes=[1.0])
    assert s.too_small()
    assert not s.is_valid(None)
    assert calls == []


def test_bool_validator_is_normalised():
    s = Space(Point([1, 2]), Point([3, 4]), lambda st, lo, hi: True)
    verdict = s.is_valid(None)
    assert isinstance(verdict, Verdict)
    assert verdict.valid and verdict.candidate == s.min

    s = Space(Point([1, 2]), Point([3, 4]), lambda st, lo, hi: False)
    verdict = s.is_valid(None)
    assert not verdict and verdict.candidate is None


def test_verdict_validator_passes_through():
    target = Point([2, 3])
    s = Space(Point([1, 2]), Point([3, 4]), lambda st, lo, hi: Verdict(True, target))
    assert s.is_valid(None).candidate is target


def test_string_rendering():
    s = Space(Point([0, 0]), Point([10, 2]), _never)
    assert str(s) == "{0,0:10,2}"
