"""Property-based checks for the descriptive statistics functions."""

import sys
from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

from descriptive_stats import (
    maximum,
    mean,
    median,
    minimum,
    mode,
    range_,
    standard_deviation,
)

integers = st.lists(st.integers(min_value=-10**6, max_value=10**6), min_size=1, max_size=50)
floats = st.lists(
    st.floats(allow_nan=False, allow_infinity=False, width=32), min_size=1, max_size=50
)


def _rounding_bound(values):
    """Worst-case error of summing ``values`` left to right in double precision."""
    return 2 * len(values) ** 2 * sys.float_info.epsilon * max(abs(value) for value in values)


@given(integers)
def test_central_values_lie_between_extremes(values):
    low, high = minimum(values), maximum(values)
    assert low <= mean(values) <= high
    assert low <= median(values) <= high


@given(integers)
def test_range_is_spread_of_extremes(values):
    assert range_(values) == maximum(values) - minimum(values)
    assert range_(values) >= 0


@given(integers)
def test_standard_deviation_is_zero_only_for_constant_input(values):
    deviation = standard_deviation(values)
    assert deviation >= 0
    assert (deviation == 0) == (len(set(values)) == 1)


@given(integers)
def test_mode_values_are_sorted_unique_and_most_frequent(values):
    modes = mode(values)
    counts = Counter(values)
    top = max(counts.values())
    assert modes == sorted(set(modes))
    assert all(counts[value] == top for value in modes)
    assert {value for value, count in counts.items() if count == top} == set(modes)


@given(integers)
def test_input_is_left_untouched(values):
    before = list(values)
    for operation in (maximum, mean, median, minimum, mode, range_, standard_deviation):
        operation(values)
    assert values == before


@given(floats)
def test_float_central_values_lie_between_extremes_within_rounding(values):
    low, high = minimum(values), maximum(values)
    slack = _rounding_bound(values)
    assert low - slack <= mean(values) <= high + slack
    assert low - slack <= median(values) <= high + slack


@given(floats)
def test_float_standard_deviation_vanishes_only_for_constant_input(values):
    deviation = standard_deviation(values)
    assert deviation >= 0
    if len(set(values)) == 1:
        assert deviation <= _rounding_bound(values)
    else:
        assert deviation > 0
