"""Tests for interval arithmetic."""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given, strategies as st

from llm_impact.ranges import Range, add, less_than, scale, to_range, union

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)


@st.composite
def ranges(draw: st.DrawFn) -> Range:
    low = draw(finite)
    high = draw(finite)
    return Range(min(low, high), max(low, high))


def test_to_range_scalar_is_degenerate():
    """A scalar becomes the range [x, x]."""
    value = to_range(3.5)
    assert value == Range(3.5, 3.5)
    assert value.is_degenerate


def test_to_range_returns_existing_range():
    """An existing range is returned unchanged."""
    original = Range(1.0, 2.0)
    assert to_range(original) is original
    assert Range.of(4) == Range(4.0, 4.0)


def test_range_is_immutable():
    """Ranges are frozen value objects."""
    value = Range(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.min = 0.0  # type: ignore[misc]


def test_add_bound_wise_with_scalar_coercion():
    """Addition sums matching bounds and accepts scalars on either side."""
    assert add(Range(1.0, 2.0), Range(10.0, 20.0)) == Range(11.0, 22.0)
    assert Range(1.0, 2.0) + 3 == Range(4.0, 5.0)
    assert 3 + Range(1.0, 2.0) == Range(4.0, 5.0)
    assert add(1.0, 2.0) == Range(3.0, 3.0)


def test_scale_multiplies_both_bounds():
    """Scaling by a non-negative factor keeps the ordering."""
    assert scale(Range(1.0, 2.0), 3.0) == Range(3.0, 6.0)
    assert Range(1.0, 2.0) * 0.5 == Range(0.5, 1.0)
    assert 2 * Range(1.0, 2.0) == Range(2.0, 4.0)
    assert scale(5.0, 0.0) == Range(0.0, 0.0)


def test_less_than_compares_upper_bound():
    """A range is below a threshold only when its maximum is."""
    assert less_than(Range(1.0, 2.0), 2.5)
    assert not less_than(Range(1.0, 2.0), 2.0)
    assert not less_than(Range(1.0, 3.0), 2.0)
    assert Range(0.0, 1.0) < 1.5


def test_union_covers_both_inputs():
    """Union widens to the envelope of both ranges."""
    assert union(Range(1.0, 2.0), Range(3.0, 4.0)) == Range(1.0, 4.0)
    assert union(Range(1.0, 5.0), Range(2.0, 3.0)) == Range(1.0, 5.0)
    assert union(2.0, Range(1.0, 1.5)) == Range(1.0, 2.0)


def test_union_of_unordered_input():
    """Union stays an envelope when an input has inverted bounds."""
    assert union(Range(1.0, 2.0), Range(3.0, 1.0)) == Range(1.0, 3.0)


def test_mean():
    """The midpoint sits between the bounds."""
    assert Range(2.0, 4.0).mean == 3.0


@given(a=ranges(), b=ranges())
def test_union_properties(a: Range, b: Range):
    """Union bounds are the extreme bounds, regardless of argument order."""
    result = union(a, b)
    assert result.min == min(a.min, b.min)
    assert result.max == max(a.max, b.max)
    assert union(b, a) == result
    assert result.min <= result.max


@given(a=ranges(), b=ranges(), factor=st.floats(min_value=0.0, max_value=1e3))
def test_arithmetic_preserves_ordering(a: Range, b: Range, factor: float):
    """Sums and non-negative scaling keep min <= max."""
    total = a + b
    assert total.min <= total.max
    scaled = a.scale(factor)
    assert scaled.min <= scaled.max
