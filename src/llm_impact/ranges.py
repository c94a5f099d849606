"""Closed-interval arithmetic used to carry uncertainty through estimates.

Every quantity the estimator reports is a :class:`Range`. Scalars are
accepted wherever a range is expected and are treated as the degenerate
interval ``[x, x]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = ["Range", "RangeLike", "add", "less_than", "scale", "to_range", "union"]


@dataclass(frozen=True, slots=True)
class Range:
    """Immutable ``[min, max]`` interval.

    The constructor does not reorder its arguments; ranges produced by the
    estimator always satisfy ``min <= max``.
    """

    min: float
    max: float

    @classmethod
    def of(cls, value: RangeLike) -> Range:
        """Return ``value`` as a :class:`Range`.

        Args:
            value: Either a bare number or an existing range.

        Returns:
            The range itself, or the degenerate range ``[value, value]``.
        """

        if isinstance(value, Range):
            return value
        number = float(value)
        return cls(number, number)

    @property
    def is_degenerate(self) -> bool:
        """Return ``True`` when both bounds are equal."""

        return self.min == self.max

    @property
    def mean(self) -> float:
        """Return the midpoint of the interval."""

        return (self.min + self.max) / 2.0

    def add(self, other: RangeLike) -> Range:
        """Return the bound-wise sum with ``other``."""

        rhs = Range.of(other)
        return Range(self.min + rhs.min, self.max + rhs.max)

    def scale(self, factor: float) -> Range:
        """Multiply both bounds by ``factor``.

        Args:
            factor: Non-negative multiplier. Negative factors are not
                supported and would invert the bounds.
        """

        return Range(self.min * factor, self.max * factor)

    def less_than(self, threshold: float) -> bool:
        """Return ``True`` when the whole interval lies below ``threshold``."""

        return self.max < threshold

    def union(self, other: RangeLike) -> Range:
        """Return the smallest interval covering both ranges."""

        rhs = Range.of(other)
        endpoints = (self.min, self.max, rhs.min, rhs.max)
        return Range(min(endpoints), max(endpoints))

    def __add__(self, other: RangeLike) -> Range:
        return self.add(other)

    def __radd__(self, other: RangeLike) -> Range:
        return self.add(other)

    def __mul__(self, factor: float) -> Range:
        return self.scale(factor)

    def __rmul__(self, factor: float) -> Range:
        return self.scale(factor)

    def __lt__(self, threshold: float) -> bool:
        return self.less_than(threshold)


RangeLike = Union[Range, float, int]


def to_range(value: RangeLike) -> Range:
    """Functional alias for :meth:`Range.of`."""

    return Range.of(value)


def add(a: RangeLike, b: RangeLike) -> Range:
    """Return ``a + b`` bound-wise."""

    return Range.of(a).add(b)


def scale(a: RangeLike, factor: float) -> Range:
    """Return ``a`` with both bounds multiplied by ``factor`` (``factor >= 0``)."""

    return Range.of(a).scale(factor)


def less_than(a: RangeLike, threshold: float) -> bool:
    """Return ``True`` when the upper bound of ``a`` is below ``threshold``."""

    return Range.of(a).less_than(threshold)


def union(a: RangeLike, b: RangeLike) -> Range:
    """Return the envelope covering both ``a`` and ``b``."""

    return Range.of(a).union(b)
