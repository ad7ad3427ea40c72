"""Descriptive statistics over a finite sequence of numbers."""

import math
from collections import Counter
from typing import Any

import structlog

from ..models import DescriptiveReport
from .utils import Number, sorted_copy, validate_numbers

logger = structlog.get_logger(__name__)


def maximum(numbers: Any) -> Number:
    """Return the largest value."""
    return max(validate_numbers(numbers))


def minimum(numbers: Any) -> Number:
    """Return the smallest value."""
    return min(validate_numbers(numbers))


def mean(numbers: Any) -> float:
    """Compute the arithmetic mean."""
    values = validate_numbers(numbers)
    total = 0.0
    for value in values:
        total += value
    return float(total / len(values))


def median(numbers: Any) -> float:
    """Return the middle value, averaging the two central values for even counts."""
    ordered = sorted_copy(validate_numbers(numbers))
    low_mid = (len(ordered) - 1) // 2
    high_mid = math.ceil((len(ordered) - 1) / 2)
    return float((ordered[low_mid] + ordered[high_mid]) / 2)


def mode(numbers: Any) -> list[Number]:
    """Return every most frequent value in ascending order.

    All values sharing the highest frequency are returned, so a sequence of
    distinct values yields all of them.
    """
    frequencies = Counter(validate_numbers(numbers))
    top = max(frequencies.values())
    modes = sorted(value for value, count in frequencies.items() if count == top)
    logger.debug("stats.mode_computed", ties=len(modes), frequency=top)
    return modes


def range_(numbers: Any) -> Number:
    """Return the spread between the largest and smallest value."""
    return maximum(numbers) - minimum(numbers)


def standard_deviation(numbers: Any) -> float:
    """Return the population standard deviation (divides by n, not n - 1)."""
    values = validate_numbers(numbers)
    center = mean(values)
    squared = 0.0
    for value in values:
        deviation = value - center
        squared += deviation * deviation
    return float(math.sqrt(squared / len(values)))


def descriptive_statistics(numbers: Any) -> DescriptiveReport:
    """Compute all seven statistics for ``numbers`` in a single report."""
    report = DescriptiveReport(
        maximum=maximum(numbers),
        mean=mean(numbers),
        median=median(numbers),
        minimum=minimum(numbers),
        mode=mode(numbers),
        range=range_(numbers),
        standard_deviation=standard_deviation(numbers),
    )
    logger.debug("stats.report_computed", count=len(numbers))
    return report
