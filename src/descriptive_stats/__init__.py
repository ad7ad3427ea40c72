"""Descriptive statistics for finite sequences of numbers."""

from .errors import (
    DescriptiveStatisticsError,
    EmptySequenceError,
    NonNumericElementError,
    NotASequenceError,
)
from .math import (
    descriptive_statistics,
    maximum,
    mean,
    median,
    minimum,
    mode,
    range_,
    standard_deviation,
)
from .models import DescriptiveReport, DescriptiveReportSchema

range = range_  # noqa: A001

__all__ = [
    "DescriptiveReport",
    "DescriptiveReportSchema",
    "DescriptiveStatisticsError",
    "EmptySequenceError",
    "NonNumericElementError",
    "NotASequenceError",
    "descriptive_statistics",
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "range",
    "range_",
    "standard_deviation",
]
