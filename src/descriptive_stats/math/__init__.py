"""Statistical utilities for descriptive analysis."""

from .stats import (  # noqa: F401
    descriptive_statistics,
    maximum,
    mean,
    median,
    minimum,
    mode,
    range_,
    standard_deviation,
)
from .utils import validate_numbers  # noqa: F401

range = range_  # noqa: A001

__all__ = [
    "descriptive_statistics",
    "maximum",
    "mean",
    "median",
    "minimum",
    "mode",
    "range",
    "range_",
    "standard_deviation",
    "validate_numbers",
]
