"""Exceptions raised when statistics are requested for unusable input."""

from typing import Any


class DescriptiveStatisticsError(Exception):
    """Base class for all input validation failures."""


class NotASequenceError(DescriptiveStatisticsError, TypeError):
    """Raised when the argument is not a flat sequence container."""

    def __init__(self, message: str = "The passed argument is not a sequence.") -> None:
        super().__init__(message)


class EmptySequenceError(DescriptiveStatisticsError, ValueError):
    """Raised when the sequence holds zero elements."""

    def __init__(self, message: str = "The passed sequence contains no elements.") -> None:
        super().__init__(message)


class NonNumericElementError(DescriptiveStatisticsError, TypeError):
    """Raised when at least one element is not a real number."""

    def __init__(
        self,
        index: int,
        value: Any,
        message: str = "The passed sequence contains not just numbers.",
    ) -> None:
        super().__init__(message)
        self.index = index
        self.value = value


__all__ = [
    "DescriptiveStatisticsError",
    "EmptySequenceError",
    "NonNumericElementError",
    "NotASequenceError",
]
