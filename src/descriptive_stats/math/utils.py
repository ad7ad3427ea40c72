"""Common helper functions for statistical routines."""

import numbers
import sys
from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

import numpy as np

from ..errors import EmptySequenceError, NonNumericElementError, NotASequenceError

Number: TypeAlias = numbers.Real

_TEXT_TYPES = (str, bytes, bytearray)
_OUT_OF_RANGE = "The passed sequence contains a number outside the floating-point range."


def is_numeric(value: Any) -> bool:
    """Return True for real numbers, excluding booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def _fits_float(value: Number) -> bool:
    """Return False for exact numbers too large to convert to a float."""
    if isinstance(value, numbers.Rational):
        return abs(value) <= sys.float_info.max
    return True


def _to_builtin(value: Number) -> Number:
    """Unwrap NumPy scalars into their Python equivalents."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _as_sequence(values: Any) -> Sequence[Any]:
    """Return ``values`` as a flat sequence or raise :class:`NotASequenceError`."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise NotASequenceError()
        return values.tolist()
    if isinstance(values, _TEXT_TYPES) or isinstance(values, Mapping):
        raise NotASequenceError()
    if not isinstance(values, Sequence):
        raise NotASequenceError()
    return values


def validate_numbers(values: Any) -> list[Number]:
    """Validate ``values`` and return a private list copy of its elements.

    The argument must be a non-empty flat sequence whose elements are all
    real numbers. Checks run in that order and the first failure is raised:

    * :class:`NotASequenceError` for scalars, strings, mappings, sets and
      multi-dimensional arrays.
    * :class:`EmptySequenceError` when there are no elements.
    * :class:`NonNumericElementError` naming the first offending element,
      including integers and fractions beyond the float range.

    The caller's sequence is never modified; the returned list can be sorted
    or reordered freely.
    """
    sequence = _as_sequence(values)
    if len(sequence) == 0:
        raise EmptySequenceError()
    copy: list[Number] = []
    for index, value in enumerate(sequence):
        if not is_numeric(value):
            raise NonNumericElementError(index, value)
        value = _to_builtin(value)
        if not _fits_float(value):
            raise NonNumericElementError(index, value, _OUT_OF_RANGE)
        copy.append(value)
    return copy


def sorted_copy(values: Sequence[Number]) -> list[Number]:
    """Return a new list holding ``values`` in ascending order."""
    return sorted(values)


__all__ = [
    "Number",
    "is_numeric",
    "sorted_copy",
    "validate_numbers",
]
