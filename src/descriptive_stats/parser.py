"""Parsers turning free-form text into numeric sequences."""

import re
from collections.abc import Iterable

_SEPARATORS = re.compile(r"[\s,;]+")
_INTEGER = re.compile(r"[+-]?\d+")


def parse_number(token: str) -> int | float:
    """Parse one token, keeping integers exact."""
    cleaned = token.strip()
    if _INTEGER.fullmatch(cleaned):
        return int(cleaned)
    try:
        return float(cleaned)
    except ValueError:
        raise ValueError(f"Invalid number {token!r}.") from None


def _split(text: str) -> Iterable[str]:
    """Yield non-empty tokens separated by whitespace, commas or semicolons."""
    for token in _SEPARATORS.split(text):
        if token:
            yield token


def parse_numbers(text: str) -> list[int | float]:
    """Parse every number found in ``text``."""
    return [parse_number(token) for token in _split(text)]


def parse_tokens(tokens: Iterable[str]) -> list[int | float]:
    """Parse command line arguments, each of which may hold several numbers."""
    numbers: list[int | float] = []
    for token in tokens:
        numbers.extend(parse_numbers(token))
    return numbers
