"""Plain-text rendering helpers for statistics reports."""

import math
import numbers
from collections.abc import Iterable

from ..models import DescriptiveReport

REPORT_LABELS: tuple[tuple[str, str], ...] = (
    ("maximum", "Maximum"),
    ("mean", "Mean"),
    ("median", "Median"),
    ("minimum", "Minimum"),
    ("mode", "Mode"),
    ("range", "Range"),
    ("standard_deviation", "Standard deviation"),
)


def format_number(value: numbers.Real, *, precision: int = 6) -> str:
    """Render integral values without a fractional part and others to ``precision`` digits."""
    if isinstance(value, numbers.Integral):
        return str(value)
    as_float = float(value)
    if math.isfinite(as_float) and as_float.is_integer():
        return str(int(as_float))
    return f"{as_float:.{precision}g}"


def format_values(values: Iterable[numbers.Real], *, precision: int = 6) -> str:
    """Render several numbers separated by single spaces."""
    return " ".join(format_number(value, precision=precision) for value in values)


def format_report(report: DescriptiveReport, *, precision: int = 6) -> str:
    """Render a report as an aligned two-column table."""
    width = max(len(label) for _, label in REPORT_LABELS)
    lines = []
    for name, label in REPORT_LABELS:
        value = getattr(report, name)
        if name == "mode":
            rendered = format_values(value, precision=precision)
        else:
            rendered = format_number(value, precision=precision)
        lines.append(f"{label.ljust(width)}  {rendered}")
    return "\n".join(lines)
