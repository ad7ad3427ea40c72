"""Rendering utilities for descriptive statistics."""

from .utils import REPORT_LABELS, format_number, format_report, format_values

__all__ = [
    "REPORT_LABELS",
    "format_number",
    "format_report",
    "format_values",
]
