"""Unit tests for report serialization."""

import json
import math

import pytest

from descriptive_stats import DescriptiveReport, DescriptiveReportSchema, descriptive_statistics


@pytest.fixture
def report():
    """Return the report for a small sample."""
    return descriptive_statistics([1, 2, 3])


def test_to_dict_uses_report_field_names(report):
    """The JSON payload uses the aggregate record names."""
    payload = report.to_dict()
    assert set(payload) == {
        "maximum",
        "mean",
        "median",
        "minimum",
        "mode",
        "range",
        "standardDeviation",
    }
    assert payload["mode"] == [1.0, 2.0, 3.0]
    assert payload["standardDeviation"] == pytest.approx(math.sqrt(2 / 3))
    json.dumps(payload)


def test_schema_load_returns_report(report):
    """Loading a dumped payload rebuilds an equal report."""
    loaded = DescriptiveReportSchema().load(report.to_dict())
    assert isinstance(loaded, DescriptiveReport)
    assert loaded == report


def test_mode_is_stored_as_list():
    """Any iterable passed as mode is converted to a list."""
    report = DescriptiveReport(
        maximum=2,
        mean=1.5,
        median=1.5,
        minimum=1,
        mode=(1, 2),
        range=1,
        standard_deviation=0.5,
    )
    assert report.mode == [1, 2]
