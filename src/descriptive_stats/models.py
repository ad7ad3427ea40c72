"""Report records produced by the descriptive statistics aggregator."""

from typing import Any

import marshmallow as ma
from attrs import define, field


@define(slots=True, frozen=True)
class DescriptiveReport:
    """Bundle of the seven descriptive statistics for one input sequence."""

    maximum: float
    mean: float
    median: float
    minimum: float
    mode: list[float] = field(converter=list)
    range: float
    standard_deviation: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize the report into a JSON-ready mapping."""
        return DescriptiveReportSchema().dump(self)


class DescriptiveReportSchema(ma.Schema):
    """Marshmallow schema for :class:`DescriptiveReport`."""

    maximum = ma.fields.Float(required=True, allow_nan=True)
    mean = ma.fields.Float(required=True, allow_nan=True)
    median = ma.fields.Float(required=True, allow_nan=True)
    minimum = ma.fields.Float(required=True, allow_nan=True)
    mode = ma.fields.List(ma.fields.Float(allow_nan=True), required=True)
    range = ma.fields.Float(required=True, allow_nan=True)
    standard_deviation = ma.fields.Float(required=True, allow_nan=True, data_key="standardDeviation")

    @ma.post_load
    def make_report(self, data: dict[str, Any], **kwargs: object) -> DescriptiveReport:
        """Convert validated payloads into :class:`DescriptiveReport` objects."""
        return DescriptiveReport(**data)


__all__ = ["DescriptiveReport", "DescriptiveReportSchema"]
