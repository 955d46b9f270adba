from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from ..models.chart import ChartDisplayOptions, ChartDraft, DataPoint

if TYPE_CHECKING:
    from ..models.chart import ChartRecord
    from ..services.chart_stats import ChartStats


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _as_number(value: float) -> int | float:
    """Integral values travel as JSON integers, as the dashboard client sends them."""
    return int(value) if value.is_integer() else value


class DataPointPayload(_CamelModel):
    label: str
    value: float = Field(..., allow_inf_nan=False)

    @field_serializer("value")
    def _serialize_value(self, value: float) -> int | float:
        return _as_number(value)

    def to_model(self) -> DataPoint:
        return DataPoint(label=self.label, value=_as_number(self.value))

    @classmethod
    def from_model(cls, point: DataPoint) -> "DataPointPayload":
        return cls(label=point.label, value=point.value)


class ChartOptionsPayload(_CamelModel):
    show_grid: bool | None = None
    show_legend: bool | None = None
    show_data_labels: bool | None = None
    enable_animation: bool | None = None

    def to_model(self) -> ChartDisplayOptions:
        return ChartDisplayOptions(
            show_grid=self.show_grid,
            show_legend=self.show_legend,
            show_data_labels=self.show_data_labels,
            enable_animation=self.enable_animation,
        )

    @classmethod
    def from_model(cls, options: ChartDisplayOptions) -> "ChartOptionsPayload":
        return cls(
            show_grid=options.show_grid,
            show_legend=options.show_legend,
            show_data_labels=options.show_data_labels,
            enable_animation=options.enable_animation,
        )


class ChartCreateRequest(_CamelModel):
    title: str = Field(..., min_length=1)
    chart_type: str = Field(..., min_length=1)
    data: list[DataPointPayload]
    x_axis_label: str | None = None
    y_axis_label: str | None = None
    color_theme: str | None = None
    options: ChartOptionsPayload | None = None

    def to_draft(self) -> ChartDraft:
        return ChartDraft(
            title=self.title,
            chart_type=self.chart_type,
            data=[point.to_model() for point in self.data],
            x_axis_label=self.x_axis_label or "",
            y_axis_label=self.y_axis_label or "",
            color_theme=self.color_theme or "blue",
            options=self.options.to_model() if self.options else ChartDisplayOptions(),
        )


class ChartUpdateRequest(_CamelModel):
    title: str | None = Field(None, min_length=1)
    chart_type: str | None = Field(None, min_length=1)
    data: list[DataPointPayload] | None = None
    x_axis_label: str | None = None
    y_axis_label: str | None = None
    color_theme: str | None = None
    options: ChartOptionsPayload | None = None

    def to_changes(self) -> dict[str, Any]:
        """Fields the client actually sent, converted to model values.

        An explicit ``null`` on a required field is ignored; on an optional
        field it resets the field to its default.
        """
        changes: dict[str, Any] = {}
        sent = self.model_fields_set
        if "title" in sent and self.title is not None:
            changes["title"] = self.title
        if "chart_type" in sent and self.chart_type is not None:
            changes["chart_type"] = self.chart_type
        if "data" in sent and self.data is not None:
            changes["data"] = [point.to_model() for point in self.data]
        if "x_axis_label" in sent:
            changes["x_axis_label"] = self.x_axis_label or ""
        if "y_axis_label" in sent:
            changes["y_axis_label"] = self.y_axis_label or ""
        if "color_theme" in sent:
            changes["color_theme"] = self.color_theme or "blue"
        if "options" in sent:
            changes["options"] = self.options.to_model() if self.options else ChartDisplayOptions()
        return changes


class ChartResponse(_CamelModel):
    id: int
    title: str
    chart_type: str
    x_axis_label: str
    y_axis_label: str
    color_theme: str
    data: list[DataPointPayload]
    options: ChartOptionsPayload
    created_at: str

    @classmethod
    def from_model(cls, chart: "ChartRecord") -> "ChartResponse":
        return cls(
            id=chart.id,
            title=chart.title,
            chart_type=chart.chart_type,
            x_axis_label=chart.x_axis_label,
            y_axis_label=chart.y_axis_label,
            color_theme=chart.color_theme,
            data=[DataPointPayload.from_model(point) for point in chart.data],
            options=ChartOptionsPayload.from_model(chart.options),
            created_at=chart.created_at,
        )


class ChartStatsResponse(_CamelModel):
    data_points: int
    max_value: float
    average: float

    @classmethod
    def from_stats(cls, stats: "ChartStats") -> "ChartStatsResponse":
        return cls(data_points=stats.data_points, max_value=stats.max_value, average=stats.average)


class SampleDatasetResponse(_CamelModel):
    name: str
    data: list[DataPointPayload]


class MessageResponse(BaseModel):
    message: str
