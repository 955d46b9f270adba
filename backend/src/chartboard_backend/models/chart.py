from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class DataPoint:
    label: str
    value: float


@dataclass(slots=True, frozen=True)
class ChartDisplayOptions:
    """Display flags of a chart.

    ``None`` means the flag was never set, which some chart types read
    differently from an explicit ``False``.
    """

    show_grid: bool | None = None
    show_legend: bool | None = None
    show_data_labels: bool | None = None
    enable_animation: bool | None = None


@dataclass(slots=True, frozen=True)
class ChartDraft:
    """Chart fields supplied by a caller before the store assigns identity."""

    title: str
    chart_type: str
    data: list[DataPoint] = field(default_factory=list)
    x_axis_label: str = ""
    y_axis_label: str = ""
    color_theme: str = "blue"
    options: ChartDisplayOptions = field(default_factory=ChartDisplayOptions)


@dataclass(slots=True, frozen=True)
class ChartRecord:
    id: int
    title: str
    chart_type: str
    data: list[DataPoint]
    created_at: str
    x_axis_label: str = ""
    y_axis_label: str = ""
    color_theme: str = "blue"
    options: ChartDisplayOptions = field(default_factory=ChartDisplayOptions)
