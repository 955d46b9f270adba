from __future__ import annotations

from dataclasses import dataclass

from ..models.chart import ChartRecord


@dataclass(slots=True, frozen=True)
class ChartStats:
    data_points: int
    max_value: float
    average: float


def summarize_chart(chart: ChartRecord) -> ChartStats:
    """Point count, peak and mean of a chart's values; all zero when empty."""
    values = [point.value for point in chart.data or []]
    if not values:
        return ChartStats(data_points=0, max_value=0, average=0)
    return ChartStats(
        data_points=len(values),
        max_value=max(values),
        average=sum(values) / len(values),
    )
