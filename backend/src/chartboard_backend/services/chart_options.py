"""Derive ECharts option objects from chart records.

``build_chart_options`` is pure: the same record always yields an equal,
JSON-serializable dict, and every ``chart_type`` (including unknown ones)
produces a valid result.
"""

from __future__ import annotations

from typing import Any, Callable

from ..models.chart import ChartRecord, DataPoint


COLOR_THEMES: dict[str, list[str]] = {
    "blue": ["#1976D2", "#42A5F5", "#90CAF9", "#BBDEFB"],
    "green": ["#4CAF50", "#66BB6A", "#81C784", "#A5D6A7"],
    "purple": ["#9C27B0", "#BA68C8", "#CE93D8", "#E1BEE7"],
    "orange": ["#FF9800", "#FFB74D", "#FFCC02", "#FFE082"],
    "multicolor": ["#1976D2", "#4CAF50", "#FF9800", "#9C27B0", "#F44336", "#00BCD4"],
}
DEFAULT_THEME = "blue"

AREA_OPACITY = 0.3
RADAR_HEADROOM = 1.2


def resolve_palette(color_theme: str | None) -> list[str]:
    return list(COLOR_THEMES.get(color_theme or DEFAULT_THEME, COLOR_THEMES[DEFAULT_THEME]))


def hex_to_rgba(color: str, alpha: float) -> str:
    """``#1976D2`` -> ``rgba(25, 118, 210, 0.3)``."""
    raw = color.lstrip("#")
    channels = [int(raw[i : i + 2], 16) for i in range(0, 6, 2)]
    return f"rgba({', '.join(str(c) for c in channels)}, {alpha})"


def _shown_if_set(flag: bool | None) -> bool:
    return flag is True


def _shown_unless_disabled(flag: bool | None) -> bool:
    return flag is not False


def _base_options(chart: ChartRecord, palette: list[str]) -> dict[str, Any]:
    return {
        "title": {
            "text": chart.title,
            "left": "center",
            "textStyle": {"fontSize": 18, "fontWeight": "normal"},
        },
        "tooltip": {"trigger": "axis"},
        "grid": {
            "left": "10%",
            "right": "10%",
            "bottom": "15%",
            "top": "15%",
            "show": _shown_if_set(chart.options.show_grid),
        },
        "animation": _shown_if_set(chart.options.enable_animation),
        "color": palette,
    }


def _category_axes(chart: ChartRecord, data: list[DataPoint]) -> dict[str, Any]:
    return {
        "xAxis": {
            "type": "category",
            "data": [point.label for point in data],
            "name": chart.x_axis_label,
            "nameLocation": "middle",
            "nameGap": 30,
        },
        "yAxis": {
            "type": "value",
            "name": chart.y_axis_label,
            "nameLocation": "middle",
            "nameGap": 50,
        },
    }


def _legend(chart: ChartRecord) -> dict[str, Any]:
    return {"legend": {"show": _shown_if_set(chart.options.show_legend)}}


def _bar(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    return {
        **_category_axes(chart, data),
        "series": [
            {
                "data": [point.value for point in data],
                "type": "bar",
                "itemStyle": {"color": palette[0]},
                "label": {"show": _shown_if_set(chart.options.show_data_labels), "position": "top"},
            }
        ],
        **_legend(chart),
    }


def _line(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    return {
        **_category_axes(chart, data),
        "series": [
            {
                "data": [point.value for point in data],
                "type": "line",
                "smooth": True,
                "itemStyle": {"color": palette[0]},
                "lineStyle": {"color": palette[0]},
                "label": {"show": _shown_if_set(chart.options.show_data_labels), "position": "top"},
            }
        ],
        **_legend(chart),
    }


def _pie(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    # Labels and legend stay visible unless explicitly switched off.
    return {
        "series": [
            {
                "name": chart.title,
                "type": "pie",
                "radius": "50%",
                "data": [
                    {
                        "value": point.value,
                        "name": point.label,
                        "itemStyle": {"color": palette[index % len(palette)]},
                    }
                    for index, point in enumerate(data)
                ],
                "label": {
                    "show": _shown_unless_disabled(chart.options.show_data_labels),
                    "formatter": "{b}: {c} ({d}%)",
                },
                "emphasis": {
                    "itemStyle": {
                        "shadowBlur": 10,
                        "shadowOffsetX": 0,
                        "shadowColor": "rgba(0, 0, 0, 0.5)",
                    }
                },
            }
        ],
        "legend": {
            "show": _shown_unless_disabled(chart.options.show_legend),
            "orient": "vertical",
            "left": "left",
        },
    }


def _scatter(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    # x is the point's position in ``data``; the label travels with the point
    # as ``name`` so the "{b}" formatter never has to index back into the dataset.
    return {
        "xAxis": {
            "type": "value",
            "name": chart.x_axis_label,
            "nameLocation": "middle",
            "nameGap": 30,
        },
        "yAxis": {
            "type": "value",
            "name": chart.y_axis_label,
            "nameLocation": "middle",
            "nameGap": 50,
        },
        "series": [
            {
                "symbolSize": 8,
                "data": [
                    {"value": [index, point.value], "name": point.label}
                    for index, point in enumerate(data)
                ],
                "type": "scatter",
                "itemStyle": {"color": palette[0]},
                "label": {"show": _shown_if_set(chart.options.show_data_labels), "formatter": "{b}"},
            }
        ],
        **_legend(chart),
    }


def _area(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    return {
        **_category_axes(chart, data),
        "series": [
            {
                "data": [point.value for point in data],
                "type": "line",
                "areaStyle": {"color": hex_to_rgba(palette[0], AREA_OPACITY)},
                "itemStyle": {"color": palette[0]},
                "lineStyle": {"color": palette[0]},
                "label": {"show": _shown_if_set(chart.options.show_data_labels), "position": "top"},
            }
        ],
        **_legend(chart),
    }


def _radar(chart: ChartRecord, data: list[DataPoint], palette: list[str]) -> dict[str, Any]:
    peak = max((point.value for point in data), default=0) * RADAR_HEADROOM
    return {
        "radar": {"indicator": [{"name": point.label, "max": peak} for point in data]},
        "series": [
            {
                "name": chart.title,
                "type": "radar",
                "data": [
                    {
                        "value": [point.value for point in data],
                        "name": "Data",
                        "itemStyle": {"color": palette[0]},
                        "areaStyle": {"color": hex_to_rgba(palette[0], AREA_OPACITY)},
                    }
                ],
                "label": {"show": _shown_if_set(chart.options.show_data_labels)},
            }
        ],
        **_legend(chart),
    }


_BUILDERS: dict[str, Callable[[ChartRecord, list[DataPoint], list[str]], dict[str, Any]]] = {
    "bar": _bar,
    "line": _line,
    "pie": _pie,
    "scatter": _scatter,
    "area": _area,
    "radar": _radar,
}


def build_chart_options(chart: ChartRecord) -> dict[str, Any]:
    data = list(chart.data or [])
    palette = resolve_palette(chart.color_theme)
    options = _base_options(chart, palette)
    builder = _BUILDERS.get(chart.chart_type)
    if builder is None:
        return options
    options.update(builder(chart, data, palette))
    return options
