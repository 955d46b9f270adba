from __future__ import annotations

import logging
import threading
from dataclasses import fields, replace
from datetime import datetime, timezone
from typing import Any, Mapping, Protocol

from ..models.chart import ChartDisplayOptions, ChartDraft, ChartRecord, DataPoint


log = logging.getLogger("chartboard.repositories.chart")

_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})
_UPDATABLE_FIELDS = frozenset(f.name for f in fields(ChartRecord)) - _IMMUTABLE_FIELDS


class ChartRepository(Protocol):
    def list(self) -> list[ChartRecord]: ...

    def get(self, chart_id: int) -> ChartRecord | None: ...

    def create(self, draft: ChartDraft) -> ChartRecord: ...

    def update(self, chart_id: int, changes: Mapping[str, Any]) -> ChartRecord | None: ...

    def delete(self, chart_id: int) -> bool: ...


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _detached(chart: ChartRecord) -> ChartRecord:
    # Records are frozen; only the point list needs copying.
    return replace(chart, data=list(chart.data))


class InMemoryChartRepository:
    """Process-local chart store; contents are lost on restart.

    Identifiers start at 1 and are never reused, even after deletes.
    """

    def __init__(self, *, seed: bool = True):
        self._charts: dict[int, ChartRecord] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        if seed:
            self.seed_sample_chart()

    def seed_sample_chart(self) -> ChartRecord:
        chart = self.create(
            ChartDraft(
                title="Sales Performance Q4 2024",
                chart_type="bar",
                x_axis_label="Months",
                y_axis_label="Revenue ($)",
                color_theme="blue",
                data=[
                    DataPoint("Jan", 45000),
                    DataPoint("Feb", 52000),
                    DataPoint("Mar", 38000),
                    DataPoint("Apr", 61000),
                    DataPoint("May", 48000),
                    DataPoint("Jun", 55000),
                    DataPoint("Jul", 49000),
                    DataPoint("Aug", 67000),
                    DataPoint("Sep", 59000),
                    DataPoint("Oct", 62000),
                    DataPoint("Nov", 48000),
                    DataPoint("Dec", 58000),
                ],
                options=ChartDisplayOptions(
                    show_grid=True,
                    show_legend=True,
                    show_data_labels=False,
                    enable_animation=True,
                ),
            )
        )
        log.info("Sample chart seeded (chart_id=%s)", chart.id)
        return chart

    def list(self) -> list[ChartRecord]:
        with self._lock:
            charts = [_detached(chart) for chart in self._charts.values()]
        log.debug("Retrieved %d charts", len(charts))
        return charts

    def get(self, chart_id: int) -> ChartRecord | None:
        with self._lock:
            chart = self._charts.get(chart_id)
            return _detached(chart) if chart is not None else None

    def create(self, draft: ChartDraft) -> ChartRecord:
        with self._lock:
            chart_id = self._next_id
            self._next_id += 1
            chart = ChartRecord(
                id=chart_id,
                title=draft.title,
                chart_type=draft.chart_type,
                data=list(draft.data),
                created_at=_now_iso(),
                x_axis_label=draft.x_axis_label,
                y_axis_label=draft.y_axis_label,
                color_theme=draft.color_theme,
                options=draft.options,
            )
            self._charts[chart_id] = chart
        log.info("Chart created (chart_id=%s, type=%s)", chart_id, chart.chart_type)
        return _detached(chart)

    def update(self, chart_id: int, changes: Mapping[str, Any]) -> ChartRecord | None:
        # Shallow overwrite: ``data`` and ``options`` are replaced, never merged.
        patch = {key: value for key, value in changes.items() if key in _UPDATABLE_FIELDS}
        if "data" in patch:
            patch["data"] = list(patch["data"])
        ignored = sorted(set(changes) - set(patch))
        if ignored:
            log.debug("Ignoring non-updatable chart fields: %s", ", ".join(ignored))
        with self._lock:
            existing = self._charts.get(chart_id)
            if existing is None:
                return None
            updated = replace(existing, **patch)
            self._charts[chart_id] = updated
        log.info("Chart updated (chart_id=%s, fields=%s)", chart_id, sorted(patch))
        return _detached(updated)

    def delete(self, chart_id: int) -> bool:
        with self._lock:
            removed = self._charts.pop(chart_id, None) is not None
        if removed:
            log.info("Chart removed (chart_id=%s)", chart_id)
        return removed
