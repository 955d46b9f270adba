from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import HTTPException, status

from ..models.chart import ChartDraft, ChartRecord
from ..repositories.chart_repository import ChartRepository
from .chart_options import build_chart_options
from .chart_stats import ChartStats, summarize_chart


log = logging.getLogger("chartboard.services.chart")

CHART_NOT_FOUND = "Chart not found"


class ChartService:
    def __init__(self, repo: ChartRepository):
        self.repo = repo

    def list_charts(self) -> list[ChartRecord]:
        charts = self.repo.list()
        log.debug("Chart listing count=%d", len(charts))
        return charts

    def get_chart(self, chart_id: int) -> ChartRecord:
        chart = self.repo.get(chart_id)
        if chart is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHART_NOT_FOUND)
        return chart

    def create_chart(self, draft: ChartDraft) -> ChartRecord:
        chart = self.repo.create(draft)
        log.info("Chart saved chart_id=%s title=%r", chart.id, chart.title)
        return chart

    def update_chart(self, chart_id: int, changes: Mapping[str, Any]) -> ChartRecord:
        chart = self.repo.update(chart_id, changes)
        if chart is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHART_NOT_FOUND)
        return chart

    def delete_chart(self, chart_id: int) -> None:
        if not self.repo.delete(chart_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHART_NOT_FOUND)
        log.info("Chart deletion chart_id=%s", chart_id)

    def chart_options(self, chart_id: int) -> dict[str, Any]:
        return build_chart_options(self.get_chart(chart_id))

    def chart_stats(self, chart_id: int) -> ChartStats:
        return summarize_chart(self.get_chart(chart_id))

    @staticmethod
    def preview_options(draft: ChartDraft) -> dict[str, Any]:
        """Options for an unsaved chart, as the editor's live preview needs them."""
        preview = ChartRecord(
            id=0,
            title=draft.title,
            chart_type=draft.chart_type,
            data=draft.data,
            created_at="",
            x_axis_label=draft.x_axis_label,
            y_axis_label=draft.y_axis_label,
            color_theme=draft.color_theme,
            options=draft.options,
        )
        return build_chart_options(preview)
