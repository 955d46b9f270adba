from __future__ import annotations

from fastapi import Depends, Request

from ..repositories.chart_repository import ChartRepository
from ..services.chart_service import ChartService


def get_chart_repository(request: Request) -> ChartRepository:
    """FastAPI dependency returning the app-wide chart store."""
    return request.app.state.chart_repository


def get_chart_service(repo: ChartRepository = Depends(get_chart_repository)) -> ChartService:
    return ChartService(repo)
