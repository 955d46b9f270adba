from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status

from ...schemas.chart import (
    ChartCreateRequest,
    ChartResponse,
    ChartStatsResponse,
    ChartUpdateRequest,
    MessageResponse,
)
from ...services.chart_service import ChartService
from ..deps import get_chart_service


router = APIRouter(prefix="/charts")


@router.get("", response_model=list[ChartResponse], response_model_exclude_none=True)
def list_charts(  # type: ignore[valid-type]
    service: ChartService = Depends(get_chart_service),
) -> list[ChartResponse]:
    return [ChartResponse.from_model(chart) for chart in service.list_charts()]


@router.get("/{chart_id}", response_model=ChartResponse, response_model_exclude_none=True)
def get_chart(  # type: ignore[valid-type]
    chart_id: int,
    service: ChartService = Depends(get_chart_service),
) -> ChartResponse:
    return ChartResponse.from_model(service.get_chart(chart_id))


@router.post(
    "",
    response_model=ChartResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_chart(  # type: ignore[valid-type]
    payload: ChartCreateRequest,
    service: ChartService = Depends(get_chart_service),
) -> ChartResponse:
    chart = service.create_chart(payload.to_draft())
    return ChartResponse.from_model(chart)


@router.put("/{chart_id}", response_model=ChartResponse, response_model_exclude_none=True)
def update_chart(  # type: ignore[valid-type]
    chart_id: int,
    payload: ChartUpdateRequest,
    service: ChartService = Depends(get_chart_service),
) -> ChartResponse:
    chart = service.update_chart(chart_id, payload.to_changes())
    return ChartResponse.from_model(chart)


@router.delete("/{chart_id}", response_model=MessageResponse)
def delete_chart(  # type: ignore[valid-type]
    chart_id: int,
    service: ChartService = Depends(get_chart_service),
) -> MessageResponse:
    service.delete_chart(chart_id)
    return MessageResponse(message="Chart deleted successfully")


@router.get("/{chart_id}/options")
def get_chart_options(  # type: ignore[valid-type]
    chart_id: int,
    service: ChartService = Depends(get_chart_service),
) -> dict[str, Any]:
    return service.chart_options(chart_id)


@router.get("/{chart_id}/stats", response_model=ChartStatsResponse)
def get_chart_stats(  # type: ignore[valid-type]
    chart_id: int,
    service: ChartService = Depends(get_chart_service),
) -> ChartStatsResponse:
    return ChartStatsResponse.from_stats(service.chart_stats(chart_id))


preview_router = APIRouter()


@preview_router.post("/chart-options")
def preview_chart_options(payload: ChartCreateRequest) -> dict[str, Any]:  # type: ignore[valid-type]
    return ChartService.preview_options(payload.to_draft())
