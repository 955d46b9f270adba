from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...schemas.chart import DataPointPayload, SampleDatasetResponse
from ...services.sample_datasets import list_sample_datasets, load_sample_dataset


router = APIRouter(prefix="/sample-datasets")


@router.get("", response_model=list[str])
def list_samples() -> list[str]:
    return list_sample_datasets()


@router.get("/{name}", response_model=SampleDatasetResponse)
def get_sample(name: str) -> SampleDatasetResponse:
    points = load_sample_dataset(name)
    if points is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sample dataset not found")
    return SampleDatasetResponse(
        name=name.strip().lower(),
        data=[DataPointPayload.from_model(point) for point in points],
    )
