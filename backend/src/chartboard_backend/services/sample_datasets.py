from __future__ import annotations

from ..models.chart import DataPoint


SAMPLE_DATASETS: dict[str, list[tuple[str, float]]] = {
    "sales": [
        ("Jan", 45000),
        ("Feb", 52000),
        ("Mar", 38000),
        ("Apr", 61000),
        ("May", 48000),
        ("Jun", 55000),
    ],
    "analytics": [
        ("Page Views", 12500),
        ("Unique Visitors", 8300),
        ("Sessions", 9200),
        ("Bounce Rate", 32),
    ],
    "products": [
        ("Product A", 85),
        ("Product B", 92),
        ("Product C", 78),
        ("Product D", 96),
    ],
}


def list_sample_datasets() -> list[str]:
    return list(SAMPLE_DATASETS)


def load_sample_dataset(name: str) -> list[DataPoint] | None:
    """Fresh copy of a built-in dataset, or ``None`` when ``name`` is unknown."""
    rows = SAMPLE_DATASETS.get(name.strip().lower())
    if rows is None:
        return None
    return [DataPoint(label=label, value=value) for label, value in rows]
