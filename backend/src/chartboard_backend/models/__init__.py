from .chart import ChartDisplayOptions, ChartDraft, ChartRecord, DataPoint

__all__ = [
    "ChartDisplayOptions",
    "ChartDraft",
    "ChartRecord",
    "DataPoint",
]
