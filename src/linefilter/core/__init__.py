"""Core module containing the processing orchestrator and statistics."""

from .processor import InputSource, LineProcessor, ProcessingResult
from .statistics import (
    NumericSummary,
    StatisticsReport,
    StringSummary,
    compute_statistics,
)

__all__ = [
    "LineProcessor",
    "ProcessingResult",
    "InputSource",
    "StatisticsReport",
    "NumericSummary",
    "StringSummary",
    "compute_statistics",
]
