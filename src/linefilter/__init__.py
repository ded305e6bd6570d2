"""
LineFilter - sort the lines of text files into integers, decimals and strings.

Lines from several inputs are read in round-robin order, classified, and written
to one output file per category, with optional summary statistics.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import Category, ClassifiedValue, classify
from .config import ConfigManager, FilterConfig
from .core import LineProcessor, ProcessingResult, StatisticsReport, compute_statistics
from .utils.logging import get_logger
from .writer import OutputWriter, WriteResult

__all__ = [
    "get_logger",
    # Classifier
    "Category",
    "ClassifiedValue",
    "classify",
    # Config
    "ConfigManager",
    "FilterConfig",
    # Core processor
    "LineProcessor",
    "ProcessingResult",
    "StatisticsReport",
    "compute_statistics",
    # Writer
    "OutputWriter",
    "WriteResult",
]
