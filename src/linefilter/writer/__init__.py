"""Writer module for category output files."""

from .writer import OUTPUT_BASENAMES, OutputWriter, WriteResult

__all__ = [
    "OutputWriter",
    "WriteResult",
    "OUTPUT_BASENAMES",
]
