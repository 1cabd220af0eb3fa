"""
Payment list conversion module.
"""

from .pipeline import ConversionPipeline, convert
from .readers import CSVReader, FileReader
from .writers import OutputWriter

__all__ = [
    "ConversionPipeline",
    "convert",
    "CSVReader",
    "FileReader",
    "OutputWriter",
]
