"""
Payment list readers.
"""

from .csv_reader import CSVReadError, CSVReader
from .file_reader import FileReader

__all__ = [
    "CSVReader",
    "CSVReadError",
    "FileReader",
]
