"""
File reader that loads payment lists from disk.
"""

from pathlib import Path

from .csv_reader import CSVReader


class FileReader:
    """
    Loads an input file as text for the conversion pipeline.
    """

    def __init__(self, encoding: str = "utf-8-sig"):
        """
        Initialize file reader.

        Args:
            encoding: Text encoding; the default accepts UTF-8 with or without a BOM
        """
        self.encoding = encoding
        self.csv_reader = CSVReader()

    def read(self, file_path: str | Path) -> str:
        """
        Read a file into a string.

        Raises:
            FileNotFoundError: If the file does not exist
            UnicodeDecodeError: If the file is not valid text in ``encoding``
        """
        return Path(file_path).read_text(encoding=self.encoding)

    def read_rows(self, file_path: str | Path):
        """Read a file and tokenize it with CSVReader."""
        return self.csv_reader.read_text(self.read(file_path))
