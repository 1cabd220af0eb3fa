"""
CSV reader for payment lists held in memory.
"""

import csv
import io

from cpa005.core.models import SourceRow

BYTE_ORDER_MARK = "\ufeff"


class CSVReadError(ValueError):
    """Raised when the delimited text cannot be tokenized."""


class CSVReader:
    """
    Splits delimited text into rows, dropping blank lines.

    A row counts as blank when every cell is empty or whitespace, so the
    metadata block may be separated by empty lines or lines of bare commas.
    """

    def __init__(self, delimiter: str = ","):
        """
        Initialize CSV reader.

        Args:
            delimiter: Field delimiter
        """
        self.delimiter = delimiter

    def read_text(self, text: str) -> list[SourceRow]:
        """
        Tokenize ``text`` into non-blank rows.

        Args:
            text: Entire input; a leading byte order mark is ignored

        Returns:
            Rows with their 1-based line numbers

        Raises:
            CSVReadError: If the csv module rejects the input
        """
        if text.startswith(BYTE_ORDER_MARK):
            text = text[len(BYTE_ORDER_MARK):]

        reader = csv.reader(io.StringIO(text, newline=""), delimiter=self.delimiter)
        rows = []
        try:
            for values in reader:
                if any(cell.strip() for cell in values):
                    rows.append(SourceRow(line_number=reader.line_num, values=values))
        except csv.Error as e:
            raise CSVReadError(f"Could not read line {reader.line_num}: {e}") from e

        return rows
