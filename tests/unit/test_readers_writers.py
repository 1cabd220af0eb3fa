"""
Unit tests for the CSV/file readers and the output writer.
"""

import pytest

from cpa005.batch.readers import CSVReader, FileReader
from cpa005.batch.writers import OutputWriter


class TestCSVReader:
    """Tests for CSVReader"""

    @pytest.fixture
    def reader(self):
        return CSVReader()

    def test_rows_keep_line_numbers(self, reader):
        rows = reader.read_text("a,b\nc,d\n")

        assert [row.line_number for row in rows] == [1, 2]
        assert rows[1].values == ["c", "d"]

    def test_blank_rows_dropped(self, reader):
        rows = reader.read_text("a,b\n\n,,\n  , \nc,d\n")

        assert [row.values[0] for row in rows] == ["a", "c"]
        assert rows[1].line_number == 5

    def test_byte_order_mark_stripped(self, reader):
        rows = reader.read_text("\ufeffClient Name,Acme\n")
        assert rows[0].values[0] == "Client Name"

    def test_quoted_commas(self, reader):
        rows = reader.read_text('x,"$1,234.56",y\n')
        assert rows[0].values == ["x", "$1,234.56", "y"]

    def test_crlf_line_endings(self, reader):
        rows = reader.read_text("a,b\r\nc,d\r\n")
        assert [row.values for row in rows] == [["a", "b"], ["c", "d"]]

    def test_empty_input(self, reader):
        assert reader.read_text("") == []

    def test_custom_delimiter(self):
        rows = CSVReader(delimiter=";").read_text("a;b\n")
        assert rows[0].values == ["a", "b"]


class TestFileReader:
    """Tests for FileReader"""

    def test_reads_fixture(self, test_data_dir):
        rows = FileReader().read_rows(f"{test_data_dir}/payroll_credit.csv")

        assert rows[0].values[:2] == ["Client Name", "Northwind Traders"]
        # blank ",,,,,,,," line is dropped
        assert len(rows) == 11

    def test_utf8_bom_file(self, tmp_path):
        path = tmp_path / "bom.csv"
        path.write_bytes("\ufeffClient Name,Café\n".encode("utf-8"))

        assert FileReader().read(path) == "Client Name,Café\n"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileReader().read(tmp_path / "missing.csv")


class TestOutputWriter:
    """Tests for OutputWriter"""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            OutputWriter(tmp_path / "missing")

    def test_writes_with_input_stem(self, tmp_path):
        writer = OutputWriter(tmp_path, ".cpa")

        target = writer.write("in/payroll.csv", "A\nZ")

        assert target == tmp_path / "payroll.cpa"
        assert target.read_bytes() == b"A\nZ"

    def test_keeps_non_ascii_text(self, tmp_path):
        target = OutputWriter(tmp_path).write("clients.csv", "Société Générale")
        assert target.read_text(encoding="utf-8") == "Société Générale"
