"""
Unit tests for header metadata parsing.
"""

import pytest

from cpa005.core.header import HeaderMetadataParser
from cpa005.core.models import CurrencyType, ProcessingCentre, SourceRow


def make_rows(pairs):
    return iter(
        SourceRow(line_number=i, values=list(values))
        for i, values in enumerate(pairs, start=1)
    )


VALID_HEADER = [
    ("Client Name", "Acme"),
    ("Client Number", "1234567890"),
    ("Processing Centre", "00320"),
    ("Currency Code", "usd"),
    ("Payment Date", "2023/01/15"),
    ("Transaction Code", "200"),
]


class TestHeaderMetadataParser:
    """Tests for HeaderMetadataParser"""

    @pytest.fixture
    def parser(self):
        return HeaderMetadataParser()

    def test_valid_header(self, parser):
        metadata, errors = parser.parse(make_rows(VALID_HEADER))

        assert errors.is_empty()
        assert metadata.client_name == "Acme"
        assert metadata.client_number == "1234567890"
        assert metadata.processing_centre is ProcessingCentre.TORONTO
        assert metadata.currency is CurrencyType.USD
        assert metadata.payment_date == (2023, 15)
        assert metadata.transaction_code == "200"

    def test_leaves_iterator_after_header(self, parser):
        rows = make_rows(VALID_HEADER + [("Customer Number", "Customer Name")])

        parser.parse(rows)

        assert next(rows).values[0] == "Customer Number"

    def test_short_processing_centre_is_padded(self, parser):
        header = list(VALID_HEADER)
        header[2] = ("Processing Centre", "278")

        metadata, errors = parser.parse(make_rows(header))

        assert errors.is_empty()
        assert metadata.processing_centre is ProcessingCentre.REGINA

    def test_unknown_processing_centre_defaults_to_vancouver(self, parser):
        header = list(VALID_HEADER)
        header[2] = ("Processing Centre", "999")

        metadata, errors = parser.parse(make_rows(header))

        assert metadata.processing_centre is ProcessingCentre.VANCOUVER
        assert errors.messages == ["Invalid Processing Centre: 00999 specified in metadata header"]

    def test_unknown_currency_defaults_to_cad(self, parser):
        header = list(VALID_HEADER)
        header[3] = ("Currency Code", "eur")

        metadata, errors = parser.parse(make_rows(header))

        assert metadata.currency is CurrencyType.CAD
        assert errors.messages == ["Invalid Currency Code: EUR specified in metadata header"]

    @pytest.mark.parametrize("raw", ["2023-01-15", "15/01/2023", "2023/02/30", "soon"])
    def test_bad_payment_date(self, parser, raw):
        header = list(VALID_HEADER)
        header[4] = ("Payment Date", raw)

        metadata, errors = parser.parse(make_rows(header))

        assert metadata.payment_date == (0, 0)
        assert len(errors) == 1
        assert errors.messages[0].startswith("Could not parse payment date")

    def test_leap_year_ordinal_day(self, parser):
        header = list(VALID_HEADER)
        header[4] = ("Payment Date", "2024/12/31")

        metadata, _ = parser.parse(make_rows(header))

        assert metadata.payment_date == (2024, 366)

    def test_wrong_key_consumes_row_and_continues(self, parser):
        header = list(VALID_HEADER)
        header[1] = ("Client No", "1234567890")

        metadata, errors = parser.parse(make_rows(header))

        assert errors.messages == ["Expected metadata key Client Number, got Client No instead (line 2)"]
        assert metadata.client_number == ""
        # The following keys still line up
        assert metadata.processing_centre is ProcessingCentre.TORONTO
        assert metadata.transaction_code == "200"

    def test_missing_value(self, parser):
        header = list(VALID_HEADER)
        header[0] = ("Client Name",)

        _, errors = parser.parse(make_rows(header))

        assert errors.messages == ["Expected value for metadata key Client Name (line 1)"]

    def test_truncated_header_reports_every_missing_row(self, parser):
        metadata, errors = parser.parse(make_rows(VALID_HEADER[:4]))

        assert errors.messages == [
            "Could not read metadata row: Payment Date",
            "Could not read metadata row: Transaction Code",
        ]
        assert metadata.payment_date == (0, 0)

    def test_client_name_length_checked(self, parser):
        header = list(VALID_HEADER)
        header[0] = ("Client Name", "X" * 31)

        metadata, errors = parser.parse(make_rows(header))

        assert errors.messages == ["Client Name must not exceed 30 characters, received 31"]
        assert metadata.client_name == "X" * 31

    @pytest.mark.parametrize(
        "client_number,message",
        [
            ("12345", "Client Number must be exactly 10 characters long, received 5 instead"),
            ("12345abcde", "Client Number must only include digits"),
        ],
    )
    def test_client_number_checked(self, parser, client_number, message):
        header = list(VALID_HEADER)
        header[1] = ("Client Number", client_number)

        _, errors = parser.parse(make_rows(header))

        assert errors.messages == [message]

    def test_transaction_code_checked(self, parser):
        header = list(VALID_HEADER)
        header[5] = ("Transaction Code", "20")

        _, errors = parser.parse(make_rows(header))

        assert errors.messages == [
            "Transaction Code must be exactly 3 characters long, received 2 instead"
        ]

    def test_multiple_errors_in_one_pass(self, parser):
        header = list(VALID_HEADER)
        header[2] = ("Processing Centre", "1")
        header[3] = ("Currency Code", "GBP")
        header[4] = ("Payment Date", "tomorrow")

        _, errors = parser.parse(make_rows(header))

        assert len(errors) == 3
