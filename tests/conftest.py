"""
Pytest configuration and fixtures for the CPA-005 converter tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import os
from datetime import date

import pytest

from cpa005.batch.pipeline import ConversionPipeline
from cpa005.core.models import HeaderMetadata, ProcessingCentre


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't require external services"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full conversion pipeline"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests through the command-line interface"
    )


# =======================
# INPUT FIXTURES
# =======================

DEFAULT_METADATA = {
    "Client Name": "Acme",
    "Client Number": "1234567890",
    "Processing Centre": "00300",
    "Currency Code": "CAD",
    "Payment Date": "2023/01/15",
    "Transaction Code": "200",
}

COLUMN_TITLES = "Customer Number,Customer Name,Bank,Branch,Account,Amount,Suspend,TODO,Total"

SAMPLE_ROW = "cust1,John Doe,0001,00001,123456789012,$100.00,N,,"


def build_payment_list(rows: list[str], **metadata_overrides: str) -> str:
    """
    Build input text with metadata, a column-title row and data rows.

    Keyword overrides use the metadata key with spaces replaced by
    underscores, e.g. ``Client_Number="12345"``.
    """
    metadata = dict(DEFAULT_METADATA)
    for key, value in metadata_overrides.items():
        metadata[key.replace("_", " ")] = value

    lines = [f"{key},{value}" for key, value in metadata.items()]
    lines.append(COLUMN_TITLES)
    lines.extend(rows)
    return "\n".join(lines) + "\n"


@pytest.fixture
def payment_list_factory():
    """Factory building payment-list text (see build_payment_list)."""
    return build_payment_list


@pytest.fixture
def sample_payment_list() -> str:
    """The one-row Acme payment list."""
    return build_payment_list([SAMPLE_ROW])


@pytest.fixture
def creation_date() -> date:
    """Fixed file creation date (ordinal day 46 of 2023)."""
    return date(2023, 2, 15)


@pytest.fixture
def pipeline() -> ConversionPipeline:
    return ConversionPipeline()


@pytest.fixture
def metadata() -> HeaderMetadata:
    return HeaderMetadata(
        client_name="Acme Payroll Services Limited",
        client_number="1234567890",
        processing_centre=ProcessingCentre.TORONTO,
        payment_date=(2023, 15),
        transaction_code="200",
    )


@pytest.fixture(scope="session")
def test_data_dir() -> str:
    """Path to tests/fixtures"""
    return os.path.join(os.path.dirname(__file__), "fixtures")
