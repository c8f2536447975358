"""Shared pytest configuration and fixtures for tavola tests."""

import copy
from unittest.mock import Mock

import gspread
import pytest

from tavola.app import TableApp

from tests.helpers.records import table_record


def pytest_addoption(parser):
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="Include tests marked @pytest.mark.slow (e.g. live Google Sheets)",
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (skipped unless --run-slow)")


def pytest_collection_modifyitems(config, items):
    if config.getoption("--run-slow"):
        return
    skip = pytest.mark.skip(reason="slow test; pass --run-slow to include")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def metadata():
    """spreadsheets.get response: two tables on Sheet1, none on Empty."""
    return {
        "sheets": [
            {
                "properties": {"sheetId": 0, "title": "Sheet1"},
                "tables": [
                    table_record("t1", "T1", 0, (0, 4), (0, 4), ["ID", "Product", "Price", "Stock"]),
                    table_record("t2", "T2", 0, (5, 8), (0, 2), ["Key", "Value"]),
                ],
            },
            {
                "properties": {"sheetId": 123, "title": "Empty"},
            },
        ],
    }


@pytest.fixture
def state(metadata):
    """Mutable server-side state read by the mocked spreadsheet."""
    return {"metadata": metadata}


@pytest.fixture
def spreadsheet(state):
    """Mocked gspread Spreadsheet serving ``state['metadata']``."""
    mock_spreadsheet = Mock(spec=gspread.Spreadsheet)
    mock_spreadsheet.fetch_sheet_metadata.side_effect = (
        lambda params=None: copy.deepcopy(state["metadata"])
    )
    mock_spreadsheet.batch_update.return_value = {"replies": [{}]}
    return mock_spreadsheet


@pytest.fixture
def gc(spreadsheet):
    """Mocked gspread Client whose open_by_key returns ``spreadsheet``."""
    mock_gc = Mock(spec=gspread.Client)
    mock_gc.open_by_key.return_value = spreadsheet
    return mock_gc


@pytest.fixture
def app(gc):
    return TableApp("spreadsheet-id", gc)
