"""
Builders for Sheets API payloads used across tests.

Only the fields tavola reads are filled in; the rest of the API's table
record (rowsProperties, column data types, ...) is left out.
"""

from typing import Any, Dict, Sequence, Tuple
from unittest.mock import Mock

from gspread.exceptions import APIError


def table_record(
    table_id: str,
    name: str,
    sheet_id: int,
    rows: Tuple[int, int],
    cols: Tuple[int, int],
    columns: Sequence[str] = (),
) -> Dict[str, Any]:
    """Build a table record as returned by spreadsheets.get.

    rows and cols are (start, end) pairs, 0-indexed and end-exclusive.
    """
    grid = {
        "startRowIndex": rows[0],
        "endRowIndex": rows[1],
        "startColumnIndex": cols[0],
        "endColumnIndex": cols[1],
    }
    # The API leaves out sheetId 0
    if sheet_id:
        grid["sheetId"] = sheet_id
    return {
        "tableId": table_id,
        "name": name,
        "range": grid,
        "columnProperties": [
            {"columnIndex": i, "columnName": column} for i, column in enumerate(columns)
        ],
    }


def make_api_error(code: int, message: str, status: str) -> APIError:
    """Build a gspread APIError as raised for an error response."""
    mock_response = Mock()
    mock_response.json.return_value = {
        "error": {
            "code": code,
            "message": message,
            "status": status
        }
    }
    return APIError(mock_response)
