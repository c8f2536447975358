"""
Spreadsheet module.

This module provides the range model, the A1 notation codec, and the
batch-update requests that tavola sends to the Sheets API.
"""

from tavola.spreadsheet.model import GridRange, Notation
from tavola.spreadsheet.notation import (
    index_to_letter,
    letter_to_index,
    parse_notation,
    quote_sheet_name,
    to_grid_range,
    to_notation,
)
from tavola.spreadsheet.operations import (
    AddTable,
    CopyPaste,
    DeleteTable,
    TableRequest,
    UpdateCells,
    UpdateColumnProperties,
    UpdateRowsProperties,
    UpdateTableName,
    UpdateTableRange,
    op_from_dict,
)

__all__ = [
    "GridRange",
    "Notation",
    "index_to_letter",
    "letter_to_index",
    "parse_notation",
    "quote_sheet_name",
    "to_grid_range",
    "to_notation",
    "AddTable",
    "CopyPaste",
    "DeleteTable",
    "TableRequest",
    "UpdateCells",
    "UpdateColumnProperties",
    "UpdateRowsProperties",
    "UpdateTableName",
    "UpdateTableRange",
    "op_from_dict",
]
