"""
tavola - An object-oriented wrapper for Google Sheets Tables.

This package maps table operations (create, read, rename, move, restyle,
copy, delete) onto the Sheets API "Table" resource through gspread, and
converts between A1 notation and the API's GridRange structure.

Usage:
    >>> import gspread
    >>> import tavola
    >>> app = tavola.open_by_id("1AbC...", gspread.service_account())
    >>> table = app.get_range("'Sheet1'!A1:D4").create("Products")
    >>> table.get_range()
    "'Sheet1'!A1:D4"

Key components:
- TableApp: Session object for one spreadsheet, with a cached table index
- Table: One table, with read and mutation methods
- spreadsheet: GridRange model, A1 notation codec and batch-update requests
- tables: Table index, cache and target resolution
"""

import logging

from .app import TableApp, open_by_id
from .client import SheetsClient
from .config import Settings, configure_logging
from .exceptions import *
from .spreadsheet import GridRange, to_grid_range, to_notation
from .table import Table

# Version
__version__ = "0.1.0"

__all__ = [
    'TableApp',
    'Table',
    'SheetsClient',
    'Settings',
    'GridRange',
    'open_by_id',
    'to_grid_range',
    'to_notation',
    'configure_logging',
    'TavolaError',
    'NotationError',
    'MalformedNotationError',
    'InvalidColumnLetterError',
    'InvalidColumnIndexError',
    'MissingRangeError',
    'SheetNotFoundError',
    'TableNotFoundError',
    'SheetsAPIError',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
