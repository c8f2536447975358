"""
A1 notation codec.

Converts between the notation used in spreadsheet formulas and the UI
(``'My Sheet'!A1:C10``) and the GridRange structure used by the Sheets API.

Conversions are pure and stateless. Every invalid input raises a specific
NotationError subclass; nothing is partially converted.

Example:
    >>> to_grid_range("B2:A1", sheet_id=0).to_dict()
    {'sheetId': 0, 'startRowIndex': 0, 'endRowIndex': 2, 'startColumnIndex': 0, 'endColumnIndex': 2}
    >>> to_notation(GridRange(0, 4, 5, 2, 3), "Sheet1")
    "'Sheet1'!C5"
"""

import re
from typing import Any, List, Mapping, Optional, Union

from tavola.exceptions import (
    InvalidColumnIndexError,
    InvalidColumnLetterError,
    MalformedNotationError,
    MissingRangeError,
)
from tavola.spreadsheet.model import GridRange, Notation


# One corner of a range: optional column letters, optional row digits.
# "$" absolute markers are accepted and carry no meaning here.
_CORNER_RE = re.compile(r"^\$?([A-Za-z]*)\$?([0-9]*)$")


def quote_sheet_name(sheet_name: str) -> str:
    """Quote a sheet name for use in A1 notation (``'it''s'`` for ``it's``)."""
    return "'" + sheet_name.replace("'", "''") + "'"


def parse_notation(notation: Optional[str]) -> Notation:
    """Split A1 notation into sheet name and range text.

    The split happens on the last ``!``. A single-quoted sheet name is
    unquoted (``''`` becomes ``'``); an unquoted one is used verbatim.

    Args:
        notation: A1 notation, e.g. "Sheet1!A1:B2", "'My Sheet'!A1" or "A1:B2"

    Returns:
        Notation with sheet_name None when the input has no ``!``

    Raises:
        MalformedNotationError: If notation is None or empty
    """
    if not notation or not isinstance(notation, str):
        raise MalformedNotationError(f"Empty or invalid A1 notation: {notation!r}")

    sheet_part, sep, range_text = notation.rpartition("!")
    if not sep:
        return Notation(sheet_name=None, range_text=notation)

    if len(sheet_part) >= 2 and sheet_part.startswith("'") and sheet_part.endswith("'"):
        sheet_part = sheet_part[1:-1].replace("''", "'")

    return Notation(sheet_name=sheet_part or None, range_text=range_text)


def letter_to_index(letters: str) -> int:
    """Convert column letter(s) to a 0-indexed column number.

    Case-insensitive base-26 where A=1 ... Z=26, shifted to 0-indexed:
    A = 0, Z = 25, AA = 26, ZZ = 701.

    Raises:
        InvalidColumnLetterError: If letters is empty or not all ASCII letters
    """
    if not isinstance(letters, str) or not letters:
        raise InvalidColumnLetterError(f"Column letter must be a non-empty string, got {letters!r}")
    if not (letters.isascii() and letters.isalpha()):
        raise InvalidColumnLetterError(f"Column letter must be alphabetic, got {letters!r}")

    col_1indexed = 0
    for char in letters.upper():
        col_1indexed = col_1indexed * 26 + (ord(char) - 64)
    return col_1indexed - 1


def index_to_letter(index: int) -> str:
    """Convert a 0-indexed column number to column letter(s).

    Inverse of ``letter_to_index``: 0 = A, 25 = Z, 26 = AA.

    Raises:
        InvalidColumnIndexError: If index is negative or not an integer
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidColumnIndexError(f"Column index must be an integer, got {index!r}")
    if index < 0:
        raise InvalidColumnIndexError(f"Column index must be non-negative, got {index}")

    col_1indexed = index + 1
    result = ""
    while col_1indexed > 0:
        col_1indexed -= 1
        result = chr(65 + (col_1indexed % 26)) + result
        col_1indexed //= 26
    return result


def to_grid_range(notation: str, sheet_id: int = 0) -> GridRange:
    """Convert A1 notation to a GridRange.

    Only the range text is used; a sheet name in the notation is left for
    the caller to resolve into ``sheet_id``.

    Each corner may give a column, a row, or both ("A", "5", "A5").
    Corners may come in any order: columns and rows are sorted independently,
    so "B2:A1" and "A1:B2" give the same range. A single corner is a one-cell
    range. When the notation names only columns ("A:C") the rows start at 0
    and stay open at the end; likewise for only rows ("2:5").

    Args:
        notation: A1 notation, with or without a sheet name
        sheet_id: Numeric id of the target sheet (non-negative)

    Returns:
        GridRange with 0-indexed, end-exclusive bounds

    Raises:
        MalformedNotationError: If the notation is empty, has more than two
            corners, a corner is not a cell reference, no corner gives a row
            or column, or sheet_id is not a non-negative integer
    """
    if isinstance(sheet_id, bool) or not isinstance(sheet_id, int) or sheet_id < 0:
        raise MalformedNotationError(f"Sheet id must be a non-negative integer, got {sheet_id!r}")

    range_text = parse_notation(notation).range_text
    corners = range_text.split(":")
    if len(corners) > 2:
        raise MalformedNotationError(f"Too many corners in range: {notation!r}")

    cols: List[int] = []
    rows: List[int] = []
    for corner in corners:
        match = _CORNER_RE.match(corner.strip())
        if not match:
            raise MalformedNotationError(f"Invalid cell reference {corner!r} in {notation!r}")

        letters, digits = match.groups()
        if letters:
            cols.append(letter_to_index(letters))
        if digits:
            row = int(digits)
            if row < 1:
                raise MalformedNotationError(f"Row numbers start at 1, got {corner!r} in {notation!r}")
            rows.append(row)

    if not cols and not rows:
        raise MalformedNotationError(f"Range has neither a column nor a row: {notation!r}")

    cols.sort()
    rows.sort()

    grid_range = GridRange(sheet_id=sheet_id)
    if rows:
        grid_range.start_row_index = rows[0] - 1
        grid_range.end_row_index = rows[-1]
    if cols:
        grid_range.start_column_index = cols[0]
        grid_range.end_column_index = cols[-1] + 1

    # Open axis: "A:A" covers every row, "1:1" every column
    if grid_range.start_row_index is None:
        grid_range.start_row_index = 0
    if grid_range.start_column_index is None:
        grid_range.start_column_index = 0

    return grid_range


def to_notation(grid_range: Union[GridRange, Mapping[str, Any], None], sheet_name: str = "") -> str:
    """Convert a GridRange to A1 notation.

    A missing start column is written as "A" for display only; a range open
    on both sides of an axis does not round-trip.

    Args:
        grid_range: GridRange or the API's GridRange JSON
        sheet_name: Sheet name to prefix; always single-quoted when given

    Returns:
        A1 notation such as "'Sheet1'!A1:B2", or "'Sheet1'!C5" for one cell

    Raises:
        MissingRangeError: If grid_range is None
    """
    if grid_range is None:
        raise MissingRangeError("GridRange is missing.")
    if not isinstance(grid_range, GridRange):
        grid_range = GridRange.from_dict(grid_range)

    start_col = (
        index_to_letter(grid_range.start_column_index)
        if grid_range.start_column_index is not None
        else "A"
    )
    start_row = (
        str(grid_range.start_row_index + 1)
        if grid_range.start_row_index is not None
        else ""
    )
    end_col = (
        index_to_letter(grid_range.end_column_index - 1)
        if grid_range.end_column_index is not None
        else ""
    )
    end_row = (
        str(grid_range.end_row_index)
        if grid_range.end_row_index is not None
        else ""
    )

    start_cell = f"{start_col}{start_row}"
    end_cell = f"{end_col}{end_row}"
    range_text = start_cell if start_cell == end_cell else f"{start_cell}:{end_cell}"

    return f"{quote_sheet_name(sheet_name)}!{range_text}" if sheet_name else range_text
