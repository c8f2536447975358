"""
Spreadsheet model classes.

This module provides the value types exchanged with the Google Sheets API:
- GridRange: A rectangular region addressed by sheet id and 0-indexed,
  end-exclusive row/column bounds (the API's ``GridRange`` schema)
- Notation: The result of splitting A1 notation into sheet name and range text
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple


# Attribute name -> wire (camelCase) field name, in wire order
_BOUND_FIELDS = (
    ("start_row_index", "startRowIndex"),
    ("end_row_index", "endRowIndex"),
    ("start_column_index", "startColumnIndex"),
    ("end_column_index", "endColumnIndex"),
)


class Notation(NamedTuple):
    """A1 notation split into its optional sheet name and its range text.

    Attributes:
        sheet_name: Unquoted sheet name, or None when the notation has none
        range_text: Everything after the ``!`` (e.g. "A1:B2")
    """
    sheet_name: Optional[str]
    range_text: str


@dataclass
class GridRange:
    """Represents a rectangular region on one sheet.

    IMPORTANT: GridRange uses the API's conventions, not A1 conventions.
    Indices are 0-indexed, the start bound is inclusive and the end bound is
    exclusive. A1 has A1 as (row 0, col 0), so "A1:B2" is
    (start_row_index=0, end_row_index=2, start_column_index=0, end_column_index=2).

    A bound left as None is unbounded on that side. Absent bounds are never
    synthesized on the wire: ``to_dict`` omits them.

    Attributes:
        sheet_id: The numeric sheet id (not the sheet title)
        start_row_index: First row (0-indexed, inclusive)
        end_row_index: Last row (0-indexed, exclusive)
        start_column_index: First column (0-indexed, inclusive)
        end_column_index: Last column (0-indexed, exclusive)
    """
    sheet_id: int = 0
    start_row_index: Optional[int] = None
    end_row_index: Optional[int] = None
    start_column_index: Optional[int] = None
    end_column_index: Optional[int] = None

    def __post_init__(self) -> None:
        for attr, _ in _BOUND_FIELDS:
            value = getattr(self, attr)
            if value is not None and value < 0:
                raise ValueError(f"{attr} must be non-negative, got {value}")

        if (
            self.start_row_index is not None
            and self.end_row_index is not None
            and self.end_row_index < self.start_row_index
        ):
            raise ValueError("End row index must be >= start row index")
        if (
            self.start_column_index is not None
            and self.end_column_index is not None
            and self.end_column_index < self.start_column_index
        ):
            raise ValueError("End column index must be >= start column index")

    @property
    def shape(self) -> Optional[Tuple[int, int]]:
        """(rows, columns) covered by the range, or None if either axis is open."""
        bounds = [getattr(self, attr) for attr, _ in _BOUND_FIELDS]
        if any(b is None for b in bounds):
            return None
        start_row, end_row, start_col, end_col = bounds
        return end_row - start_row, end_col - start_col

    def same_origin(self, other: "GridRange") -> bool:
        """Check whether two ranges share sheet and top-left corner.

        End bounds are not compared.
        """
        return (
            self.sheet_id == other.sheet_id
            and self.start_row_index == other.start_row_index
            and self.start_column_index == other.start_column_index
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the API's GridRange JSON, omitting absent bounds."""
        data: Dict[str, Any] = {"sheetId": self.sheet_id}
        for attr, key in _BOUND_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridRange":
        """Create from the API's GridRange JSON.

        The API omits ``sheetId`` for the sheet whose id is 0.
        """
        return cls(
            sheet_id=data.get("sheetId", 0),
            **{attr: data.get(key) for attr, key in _BOUND_FIELDS},
        )

    @classmethod
    def from_a1(cls, notation: str, sheet_id: int = 0) -> "GridRange":
        """Parse A1 notation into a GridRange on the given sheet.

        Any sheet name embedded in the notation is ignored; ``sheet_id``
        decides the sheet.

        Raises:
            MalformedNotationError: If the notation or sheet id is invalid
        """
        from tavola.spreadsheet.notation import to_grid_range

        return to_grid_range(notation, sheet_id)

    def to_a1(self, sheet_name: str = "") -> str:
        """Convert to A1 notation, prefixed with ``'sheet_name'!`` when given."""
        from tavola.spreadsheet.notation import to_notation

        return to_notation(self, sheet_name)

    def __repr__(self) -> str:
        return f"GridRange(sheet_id={self.sheet_id}, {self.to_a1()!r})"
