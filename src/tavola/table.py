"""
Table objects.

A Table is a read-through projection of one table record held by the Sheets
API. It is created by a TableApp (by ``create`` or by a lookup) and sends its
mutations through the app's client. Each mutation clears the app's table
cache before returning; the Table itself only updates the fields it changed,
so a Table held across external edits can go stale.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

import pandas as pd

from tavola.exceptions import SheetNotFoundError, SheetsAPIError, TableNotFoundError
from tavola.spreadsheet.model import GridRange
from tavola.spreadsheet.notation import parse_notation, to_grid_range, to_notation
from tavola.spreadsheet.operations import (
    CopyPaste,
    DeleteTable,
    TableRequest,
    UpdateCells,
    UpdateColumnProperties,
    UpdateRowsProperties,
    UpdateTableName,
    UpdateTableRange,
)
from tavola.tables.resolution import resolve_target

if TYPE_CHECKING:
    from tavola.app import TableApp

logger = logging.getLogger(__name__)

# Cell fields snapshotted by reverse() and written back as plain cells
REVERSE_CELL_FIELDS = (
    "userEnteredValue,textFormatRuns,chipRuns,userEnteredFormat,"
    "effectiveValue,hyperlink,note,dataValidation"
)


class Table:
    """One table in a Google Sheets spreadsheet.

    Attributes:
        app: The TableApp session the table belongs to
        sheet_name: Title of the sheet holding the table
        sheet_id: Numeric id of that sheet
        metadata: The raw table record from the API
    """

    def __init__(self, app: "TableApp", sheet_name: str, sheet_id: int, record: Dict[str, Any]) -> None:
        self.app = app
        self.sheet_name = sheet_name
        self.sheet_id = sheet_id
        self.metadata = record

    @property
    def spreadsheet_id(self) -> str:
        return self.app.spreadsheet_id

    @property
    def name(self) -> Optional[str]:
        return self.metadata.get("name")

    @property
    def table_id(self) -> Optional[str]:
        return self.metadata.get("tableId")

    @property
    def grid_range(self) -> GridRange:
        return GridRange.from_dict(self.metadata.get("range", {}))

    def get_range(self) -> str:
        """The table range in A1 notation, e.g. "'Sheet1'!A1:C10"."""
        return to_notation(self.metadata.get("range"), self.sheet_name)

    def column_names(self) -> List[Optional[str]]:
        """Display names of the columns, in column order."""
        return [column.get("columnName") for column in self.metadata.get("columnProperties", [])]

    def get_values(self) -> List[List[Any]]:
        """Read the values in the table range.

        Returns:
            2D list of values (rendered per the client's settings)
        """
        return self.app.client.get_values(self.spreadsheet_id, self.get_range())

    def to_dataframe(self, header: bool = True) -> pd.DataFrame:
        """Read the table values into a pandas DataFrame.

        Args:
            header: Use the first row as column labels

        Returns:
            DataFrame of the values; rows shorter than the widest row are
            padded with None
        """
        values = self.get_values()
        if not values:
            return pd.DataFrame(columns=self.column_names() if header else None, dtype=object)

        width = max(len(row) for row in values)
        rows = [list(row) + [None] * (width - len(row)) for row in values]
        if header:
            return pd.DataFrame(rows[1:], columns=rows[0], dtype=object)
        return pd.DataFrame(rows, dtype=object)

    def set_name(self, name: str) -> "Table":
        """Rename the table.

        Raises:
            ValueError: If name is empty or not a string
        """
        if not name or not isinstance(name, str):
            raise ValueError("Invalid table name.")
        self._send([UpdateTableName(table_id=self.table_id, name=name)], "rename table")
        logger.info("Renamed table %s from %r to %r", self.table_id, self.name, name)
        self.metadata["name"] = name
        return self

    def set_values(self, values: List[List[Any]]) -> Optional[str]:
        """Write values into the table range.

        Args:
            values: Non-empty 2D list of values

        Returns:
            The updated range in A1 notation

        Raises:
            ValueError: If values are not a non-empty 2D list
            SheetsAPIError: If the write fails
        """
        if not isinstance(values, list) or not values or not isinstance(values[0], list):
            raise ValueError("Invalid values. Must be a 2D list.")
        try:
            return self.app.client.update_values(self.spreadsheet_id, self.get_range(), values)
        except SheetsAPIError as e:
            raise SheetsAPIError(f"Failed to set values {self.table_id}: {e}") from e
        finally:
            self.app.refresh()

    def set_range(self, notation: str) -> "Table":
        """Move or resize the table.

        The table stays on its sheet; a sheet name in ``notation`` is ignored.

        Args:
            notation: New range in A1 notation

        Raises:
            ValueError: If notation is empty or not a string
            MalformedNotationError: If notation cannot be parsed
        """
        if not notation or not isinstance(notation, str):
            raise ValueError("Invalid A1 notation.")
        grid_range = to_grid_range(notation, self.sheet_id)
        self._send([UpdateTableRange(table_id=self.table_id, range=grid_range)], "update table range")
        self.metadata["range"] = grid_range.to_dict()
        return self

    def set_rows_properties(self, rows_properties: Dict[str, Any], fields: str = "rowsProperties") -> "Table":
        """Update row properties such as the header color style.

        Raises:
            ValueError: If rows_properties is not a dict
        """
        if not rows_properties or not isinstance(rows_properties, dict):
            raise ValueError("Invalid rows properties object.")
        request = UpdateRowsProperties(table_id=self.table_id, rows_properties=rows_properties, fields=fields)
        return self._send([request], "update rows properties")

    def set_column_properties(
        self,
        column_properties: List[Dict[str, Any]],
        fields: str = "columnProperties"
    ) -> "Table":
        """Update column properties such as column names and types.

        Args:
            column_properties: TableColumnProperties objects, each with a ``columnIndex``
            fields: Field mask for the update

        Raises:
            ValueError: If column_properties is not a list
        """
        if not column_properties or not isinstance(column_properties, list):
            raise ValueError("Invalid column properties list.")
        request = UpdateColumnProperties(table_id=self.table_id, column_properties=column_properties, fields=fields)
        return self._send([request], "update column properties")

    def remove(self) -> str:
        """Delete the table. The cells keep their data.

        Returns:
            Status message
        """
        self._send([DeleteTable(table_id=self.table_id)], "remove table")
        logger.info("Deleted table %s (%r)", self.table_id, self.name)
        return f"{self.name} (Table ID: {self.table_id}) was successfully deleted."

    def reverse(self) -> str:
        """Turn the table back into plain cells, keeping values and formats.

        The cell data of the range is fetched first, the table is deleted, and
        the fetched data is written back so nothing is lost with the table.

        Returns:
            Status message

        Raises:
            SheetNotFoundError: If the table's sheet is missing from the fetched data
        """
        fields = f"sheets(properties(sheetId),data(rowData(values({REVERSE_CELL_FIELDS}))))"
        snapshot = self.app.client.fetch_metadata(self.spreadsheet_id, fields=fields, ranges=[self.get_range()])

        sheet = next(
            (s for s in snapshot.get("sheets", []) if s.get("properties", {}).get("sheetId", 0) == self.sheet_id),
            None,
        )
        if sheet is None:
            raise SheetNotFoundError("Sheet not found during reverse operation.")

        data = sheet.get("data") or [{}]
        rows = data[0].get("rowData", [])

        self.remove()
        self._send([UpdateCells(range=self.grid_range, rows=rows)], "restore cells")
        return f"{self.name} (Table ID: {self.table_id}) was successfully reversed."

    def copy_to(self, notation: str) -> "Table":
        """Copy the table to a new location.

        Without a sheet name in ``notation`` the copy goes to this table's sheet.
        The new table is found by its top-left corner only.

        Args:
            notation: Destination in A1 notation, e.g. "A10" or "'Sheet2'!B2"

        Returns:
            The Table created by the copy

        Raises:
            ValueError: If notation is empty or not a string
            SheetNotFoundError: If the destination sheet does not exist
            TableNotFoundError: If no table is found at the destination afterwards
        """
        if not notation or not isinstance(notation, str):
            raise ValueError("Invalid A1 notation.")

        if parse_notation(notation).sheet_name:
            try:
                target = resolve_target(None, notation, self.app.sheet_ids())
            except SheetNotFoundError as e:
                raise SheetNotFoundError(f"Destination sheet not found: {e}") from e
            destination_sheet, destination = target.sheet_name, target.grid_range
        else:
            destination_sheet = self.sheet_name
            destination = to_grid_range(notation, self.sheet_id)

        self._send([CopyPaste(source=self.grid_range, destination=destination)], "copy table")

        for table in self.app.index().tables_for(destination_sheet):
            if table.grid_range.same_origin(destination):
                logger.info("Copied table %s to %s as %s", self.table_id, table.get_range(), table.table_id)
                return table

        raise TableNotFoundError("Table copied, but could not retrieve the new table instance.")

    def _send(self, requests: Sequence[TableRequest], action: str) -> "Table":
        """Send requests for this table and clear the app's table cache."""
        try:
            self.app.client.batch_update(self.spreadsheet_id, requests)
        except SheetsAPIError as e:
            raise SheetsAPIError(f"Failed to {action} {self.table_id}: {e}") from e
        finally:
            self.app.refresh()
        return self

    def __repr__(self) -> str:
        return f"Table(name={self.name!r}, table_id={self.table_id!r}, range={self.get_range()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self.spreadsheet_id == other.spreadsheet_id and self.table_id == other.table_id

    def __hash__(self) -> int:
        return hash((self.spreadsheet_id, self.table_id))
