"""
TableApp session.

The entry point for working with the tables of one spreadsheet:

    >>> app = tavola.open_by_id(spreadsheet_id, gspread.service_account())
    >>> table = app.get_sheet_by_name("Sheet1").get_range("A1:D4").create("Products")
    >>> app.get_table_by_name("Products").get_values()

The session caches one table index snapshot. Every mutation made through the
session or its tables clears it before returning.
"""

import logging
from typing import Dict, List, Optional, Union

import gspread

from tavola.client.sheets_client import SheetsClient
from tavola.config import Settings
from tavola.spreadsheet.notation import parse_notation
from tavola.spreadsheet.operations import AddTable
from tavola.table import Table
from tavola.tables.cache import TableCache
from tavola.tables.index import SheetTables, TableIndex, sheet_descriptors
from tavola.tables.resolution import SHEET_IDS_FIELDS, ResolvedTarget, resolve_target, sheet_ids

logger = logging.getLogger(__name__)

# Fields mask for fetching every table, grouped by sheet
TABLES_FIELDS = "sheets(properties(sheetId,title),tables)"


class TableApp:
    """Manages the tables of one Google Sheets spreadsheet.

    ``get_sheet_by_name`` and ``get_range`` set the target for ``create`` and
    return the session so calls can be chained.

    Attributes:
        spreadsheet_id: The spreadsheet id
        client: SheetsClient used for all API calls
        sheet_name: Sheet context set by get_sheet_by_name/get_range, if any
        a1_notation: Range set by get_range, if any
    """

    def __init__(
        self,
        spreadsheet_id: str,
        client: Union[SheetsClient, gspread.Client],
        settings: Optional[Settings] = None,
    ) -> None:
        """Initialize the session.

        Args:
            spreadsheet_id: The spreadsheet id
            client: SheetsClient, or an authenticated gspread client to wrap
            settings: Settings for a wrapped gspread client

        Raises:
            ValueError: If spreadsheet_id is empty
        """
        if not spreadsheet_id:
            raise ValueError("No spreadsheet ID defined.")
        if not isinstance(client, SheetsClient):
            client = SheetsClient(client, settings)

        self.spreadsheet_id = spreadsheet_id
        self.client = client
        self.sheet_name: Optional[str] = None
        self.a1_notation: Optional[str] = None
        self._cache: TableCache[TableIndex[Table]] = TableCache()

    def get_sheet_by_name(self, sheet_name: str) -> "TableApp":
        """Set the target sheet for subsequent operations."""
        self.sheet_name = sheet_name
        return self

    def get_range(self, a1_notation: str) -> "TableApp":
        """Set the target range for ``create``.

        A sheet name in the notation replaces the current sheet context.

        Raises:
            MalformedNotationError: If the notation is empty
        """
        parsed = parse_notation(a1_notation)
        if parsed.sheet_name:
            self.sheet_name = parsed.sheet_name
        self.a1_notation = a1_notation
        return self

    def create(self, table_name: str) -> Table:
        """Create a table over the target range.

        Without a range the table starts at A1; without a sheet it goes on
        the first sheet.

        Args:
            table_name: Name of the new table

        Returns:
            The created Table

        Raises:
            ValueError: If table_name is empty or not a string
            SheetNotFoundError: If the target sheet does not exist
            SheetsAPIError: If the API rejects the table
        """
        if not table_name or not isinstance(table_name, str):
            raise ValueError("Invalid table name.")

        target = self.resolve_target()
        try:
            response = self.client.batch_update(
                self.spreadsheet_id, [AddTable(name=table_name, range=target.grid_range)]
            )
        finally:
            self.refresh()

        record = response["replies"][0]["addTable"]["table"]
        logger.info("Created table %r (%s) at %s", table_name, record.get("tableId"), target.grid_range.to_a1(target.sheet_name))
        return Table(self, target.sheet_name, target.sheet_id, record)

    def get_tables(self) -> Union[List[Table], Dict[str, SheetTables[Table]]]:
        """Get the tables of the spreadsheet.

        Returns:
            With a sheet context, that sheet's tables (empty if none);
            otherwise every sheet's tables keyed by sheet title
        """
        index = self.index()
        if self.sheet_name:
            return index.tables_for(self.sheet_name)
        return dict(index.by_sheet_name)

    def get_table_by_name(self, table_name: str) -> Optional[Table]:
        """Get a table by name, or None if there is none."""
        return self.index().by_table_name.get(table_name)

    def get_table_by_id(self, table_id: str) -> Optional[Table]:
        """Get a table by id, or None if there is none."""
        return self.index().by_table_id.get(table_id)

    def index(self) -> TableIndex[Table]:
        """The cached table index, fetched if the cache is empty."""
        return self._cache.get_or_populate(self._fetch_index)

    def refresh(self) -> None:
        """Clear the cached table index so the next read fetches it again."""
        self._cache.invalidate()

    def sheet_ids(self) -> Dict[str, int]:
        """Map sheet title to sheet id, in sheet order."""
        return sheet_ids(self.client.fetch_metadata(self.spreadsheet_id, fields=SHEET_IDS_FIELDS))

    def resolve_target(self) -> ResolvedTarget:
        """Resolve the current sheet context and range against the spreadsheet."""
        return resolve_target(self.sheet_name, self.a1_notation, self.sheet_ids())

    def _fetch_index(self) -> TableIndex[Table]:
        metadata = self.client.fetch_metadata(self.spreadsheet_id, fields=TABLES_FIELDS)
        index = TableIndex.build(
            sheet_descriptors(metadata),
            wrap=lambda title, sheet_id, record: Table(self, title, sheet_id, record),
        )
        logger.debug("Indexed %d table(s) on %d sheet(s)", len(index), len(index.by_sheet_name))
        return index

    def __repr__(self) -> str:
        return f"TableApp(spreadsheet_id={self.spreadsheet_id!r}, sheet_name={self.sheet_name!r})"


def open_by_id(
    spreadsheet_id: str,
    client: Union[SheetsClient, gspread.Client],
    settings: Optional[Settings] = None,
) -> TableApp:
    """Open a TableApp session for a spreadsheet.

    Args:
        spreadsheet_id: The spreadsheet id
        client: SheetsClient, or an authenticated gspread client
        settings: Settings for a wrapped gspread client

    Returns:
        The TableApp session
    """
    return TableApp(spreadsheet_id, client, settings)
