"""
Google Sheets API client wrapper.

This module provides the four calls tavola needs from the Sheets API via
gspread (metadata fetch, batch update, values get, values update), with
error wrapping for each.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import gspread
from gspread.exceptions import APIError, SpreadsheetNotFound

from tavola.config import Settings
from tavola.exceptions import SheetsAPIError
from tavola.spreadsheet.operations import TableRequest

logger = logging.getLogger(__name__)


class SheetsClient:
    """
    A wrapper around gspread for Google Sheets API operations.

    This client wraps an authenticated gspread client, adding error handling
    and a clean interface for the spreadsheet operations needed by tables.
    Opened spreadsheets are kept per id so each is only opened once.

    Attributes:
        gc: The authenticated gspread client instance
        settings: Value render/input options used for value reads and writes
    """

    def __init__(self, gc: gspread.Client, settings: Optional[Settings] = None) -> None:
        """
        Initialize the Sheets client with an authenticated gspread client.

        Args:
            gc: An authenticated gspread client, e.g. from ``gspread.service_account()``
                or ``gspread.oauth()``.
            settings: Optional settings; defaults are used when omitted
        """
        self.gc = gc
        self.settings = settings or Settings()
        self._spreadsheets: Dict[str, gspread.Spreadsheet] = {}

    def open(self, spreadsheet_id: str) -> gspread.Spreadsheet:
        """
        Open a spreadsheet by id, reusing an already opened one.

        Args:
            spreadsheet_id: The spreadsheet id (the key in its URL)

        Returns:
            The Spreadsheet object

        Raises:
            SheetsAPIError: If the spreadsheet cannot be opened
        """
        spreadsheet = self._spreadsheets.get(spreadsheet_id)
        if spreadsheet is None:
            try:
                spreadsheet = self.gc.open_by_key(spreadsheet_id)
            except (APIError, SpreadsheetNotFound) as e:
                raise SheetsAPIError(f"Failed to open spreadsheet '{spreadsheet_id}': {e}") from e
            self._spreadsheets[spreadsheet_id] = spreadsheet
        return spreadsheet

    def fetch_metadata(
        self,
        spreadsheet_id: str,
        fields: str = "*",
        ranges: Optional[Sequence[str]] = None
    ) -> Dict[str, Any]:
        """
        Fetch spreadsheet metadata (``spreadsheets.get``).

        Args:
            spreadsheet_id: The spreadsheet id
            fields: Field mask, e.g. "sheets(properties(sheetId,title),tables)"
            ranges: Optional A1 ranges to restrict grid data to

        Returns:
            The response JSON

        Raises:
            SheetsAPIError: If the API call fails
        """
        params: Dict[str, Any] = {"fields": fields}
        if ranges:
            params["ranges"] = list(ranges)

        spreadsheet = self.open(spreadsheet_id)
        logger.debug("Fetching metadata of %s (fields=%s)", spreadsheet_id, fields)
        try:
            return spreadsheet.fetch_sheet_metadata(params=params)
        except APIError as e:
            raise SheetsAPIError(f"Failed to fetch metadata of spreadsheet '{spreadsheet_id}': {e}") from e

    def batch_update(
        self,
        spreadsheet_id: str,
        requests: Sequence[TableRequest]
    ) -> Dict[str, Any]:
        """
        Send requests in one ``spreadsheets.batchUpdate`` call.

        Args:
            spreadsheet_id: The spreadsheet id
            requests: Request objects; each is serialized with ``to_request()``

        Returns:
            The response JSON, with one entry in ``replies`` per request

        Raises:
            SheetsAPIError: If the API call fails
        """
        if not requests:
            return {"replies": []}

        body = {"requests": [request.to_request() for request in requests]}
        spreadsheet = self.open(spreadsheet_id)
        logger.debug(
            "Sending %d request(s) to %s: %s",
            len(requests), spreadsheet_id, ", ".join(type(r).__name__ for r in requests),
        )
        try:
            return spreadsheet.batch_update(body)
        except APIError as e:
            raise SheetsAPIError(
                f"Failed to batch update {len(requests)} request(s): {e}"
            ) from e

    def get_values(self, spreadsheet_id: str, range_name: str) -> List[List[Any]]:
        """
        Read the values of a range.

        Args:
            spreadsheet_id: The spreadsheet id
            range_name: The A1 notation range (e.g., "'Sheet1'!A1:C10")

        Returns:
            2D list of values; empty when the range holds no values

        Raises:
            SheetsAPIError: If the API call fails
        """
        spreadsheet = self.open(spreadsheet_id)
        try:
            response = spreadsheet.values_get(
                range_name,
                params={"valueRenderOption": self.settings.value_render_option},
            )
        except APIError as e:
            raise SheetsAPIError(
                f"Failed to read values from range '{range_name}': {e}"
            ) from e
        return response.get("values", [])

    def update_values(
        self,
        spreadsheet_id: str,
        range_name: str,
        values: List[List[Any]]
    ) -> Optional[str]:
        """
        Write values to a range.

        Args:
            spreadsheet_id: The spreadsheet id
            range_name: The A1 notation range (e.g., "'Sheet1'!A1:C10")
            values: A 2D list of values to write

        Returns:
            The updated range in A1 notation, as reported by the API

        Raises:
            SheetsAPIError: If the API call fails
        """
        spreadsheet = self.open(spreadsheet_id)
        try:
            response = spreadsheet.values_update(
                range_name,
                params={"valueInputOption": self.settings.value_input_option},
                body={"values": values},
            )
        except APIError as e:
            raise SheetsAPIError(
                f"Failed to write values to range '{range_name}': {e}"
            ) from e
        return response.get("updatedRange")
