"""
Target resolution for table creation and copies.

Decides which sheet a notation refers to and converts it to a GridRange on
that sheet. The sheet comes from, in order:
1. A sheet name embedded in the notation ("Sheet2!A1:B5")
2. The sheet name set explicitly on the session
3. The first sheet of the spreadsheet
"""

from typing import Any, Dict, Mapping, NamedTuple, Optional

from tavola.exceptions import SheetNotFoundError
from tavola.spreadsheet.model import GridRange
from tavola.spreadsheet.notation import parse_notation, to_grid_range


# Fields mask for fetching just sheet titles and ids
SHEET_IDS_FIELDS = "sheets(properties(sheetId,title))"


class ResolvedTarget(NamedTuple):
    """Where a notation points: sheet title, sheet id and the range on it."""
    sheet_name: str
    sheet_id: int
    grid_range: GridRange


def sheet_ids(metadata: Optional[Mapping[str, Any]]) -> Dict[str, int]:
    """Map sheet title to sheet id, in sheet order, from a ``spreadsheets.get`` response."""
    ids: Dict[str, int] = {}
    for sheet in (metadata or {}).get("sheets", []):
        properties = sheet.get("properties", {})
        ids[properties.get("title")] = properties.get("sheetId", 0)
    return ids


def resolve_target(
    sheet_name: Optional[str],
    notation: Optional[str],
    sheets: Mapping[str, int],
) -> ResolvedTarget:
    """Resolve a sheet name and notation against the spreadsheet's sheets.

    Args:
        sheet_name: Sheet set explicitly by the caller, if any
        notation: A1 notation, optionally with a sheet name; defaults to "A1"
        sheets: Ordered mapping of sheet title -> sheet id

    Returns:
        ResolvedTarget for the chosen sheet

    Raises:
        SheetNotFoundError: If the chosen sheet name is not in ``sheets``, or
            there is no sheet to fall back to
        MalformedNotationError: If the notation cannot be parsed
    """
    notation = notation or "A1"
    target_name = parse_notation(notation).sheet_name or sheet_name

    if not target_name:
        if not sheets:
            raise SheetNotFoundError("Spreadsheet has no sheets.")
        target_name, target_id = next(iter(sheets.items()))
    elif target_name in sheets:
        target_id = sheets[target_name]
    else:
        raise SheetNotFoundError(f'Sheet with name "{target_name}" not found.')

    return ResolvedTarget(
        sheet_name=target_name,
        sheet_id=target_id,
        grid_range=to_grid_range(notation, target_id),
    )
