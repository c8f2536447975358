"""
Table index built from one metadata snapshot.

``spreadsheets.get`` with ``fields=sheets(properties(sheetId,title),tables)``
returns every table grouped by sheet. TableIndex turns that snapshot into
three lookup views: by sheet title, by table name and by table id.

Table names are only unique per sheet, but ``by_table_name`` is global: when
two sheets hold tables with the same name, the one listed last wins.
"""

from dataclasses import dataclass, field
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Mapping,
    Optional,
    TypeVar,
)

T = TypeVar("T")

# (sheet title, sheet id, raw table record) -> stored entry
Wrapper = Callable[[str, int, Dict[str, Any]], T]


@dataclass
class SheetTables(Generic[T]):
    """The tables of one sheet, in the order the service lists them.

    Attributes:
        sheet_id: Numeric id of the sheet
        tables: Table entries for the sheet
    """
    sheet_id: int
    tables: List[T] = field(default_factory=list)


def sheet_descriptors(metadata: Optional[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Flatten a ``spreadsheets.get`` response into sheet descriptors.

    Args:
        metadata: Response JSON with a ``sheets`` list

    Returns:
        One ``{"title", "sheetId", "tables"}`` dict per sheet, in sheet order
    """
    descriptors = []
    for sheet in (metadata or {}).get("sheets", []):
        properties = sheet.get("properties", {})
        descriptors.append({
            "title": properties.get("title"),
            "sheetId": properties.get("sheetId", 0),
            "tables": sheet.get("tables", []),
        })
    return descriptors


@dataclass
class TableIndex(Generic[T]):
    """Lookup views over the tables of one spreadsheet.

    Sheets without tables do not appear in ``by_sheet_name``. A table record
    missing its name or id is stored under None.

    Attributes:
        by_sheet_name: Sheet title -> SheetTables
        by_table_name: Table name -> entry (last wins on collision)
        by_table_id: Table id -> entry
    """
    by_sheet_name: Dict[str, SheetTables[T]] = field(default_factory=dict)
    by_table_name: Dict[Optional[str], T] = field(default_factory=dict)
    by_table_id: Dict[Optional[str], T] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        sheets: Optional[Iterable[Mapping[str, Any]]],
        wrap: Optional[Wrapper] = None,
    ) -> "TableIndex[T]":
        """Build the index from sheet descriptors.

        Args:
            sheets: ``{"title", "sheetId", "tables"}`` mappings, as produced by
                ``sheet_descriptors``; None or empty gives an empty index
            wrap: Optional callable turning each raw table record into the
                stored entry; records are stored as-is when omitted

        Returns:
            The populated TableIndex
        """
        index: "TableIndex[T]" = cls()

        for sheet in sheets or ():
            records = sheet.get("tables") or []
            if not records:
                continue

            title = sheet.get("title")
            sheet_id = sheet.get("sheetId", 0)
            entries = [wrap(title, sheet_id, record) if wrap else record for record in records]

            index.by_sheet_name[title] = SheetTables(sheet_id=sheet_id, tables=entries)

            for record, entry in zip(records, entries):
                index.by_table_name[record.get("name")] = entry
                index.by_table_id[record.get("tableId")] = entry

        return index

    def tables_for(self, sheet_name: str) -> List[T]:
        """Tables on the named sheet, or an empty list if it has none."""
        sheet = self.by_sheet_name.get(sheet_name)
        return list(sheet.tables) if sheet else []

    def __len__(self) -> int:
        return sum(len(sheet.tables) for sheet in self.by_sheet_name.values())
