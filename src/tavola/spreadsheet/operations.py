"""
Batch-update request classes for the Sheets API Table resource.

This module defines the closed set of requests tavola sends through
``spreadsheets.batchUpdate``:
- AddTable: Create a table over a range
- UpdateTableName: Rename a table
- UpdateTableRange: Move or resize a table
- UpdateRowsProperties: Change header/footer/band styling
- UpdateColumnProperties: Change column names and types
- DeleteTable: Remove the table structure (cell data stays)
- CopyPaste: Copy a range, table included, to a destination
- UpdateCells: Write raw cell data back over a range

Each request carries only the fields its operation needs. ``to_request``
produces the wire JSON; ``to_dict``/``from_dict`` give a tagged, lossless
representation for logging and replay.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from tavola.spreadsheet.model import GridRange


@dataclass
class AddTable:
    """Create a new table.

    Attributes:
        name: The table name
        range: The range the table covers
    """
    name: str
    range: GridRange

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "addTable": {
                "table": {
                    "name": self.name,
                    "range": self.range.to_dict(),
                },
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "AddTable",
            "name": self.name,
            "range": self.range.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AddTable":
        """Create from dictionary representation."""
        return cls(
            name=data["name"],
            range=GridRange.from_dict(data["range"]),
        )


@dataclass
class UpdateTableName:
    """Rename an existing table.

    Attributes:
        table_id: The id of the table to rename
        name: The new name
    """
    table_id: str
    name: str

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "updateTable": {
                "fields": "name",
                "table": {"name": self.name, "tableId": self.table_id},
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "UpdateTableName",
            "table_id": self.table_id,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateTableName":
        """Create from dictionary representation."""
        return cls(
            table_id=data["table_id"],
            name=data["name"],
        )


@dataclass
class UpdateTableRange:
    """Move or resize an existing table.

    Attributes:
        table_id: The id of the table to move
        range: The new range of the table
    """
    table_id: str
    range: GridRange

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "updateTable": {
                "fields": "range",
                "table": {"range": self.range.to_dict(), "tableId": self.table_id},
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "UpdateTableRange",
            "table_id": self.table_id,
            "range": self.range.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateTableRange":
        """Create from dictionary representation."""
        return cls(
            table_id=data["table_id"],
            range=GridRange.from_dict(data["range"]),
        )


@dataclass
class UpdateRowsProperties:
    """Update the row properties (header, footer and band colors) of a table.

    Attributes:
        table_id: The id of the table
        rows_properties: The API's TableRowsProperties object, passed through as-is
        fields: Field mask; narrow it (e.g. "rowsProperties.headerColorStyle")
            to leave other row properties untouched
    """
    table_id: str
    rows_properties: Dict[str, Any]
    fields: str = "rowsProperties"

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "updateTable": {
                "fields": self.fields,
                "table": {"rowsProperties": self.rows_properties, "tableId": self.table_id},
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "UpdateRowsProperties",
            "table_id": self.table_id,
            "rows_properties": self.rows_properties,
            "fields": self.fields,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateRowsProperties":
        """Create from dictionary representation."""
        return cls(
            table_id=data["table_id"],
            rows_properties=data["rows_properties"],
            fields=data.get("fields", "rowsProperties"),
        )


@dataclass
class UpdateColumnProperties:
    """Update the column properties (names, types, validation) of a table.

    Attributes:
        table_id: The id of the table
        column_properties: List of the API's TableColumnProperties objects,
            each with a ``columnIndex``
        fields: Field mask for the update
    """
    table_id: str
    column_properties: List[Dict[str, Any]]
    fields: str = "columnProperties"

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "updateTable": {
                "fields": self.fields,
                "table": {"columnProperties": self.column_properties, "tableId": self.table_id},
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "UpdateColumnProperties",
            "table_id": self.table_id,
            "column_properties": self.column_properties,
            "fields": self.fields,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateColumnProperties":
        """Create from dictionary representation."""
        return cls(
            table_id=data["table_id"],
            column_properties=data["column_properties"],
            fields=data.get("fields", "columnProperties"),
        )


@dataclass
class DeleteTable:
    """Delete a table. The cells keep their data but lose the table structure.

    Attributes:
        table_id: The id of the table to delete
    """
    table_id: str

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {"deleteTable": {"tableId": self.table_id}}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "DeleteTable",
            "table_id": self.table_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeleteTable":
        """Create from dictionary representation."""
        return cls(table_id=data["table_id"])


@dataclass
class CopyPaste:
    """Copy a source range to a destination range.

    Copying a whole table's range creates a new table at the destination.

    Attributes:
        source: The range to copy
        destination: The range to paste into; only its top-left corner matters
            when it is smaller than the source
    """
    source: GridRange
    destination: GridRange

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "copyPaste": {
                "source": self.source.to_dict(),
                "destination": self.destination.to_dict(),
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "CopyPaste",
            "source": self.source.to_dict(),
            "destination": self.destination.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CopyPaste":
        """Create from dictionary representation."""
        return cls(
            source=GridRange.from_dict(data["source"]),
            destination=GridRange.from_dict(data["destination"]),
        )


@dataclass
class UpdateCells:
    """Write raw cell data over a range.

    Attributes:
        range: The range to write
        rows: The API's RowData objects, as returned by ``spreadsheets.get``
        fields: Field mask of the cell fields to write ("*" writes all)
    """
    range: GridRange
    rows: List[Dict[str, Any]] = field(default_factory=list)
    fields: str = "*"

    def to_request(self) -> Dict[str, Any]:
        """Convert to the batchUpdate request JSON."""
        return {
            "updateCells": {
                "rows": self.rows,
                "range": self.range.to_dict(),
                "fields": self.fields,
            },
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": "UpdateCells",
            "range": self.range.to_dict(),
            "rows": self.rows,
            "fields": self.fields,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpdateCells":
        """Create from dictionary representation."""
        return cls(
            range=GridRange.from_dict(data["range"]),
            rows=data.get("rows", []),
            fields=data.get("fields", "*"),
        )


# Type alias for all request types
TableRequest = Union[
    AddTable,
    UpdateTableName,
    UpdateTableRange,
    UpdateRowsProperties,
    UpdateColumnProperties,
    DeleteTable,
    CopyPaste,
    UpdateCells,
]

_REQUEST_TYPES = {
    cls.__name__: cls
    for cls in (
        AddTable,
        UpdateTableName,
        UpdateTableRange,
        UpdateRowsProperties,
        UpdateColumnProperties,
        DeleteTable,
        CopyPaste,
        UpdateCells,
    )
}


def op_from_dict(data: Dict[str, Any]) -> TableRequest:
    """Deserialize a request from dictionary representation.

    Args:
        data: Dictionary with 'type' key indicating the request type

    Returns:
        The corresponding request object

    Raises:
        ValueError: If the request type is unknown
    """
    op_type = data.get("type")
    request_cls = _REQUEST_TYPES.get(op_type)
    if request_cls is None:
        raise ValueError(f"Unknown request type: {op_type}")
    return request_cls.from_dict(data)
