"""
Exception classes for tavola.

These exceptions are used throughout the tavola package to signal caller-input
problems in range notation, failed lookups, and failed Google Sheets API calls.
None of them are transient: tavola never retries.
"""


class TavolaError(Exception):
    """Base class for every error raised by tavola."""
    pass


class NotationError(TavolaError, ValueError):
    """Raised when A1 notation or a grid range cannot be converted.

    Subclasses ValueError so callers that already guard conversions with
    ``except ValueError`` keep working.
    """
    pass


class MalformedNotationError(NotationError):
    """Raised when an A1 notation string cannot be parsed.

    Examples:
        - Empty or ``None`` notation
        - A range with more than two corners (``A1:B2:C3``)
        - A range whose corners carry neither a column nor a row (``:``)
        - A sheet id that is not a non-negative integer
    """
    pass


class InvalidColumnLetterError(NotationError):
    """Raised when a column letter sequence is empty or not alphabetic."""
    pass


class InvalidColumnIndexError(NotationError):
    """Raised when a column index is negative or not an integer."""
    pass


class MissingRangeError(NotationError):
    """Raised when a grid range is required but absent."""
    pass


class SheetNotFoundError(TavolaError, LookupError):
    """Raised when a sheet name has no match in the spreadsheet.

    Detected while resolving the target of a create or copy, and while
    reading back cell data during a reverse.
    """
    pass


class TableNotFoundError(TavolaError, LookupError):
    """Raised when a table expected to exist cannot be found after a fetch.

    The usual cause is a copy whose destination could not be matched to a
    newly created table.
    """
    pass


class SheetsAPIError(TavolaError):
    """Raised when a Google Sheets API call fails.

    This error wraps exceptions from the Google Sheets API (via gspread) and provides
    context about which operation failed. Common causes include:
        - Authentication failures
        - Rate limiting (HTTP 429)
        - Invalid spreadsheet IDs or permissions errors
        - Table requests rejected by the service (e.g. overlapping tables)
    """
    pass
