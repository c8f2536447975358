"""
Client module for tavola.

``SheetsClient`` wraps an authenticated gspread client and is the only part
of tavola that talks to the Google Sheets API.
"""

from tavola.client.sheets_client import SheetsClient

__all__ = [
    "SheetsClient",
]
