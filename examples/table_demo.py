"""
Demonstration of tavola against a live spreadsheet.

Creates a throwaway spreadsheet, builds a table on it, then reads, renames,
copies and deletes tables.

Authentication: uses TAVOLA_SERVICE_ACCOUNT_FILE when set (directly or in a
.env file), otherwise ~/.config/gspread/service_account.json or OAuth
credentials at ~/.config/gspread/credentials.json.
"""

import sys
from datetime import datetime

import gspread

import tavola
from tavola import Settings, configure_logging


def _get_gspread_client(settings: Settings) -> gspread.Client:
    """Authenticate with Google Sheets, trying service account then OAuth."""
    try:
        if settings.service_account_file:
            gc = gspread.service_account(filename=str(settings.service_account_file))
        else:
            gc = gspread.service_account()
        print("✓ Authenticated via service account")
        return gc
    except Exception:
        pass
    try:
        gc = gspread.oauth()
        print("✓ Authenticated via OAuth")
        return gc
    except Exception as exc:
        print(f"✗ Could not authenticate with Google Sheets: {exc}")
        print()
        print("Set TAVOLA_SERVICE_ACCOUNT_FILE or place a key at ~/.config/gspread/service_account.json")
        sys.exit(1)


def main():
    """Walk through the table lifecycle on a new spreadsheet."""
    settings = Settings.from_env()
    configure_logging(settings)

    print("=" * 70)
    print("tavola Table Demo")
    print("=" * 70)
    print()

    gc = _get_gspread_client(settings)
    title = f"tavola demo {datetime.now():%Y-%m-%d %H:%M:%S}"
    spreadsheet = gc.create(title)
    print("✓ Spreadsheet created:", spreadsheet.url)
    print()

    sheet_name = spreadsheet.sheet1.title
    spreadsheet.sheet1.update(
        [
            ["ID", "Product", "Price", "Stock"],
            [101, "Apple", 1.5, 100],
            [102, "Banana", 0.8, 200],
            [103, "Cherry", 5.0, 50],
        ],
        "A1:D4",
    )

    app = tavola.open_by_id(spreadsheet.id, gc, settings)

    print("Step 1: Creating table...")
    table = app.get_sheet_by_name(sheet_name).get_range("A1:D4").create("Products")
    print(f"  {table!r}")
    print()

    print("Step 2: Reading values...")
    print(app.get_table_by_name("Products").to_dataframe())
    print()

    print("Step 3: Renaming and styling the header...")
    table.set_name("Inventory").set_rows_properties(
        {"headerColorStyle": {"rgbColor": {"red": 0.85, "green": 0.92, "blue": 0.83}}}
    )
    print(f"  {table!r}")
    print()

    print("Step 4: Copying to A10...")
    copy = table.copy_to("A10")
    print(f"  {copy!r}")
    print()

    print("Step 5: Tables on the sheet:")
    for t in app.get_sheet_by_name(sheet_name).get_tables():
        print(f"  - {t.name} at {t.get_range()}")
    print()

    print("Step 6: Cleaning up...")
    print(" ", copy.remove())
    print(" ", table.reverse())
    print()

    print("=" * 70)
    print("Demo complete! Open the URL above to see the result.")
    print("=" * 70)


if __name__ == "__main__":
    main()
