"""
Unit tests for the spreadsheet model and A1 notation codec.

Tests cover:
- GridRange: validation, wire conversion, origin comparison, shape
- parse_notation: sheet name splitting and unquoting
- letter_to_index / index_to_letter: column conversion and its domain
- to_grid_range: corners, reversed ranges, open axes, errors
- to_notation: formatting, single cells, quoting, errors
"""

import pytest

from tavola.exceptions import (
    InvalidColumnIndexError,
    InvalidColumnLetterError,
    MalformedNotationError,
    MissingRangeError,
    NotationError,
)
from tavola.spreadsheet.model import GridRange, Notation
from tavola.spreadsheet.notation import (
    index_to_letter,
    letter_to_index,
    parse_notation,
    quote_sheet_name,
    to_grid_range,
    to_notation,
)


class TestGridRange:
    """Test Suite for GridRange class."""

    def test_defaults_are_unbounded(self):
        """A bare GridRange has sheet 0 and no bounds."""
        grid = GridRange()
        assert grid.sheet_id == 0
        assert grid.to_dict() == {"sheetId": 0}

    def test_to_dict_omits_absent_bounds(self):
        """Absent bounds are left out of the wire JSON, not set to 0."""
        grid = GridRange(sheet_id=7, start_column_index=0, end_column_index=1)
        assert grid.to_dict() == {"sheetId": 7, "startColumnIndex": 0, "endColumnIndex": 1}

    def test_from_dict_defaults_sheet_id(self):
        """The API omits sheetId 0; from_dict reads it back as 0."""
        grid = GridRange.from_dict({"startRowIndex": 0, "endRowIndex": 2})
        assert grid.sheet_id == 0
        assert grid.start_row_index == 0
        assert grid.end_row_index == 2
        assert grid.start_column_index is None

    def test_rejects_reversed_bounds(self):
        """End bounds must not be below start bounds."""
        with pytest.raises(ValueError, match="End row"):
            GridRange(start_row_index=5, end_row_index=2)

        with pytest.raises(ValueError, match="End column"):
            GridRange(start_column_index=3, end_column_index=1)

    def test_rejects_negative_bounds(self):
        """Bounds are 0-indexed and must be non-negative."""
        with pytest.raises(ValueError, match="non-negative"):
            GridRange(start_row_index=-1)

    def test_shape(self):
        """shape is (rows, columns) for a bounded range."""
        assert GridRange(0, 0, 4, 0, 3).shape == (4, 3)
        assert GridRange(0, start_column_index=0, end_column_index=1).shape is None

    def test_same_origin_ignores_end_bounds(self):
        """Ranges with the same top-left corner match even if sizes differ."""
        small = GridRange(0, 9, 10, 0, 1)
        large = GridRange(0, 9, 13, 0, 4)
        other_sheet = GridRange(5, 9, 13, 0, 4)

        assert small.same_origin(large)
        assert not small.same_origin(other_sheet)
        assert not small.same_origin(GridRange(0, 10, 13, 0, 4))

    def test_from_a1_and_to_a1(self):
        """from_a1/to_a1 delegate to the codec."""
        grid = GridRange.from_a1("A1:B2", sheet_id=3)
        assert grid == GridRange(3, 0, 2, 0, 2)
        assert grid.to_a1() == "A1:B2"
        assert grid.to_a1("Data") == "'Data'!A1:B2"

    def test_repr(self):
        """repr shows sheet id and A1 notation."""
        assert repr(GridRange(2, 0, 2, 0, 2)) == "GridRange(sheet_id=2, 'A1:B2')"


class TestParseNotation:
    """Test Suite for parse_notation."""

    def test_quoted_sheet_name(self):
        """A single-quoted sheet name is unquoted; spaces are kept."""
        assert parse_notation("'My Sheet'!A1:B2") == Notation(sheet_name="My Sheet", range_text="A1:B2")

    def test_no_sheet_name(self):
        """Without '!', the whole input is the range text."""
        assert parse_notation("A1:B2") == Notation(sheet_name=None, range_text="A1:B2")

    def test_unquoted_sheet_name(self):
        """An unquoted sheet name is used verbatim."""
        parsed = parse_notation("Sheet1!C5")
        assert parsed.sheet_name == "Sheet1"
        assert parsed.range_text == "C5"

    def test_splits_on_last_bang(self):
        """A '!' inside a quoted sheet name does not split."""
        assert parse_notation("'Wow!'!A1") == Notation(sheet_name="Wow!", range_text="A1")

    def test_escaped_quote_in_sheet_name(self):
        """Doubled quotes inside a quoted name become one quote."""
        assert parse_notation("'Bob''s'!A1").sheet_name == "Bob's"

    def test_empty_notation_fails(self):
        """Empty or None notation raises MalformedNotationError."""
        with pytest.raises(MalformedNotationError):
            parse_notation("")

        with pytest.raises(MalformedNotationError):
            parse_notation(None)

    def test_quote_sheet_name(self):
        """quote_sheet_name is the inverse of unquoting."""
        assert quote_sheet_name("Bob's") == "'Bob''s'"
        assert parse_notation(quote_sheet_name("Bob's") + "!A1").sheet_name == "Bob's"


class TestColumnConversion:
    """Test Suite for letter_to_index and index_to_letter."""

    @pytest.mark.parametrize("letters,index", [
        ("A", 0),
        ("Z", 25),
        ("AA", 26),
        ("AZ", 51),
        ("ZZ", 701),
        ("AAA", 702),
    ])
    def test_known_values(self, letters, index):
        """Known column letters map to 0-indexed columns and back."""
        assert letter_to_index(letters) == index
        assert index_to_letter(index) == letters

    def test_case_insensitive(self):
        """Lowercase letters decode like uppercase."""
        assert letter_to_index("ab") == letter_to_index("AB") == 27

    def test_round_trip_identity(self):
        """index -> letter -> index is identity for all columns through ZZZ and beyond."""
        for n in range(18278):
            assert letter_to_index(index_to_letter(n)) == n

    def test_empty_letter_fails(self):
        """Empty input raises InvalidColumnLetterError."""
        with pytest.raises(InvalidColumnLetterError):
            letter_to_index("")

    @pytest.mark.parametrize("letters", ["A1", "$A", "Ä", " A"])
    def test_non_alphabetic_letter_fails(self, letters):
        """Non-ASCII-letter input raises InvalidColumnLetterError."""
        with pytest.raises(InvalidColumnLetterError):
            letter_to_index(letters)

    def test_negative_index_fails(self):
        """A negative index raises InvalidColumnIndexError."""
        with pytest.raises(InvalidColumnIndexError):
            index_to_letter(-1)

    @pytest.mark.parametrize("index", [1.5, "3", None, True])
    def test_non_integer_index_fails(self, index):
        """A non-integer index raises InvalidColumnIndexError."""
        with pytest.raises(InvalidColumnIndexError):
            index_to_letter(index)

    def test_errors_are_value_errors(self):
        """Codec errors share NotationError, a ValueError."""
        with pytest.raises(NotationError):
            letter_to_index("")
        with pytest.raises(ValueError):
            index_to_letter(-1)


class TestToGridRange:
    """Test Suite for to_grid_range."""

    def test_two_corner_range(self):
        """A1:B2 covers rows 0-1 and columns 0-1, end-exclusive."""
        assert to_grid_range("A1:B2", 0).to_dict() == {
            "sheetId": 0,
            "startRowIndex": 0,
            "endRowIndex": 2,
            "startColumnIndex": 0,
            "endColumnIndex": 2,
        }

    def test_reversed_corners_normalize(self):
        """Corners in either order give the same range."""
        assert to_grid_range("B2:A1", 0) == to_grid_range("A1:B2", 0)
        assert to_grid_range("A2:B1", 0) == to_grid_range("A1:B2", 0)

    def test_single_cell(self):
        """One corner is a one-cell range."""
        assert to_grid_range("C5", 4) == GridRange(4, 4, 5, 2, 3)

    def test_column_only_range(self):
        """A:A covers all rows of column A: start row 0, no end row."""
        assert to_grid_range("A:A", 0).to_dict() == {
            "sheetId": 0,
            "startColumnIndex": 0,
            "endColumnIndex": 1,
            "startRowIndex": 0,
        }

    def test_row_only_range(self):
        """2:5 covers all columns of rows 2-5: start column 0, no end column."""
        assert to_grid_range("2:5", 0).to_dict() == {
            "sheetId": 0,
            "startRowIndex": 1,
            "endRowIndex": 5,
            "startColumnIndex": 0,
        }

    def test_mixed_open_corner(self):
        """A corner without a row still contributes its column."""
        assert to_grid_range("A2:C", 0) == GridRange(0, 1, 2, 0, 3)

    def test_sheet_name_is_ignored(self):
        """The sheet name in the notation does not change the sheet id."""
        assert to_grid_range("'Other Sheet'!B2:C3", 9) == GridRange(9, 1, 3, 1, 3)

    def test_lowercase_and_absolute_markers(self):
        """Lowercase letters and $ markers are accepted."""
        assert to_grid_range("$a$1:b$2", 0) == to_grid_range("A1:B2", 0)

    def test_multi_letter_columns(self):
        """Multi-letter columns decode as base-26."""
        grid = to_grid_range("AA10:ZZ100", 0)
        assert grid.start_column_index == 26
        assert grid.end_column_index == 702
        assert grid.start_row_index == 9
        assert grid.end_row_index == 100

    @pytest.mark.parametrize("notation", ["", ":", "Sheet1!", "A1:B2:C3", "1A", "A-1", "A0"])
    def test_malformed_notation_fails(self, notation):
        """Unparseable notation raises MalformedNotationError."""
        with pytest.raises(MalformedNotationError):
            to_grid_range(notation, 0)

    @pytest.mark.parametrize("sheet_id", [-1, None, "0", 1.0, True])
    def test_invalid_sheet_id_fails(self, sheet_id):
        """The sheet id must be a non-negative integer."""
        with pytest.raises(MalformedNotationError, match="Sheet id"):
            to_grid_range("A1", sheet_id)


class TestToNotation:
    """Test Suite for to_notation."""

    def test_quoted_sheet_prefix(self):
        """The sheet name is always single-quoted on output."""
        grid = {"sheetId": 0, "startRowIndex": 0, "endRowIndex": 2, "startColumnIndex": 0, "endColumnIndex": 2}
        assert to_notation(grid, "Sheet1") == "'Sheet1'!A1:B2"

    def test_without_sheet_name(self):
        """No sheet name gives bare range text."""
        assert to_notation(GridRange(0, 0, 2, 0, 2)) == "A1:B2"

    def test_single_cell_round_trip(self):
        """C5 round-trips to C5 with no ':' suffix."""
        assert to_notation(to_grid_range("C5", 0)) == "C5"
        assert to_notation(to_grid_range("'Sheet1'!C5", 0), "Sheet1") == "'Sheet1'!C5"

    def test_reversed_input_normalizes(self):
        """Notation -> GridRange -> notation sorts reversed corners."""
        assert to_notation(to_grid_range("B2:A1", 0), "Sheet1") == "'Sheet1'!A1:B2"
        assert to_notation(to_grid_range("A1:B2", 0), "Sheet1") == "'Sheet1'!A1:B2"

    def test_round_trip_is_idempotent(self):
        """Converting the output again changes nothing."""
        for notation in ["A1:C10", "D4", "AA1:AB3", "B3:B7"]:
            once = to_notation(to_grid_range(notation, 0), "S")
            twice = to_notation(to_grid_range(once, 0), "S")
            assert once == twice == f"'S'!{notation}"

    def test_open_row_range(self):
        """A column range open at the bottom keeps the open end."""
        assert to_notation(to_grid_range("A:A", 0)) == "A1:A"

    def test_missing_start_column_displays_as_a(self):
        """An absent start column is written as A."""
        assert to_notation({"sheetId": 0, "startRowIndex": 0, "endRowIndex": 5}) == "A1:5"

    def test_sheet_name_with_quote_is_escaped(self):
        """A quote inside the sheet name is doubled."""
        assert to_notation(GridRange(0, 0, 1, 0, 1), "Bob's") == "'Bob''s'!A1"

    def test_missing_range_fails(self):
        """None raises MissingRangeError."""
        with pytest.raises(MissingRangeError):
            to_notation(None, "Sheet1")
