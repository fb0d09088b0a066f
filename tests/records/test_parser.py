"""
Tests for CSV session parsing.

Tests for:
- parse_csv_content() success paths
- malformed input rejection and row numbering
- RawTable.to_csv() re-parsing
"""

# Standard library imports
import sys
from pathlib import Path

# Third-party imports
import pytest

# Local imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from leaderboard.records import MalformedInputError, RawTable, parse_csv_content


class TestParseCsvContent:
    """Tests for well-formed input."""

    @pytest.mark.unit
    def test_two_rounds(self):
        table = parse_csv_content("Alice,Bob\n10,-10\n-5,5\n")

        assert table.columns == ('Alice', 'Bob')
        assert table.rows == ((10.0, -10.0), (-5.0, 5.0))
        assert table.round_count == 2

    @pytest.mark.unit
    def test_blank_lines_are_skipped(self):
        table = parse_csv_content("\n\nAlice,Bob\n\n10,-10\n   \n-5,5\n\n")

        assert table.columns == ('Alice', 'Bob')
        assert table.rows == ((10.0, -10.0), (-5.0, 5.0))

    @pytest.mark.unit
    def test_whitespace_and_crlf_are_trimmed(self):
        table = parse_csv_content(" Alice , Bob \r\n 1.5 , -1.5 \r\n")

        assert table.columns == ('Alice', 'Bob')
        assert table.rows == ((1.5, -1.5),)

    @pytest.mark.unit
    def test_numeric_forms(self):
        table = parse_csv_content("A,B,C\n+3,-0.25,1e1\n")
        assert table.rows == ((3.0, -0.25, 10.0),)

    @pytest.mark.unit
    def test_duplicate_header_names_are_kept(self):
        """Duplicate names are left for the validator to report."""
        table = parse_csv_content("Alice,Alice\n1,-1\n")
        assert table.columns == ('Alice', 'Alice')


class TestMalformedInput:
    """Tests for rejected input."""

    @pytest.mark.unit
    @pytest.mark.parametrize('content', ["", "Alice,Bob", "Alice,Bob\n", "\n\nAlice,Bob\n\n\n"])
    def test_missing_data_row(self, content):
        with pytest.raises(MalformedInputError, match='at least a header and one data row'):
            parse_csv_content(content)

    @pytest.mark.unit
    def test_non_numeric_field(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_csv_content("Alice,Bob\n10,abc\n")

        assert str(exc_info.value) == 'Invalid number "abc" in row 2'
        assert exc_info.value.line == 2

    @pytest.mark.unit
    def test_row_number_counts_blank_lines(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_csv_content("\n\nAlice,Bob\n\n10,-10\n\n3,x\n")

        assert 'row 7' in str(exc_info.value)
        assert exc_info.value.line == 7

    @pytest.mark.unit
    def test_empty_field(self):
        with pytest.raises(MalformedInputError, match='Invalid number "" in row 2'):
            parse_csv_content("Alice,Bob\n10,\n")

    @pytest.mark.unit
    @pytest.mark.parametrize('token', ['nan', 'inf', '-inf', 'Infinity'])
    def test_non_finite_values(self, token):
        with pytest.raises(MalformedInputError, match='Invalid number'):
            parse_csv_content(f"Alice,Bob\n{token},0\n")

    @pytest.mark.unit
    def test_short_row(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_csv_content("Alice,Bob,Carol\n1,2,-3\n4,-4\n")

        assert str(exc_info.value) == "Row 3 has 2 values but expected 3"
        assert exc_info.value.line == 3

    @pytest.mark.unit
    def test_long_row(self):
        with pytest.raises(MalformedInputError, match="Row 2 has 3 values but expected 2"):
            parse_csv_content("Alice,Bob\n1,2,3\n")

    @pytest.mark.unit
    def test_empty_header_name(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse_csv_content("Alice,,Bob\n1,2,-3\n")
        assert exc_info.value.line == 1

    @pytest.mark.unit
    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_csv_content("Alice\nabc\n")


class TestRawTableToCsv:
    """Tests for RawTable serialization."""

    @pytest.mark.unit
    def test_to_csv_reparses_to_equal_table(self):
        table = RawTable(columns=('Alice', 'Bob', 'Carol'), rows=((0.1, -0.05, -0.05), (12.0, -6.5, -5.5)))
        assert parse_csv_content(table.to_csv()) == table

    @pytest.mark.unit
    def test_to_csv_format(self):
        table = RawTable(columns=['A', 'B'], rows=[[1.0, -1.0]])
        assert table.to_csv() == "A,B\n1.0,-1.0\n"
