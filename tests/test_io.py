"""Tests for puzzle input loading and parsing."""

import numpy as np
import pytest

from aoc_solver.core.errors import ParseError, PuzzleInputError
from aoc_solver.integration.io import PuzzleInputLoader, parse_digit_grid, split_lines


class TestParsing:
    """Test text parsing helpers."""

    def test_split_lines(self):
        """Test trailing blank lines are dropped."""
        assert split_lines("12\n34\n\n\n") == ["12", "34"]
        assert split_lines("") == []

    def test_parse_digit_grid(self):
        """Test rows of digits become a 2D array."""
        grid = parse_digit_grid(["123", "456"])
        assert grid.dtype == np.int64
        np.testing.assert_array_equal(grid, [[1, 2, 3], [4, 5, 6]])

    def test_line_endings(self):
        """Test CR line endings and trailing blank rows are ignored."""
        grid = parse_digit_grid(["12\r\n", "34\r", ""])
        assert grid.shape == (2, 2)

    @pytest.mark.parametrize('lines', [
        ["12", " 34"],
        ["12", "34 "],
        ["\t12", "34"],
    ])
    def test_stray_whitespace(self, lines):
        """Test spaces and tabs inside rows are reported, not skipped."""
        with pytest.raises(ParseError):
            parse_digit_grid(lines)

    def test_empty_input(self):
        """Test empty input raises."""
        with pytest.raises(ParseError, match="empty"):
            parse_digit_grid([])
        with pytest.raises(ParseError):
            parse_digit_grid(["", ""])

    def test_ragged_rows(self):
        """Test non-rectangular input raises."""
        with pytest.raises(ParseError, match="rectangular"):
            parse_digit_grid(["123", "12"])

    def test_invalid_character(self):
        """Test non-digit characters raise with their location."""
        with pytest.raises(ParseError, match="row 1, column 2"):
            parse_digit_grid(["123", "45a"])

    def test_parse_error_is_value_error(self):
        """Test ParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_digit_grid(["1-1"])


class TestPuzzleInputLoader:
    """Test PuzzleInputLoader functionality."""

    def test_paths(self, tmp_path):
        """Test real and test file names."""
        loader = PuzzleInputLoader(tmp_path)
        assert loader.path_for(15, 'real') == tmp_path / "day_15.txt"
        assert loader.path_for(15, 'test') == tmp_path / "day_15_test.txt"

    def test_unknown_dataset(self, tmp_path):
        """Test unknown dataset names raise."""
        with pytest.raises(ValueError):
            PuzzleInputLoader(tmp_path).path_for(15, 'bogus')

    def test_load_file(self, tmp_path):
        """Test an existing file is read line by line."""
        (tmp_path / "day_15.txt").write_text("19\n11\n\n")
        lines = PuzzleInputLoader(tmp_path).load_lines(15, 'real')
        assert lines == ["19", "11"]

    def test_file_preferred_over_fallback(self, tmp_path):
        """Test a present sample file wins over the embedded sample."""
        (tmp_path / "day_15_test.txt").write_text("5\n")
        lines = PuzzleInputLoader(tmp_path).load_lines(15, 'test', fallback="1\n")
        assert lines == ["5"]

    def test_fallback(self, tmp_path):
        """Test the fallback text is used when the file is missing."""
        lines = PuzzleInputLoader(tmp_path).load_lines(15, 'test', fallback="12\n34\n")
        assert lines == ["12", "34"]

    def test_missing_file(self, tmp_path):
        """Test a missing file without fallback raises PuzzleInputError."""
        with pytest.raises(PuzzleInputError, match="day_15.txt"):
            PuzzleInputLoader(tmp_path).load_lines(15, 'real')

    def test_missing_file_is_file_not_found(self, tmp_path):
        """Test PuzzleInputError can be caught as FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            PuzzleInputLoader(tmp_path).load_lines(23)

    def test_available_days(self, tmp_path):
        """Test days with real input files are listed."""
        for name in ["day_23.txt", "day_15.txt", "day_15_test.txt", "notes.txt"]:
            (tmp_path / name).write_text("x\n")
        assert PuzzleInputLoader(tmp_path).available_days() == [15, 23]
        assert PuzzleInputLoader(tmp_path / "missing").available_days() == []
