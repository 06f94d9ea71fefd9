"""Tests for input parsing and validation."""

from pathlib import Path

import pytest

from statify.core.formatting import format_number
from statify.core.parsing import (
    InputValidation,
    TokenParse,
    parse_input,
    parse_token,
    parse_tokens,
    read_sample_file,
    validate_input,
)


class TestParseToken:
    """Tests for the strict per-token parse."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("42", 42.0),
            (" 7 ", 7.0),
            ("-3.5", -3.5),
            ("+2", 2.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2E-2", 0.02),
        ],
    )
    def test_accepts_numbers(self, token: str, expected: float) -> None:
        """Test valid decimal literals."""
        parsed = parse_token(token)
        assert parsed.ok
        assert parsed.value == expected

    @pytest.mark.parametrize(
        "token",
        ["", "abc", "12abc", "abc12", "nan", "inf", "-Infinity", "1e999", "0x10", "1_000", "1.2.3"],
    )
    def test_rejects_non_numbers(self, token: str) -> None:
        """Test strict parsing rejects partial and non-finite numbers."""
        parsed = parse_token(token)
        assert not parsed.ok
        assert parsed.value is None

    def test_token_is_trimmed(self) -> None:
        """Test the recorded token is trimmed."""
        assert parse_token("  8 ") == TokenParse(token="8", value=8.0)

    def test_numbers(self) -> None:
        """Test numeric tokens from collections."""
        assert parse_token(3).value == 3.0
        assert parse_token(2.5).value == 2.5
        assert not parse_token(float("nan")).ok
        assert not parse_token(float("inf")).ok

    def test_rejects_bool_and_none(self) -> None:
        """Test booleans and None are not numbers."""
        assert not parse_token(True).ok
        assert not parse_token(None).ok


class TestParseInput:
    """Tests for building a sample from raw input."""

    def test_mixed_separators(self) -> None:
        """Test commas, whitespace and semicolons all separate tokens."""
        assert parse_input("1 2\n3;4\t5,6") == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_empty_tokens_discarded(self) -> None:
        """Test runs of separators leave no gaps."""
        assert parse_input("1,,  , 2") == [1.0, 2.0]
        assert parse_input(",;1;;") == [1.0]

    @pytest.mark.parametrize("raw", [None, "", "   ", ",;,", []])
    def test_empty_input(self, raw) -> None:
        """Test empty input gives an empty sample, not an error."""
        assert parse_input(raw) == []

    def test_invalid_tokens_filtered(self) -> None:
        """Test non-numeric tokens are dropped and order kept."""
        assert parse_input("5, 12abc, x, -1, 3") == [5.0, -1.0, 3.0]

    def test_duplicates_preserved(self) -> None:
        """Test duplicates and input order survive parsing."""
        assert parse_input("3 1 3 2") == [3.0, 1.0, 3.0, 2.0]

    def test_collection_input(self) -> None:
        """Test structured input is parsed element by element."""
        raw = [1, "2", " 3 ", "x", float("nan"), True, None, "4,5"]
        assert parse_input(raw) == [1.0, 2.0, 3.0]

    def test_scalar_input(self) -> None:
        """Test a bare number is a one-value sample."""
        assert parse_input(7) == [7.0]

    def test_parse_tokens_keeps_rejections(self) -> None:
        """Test tagged parse reports every token."""
        parsed = parse_tokens("1 x 2")
        assert [p.ok for p in parsed] == [True, False, True]
        assert parsed[1].token == "x"

    def test_idempotent_on_formatted_join(self) -> None:
        """Test parsing the formatted sample reproduces it."""
        data = parse_input("3.25; -1 0.004, 1e2 7")
        joined = ", ".join(format_number(v) for v in data)
        assert parse_input(joined) == data


class TestValidateInput:
    """Tests for input validation."""

    @pytest.mark.parametrize("text", [None, "", "  \n "])
    def test_blank(self, text: str | None) -> None:
        """Test blank input is invalid."""
        validation = validate_input(text)
        assert not validation.valid
        assert validation.error == "Please enter some numbers"
        assert validation.data == []

    def test_no_numbers(self) -> None:
        """Test input without numbers is invalid."""
        validation = validate_input("abc, def")
        assert not validation.valid
        assert validation.error == "No valid numbers found in input"

    def test_single_value_warning(self) -> None:
        """Test one value is valid but warned about."""
        validation = validate_input("5")
        assert validation.valid
        assert validation.data == [5.0]
        assert validation.warning is not None
        assert validation.error is None

    def test_valid(self) -> None:
        """Test normal input."""
        validation = validate_input("1, 2, 3")
        assert validation == InputValidation(valid=True, data=[1.0, 2.0, 3.0])
        assert validation.to_dict()["warning"] is None


class TestReadSampleFile:
    """Tests for loading samples from files."""

    def test_csv(self, tmp_path: Path) -> None:
        """Test reading every number from a CSV file."""
        path = tmp_path / "data.csv"
        path.write_text("value,weight\n1,2\n3,4\n", encoding="utf-8")
        assert read_sample_file(path) == [1.0, 2.0, 3.0, 4.0]

    def test_txt_lines(self, tmp_path: Path) -> None:
        """Test reading a line-separated text file."""
        path = tmp_path / "data.TXT"
        path.write_text("10\r\n20\r\n\r\n30\r\n", encoding="utf-8")
        assert read_sample_file(str(path)) == [10.0, 20.0, 30.0]

    def test_unsupported_type(self, tmp_path: Path) -> None:
        """Test unsupported extensions are rejected."""
        path = tmp_path / "data.pdf"
        path.write_text("1 2 3", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported file type"):
            read_sample_file(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises."""
        with pytest.raises(FileNotFoundError):
            read_sample_file(tmp_path / "missing.csv")
