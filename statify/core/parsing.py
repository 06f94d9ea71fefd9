"""Input parsing for Statify.

Turns free-form text (typed, pasted, or loaded from a file) or an
already-structured collection into a sample of finite numbers.

Parsing filters rather than rejects: tokens that are not strictly numeric
are dropped, and empty input yields an empty sample instead of an error.

Example:
    >>> parse_input("1,,  , 2; 3.5 abc 4e2")
    [1.0, 2.0, 3.5, 400.0]
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from numbers import Real
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


# Any run of commas, whitespace (including newlines) or semicolons
TOKEN_SEPARATORS = re.compile(r"[,\s;]+")

# Whole-token decimal literal: sign, digits with optional fraction, exponent.
# Excludes "nan", "inf", hex literals and digit separators.
NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

SUPPORTED_FILE_TYPES = {".csv", ".txt"}

EMPTY_INPUT_ERROR = "Please enter some numbers"
NO_NUMBERS_ERROR = "No valid numbers found in input"
SINGLE_VALUE_WARNING = "Only one value - some statistics require more data"


@dataclass(frozen=True)
class TokenParse:
    """Outcome of parsing a single token.

    Attributes:
        token: The token as seen by the parser (trimmed text)
        value: Parsed finite number, or None if the token was rejected
    """

    token: str
    value: float | None = None

    @property
    def ok(self) -> bool:
        """Whether the token is a finite number."""
        return self.value is not None


def parse_token(token: Any) -> TokenParse:
    """Parse one token strictly.

    Strings must be a complete decimal literal once trimmed ("12abc" is
    rejected, not read as 12). Real numbers are accepted when finite.
    Booleans and anything else are rejected.

    Args:
        token: String or number

    Returns:
        TokenParse carrying the value, or no value when rejected
    """
    if isinstance(token, bool):
        return TokenParse(token=str(token))

    if isinstance(token, Real):
        value = float(token)
        return TokenParse(token=str(token), value=value if math.isfinite(value) else None)

    if not isinstance(token, str):
        return TokenParse(token=str(token))

    text = token.strip()
    if not text or NUMBER_PATTERN.fullmatch(text) is None:
        return TokenParse(token=text)

    value = float(text)
    # Literals such as "1e999" overflow to infinity
    if not math.isfinite(value):
        return TokenParse(token=text)

    return TokenParse(token=text, value=value)


def tokenize(raw: str | Iterable[Any] | None) -> list[Any]:
    """Split raw input into tokens without interpreting them."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return [t for t in TOKEN_SEPARATORS.split(raw) if t.strip()]
    if isinstance(raw, Real):
        return [raw]
    return list(raw)


def parse_tokens(raw: str | Iterable[Any] | None) -> list[TokenParse]:
    """Parse every token of the input, keeping rejected ones.

    Useful when the caller wants to report which tokens were dropped.
    """
    return [parse_token(token) for token in tokenize(raw)]


def parse_input(raw: str | Iterable[Any] | None) -> list[float]:
    """Parse raw input into a sample.

    Args:
        raw: Delimited string (comma, whitespace or semicolon separated),
            a collection of numbers/strings, or None

    Returns:
        Finite numbers in input order; empty for None or empty input
    """
    parsed = parse_tokens(raw)
    values = [p.value for p in parsed if p.ok]

    rejected = len(parsed) - len(values)
    if rejected:
        logger.debug(f"Dropped {rejected} non-numeric token(s) from input")

    return values


@dataclass
class InputValidation:
    """Result of validating user input before calculation.

    Attributes:
        valid: Whether there is at least one number to work with
        data: Parsed sample
        error: Why the input is unusable (when not valid)
        warning: Caveat about otherwise valid input
    """

    valid: bool
    data: list[float] = field(default_factory=list)
    error: str | None = None
    warning: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "valid": self.valid,
            "data": self.data,
            "error": self.error,
            "warning": self.warning,
        }


def validate_input(text: str | None) -> InputValidation:
    """Validate raw text input.

    Args:
        text: Raw user input

    Returns:
        InputValidation; a single value is valid but carries a warning
    """
    if text is None or not text.strip():
        return InputValidation(valid=False, error=EMPTY_INPUT_ERROR)

    data = parse_input(text)

    if not data:
        return InputValidation(valid=False, error=NO_NUMBERS_ERROR)

    if len(data) < 2:
        return InputValidation(valid=True, data=data, warning=SINGLE_VALUE_WARNING)

    return InputValidation(valid=True, data=data)


def read_sample_file(path: str | Path) -> list[float]:
    """Load a sample from a CSV or plain-text file.

    Every number in the file is read regardless of rows and columns, so
    line-separated and comma-separated files both work.

    Args:
        path: Path to a .csv or .txt file

    Returns:
        Parsed sample

    Raises:
        ValueError: If the file type is not supported
        OSError: If the file cannot be read
    """
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_FILE_TYPES:
        raise ValueError(
            f"Unsupported file type: '{path.suffix or path.name}'. "
            f"Please upload a CSV or TXT file"
        )

    data = parse_input(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded {len(data)} values from {path.name}")
    return data
