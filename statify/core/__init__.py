"""Core functionality for Statify.

This module contains:
- Input parsing and validation
- The descriptive statistics engine
- Display formatting
"""

from statify.core.engine import (
    NO_MODE,
    EmptyInputError,
    QuartileSet,
    StatisticsResult,
    compute_all,
)
from statify.core.formatting import format_number
from statify.core.parsing import parse_input, validate_input

__all__ = [
    "NO_MODE",
    "EmptyInputError",
    "QuartileSet",
    "StatisticsResult",
    "compute_all",
    "format_number",
    "parse_input",
    "validate_input",
]
