"""Statify: descriptive statistics for free-form numeric input.

This package parses typed, pasted or file-based numbers into a sample and
computes mean, median, mode, variance, standard deviation, quartiles, IQR
and histogram class width, with display formatting, frequency distributions,
CSV export and rule-based insights on top.
"""

__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports for main package exports."""
    if name in ("compute_all", "EmptyInputError", "StatisticsResult", "NO_MODE"):
        from statify.core import engine

        return getattr(engine, name)
    if name in ("parse_input", "validate_input"):
        from statify.core import parsing

        return getattr(parsing, name)
    if name == "format_number":
        from statify.core.formatting import format_number

        return format_number
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "NO_MODE",
    "EmptyInputError",
    "StatisticsResult",
    "compute_all",
    "format_number",
    "parse_input",
    "validate_input",
    "__version__",
]
