"""CSV export of computed statistics.

Produces a two-column ``Statistic,Value`` table with display-formatted values
followed by the raw data, ready to save as ``statistics_<date>.csv``.
"""

from __future__ import annotations

from datetime import date

import pandas as pd

from statify.core.engine import StatisticsResult
from statify.core.formatting import DEFAULT_PRECISION, format_mode, format_raw

EXPORT_COLUMNS = ["Statistic", "Value"]

# (row label, StatisticsResult.to_dict key)
EXPORT_ROWS = [
    ("Count", "count"),
    ("Sum", "sum"),
    ("Min", "min"),
    ("Max", "max"),
    ("Range", "range"),
    ("Mean", "mean"),
    ("Median", "median"),
    ("Mode", "mode"),
    ("Variance (Population)", "variance_population"),
    ("Variance (Sample)", "variance_sample"),
    ("Std Dev (Population)", "std_dev_population"),
    ("Std Dev (Sample)", "std_dev_sample"),
    ("Q1", "q1"),
    ("Q2 (Median)", "q2"),
    ("Q3", "q3"),
    ("IQR", "iqr"),
    ("Class Width", "class_width"),
]


def export_table(
    result: StatisticsResult,
    precision: int = DEFAULT_PRECISION,
) -> pd.DataFrame:
    """Build the export table for a result.

    Args:
        result: Computed statistics
        precision: Decimal places for formatted values

    Returns:
        DataFrame with Statistic and Value columns; undefined values are empty
    """
    formatted = result.to_dict(formatted=True, precision=precision)
    formatted["mode"] = "; ".join(format_mode(result.mode, precision) or [])

    rows = [(label, formatted[key]) for label, key in EXPORT_ROWS]
    rows.append(("", ""))
    raw = ", ".join(format_raw(v) for v in result.raw_data)
    rows.append(("Raw Data", raw))

    frame = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    return frame.fillna("")


def export_csv(result: StatisticsResult, precision: int = DEFAULT_PRECISION) -> str:
    """Render a result as CSV text.

    Example:
        >>> from statify.core.engine import compute_all
        >>> export_csv(compute_all([1, 2, 3])).splitlines()[:3]
        ['Statistic,Value', 'Count,3', 'Sum,6']
    """
    return export_table(result, precision).to_csv(index=False, lineterminator="\n")


def export_filename(day: date | None = None) -> str:
    """Default file name for an export, e.g. ``statistics_2025-01-15.csv``."""
    day = day or date.today()
    return f"statistics_{day.isoformat()}.csv"
