"""Distribution summaries for charting.

This module prepares the data behind the two standard charts of a sample:
- Frequency distribution (equal-width histogram bins)
- Box plot five-number summary

Rendering is left to the caller; these functions only compute the numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from statify.core.engine import calculate_quartiles

DEFAULT_NUM_BINS = 8


@dataclass(frozen=True)
class FrequencyBin:
    """One histogram bin.

    Attributes:
        start: Lower edge
        end: Upper edge
        count: Number of values in the bin
    """

    start: float
    end: float
    count: int

    @property
    def label(self) -> str:
        """Axis label, e.g. ``"10.0-12.5"``."""
        return f"{self.start:.1f}-{self.end:.1f}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start": self.start,
            "end": self.end,
            "count": self.count,
            "label": self.label,
        }


def frequency_distribution(
    data: Sequence[float],
    num_bins: int = DEFAULT_NUM_BINS,
) -> list[FrequencyBin]:
    """Count values into equal-width bins spanning min to max.

    A value goes to bin ``floor((v - min) / width)``, clamped to the last
    bin so the maximum is counted. When every value is equal the width is
    zero and all values land in the first bin.

    Args:
        data: Sample values
        num_bins: Number of bins

    Returns:
        Bins in ascending order; empty for an empty sample

    Raises:
        ValueError: If num_bins is less than 1

    Example:
        >>> [b.count for b in frequency_distribution([1, 2, 2, 3, 10], num_bins=3)]
        [4, 0, 1]
    """
    if num_bins < 1:
        raise ValueError(f"num_bins must be at least 1, got {num_bins}")
    if len(data) == 0:
        return []

    values = np.asarray(data, dtype=float)
    low = float(values.min())
    width = (float(values.max()) - low) / num_bins

    if width == 0:
        indices = np.zeros(len(values), dtype=int)
    else:
        indices = np.floor((values - low) / width).astype(int)
        indices = np.clip(indices, 0, num_bins - 1)

    counts = np.bincount(indices, minlength=num_bins)

    bins = []
    for i in range(num_bins):
        start = low + i * width
        bins.append(FrequencyBin(start=start, end=start + width, count=int(counts[i])))
    return bins


@dataclass(frozen=True)
class BoxPlotSummary:
    """Five-number summary for a box plot.

    Quartiles follow the engine's exclusive-median method, so ``q1`` and
    ``q3`` are None for a single-value sample.
    """

    min: float
    q1: float | None
    median: float
    q3: float | None
    max: float

    def to_dict(self) -> dict[str, float | None]:
        """Convert to dictionary."""
        return {
            "min": self.min,
            "q1": self.q1,
            "median": self.median,
            "q3": self.q3,
            "max": self.max,
        }


def box_plot_summary(data: Sequence[float]) -> BoxPlotSummary | None:
    """Five-number summary of a sample, or None when it is empty."""
    quartiles = calculate_quartiles(data)
    if quartiles is None:
        return None

    values = np.asarray(data, dtype=float)
    return BoxPlotSummary(
        min=float(values.min()),
        q1=quartiles.q1,
        median=quartiles.q2,
        q3=quartiles.q3,
        max=float(values.max()),
    )
