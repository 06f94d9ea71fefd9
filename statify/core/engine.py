"""Descriptive statistics engine.

This module provides the computational core of Statify:
- Central tendency (mean, median, mode)
- Dispersion (population and sample variance, standard deviation)
- Position (quartiles by the exclusive-median method, IQR)
- Histogram class width, with a Sturges' rule fallback

Every function takes the sample explicitly and never mutates it. Statistics
that are mathematically undefined for a sample (an empty sample, or sample
variance of a single value) come back as None rather than raising.

Example:
    >>> result = compute_all([1, 2, 3, 4, 5, 6, 7, 8])
    >>> result.q1, result.q3, result.iqr
    (2.5, 6.5, 4.0)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from statify.core.formatting import DEFAULT_PRECISION, format_mode, format_number

logger = logging.getLogger(__name__)


NO_MODE = "No mode"  # every value occurs exactly once
DEFAULT_NUM_CLASSES = 5
EMPTY_INPUT_MESSAGE = "No valid data provided"

# Sturges' rule: k = ceil(1 + 3.322 * log10(n))
STURGES_COEFFICIENT = 3.322


def _as_array(data: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(data, dtype=float)


@dataclass(frozen=True)
class QuartileSet:
    """Quartiles of a sample.

    Attributes:
        q1: Median of the lower half (None when the half is empty)
        q2: Median of the whole sample
        q3: Median of the upper half (None when the half is empty)
    """

    q1: float | None
    q2: float
    q3: float | None

    @property
    def iqr(self) -> float | None:
        """Interquartile range, Q3 - Q1."""
        if self.q1 is None or self.q3 is None:
            return None
        return self.q3 - self.q1

    def to_dict(self) -> dict[str, float | None]:
        """Convert to dictionary."""
        return {"q1": self.q1, "q2": self.q2, "q3": self.q3}


@dataclass(frozen=True)
class BasicStats:
    """Count, sum and extent of a sample."""

    count: int
    sum: float
    min: float
    max: float
    range: float


def calculate_mean(data: Sequence[float]) -> float | None:
    """Arithmetic mean, or None for an empty sample."""
    if len(data) == 0:
        return None

    values = _as_array(data)
    with np.errstate(over="ignore"):
        mean = np.mean(values)
    if not np.isfinite(mean):
        # The running sum overflowed; divide before adding
        mean = np.sum(values / len(values))
    return float(mean)


def calculate_median(data: Sequence[float]) -> float | None:
    """Median of a sample.

    The sample is sorted numerically; for an even count the two central
    values are averaged.

    Args:
        data: Sample values in any order

    Returns:
        Median value, or None for an empty sample
    """
    if len(data) == 0:
        return None

    ordered = np.sort(_as_array(data))
    mid = len(ordered) // 2

    if len(ordered) % 2 == 0:
        low, high = ordered[mid - 1], ordered[mid]
        with np.errstate(over="ignore"):
            middle = (low + high) / 2
        if not np.isfinite(middle):
            middle = low / 2 + high / 2
        return float(middle)
    return float(ordered[mid])


def calculate_mode(data: Sequence[float]) -> list[float | str] | None:
    """Most frequent value(s) of a sample.

    Ties are not broken: every value that reaches the maximum frequency is
    returned, in ascending order. When no value repeats the result is
    ``[NO_MODE]``.

    Args:
        data: Sample values

    Returns:
        List of modes, ``[NO_MODE]``, or None for an empty sample

    Example:
        >>> calculate_mode([1, 1, 2, 2, 3])
        [1.0, 2.0]
        >>> calculate_mode([1, 2, 3])
        ['No mode']
    """
    if len(data) == 0:
        return None

    values, counts = np.unique(_as_array(data), return_counts=True)
    max_count = counts.max()

    if max_count == 1:
        return [NO_MODE]

    return [float(v) for v in values[counts == max_count]]


def calculate_variance(
    data: Sequence[float],
    population: bool = False,
) -> float | None:
    """Variance of a sample.

    Args:
        data: Sample values
        population: If True divide by n, otherwise by n - 1 (Bessel's correction)

    Returns:
        Variance, or None when undefined (empty sample, or a sample variance
        of fewer than two values)
    """
    n = len(data)
    if n == 0:
        return None
    if not population and n < 2:
        return None

    ddof = 0 if population else 1
    values = _as_array(data)
    with np.errstate(over="ignore"):
        deviations = values - calculate_mean(values)
        return float(np.sum(deviations**2) / (n - ddof))


def calculate_std_dev(
    data: Sequence[float],
    population: bool = False,
) -> float | None:
    """Standard deviation; None whenever the matching variance is None."""
    variance = calculate_variance(data, population=population)
    if variance is None:
        return None
    return float(np.sqrt(variance))


def calculate_quartiles(data: Sequence[float]) -> QuartileSet | None:
    """Quartiles using exclusive-median halves.

    Q2 is the median of the sorted sample. Q1 is the median of the values
    before index ``n // 2``; Q3 is the median of the values from ``n // 2``
    (even n) or ``n // 2 + 1`` (odd n) onward, so the middle value of an
    odd-length sample belongs to neither half. This is neither Tukey's
    hinges nor linear interpolation.

    Args:
        data: Sample values in any order

    Returns:
        QuartileSet, or None for an empty sample

    Example:
        >>> calculate_quartiles([1, 2, 3, 4, 5, 6, 7])
        QuartileSet(q1=2.0, q2=4.0, q3=6.0)
    """
    n = len(data)
    if n == 0:
        return None

    ordered = np.sort(_as_array(data))
    mid = n // 2
    upper_start = mid if n % 2 == 0 else mid + 1

    return QuartileSet(
        q1=calculate_median(ordered[:mid]),
        q2=calculate_median(ordered),
        q3=calculate_median(ordered[upper_start:]),
    )


def calculate_iqr(data: Sequence[float]) -> float | None:
    """Interquartile range, or None when either quartile is undefined."""
    quartiles = calculate_quartiles(data)
    if quartiles is None:
        return None
    return quartiles.iqr


def sturges_class_count(n: int) -> int:
    """Number of histogram classes for ``n`` observations by Sturges' rule."""
    if n < 1:
        raise ValueError(f"Sturges' rule needs at least one observation, got {n}")
    return int(np.ceil(1 + STURGES_COEFFICIENT * np.log10(n)))


def calculate_class_width(
    data: Sequence[float],
    num_classes: float | None = None,
) -> float | None:
    """Class width for a frequency distribution.

    Args:
        data: Sample values
        num_classes: Requested number of classes. None or a value below 1
            falls back to Sturges' rule.

    Returns:
        ``range / num_classes`` rounded up to two decimal places, or None for
        an empty sample
    """
    if len(data) == 0:
        return None

    values = _as_array(data)
    data_range = float(values.max() - values.min())

    if not num_classes or num_classes < 1:
        num_classes = sturges_class_count(len(values))

    raw_width = data_range / num_classes
    return float(np.ceil(raw_width * 100) / 100)


def calculate_basic_stats(data: Sequence[float]) -> BasicStats | None:
    """Count, sum, min, max and range, or None for an empty sample."""
    if len(data) == 0:
        return None

    values = _as_array(data)
    data_min = float(values.min())
    data_max = float(values.max())

    return BasicStats(
        count=len(values),
        sum=float(values.sum()),
        min=data_min,
        max=data_max,
        range=data_max - data_min,
    )


@dataclass(frozen=True)
class StatisticsResult:
    """Every statistic computed for one sample.

    Raw numbers are kept; None marks a statistic that does not apply to the
    sample (e.g. sample variance of a single value). Use ``to_dict()`` for
    display-formatted values.

    Attributes:
        count: Number of values
        sum: Sum of values
        min: Smallest value
        max: Largest value
        range: max - min
        mean: Arithmetic mean
        median: Median
        mode: Ascending modes, or ``(NO_MODE,)``
        variance_population: Variance dividing by n
        variance_sample: Variance dividing by n - 1
        std_dev_population: Population standard deviation
        std_dev_sample: Sample standard deviation
        q1: First quartile
        q2: Second quartile (equals the median)
        q3: Third quartile
        iqr: Interquartile range
        class_width: Histogram class width
        num_classes: Class count as requested by the caller
        raw_data: The sample itself
    """

    count: int
    sum: float
    min: float
    max: float
    range: float
    mean: float
    median: float
    mode: tuple[float | str, ...]
    variance_population: float
    variance_sample: float | None
    std_dev_population: float
    std_dev_sample: float | None
    q1: float | None
    q2: float
    q3: float | None
    iqr: float | None
    class_width: float
    num_classes: float | None
    raw_data: tuple[float, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return True

    @property
    def has_mode(self) -> bool:
        """Whether any value repeats."""
        return self.mode != (NO_MODE,)

    def to_dict(
        self,
        formatted: bool = True,
        precision: int = DEFAULT_PRECISION,
    ) -> dict[str, Any]:
        """Convert to dictionary.

        Args:
            formatted: Render numbers as display strings (None stays None)
            precision: Decimal places used when formatting

        Returns:
            Dictionary keyed by statistic name
        """

        def fmt(value: float | None) -> str | float | None:
            return format_number(value, precision) if formatted else value

        return {
            "success": True,
            "count": self.count,
            "sum": fmt(self.sum),
            "min": fmt(self.min),
            "max": fmt(self.max),
            "range": fmt(self.range),
            "mean": fmt(self.mean),
            "median": fmt(self.median),
            "mode": format_mode(self.mode, precision) if formatted else list(self.mode),
            "variance_population": fmt(self.variance_population),
            "variance_sample": fmt(self.variance_sample),
            "std_dev_population": fmt(self.std_dev_population),
            "std_dev_sample": fmt(self.std_dev_sample),
            "q1": fmt(self.q1),
            "q2": fmt(self.q2),
            "q3": fmt(self.q3),
            "iqr": fmt(self.iqr),
            "class_width": fmt(self.class_width),
            "num_classes": self.num_classes,
            "raw_data": list(self.raw_data),
        }

    def format_for_display(self, precision: int = DEFAULT_PRECISION) -> str:
        """Format as human-readable string."""
        d = self.to_dict(formatted=True, precision=precision)
        na = "n/a"

        def show(key: str) -> str:
            value = d[key]
            return na if value is None else value

        classes = "auto" if not self.num_classes or self.num_classes < 1 else self.num_classes
        lines = [
            f"**Statistics** (n={self.count})",
            f"  Sum: {show('sum')}",
            f"  Range: [{show('min')}, {show('max')}] (width {show('range')})",
            f"  Mean: {show('mean')}",
            f"  Median: {show('median')}",
            f"  Mode: {', '.join(d['mode'])}",
            f"  Variance: {show('variance_population')} (population), "
            f"{show('variance_sample')} (sample)",
            f"  Std Dev: {show('std_dev_population')} (population), "
            f"{show('std_dev_sample')} (sample)",
            f"  Quartiles: Q1={show('q1')}, Q2={show('q2')}, Q3={show('q3')}",
            f"  IQR: {show('iqr')}",
            f"  Class Width: {show('class_width')} ({classes} classes)",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class EmptyInputError:
    """Marker returned by ``compute_all`` when the sample holds no values.

    This is a result, not an exception: ``compute_all`` never raises for
    empty input.
    """

    error: str = EMPTY_INPUT_MESSAGE

    @property
    def success(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"success": False, "error": self.error}

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        return f"**Calculation Failed:** {self.error}"


def compute_all(
    data: Sequence[float],
    num_classes: float | None = DEFAULT_NUM_CLASSES,
) -> StatisticsResult | EmptyInputError:
    """Compute every statistic for a sample.

    Args:
        data: Sample values (see ``statify.core.parsing.parse_input``)
        num_classes: Class count for the class width; None or < 1 uses
            Sturges' rule. Echoed unchanged in the result.

    Returns:
        StatisticsResult, or EmptyInputError when the sample is empty

    Example:
        >>> result = compute_all([2, 4, 4, 4, 5, 5, 7, 9])
        >>> result.variance_population, result.to_dict()["variance_sample"]
        (4.0, '4.5714')
    """
    if data is None or len(data) == 0:
        logger.debug("compute_all called with an empty sample")
        return EmptyInputError()

    values = _as_array(data)
    basic = calculate_basic_stats(values)
    quartiles = calculate_quartiles(values)

    result = StatisticsResult(
        count=basic.count,
        sum=basic.sum,
        min=basic.min,
        max=basic.max,
        range=basic.range,
        mean=calculate_mean(values),
        median=calculate_median(values),
        mode=tuple(calculate_mode(values)),
        variance_population=calculate_variance(values, population=True),
        variance_sample=calculate_variance(values, population=False),
        std_dev_population=calculate_std_dev(values, population=True),
        std_dev_sample=calculate_std_dev(values, population=False),
        q1=quartiles.q1,
        q2=quartiles.q2,
        q3=quartiles.q3,
        iqr=quartiles.iqr,
        class_width=calculate_class_width(values, num_classes),
        num_classes=num_classes,
        raw_data=tuple(float(v) for v in values),
    )

    logger.debug(f"Computed statistics for {result.count} values")
    return result
