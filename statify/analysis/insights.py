"""Rule-based insights for computed statistics.

This module turns a StatisticsResult into short, plain-language notes that
help users read their numbers:
- Distribution shape (symmetry or skew from mean vs median)
- Outliers beyond the Tukey fences
- Small-sample caveats

The rules are deterministic and need no external service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import numpy as np

from statify.core.engine import StatisticsResult

logger = logging.getLogger(__name__)


class InsightType(str, Enum):
    """Categories of insight."""

    DISTRIBUTION = "distribution"
    OUTLIERS = "outliers"
    QUALITY = "quality"


class InsightLevel(str, Enum):
    """How an insight should be presented."""

    POSITIVE = "positive"
    INFO = "info"
    WARNING = "warning"


@dataclass
class Insight:
    """A single observation about the data.

    Attributes:
        type: Category of the insight
        level: Tone of the insight
        title: Short heading
        description: One-sentence explanation with the relevant numbers
        details: Values behind the insight
    """

    type: InsightType
    level: InsightLevel
    title: str
    description: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type.value,
            "level": self.level.value,
            "title": self.title,
            "description": self.description,
            "details": self.details,
        }


@dataclass
class InsightReport:
    """Summary sentence plus the insights for one result.

    Attributes:
        summary: One-line overview of the sample
        insights: Insights in presentation order
    """

    summary: str
    insights: list[Insight] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "summary": self.summary,
            "insights": [i.to_dict() for i in self.insights],
        }

    def get_insights_by_type(self, insight_type: InsightType) -> list[Insight]:
        """Get all insights of a specific type."""
        return [i for i in self.insights if i.type == insight_type]

    def has_warnings(self) -> bool:
        """Check if any insight is a warning."""
        return any(i.level == InsightLevel.WARNING for i in self.insights)

    def format_for_display(self) -> str:
        """Format as human-readable string."""
        lines = ["**Insights:**", self.summary]
        for insight in self.insights:
            lines.append(f"- [{insight.level.value}] {insight.title}: {insight.description}")
        return "\n".join(lines)


# Mean and median within this percentage of the median count as symmetrical
SYMMETRY_THRESHOLD_PCT = 5.0
DEFAULT_IQR_MULTIPLIER = 1.5
DEFAULT_MIN_SAMPLE_SIZE = 30


def generate_insights(
    result: StatisticsResult,
    iqr_multiplier: float = DEFAULT_IQR_MULTIPLIER,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
) -> InsightReport:
    """Generate insights for a computed result.

    Args:
        result: Statistics for a non-empty sample
        iqr_multiplier: Fence distance in IQRs for outlier detection
        min_sample_size: Below this count a sample-size note is added

    Returns:
        InsightReport with summary and insights

    Example:
        >>> from statify.core.engine import compute_all
        >>> report = generate_insights(compute_all([1, 2, 3, 4, 5, 100]))
        >>> [i.title for i in report.insights]
        ['Right-Skewed Distribution', '1 Outlier(s) Detected', 'Sample Size Note']
    """
    insights = [_distribution_insight(result)]

    outliers = _outlier_insight(result, iqr_multiplier)
    if outliers is not None:
        insights.append(outliers)

    if result.count < min_sample_size:
        insights.append(
            Insight(
                type=InsightType.QUALITY,
                level=InsightLevel.INFO,
                title="Sample Size Note",
                description=(
                    f"{result.count} data points. Consider {min_sample_size}+ "
                    "samples for more robust statistics."
                ),
                details={"count": result.count, "recommended": min_sample_size},
            )
        )

    summary = (
        f"Analysis of {result.count} values ranging from {result.min:.2f} "
        f"to {result.max:.2f}. Average: {result.mean:.2f}, "
        f"typical value: {result.median:.2f}."
    )

    logger.debug(f"Generated {len(insights)} insights for {result.count} values")
    return InsightReport(summary=summary, insights=insights)


def _distribution_insight(result: StatisticsResult) -> Insight:
    """Classify the shape from the gap between mean and median."""
    mean = result.mean
    median = result.median
    diff = abs(mean - median)
    percent_diff = diff / abs(median) * 100 if median != 0 else 0.0
    details = {"mean": mean, "median": median, "percent_difference": percent_diff}

    if percent_diff < SYMMETRY_THRESHOLD_PCT:
        return Insight(
            type=InsightType.DISTRIBUTION,
            level=InsightLevel.POSITIVE,
            title="Symmetrical Distribution",
            description=(
                f"Mean ({mean:.2f}) and median ({median:.2f}) are very close, "
                "indicating balanced data."
            ),
            details=details,
        )

    if mean > median:
        return Insight(
            type=InsightType.DISTRIBUTION,
            level=InsightLevel.INFO,
            title="Right-Skewed Distribution",
            description=(
                f"Mean ({mean:.2f}) exceeds median ({median:.2f}). "
                "Some high values pull the average up."
            ),
            details=details,
        )

    return Insight(
        type=InsightType.DISTRIBUTION,
        level=InsightLevel.INFO,
        title="Left-Skewed Distribution",
        description=(
            f"Mean ({mean:.2f}) is below median ({median:.2f}). "
            "Some low values pull the average down."
        ),
        details=details,
    )


def _outlier_insight(result: StatisticsResult, iqr_multiplier: float) -> Insight | None:
    """Flag values outside the Tukey fences; None when quartiles are undefined."""
    if result.q1 is None or result.q3 is None or result.iqr is None:
        return None

    lower_fence = result.q1 - iqr_multiplier * result.iqr
    upper_fence = result.q3 + iqr_multiplier * result.iqr

    values = np.asarray(result.raw_data, dtype=float)
    outliers = values[(values < lower_fence) | (values > upper_fence)]
    details = {
        "lower_fence": lower_fence,
        "upper_fence": upper_fence,
        "outliers": [float(v) for v in outliers],
    }

    if len(outliers) == 0:
        return Insight(
            type=InsightType.OUTLIERS,
            level=InsightLevel.POSITIVE,
            title="No Outliers Detected",
            description=(
                f"All values fall within normal range "
                f"({lower_fence:.2f} to {upper_fence:.2f})."
            ),
            details=details,
        )

    listed = ", ".join(f"{v:.2f}" for v in outliers)
    return Insight(
        type=InsightType.OUTLIERS,
        level=InsightLevel.WARNING,
        title=f"{len(outliers)} Outlier(s) Detected",
        description=f"Values [{listed}] are outside expected range.",
        details=details,
    )
