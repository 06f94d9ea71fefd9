"""Analysis tools built on the statistics engine.

This module contains:
- Frequency distributions and box plot summaries
- Rule-based insights (skew, outliers, sample size)
"""

from statify.analysis.distribution import (
    BoxPlotSummary,
    FrequencyBin,
    box_plot_summary,
    frequency_distribution,
)
from statify.analysis.insights import (
    Insight,
    InsightLevel,
    InsightReport,
    InsightType,
    generate_insights,
)

__all__ = [
    "BoxPlotSummary",
    "FrequencyBin",
    "box_plot_summary",
    "frequency_distribution",
    "Insight",
    "InsightLevel",
    "InsightReport",
    "InsightType",
    "generate_insights",
]
