"""定常状態の分析"""

from redistributive_growth.analysis.trends import (
    TREND_LABELS,
    ScenarioComparison,
    TrendDirection,
    TrendVariables,
    annualized_interest_rate,
    build_comparison,
    classify_change,
    compare_scenarios,
    compare_trend_variables,
    compute_trend_variables,
    mortgage_borrowing,
)

__all__ = [
    "ScenarioComparison",
    "TREND_LABELS",
    "TrendDirection",
    "TrendVariables",
    "annualized_interest_rate",
    "build_comparison",
    "classify_change",
    "compare_scenarios",
    "compare_trend_variables",
    "compute_trend_variables",
    "mortgage_borrowing",
]
