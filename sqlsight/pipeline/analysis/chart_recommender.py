"""
Chart recommendation engine
Analyzes query results to suggest the best chart type
"""
import logging
import re
from typing import Any, Dict, Sequence

from sqlsight.dtos.analysis import ChartKind, ChartRecommendation, ColumnKind
from sqlsight.pipeline.analysis.type_inference import infer_column_types

logger = logging.getLogger(__name__)

# Pie only for small wholes
PIE_MAX_ROWS = 7
# Area chart for large numeric sets
AREA_MIN_ROWS = 20

AGGREGATION_PATTERN = re.compile(r"count|sum|avg|total|max|min", re.I)


def recommend_chart(rows: Sequence[Dict[str, Any]], columns: Sequence[str]) -> ChartRecommendation:
    """
    Pick a chart type and axes for a result set

    Rules are evaluated in order and the first match decides:
    1. no rows                              -> table
    2. date + numeric columns               -> line (time series)
    3. one categorical + numeric column(s)  -> pie (<= 7 rows) or bar
    4. two or more numeric columns          -> bar
    5. aggregate-named column + categorical -> bar
    6. more than 20 rows + numeric column   -> area
    7. anything else                        -> table
    """
    if not rows:
        return ChartRecommendation(type=ChartKind.TABLE, reason="No data to visualize")

    column_types = infer_column_types(rows, columns)
    numeric = [c.name for c in column_types if c.kind == ColumnKind.NUMERIC]
    categorical = [c.name for c in column_types if c.kind == ColumnKind.CATEGORICAL]
    dates = [c.name for c in column_types if c.kind == ColumnKind.DATE]

    logger.debug(f"Chart columns: numeric={numeric}, categorical={categorical}, date={dates}")

    if dates and numeric:
        return ChartRecommendation(
            type=ChartKind.LINE,
            reason="Time series data detected - line chart shows trends over time",
            x_axis=dates[0],
            y_axis=numeric[0],
        )

    if len(categorical) == 1 and numeric:
        if len(rows) <= PIE_MAX_ROWS:
            return ChartRecommendation(
                type=ChartKind.PIE,
                reason="Small categorical dataset - pie chart shows proportions",
                x_axis=categorical[0],
                y_axis=numeric[0],
            )
        return ChartRecommendation(
            type=ChartKind.BAR,
            reason="Categorical data - bar chart compares values across categories",
            x_axis=categorical[0],
            y_axis=numeric[0],
        )

    if len(numeric) >= 2:
        return ChartRecommendation(
            type=ChartKind.BAR,
            reason="Multiple numeric values - bar chart compares metrics",
            x_axis=columns[0],
            y_axis=numeric[0],
        )

    has_aggregation = any(AGGREGATION_PATTERN.search(column) for column in columns)
    if has_aggregation and categorical:
        fallback_y = columns[1] if len(columns) > 1 else None
        return ChartRecommendation(
            type=ChartKind.BAR,
            reason="Aggregated data - bar chart shows computed values by category",
            x_axis=categorical[0],
            y_axis=numeric[0] if numeric else fallback_y,
        )

    if len(rows) > AREA_MIN_ROWS and numeric:
        return ChartRecommendation(
            type=ChartKind.AREA,
            reason="Large dataset - area chart shows overall trends",
            x_axis=columns[0],
            y_axis=numeric[0],
        )

    return ChartRecommendation(
        type=ChartKind.TABLE,
        reason="Complex data structure - table view provides detailed information",
    )
