"""
Insight Generator
Generates natural language insights and follow-up questions from query results
"""
import logging
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Dict, List, Optional, Sequence, Tuple

from sqlsight.dtos.analysis import Confidence, Insight, InsightKind
from sqlsight.pipeline.analysis.type_inference import column_values, to_number

logger = logging.getLogger(__name__)

Rows = Sequence[Dict[str, Any]]

CURRENCY_PATTERN = re.compile(r"price|amount|revenue|cost|total|sales", re.I)
COUNT_PATTERN = re.compile(r"count|quantity|stock", re.I)
TIME_PATTERN = re.compile(r"date|time|created|updated|year|month", re.I)
CATEGORY_PATTERN = re.compile(r"region|category|type|name|status", re.I)

# Follow-up cues
FOLLOW_UP_TIME_PATTERN = re.compile(r"date|time|created|year|month", re.I)
FOLLOW_UP_MONEY_PATTERN = re.compile(r"price|amount|revenue|quantity|total", re.I)

TREND_MIN_VALUES = 3
TREND_MIN_CHANGE_PCT = 5.0
ANOMALY_MIN_VALUES = 5
ANOMALY_STDDEVS = 2
ANOMALY_MAX_SHARE = 0.1
MAX_FOLLOW_UPS = 4

# Wide enough to quantize any finite float
_CURRENCY_CONTEXT = Context(prec=400)


def generate_insights(rows: Rows, columns: Sequence[str], question: str = "") -> List[Insight]:
    """
    Generate insights for a result set

    Order: summary, numeric summaries, trends, comparison, anomalies.
    Empty results yield a single "no results" summary.
    """
    if not rows:
        return [Insight(
            type=InsightKind.SUMMARY,
            text="No results found for this query.",
            confidence=Confidence.HIGH,
        )]

    insights = [Insight(
        type=InsightKind.SUMMARY,
        text=f"Found {len(rows)} {_plural(len(rows), 'result')} with {len(columns)} {_plural(len(columns), 'column')}.",
        confidence=Confidence.HIGH,
    )]

    insights.extend(_numeric_insights(rows, columns))
    insights.extend(_trend_insights(rows, columns))
    insights.extend(_comparison_insights(rows, columns))
    insights.extend(_anomaly_insights(rows, columns))

    logger.info(f"Generated {len(insights)} insight(s) for {len(rows)} row(s)")
    return insights


def _numeric_insights(rows: Rows, columns: Sequence[str]) -> List[Insight]:
    insights = []

    for column in columns:
        values = _numbers(rows, column)
        if len(values) < 2:
            continue

        total = sum(values)
        if CURRENCY_PATTERN.search(column):
            insights.append(Insight(
                type=InsightKind.SUMMARY,
                text=(
                    f"Total {_label(column)}: {_format_currency(total, 0)}, ranging from "
                    f"{_format_currency(min(values), 2)} to {_format_currency(max(values), 2)}."
                ),
                confidence=Confidence.HIGH,
            ))
        elif COUNT_PATTERN.search(column):
            insights.append(Insight(
                type=InsightKind.SUMMARY,
                text=f"Total {_label(column)}: {_format_number(total)}, average: {total / len(values):.1f}.",
                confidence=Confidence.HIGH,
            ))

    return insights


def _trend_insights(rows: Rows, columns: Sequence[str]) -> List[Insight]:
    """Compare first-half vs second-half means when a time column is present"""
    insights = []

    if not any(TIME_PATTERN.search(column) for column in columns):
        return insights

    for column in columns:
        values = _all_numbers(rows, column)
        if values is None or len(values) < TREND_MIN_VALUES:
            continue

        midpoint = len(values) // 2
        first_avg = _mean(values[:midpoint])
        second_avg = _mean(values[midpoint:])

        if first_avg == 0:
            logger.debug(f"Skipping trend for {column}: first-half mean is zero")
            continue

        percent_change = (second_avg - first_avg) / abs(first_avg) * 100
        if abs(percent_change) > TREND_MIN_CHANGE_PCT:
            direction = "increased" if percent_change > 0 else "decreased"
            insights.append(Insight(
                type=InsightKind.TREND,
                text=f"{_label(column)} {direction} by {abs(percent_change):.1f}% over the time period.",
                confidence=Confidence.MEDIUM,
            ))

    return insights


def _comparison_insights(rows: Rows, columns: Sequence[str]) -> List[Insight]:
    """Rank groups of a category-like column by the total of a numeric column"""
    category_column = next((c for c in columns if CATEGORY_PATTERN.search(c)), None)
    if category_column is None:
        return []

    numeric_column = next(
        (c for c in columns if c != category_column and _all_numbers(rows, c) is not None),
        None,
    )
    if numeric_column is None:
        return []

    totals: Dict[str, float] = {}
    for row in rows:
        category = row.get(category_column)
        value = to_number(row.get(numeric_column))
        if category is None or value is None:
            continue
        key = str(category)
        totals[key] = totals.get(key, 0.0) + value

    if len(totals) < 2:
        return []

    ranked: List[Tuple[str, float]] = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    (top, top_total), (second, second_total) = ranked[0], ranked[1]

    return [Insight(
        type=InsightKind.COMPARISON,
        text=(
            f'Top {_label(category_column)}: "{top}" leads with {_format_number(top_total)}, '
            f'followed by "{second}" at {_format_number(second_total)}.'
        ),
        confidence=Confidence.HIGH,
    )]


def _anomaly_insights(rows: Rows, columns: Sequence[str]) -> List[Insight]:
    insights = []

    for column in columns:
        values = _numbers(rows, column)
        if len(values) < ANOMALY_MIN_VALUES:
            continue

        outliers = find_outliers(values)
        # Notable but not pervasive
        if 0 < len(outliers) < len(values) * ANOMALY_MAX_SHARE:
            insights.append(Insight(
                type=InsightKind.ANOMALY,
                text=(
                    f"{len(outliers)} unusual {_plural(len(outliers), 'value')} detected in "
                    f"{_label(column)} (significantly different from average)."
                ),
                confidence=Confidence.MEDIUM,
            ))

    return insights


def find_outliers(values: Sequence[float]) -> List[float]:
    """Values farther than 2 population standard deviations from the mean"""
    if not values:
        return []
    avg = _mean(values)
    std_dev = math.sqrt(sum((v - avg) * (v - avg) for v in values) / len(values))
    return [v for v in values if abs(v - avg) > ANOMALY_STDDEVS * std_dev]


def generate_follow_up_questions(rows: Rows, columns: Sequence[str], question: str = "") -> List[str]:
    """
    Suggest up to 4 follow-up questions

    Cues are checked in order: time columns, categorical columns,
    money/quantity columns, then generic questions.
    """
    if not rows:
        return [
            "Can you show me all available tables?",
            "What columns are in the products table?",
        ]

    questions: List[str] = []

    if any(FOLLOW_UP_TIME_PATTERN.search(column) for column in columns):
        questions.append("How does this trend look over the last 6 months?")
        questions.append("Can you compare this year vs last year?")

    if any(CATEGORY_PATTERN.search(column) for column in columns):
        questions.append("Can you break this down by category?")
        questions.append("Which region performs best?")

    if any(FOLLOW_UP_MONEY_PATTERN.search(column) for column in columns):
        questions.append("What is the average and total?")
        questions.append("Show me the top 5 results")

    questions.append("Can you visualize this data?")
    questions.append("What insights can you find?")

    return questions[:MAX_FOLLOW_UPS]


# ============================================
# HELPERS
# ============================================

def _numbers(rows: Rows, column: str) -> List[float]:
    """Values of a column that parse as numbers (others skipped)"""
    numbers = (to_number(v) for v in column_values(rows, column))
    return [n for n in numbers if n is not None]


def _all_numbers(rows: Rows, column: str) -> Optional[List[float]]:
    """Parsed values if every non-null value of the column is numeric, else None"""
    values = column_values(rows, column)
    numbers = [to_number(v) for v in values]
    if not numbers or any(n is None for n in numbers):
        return None
    return numbers


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _label(column: str) -> str:
    return column.replace("_", " ")


def _plural(count: int, word: str) -> str:
    return word if count == 1 else f"{word}s"


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _format_currency(value: float, decimals: int) -> str:
    """Dollar amount, halves rounded away from zero"""
    if not math.isfinite(value):
        return f"${value}"
    amount = Decimal(repr(abs(value))).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=_CURRENCY_CONTEXT
    )
    sign = "-" if value < 0 and amount else ""
    return f"{sign}${amount:,.{decimals}f}"
