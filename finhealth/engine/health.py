"""Financial health scoring.

The score is a weighted sum of five components, each clamped into its own
point range before summing:

    savings          25  savings ratio relative to a 20% target
    debt             20  debt-to-income relative to a 30% ceiling
    expense pattern  15  month-to-month spending variability over the quarter
    diversification  20  distinct investment types out of 5
    emergency fund   20  emergency savings relative to 6 months of spending

The overall score is the floor of the sum, so it always lies in [0, 100].
"""

import logging
import math
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from finhealth.core.models import (
    Expense,
    FinancialHealthScore,
    Investment,
    SavingsCategory,
    SavingsGoal,
    TimePeriod,
)
from finhealth.engine.calculator import distinct_investment_types, group_by_calendar_month, sum_amount
from finhealth.engine.periods import filter_by_period

logger = logging.getLogger(__name__)

TARGET_SAVINGS_RATIO = Decimal("0.2")
MAX_DEBT_TO_INCOME = Decimal("0.3")
DIVERSIFICATION_TYPES = 5
EMERGENCY_FUND_TARGET_MONTHS = 6

SAVINGS_WEIGHT = 25
DEBT_WEIGHT = 20
EXPENSE_WEIGHT = 15
INVESTMENT_WEIGHT = 20
EMERGENCY_WEIGHT = 20

# Recommendation thresholds
MIN_EMERGENCY_MONTHS = 3
MIN_DIVERSIFICATION = Decimal("0.3")
MAX_VARIABILITY = Decimal("0.4")


def _ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    if denominator == 0:
        return Decimal(0)
    return numerator / denominator


def _clamp(points: Decimal, weight: int) -> Decimal:
    return min(max(points, Decimal(0)), Decimal(weight))


def calculate_expense_variability(monthly_totals: Sequence[Decimal]) -> Decimal:
    """Coefficient of variation of monthly spending.

    Population standard deviation divided by the mean; 0 when there are no
    months or the mean is 0.
    """
    if not monthly_totals:
        return Decimal(0)
    mean = sum(monthly_totals, Decimal(0)) / len(monthly_totals)
    if mean == 0:
        return Decimal(0)
    variance = sum(((v - mean) ** 2 for v in monthly_totals), Decimal(0)) / len(monthly_totals)
    return variance.sqrt() / mean


def calculate_component_scores(score: FinancialHealthScore) -> dict[str, Decimal]:
    """Points earned by each component, each within [0, weight]."""
    return {
        "savings": _clamp(min(score.savings_ratio / TARGET_SAVINGS_RATIO, Decimal(1)) * SAVINGS_WEIGHT, SAVINGS_WEIGHT),
        "debt": _clamp(max(1 - score.debt_to_income_ratio / MAX_DEBT_TO_INCOME, Decimal(0)) * DEBT_WEIGHT, DEBT_WEIGHT),
        "expenses": _clamp(max(1 - score.expense_variability, Decimal(0)) * EXPENSE_WEIGHT, EXPENSE_WEIGHT),
        "investments": _clamp(score.investment_diversification * INVESTMENT_WEIGHT, INVESTMENT_WEIGHT),
        "emergency_fund": _clamp(
            min(score.emergency_fund_months / EMERGENCY_FUND_TARGET_MONTHS, Decimal(1)) * EMERGENCY_WEIGHT,
            EMERGENCY_WEIGHT,
        ),
    }


def build_recommendations(score: FinancialHealthScore) -> list[str]:
    """Independent threshold checks in fixed order.

    Returns:
        Every triggered tip, or a single positive message when none apply.
    """
    tips = []
    if score.savings_ratio < TARGET_SAVINGS_RATIO:
        tips.append("Try to save at least 20% of your income")
    if score.debt_to_income_ratio > MAX_DEBT_TO_INCOME:
        tips.append("Consider reducing debt to improve financial health")
    if score.emergency_fund_months < MIN_EMERGENCY_MONTHS:
        tips.append("Build an emergency fund covering 3-6 months of expenses")
    if score.investment_diversification < MIN_DIVERSIFICATION:
        tips.append("Diversify your investment portfolio across different asset types")
    if score.expense_variability > MAX_VARIABILITY:
        tips.append("Work on creating a more consistent spending pattern")
    if not tips:
        tips.append("Great job! Keep maintaining your excellent financial habits")
    return tips


def compute_health_score(
    expenses: Sequence[Expense],
    investments: Sequence[Investment],
    savings_goals: Sequence[SavingsGoal],
    monthly_income: Decimal,
    total_debt: Decimal,
    now: datetime | None = None,
) -> FinancialHealthScore:
    """Compute the financial health score from scratch.

    Args:
        expenses: All expenses.
        investments: All investments.
        savings_goals: All savings goals.
        monthly_income: Income used for the savings and debt ratios.
        total_debt: Outstanding debt.
        now: Reference moment for the month and quarter windows.

    Returns:
        FinancialHealthScore with ratios, overall score and recommendations.
    """
    now = now or datetime.now()

    monthly_expenses = sum_amount(filter_by_period(expenses, TimePeriod.MONTH, now))
    monthly_savings = max(monthly_income - monthly_expenses, Decimal(0))

    quarter = filter_by_period(expenses, TimePeriod.QUARTER, now)
    monthly_totals = list(group_by_calendar_month(quarter).values())

    types_used = len(distinct_investment_types(investments))
    emergency_savings = sum(
        (g.current_amount for g in savings_goals if g.category == SavingsCategory.EMERGENCY),
        Decimal(0),
    )

    score = FinancialHealthScore(
        savings_ratio=_ratio(monthly_savings, monthly_income),
        debt_to_income_ratio=_ratio(total_debt, monthly_income),
        expense_variability=calculate_expense_variability(monthly_totals),
        investment_diversification=min(Decimal(types_used) / DIVERSIFICATION_TYPES, Decimal(1)),
        emergency_fund_months=_ratio(emergency_savings, monthly_expenses),
        last_calculated=now,
    )
    score.overall_score = math.floor(sum(calculate_component_scores(score).values(), Decimal(0)))
    score.recommendations = build_recommendations(score)

    logger.debug(
        "Health score %d (%s): savings=%.2f debt=%.2f variability=%.2f",
        score.overall_score,
        score.score_category.value,
        score.savings_ratio,
        score.debt_to_income_ratio,
        score.expense_variability,
    )
    return score
