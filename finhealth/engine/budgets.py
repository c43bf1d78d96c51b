"""Budget spend recompute and budget summaries.

``recompute_spending`` is the only writer of ``BudgetCategory.spent``. It is
re-run in full after every expense change and every budget add, so the
result depends only on the current budget and expense collections.
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

from finhealth.core.models import Budget, BudgetCategory, BudgetSummary, Expense
from finhealth.engine.calculator import sum_amount
from finhealth.engine.periods import filter_by_range

# Overall progress above which spending is "close to the limits".
NEAR_LIMIT_PROGRESS = Decimal("0.9")


def recompute_spending(budgets: Sequence[Budget], expenses: Sequence[Expense]) -> list[Budget]:
    """Recompute ``spent`` for every category of every active budget.

    A category's spent is the sum of expenses dated within the budget's
    [start_date, end_date] (both inclusive) whose category matches the
    category's ``expense_category``. Expired budgets are still recomputed;
    inactive budgets are returned unchanged.

    Args:
        budgets: Budgets in collection order.
        expenses: All expenses.

    Returns:
        New list of budgets in the same order. Inputs are not modified.
    """
    result = []
    for budget in budgets:
        if not budget.is_active:
            result.append(budget)
            continue

        in_range = filter_by_range(expenses, budget.start_date, budget.end_date)
        categories = [
            category.model_copy(
                update={
                    "spent": sum_amount(
                        e for e in in_range if e.category == category.expense_category
                    )
                }
            )
            for category in budget.categories
        ]
        result.append(budget.model_copy(update={"categories": categories}))
    return result


def active_budgets(budgets: Sequence[Budget], today: date | None = None) -> list[Budget]:
    """Budgets that are switched on and not yet expired."""
    today = today or date.today()
    return [b for b in budgets if b.is_active and not b.is_expired(today)]


def categories_needing_attention(
    budgets: Sequence[Budget],
    today: date | None = None,
) -> list[BudgetCategory]:
    """Alerting or over-budget categories of active budgets, worst first."""
    flagged = [
        category
        for budget in active_budgets(budgets, today)
        for category in budget.categories
        if category.should_alert or category.is_over_budget
    ]
    return sorted(flagged, key=lambda c: c.spent_percentage, reverse=True)


def calculate_budget_summary(
    budgets: Sequence[Budget],
    today: date | None = None,
    now: datetime | None = None,
) -> BudgetSummary:
    """Summarize active budgets.

    Amounts and counts other than ``total_budgets`` cover active,
    unexpired budgets only. ``average_spending_rate`` is the mean
    ``budget_progress`` of those budgets.

    Args:
        budgets: All budgets.
        today: Reference day for expiry (default: today).
        now: Timestamp recorded on the summary.

    Returns:
        BudgetSummary for the collection.
    """
    active = active_budgets(budgets, today)
    average_rate = Decimal(0)
    if active:
        average_rate = sum((b.budget_progress for b in active), Decimal(0)) / len(active)

    return BudgetSummary(
        total_budgets=len(budgets),
        active_budgets=len(active),
        total_budget_amount=sum((b.total_budget for b in active), Decimal(0)),
        total_spent=sum((b.total_spent for b in active), Decimal(0)),
        average_spending_rate=average_rate,
        categories_over_budget=sum(1 for b in active for c in b.categories if c.is_over_budget),
        budgets_over_limit=sum(1 for b in active if b.is_over_budget),
        last_updated=now or datetime.now(),
    )


def budget_recommendations(budgets: Sequence[Budget], today: date | None = None) -> list[str]:
    """Tips based on how active budgets are tracking.

    Returns:
        Non-empty list of messages; a single positive message when nothing
        needs attention.
    """
    summary = calculate_budget_summary(budgets, today)
    tips = []

    if summary.overall_progress > NEAR_LIMIT_PROGRESS:
        tips.append(
            "You're spending close to your budget limits. "
            "Consider reducing non-essential expenses."
        )
    if summary.budgets_over_limit > 0:
        tips.append(
            f"You have {summary.budgets_over_limit} budget(s) over limit. "
            "Review your spending in these areas."
        )

    attention = categories_needing_attention(budgets, today)[:3]
    if attention:
        tips.append("Monitor spending in: " + ", ".join(c.name for c in attention))

    if summary.active_budgets == 0:
        tips.append("Create your first budget to start tracking your spending effectively.")

    if not tips:
        tips.append("Great job staying within your budgets! Keep up the good work.")
    return tips
