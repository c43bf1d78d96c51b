"""Aggregation engine.

Pure functions that fold record collections into sums, averages,
category breakdowns and per-month totals, plus the expense and portfolio
summaries built on top of them. Nothing here mutates its input.

Negative amounts are not special-cased: they flow through sums and
ratios as given.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Any

from finhealth.core.dates import month_start, previous_month_start
from finhealth.core.models import (
    CategoryShare,
    Expense,
    ExpenseSummary,
    Investment,
    InvestmentType,
    InvestmentTypeSummary,
    Portfolio,
    SpendingChange,
    TimePeriod,
)
from finhealth.engine.periods import filter_by_period, filter_by_range, record_date


def sum_amount(records: Iterable[Any]) -> Decimal:
    """Sum the ``amount`` of every record (0 for an empty collection)."""
    return sum((r.amount for r in records), Decimal(0))


def average(records: Sequence[Any]) -> Decimal:
    """Average ``amount`` per record (0 for an empty collection)."""
    if not records:
        return Decimal(0)
    return sum_amount(records) / len(records)


def category_breakdown(records: Iterable[Any]) -> dict[Any, Decimal]:
    """Total amount per category.

    Only categories with at least one record appear; there are no zero
    entries. The values always add up to ``sum_amount(records)``.

    Args:
        records: Records with ``category`` and ``amount``.

    Returns:
        Mapping of category to total, in order of first appearance.
    """
    totals: dict[Any, Decimal] = {}
    for r in records:
        totals[r.category] = totals.get(r.category, Decimal(0)) + r.amount
    return totals


def group_by_calendar_month(records: Iterable[Any]) -> dict[date, Decimal]:
    """Total amount per calendar month.

    Each record is assigned to the first day of the month of its date.

    Returns:
        Mapping of month start to total, sorted by month.
    """
    totals: dict[date, Decimal] = {}
    for r in records:
        key = month_start(record_date(r))
        totals[key] = totals.get(key, Decimal(0)) + r.amount
    return dict(sorted(totals.items()))


# -----------------------------------------------------------------------------
# Expense summaries
# -----------------------------------------------------------------------------


def calculate_expense_summary(
    expenses: Sequence[Expense],
    now: datetime | None = None,
) -> ExpenseSummary:
    """Summarize spending over the standard windows.

    Args:
        expenses: All expenses.
        now: Reference moment (default: current time).

    Returns:
        ExpenseSummary with all-time, month, week and day totals and an
        all-time category breakdown.
    """
    now = now or datetime.now()
    return ExpenseSummary(
        total_expenses=sum_amount(expenses),
        monthly_expenses=sum_amount(filter_by_period(expenses, TimePeriod.MONTH, now)),
        weekly_expenses=sum_amount(filter_by_period(expenses, TimePeriod.WEEK, now)),
        daily_expenses=sum_amount(filter_by_period(expenses, TimePeriod.DAY, now)),
        category_breakdown=category_breakdown(expenses),
        last_updated=now,
    )


def calculate_category_shares(expenses: Sequence[Expense]) -> list[CategoryShare]:
    """Spending per category with record counts and share of the total.

    Returns an empty list when the total is not positive, since shares are
    meaningless then.

    Returns:
        CategoryShare list, largest amount first.
    """
    total = sum_amount(expenses)
    if total <= 0:
        return []

    counts: dict[Any, int] = {}
    for e in expenses:
        counts[e.category] = counts.get(e.category, 0) + 1

    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            count=counts[category],
            percentage=amount / total * 100,
        )
        for category, amount in category_breakdown(expenses).items()
    ]
    return sorted(shares, key=lambda s: s.amount, reverse=True)


def calculate_spending_change(
    expenses: Sequence[Expense],
    now: datetime | None = None,
) -> SpendingChange:
    """Compare this calendar month's spending with the previous month's.

    Args:
        expenses: All expenses.
        now: Reference moment (default: current time).

    Returns:
        SpendingChange; ``change_percentage`` is None when the previous
        month has no spending.
    """
    now = now or datetime.now()
    this_month = month_start(now)
    previous_start = previous_month_start(now)

    current = sum_amount(filter_by_period(expenses, TimePeriod.MONTH, now))
    previous = sum_amount(
        filter_by_range(expenses, previous_start, this_month - timedelta(days=1))
    )

    change: Decimal | None = None
    if previous != 0:
        change = (current - previous) / previous * 100
    return SpendingChange(
        current_month=current,
        previous_month=previous,
        change_percentage=change,
    )


def spending_insight(expenses: Sequence[Expense], now: datetime | None = None) -> str:
    """One-line message comparing this month's spending with last month's."""
    change = calculate_spending_change(expenses, now)
    if change.change_percentage is None:
        if change.current_month == 0:
            return "Your spending is consistent with last month"
        return "No spending recorded last month to compare against"
    if change.change_percentage > 0:
        return f"Your spending increased by {change.change_percentage:.1f}% this month"
    if change.change_percentage < 0:
        return f"Great job! You saved {-change.change_percentage:.1f}% compared to last month"
    return "Your spending is consistent with last month"


def recent_expenses(expenses: Sequence[Expense], limit: int = 5) -> list[Expense]:
    """Most recent expenses first."""
    return sorted(expenses, key=lambda e: e.date, reverse=True)[:limit]


# -----------------------------------------------------------------------------
# Investments
# -----------------------------------------------------------------------------


def build_portfolio(
    investments: Sequence[Investment],
    now: datetime | None = None,
) -> Portfolio:
    """Build a portfolio view from the current investment collection."""
    return Portfolio(investments=list(investments), last_updated=now or datetime.now())


def distinct_investment_types(investments: Iterable[Investment]) -> set[InvestmentType]:
    return {i.type for i in investments}


def summarize_investments_by_type(
    investments: Sequence[Investment],
) -> list[InvestmentTypeSummary]:
    """Value, count and gain/loss per investment type.

    Returns:
        One summary per type present, largest value first.
    """
    by_type: dict[InvestmentType, InvestmentTypeSummary] = {}
    for inv in investments:
        summary = by_type.setdefault(inv.type, InvestmentTypeSummary(type=inv.type))
        summary.value += inv.total_value
        summary.count += 1
        summary.gain_loss += inv.gain_loss
    return sorted(by_type.values(), key=lambda s: s.value, reverse=True)


def largest_holdings(investments: Sequence[Investment], n: int = 3) -> list[Investment]:
    """Top n holdings by current value."""
    return sorted(investments, key=lambda i: i.total_value, reverse=True)[:n]


def top_performers(investments: Sequence[Investment], n: int = 3) -> list[Investment]:
    """Best n holdings by gain/loss percentage."""
    return sorted(investments, key=lambda i: i.gain_loss_percentage, reverse=True)[:n]


def worst_performers(investments: Sequence[Investment], n: int = 3) -> list[Investment]:
    """Worst n holdings by gain/loss percentage."""
    return sorted(investments, key=lambda i: i.gain_loss_percentage)[:n]
