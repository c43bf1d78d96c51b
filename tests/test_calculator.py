"""Tests for calculator functions."""

from datetime import date
from decimal import Decimal

from finhealth.core.models import ExpenseCategory, Investment, InvestmentType
from finhealth.engine.calculator import (
    average,
    build_portfolio,
    calculate_category_shares,
    calculate_expense_summary,
    calculate_spending_change,
    category_breakdown,
    group_by_calendar_month,
    largest_holdings,
    recent_expenses,
    spending_insight,
    sum_amount,
    summarize_investments_by_type,
    top_performers,
    worst_performers,
)
from tests.conftest import NOW, make_expense


def make_investment(
    symbol: str,
    shares: str,
    purchase_price: str,
    current_price: str,
    type: InvestmentType = InvestmentType.STOCKS,
) -> Investment:
    return Investment(
        symbol=symbol,
        name=symbol,
        shares=Decimal(shares),
        purchase_price=Decimal(purchase_price),
        current_price=Decimal(current_price),
        purchase_date=date(2023, 6, 1),
        type=type,
    )


class TestSumAndAverage:
    """Tests for sum_amount and average."""

    def test_empty(self) -> None:
        """Test empty collections sum and average to zero."""
        assert sum_amount([]) == Decimal(0)
        assert average([]) == Decimal(0)

    def test_sum(self) -> None:
        """Test simple sum."""
        expenses = [make_expense("10.50", date(2024, 3, 1)), make_expense("4.50", date(2024, 3, 2))]
        assert sum_amount(expenses) == Decimal("15.00")
        assert average(expenses) == Decimal("7.50")

    def test_negative_amounts_propagate(self) -> None:
        """Test negative amounts are summed as given."""
        expenses = [make_expense("100", date(2024, 3, 1)), make_expense("-30", date(2024, 3, 2))]
        assert sum_amount(expenses) == Decimal(70)


class TestCategoryBreakdown:
    """Tests for category_breakdown."""

    def test_partitions_total(self) -> None:
        """Test breakdown values add up to the overall total."""
        expenses = [
            make_expense("12.30", date(2024, 3, 1), ExpenseCategory.FOOD),
            make_expense("40", date(2024, 3, 2), ExpenseCategory.TRAVEL),
            make_expense("7.70", date(2024, 3, 3), ExpenseCategory.FOOD),
            make_expense("-5", date(2024, 3, 4), ExpenseCategory.OTHER),
        ]
        breakdown = category_breakdown(expenses)
        assert sum(breakdown.values(), Decimal(0)) == sum_amount(expenses)
        assert breakdown[ExpenseCategory.FOOD] == Decimal("20.00")

    def test_no_zero_entries(self) -> None:
        """Test categories without records are omitted."""
        breakdown = category_breakdown([make_expense("5", date(2024, 3, 1), ExpenseCategory.TRAVEL)])
        assert list(breakdown) == [ExpenseCategory.TRAVEL]


class TestGroupByCalendarMonth:
    """Tests for group_by_calendar_month."""

    def test_groups_by_month_start(self) -> None:
        """Test each record lands on the first day of its month."""
        expenses = [
            make_expense("100", date(2024, 2, 29)),
            make_expense("50", date(2024, 1, 1)),
            make_expense("25", date(2024, 2, 1)),
        ]
        assert group_by_calendar_month(expenses) == {
            date(2024, 1, 1): Decimal(50),
            date(2024, 2, 1): Decimal(125),
        }


class TestExpenseSummary:
    """Tests for calculate_expense_summary and category shares."""

    def test_window_totals(self) -> None:
        """Test day, week, month and all-time totals."""
        expenses = [
            make_expense("1", date(2024, 3, 15)),   # today
            make_expense("10", date(2024, 3, 12)),  # this week
            make_expense("100", date(2024, 3, 2)),  # this month
            make_expense("1000", date(2024, 2, 20)),
        ]
        summary = calculate_expense_summary(expenses, NOW)
        assert summary.daily_expenses == Decimal(1)
        assert summary.weekly_expenses == Decimal(11)
        assert summary.monthly_expenses == Decimal(111)
        assert summary.total_expenses == Decimal(1111)
        assert summary.last_updated == NOW

    def test_category_shares(self) -> None:
        """Test shares are sorted by amount and sum to 100 percent."""
        expenses = [
            make_expense("25", date(2024, 3, 1), ExpenseCategory.FOOD),
            make_expense("75", date(2024, 3, 2), ExpenseCategory.TRAVEL),
            make_expense("0", date(2024, 3, 3), ExpenseCategory.FOOD),
        ]
        shares = calculate_category_shares(expenses)
        assert [s.category for s in shares] == [ExpenseCategory.TRAVEL, ExpenseCategory.FOOD]
        assert shares[0].percentage == Decimal(75)
        assert shares[1].count == 2

    def test_category_shares_empty_total(self) -> None:
        """Test no shares when nothing was spent."""
        assert calculate_category_shares([]) == []

    def test_recent_expenses(self) -> None:
        """Test most recent expenses come first and the limit applies."""
        expenses = [make_expense(str(d), date(2024, 3, d)) for d in (3, 9, 1, 7)]
        result = recent_expenses(expenses, limit=2)
        assert [e.date.day for e in result] == [9, 7]


class TestSpendingChange:
    """Tests for calculate_spending_change and spending_insight."""

    def test_increase(self) -> None:
        """Test spending up compared with last month."""
        expenses = [make_expense("150", date(2024, 3, 5)), make_expense("100", date(2024, 2, 29))]
        change = calculate_spending_change(expenses, NOW)
        assert change.current_month == Decimal(150)
        assert change.previous_month == Decimal(100)
        assert change.change_percentage == Decimal(50)
        assert spending_insight(expenses, NOW) == "Your spending increased by 50.0% this month"

    def test_decrease(self) -> None:
        """Test spending down compared with last month."""
        expenses = [make_expense("75", date(2024, 3, 5)), make_expense("100", date(2024, 2, 1))]
        assert spending_insight(expenses, NOW) == "Great job! You saved 25.0% compared to last month"

    def test_unchanged(self) -> None:
        """Test equal spending in both months."""
        expenses = [make_expense("80", date(2024, 3, 5)), make_expense("80", date(2024, 2, 10))]
        assert spending_insight(expenses, NOW) == "Your spending is consistent with last month"

    def test_no_previous_month(self) -> None:
        """Test percentage is undefined when last month had no spending."""
        expenses = [make_expense("80", date(2024, 3, 5)), make_expense("500", date(2024, 1, 10))]
        change = calculate_spending_change(expenses, NOW)
        assert change.previous_month == Decimal(0)
        assert change.change_percentage is None
        assert spending_insight(expenses, NOW) == "No spending recorded last month to compare against"


class TestInvestments:
    """Tests for portfolio helpers."""

    def test_investment_derived_values(self) -> None:
        """Test value, cost and gain/loss of a single holding."""
        inv = make_investment("AAPL", "10", "150", "180")
        assert inv.total_value == Decimal(1800)
        assert inv.total_cost == Decimal(1500)
        assert inv.gain_loss == Decimal(300)
        assert inv.gain_loss_percentage == Decimal(20)
        assert inv.is_profit

    def test_zero_cost_percentage(self) -> None:
        """Test gain/loss percentage is 0 when cost is 0."""
        assert make_investment("GIFT", "5", "0", "10").gain_loss_percentage == Decimal(0)

    def test_portfolio_totals(self) -> None:
        """Test portfolio totals are derived from holdings."""
        portfolio = build_portfolio(
            [make_investment("A", "1", "100", "110"), make_investment("B", "2", "50", "40")],
            NOW,
        )
        assert portfolio.total_value == Decimal(190)
        assert portfolio.total_cost == Decimal(200)
        assert portfolio.total_gain_loss == Decimal(-10)
        assert portfolio.total_gain_loss_percentage == Decimal(-5)

    def test_empty_portfolio(self) -> None:
        """Test an empty portfolio has zero totals."""
        portfolio = build_portfolio([], NOW)
        assert portfolio.total_value == Decimal(0)
        assert portfolio.total_gain_loss_percentage == Decimal(0)

    def test_summary_by_type(self) -> None:
        """Test holdings are grouped by type, largest value first."""
        investments = [
            make_investment("A", "1", "100", "100", InvestmentType.STOCKS),
            make_investment("B", "1", "500", "600", InvestmentType.BONDS),
            make_investment("C", "1", "100", "50", InvestmentType.STOCKS),
        ]
        summaries = summarize_investments_by_type(investments)
        assert [s.type for s in summaries] == [InvestmentType.BONDS, InvestmentType.STOCKS]
        stocks = summaries[1]
        assert stocks.count == 2
        assert stocks.value == Decimal(150)
        assert stocks.gain_loss == Decimal(-50)

    def test_performers_and_holdings(self) -> None:
        """Test ranking by gain/loss percentage and by value."""
        up = make_investment("UP", "1", "100", "200")
        flat = make_investment("FLAT", "10", "100", "100")
        down = make_investment("DOWN", "1", "100", "50")
        investments = [flat, down, up]
        assert top_performers(investments, 1) == [up]
        assert worst_performers(investments, 1) == [down]
        assert largest_holdings(investments, 2) == [flat, up]
