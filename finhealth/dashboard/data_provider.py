"""Dashboard data provider.

Collects everything the overview screen shows from a workspace.
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from finhealth.core.models import DashboardData, TimePeriod
from finhealth.engine.budgets import calculate_budget_summary
from finhealth.engine.bills import calculate_bill_summary
from finhealth.engine.calculator import (
    calculate_category_shares,
    calculate_expense_summary,
    calculate_spending_change,
    largest_holdings,
    recent_expenses,
    spending_insight,
    sum_amount,
)
from finhealth.engine.goals import calculate_savings_summary
from finhealth.engine.periods import filter_by_period

if TYPE_CHECKING:
    from finhealth.core.workspace import Workspace


class DashboardDataProvider:
    """Builds the read model for the overview screen.

    Nothing is cached: every call reads the workspace's current
    collections and derived values.
    """

    def __init__(self, workspace: "Workspace"):
        self.ws = workspace

    def get_dashboard_data(self, period: TimePeriod = TimePeriod.MONTH) -> DashboardData:
        """Get complete dashboard data.

        Args:
            period: Window for the expense total and category breakdown.

        Returns:
            DashboardData for the workspace as of its clock.
        """
        config = self.ws.config
        now = self.ws.now()
        today = now.date()

        expenses = self.ws.expenses
        in_period = filter_by_period(expenses, period, now)
        this_month = sum_amount(filter_by_period(expenses, TimePeriod.MONTH, now))

        monthly_progress = Decimal(0)
        if config.monthly_budget > 0:
            monthly_progress = min(this_month / config.monthly_budget, Decimal(1))

        return DashboardData(
            currency=config.currency,
            period=period,
            generated_at=now,
            total_expenses=sum_amount(in_period),
            expense_summary=calculate_expense_summary(expenses, now),
            expenses_by_category=calculate_category_shares(in_period),
            recent_expenses=recent_expenses(expenses, config.recent_expense_limit),
            spending_change=calculate_spending_change(expenses, now),
            spending_insight=spending_insight(expenses, now),
            monthly_budget=config.monthly_budget,
            monthly_budget_progress=monthly_progress,
            monthly_budget_remaining=max(config.monthly_budget - this_month, Decimal(0)),
            portfolio=self.ws.portfolio,
            top_investments=largest_holdings(self.ws.investments, config.top_investment_limit),
            budget_summary=calculate_budget_summary(self.ws.budgets, today, now),
            savings_summary=calculate_savings_summary(self.ws.savings_goals, today, now),
            bill_summary=calculate_bill_summary(self.ws.bill_reminders, today),
            health_score=self.ws.health_score,
        )
