"""Implementation of 'finhealth overview' command.

Prints the dashboard: spending, monthly budget, portfolio, budgets,
savings goals, bills and the health score in one screen.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from finhealth.cli.utils import format_currency, format_percentage, open_workspace
from finhealth.core.models import TimePeriod
from finhealth.core.presentation import EXPENSE_CATEGORY_STYLE, HEALTH_CATEGORY_STYLE, INVESTMENT_TYPE_STYLE
from finhealth.dashboard import DashboardDataProvider

console = Console()


def overview_command(
    period: TimePeriod = typer.Option(
        TimePeriod.MONTH,
        "--period",
        "-p",
        help="Window for the expense total and breakdown",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Show an overview of all finances."""
    ws = open_workspace(console, workspace)
    data = DashboardDataProvider(ws).get_dashboard_data(period)
    currency = data.currency

    console.print()
    console.print(Panel(f"[bold]Overview ({data.period.value})[/bold]", style="cyan"))
    console.print()

    # Expenses
    console.print("[bold]Spending[/bold]")
    console.print(f"  Total ({data.period.value}):  {format_currency(data.total_expenses, currency):>12}")
    console.print(f"  This month:      {format_currency(data.spending_change.current_month, currency):>12}")
    console.print(f"  Last month:      {format_currency(data.spending_change.previous_month, currency):>12}")
    console.print(f"  [dim]{data.spending_insight}[/dim]")
    if data.monthly_budget > 0:
        console.print(
            f"  Monthly budget:  {format_currency(data.monthly_budget, currency):>12}  "
            f"({format_percentage(data.monthly_budget_progress)} used, "
            f"{format_currency(data.monthly_budget_remaining, currency)} left)"
        )
    console.print()

    if data.expenses_by_category:
        table = Table(title="By Category", show_header=True, header_style="bold")
        table.add_column("Category")
        table.add_column("Amount", justify="right")
        table.add_column("Count", justify="right")
        table.add_column("Share", justify="right")
        for share in data.expenses_by_category:
            color = EXPENSE_CATEGORY_STYLE[share.category].color
            table.add_row(
                f"[{color}]{share.category.value}[/{color}]",
                format_currency(share.amount, currency),
                str(share.count),
                f"{share.percentage:.1f}%",
            )
        console.print(table)
        console.print()

    # Investments
    portfolio = data.portfolio
    if portfolio.investments:
        gain_color = "green" if portfolio.total_gain_loss >= 0 else "red"
        console.print("[bold]Portfolio[/bold]")
        console.print(f"  Value:      {format_currency(portfolio.total_value, currency):>12}")
        console.print(
            f"  Gain/Loss:  [{gain_color}]{format_currency(portfolio.total_gain_loss, currency):>12}"
            f"  ({portfolio.total_gain_loss_percentage:.2f}%)[/{gain_color}]"
        )
        for inv in data.top_investments:
            type_color = INVESTMENT_TYPE_STYLE[inv.type].color
            console.print(
                f"    {inv.symbol:<8} {format_currency(inv.total_value, currency):>12}  "
                f"[{type_color}]{inv.type.value}[/{type_color}]"
            )
        console.print()

    # Budgets / goals / bills
    budgets = data.budget_summary
    console.print("[bold]Budgets[/bold]")
    console.print(
        f"  {budgets.active_budgets} active, "
        f"{format_currency(budgets.total_spent, currency)} of "
        f"{format_currency(budgets.total_budget_amount, currency)} spent "
        f"({format_percentage(budgets.overall_progress)})"
    )
    if budgets.budgets_over_limit:
        console.print(f"  [red]{budgets.budgets_over_limit} budget(s) over limit[/red]")

    savings = data.savings_summary
    console.print("[bold]Savings Goals[/bold]")
    console.print(
        f"  {savings.active_goals} active, {savings.completed_goals} completed, "
        f"{format_currency(savings.total_saved_amount, currency)} of "
        f"{format_currency(savings.total_target_amount, currency)} saved"
    )

    bills = data.bill_summary
    console.print("[bold]Bills[/bold]")
    console.print(
        f"  {bills.overdue} overdue, {bills.due_today} due today, {bills.due_soon} due soon"
    )
    if bills.next_bill is not None:
        console.print(
            f"  Next: {bills.next_bill.title} "
            f"({format_currency(bills.next_bill.amount, currency)}) on {bills.next_bill.next_due_date}"
        )
    console.print()

    # Health
    score = data.health_score
    color = HEALTH_CATEGORY_STYLE[score.score_category].color
    console.print(
        f"[bold]Health score:[/bold] [{color}]{score.overall_score}[/{color}] "
        f"({score.score_category.value})"
    )

    if data.recent_expenses:
        console.print()
        console.print("[bold]Recent Expenses[/bold]")
        for expense in data.recent_expenses:
            console.print(
                f"  {expense.date}  {expense.title:<24} {format_currency(expense.amount, currency):>12}"
            )
