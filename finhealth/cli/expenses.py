"""Implementation of 'finhealth expenses' and 'finhealth add-expense' commands."""

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from finhealth.cli.utils import (
    format_currency,
    open_workspace,
    parse_amount,
    parse_choice,
    short_id,
)
from finhealth.core.exceptions import FinHealthError
from finhealth.core.models import Expense, ExpenseCategory, TimePeriod
from finhealth.engine.calculator import calculate_category_shares, sum_amount
from finhealth.engine.periods import filter_by_period

console = Console()


def expenses_command(
    period: TimePeriod = typer.Option(
        TimePeriod.MONTH,
        "--period",
        "-p",
        help="Time window to list",
    ),
    category: str = typer.Option(
        None,
        "--category",
        "-c",
        help="Only show this category",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """List expenses for a time window, newest first."""
    ws = open_workspace(console, workspace)
    currency = ws.config.currency

    expenses = filter_by_period(ws.expenses, period, ws.now())
    if category:
        wanted = parse_choice(console, ExpenseCategory, category)
        expenses = [e for e in expenses if e.category == wanted]

    if not expenses:
        console.print(f"[yellow]No expenses found for this {period.value}[/yellow]")
        raise typer.Exit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Date")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    for expense in sorted(expenses, key=lambda e: e.date, reverse=True):
        title = expense.title + (" [dim](recurring)[/dim]" if expense.is_recurring else "")
        table.add_row(
            short_id(expense.id),
            str(expense.date),
            title,
            expense.category.value,
            format_currency(expense.amount, currency),
        )
    console.print(table)

    console.print(f"\n[bold]Total:[/bold] {format_currency(sum_amount(expenses), currency)}")
    for share in calculate_category_shares(expenses)[:3]:
        console.print(f"  {share.category.value}: {share.percentage:.1f}%")


def add_expense_command(
    title: str = typer.Argument(..., help="What the money was spent on"),
    amount: str = typer.Argument(..., help="Amount spent"),
    category: str = typer.Option(
        "other",
        "--category",
        "-c",
        help="Expense category (e.g. food, transportation, bills)",
    ),
    on: datetime = typer.Option(
        None,
        "--date",
        "-d",
        formats=["%Y-%m-%d"],
        help="Date of the expense (default: today)",
    ),
    description: str = typer.Option("", "--description", help="Longer description"),
    tags: list[str] = typer.Option([], "--tag", "-t", help="Tag (repeatable)"),
    recurring: bool = typer.Option(False, "--recurring", help="Mark as recurring"),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Record a new expense."""
    ws = open_workspace(console, workspace)
    expense = Expense(
        title=title,
        amount=parse_amount(console, amount),
        category=parse_choice(console, ExpenseCategory, category),
        date=on.date() if on else ws.today(),
        description=description,
        tags=set(tags),
        is_recurring=recurring,
    )

    try:
        ws.add_expense(expense)
    except FinHealthError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] Added {expense.title}: "
        f"{format_currency(expense.amount, ws.config.currency)} ({expense.category.value})"
    )
    console.print(f"[dim]Health score: {ws.health_score.overall_score}[/dim]")
