"""Implementation of 'finhealth budgets' command."""

from pathlib import Path

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, TextColumn

from finhealth.cli.utils import format_currency, format_percentage, open_workspace, short_id
from finhealth.core.presentation import CATEGORY_STATUS_COLOR
from finhealth.engine.budgets import budget_recommendations, calculate_budget_summary

console = Console()


def budgets_command(
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include inactive and expired budgets",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Show budgets with per-category spending."""
    ws = open_workspace(console, workspace)
    currency = ws.config.currency
    today = ws.today()

    budgets = ws.budgets
    if not show_all:
        budgets = [b for b in budgets if b.is_active and not b.is_expired(today)]

    if not budgets:
        console.print("[yellow]No active budgets[/yellow]")

    for budget in budgets:
        state = ""
        if not budget.is_active:
            state = " [dim](inactive)[/dim]"
        elif budget.is_expired(today):
            state = " [dim](expired)[/dim]"
        console.print(
            f"[bold]{budget.name}[/bold]{state} [dim]{short_id(budget.id)}[/dim]  "
            f"{budget.start_date} to {budget.end_date}"
        )
        total_color = "red" if budget.is_over_budget else "green"
        console.print(
            f"  Spent [{total_color}]{format_currency(budget.total_spent, currency)}[/{total_color}] of "
            f"{format_currency(budget.total_budget, currency)} "
            f"({format_percentage(budget.budget_progress)}), "
            f"{budget.days_remaining(today)} days remaining"
        )

        if budget.categories:
            with Progress(
                TextColumn("    {task.description:<20}"),
                BarColumn(bar_width=24),
                TextColumn("{task.fields[detail]}"),
                console=console,
                auto_refresh=False,
            ) as progress:
                for category in budget.categories:
                    color = CATEGORY_STATUS_COLOR[category.status]
                    detail = (
                        f"[{color}]{format_currency(category.spent, currency)}"
                        f" / {format_currency(category.limit, currency)}[/{color}]"
                    )
                    progress.add_task(
                        category.name,
                        total=float(category.limit) or 1.0,
                        completed=float(min(category.spent, category.limit)),
                        detail=detail,
                    )
                progress.refresh()
        console.print()

    summary = calculate_budget_summary(ws.budgets, today, ws.now())
    if summary.active_budgets:
        status = "[green]on track[/green]" if summary.is_on_track else "[yellow]close to limits[/yellow]"
        console.print(
            f"[bold]Overall:[/bold] {format_percentage(summary.overall_progress)} of "
            f"{format_currency(summary.total_budget_amount, currency)} spent, {status}"
        )

    console.print("[bold]Recommendations[/bold]")
    for tip in budget_recommendations(ws.budgets, today):
        console.print(f"  - {tip}")
