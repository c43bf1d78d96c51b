"""Implementation of 'finhealth goals' and 'finhealth contribute' commands."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from finhealth.cli.utils import (
    format_currency,
    format_percentage,
    open_workspace,
    parse_amount,
    parse_choice,
    resolve_id,
    short_id,
)
from finhealth.core.exceptions import FinHealthError
from finhealth.core.models import ContributionMethod
from finhealth.core.presentation import GOAL_PRIORITY_STYLE, GOAL_STATUS_COLOR, SAVINGS_CATEGORY_STYLE
from finhealth.core.storage import SAVINGS_GOALS
from finhealth.engine.goals import (
    calculate_savings_summary,
    goal_recommendations,
    motivational_message,
)

console = Console()


def goals_command(
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Include completed and archived goals",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Show savings goals and their progress."""
    ws = open_workspace(console, workspace)
    currency = ws.config.currency
    today = ws.today()

    goals = ws.savings_goals
    if not show_all:
        goals = [g for g in goals if g.is_active]

    console.print(f"[bold]{motivational_message(ws.savings_goals)}[/bold]")
    console.print()

    if goals:
        table = Table(show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Goal")
        table.add_column("Priority")
        table.add_column("Saved", justify="right")
        table.add_column("Target", justify="right")
        table.add_column("Progress", justify="right")
        table.add_column("Per month", justify="right")
        table.add_column("Status")
        for goal in sorted(goals, key=lambda g: g.priority.rank, reverse=True):
            status = goal.status(today)
            color = GOAL_STATUS_COLOR[status]
            category_color = SAVINGS_CATEGORY_STYLE[goal.category].color
            priority_color = GOAL_PRIORITY_STYLE[goal.priority].color
            table.add_row(
                short_id(goal.id),
                f"{goal.name} [{category_color}]({goal.category.value})[/{category_color}]",
                f"[{priority_color}]{goal.priority.value}[/{priority_color}]",
                format_currency(goal.current_amount, currency),
                format_currency(goal.target_amount, currency),
                format_percentage(goal.progress),
                format_currency(goal.monthly_target_contribution(today), currency),
                f"[{color}]{status.value}[/{color}]",
            )
        console.print(table)
        console.print()

    summary = calculate_savings_summary(ws.savings_goals, today, ws.now())
    if summary.active_goals:
        console.print(
            f"[bold]Overall:[/bold] {format_currency(summary.total_saved_amount, currency)} of "
            f"{format_currency(summary.total_target_amount, currency)} "
            f"({format_percentage(summary.overall_progress)}), "
            f"{summary.goals_on_track} on track, {summary.overdue_goals} overdue"
        )

    console.print("[bold]Recommendations[/bold]")
    for tip in goal_recommendations(ws.savings_goals, today):
        console.print(f"  - {tip}")


def contribute_command(
    goal_id: str = typer.Argument(..., help="Goal id (or unique prefix)"),
    amount: str = typer.Argument(..., help="Amount to add"),
    note: str = typer.Option("", "--note", "-n", help="Note for the contribution"),
    method: str = typer.Option(
        "manual",
        "--method",
        "-m",
        help="How the money was added: manual, automatic, round_up, bonus",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Add a contribution to a savings goal."""
    ws = open_workspace(console, workspace)
    currency = ws.config.currency
    target = resolve_id(console, goal_id, [g.id for g in ws.savings_goals])

    try:
        before = ws.get(SAVINGS_GOALS, target)
        goal = ws.add_contribution(
            target,
            parse_amount(console, amount),
            note=note,
            method=parse_choice(console, ContributionMethod, method),
        )
    except FinHealthError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(
        f"[green]✓[/green] {goal.name}: {format_currency(goal.current_amount, currency)} of "
        f"{format_currency(goal.target_amount, currency)} ({format_percentage(goal.progress)})"
    )
    if goal.is_completed and not before.is_completed:
        console.print("[bold green]Goal completed![/bold green]")

    already_done = {m.id for m in before.completed_milestones}
    for milestone in goal.completed_milestones:
        if milestone.id not in already_done:
            console.print(f"[green]Milestone reached:[/green] {milestone.name}")
