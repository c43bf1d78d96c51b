"""Implementation of 'finhealth status' command.

Shows the financial health score with a breakdown of its components.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TextColumn

from finhealth.cli.utils import format_percentage, open_workspace
from finhealth.core.presentation import HEALTH_CATEGORY_STYLE
from finhealth.engine.health import (
    DEBT_WEIGHT,
    EMERGENCY_WEIGHT,
    EXPENSE_WEIGHT,
    INVESTMENT_WEIGHT,
    SAVINGS_WEIGHT,
    calculate_component_scores,
)

console = Console()

_COMPONENTS = [
    ("savings", "Savings", SAVINGS_WEIGHT),
    ("debt", "Debt", DEBT_WEIGHT),
    ("expenses", "Spending pattern", EXPENSE_WEIGHT),
    ("investments", "Diversification", INVESTMENT_WEIGHT),
    ("emergency_fund", "Emergency fund", EMERGENCY_WEIGHT),
]


def status_command(
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Show the financial health score.

    Displays the overall score, the points earned by each component
    and recommendations for improving it.
    """
    ws = open_workspace(console, workspace)
    score = ws.health_score
    category = score.score_category
    color = HEALTH_CATEGORY_STYLE[category].color

    console.print()
    console.print(
        Panel(
            f"[bold]Financial Health: [{color}]{score.overall_score}[/{color}]/100 "
            f"({category.value})[/bold]",
            style="cyan",
        )
    )
    console.print()

    console.print("[bold]Components[/bold]")
    points = calculate_component_scores(score)
    with Progress(
        TextColumn("  {task.description:<18}"),
        BarColumn(bar_width=30),
        TextColumn("{task.completed:>5.1f} / {task.total:.0f}"),
        console=console,
        auto_refresh=False,
    ) as progress:
        for key, label, weight in _COMPONENTS:
            progress.add_task(label, total=weight, completed=float(points[key]))
        progress.refresh()
    console.print()

    console.print("[bold]Ratios[/bold]")
    console.print(f"  Savings ratio:          {format_percentage(score.savings_ratio):>8}")
    console.print(f"  Debt to income:         {format_percentage(score.debt_to_income_ratio):>8}")
    console.print(f"  Expense variability:    {format_percentage(score.expense_variability):>8}")
    console.print(f"  Diversification:        {format_percentage(score.investment_diversification):>8}")
    console.print(f"  Emergency fund months:  {score.emergency_fund_months:>8.1f}")
    console.print()

    console.print("[bold]Recommendations[/bold]")
    for tip in score.recommendations:
        console.print(f"  - {tip}")
    console.print()
    console.print(f"[dim]Calculated: {score.last_calculated:%Y-%m-%d %H:%M}[/dim]")
