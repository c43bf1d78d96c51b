"""Implementation of 'finhealth bills' command."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from finhealth.cli.utils import format_currency, open_workspace, resolve_id, short_id
from finhealth.core.exceptions import FinHealthError
from finhealth.core.presentation import BILL_STATUS_COLOR
from finhealth.engine.bills import calculate_bill_summary, upcoming_bills

console = Console()


def bills_command(
    pay: str = typer.Option(
        None,
        "--pay",
        help="Mark the bill with this id (or unique prefix) as paid",
    ),
    workspace: Path = typer.Option(
        None,
        "--workspace",
        "-w",
        help="Path to workspace (default: current directory)",
    ),
) -> None:
    """Show upcoming bills, or mark one as paid."""
    ws = open_workspace(console, workspace)
    currency = ws.config.currency

    if pay:
        bill_id = resolve_id(console, pay, [b.id for b in ws.bill_reminders])
        try:
            bill = ws.mark_bill_paid(bill_id)
        except FinHealthError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        console.print(f"[green]✓[/green] {bill.title} paid, next due {bill.next_due_date}")
        return

    today = ws.today()
    bills = upcoming_bills(ws.bill_reminders, today)
    if not bills:
        console.print("[yellow]No bill reminders[/yellow]")
        raise typer.Exit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Bill")
    table.add_column("Amount", justify="right")
    table.add_column("Due")
    table.add_column("Frequency")
    table.add_column("Status")
    for bill in bills:
        status = bill.status(today)
        color = BILL_STATUS_COLOR[status]
        table.add_row(
            short_id(bill.id),
            bill.title,
            format_currency(bill.amount, currency),
            str(bill.next_due_date),
            bill.frequency.value,
            f"[{color}]{status.value}[/{color}]",
        )
    console.print(table)

    summary = calculate_bill_summary(ws.bill_reminders, today)
    console.print(
        f"\n{summary.overdue} overdue, {summary.due_today} due today, {summary.due_soon} due soon; "
        f"unpaid total {format_currency(summary.total_unpaid_amount, currency)}"
    )
