"""FinHealth command-line entry point."""

import logging

import typer

from finhealth import __version__
from finhealth.cli.bills import bills_command
from finhealth.cli.budgets import budgets_command
from finhealth.cli.expenses import add_expense_command, expenses_command
from finhealth.cli.goals import contribute_command, goals_command
from finhealth.cli.overview import overview_command
from finhealth.cli.status import status_command

app = typer.Typer(
    name="finhealth",
    help="Track expenses, budgets, savings goals, investments and bills.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"finhealth {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="status")(status_command)
app.command(name="overview")(overview_command)
app.command(name="expenses")(expenses_command)
app.command(name="add-expense")(add_expense_command)
app.command(name="budgets")(budgets_command)
app.command(name="goals")(goals_command)
app.command(name="contribute")(contribute_command)
app.command(name="bills")(bills_command)


if __name__ == "__main__":
    app()
