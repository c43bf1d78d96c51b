"""Shared helpers for CLI commands."""

from decimal import Decimal, InvalidOperation
from enum import Enum
from pathlib import Path
from typing import TypeVar
from uuid import UUID

import typer
from rich.console import Console

from finhealth.core.exceptions import ConfigError
from finhealth.core.workspace import Workspace, load_workspace

E = TypeVar("E", bound=Enum)

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    """Format an amount with thousands separators and the currency symbol.

    Unknown currencies are shown with their code after the amount.
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    sign = "-" if amount < 0 else ""
    if symbol:
        return f"{sign}{symbol}{abs(amount):,.2f}"
    return f"{sign}{abs(amount):,.2f} {currency}"


def format_percentage(ratio: Decimal, decimals: int = 1) -> str:
    """Format a fraction (0.25) as a percentage ("25.0%")."""
    return f"{ratio * 100:.{decimals}f}%"


def open_workspace(console: Console, path: Path | None) -> Workspace:
    """Load the workspace or exit with an error message."""
    try:
        return load_workspace(path)
    except ConfigError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def parse_id(console: Console, value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid id: {value}")
        raise typer.Exit(1)


def short_id(record_id: UUID) -> str:
    return str(record_id)[:8]


def resolve_id(console: Console, value: str, ids: list[UUID]) -> UUID:
    """Match a full id or a unique prefix of one of ``ids``."""
    matches = [i for i in ids if str(i).startswith(value.lower())]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        return parse_id(console, value)
    console.print(f"[red]Error:[/red] Ambiguous id prefix: {value}")
    raise typer.Exit(1)


def parse_choice(console: Console, enum_cls: type[E], value: str) -> E:
    """Match an enum member by name ("food") or display value ("Food & Dining")."""
    wanted = value.strip().lower()
    for member in enum_cls:
        if wanted in (member.name.lower(), member.value.lower()):
            return member
    choices = ", ".join(m.name.lower() for m in enum_cls)
    console.print(f"[red]Error:[/red] Unknown {enum_cls.__name__} '{value}'. Choose from: {choices}")
    raise typer.Exit(1)


def parse_amount(console: Console, value: str) -> Decimal:
    try:
        amount = Decimal(value.replace(",", ""))
    except InvalidOperation:
        amount = None
    if amount is None or not amount.is_finite():
        console.print(f"[red]Error:[/red] Invalid amount: {value}")
        raise typer.Exit(1)
    return amount
