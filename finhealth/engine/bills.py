"""Bill reminder views."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from finhealth.core.models import BillReminder, BillSummary


def mark_paid(bill: BillReminder, today: date | None = None) -> BillReminder:
    """Record a payment; the next due date follows from the payment day."""
    return bill.model_copy(update={"is_paid": True, "last_paid_date": today or date.today()})


def upcoming_bills(bills: Sequence[BillReminder], today: date | None = None) -> list[BillReminder]:
    """Enabled bills ordered by next due date, overdue ones first."""
    today = today or date.today()
    return sorted((b for b in bills if b.is_enabled), key=lambda b: b.days_until_due(today))


def calculate_bill_summary(bills: Sequence[BillReminder], today: date | None = None) -> BillSummary:
    """Count enabled bills by reminder state.

    ``total_unpaid_amount`` covers enabled bills that are not marked paid.
    ``next_bill`` is the enabled bill due soonest, overdue ones included.
    """
    today = today or date.today()
    enabled = upcoming_bills(bills, today)
    return BillSummary(
        total_bills=len(bills),
        enabled_bills=len(enabled),
        overdue=sum(1 for b in enabled if b.is_overdue(today)),
        due_today=sum(1 for b in enabled if b.is_due_today(today)),
        due_soon=sum(1 for b in enabled if b.is_due_soon(today)),
        total_unpaid_amount=sum((b.amount for b in enabled if not b.is_paid), Decimal(0)),
        next_bill=enabled[0] if enabled else None,
    )
