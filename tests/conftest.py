"""Shared fixtures."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from finhealth.core.config import TrackerConfig
from finhealth.core.models import Expense, ExpenseCategory
from finhealth.core.storage import MemoryStorage
from finhealth.core.workspace import Workspace

# Friday in the last month of Q1
NOW = datetime(2024, 3, 15, 12, 0)


def make_expense(
    amount: str,
    on: date,
    category: ExpenseCategory = ExpenseCategory.FOOD,
    title: str = "Expense",
) -> Expense:
    return Expense(title=title, amount=Decimal(amount), category=category, date=on)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def workspace(storage: MemoryStorage) -> Workspace:
    return Workspace(storage, TrackerConfig(), clock=lambda: NOW)
