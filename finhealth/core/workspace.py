"""The FinHealth workspace: record collections plus derived state.

A ``Workspace`` owns every record collection, the budget spend figures and
the financial health score. All mutations go through it and follow the
same sequence while holding the workspace lock:

    validate -> mutate -> recompute -> save -> notify

Recompute is always a full recompute: budget spend is rebuilt after any
expense or budget change, and the health score after any expense,
investment or savings goal change.

Storage failures never escape a mutation: they are logged and the
in-memory state stays authoritative.
"""

import logging
import threading
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel

from finhealth.core.config import TrackerConfig, load_config
from finhealth.core.exceptions import NotFoundError, ValidationError
from finhealth.core.models import (
    BillReminder,
    Budget,
    ContributionMethod,
    Expense,
    FinancialHealthScore,
    Investment,
    Portfolio,
    SavingsGoal,
    SavingsMilestone,
)
from finhealth.core.storage import (
    BILL_REMINDERS,
    BUDGETS,
    COLLECTIONS,
    EXPENSES,
    INVESTMENTS,
    SAVINGS_GOALS,
    JsonStorage,
    Storage,
    StoredData,
)
from finhealth.engine import bills as bill_engine
from finhealth.engine import goals as goal_engine
from finhealth.engine.budgets import recompute_spending
from finhealth.engine.calculator import build_portfolio
from finhealth.engine.health import compute_health_score

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

Subscriber = Callable[[str], None]

# Collections whose change invalidates each derived value
_SPEND_INPUTS = frozenset({EXPENSES, BUDGETS})
_HEALTH_INPUTS = frozenset({EXPENSES, INVESTMENTS, SAVINGS_GOALS})

# Fields of a goal written only by the contribution and milestone logic
_GOAL_PROGRESS_FIELDS = ("current_amount", "contributions", "is_completed", "completed_date", "milestones")


def _require_text(value: str, field: str) -> None:
    if not value.strip():
        raise ValidationError(f"{field} must not be empty")


def _require_non_negative(value: Decimal, field: str) -> None:
    if value < 0:
        raise ValidationError(f"{field} must not be negative, got {value}")


def _require_positive(value: Decimal, field: str) -> None:
    if value <= 0:
        raise ValidationError(f"{field} must be positive, got {value}")


def validate_expense(expense: Expense) -> None:
    _require_text(expense.title, "Expense title")
    _require_non_negative(expense.amount, "Expense amount")


def validate_investment(investment: Investment) -> None:
    _require_text(investment.symbol, "Investment symbol")
    _require_non_negative(investment.shares, "Shares")
    _require_non_negative(investment.purchase_price, "Purchase price")
    _require_non_negative(investment.current_price, "Current price")


def validate_budget(budget: Budget) -> None:
    _require_text(budget.name, "Budget name")
    _require_non_negative(budget.total_budget, "Total budget")
    for category in budget.categories:
        _require_text(category.name, "Category name")
        _require_non_negative(category.limit, f"Limit of {category.name}")


def validate_savings_goal(goal: SavingsGoal) -> None:
    _require_text(goal.name, "Goal name")
    _require_non_negative(goal.target_amount, "Target amount")
    for milestone in goal.milestones:
        _require_positive(milestone.target_amount, f"Target of milestone {milestone.name}")


def validate_bill(bill: BillReminder) -> None:
    _require_text(bill.title, "Bill title")
    _require_non_negative(bill.amount, "Bill amount")


class Workspace:
    """Single owner of all records and derived values.

    Args:
        storage: Persistence collaborator, loaded once on construction.
        config: Settings; income and debt feed the health score.
        clock: Returns the current moment (default: ``datetime.now``).
    """

    def __init__(
        self,
        storage: Storage,
        config: TrackerConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.storage = storage
        self.config = config or TrackerConfig()
        self._clock = clock or datetime.now
        self._lock = threading.RLock()
        self._subscribers: list[Subscriber] = []

        data = self._load()
        self._records: dict[str, list] = {name: list(getattr(data, name)) for name in COLLECTIONS}
        self._records[BUDGETS] = recompute_spending(self._records[BUDGETS], self._records[EXPENSES])
        self.health_score = self._compute_health()

    # -------------------------------------------------------------------------
    # Read access
    # -------------------------------------------------------------------------

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return self._clock().date()

    @property
    def expenses(self) -> list[Expense]:
        return list(self._records[EXPENSES])

    @property
    def investments(self) -> list[Investment]:
        return list(self._records[INVESTMENTS])

    @property
    def budgets(self) -> list[Budget]:
        return list(self._records[BUDGETS])

    @property
    def savings_goals(self) -> list[SavingsGoal]:
        return list(self._records[SAVINGS_GOALS])

    @property
    def bill_reminders(self) -> list[BillReminder]:
        return list(self._records[BILL_REMINDERS])

    @property
    def portfolio(self) -> Portfolio:
        """Portfolio rebuilt from the current investments on every access."""
        return build_portfolio(self._records[INVESTMENTS], self._clock())

    def get(self, collection: str, record_id: UUID) -> BaseModel:
        """Look up a record by id.

        Raises:
            NotFoundError: If no record in the collection has that id.
        """
        for record in self._records[collection]:
            if record.id == record_id:
                return record
        raise NotFoundError(collection, record_id)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback run after each change with the collection name.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -------------------------------------------------------------------------
    # Expenses
    # -------------------------------------------------------------------------

    def add_expense(self, expense: Expense) -> Expense:
        validate_expense(expense)
        return self._add(EXPENSES, expense)

    def update_expense(self, expense: Expense) -> bool:
        validate_expense(expense)
        return self._update(EXPENSES, expense)

    def delete_expense(self, expense_id: UUID) -> bool:
        return self._delete(EXPENSES, expense_id)

    # -------------------------------------------------------------------------
    # Investments
    # -------------------------------------------------------------------------

    def add_investment(self, investment: Investment) -> Investment:
        validate_investment(investment)
        return self._add(INVESTMENTS, investment)

    def update_investment(self, investment: Investment) -> bool:
        validate_investment(investment)
        return self._update(INVESTMENTS, investment)

    def delete_investment(self, investment_id: UUID) -> bool:
        return self._delete(INVESTMENTS, investment_id)

    def update_investment_price(self, investment_id: UUID, price: Decimal) -> Investment:
        """Set the current price of a holding."""
        _require_non_negative(price, "Current price")
        with self._lock:
            investment = self.get(INVESTMENTS, investment_id)
            updated = investment.model_copy(update={"current_price": price})
            self._update(INVESTMENTS, updated)
            return updated

    # -------------------------------------------------------------------------
    # Budgets
    # -------------------------------------------------------------------------

    def add_budget(self, budget: Budget) -> Budget:
        validate_budget(budget)
        return self._add(BUDGETS, budget)

    def update_budget(self, budget: Budget) -> bool:
        validate_budget(budget)
        return self._update(BUDGETS, budget)

    def delete_budget(self, budget_id: UUID) -> bool:
        return self._delete(BUDGETS, budget_id)

    def toggle_budget_status(self, budget_id: UUID) -> Budget:
        """Switch a budget between active and inactive."""
        with self._lock:
            budget = self.get(BUDGETS, budget_id)
            self._update(BUDGETS, budget.model_copy(update={"is_active": not budget.is_active}))
            return self.get(BUDGETS, budget_id)

    # -------------------------------------------------------------------------
    # Savings goals
    # -------------------------------------------------------------------------

    def add_savings_goal(self, goal: SavingsGoal) -> SavingsGoal:
        """Add a goal.

        Saved progress must be backed by contributions: ``current_amount``
        has to equal the sum of any contributions the goal comes with.
        """
        validate_savings_goal(goal)
        if goal.current_amount != goal.total_contributions:
            raise ValidationError(
                f"Current amount {goal.current_amount} does not match "
                f"contributions totalling {goal.total_contributions}"
            )
        milestones = sorted(goal.milestones, key=lambda m: m.target_amount)
        goal = goal_engine.update_milestone_completion(
            goal.model_copy(update={"milestones": milestones}), self._clock()
        )
        return self._add(SAVINGS_GOALS, goal)

    def update_savings_goal(self, goal: SavingsGoal) -> bool:
        """Replace a goal's details, keeping its saved progress.

        Contributions, amounts, completion and milestones are only changed
        through ``add_contribution`` and ``add_milestone``.
        """
        validate_savings_goal(goal)
        with self._lock:
            try:
                existing = self.get(SAVINGS_GOALS, goal.id)
            except NotFoundError:
                logger.info("No savings goal with id %s, nothing updated", goal.id)
                return False
            kept = {name: getattr(existing, name) for name in _GOAL_PROGRESS_FIELDS}
            return self._update(SAVINGS_GOALS, goal.model_copy(update=kept))

    def delete_savings_goal(self, goal_id: UUID) -> bool:
        return self._delete(SAVINGS_GOALS, goal_id)

    def archive_goal(self, goal_id: UUID) -> SavingsGoal:
        with self._lock:
            goal = goal_engine.archive_goal(self.get(SAVINGS_GOALS, goal_id))
            self._update(SAVINGS_GOALS, goal)
            return goal

    def add_contribution(
        self,
        goal_id: UUID,
        amount: Decimal,
        note: str = "",
        method: ContributionMethod = ContributionMethod.MANUAL,
    ) -> SavingsGoal:
        """Add money to a goal and return the updated goal.

        Raises:
            ValidationError: If the amount is not positive.
            NotFoundError: If the goal does not exist.
        """
        _require_positive(amount, "Contribution amount")
        with self._lock:
            goal = goal_engine.add_contribution(
                self.get(SAVINGS_GOALS, goal_id), amount, note, method, self._clock()
            )
            self._update(SAVINGS_GOALS, goal)
            logger.debug("Contribution of %s to goal %s, now %s", amount, goal.name, goal.current_amount)
            return goal

    def add_milestone(self, goal_id: UUID, milestone: SavingsMilestone) -> SavingsGoal:
        _require_text(milestone.name, "Milestone name")
        _require_positive(milestone.target_amount, "Milestone target")
        with self._lock:
            goal = goal_engine.add_milestone(self.get(SAVINGS_GOALS, goal_id), milestone, self._clock())
            self._update(SAVINGS_GOALS, goal)
            return goal

    # -------------------------------------------------------------------------
    # Bill reminders
    # -------------------------------------------------------------------------

    def add_bill(self, bill: BillReminder) -> BillReminder:
        validate_bill(bill)
        return self._add(BILL_REMINDERS, bill)

    def update_bill(self, bill: BillReminder) -> bool:
        validate_bill(bill)
        return self._update(BILL_REMINDERS, bill)

    def delete_bill(self, bill_id: UUID) -> bool:
        return self._delete(BILL_REMINDERS, bill_id)

    def mark_bill_paid(self, bill_id: UUID) -> BillReminder:
        with self._lock:
            bill = bill_engine.mark_paid(self.get(BILL_REMINDERS, bill_id), self.today())
            self._update(BILL_REMINDERS, bill)
            return bill

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _add(self, collection: str, record: R) -> R:
        with self._lock:
            self._records[collection].append(record)
            logger.debug("Added %s record %s", collection, record.id)
            self._commit(collection)
            return record

    def _update(self, collection: str, record: BaseModel) -> bool:
        with self._lock:
            records = self._records[collection]
            for index, existing in enumerate(records):
                if existing.id == record.id:
                    records[index] = record
                    logger.debug("Updated %s record %s", collection, record.id)
                    self._commit(collection)
                    return True
            logger.info("No %s record with id %s, nothing updated", collection, record.id)
            return False

    def _delete(self, collection: str, record_id: UUID) -> bool:
        with self._lock:
            records = self._records[collection]
            kept = [r for r in records if r.id != record_id]
            if len(kept) == len(records):
                logger.info("No %s record with id %s, nothing deleted", collection, record_id)
                return False
            self._records[collection] = kept
            logger.debug("Deleted %s record %s", collection, record_id)
            self._commit(collection)
            return True

    def _compute_health(self) -> FinancialHealthScore:
        return compute_health_score(
            self._records[EXPENSES],
            self._records[INVESTMENTS],
            self._records[SAVINGS_GOALS],
            self.config.monthly_income,
            self.config.total_debt,
            self._clock(),
        )

    def _commit(self, collection: str) -> None:
        """Recompute derived state, save what changed and notify subscribers."""
        changed = [collection]

        if collection in _SPEND_INPUTS:
            budgets = recompute_spending(self._records[BUDGETS], self._records[EXPENSES])
            if budgets != self._records[BUDGETS] and BUDGETS not in changed:
                changed.append(BUDGETS)
            self._records[BUDGETS] = budgets

        if collection in _HEALTH_INPUTS:
            self.health_score = self._compute_health()

        for name in changed:
            self._save(name)
        for name in changed:
            self._notify(name)

    def _load(self) -> StoredData:
        try:
            return self.storage.load()
        except Exception as e:
            logger.warning("Could not load workspace data, starting empty: %s", e)
            return StoredData()

    def _save(self, collection: str) -> None:
        try:
            self.storage.save(collection, self._records[collection])
        except Exception as e:
            logger.warning("Could not save %s, changes kept in memory only: %s", collection, e)

    def _notify(self, collection: str) -> None:
        for callback in list(self._subscribers):
            callback(collection)


def load_workspace(path: Path | None = None, clock: Callable[[], datetime] | None = None) -> Workspace:
    """Open the workspace stored in a directory.

    Args:
        path: Workspace directory (default: configured data directory).
        clock: Optional clock override.

    Returns:
        Workspace backed by JSON files in the configured data directory.

    Raises:
        ConfigError: If the configuration cannot be loaded.
    """
    config = load_config(path)
    logger.debug("Opening workspace at %s", config.data_path)
    return Workspace(JsonStorage(config.data_path), config, clock)
