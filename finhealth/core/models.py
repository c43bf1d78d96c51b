"""Domain models for FinHealth.

All financial records and read models are defined here using Pydantic v2.

Derived values that depend only on a record's own fields are computed
fields. Values that depend on the current date (days remaining, overdue
flags, status) are methods taking an optional ``today`` so they can be
evaluated against any reference day.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, computed_field, model_validator

from finhealth.core.dates import add_months, add_weeks, add_years, days_between

# Average calendar lengths used for contribution rates.
DAYS_PER_MONTH = Decimal("30.44")
WEEKS_PER_MONTH = Decimal("4.33")


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class ExpenseCategory(str, Enum):
    """Spending categories shared by expenses, budgets and bills."""

    FOOD = "Food & Dining"
    TRANSPORTATION = "Transportation"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills & Utilities"
    HEALTHCARE = "Healthcare"
    EDUCATION = "Education"
    TRAVEL = "Travel"
    LIFESTYLE = "Lifestyle"
    INVESTMENT = "Investment"
    OTHER = "Other"


class InvestmentType(str, Enum):
    """Asset classes used for diversification scoring."""

    STOCKS = "Stocks"
    BONDS = "Bonds"
    CRYPTO = "Cryptocurrency"
    ETF = "ETF"
    MUTUAL_FUND = "Mutual Fund"
    REIT = "REIT"
    COMMODITIES = "Commodities"
    OTHER = "Other"


class TimePeriod(str, Enum):
    """Named windows relative to "now" for filtering records."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"
    ALL = "all"


class BudgetPeriod(str, Enum):
    """Budget lengths. The end date is derived from the start date."""

    WEEKLY = "Weekly"
    BIWEEKLY = "Bi-weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    YEARLY = "Yearly"
    CUSTOM = "Custom"

    def end_date(self, start: date) -> date:
        """Return the end date of a budget starting on ``start``.

        Custom budgets default to one month; callers may override the
        end date explicitly.
        """
        if self == BudgetPeriod.WEEKLY:
            return add_weeks(start, 1)
        if self == BudgetPeriod.BIWEEKLY:
            return add_weeks(start, 2)
        if self == BudgetPeriod.QUARTERLY:
            return add_months(start, 3)
        if self == BudgetPeriod.YEARLY:
            return add_years(start, 1)
        return add_months(start, 1)


class BillFrequency(str, Enum):
    """How often a bill recurs."""

    WEEKLY = "Weekly"
    BIWEEKLY = "Bi-weekly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMIANNUAL = "Semi-annual"
    ANNUAL = "Annual"
    ONE_TIME = "One-time"

    def next_date(self, from_date: date) -> date:
        """Return the next due date after a payment on ``from_date``."""
        if self == BillFrequency.WEEKLY:
            return add_weeks(from_date, 1)
        if self == BillFrequency.BIWEEKLY:
            return add_weeks(from_date, 2)
        if self == BillFrequency.MONTHLY:
            return add_months(from_date, 1)
        if self == BillFrequency.QUARTERLY:
            return add_months(from_date, 3)
        if self == BillFrequency.SEMIANNUAL:
            return add_months(from_date, 6)
        if self == BillFrequency.ANNUAL:
            return add_years(from_date, 1)
        return from_date


class SavingsCategory(str, Enum):
    """What a savings goal is for."""

    EMERGENCY = "Emergency Fund"
    VACATION = "Vacation"
    HOUSE = "House Down Payment"
    CAR = "Car Purchase"
    EDUCATION = "Education"
    RETIREMENT = "Retirement"
    WEDDING = "Wedding"
    GADGET = "Electronics"
    HEALTH = "Health & Medical"
    BUSINESS = "Business Investment"
    OTHER = "Other"

    @property
    def suggested_milestones(self) -> list[str]:
        """Milestone names offered when creating a goal of this category."""
        return list(_SUGGESTED_MILESTONES[self])


_SUGGESTED_MILESTONES: dict[SavingsCategory, tuple[str, ...]] = {
    SavingsCategory.EMERGENCY: ("1 Month Expenses", "3 Months Expenses", "6 Months Expenses"),
    SavingsCategory.VACATION: ("25% Saved", "50% Saved", "75% Saved", "Trip Booked!"),
    SavingsCategory.HOUSE: ("10% Down Payment", "15% Down Payment", "20% Down Payment"),
    SavingsCategory.CAR: ("25% Saved", "50% Saved", "Full Amount"),
    SavingsCategory.EDUCATION: ("First Semester", "One Year", "Full Degree"),
    SavingsCategory.RETIREMENT: ("First $1,000", "First $10,000", "First $100,000"),
    SavingsCategory.WEDDING: ("Venue Deposit", "50% Saved", "Wedding Ready!"),
    SavingsCategory.GADGET: ("50% Saved", "Ready to Buy!"),
    SavingsCategory.HEALTH: ("Deductible Covered", "Full Amount"),
    SavingsCategory.BUSINESS: ("Initial Investment", "Growth Fund", "Expansion Ready"),
    SavingsCategory.OTHER: ("25% Complete", "50% Complete", "75% Complete", "Goal Achieved!"),
}


class GoalPriority(str, Enum):
    """Savings goal priority, lowest first."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        return list(GoalPriority).index(self)


class ContributionMethod(str, Enum):
    MANUAL = "Manual"
    AUTOMATIC = "Automatic"
    ROUND_UP = "Round Up"
    BONUS = "Bonus/Gift"


class ReminderFrequency(str, Enum):
    DAILY = "Daily"
    WEEKLY = "Weekly"
    MONTHLY = "Monthly"
    NEVER = "Never"


class HealthCategory(str, Enum):
    """Score bands for the financial health score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"
    CRITICAL = "Critical"

    @classmethod
    def from_score(cls, score: int) -> "HealthCategory":
        """Map a 0-100 score to its band.

        Bands: [90, 100] excellent, [75, 90) good, [60, 75) fair,
        [40, 60) poor, [0, 40) critical.
        """
        if score >= 90:
            return cls.EXCELLENT
        if score >= 75:
            return cls.GOOD
        if score >= 60:
            return cls.FAIR
        if score >= 40:
            return cls.POOR
        return cls.CRITICAL


class CategoryStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    ALERT = "alert"
    OVER_BUDGET = "over_budget"


class GoalStatus(str, Enum):
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    DUE_SOON = "Due Soon"
    ON_TRACK = "On Track"


class BillStatus(str, Enum):
    OVERDUE = "Overdue"
    DUE_TODAY = "Due Today"
    DUE_SOON = "Due Soon"
    ON_TRACK = "On Track"


# -----------------------------------------------------------------------------
# Expense
# -----------------------------------------------------------------------------


class Expense(BaseModel):
    """A single spending record.

    Expenses are replaced wholesale by id on update; the engine never
    mutates them. Amounts are not constrained here: the workspace rejects
    negative amounts on input, while aggregation propagates whatever it
    is given.
    """

    id: UUID = Field(default_factory=uuid4)
    title: str
    amount: Decimal
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: date
    description: str = ""
    tags: set[str] = Field(default_factory=set)
    is_recurring: bool = False


# -----------------------------------------------------------------------------
# Investments
# -----------------------------------------------------------------------------


class Investment(BaseModel):
    """A holding of a single security."""

    id: UUID = Field(default_factory=uuid4)
    symbol: str
    name: str
    shares: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: date
    notes: str = ""
    type: InvestmentType = InvestmentType.STOCKS

    @computed_field  # type: ignore[misc]
    @property
    def total_value(self) -> Decimal:
        return self.shares * self.current_price

    @computed_field  # type: ignore[misc]
    @property
    def total_cost(self) -> Decimal:
        return self.shares * self.purchase_price

    @computed_field  # type: ignore[misc]
    @property
    def gain_loss(self) -> Decimal:
        return self.total_value - self.total_cost

    @computed_field  # type: ignore[misc]
    @property
    def gain_loss_percentage(self) -> Decimal:
        """Gain/loss relative to cost, in percent (0 when cost is 0)."""
        if self.total_cost == 0:
            return Decimal(0)
        return self.gain_loss / self.total_cost * 100

    @property
    def is_profit(self) -> bool:
        return self.gain_loss >= 0


class Portfolio(BaseModel):
    """View over the investment collection.

    Totals are always derived from ``investments``; nothing is stored
    separately, so a portfolio built from the current collection is never
    stale.
    """

    investments: list[Investment] = Field(default_factory=list)
    last_updated: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[misc]
    @property
    def total_value(self) -> Decimal:
        return sum((i.total_value for i in self.investments), Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def total_cost(self) -> Decimal:
        return sum((i.total_cost for i in self.investments), Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def total_gain_loss(self) -> Decimal:
        return self.total_value - self.total_cost

    @computed_field  # type: ignore[misc]
    @property
    def total_gain_loss_percentage(self) -> Decimal:
        if self.total_cost == 0:
            return Decimal(0)
        return self.total_gain_loss / self.total_cost * 100


# -----------------------------------------------------------------------------
# Budgets
# -----------------------------------------------------------------------------


class BudgetCategory(BaseModel):
    """A spending limit for one expense category inside a budget.

    ``spent`` is written only by the budget spend updater. Colour and icon
    are filled from the expense category when not given.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    limit: Decimal
    spent: Decimal = Decimal(0)
    expense_category: ExpenseCategory
    color: str = ""
    icon: str = ""
    alert_threshold: Annotated[Decimal, Field(ge=0, le=1)] = Decimal("0.8")
    is_enabled: bool = True

    @model_validator(mode="after")
    def fill_presentation(self) -> "BudgetCategory":
        """Derive colour and icon from the linked expense category."""
        from finhealth.core.presentation import EXPENSE_CATEGORY_STYLE

        style = EXPENSE_CATEGORY_STYLE[self.expense_category]
        if not self.color:
            self.color = style.color
        if not self.icon:
            self.icon = style.icon
        return self

    @computed_field  # type: ignore[misc]
    @property
    def remaining_amount(self) -> Decimal:
        return max(self.limit - self.spent, Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def spent_percentage(self) -> Decimal:
        """Share of the limit spent, clamped to 1 (0 when limit is 0)."""
        if self.limit <= 0:
            return Decimal(0)
        return min(self.spent / self.limit, Decimal(1))

    @computed_field  # type: ignore[misc]
    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.limit

    @computed_field  # type: ignore[misc]
    @property
    def should_alert(self) -> bool:
        return self.spent_percentage >= self.alert_threshold

    @property
    def status(self) -> CategoryStatus:
        if self.is_over_budget:
            return CategoryStatus.OVER_BUDGET
        if self.should_alert:
            return CategoryStatus.ALERT
        if self.spent_percentage >= Decimal("0.7"):
            return CategoryStatus.WARNING
        return CategoryStatus.OK


class BudgetNotifications(BaseModel):
    enable_alerts: bool = True
    alert_threshold: Annotated[Decimal, Field(ge=0, le=1)] = Decimal("0.8")
    daily_reminders: bool = False
    weekly_reports: bool = True
    over_budget_alerts: bool = True


class Budget(BaseModel):
    """A spending plan over a date range, split into categories.

    Attributes:
        total_budget: Overall limit for the budget.
        period: Budget length; determines ``end_date`` when not given.
        categories: Per expense-category limits and spend.
        start_date: First day covered (inclusive).
        end_date: Last day covered (inclusive).
        is_active: Inactive budgets are skipped by the spend updater.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    total_budget: Decimal
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    categories: list[BudgetCategory] = Field(default_factory=list)
    start_date: date
    end_date: date | None = None
    is_active: bool = True
    notifications: BudgetNotifications = Field(default_factory=BudgetNotifications)
    created_date: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def derive_end_date(self) -> "Budget":
        """Set end_date from the period when it was not given."""
        if self.end_date is None:
            self.end_date = self.period.end_date(self.start_date)
        return self

    @computed_field  # type: ignore[misc]
    @property
    def total_allocated(self) -> Decimal:
        """Sum of category limits."""
        return sum((c.limit for c in self.categories), Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def total_spent(self) -> Decimal:
        return sum((c.spent for c in self.categories), Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def remaining_budget(self) -> Decimal:
        return max(self.total_budget - self.total_spent, Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def budget_progress(self) -> Decimal:
        """Share of the budget spent, clamped to 1 (0 when budget is 0)."""
        if self.total_budget <= 0:
            return Decimal(0)
        return min(self.total_spent / self.total_budget, Decimal(1))

    @computed_field  # type: ignore[misc]
    @property
    def is_over_budget(self) -> bool:
        return self.total_spent > self.total_budget

    def days_remaining(self, today: date | None = None) -> int:
        return days_between(today or date.today(), self.end_date)

    def is_expired(self, today: date | None = None) -> bool:
        return (today or date.today()) > self.end_date


# -----------------------------------------------------------------------------
# Savings Goals
# -----------------------------------------------------------------------------


class SavingsMilestone(BaseModel):
    """An intermediate target inside a savings goal.

    Completion is monotonic: once completed a milestone stays completed.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    target_amount: Decimal
    is_completed: bool = False
    completed_date: datetime | None = None
    reward: str = ""
    icon: str = "flag.fill"


class SavingsContribution(BaseModel):
    """A deposit towards a goal. Contributions are append-only."""

    id: UUID = Field(default_factory=uuid4)
    amount: Decimal
    note: str = ""
    method: ContributionMethod = ContributionMethod.MANUAL
    date: datetime = Field(default_factory=datetime.now)


class GoalReminderSettings(BaseModel):
    enable_reminders: bool = True
    reminder_frequency: ReminderFrequency = ReminderFrequency.WEEKLY
    contribution_reminders: bool = True
    milestone_alerts: bool = True
    progress_updates: bool = True


class SavingsGoal(BaseModel):
    """A savings target with contributions and milestones.

    ``current_amount`` always equals the sum of ``contributions``; both
    are written only through the contribution logic in
    ``finhealth.engine.goals``. ``milestones`` is kept sorted ascending by
    target amount.
    """

    id: UUID = Field(default_factory=uuid4)
    name: str
    description: str = ""
    target_amount: Decimal
    current_amount: Decimal = Decimal(0)
    target_date: date
    category: SavingsCategory = SavingsCategory.OTHER
    priority: GoalPriority = GoalPriority.MEDIUM
    is_completed: bool = False
    is_archived: bool = False
    created_date: datetime = Field(default_factory=datetime.now)
    completed_date: datetime | None = None
    milestones: list[SavingsMilestone] = Field(default_factory=list)
    contributions: list[SavingsContribution] = Field(default_factory=list)
    reminder_settings: GoalReminderSettings = Field(default_factory=GoalReminderSettings)

    @computed_field  # type: ignore[misc]
    @property
    def progress(self) -> Decimal:
        """Share of the target saved, clamped to 1 (0 when target is 0)."""
        if self.target_amount <= 0:
            return Decimal(0)
        return min(self.current_amount / self.target_amount, Decimal(1))

    @computed_field  # type: ignore[misc]
    @property
    def remaining_amount(self) -> Decimal:
        return max(self.target_amount - self.current_amount, Decimal(0))

    @computed_field  # type: ignore[misc]
    @property
    def total_contributions(self) -> Decimal:
        return sum((c.amount for c in self.contributions), Decimal(0))

    @property
    def next_milestone(self) -> SavingsMilestone | None:
        """Lowest-target milestone not yet completed."""
        pending = [m for m in self.milestones if not m.is_completed]
        if not pending:
            return None
        return min(pending, key=lambda m: m.target_amount)

    @property
    def completed_milestones(self) -> list[SavingsMilestone]:
        return [m for m in self.milestones if m.is_completed]

    @property
    def is_active(self) -> bool:
        return not self.is_completed and not self.is_archived

    def days_remaining(self, today: date | None = None) -> int:
        return days_between(today or date.today(), self.target_date)

    def is_overdue(self, today: date | None = None) -> bool:
        return (today or date.today()) > self.target_date and not self.is_completed

    def monthly_target_contribution(self, today: date | None = None) -> Decimal:
        """Amount to save per month to hit the target on time.

        When the target date has been reached or passed the whole
        remaining amount is due immediately.
        """
        days = self.days_remaining(today)
        if days <= 0:
            return self.remaining_amount
        months = max(Decimal(days) / DAYS_PER_MONTH, Decimal(1))
        return self.remaining_amount / months

    def weekly_target_contribution(self, today: date | None = None) -> Decimal:
        return self.monthly_target_contribution(today) / WEEKS_PER_MONTH

    def status(self, today: date | None = None) -> GoalStatus:
        if self.is_completed:
            return GoalStatus.COMPLETED
        if self.is_overdue(today):
            return GoalStatus.OVERDUE
        if self.days_remaining(today) <= 30:
            return GoalStatus.DUE_SOON
        return GoalStatus.ON_TRACK


# -----------------------------------------------------------------------------
# Bill Reminders
# -----------------------------------------------------------------------------


class BillReminder(BaseModel):
    """A recurring (or one-time) bill with a reminder window."""

    id: UUID = Field(default_factory=uuid4)
    title: str
    amount: Decimal
    due_date: date
    frequency: BillFrequency = BillFrequency.MONTHLY
    category: ExpenseCategory = ExpenseCategory.BILLS
    notes: str = ""
    is_paid: bool = False
    reminder_days: int = Field(default=3, ge=0)
    last_paid_date: date | None = None
    is_enabled: bool = True

    @computed_field  # type: ignore[misc]
    @property
    def next_due_date(self) -> date:
        """Next occurrence after the last payment, or the due date if unpaid."""
        if self.is_paid and self.last_paid_date is not None:
            return self.frequency.next_date(self.last_paid_date)
        return self.due_date

    def days_until_due(self, today: date | None = None) -> int:
        return days_between(today or date.today(), self.next_due_date)

    def is_overdue(self, today: date | None = None) -> bool:
        return self.days_until_due(today) < 0

    def is_due_today(self, today: date | None = None) -> bool:
        return self.days_until_due(today) == 0

    def is_due_soon(self, today: date | None = None) -> bool:
        days = self.days_until_due(today)
        return 0 < days <= self.reminder_days

    def status(self, today: date | None = None) -> BillStatus:
        if self.is_overdue(today):
            return BillStatus.OVERDUE
        if self.is_due_today(today):
            return BillStatus.DUE_TODAY
        if self.is_due_soon(today):
            return BillStatus.DUE_SOON
        return BillStatus.ON_TRACK


# -----------------------------------------------------------------------------
# Financial Health
# -----------------------------------------------------------------------------


class FinancialHealthScore(BaseModel):
    """Weighted composite score, fully recomputed on every change.

    Ratios are unit-less fractions; ``emergency_fund_months`` is a count
    of months of spending covered by emergency savings.
    """

    overall_score: int = Field(default=0, ge=0, le=100)
    savings_ratio: Decimal = Decimal(0)
    debt_to_income_ratio: Decimal = Decimal(0)
    expense_variability: Decimal = Decimal(0)
    investment_diversification: Decimal = Decimal(0)
    emergency_fund_months: Decimal = Decimal(0)
    last_calculated: datetime = Field(default_factory=datetime.now)
    recommendations: list[str] = Field(default_factory=list)

    @computed_field  # type: ignore[misc]
    @property
    def score_category(self) -> HealthCategory:
        return HealthCategory.from_score(self.overall_score)


# -----------------------------------------------------------------------------
# Summary Models (read models for presentation)
# -----------------------------------------------------------------------------


class ExpenseSummary(BaseModel):
    """Spending totals over the standard windows."""

    total_expenses: Decimal = Decimal(0)
    monthly_expenses: Decimal = Decimal(0)
    weekly_expenses: Decimal = Decimal(0)
    daily_expenses: Decimal = Decimal(0)
    category_breakdown: dict[ExpenseCategory, Decimal] = Field(default_factory=dict)
    last_updated: datetime = Field(default_factory=datetime.now)


class CategoryShare(BaseModel):
    """Spending in one category with its share of the total."""

    category: ExpenseCategory
    amount: Decimal
    count: int = 0
    percentage: Decimal = Decimal(0)  # 0-100


class SpendingChange(BaseModel):
    """Current calendar month spending compared with the previous month."""

    current_month: Decimal = Decimal(0)
    previous_month: Decimal = Decimal(0)
    change_percentage: Decimal | None = None  # None when previous month is 0


class InvestmentTypeSummary(BaseModel):
    type: InvestmentType
    value: Decimal = Decimal(0)
    count: int = 0
    gain_loss: Decimal = Decimal(0)


class BudgetSummary(BaseModel):
    """Totals over active (and unexpired) budgets."""

    total_budgets: int = 0
    active_budgets: int = 0
    total_budget_amount: Decimal = Decimal(0)
    total_spent: Decimal = Decimal(0)
    average_spending_rate: Decimal = Decimal(0)
    categories_over_budget: int = 0
    budgets_over_limit: int = 0
    last_updated: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[misc]
    @property
    def overall_progress(self) -> Decimal:
        if self.total_budget_amount <= 0:
            return Decimal(0)
        return min(self.total_spent / self.total_budget_amount, Decimal(1))

    @computed_field  # type: ignore[misc]
    @property
    def is_on_track(self) -> bool:
        return self.overall_progress <= Decimal("0.8")


class SavingsSummary(BaseModel):
    """Totals over savings goals. Amounts cover active goals only."""

    total_goals: int = 0
    active_goals: int = 0
    completed_goals: int = 0
    total_target_amount: Decimal = Decimal(0)
    total_saved_amount: Decimal = Decimal(0)
    average_progress: Decimal = Decimal(0)
    goals_on_track: int = 0
    overdue_goals: int = 0
    last_updated: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[misc]
    @property
    def overall_progress(self) -> Decimal:
        if self.total_target_amount <= 0:
            return Decimal(0)
        return min(self.total_saved_amount / self.total_target_amount, Decimal(1))

    @computed_field  # type: ignore[misc]
    @property
    def completion_rate(self) -> Decimal:
        if self.total_goals == 0:
            return Decimal(0)
        return Decimal(self.completed_goals) / Decimal(self.total_goals)


class BillSummary(BaseModel):
    """Reminder counts over enabled bills."""

    total_bills: int = 0
    enabled_bills: int = 0
    overdue: int = 0
    due_today: int = 0
    due_soon: int = 0
    total_unpaid_amount: Decimal = Decimal(0)
    next_bill: BillReminder | None = None


class DashboardData(BaseModel):
    """Complete data container for the overview screen.

    Built by ``DashboardDataProvider`` from the workspace collections.
    """

    currency: str
    period: TimePeriod
    generated_at: datetime

    # ===== Expenses =====
    total_expenses: Decimal = Decimal(0)
    expense_summary: ExpenseSummary = Field(default_factory=ExpenseSummary)
    expenses_by_category: list[CategoryShare] = Field(default_factory=list)
    recent_expenses: list[Expense] = Field(default_factory=list)
    spending_change: SpendingChange = Field(default_factory=SpendingChange)
    spending_insight: str = ""

    # ===== Monthly budget =====
    monthly_budget: Decimal = Decimal(0)
    monthly_budget_progress: Decimal = Decimal(0)
    monthly_budget_remaining: Decimal = Decimal(0)

    # ===== Investments =====
    portfolio: Portfolio = Field(default_factory=Portfolio)
    top_investments: list[Investment] = Field(default_factory=list)

    # ===== Budgets / Goals / Bills =====
    budget_summary: BudgetSummary = Field(default_factory=BudgetSummary)
    savings_summary: SavingsSummary = Field(default_factory=SavingsSummary)
    bill_summary: BillSummary = Field(default_factory=BillSummary)

    # ===== Health =====
    health_score: FinancialHealthScore = Field(default_factory=FinancialHealthScore)
