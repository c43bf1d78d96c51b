"""Display metadata for enums.

Icons and colours are used only by the presentation layer (and to seed a
budget category's colour/icon). Engine code never reads this module.
"""

from typing import NamedTuple

from finhealth.core.models import (
    BillStatus,
    CategoryStatus,
    ExpenseCategory,
    GoalPriority,
    GoalStatus,
    HealthCategory,
    InvestmentType,
    SavingsCategory,
)


class Style(NamedTuple):
    icon: str
    color: str


EXPENSE_CATEGORY_STYLE: dict[ExpenseCategory, Style] = {
    ExpenseCategory.FOOD: Style("fork.knife", "#FF6B6B"),
    ExpenseCategory.TRANSPORTATION: Style("car.fill", "#4ECDC4"),
    ExpenseCategory.SHOPPING: Style("bag.fill", "#45B7D1"),
    ExpenseCategory.ENTERTAINMENT: Style("tv.fill", "#96CEB4"),
    ExpenseCategory.BILLS: Style("doc.text.fill", "#FFEAA7"),
    ExpenseCategory.HEALTHCARE: Style("cross.fill", "#DDA0DD"),
    ExpenseCategory.EDUCATION: Style("book.fill", "#98D8C8"),
    ExpenseCategory.TRAVEL: Style("airplane", "#F7DC6F"),
    ExpenseCategory.LIFESTYLE: Style("heart.fill", "#BB8FCE"),
    ExpenseCategory.INVESTMENT: Style("chart.line.uptrend.xyaxis", "#85C1E9"),
    ExpenseCategory.OTHER: Style("ellipsis.circle.fill", "#D5DBDB"),
}

INVESTMENT_TYPE_STYLE: dict[InvestmentType, Style] = {
    InvestmentType.STOCKS: Style("chart.line.uptrend.xyaxis", "#2ECC71"),
    InvestmentType.BONDS: Style("doc.text.fill", "#3498DB"),
    InvestmentType.CRYPTO: Style("bitcoinsign.circle.fill", "#F39C12"),
    InvestmentType.ETF: Style("chart.bar.fill", "#9B59B6"),
    InvestmentType.MUTUAL_FUND: Style("building.columns.fill", "#1ABC9C"),
    InvestmentType.REIT: Style("house.fill", "#E74C3C"),
    InvestmentType.COMMODITIES: Style("cube.fill", "#34495E"),
    InvestmentType.OTHER: Style("ellipsis.circle.fill", "#95A5A6"),
}

SAVINGS_CATEGORY_STYLE: dict[SavingsCategory, Style] = {
    SavingsCategory.EMERGENCY: Style("shield.fill", "#FF4444"),
    SavingsCategory.VACATION: Style("airplane", "#4A90E2"),
    SavingsCategory.HOUSE: Style("house.fill", "#8CC152"),
    SavingsCategory.CAR: Style("car.fill", "#FF8800"),
    SavingsCategory.EDUCATION: Style("book.fill", "#9B59B6"),
    SavingsCategory.RETIREMENT: Style("person.fill", "#34495E"),
    SavingsCategory.WEDDING: Style("heart.fill", "#E91E63"),
    SavingsCategory.GADGET: Style("laptopcomputer", "#00BCD4"),
    SavingsCategory.HEALTH: Style("cross.fill", "#FF5722"),
    SavingsCategory.BUSINESS: Style("building.2.fill", "#607D8B"),
    SavingsCategory.OTHER: Style("star.fill", "#95A5A6"),
}

GOAL_PRIORITY_STYLE: dict[GoalPriority, Style] = {
    GoalPriority.LOW: Style("minus.circle", "#95A5A6"),
    GoalPriority.MEDIUM: Style("equal.circle", "#3498DB"),
    GoalPriority.HIGH: Style("plus.circle", "#F39C12"),
    GoalPriority.CRITICAL: Style("exclamationmark.circle", "#E74C3C"),
}

HEALTH_CATEGORY_STYLE: dict[HealthCategory, Style] = {
    HealthCategory.EXCELLENT: Style("heart.fill", "#00AA00"),
    HealthCategory.GOOD: Style("heart", "#88CC00"),
    HealthCategory.FAIR: Style("heart.slash", "#FFDD00"),
    HealthCategory.POOR: Style("exclamationmark.triangle", "#FF8800"),
    HealthCategory.CRITICAL: Style("xmark.octagon.fill", "#FF4444"),
}

CATEGORY_STATUS_COLOR: dict[CategoryStatus, str] = {
    CategoryStatus.OVER_BUDGET: "#FF4444",
    CategoryStatus.ALERT: "#FF8800",
    CategoryStatus.WARNING: "#FFDD00",
    CategoryStatus.OK: "#00AA00",
}

GOAL_STATUS_COLOR: dict[GoalStatus, str] = {
    GoalStatus.COMPLETED: "#00AA00",
    GoalStatus.OVERDUE: "#FF4444",
    GoalStatus.DUE_SOON: "#FF8800",
    GoalStatus.ON_TRACK: "#4A90E2",
}

BILL_STATUS_COLOR: dict[BillStatus, str] = {
    BillStatus.OVERDUE: "#FF4444",
    BillStatus.DUE_TODAY: "#FF8800",
    BillStatus.DUE_SOON: "#FFDD00",
    BillStatus.ON_TRACK: "#00AA00",
}
