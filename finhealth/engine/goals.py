"""Savings goal progress.

Contributions are append-only and every change goes through this module,
so ``current_amount`` always equals the sum of a goal's contributions.
Completion of a goal and of its milestones is one-way: nothing here ever
clears ``is_completed``.

All functions return updated copies and leave their inputs untouched.
"""

from collections.abc import Sequence
from datetime import date, datetime
from decimal import Decimal

from finhealth.core.models import (
    ContributionMethod,
    GoalPriority,
    SavingsCategory,
    SavingsContribution,
    SavingsGoal,
    SavingsMilestone,
    SavingsSummary,
)

LOW_PROGRESS = Decimal("0.1")


def update_milestone_completion(goal: SavingsGoal, now: datetime | None = None) -> SavingsGoal:
    """Mark every reached milestone as completed.

    A milestone is reached when its target is at or below the goal's
    current amount. Milestones already completed keep their original
    completion date.
    """
    now = now or datetime.now()
    milestones = [
        m.model_copy(update={"is_completed": True, "completed_date": now})
        if not m.is_completed and m.target_amount <= goal.current_amount
        else m
        for m in goal.milestones
    ]
    return goal.model_copy(update={"milestones": milestones})


def add_contribution(
    goal: SavingsGoal,
    amount: Decimal,
    note: str = "",
    method: ContributionMethod = ContributionMethod.MANUAL,
    now: datetime | None = None,
) -> SavingsGoal:
    """Record a contribution towards a goal.

    Appends the contribution, raises ``current_amount`` by ``amount`` and
    completes the goal the first time the target is reached. Milestones are
    re-evaluated afterwards.

    Args:
        goal: Goal to contribute to.
        amount: Contribution amount.
        note: Free-form note.
        method: How the money was added.
        now: Contribution timestamp (default: current time).

    Returns:
        Updated copy of the goal.
    """
    now = now or datetime.now()
    contribution = SavingsContribution(amount=amount, note=note, method=method, date=now)
    update = {
        "contributions": [*goal.contributions, contribution],
        "current_amount": goal.current_amount + amount,
    }
    if update["current_amount"] >= goal.target_amount and not goal.is_completed:
        update["is_completed"] = True
        update["completed_date"] = now

    return update_milestone_completion(goal.model_copy(update=update), now)


def add_milestone(
    goal: SavingsGoal,
    milestone: SavingsMilestone,
    now: datetime | None = None,
) -> SavingsGoal:
    """Insert a milestone, keeping milestones sorted by target amount.

    A milestone whose target is already covered is completed on insert.
    """
    milestones = sorted([*goal.milestones, milestone], key=lambda m: m.target_amount)
    return update_milestone_completion(goal.model_copy(update={"milestones": milestones}), now)


def archive_goal(goal: SavingsGoal) -> SavingsGoal:
    return goal.model_copy(update={"is_archived": True})


def suggested_milestones(category: SavingsCategory, target_amount: Decimal) -> list[SavingsMilestone]:
    """Evenly spaced milestones for a new goal of the given category.

    The i-th of n suggested names gets ``target_amount * (i + 1) / n``,
    so the last one always equals the target.
    """
    names = category.suggested_milestones
    n = len(names)
    return [
        SavingsMilestone(name=name, target_amount=target_amount * (i + 1) / n)
        for i, name in enumerate(names)
    ]


# -----------------------------------------------------------------------------
# Collection views
# -----------------------------------------------------------------------------


def active_goals(goals: Sequence[SavingsGoal]) -> list[SavingsGoal]:
    return [g for g in goals if g.is_active]


def calculate_savings_summary(
    goals: Sequence[SavingsGoal],
    today: date | None = None,
    now: datetime | None = None,
) -> SavingsSummary:
    """Summarize savings goals.

    Target and saved amounts, average progress and the on-track/overdue
    counts cover active goals only (not completed, not archived).

    Args:
        goals: All savings goals.
        today: Reference day for overdue checks (default: today).
        now: Timestamp recorded on the summary.

    Returns:
        SavingsSummary for the collection.
    """
    today = today or date.today()
    active = active_goals(goals)
    overdue = sum(1 for g in active if g.is_overdue(today))

    average_progress = Decimal(0)
    if active:
        average_progress = sum((g.progress for g in active), Decimal(0)) / len(active)

    return SavingsSummary(
        total_goals=len(goals),
        active_goals=len(active),
        completed_goals=sum(1 for g in goals if g.is_completed),
        total_target_amount=sum((g.target_amount for g in active), Decimal(0)),
        total_saved_amount=sum((g.current_amount for g in active), Decimal(0)),
        average_progress=average_progress,
        goals_on_track=len(active) - overdue,
        overdue_goals=overdue,
        last_updated=now or datetime.now(),
    )


def upcoming_milestones(goals: Sequence[SavingsGoal]) -> list[SavingsMilestone]:
    """Next pending milestone of each active goal, smallest target first."""
    pending = [g.next_milestone for g in active_goals(goals)]
    return sorted((m for m in pending if m is not None), key=lambda m: m.target_amount)


def recent_contributions(goals: Sequence[SavingsGoal], limit: int = 10) -> list[SavingsContribution]:
    """Newest contributions across active goals."""
    contributions = [c for g in active_goals(goals) for c in g.contributions]
    return sorted(contributions, key=lambda c: c.date, reverse=True)[:limit]


def total_monthly_needed(goals: Sequence[SavingsGoal], today: date | None = None) -> Decimal:
    """Sum of the monthly contributions needed to finish every active goal on time."""
    return sum((g.monthly_target_contribution(today) for g in active_goals(goals)), Decimal(0))


def goal_recommendations(goals: Sequence[SavingsGoal], today: date | None = None) -> list[str]:
    """Tips for the current set of savings goals.

    Returns:
        Non-empty list of messages.
    """
    today = today or date.today()
    active = active_goals(goals)
    tips = []

    if not active:
        tips.append("Start with an emergency fund goal - aim for 3-6 months of expenses.")
        tips.append("Set a small, achievable goal first to build momentum.")
        return tips

    if any(g.priority in (GoalPriority.HIGH, GoalPriority.CRITICAL) for g in active):
        tips.append("Focus on your high-priority goals first for maximum impact.")

    if sum(1 for g in active if g.progress < LOW_PROGRESS) > 2:
        tips.append("Consider consolidating some goals to maintain focus.")

    if any(g.is_overdue(today) for g in active):
        tips.append("Review your overdue goals and adjust target dates if needed.")

    monthly = total_monthly_needed(active, today)
    if monthly > 0:
        tips.append(f"You need about ${int(monthly)}/month to reach all goals on time.")

    if not tips:
        tips.append("Great job managing your savings goals! Consider adding stretch goals.")
    return tips


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def motivational_message(goals: Sequence[SavingsGoal]) -> str:
    completed = sum(1 for g in goals if g.is_completed)
    active = len(active_goals(goals))

    if completed == 0 and active == 0:
        return "Start your savings journey by creating your first goal!"
    if completed == 0:
        return f"You're on your way! Keep working toward your {active} goal{_plural(active)}."
    if active == 0:
        return (
            f"Congratulations on completing {completed} goal{_plural(completed)}! "
            "Ready for new challenges?"
        )
    return (
        f"Amazing progress! {completed} completed, {active} in progress. "
        "You're building great habits!"
    )
