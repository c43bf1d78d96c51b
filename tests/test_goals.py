"""Tests for savings goal progress and bill reminders."""

from datetime import date, datetime, timedelta
from decimal import Decimal

from finhealth.core.models import (
    BillFrequency,
    BillReminder,
    BillStatus,
    GoalPriority,
    GoalStatus,
    SavingsCategory,
    SavingsGoal,
    SavingsMilestone,
)
from finhealth.engine.bills import calculate_bill_summary, mark_paid, upcoming_bills
from finhealth.engine.goals import (
    add_contribution,
    add_milestone,
    archive_goal,
    calculate_savings_summary,
    goal_recommendations,
    motivational_message,
    recent_contributions,
    suggested_milestones,
    upcoming_milestones,
)

TODAY = date(2024, 3, 15)
NOW = datetime(2024, 3, 15, 12, 0)


def make_goal(target: str = "1000", target_date: date = date(2024, 12, 31), **kwargs) -> SavingsGoal:
    return SavingsGoal(
        name=kwargs.pop("name", "Goal"),
        target_amount=Decimal(target),
        target_date=target_date,
        **kwargs,
    )


def milestone(name: str, target: str) -> SavingsMilestone:
    return SavingsMilestone(name=name, target_amount=Decimal(target))


class TestAddContribution:
    """Tests for add_contribution."""

    def test_completes_goal_and_clamps_progress(self) -> None:
        """Test 600 then 500 towards 1000 completes the goal at 100%."""
        goal = add_contribution(make_goal(), Decimal(600), now=NOW)
        assert not goal.is_completed
        assert goal.progress == Decimal("0.6")

        later = NOW + timedelta(days=1)
        goal = add_contribution(goal, Decimal(500), now=later)
        assert goal.current_amount == Decimal(1100)
        assert goal.is_completed
        assert goal.completed_date == later
        assert goal.progress == Decimal(1)
        assert goal.remaining_amount == Decimal(0)

    def test_current_amount_matches_contributions(self) -> None:
        """Test current amount always equals the sum of contributions."""
        goal = make_goal()
        for amount in ("10", "25.50", "0.01", "300"):
            goal = add_contribution(goal, Decimal(amount), now=NOW)
            assert goal.current_amount == goal.total_contributions
        assert len(goal.contributions) == 4

    def test_completion_date_not_moved(self) -> None:
        """Test a completed goal keeps its first completion date."""
        goal = add_contribution(make_goal(target="100"), Decimal(100), now=NOW)
        goal = add_contribution(goal, Decimal(50), now=NOW + timedelta(days=5))
        assert goal.completed_date == NOW

    def test_input_not_mutated(self) -> None:
        """Test the original goal is left unchanged."""
        goal = make_goal()
        add_contribution(goal, Decimal(100), now=NOW)
        assert goal.current_amount == Decimal(0)
        assert goal.contributions == []

    def test_contribution_record(self) -> None:
        """Test the appended contribution carries amount, note and timestamp."""
        goal = add_contribution(make_goal(), Decimal(20), note="birthday", now=NOW)
        contribution = goal.contributions[-1]
        assert contribution.amount == Decimal(20)
        assert contribution.note == "birthday"
        assert contribution.date == NOW


class TestMilestones:
    """Tests for milestone insertion and completion."""

    def test_reached_milestones_completed(self) -> None:
        """Test milestones at or below the current amount are completed."""
        goal = make_goal(milestones=[milestone("a", "250"), milestone("b", "500")])
        goal = add_contribution(goal, Decimal(250), now=NOW)
        assert [m.is_completed for m in goal.milestones] == [True, False]
        assert goal.milestones[0].completed_date == NOW
        assert goal.next_milestone.name == "b"

    def test_insert_keeps_sorted(self) -> None:
        """Test milestones stay sorted by target amount after insertion."""
        goal = make_goal(milestones=[milestone("low", "100"), milestone("high", "900")])
        goal = add_milestone(goal, milestone("mid", "500"), NOW)
        assert [m.name for m in goal.milestones] == ["low", "mid", "high"]

    def test_insert_below_progress_completes(self) -> None:
        """Test a milestone already covered is completed on insert."""
        goal = add_contribution(make_goal(), Decimal(300), now=NOW)
        goal = add_milestone(goal, milestone("early", "200"), NOW)
        assert goal.milestones[0].is_completed

    def test_completion_monotonic(self) -> None:
        """Test completed milestones stay completed with their first date."""
        goal = make_goal(milestones=[milestone("a", "100")])
        goal = add_contribution(goal, Decimal(150), now=NOW)
        goal = add_milestone(goal, milestone("b", "1000"), NOW + timedelta(days=1))
        goal = add_contribution(goal, Decimal(1), now=NOW + timedelta(days=2))
        first = goal.milestones[0]
        assert first.is_completed
        assert first.completed_date == NOW

    def test_suggested_milestones(self) -> None:
        """Test suggestions are evenly spaced up to the target."""
        suggestions = suggested_milestones(SavingsCategory.EMERGENCY, Decimal(9000))
        assert [m.name for m in suggestions] == [
            "1 Month Expenses",
            "3 Months Expenses",
            "6 Months Expenses",
        ]
        assert [m.target_amount for m in suggestions] == [Decimal(3000), Decimal(6000), Decimal(9000)]


class TestGoalSchedule:
    """Tests for target contributions and status."""

    def test_monthly_target(self) -> None:
        """Test monthly target divides remaining by average months left."""
        goal = make_goal(target="3044", target_date=TODAY + timedelta(days=304))
        assert goal.monthly_target_contribution(TODAY) == Decimal(3044) / (Decimal(304) / Decimal("30.44"))
        assert goal.weekly_target_contribution(TODAY) == goal.monthly_target_contribution(TODAY) / Decimal("4.33")

    def test_monthly_target_at_least_one_month(self) -> None:
        """Test a target under a month away still spreads over one month."""
        goal = make_goal(target="500", target_date=TODAY + timedelta(days=10))
        assert goal.monthly_target_contribution(TODAY) == Decimal(500)

    def test_past_due_is_full_remaining(self) -> None:
        """Test the whole remaining amount is due once the date has passed."""
        goal = add_contribution(make_goal(target_date=date(2024, 1, 1)), Decimal(400), now=NOW)
        assert goal.monthly_target_contribution(TODAY) == Decimal(600)
        assert goal.is_overdue(TODAY)
        assert goal.status(TODAY) == GoalStatus.OVERDUE

    def test_status(self) -> None:
        """Test due-soon and on-track statuses."""
        assert make_goal(target_date=TODAY + timedelta(days=30)).status(TODAY) == GoalStatus.DUE_SOON
        assert make_goal(target_date=TODAY + timedelta(days=31)).status(TODAY) == GoalStatus.ON_TRACK


class TestSavingsSummary:
    """Tests for collection views and messages."""

    def test_summary_counts_active_goals(self) -> None:
        """Test amounts and on-track counts cover active goals only."""
        done = add_contribution(make_goal(target="100"), Decimal(100), now=NOW)
        active = add_contribution(make_goal(target="1000"), Decimal(250), now=NOW)
        overdue = make_goal(target="400", target_date=date(2024, 1, 1))
        archived = archive_goal(make_goal(target="5000"))

        summary = calculate_savings_summary([done, active, overdue, archived], TODAY, NOW)
        assert summary.total_goals == 4
        assert summary.active_goals == 2
        assert summary.completed_goals == 1
        assert summary.total_target_amount == Decimal(1400)
        assert summary.total_saved_amount == Decimal(250)
        assert summary.goals_on_track == 1
        assert summary.overdue_goals == 1
        assert summary.completion_rate == Decimal("0.25")

    def test_upcoming_and_recent(self) -> None:
        """Test next milestones and newest contributions across active goals."""
        a = add_contribution(make_goal(milestones=[milestone("a1", "800")]), Decimal(1), now=NOW)
        b = make_goal(milestones=[milestone("b1", "300")])
        b = add_contribution(b, Decimal(2), now=NOW + timedelta(hours=1))
        assert [m.name for m in upcoming_milestones([a, b])] == ["b1", "a1"]
        assert [c.amount for c in recent_contributions([a, b], limit=1)] == [Decimal(2)]

    def test_recommendations_without_goals(self) -> None:
        """Test starter tips when there are no active goals."""
        assert goal_recommendations([], TODAY) == [
            "Start with an emergency fund goal - aim for 3-6 months of expenses.",
            "Set a small, achievable goal first to build momentum.",
        ]

    def test_recommendations(self) -> None:
        """Test priority, focus, overdue and monthly-need tips."""
        goals = [
            make_goal(priority=GoalPriority.HIGH, target="1000", target_date=date(2025, 3, 15)),
            make_goal(target="1000", target_date=date(2025, 3, 15)),
            make_goal(target="100", target_date=date(2024, 1, 1)),
        ]
        tips = goal_recommendations(goals, TODAY)
        assert tips[0] == "Focus on your high-priority goals first for maximum impact."
        assert tips[1] == "Consider consolidating some goals to maintain focus."
        assert tips[2] == "Review your overdue goals and adjust target dates if needed."
        assert tips[3].startswith("You need about $")

    def test_motivational_messages(self) -> None:
        """Test the four message variants."""
        done = add_contribution(make_goal(target="10"), Decimal(10), now=NOW)
        active = make_goal()
        assert motivational_message([]) == "Start your savings journey by creating your first goal!"
        assert motivational_message([active]) == "You're on your way! Keep working toward your 1 goal."
        assert motivational_message([done, done]) == (
            "Congratulations on completing 2 goals! Ready for new challenges?"
        )
        assert motivational_message([done, active]) == (
            "Amazing progress! 1 completed, 1 in progress. You're building great habits!"
        )


class TestBills:
    """Tests for bill reminders."""

    def make_bill(self, due: date, **kwargs) -> BillReminder:
        return BillReminder(title=kwargs.pop("title", "Rent"), amount=Decimal(1200), due_date=due, **kwargs)

    def test_status(self) -> None:
        """Test overdue, due today, due soon and on-track states."""
        assert self.make_bill(date(2024, 3, 14)).status(TODAY) == BillStatus.OVERDUE
        assert self.make_bill(TODAY).status(TODAY) == BillStatus.DUE_TODAY
        assert self.make_bill(date(2024, 3, 18)).status(TODAY) == BillStatus.DUE_SOON
        assert self.make_bill(date(2024, 3, 19)).status(TODAY) == BillStatus.ON_TRACK

    def test_mark_paid_moves_next_due(self) -> None:
        """Test paying advances the next due date by the frequency."""
        bill = mark_paid(self.make_bill(date(2024, 3, 14), frequency=BillFrequency.MONTHLY), TODAY)
        assert bill.is_paid
        assert bill.next_due_date == date(2024, 4, 15)
        assert not bill.is_overdue(TODAY)

    def test_one_time_bill(self) -> None:
        """Test a one-time bill's next date is the payment day."""
        bill = mark_paid(self.make_bill(TODAY, frequency=BillFrequency.ONE_TIME), TODAY)
        assert bill.next_due_date == TODAY

    def test_summary(self) -> None:
        """Test counts over enabled bills."""
        bills = [
            self.make_bill(date(2024, 3, 10), title="Late"),
            self.make_bill(date(2024, 3, 17), title="Soon"),
            self.make_bill(date(2024, 5, 1), title="Later"),
            self.make_bill(date(2024, 3, 1), title="Off", is_enabled=False),
        ]
        summary = calculate_bill_summary(bills, TODAY)
        assert summary.total_bills == 4
        assert summary.enabled_bills == 3
        assert summary.overdue == 1
        assert summary.due_soon == 1
        assert summary.total_unpaid_amount == Decimal(3600)
        assert summary.next_bill.title == "Late"
        assert [b.title for b in upcoming_bills(bills, TODAY)] == ["Late", "Soon", "Later"]
