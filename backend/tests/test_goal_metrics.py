from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from fittrack.core.goal_metrics import (
    days_remaining,
    goal_summary,
    progress_percent,
    time_remaining,
)
from fittrack.schemas.goal import GoalRead, GoalType

NOW = datetime(2025, 1, 15, 9, 0, tzinfo=timezone.utc)


def g(type_, target, current):
    return SimpleNamespace(type=GoalType(type_), target=target, current=current)


def test_higher_is_better_is_capped():
    # 27/25 -> 108%, reported as 100
    assert progress_percent(g("running", 25, 27)) == 100


def test_higher_is_better_partial():
    assert progress_percent(g("frequency", 5, 3)) == 60


def test_weight_goal_reconstructs_initial_value():
    # initial = 172 + (172 - 165) = 179; 7 of 14 covered
    assert progress_percent(g("weight", 165, 172)) == 50


def test_weight_goal_below_target_reports_zero():
    # Reproduces the existing heuristic: initial collapses to current
    assert progress_percent(g("weight", 170, 160)) == 0


@pytest.mark.parametrize("type_", ["weight", "running", "frequency", "other"])
def test_target_reached_is_complete(type_):
    assert progress_percent(g(type_, 5, 5)) == 100


def test_rounds_half_up():
    # 1/8 = 12.5% -> 13, not banker's 12
    assert progress_percent(g("other", 8, 1)) == 13


def test_result_stays_in_range():
    assert progress_percent(g("running", 10, -4)) == 0
    assert progress_percent(g("running", 0, 3)) == 100
    assert progress_percent(g("running", 0, -3)) == 0


def test_no_deadline_is_ongoing():
    assert time_remaining(None, NOW) == "Ongoing goal"
    assert time_remaining(None, NOW, ongoing_label="Weekly goal") == "Weekly goal"
    assert days_remaining(None, NOW) is None


def test_partial_days_round_up():
    assert time_remaining(NOW + timedelta(hours=36), NOW) == "2 days remaining"
    assert time_remaining(NOW + timedelta(minutes=30), NOW) == "1 day remaining"


def test_exactly_one_day_is_singular():
    assert time_remaining(NOW + timedelta(days=1), NOW) == "1 day remaining"
    assert time_remaining(NOW + timedelta(days=7), NOW) == "7 days remaining"


def test_past_deadline():
    assert time_remaining(NOW - timedelta(minutes=10), NOW) == "Deadline passed"
    assert time_remaining(NOW - timedelta(days=3), NOW, passed_label="Overdue") == "Overdue"


def test_deadline_right_now_reports_zero_days():
    assert time_remaining(NOW, NOW) == "0 days remaining"


def test_naive_deadline_is_treated_as_utc():
    naive = datetime(2025, 1, 16, 9, 0)
    assert days_remaining(naive, NOW) == 1


def test_goal_summary():
    goal = GoalRead(
        id=3,
        user_id=1,
        title="Lose 10 pounds",
        type=GoalType.weight,
        target=165,
        current=172,
        unit="lbs",
        deadline=NOW + timedelta(days=25),
        created_at=NOW,
    )
    summary = goal_summary(goal, NOW)
    assert summary.progress == 50
    assert summary.time_remaining == "25 days remaining"
    assert summary.title == goal.title
