"""Derived display values for goals.

Pure functions: no storage access, no clock reads unless `now` is omitted.
"""
import math
from datetime import datetime

from fittrack.core.constants import (
    DEADLINE_PASSED_LABEL,
    ONGOING_LABEL,
    PROGRESS_MAX,
    PROGRESS_MIN,
    SECONDS_PER_DAY,
)
from fittrack.core.time_utils import ensure_utc, utc_now
from fittrack.schemas.goal import GoalProgressRead, GoalRead, GoalType


def _round_half_up(x: float) -> int:
    # round() would give 2 for 2.5; progress percentages round .5 upward
    return math.floor(x + 0.5)


def _clamp(pct: int) -> int:
    return max(PROGRESS_MIN, min(PROGRESS_MAX, pct))


def progress_percent(goal) -> int:
    """
    Whole-percent progress of `goal` toward its target, in [0, 100].

    Weight goals count down toward the target. The starting value is not
    stored, so it is reconstructed: while above target, we assume the
    distance already covered equals the distance left
    (initial = current + (current - target)); otherwise initial = current.
    Every other goal type counts up: current / target.

    Example: weight goal target=165, current=172 -> initial=179, 50%.
    """
    target = goal.target
    current = goal.current
    if current == target:
        return PROGRESS_MAX

    if goal.type == GoalType.weight:
        initial = current + (current - target) if target < current else current
        span = abs(initial - target)
        progressed = abs(initial - current)
        return _clamp(_round_half_up(progressed / span * 100))

    if target == 0:
        return PROGRESS_MAX if current > 0 else PROGRESS_MIN
    return _clamp(_round_half_up(current / target * 100))


def days_remaining(deadline: datetime | None, now: datetime | None = None) -> int | None:
    """Whole days until `deadline`, rounded up. None when there is no deadline.

    A deadline 30 minutes away counts as 1 day. Past deadlines give zero or a
    negative count.
    """
    if deadline is None:
        return None
    now = ensure_utc(now) if now is not None else utc_now()
    seconds = (ensure_utc(deadline) - now).total_seconds()
    return math.ceil(seconds / SECONDS_PER_DAY)


def time_remaining(
    deadline: datetime | None,
    now: datetime | None = None,
    ongoing_label: str = ONGOING_LABEL,
    passed_label: str = DEADLINE_PASSED_LABEL,
) -> str:
    """Countdown text for a goal deadline, e.g. '1 day remaining'."""
    if deadline is None:
        return ongoing_label

    now = ensure_utc(now) if now is not None else utc_now()
    if ensure_utc(deadline) < now:
        return passed_label

    days = days_remaining(deadline, now)
    return "1 day remaining" if days == 1 else f"{days} days remaining"


def goal_summary(goal: GoalRead, now: datetime | None = None) -> GoalProgressRead:
    return GoalProgressRead(
        **goal.model_dump(),
        progress=progress_percent(goal),
        time_remaining=time_remaining(goal.deadline, now),
    )
