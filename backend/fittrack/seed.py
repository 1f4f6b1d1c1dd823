import logging
from datetime import datetime, timedelta

from fittrack.core.constants import DEMO_DISPLAY_NAME, DEMO_PASSWORD, DEMO_USERNAME
from fittrack.core.time_utils import utc_now
from fittrack.schemas.goal import GoalCreate, GoalType
from fittrack.schemas.measurement import MeasurementCreate
from fittrack.schemas.user import UserCreate
from fittrack.schemas.workout import WorkoutCreate, WorkoutType
from fittrack.storage.base import Storage

logger = logging.getLogger(__name__)


def seed_database(storage: Storage, now: datetime | None = None) -> bool:
    """Populate an empty store with a demo user and sample data.

    No-op (returns False) as soon as any user exists, so calling it on every
    boot is safe.
    """
    if storage.has_users():
        logger.info("Store already has users, skipping seeding")
        return False

    now = now or utc_now()
    logger.info("Seeding demo data")

    user = storage.create_user(
        UserCreate(
            username=DEMO_USERNAME,
            password=DEMO_PASSWORD,
            display_name=DEMO_DISPLAY_NAME,
            profile_image="",
        )
    )
    logger.info("Created user with id %s", user.id)

    # Today's run and yesterday's ride
    for type_, name, when, duration, distance, calories, notes in [
        (WorkoutType.running, "Morning Run", now, 27, 3.2, 320, "Felt good today"),
        (
            WorkoutType.cycling,
            "Cycling Session",
            now - timedelta(days=1),
            45,
            8.5,
            450,
            "Hilly route",
        ),
    ]:
        storage.create_workout(
            WorkoutCreate(
                user_id=user.id,
                type=type_,
                name=name,
                date=when,
                duration=duration,
                distance=distance,
                calories=calories,
                notes=notes,
            )
        )

    storage.create_measurement(
        MeasurementCreate(
            user_id=user.id,
            date=now,
            weight=172,
            body_fat=18,
            chest=42,
            waist=34,
            hips=40,
            arms=14,
            thighs=22,
            notes="Morning measurement",
        )
    )

    goals = [
        GoalCreate(
            user_id=user.id,
            title="Run 5K under 25 minutes",
            description="Improve running speed",
            type=GoalType.running,
            target=25,
            current=27,
            unit="minutes",
            deadline=now + timedelta(days=7),
            created_at=now,
        ),
        GoalCreate(
            user_id=user.id,
            title="Lose 10 pounds",
            description="Weight loss goal",
            type=GoalType.weight,
            target=165,
            current=172,
            unit="lbs",
            deadline=now + timedelta(days=25),
            created_at=now,
        ),
        GoalCreate(
            user_id=user.id,
            title="Workout 5 days a week",
            description="Consistency goal",
            type=GoalType.frequency,
            target=5,
            current=3,
            unit="days",
            deadline=None,  # recurring
            created_at=now,
        ),
    ]
    for goal in goals:
        storage.create_goal(goal)

    logger.info("Seeded 2 workouts, 1 measurement and %d goals", len(goals))
    return True
