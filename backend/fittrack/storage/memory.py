import logging
import threading
from typing import Callable, Optional

from pydantic import BaseModel

from fittrack.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from fittrack.schemas.measurement import (
    MeasurementCreate,
    MeasurementRead,
    MeasurementUpdate,
)
from fittrack.schemas.user import UserCreate, UserRead
from fittrack.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from fittrack.storage.errors import IntegrityViolation

logger = logging.getLogger(__name__)


class _Collection:
    """Records of one entity type keyed by id, plus its next-id counter."""

    def __init__(self, read_model: type[BaseModel]):
        self.read_model = read_model
        self.rows: dict[int, BaseModel] = {}
        self._next_id = 1

    def insert(self, data: dict):
        record_id = self._next_id
        self._next_id += 1
        record = self.read_model.model_validate({**data, "id": record_id})
        self.rows[record_id] = record
        return record

    def merge(self, record_id: int, changes: dict):
        existing = self.rows.get(record_id)
        if existing is None:
            return None
        # Re-validate so the merged record is normalized like a fresh insert
        merged = self.read_model.model_validate({**existing.model_dump(), **changes})
        self.rows[record_id] = merged
        return merged

    def remove(self, record_id: int) -> bool:
        return self.rows.pop(record_id, None) is not None

    def select(self, predicate: Callable, key: Callable, newest_first: bool) -> list:
        matches = [r for r in self.rows.values() if predicate(r)]
        return sorted(matches, key=key, reverse=newest_first)


class MemStorage:
    """Volatile storage: everything lives in this process and dies with it.

    Records are frozen pydantic models, so handing them out never exposes
    mutable internal state. Access holds a lock because FastAPI runs sync
    endpoints on a threadpool.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._users = _Collection(UserRead)
        self._workouts = _Collection(WorkoutRead)
        self._measurements = _Collection(MeasurementRead)
        self._goals = _Collection(GoalRead)

    def _require_user(self, user_id: int) -> None:
        if user_id not in self._users.rows:
            raise IntegrityViolation(f"user {user_id} does not exist")

    def _check_owner_change(self, changes: dict) -> None:
        if "user_id" in changes:
            self._require_user(changes["user_id"])

    # User methods
    def get_user(self, user_id: int) -> Optional[UserRead]:
        return self._users.rows.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        with self._lock:
            for user in self._users.rows.values():
                if user.username == username:
                    return user
        return None

    def create_user(self, user: UserCreate) -> UserRead:
        with self._lock:
            if self.get_user_by_username(user.username) is not None:
                raise IntegrityViolation(f"username {user.username!r} is taken")
            created = self._users.insert(user.model_dump())
        logger.debug("Created user %s", created.id)
        return created

    def has_users(self) -> bool:
        return bool(self._users.rows)

    # Workout methods
    def get_workouts(self, user_id: int) -> list[WorkoutRead]:
        with self._lock:
            return self._workouts.select(
                lambda w: w.user_id == user_id,
                key=lambda w: (w.date, w.id),
                newest_first=True,
            )

    def get_workout(self, workout_id: int) -> Optional[WorkoutRead]:
        return self._workouts.rows.get(workout_id)

    def create_workout(self, workout: WorkoutCreate) -> WorkoutRead:
        with self._lock:
            self._require_user(workout.user_id)
            created = self._workouts.insert(workout.model_dump())
        logger.debug("Created workout %s for user %s", created.id, created.user_id)
        return created

    def update_workout(
        self, workout_id: int, changes: WorkoutUpdate
    ) -> Optional[WorkoutRead]:
        update_data = changes.model_dump(exclude_unset=True)
        with self._lock:
            if workout_id in self._workouts.rows:
                self._check_owner_change(update_data)
            return self._workouts.merge(workout_id, update_data)

    def delete_workout(self, workout_id: int) -> bool:
        with self._lock:
            return self._workouts.remove(workout_id)

    # Measurement methods
    def get_measurements(self, user_id: int) -> list[MeasurementRead]:
        with self._lock:
            return self._measurements.select(
                lambda m: m.user_id == user_id,
                key=lambda m: (m.date, m.id),
                newest_first=True,
            )

    def get_measurement(self, measurement_id: int) -> Optional[MeasurementRead]:
        return self._measurements.rows.get(measurement_id)

    def get_latest_measurement(self, user_id: int) -> Optional[MeasurementRead]:
        measurements = self.get_measurements(user_id)
        return measurements[0] if measurements else None

    def create_measurement(self, measurement: MeasurementCreate) -> MeasurementRead:
        with self._lock:
            self._require_user(measurement.user_id)
            created = self._measurements.insert(measurement.model_dump())
        logger.debug(
            "Created measurement %s for user %s", created.id, created.user_id
        )
        return created

    def update_measurement(
        self, measurement_id: int, changes: MeasurementUpdate
    ) -> Optional[MeasurementRead]:
        update_data = changes.model_dump(exclude_unset=True)
        with self._lock:
            if measurement_id in self._measurements.rows:
                self._check_owner_change(update_data)
            return self._measurements.merge(measurement_id, update_data)

    def delete_measurement(self, measurement_id: int) -> bool:
        with self._lock:
            return self._measurements.remove(measurement_id)

    # Goal methods
    def get_goals(self, user_id: int) -> list[GoalRead]:
        with self._lock:
            return self._goals.select(
                lambda g: g.user_id == user_id,
                key=lambda g: (g.created_at, g.id),
                newest_first=False,
            )

    def get_goal(self, goal_id: int) -> Optional[GoalRead]:
        return self._goals.rows.get(goal_id)

    def create_goal(self, goal: GoalCreate) -> GoalRead:
        with self._lock:
            self._require_user(goal.user_id)
            created = self._goals.insert(goal.model_dump())
        logger.debug("Created goal %s for user %s", created.id, created.user_id)
        return created

    def update_goal(self, goal_id: int, changes: GoalUpdate) -> Optional[GoalRead]:
        update_data = changes.model_dump(exclude_unset=True)
        with self._lock:
            if goal_id in self._goals.rows:
                self._check_owner_change(update_data)
            return self._goals.merge(goal_id, update_data)

    def delete_goal(self, goal_id: int) -> bool:
        with self._lock:
            return self._goals.remove(goal_id)
