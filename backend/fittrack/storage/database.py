import logging
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from fittrack.models.goal import Goal
from fittrack.models.measurement import Measurement
from fittrack.models.user import User
from fittrack.models.workout import Workout
from fittrack.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from fittrack.schemas.measurement import (
    MeasurementCreate,
    MeasurementRead,
    MeasurementUpdate,
)
from fittrack.schemas.user import UserCreate, UserRead
from fittrack.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from fittrack.storage.errors import IntegrityViolation, StoreUnavailable

logger = logging.getLogger(__name__)


def _column_values(payload: BaseModel, exclude_unset: bool = False) -> dict:
    data = payload.model_dump(exclude_unset=exclude_unset)
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


class DatabaseStorage:
    """Durable storage on a relational database through SQLAlchemy.

    Each call opens its own session and issues a single-row statement;
    nothing spans calls, so there is no cross-entity atomicity.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except IntegrityError as exc:
            db.rollback()
            raise IntegrityViolation(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error("Storage operation failed: %s", exc)
            raise StoreUnavailable(str(exc)) from exc
        finally:
            db.close()

    def _get(self, model, read_model, record_id: int):
        with self._session() as db:
            row = db.query(model).filter(model.id == record_id).first()
            return read_model.model_validate(row) if row is not None else None

    def _create(self, model, read_model, payload: BaseModel):
        # A rejected insert leaves SQLite AUTOINCREMENT untouched, but a
        # Postgres sequence has already advanced, so the next id skips one.
        with self._session() as db:
            row = model(**_column_values(payload))
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.debug("Created %s %s", model.__tablename__, row.id)
            return read_model.model_validate(row)

    def _update(self, model, read_model, record_id: int, changes: BaseModel):
        update_data = _column_values(changes, exclude_unset=True)
        with self._session() as db:
            row = db.query(model).filter(model.id == record_id).first()
            if not row:
                return None
            if update_data:
                for key, value in update_data.items():
                    setattr(row, key, value)
                db.commit()
                db.refresh(row)
            return read_model.model_validate(row)

    def _delete(self, model, record_id: int) -> bool:
        with self._session() as db:
            deleted = db.query(model).filter(model.id == record_id).delete()
            db.commit()
            if deleted:
                logger.debug("Deleted %s %s", model.__tablename__, record_id)
            return deleted > 0

    # User methods
    def get_user(self, user_id: int) -> Optional[UserRead]:
        return self._get(User, UserRead, user_id)

    def get_user_by_username(self, username: str) -> Optional[UserRead]:
        with self._session() as db:
            row = db.query(User).filter(User.username == username).first()
            return UserRead.model_validate(row) if row is not None else None

    def create_user(self, user: UserCreate) -> UserRead:
        return self._create(User, UserRead, user)

    def has_users(self) -> bool:
        with self._session() as db:
            return db.query(User.id).first() is not None

    # Workout methods
    def get_workouts(self, user_id: int) -> list[WorkoutRead]:
        with self._session() as db:
            rows = (
                db.query(Workout)
                .filter(Workout.user_id == user_id)
                .order_by(Workout.date.desc(), Workout.id.desc())
                .all()
            )
            return [WorkoutRead.model_validate(r) for r in rows]

    def get_workout(self, workout_id: int) -> Optional[WorkoutRead]:
        return self._get(Workout, WorkoutRead, workout_id)

    def create_workout(self, workout: WorkoutCreate) -> WorkoutRead:
        return self._create(Workout, WorkoutRead, workout)

    def update_workout(
        self, workout_id: int, changes: WorkoutUpdate
    ) -> Optional[WorkoutRead]:
        return self._update(Workout, WorkoutRead, workout_id, changes)

    def delete_workout(self, workout_id: int) -> bool:
        return self._delete(Workout, workout_id)

    # Measurement methods
    def get_measurements(self, user_id: int) -> list[MeasurementRead]:
        with self._session() as db:
            rows = (
                db.query(Measurement)
                .filter(Measurement.user_id == user_id)
                .order_by(Measurement.date.desc(), Measurement.id.desc())
                .all()
            )
            return [MeasurementRead.model_validate(r) for r in rows]

    def get_measurement(self, measurement_id: int) -> Optional[MeasurementRead]:
        return self._get(Measurement, MeasurementRead, measurement_id)

    def get_latest_measurement(self, user_id: int) -> Optional[MeasurementRead]:
        with self._session() as db:
            row = (
                db.query(Measurement)
                .filter(Measurement.user_id == user_id)
                .order_by(Measurement.date.desc(), Measurement.id.desc())
                .first()
            )
            return MeasurementRead.model_validate(row) if row is not None else None

    def create_measurement(self, measurement: MeasurementCreate) -> MeasurementRead:
        return self._create(Measurement, MeasurementRead, measurement)

    def update_measurement(
        self, measurement_id: int, changes: MeasurementUpdate
    ) -> Optional[MeasurementRead]:
        return self._update(Measurement, MeasurementRead, measurement_id, changes)

    def delete_measurement(self, measurement_id: int) -> bool:
        return self._delete(Measurement, measurement_id)

    # Goal methods
    def get_goals(self, user_id: int) -> list[GoalRead]:
        with self._session() as db:
            rows = (
                db.query(Goal)
                .filter(Goal.user_id == user_id)
                .order_by(Goal.created_at.asc(), Goal.id.asc())
                .all()
            )
            return [GoalRead.model_validate(r) for r in rows]

    def get_goal(self, goal_id: int) -> Optional[GoalRead]:
        return self._get(Goal, GoalRead, goal_id)

    def create_goal(self, goal: GoalCreate) -> GoalRead:
        return self._create(Goal, GoalRead, goal)

    def update_goal(self, goal_id: int, changes: GoalUpdate) -> Optional[GoalRead]:
        return self._update(Goal, GoalRead, goal_id, changes)

    def delete_goal(self, goal_id: int) -> bool:
        return self._delete(Goal, goal_id)
