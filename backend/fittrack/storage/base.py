"""Capability interface shared by every storage backend.

Implementations satisfy `Storage` structurally; they do not inherit from it.
Lookups signal "not found" with None (reads, updates) or False (deletes)
and never raise for a missing id.
"""
from typing import Optional, Protocol, runtime_checkable

from fittrack.schemas.goal import GoalCreate, GoalRead, GoalUpdate
from fittrack.schemas.measurement import (
    MeasurementCreate,
    MeasurementRead,
    MeasurementUpdate,
)
from fittrack.schemas.user import UserCreate, UserRead
from fittrack.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate


@runtime_checkable
class Storage(Protocol):
    # Users
    def get_user(self, user_id: int) -> Optional[UserRead]: ...
    def get_user_by_username(self, username: str) -> Optional[UserRead]: ...
    def create_user(self, user: UserCreate) -> UserRead: ...
    def has_users(self) -> bool: ...

    # Workouts, most recent first
    def get_workouts(self, user_id: int) -> list[WorkoutRead]: ...
    def get_workout(self, workout_id: int) -> Optional[WorkoutRead]: ...
    def create_workout(self, workout: WorkoutCreate) -> WorkoutRead: ...
    def update_workout(
        self, workout_id: int, changes: WorkoutUpdate
    ) -> Optional[WorkoutRead]: ...
    def delete_workout(self, workout_id: int) -> bool: ...

    # Measurements, most recent first
    def get_measurements(self, user_id: int) -> list[MeasurementRead]: ...
    def get_measurement(self, measurement_id: int) -> Optional[MeasurementRead]: ...
    def get_latest_measurement(self, user_id: int) -> Optional[MeasurementRead]: ...
    def create_measurement(self, measurement: MeasurementCreate) -> MeasurementRead: ...
    def update_measurement(
        self, measurement_id: int, changes: MeasurementUpdate
    ) -> Optional[MeasurementRead]: ...
    def delete_measurement(self, measurement_id: int) -> bool: ...

    # Goals, oldest first
    def get_goals(self, user_id: int) -> list[GoalRead]: ...
    def get_goal(self, goal_id: int) -> Optional[GoalRead]: ...
    def create_goal(self, goal: GoalCreate) -> GoalRead: ...
    def update_goal(self, goal_id: int, changes: GoalUpdate) -> Optional[GoalRead]: ...
    def delete_goal(self, goal_id: int) -> bool: ...
