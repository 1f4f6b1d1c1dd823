from fastapi import APIRouter, Depends, HTTPException, Response

from fittrack.api.deps import get_storage
from fittrack.schemas.workout import WorkoutCreate, WorkoutRead, WorkoutUpdate
from fittrack.storage.base import Storage

router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.get("/{user_id}", response_model=list[WorkoutRead])
def list_workouts(user_id: int, storage: Storage = Depends(get_storage)):
    """Workouts for a user, most recent first."""
    return storage.get_workouts(user_id)


@router.get("/{user_id}/{workout_id}", response_model=WorkoutRead)
def get_workout(user_id: int, workout_id: int, storage: Storage = Depends(get_storage)):
    workout = storage.get_workout(workout_id)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.post("", response_model=WorkoutRead, status_code=201)
def create_workout(payload: WorkoutCreate, storage: Storage = Depends(get_storage)):
    return storage.create_workout(payload)


@router.put("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    storage: Storage = Depends(get_storage),
):
    workout = storage.update_workout(workout_id, payload)
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return workout


@router.delete("/{workout_id}", status_code=204)
def delete_workout(workout_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_workout(workout_id):
        raise HTTPException(status_code=404, detail="Workout not found")
    return Response(status_code=204)
