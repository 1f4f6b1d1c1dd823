from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from fittrack.api.deps import get_storage
from fittrack.core.goal_metrics import goal_summary
from fittrack.schemas.goal import GoalCreate, GoalProgressRead, GoalRead, GoalUpdate
from fittrack.storage.base import Storage

router = APIRouter(prefix="/api/goals", tags=["goals"])


@router.get("/{user_id}", response_model=list[GoalRead])
def list_goals(
    user_id: int,
    completed: Optional[bool] = Query(None),
    storage: Storage = Depends(get_storage),
):
    """
    Goals for a user, oldest first.

    The goals page tabs call this with ?completed=false (active) or
    ?completed=true; omit it to get everything.
    """
    goals = storage.get_goals(user_id)
    if completed is not None:
        goals = [g for g in goals if g.completed == completed]
    return goals


@router.get("/{user_id}/progress", response_model=list[GoalProgressRead])
def list_goal_progress(user_id: int, storage: Storage = Depends(get_storage)):
    """Goals with the derived progress percentage and deadline countdown."""
    return [goal_summary(g) for g in storage.get_goals(user_id)]


@router.get("/{user_id}/{goal_id}", response_model=GoalRead)
def get_goal(user_id: int, goal_id: int, storage: Storage = Depends(get_storage)):
    goal = storage.get_goal(goal_id)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.post("", response_model=GoalRead, status_code=201)
def create_goal(payload: GoalCreate, storage: Storage = Depends(get_storage)):
    return storage.create_goal(payload)


@router.put("/{goal_id}", response_model=GoalRead)
def update_goal(
    goal_id: int,
    payload: GoalUpdate,
    storage: Storage = Depends(get_storage),
):
    goal = storage.update_goal(goal_id, payload)
    if not goal:
        raise HTTPException(status_code=404, detail="Goal not found")
    return goal


@router.delete("/{goal_id}", status_code=204)
def delete_goal(goal_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_goal(goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return Response(status_code=204)
