from fastapi import APIRouter, Depends, HTTPException

from fittrack.api.deps import get_storage
from fittrack.schemas.user import UserPublic
from fittrack.storage.base import Storage

router = APIRouter(prefix="/api/user", tags=["users"])


@router.get("/{user_id}", response_model=UserPublic)
def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    # Don't return the password
    return UserPublic.model_validate(user.model_dump(exclude={"password"}))
