import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from dependencies import get_user_store
from models import UINT32_MAX, User, UserUpdate
from responses import result_response
from store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", status_code=201, response_model=str)
def create_user(user: User, store: UserStore = Depends(get_user_store)):
    """Create a user with a caller-chosen ID"""
    return result_response(store.insert(user), logger)


@router.put("/{user_id}", response_model=str)
def update_user(
    update_data: UserUpdate,
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: UserStore = Depends(get_user_store),
):
    """Update the fields present in the body; the rest are left as they are"""
    return result_response(store.update(user_id, update_data), logger)


@router.get("", response_model=List[User])
def list_users(store: UserStore = Depends(get_user_store)):
    return store.list()


@router.get("/{user_id}", response_model=User)
def get_user(
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: UserStore = Depends(get_user_store),
):
    user = store.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found.")
    return user
