import logging
from typing import List, Set

from fastapi import APIRouter, Body, Depends, HTTPException, Path

from dependencies import get_staff_store
from models import UINT32_MAX, Permission, PermissionCheck, Role, StaffUser
from permissions import has_permission
from responses import result_response
from store import StaffStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Roles & Permissions"])


def _get_or_404(store: StaffStore, user_id: int) -> StaffUser:
    user = store.get(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User with ID {user_id} not found.")
    return user


@router.post("", status_code=201, response_model=str)
def create_user(user: StaffUser, store: StaffStore = Depends(get_staff_store)):
    """Create a user; permissions are assigned from the role"""
    return result_response(store.insert(user), logger)


@router.put("/{user_id}/role", response_model=str)
def update_user_role(
    new_role: Role = Body(),
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: StaffStore = Depends(get_staff_store),
):
    """Change the role and reset permissions to the role's defaults"""
    return result_response(store.update_role(user_id, new_role), logger)


@router.put("/{user_id}/permissions", response_model=str)
def assign_permissions(
    permissions: Set[Permission] = Body(),
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: StaffStore = Depends(get_staff_store),
):
    """Add permissions on top of the ones the user already has"""
    return result_response(store.grant_permissions(user_id, permissions), logger)


@router.get("/{user_id}", response_model=StaffUser)
def get_user(
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: StaffStore = Depends(get_staff_store),
):
    return _get_or_404(store, user_id)


@router.get("", response_model=List[StaffUser])
def list_users(store: StaffStore = Depends(get_staff_store)):
    return store.list()


@router.get("/{user_id}/permissions/{permission}", response_model=PermissionCheck)
def check_permission(
    permission: Permission,
    user_id: int = Path(ge=0, le=UINT32_MAX),
    store: StaffStore = Depends(get_staff_store),
):
    user = _get_or_404(store, user_id)
    return PermissionCheck(
        user_id=user_id,
        permission=permission,
        granted=has_permission(user, permission),
    )
