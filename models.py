from enum import Enum
from typing import Annotated, Optional, Set

from pydantic import BaseModel, Field, field_serializer

UINT32_MAX = 2**32 - 1

RecordId = Annotated[int, Field(ge=0, le=UINT32_MAX)]


class Permission(str, Enum):
    VIEW_PATIENT = "ViewPatient"
    ADD_PATIENT = "AddPatient"
    EDIT_PATIENT = "EditPatient"
    DELETE_PATIENT = "DeletePatient"
    VIEW_DOCTOR = "ViewDoctor"
    ADD_DOCTOR = "AddDoctor"


class Role(str, Enum):
    ADMIN = "Admin"
    DOCTOR = "Doctor"
    NURSE = "Nurse"


def _ordered(permissions):
    """Declaration order, so responses are stable"""
    return [p.value for p in Permission if p in permissions]


class User(BaseModel):
    id: RecordId
    username: str
    email: str
    phone_no: str
    password: str


class UserUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    phone_no: Optional[str] = None
    password: Optional[str] = None


class StaffUser(BaseModel):
    id: RecordId
    username: str
    role: Role
    permissions: Set[Permission] = Field(default_factory=set)

    def has_permission(self, permission: Permission) -> bool:
        """Check if the user currently holds a permission"""
        return permission in self.permissions

    @field_serializer("permissions")
    def serialize_permissions(self, permissions: Set[Permission]):
        return _ordered(permissions)


class PermissionCheck(BaseModel):
    user_id: int
    permission: Permission
    granted: bool


class AppointmentRequest(BaseModel):
    name: str
    email: str
    phone: str
    date: str
    time: str
    reason: str


class Appointment(BaseModel):
    id: RecordId
    name: str
    email: str
    phone: str
    date: str
    time: str
    reason: str


class AppointmentUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    reason: Optional[str] = None
