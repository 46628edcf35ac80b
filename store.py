"""In-memory record stores.

Every store keeps its records in a plain dict guarded by a single
``threading.Lock``. Each public operation takes the lock once, runs to
completion and releases it, so operations are applied one at a time in
lock-acquisition order. Records handed back to callers are deep copies.

Mutating operations never raise for missing or duplicate keys; they return a
``StoreResult`` that the HTTP layer maps to a response status.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

from models import (
    Appointment,
    AppointmentRequest,
    AppointmentUpdate,
    Permission,
    Role,
    StaffUser,
    User,
    UserUpdate,
)
from permissions import permissions_for_role

V = TypeVar("V", bound=BaseModel)


class Outcome(str, Enum):
    CREATED = "created"
    OK = "ok"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StoreResult:
    outcome: Outcome
    message: str

    @property
    def succeeded(self) -> bool:
        return self.outcome in (Outcome.CREATED, Outcome.OK)


class RecordStore(Generic[V]):
    """Lock-guarded mapping from a uint32 key to a record"""

    entity = "Record"

    def __init__(self):
        self._records: Dict[int, V] = {}
        self._lock = threading.Lock()

    def get(self, key: int) -> Optional[V]:
        with self._lock:
            record = self._records.get(key)
            return record.model_copy(deep=True) if record is not None else None

    def list(self) -> List[V]:
        with self._lock:
            return [record.model_copy(deep=True) for record in self._records.values()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _not_found(self, key: int) -> StoreResult:
        return StoreResult(Outcome.NOT_FOUND, f"{self.entity} with ID {key} not found.")

    def _insert_new(self, record: V, message: str) -> StoreResult:
        with self._lock:
            if record.id in self._records:
                return StoreResult(
                    Outcome.CONFLICT,
                    f"{self.entity} with ID {record.id} already exists.",
                )
            self._records[record.id] = record.model_copy(deep=True)
        return StoreResult(Outcome.CREATED, message)

    def _mutate(self, key: int, apply: Callable[[V], str]) -> StoreResult:
        """Run ``apply`` on the stored record under the lock; it returns the success message"""
        with self._lock:
            record = self._records.get(key)
            if record is None:
                return self._not_found(key)
            return StoreResult(Outcome.OK, apply(record))

    def _patch(self, key: int, patch: BaseModel) -> StoreResult:
        # None means "leave unchanged", whether omitted or sent as null
        changes = patch.model_dump(exclude_none=True)

        def apply(record: V) -> str:
            for field, value in changes.items():
                setattr(record, field, value)
            return f"{self.entity} with ID {key} updated successfully."

        return self._mutate(key, apply)


class UserStore(RecordStore[User]):
    entity = "User"

    def insert(self, user: User) -> StoreResult:
        return self._insert_new(user, "User created successfully!")

    def update(self, key: int, patch: UserUpdate) -> StoreResult:
        return self._patch(key, patch)


class StaffStore(RecordStore[StaffUser]):
    """Users whose permissions are derived from their role"""

    entity = "User"

    def insert(self, user: StaffUser) -> StoreResult:
        # Supplied permissions are ignored; the role decides
        derived = user.model_copy(update={"permissions": set(permissions_for_role(user.role))})
        return self._insert_new(derived, f"User '{user.username}' created successfully!")

    def update_role(self, key: int, role: Role) -> StoreResult:
        """Replace the role and reset permissions to exactly the role's set.

        Permissions granted earlier are dropped: after a role change the role
        is the only source of truth.
        """

        def apply(record: StaffUser) -> str:
            record.role = role
            record.permissions = set(permissions_for_role(role))
            return f"User {key} role updated to {role.value}"

        return self._mutate(key, apply)

    def grant_permissions(self, key: int, permissions: Iterable[Permission]) -> StoreResult:
        granted = set(permissions)

        def apply(record: StaffUser) -> str:
            record.permissions |= granted
            return f"Permissions assigned to user {key}."

        return self._mutate(key, apply)


class AppointmentStore(RecordStore[Appointment]):
    """Appointments keyed by a server-assigned, never reused id.

    Lock order is always the record lock first, then the counter lock.
    """

    entity = "Appointment"

    def __init__(self):
        super().__init__()
        self._next_id = 0
        self._counter_lock = threading.Lock()

    def insert(self, request: AppointmentRequest) -> StoreResult:
        with self._lock:
            with self._counter_lock:
                key = self._next_id
                self._next_id += 1
            self._records[key] = Appointment(id=key, **request.model_dump())
        return StoreResult(Outcome.CREATED, f"Appointment created successfully with ID {key}.")

    def update(self, key: int, patch: AppointmentUpdate) -> StoreResult:
        return self._patch(key, patch)

    def remove(self, key: int) -> StoreResult:
        with self._lock:
            if key not in self._records:
                return self._not_found(key)
            del self._records[key]
        return StoreResult(Outcome.OK, f"Appointment with ID {key} deleted successfully.")
