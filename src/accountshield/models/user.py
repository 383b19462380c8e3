import enum
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


class UserRole(str, enum.Enum):
    """Every role a stored user can hold. MODERATOR is reserved for internal use."""
    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"

    @classmethod
    def _missing_(cls, value):
        # clients send "Admin" as often as "admin"
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


# Roles that may be set through the role update surface.
ASSIGNABLE_ROLES: frozenset[UserRole] = frozenset({UserRole.ADMIN, UserRole.USER})


@runtime_checkable
class UserRecordLike(Protocol):
    """Attributes the projector reads from a persisted user (ORM row, dataclass, ...)."""
    id: uuid.UUID | str
    name: str
    email: str
    role: UserRole | str
    verified: bool
    password: str
    created_at: datetime | None
    updated_at: datetime | None


@dataclass(frozen=True)
class UserRecord:
    """User record as handed over by the persistence layer."""

    id: uuid.UUID | str
    name: str
    email: str
    password: str
    role: UserRole = UserRole.USER
    verified: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
