"""User projection.

Turns persisted user records into :class:`FilterUser`, the only user shape
allowed to cross the service boundary. The password secret is never copied;
audit timestamps are never invented.
"""
from __future__ import annotations

import logging
import enum
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from accountshield.core.errors import (
    InvalidRecordError,
    MissingAuditTimestampError,
    MissingRecordFieldError,
)
from accountshield.models.user import UserRecordLike
from accountshield.schemas.user import FilterUser

__all__ = [
    "project",
    "project_all",
]

logger = logging.getLogger("accountshield.projection")

_AUDIT_FIELDS = ("created_at", "updated_at")
_REQUIRED_FIELDS = ("role", "verified")


def _read(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _role_str(role: Any) -> str:
    if isinstance(role, enum.Enum):
        role = role.value
    return str(role).lower()


def project(record: UserRecordLike | Mapping[str, Any]) -> FilterUser:
    """Project a single record.

    Absent audit timestamps, role or verified flag are integrity errors; so is
    a stored value the public view cannot hold (e.g. ``verified="maybe"``).
    """
    record_id = _read(record, "id")
    missing = [name for name in _AUDIT_FIELDS if _read(record, name) is None]
    if missing:
        logger.error(
            "projection.missing_audit_timestamp",
            extra={"record_id": str(record_id), "missing": missing},
        )
        raise MissingAuditTimestampError(record_id, missing)
    missing = [name for name in _REQUIRED_FIELDS if _read(record, name) is None]
    if missing:
        logger.error(
            "projection.missing_field",
            extra={"record_id": str(record_id), "missing": missing},
        )
        raise MissingRecordFieldError(record_id, missing)
    try:
        return FilterUser(
            id=str(record_id),
            name=_read(record, "name"),
            email=_read(record, "email"),
            role=_role_str(_read(record, "role")),
            verified=_read(record, "verified"),
            created_at=_read(record, "created_at"),
            updated_at=_read(record, "updated_at"),
        )
    except ValidationError as exc:
        logger.error(
            "projection.invalid_record",
            extra={"record_id": str(record_id), "fields": [str(e["loc"][0]) for e in exc.errors()]},
        )
        raise InvalidRecordError(f"User record {record_id} cannot be projected: {exc}") from exc


def project_all(records: Iterable[UserRecordLike | Mapping[str, Any]]) -> list[FilterUser]:
    """Project records 1:1 in input order. Nothing is returned if any record fails."""
    return [project(r) for r in records]
