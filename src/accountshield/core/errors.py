"""Project-wide custom exceptions.

This module centralizes the error types raised at the account boundary so
that routers and business logic can catch them without reaching into the
validation or projection internals.

Add new errors here rather than scattering small ``class XError(Exception):``
definitions across the codebase; this keeps the public error surface easy to
audit and map to HTTP responses.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from accountshield.core.validation import FieldError


class AccountShieldError(Exception):
    """Base class for all custom project exceptions.

    Subclass this rather than ``Exception`` directly for new domain errors.
    """


class InputValidationError(AccountShieldError):
    """Raised when client input violates one or more rules of its schema.

    Carries every violation found, in field declaration order. The list is
    never truncated to the first failure and is never empty.
    """
    def __init__(self, errors: Sequence["FieldError"], schema: str | None = None):
        if not errors:
            raise ValueError("InputValidationError requires at least one field error")
        self.errors: tuple["FieldError", ...] = tuple(errors)
        self.schema = schema
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return ", ".join(e.message for e in self.errors)

    @property
    def fields(self) -> list[str]:
        seen: list[str] = []
        for e in self.errors:
            if e.field not in seen:
                seen.append(e.field)
        return seen

    def to_dict(self) -> list[dict[str, Any]]:
        return [e.to_dict() for e in self.errors]


class UnsupportedRoleError(InputValidationError):
    """Raised when a role update names a role that may not be assigned.

    The role may be perfectly representable (e.g. ``moderator``) but only
    ``admin`` and ``user`` are settable through the update surface.
    """
    def __init__(self, errors: Sequence["FieldError"], role: Any = None, schema: str | None = None):
        self.role = getattr(role, "value", role)
        super().__init__(errors, schema=schema)


class ProjectionIntegrityError(AccountShieldError):
    """Raised when a stored record cannot be projected without fabricating data."""


class MissingAuditTimestampError(ProjectionIntegrityError):
    """Raised when a user record lacks ``created_at`` and/or ``updated_at``.

    Persisted records always carry audit timestamps; their absence points to a
    storage bug, so the projector refuses to invent a value.
    """
    def __init__(self, record_id: Any, missing: Sequence[str]):
        self.record_id = None if record_id is None else str(record_id)
        self.missing = tuple(missing)
        super().__init__(
            f"User record {self.record_id or '<unknown>'} is missing audit timestamp(s): "
            + ", ".join(self.missing)
        )


class MissingRecordFieldError(ProjectionIntegrityError):
    """Raised when a user record lacks a field the public view must carry (``role``, ``verified``)."""
    def __init__(self, record_id: Any, missing: Sequence[str]):
        self.record_id = None if record_id is None else str(record_id)
        self.missing = tuple(missing)
        super().__init__(
            f"User record {self.record_id or '<unknown>'} is missing field(s): "
            + ", ".join(self.missing)
        )


class InvalidRecordError(ProjectionIntegrityError):
    """Raised when a stored value cannot be represented in the public view."""


class UnknownSchemaError(AccountShieldError, LookupError):
    """Raised when a schema name is not present in the registry."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No such schema: {name}")


__all__ = [
    "AccountShieldError",
    "InputValidationError",
    "UnsupportedRoleError",
    "ProjectionIntegrityError",
    "MissingAuditTimestampError",
    "MissingRecordFieldError",
    "InvalidRecordError",
    "UnknownSchemaError",
]
