"""Rule primitives used by the schema rule tables.

Every rule is an immutable object exposing ``check(value, context)`` which
returns ``None`` when the value is acceptable or a :class:`Violation`
otherwise. ``context`` is a read-only mapping of every successfully parsed
field of the input (python attribute names), so pair rules such as
:class:`EqualsField` can look at a sibling value.

Rules never raise for bad input, never mutate anything and keep no state;
one instance is shared by every request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Collection, Mapping

from email_validator import EmailNotValidError, validate_email

from accountshield.models.user import ASSIGNABLE_ROLES

__all__ = [
    "Violation",
    "Rule",
    "Required",
    "Length",
    "Range",
    "EmailFormat",
    "EqualsField",
    "Membership",
    "Custom",
    "AssignableRole",
]


@dataclass(frozen=True)
class Violation:
    code: str
    message: str


@dataclass(frozen=True)
class Rule:
    message: str

    code: ClassVar[str] = "rule"
    # pair rules run once every field has been checked on its own
    cross_field: ClassVar[bool] = False

    def check(self, value: Any, context: Mapping[str, Any]) -> Violation | None:  # pragma: no cover - abstract
        raise NotImplementedError

    def _fail(self) -> Violation:
        return Violation(code=self.code, message=self.message)


@dataclass(frozen=True)
class Required(Rule):
    """Fails when the value is shorter than ``min_len`` (empty by default)."""
    min_len: int = 1

    code: ClassVar[str] = "required"

    def check(self, value, context):
        if value is None or len(value) < self.min_len:
            return self._fail()
        return None


@dataclass(frozen=True)
class Length(Rule):
    min: int | None = None
    max: int | None = None

    code: ClassVar[str] = "length"

    def check(self, value, context):
        size = len(value) if value is not None else 0
        if self.min is not None and size < self.min:
            return self._fail()
        if self.max is not None and size > self.max:
            return self._fail()
        return None


@dataclass(frozen=True)
class Range(Rule):
    """Numeric bounds, inclusive. Absent (``None``) values are not checked."""
    min: int | float | None = None
    max: int | float | None = None

    code: ClassVar[str] = "range"

    def check(self, value, context):
        if value is None:
            return None
        if self.min is not None and value < self.min:
            return self._fail()
        if self.max is not None and value > self.max:
            return self._fail()
        return None


@dataclass(frozen=True)
class EmailFormat(Rule):
    code: ClassVar[str] = "email"

    def check(self, value, context):
        if not isinstance(value, str):
            return self._fail()
        try:
            validate_email(value, check_deliverability=False, globally_deliverable=False)
        except EmailNotValidError:
            return self._fail()
        return None


@dataclass(frozen=True)
class EqualsField(Rule):
    """Fails when the value differs from sibling field ``other``.

    If ``other`` could not be parsed there is nothing to compare against and
    the rule is skipped; the parse error is already reported on ``other``.
    """
    other: str = ""

    code: ClassVar[str] = "must_match"
    cross_field: ClassVar[bool] = True

    def check(self, value, context):
        if self.other not in context:
            return None
        if value != context[self.other]:
            return self._fail()
        return None


@dataclass(frozen=True)
class Membership(Rule):
    allowed: Collection[Any] = field(default_factory=frozenset)

    code: ClassVar[str] = "membership"

    def check(self, value, context):
        if value not in self.allowed:
            return self._fail()
        return None


@dataclass(frozen=True)
class Custom(Rule):
    predicate: Callable[[Any], bool] = bool

    code: ClassVar[str] = "custom"

    def check(self, value, context):
        if not self.predicate(value):
            return self._fail()
        return None


@dataclass(frozen=True)
class AssignableRole(Membership):
    """Membership over the roles an update may set; reported as ``invalid_role``."""
    allowed: Collection[Any] = ASSIGNABLE_ROLES

    code: ClassVar[str] = "invalid_role"
