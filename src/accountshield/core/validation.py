"""Generic validation engine.

A :class:`Schema` pairs a pydantic DTO model (field names, wire aliases and
types) with a rule table: python field name -> ordered rules. The engine
parses raw input field by field, then runs every rule of every field and
gathers all violations instead of stopping at the first one.

Ordering contract:

* errors are grouped by field, in the model's declaration order;
* within a field, a parse error comes first, then single-field rules in
  table order, then pair rules (``EqualsField``) in table order;
* pair rules only run after every field has been parsed and checked on its
  own, and a failure of the referenced field does not suppress them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Mapping, Sequence, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from accountshield.core.errors import InputValidationError, UnsupportedRoleError
from accountshield.core.rules import Rule, Violation

__all__ = [
    "FieldError",
    "Schema",
    "ValidationResult",
    "collect_errors",
    "check",
    "validate",
]

logger = logging.getLogger("accountshield.validation")

M = TypeVar("M", bound=BaseModel)

INVALID_ROLE = "invalid_role"


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
    code: str = "invalid"

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class Schema(Generic[M]):
    name: str
    model: type[M]
    rules: Mapping[str, Sequence[Rule]]
    _adapters: Mapping[str, TypeAdapter] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        unknown = set(self.rules) - set(self.model.model_fields)
        if unknown:
            raise ValueError(f"Schema {self.name!r} has rules for unknown fields: {sorted(unknown)}")
        frozen_rules = MappingProxyType({k: tuple(v) for k, v in self.rules.items()})
        adapters = MappingProxyType(
            {name: TypeAdapter(info.annotation) for name, info in self.model.model_fields.items()}
        )
        object.__setattr__(self, "rules", frozen_rules)
        object.__setattr__(self, "_adapters", adapters)

    def wire_name(self, name: str) -> str:
        info = self.model.model_fields[name]
        return info.alias or name

    def parse_field(self, name: str, value: Any) -> Any:
        return self._adapters[name].validate_python(value)


@dataclass(frozen=True)
class ValidationResult(Generic[M]):
    value: M | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def _as_mapping(raw: Any) -> Mapping[str, Any] | None:
    if isinstance(raw, BaseModel):
        return raw.model_dump()
    if isinstance(raw, Mapping):
        return raw
    return None


def _parse(schema: Schema, raw: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, list[FieldError]]]:
    values: dict[str, Any] = {}
    errors: dict[str, list[FieldError]] = {}
    for name, info in schema.model.model_fields.items():
        wire = schema.wire_name(name)
        if wire in raw:
            candidate = raw[wire]
        elif name in raw:
            candidate = raw[name]
        elif not info.is_required():
            values[name] = info.get_default(call_default_factory=True)
            continue
        else:
            errors.setdefault(name, []).append(FieldError(wire, f"{wire} is missing", "missing"))
            continue
        try:
            values[name] = schema.parse_field(name, candidate)
        except ValidationError as exc:
            first = exc.errors()[0]
            errors.setdefault(name, []).append(FieldError(wire, first["msg"], "parse"))
    return values, errors


def _apply_rules(schema: Schema, values: Mapping[str, Any], errors: dict[str, list[FieldError]]) -> None:
    context = MappingProxyType(values)
    for cross_field in (False, True):
        for name, rules in schema.rules.items():
            if name not in values:
                continue
            for rule in rules:
                if rule.cross_field is not cross_field:
                    continue
                violation: Violation | None = rule.check(values[name], context)
                if violation is not None:
                    errors.setdefault(name, []).append(
                        FieldError(schema.wire_name(name), violation.message, violation.code)
                    )


def _ordered(schema: Schema, errors: Mapping[str, list[FieldError]]) -> list[FieldError]:
    return [e for name in schema.model.model_fields for e in errors.get(name, ())]


def collect_errors(schema: Schema, dto: BaseModel) -> list[FieldError]:
    """Run the rule table against an already parsed DTO."""
    values = {name: getattr(dto, name) for name in schema.model.model_fields}
    errors: dict[str, list[FieldError]] = {}
    _apply_rules(schema, values, errors)
    return _ordered(schema, errors)


def check(schema: Schema[M], raw: Any) -> ValidationResult[M]:
    """Parse and validate ``raw`` without raising.

    ``raw`` may be a mapping keyed by wire (camelCase) or python names, or an
    instance of the schema's model.
    """
    data = _as_mapping(raw)
    if data is None:
        return ValidationResult(errors=(FieldError("body", "Input should be an object", "parse"),))
    values, errors = _parse(schema, data)
    _apply_rules(schema, values, errors)
    ordered = _ordered(schema, errors)
    if ordered:
        return ValidationResult(errors=tuple(ordered))
    return ValidationResult(value=schema.model.model_validate(values))


def validate(schema: Schema[M], raw: Any) -> M:
    """Return the validated DTO or raise with the full list of field errors.

    Raises :class:`UnsupportedRoleError` instead of the generic
    :class:`InputValidationError` when one of the errors is a
    non-assignable role.
    """
    result = check(schema, raw)
    if result.ok:
        return result.value  # type: ignore[return-value]
    logger.debug(
        "validation.rejected",
        extra={
            "schema": schema.name,
            "fields": sorted({e.field for e in result.errors}),
            "error_count": len(result.errors),
        },
    )
    role_errors = [e for e in result.errors if e.code == INVALID_ROLE]
    if role_errors:
        data = _as_mapping(raw) or {}
        raise UnsupportedRoleError(result.errors, role=data.get(role_errors[0].field), schema=schema.name)
    raise InputValidationError(result.errors, schema=schema.name)
