from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for every boundary shape.

    Field names are snake_case in Python and camelCase on the wire
    (``password_confirm`` <-> ``passwordConfirm``). Either spelling is accepted
    on input; serialize with ``model_dump(by_alias=True)`` for the wire form.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InputModel(WireModel):
    """Request-scoped input DTO. Frozen so a validated value cannot drift."""
    model_config = ConfigDict(frozen=True)


class ORMBase(WireModel):
    """Response schema populated directly from attribute-bearing records."""
    model_config = ConfigDict(from_attributes=True)
