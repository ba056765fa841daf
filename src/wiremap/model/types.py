# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Value descriptions for the wiremap intermediate representation (IR).

A value is either a primitive (optionally narrowed to a constant literal) or a
reference to a named type, enum, or union. Every value carries three
independent modifiers: ``is_array``, ``is_optional`` and ``is_nullable``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field
from pydantic.alias_generators import to_camel

# ###############
# Public Interface
# ###############


class IRModel(BaseModel):
    """Base model for IR nodes. Documents use camelCase keys; Python uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class Primitive(Enum):
    """Primitive kinds supported by the IR."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_TIME = "date-time"
    BINARY = "binary"
    NULL = "null"
    UNTYPED = "untyped"


NUMERIC_PRIMITIVES = frozenset(
    {Primitive.NUMBER, Primitive.INTEGER, Primitive.LONG, Primitive.FLOAT, Primitive.DOUBLE}
)
DATE_PRIMITIVES = frozenset({Primitive.DATE, Primitive.DATE_TIME})

# A literal narrowing a primitive value. ``None`` is the literal ``null``.
ConstantLiteral = bool | int | float | str | None


class Constant(IRModel):
    """A literal value that narrows a primitive to exactly that value."""

    value: ConstantLiteral


class PrimitiveValue(IRModel):
    """A value of a built-in primitive kind."""

    kind: Literal["PrimitiveValue"] = "PrimitiveValue"
    type_name: Primitive
    is_array: bool = False
    is_optional: bool = False
    is_nullable: bool = False
    constant: Constant | None = None


class ComplexValue(IRModel):
    """A value referencing a declared type, enum, or union by name."""

    kind: Literal["ComplexValue"] = "ComplexValue"
    type_name: str
    is_array: bool = False
    is_optional: bool = False
    is_nullable: bool = False


# Any value description. The `kind` discriminator selects the concrete model.
MemberValue = Annotated[PrimitiveValue | ComplexValue, _Field(discriminator="kind")]


class Property(IRModel):
    """A named member of a type."""

    name: str
    value: MemberValue
    description: str | None = None
    deprecated: bool = False


class MapProperties(IRModel):
    """The map clause of a type: arbitrary keys mapping to values of one shape.

    ``required_keys`` lists keys that are guaranteed to be present even though
    the type is otherwise an open map.
    """

    key: MemberValue
    value: MemberValue
    required_keys: list[str] = _Field(default_factory=list)


class ObjectMaxPropertiesRule(IRModel):
    """Limits the number of properties an object may carry."""

    id: Literal["ObjectMaxProperties"] = "ObjectMaxProperties"
    max: int


class ObjectMinPropertiesRule(IRModel):
    """Requires an object to carry at least a number of properties."""

    id: Literal["ObjectMinProperties"] = "ObjectMinProperties"
    min: int


ObjectRule = Annotated[ObjectMaxPropertiesRule | ObjectMinPropertiesRule, _Field(discriminator="id")]


def is_required(value: PrimitiveValue | ComplexValue) -> bool:
    """Return True if *value* must always be present."""
    return not value.is_optional


def as_required(value: PrimitiveValue | ComplexValue) -> PrimitiveValue | ComplexValue:
    """Return a copy of *value* with the optional modifier cleared."""
    if not value.is_optional:
        return value
    return value.model_copy(update={"is_optional": False})


def as_optional(value: PrimitiveValue | ComplexValue) -> PrimitiveValue | ComplexValue:
    """Return a copy of *value* with the optional modifier set."""
    if value.is_optional:
        return value
    return value.model_copy(update={"is_optional": True})


# Resolve forward references for models that use MemberValue.
Property.model_rebuild()
MapProperties.model_rebuild()
