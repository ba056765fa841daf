# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declarations of the wiremap IR: types, enums, unions, interfaces and the service."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field as _Field

from wiremap.model.types import (
    ComplexValue,
    IRModel,
    MapProperties,
    MemberValue,
    ObjectMaxPropertiesRule,
    ObjectMinPropertiesRule,
    ObjectRule,
    Property,
)

# ###############
# Public Interface
# ###############


class TypeDef(IRModel):
    """A named record with declared properties and an optional map clause."""

    name: str
    properties: list[Property] = _Field(default_factory=list)
    map_properties: MapProperties | None = None
    rules: list[ObjectRule] = _Field(default_factory=list)
    description: str | None = None
    deprecated: bool = False

    @property
    def max_properties(self) -> int | None:
        """Return the maximum property count, if the type declares one."""
        for rule in self.rules:
            if isinstance(rule, ObjectMaxPropertiesRule):
                return rule.max
        return None

    @property
    def min_properties(self) -> int | None:
        for rule in self.rules:
            if isinstance(rule, ObjectMinPropertiesRule):
                return rule.min
        return None


class EnumMember(IRModel):
    """A single string member of an enum."""

    content: str
    description: str | None = None


class EnumDef(IRModel):
    """A named set of string values."""

    name: str
    members: list[EnumMember] = _Field(default_factory=list)
    description: str | None = None
    deprecated: bool = False


class SimpleUnion(IRModel):
    """A union without a discriminator; members may be primitives or references."""

    kind: Literal["SimpleUnion"] = "SimpleUnion"
    name: str
    members: list[MemberValue] = _Field(default_factory=list)
    description: str | None = None
    deprecated: bool = False


class DiscriminatedUnion(IRModel):
    """A union of records distinguished by a constant-valued discriminator property."""

    kind: Literal["DiscriminatedUnion"] = "DiscriminatedUnion"
    name: str
    discriminator: str
    members: list[ComplexValue] = _Field(default_factory=list)
    description: str | None = None
    deprecated: bool = False


UnionDef = Annotated[SimpleUnion | DiscriminatedUnion, _Field(discriminator="kind")]


class Parameter(IRModel):
    """A method parameter."""

    name: str
    value: MemberValue
    description: str | None = None
    deprecated: bool = False


class Method(IRModel):
    """A service method with its parameters and optional return value."""

    name: str
    parameters: list[Parameter] = _Field(default_factory=list)
    returns: MemberValue | None = None
    description: str | None = None
    deprecated: bool = False


class HttpParameter(IRModel):
    """Binding of a method parameter to a location in an HTTP request."""

    name: str
    location: Literal["path", "query", "header", "body", "formData"]
    array_format: Literal["csv", "ssv", "tsv", "pipes", "multi"] | None = None


class HttpMethod(IRModel):
    """Binding of a method to an HTTP verb on a route."""

    name: str
    verb: str
    success_code: int = 200
    parameters: list[HttpParameter] = _Field(default_factory=list)


class HttpRoute(IRModel):
    """An HTTP path pattern (``/widgets/{id}``) and the methods bound to it."""

    pattern: str
    methods: list[HttpMethod] = _Field(default_factory=list)


class Interface(IRModel):
    """A group of methods and their HTTP bindings."""

    name: str
    methods: list[Method] = _Field(default_factory=list)
    http: list[HttpRoute] = _Field(default_factory=list)
    description: str | None = None
    deprecated: bool = False


class Service(IRModel):
    """Root of the IR document."""

    title: str
    major_version: int = 1
    interfaces: list[Interface] = _Field(default_factory=list)
    types: list[TypeDef] = _Field(default_factory=list)
    enums: list[EnumDef] = _Field(default_factory=list)
    unions: list[UnionDef] = _Field(default_factory=list)


# Resolve forward references for models that use MemberValue.
Parameter.model_rebuild()
Method.model_rebuild()
SimpleUnion.model_rebuild()
