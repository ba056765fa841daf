# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shape classification and name resolution for IR values.

Complex references are resolved by name against the service's three
namespaces (types, enums, unions). A name that resolves nowhere is
*unresolved*: callers render a permissive fallback instead of failing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wiremap.model.entities import EnumDef, Service, TypeDef, UnionDef
from wiremap.model.types import DATE_PRIMITIVES, ComplexValue, PrimitiveValue

# ###############
# Public Interface
# ###############


class ValueShape(Enum):
    """Shape category of a value."""

    PRIMITIVE = "primitive"
    PRIMITIVE_ARRAY = "primitive-array"
    ENUM_REF = "enum-ref"
    COMPLEX_REF = "complex-ref"
    COMPLEX_ARRAY = "complex-array"
    MAP_VALUE = "map-value"
    UNRESOLVED = "unresolved"


class ResolutionKind(Enum):
    """What a value refers to."""

    PRIMITIVE = "primitive"
    TYPE = "type"
    ENUM = "enum"
    UNION = "union"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Resolution:
    """The declaration a value refers to, if any."""

    kind: ResolutionKind
    target: TypeDef | EnumDef | UnionDef | None = None

    @property
    def is_mapped(self) -> bool:
        """Return True if values of this kind are converted by a generated mapper."""
        return self.kind in (ResolutionKind.TYPE, ResolutionKind.UNION)


class ServiceIndex:
    """Name lookup over the declarations of a service."""

    def __init__(self, service: Service) -> None:
        self.service = service
        self._types = {t.name: t for t in service.types}
        self._enums = {e.name: e for e in service.enums}
        self._unions = {u.name: u for u in service.unions}

    def get_type(self, name: str) -> TypeDef | None:
        return self._types.get(name)

    def get_enum(self, name: str) -> EnumDef | None:
        return self._enums.get(name)

    def get_union(self, name: str) -> UnionDef | None:
        return self._unions.get(name)

    def resolve(self, value: PrimitiveValue | ComplexValue) -> Resolution:
        """Resolve *value* to the declaration it refers to."""
        if isinstance(value, PrimitiveValue):
            return Resolution(ResolutionKind.PRIMITIVE)
        if (type_def := self._types.get(value.type_name)) is not None:
            return Resolution(ResolutionKind.TYPE, type_def)
        if (enum_def := self._enums.get(value.type_name)) is not None:
            return Resolution(ResolutionKind.ENUM, enum_def)
        if (union := self._unions.get(value.type_name)) is not None:
            return Resolution(ResolutionKind.UNION, union)
        return Resolution(ResolutionKind.UNRESOLVED)


def is_date(value: PrimitiveValue | ComplexValue) -> bool:
    """Return True if *value* is a date or date-time primitive."""
    return isinstance(value, PrimitiveValue) and value.type_name in DATE_PRIMITIVES


def classify(value: PrimitiveValue | ComplexValue, index: ServiceIndex) -> ValueShape:
    """Determine the shape category of *value*.

    Enum references classify as :attr:`ValueShape.ENUM_REF` whether or not they
    are arrays, since enums share one representation on both sides of the wire.
    A non-array reference to a type consisting only of a map clause classifies
    as :attr:`ValueShape.MAP_VALUE`.
    """
    resolution = index.resolve(value)
    if resolution.kind is ResolutionKind.PRIMITIVE:
        return ValueShape.PRIMITIVE_ARRAY if value.is_array else ValueShape.PRIMITIVE
    if resolution.kind is ResolutionKind.UNRESOLVED:
        return ValueShape.UNRESOLVED
    if resolution.kind is ResolutionKind.ENUM:
        return ValueShape.ENUM_REF
    if value.is_array:
        return ValueShape.COMPLEX_ARRAY
    target = resolution.target
    if isinstance(target, TypeDef) and target.map_properties is not None and not target.properties:
        return ValueShape.MAP_VALUE
    return ValueShape.COMPLEX_REF
