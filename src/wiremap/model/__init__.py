# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Intermediate representation (IR) consumed by the wiremap generators."""

from wiremap.model.entities import (
    DiscriminatedUnion,
    EnumDef,
    EnumMember,
    HttpMethod,
    HttpParameter,
    HttpRoute,
    Interface,
    Method,
    Parameter,
    Service,
    SimpleUnion,
    TypeDef,
    UnionDef,
)
from wiremap.model.types import (
    ComplexValue,
    Constant,
    ConstantLiteral,
    MapProperties,
    MemberValue,
    ObjectMaxPropertiesRule,
    ObjectMinPropertiesRule,
    Primitive,
    PrimitiveValue,
    Property,
    as_optional,
    as_required,
    is_required,
)

__all__ = [
    # Values
    "Primitive",
    "Constant",
    "ConstantLiteral",
    "PrimitiveValue",
    "ComplexValue",
    "MemberValue",
    "Property",
    "MapProperties",
    "ObjectMaxPropertiesRule",
    "ObjectMinPropertiesRule",
    "is_required",
    "as_required",
    "as_optional",
    # Declarations
    "TypeDef",
    "EnumMember",
    "EnumDef",
    "SimpleUnion",
    "DiscriminatedUnion",
    "UnionDef",
    "Parameter",
    "Method",
    "HttpParameter",
    "HttpMethod",
    "HttpRoute",
    "Interface",
    "Service",
]
