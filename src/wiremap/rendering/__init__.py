# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-directed rendering engine: type expressions, value conversions and union discrimination."""

from wiremap.rendering.classifier import Resolution, ResolutionKind, ServiceIndex, ValueShape, classify, is_date
from wiremap.rendering.discrimination import (
    ConstantValueHeuristic,
    Heuristic,
    RequiredPropertiesHeuristic,
    RequiredPropertyHeuristic,
    UnionDiscriminator,
    distinguishing_subset,
)
from wiremap.rendering.errors import (
    InvalidMaxPropertiesError,
    MissingDiscriminatorValueError,
    NoDiscriminatingHeuristicError,
    RenderError,
)
from wiremap.rendering.roles import Direction, Facet, Perspective, Role
from wiremap.rendering.type_renderer import NameScope, TypeRenderer
from wiremap.rendering.union_mapping import UnionMapperBuilder
from wiremap.rendering.value_mapping import RecordMapperBuilder, ValueMapper, mapper_name

__all__ = [
    # Classification
    "ValueShape",
    "ResolutionKind",
    "Resolution",
    "ServiceIndex",
    "classify",
    "is_date",
    # Roles
    "Facet",
    "Direction",
    "Perspective",
    "Role",
    # Types
    "NameScope",
    "TypeRenderer",
    # Discrimination
    "RequiredPropertyHeuristic",
    "ConstantValueHeuristic",
    "RequiredPropertiesHeuristic",
    "Heuristic",
    "UnionDiscriminator",
    "distinguishing_subset",
    # Mapping
    "ValueMapper",
    "RecordMapperBuilder",
    "UnionMapperBuilder",
    "mapper_name",
    # Errors
    "RenderError",
    "NoDiscriminatingHeuristicError",
    "MissingDiscriminatorValueError",
    "InvalidMaxPropertiesError",
]
