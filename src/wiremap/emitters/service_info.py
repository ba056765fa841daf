# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reachability of types and unions from a service's method inputs and outputs."""

from __future__ import annotations

from wiremap.model.entities import DiscriminatedUnion, Service, SimpleUnion, TypeDef, UnionDef
from wiremap.model.types import ComplexValue, PrimitiveValue
from wiremap.rendering.classifier import ServiceIndex

# ###############
# Public Interface
# ###############


class ServiceInfo:
    """Partitions the declared types and unions of a service by how they are used.

    Input types are reachable from method parameters and output types from
    method return values. A type may be both. All lists are sorted by name.
    """

    def __init__(self, index: ServiceIndex) -> None:
        self.index = index
        service: Service = index.service
        methods = [method for interface in service.interfaces for method in interface.methods]
        inputs = [param.value for method in methods for param in method.parameters]
        outputs = [method.returns for method in methods if method.returns is not None]
        self.input_types, self.input_unions = self._reachable(inputs)
        self.output_types, self.output_unions = self._reachable(outputs)
        self.types: list[TypeDef] = sorted(service.types, key=lambda t: t.name)
        self.unions: list[UnionDef] = sorted(service.unions, key=lambda u: u.name)

    # ################
    # Implementation
    # ################

    def _reachable(self, roots: list[PrimitiveValue | ComplexValue]) -> tuple[list[TypeDef], list[UnionDef]]:
        types: dict[str, TypeDef] = {}
        unions: dict[str, UnionDef] = {}
        worklist = [value for value in roots if isinstance(value, ComplexValue)]
        while worklist:
            value = worklist.pop()
            target = self.index.resolve(value).target
            if isinstance(target, TypeDef) and target.name not in types:
                types[target.name] = target
                nested = [prop.value for prop in target.properties]
                if target.map_properties is not None:
                    nested += [target.map_properties.key, target.map_properties.value]
                worklist.extend(v for v in nested if isinstance(v, ComplexValue))
            elif isinstance(target, SimpleUnion | DiscriminatedUnion) and target.name not in unions:
                unions[target.name] = target
                worklist.extend(m for m in target.members if isinstance(m, ComplexValue))
        return (
            sorted(types.values(), key=lambda t: t.name),
            sorted(unions.values(), key=lambda u: u.name),
        )
