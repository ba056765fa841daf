# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural heuristics that tell the members of a simple union apart at runtime.

For a union member M and the other candidate members, three independent
strategies look for a test that is true for every instance of M and false for
every instance of the others. A candidate with a map clause may carry any
property name, so no property test excludes it:

* **Required property**: a non-optional property of M that no other candidate
  declares at all, optional or not.
* **Constant value**: a non-optional constant-valued property of M such that
  every other candidate either lacks the property or declares it with a
  different constant.
* **Required properties**: the smallest set of M's non-optional properties
  that is not contained in the declared properties of any other candidate.
  This is a minimal hitting-set problem, solved exactly up to
  :data:`EXACT_SEARCH_LIMIT` names and greedily above that.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations

from wiremap.model.entities import TypeDef
from wiremap.model.types import ComplexValue, ConstantLiteral, PrimitiveValue, is_required
from wiremap.rendering.classifier import ServiceIndex

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

EXACT_SEARCH_LIMIT = 16


@dataclass(frozen=True)
class RequiredPropertyHeuristic:
    """A required property found on only one candidate."""

    property: str


@dataclass(frozen=True)
class ConstantValueHeuristic:
    """A required property whose constant value identifies one candidate."""

    property: str
    value: ConstantLiteral


@dataclass(frozen=True)
class RequiredPropertiesHeuristic:
    """A set of required properties that together identify one candidate.

    Attributes:
        properties: Property names in the member's declaration order.
        exact: False when the set came from the greedy search and may not be
            the smallest possible.
    """

    properties: tuple[str, ...]
    exact: bool = True


Heuristic = RequiredPropertyHeuristic | ConstantValueHeuristic | RequiredPropertiesHeuristic


class UnionDiscriminator:
    """Computes discriminating heuristics for union members of one service."""

    def __init__(self, index: ServiceIndex) -> None:
        self.index = index

    def heuristics(self, member: ComplexValue, other_members: Sequence[ComplexValue]) -> list[Heuristic]:
        """Return every heuristic identifying *member* among *other_members*.

        Results are ordered by strategy (required property, constant value,
        required properties). An empty list means no structural test can
        identify the member.
        """
        return [
            *self.required_property_heuristics(member, other_members),
            *self.constant_value_heuristics(member, other_members),
            *self.required_properties_heuristics(member, other_members),
        ]

    def required_property_heuristics(
        self, member: ComplexValue, other_members: Sequence[ComplexValue]
    ) -> list[RequiredPropertyHeuristic]:
        type_def = self.index.get_type(member.type_name)
        if type_def is None:
            return []
        others = [_declared_names(other) for other in self._records(other_members)]
        if any(names is None for names in others):
            return []
        excluded = set().union(*others)
        return [RequiredPropertyHeuristic(name) for name in _required_names(type_def) if name not in excluded]

    def constant_value_heuristics(
        self, member: ComplexValue, other_members: Sequence[ComplexValue]
    ) -> list[ConstantValueHeuristic]:
        type_def = self.index.get_type(member.type_name)
        if type_def is None:
            return []
        constants = _constants(type_def, required_only=True)
        for other in self._records(other_members):
            if other.map_properties is not None:
                return []
            other_constants = _constants(other, required_only=False)
            for prop in other.properties:
                if prop.name not in constants:
                    continue
                # Only a different constant under the same name keeps the test sound.
                if prop.name not in other_constants or _same_literal(constants[prop.name], other_constants[prop.name]):
                    del constants[prop.name]
        return [ConstantValueHeuristic(name, value) for name, value in constants.items()]

    def required_properties_heuristics(
        self, member: ComplexValue, other_members: Sequence[ComplexValue]
    ) -> list[RequiredPropertiesHeuristic]:
        type_def = self.index.get_type(member.type_name)
        if type_def is None:
            return []
        required = list(_required_names(type_def))
        others = []
        for other in self._records(other_members):
            names = _declared_names(other)
            others.append(set(required) if names is None else names)
        exact = len(required) <= EXACT_SEARCH_LIMIT
        if not exact:
            logger.warning(
                "Type '%s' has %d required properties; using a greedy search that may not find the smallest "
                "distinguishing set",
                type_def.name,
                len(required),
            )
        subset = distinguishing_subset(required, others)
        if not subset:
            return []
        return [RequiredPropertiesHeuristic(tuple(subset), exact=exact)]

    # ################
    # Implementation
    # ################

    def _records(self, members: Sequence[ComplexValue]) -> list[TypeDef]:
        records = []
        for member in members:
            type_def = self.index.get_type(member.type_name)
            if type_def is not None:
                records.append(type_def)
        return records


def distinguishing_subset(names: Sequence[str], others: Sequence[set[str]]) -> list[str]:
    """Return the smallest subset of *names* not contained in any set of *others*.

    Each other set O_i yields a complement D_i = names - O_i; the result is a
    smallest subset of *names* intersecting every D_i. Returns an empty list
    when some D_i is empty (that candidate is a structural superset). Above
    :data:`EXACT_SEARCH_LIMIT` names a greedy cover is returned instead, which
    is correct but not guaranteed minimal. Result order follows *names*.
    """
    complements = [{name for name in names if name not in other} for other in others]
    if any(not complement for complement in complements):
        return []
    if not complements:
        return list(names[:1])

    if len(names) <= EXACT_SEARCH_LIMIT:
        for size in range(1, len(names) + 1):
            for combo in combinations(names, size):
                chosen = set(combo)
                if all(chosen & complement for complement in complements):
                    return list(combo)
        return []
    return _greedy_hit(names, complements)


# ################
# Implementation
# ################


def _required_names(type_def: TypeDef) -> list[str]:
    return [prop.name for prop in type_def.properties if is_required(prop.value)]


def _declared_names(type_def: TypeDef) -> set[str] | None:
    """Return every property name *type_def* declares, or None if a map clause admits any name."""
    if type_def.map_properties is not None:
        return None
    return {prop.name for prop in type_def.properties}


def _constants(type_def: TypeDef, required_only: bool) -> dict[str, ConstantLiteral]:
    constants: dict[str, ConstantLiteral] = {}
    for prop in type_def.properties:
        value = prop.value
        if required_only and not is_required(value):
            continue
        if isinstance(value, PrimitiveValue) and value.constant is not None:
            constants[prop.name] = value.constant.value
    return constants


def _same_literal(a: ConstantLiteral, b: ConstantLiteral) -> bool:
    """Compare literals with strict-equality semantics (``true`` is not ``1``)."""
    if isinstance(a, bool) or isinstance(b, bool) or not isinstance(a, int | float) or not isinstance(b, int | float):
        return type(a) is type(b) and a == b
    return a == b


def _greedy_hit(names: Sequence[str], complements: list[set[str]]) -> list[str]:
    remaining = set(range(len(complements)))
    chosen: list[str] = []
    while remaining:
        best, best_score = None, 0
        for name in names:
            score = sum(1 for i in remaining if name in complements[i])
            if score > best_score:
                best, best_score = name, score
        if best is None:
            return []
        chosen.append(best)
        remaining = {i for i in remaining if best not in complements[i]}
    order = {name: i for i, name in enumerate(names)}
    return sorted(chosen, key=order.__getitem__)
