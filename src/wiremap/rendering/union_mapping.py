# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Mapper synthesis for unions.

A discriminated union switches on its discriminator. A simple union is
resolved by runtime type tests: arrays are split from non-arrays, dates and
primitives are recognised with ``typeof``/``instanceof`` tests, and multiple
record members are told apart with the heuristics of
:class:`~wiremap.rendering.discrimination.UnionDiscriminator`.
"""

from __future__ import annotations

from wiremap.model.entities import DiscriminatedUnion, SimpleUnion, TypeDef
from wiremap.model.types import NUMERIC_PRIMITIVES, ComplexValue, Primitive, PrimitiveValue, Property, as_optional
from wiremap.rendering import naming
from wiremap.rendering.classifier import ResolutionKind, is_date
from wiremap.rendering.conditions import Condition, ConditionalBlock, and_, expr, or_, render_blocks
from wiremap.rendering.discrimination import (
    ConstantValueHeuristic,
    Heuristic,
    RequiredPropertyHeuristic,
    UnionDiscriminator,
)
from wiremap.rendering.errors import MissingDiscriminatorValueError, NoDiscriminatingHeuristicError
from wiremap.rendering.roles import Direction, Role
from wiremap.rendering.value_mapping import COMPACT, IS_ISO_DATE, IS_ISO_DATE_TIME, ValueMapper, parameter_name

# ###############
# Public Interface
# ###############


class UnionMapperBuilder:
    """Builds the mapper function converting a union."""

    def __init__(self, mapper: ValueMapper) -> None:
        self.mapper = mapper
        self.discriminator = UnionDiscriminator(mapper.index)

    def build(self, union: SimpleUnion | DiscriminatedUnion, role: Role) -> list[str]:
        """Return the lines of the mapper for *union* in *role*.

        Raises:
            MissingDiscriminatorValueError: If a discriminated union member has
                no constant value for the discriminator.
            NoDiscriminatingHeuristicError: If several record members of a
                simple union cannot be told apart and cannot share one mapping.
        """
        lines = [f"{self.mapper.signature(union.name, role)} {{"]
        if isinstance(union, DiscriminatedUnion):
            lines.extend(self._switch(union, role))
        else:
            lines.extend(self._type_tests(union, role))
        lines.append("}")
        return lines

    # ################
    # Implementation
    # ################

    def _switch(self, union: DiscriminatedUnion, role: Role) -> list[str]:
        param = parameter_name(role)
        discriminator = self.mapper.source_name(union.discriminator, role)
        lines = [f"switch ({param}{naming.accessor(discriminator)}) {{"]
        for member in union.members:
            value = _discriminator_value(self.mapper.index.get_type(member.type_name), union.discriminator)
            if value is None:
                raise MissingDiscriminatorValueError(union.name, member.type_name, union.discriminator)
            mapper = self.mapper.mapper_reference(member.type_name, role)
            literal = naming.literal(value.constant.value)  # type: ignore[union-attr]
            lines.append(f"case {literal}: return {mapper}({param});")
        lines.append("default: throw new Error('Invalid discriminator');")
        lines.append("}")
        return lines

    def _type_tests(self, union: SimpleUnion, role: Role) -> list[str]:
        param = parameter_name(role)
        array_members = [m for m in union.members if m.is_array]
        scalar_members = [m for m in union.members if not m.is_array]

        blocks: list[ConditionalBlock] = []
        if array_members:
            statements = render_blocks(self._blocks(array_members, union, role))
            blocks.append(ConditionalBlock(expr(f"Array.isArray({param})"), statements))
        if scalar_members:
            statements = render_blocks(self._blocks(scalar_members, union, role))
            blocks.append(ConditionalBlock(expr(f"!Array.isArray({param})"), statements))
        if not blocks:
            return [f"return {param} as any;"]
        return render_blocks(blocks)

    def _blocks(
        self, members: list[PrimitiveValue | ComplexValue], union: SimpleUnion, role: Role
    ) -> list[ConditionalBlock]:
        param = parameter_name(role)
        is_array = any(m.is_array for m in members)
        item = f"{param}[0]" if is_array else param
        index = self.mapper.index

        dates = [m for m in members if is_date(m)]
        primitives = [m for m in members if isinstance(m, PrimitiveValue) and not is_date(m)]
        records: list[ComplexValue] = []
        passthrough = False
        for member in members:
            if not isinstance(member, ComplexValue):
                continue
            kind = index.resolve(member).kind
            if kind is ResolutionKind.ENUM:
                primitives.append(PrimitiveValue(type_name=Primitive.STRING))
            elif kind is ResolutionKind.UNRESOLVED:
                passthrough = True
            else:
                records.append(member)

        primitive_kinds = {m.type_name for m in primitives}
        if primitive_kinds & {Primitive.BINARY, Primitive.UNTYPED}:
            passthrough = True
        blocks: list[ConditionalBlock] = []

        if is_array and len(members) > 1:
            blocks.append(ConditionalBlock(expr(f"{param}.length === 0"), ["return [];"]))

        if dates:
            blocks.append(self._date_block(dates, Primitive.STRING in primitive_kinds, role, item, is_array))

        cases: list[Condition] = []
        if Primitive.BOOLEAN in primitive_kinds:
            cases.append(expr(f"typeof {item} === 'boolean'"))
        if Primitive.STRING in primitive_kinds:
            cases.append(expr(f"typeof {item} === 'string'"))
        if primitive_kinds & NUMERIC_PRIMITIVES:
            cases.append(expr(f"typeof {item} === 'number'"))
        if Primitive.NULL in primitive_kinds:
            cases.append(expr(f"{item} === null"))
        if cases:
            blocks.append(ConditionalBlock(or_(*cases), [f"return {param};"]))

        is_object = and_(expr(f"typeof {item} === 'object'"), expr(f"{item} !== null"))
        if len(records) == 1:
            blocks.append(ConditionalBlock(is_object, [self._delegate(records[0], role, is_array)]))
        elif len(records) > 1:
            blocks.extend(self._record_blocks(records, union, role, item, is_array))

        if passthrough:
            blocks.append(ConditionalBlock(expr("true"), [f"return {param};"]))
        return blocks

    def _date_block(
        self, dates: list, has_string: bool, role: Role, item: str, is_array: bool
    ) -> ConditionalBlock:
        param = parameter_name(role)
        has_date = any(m.type_name is Primitive.DATE for m in dates)
        has_date_time = any(m.type_name is Primitive.DATE_TIME for m in dates)

        if role.direction is Direction.WIRE_TO_INTERNAL:
            condition: Condition = expr(f"typeof {item} === 'string'")
            if has_string:
                formats: list[Condition] = []
                if has_date:
                    self.mapper.helpers.add(IS_ISO_DATE)
                    formats.append(expr(f"{IS_ISO_DATE}({item})"))
                if has_date_time:
                    self.mapper.helpers.add(IS_ISO_DATE_TIME)
                    formats.append(expr(f"{IS_ISO_DATE_TIME}({item})"))
                condition = and_(condition, or_(*formats))
            if is_array:
                return ConditionalBlock(condition, [f"return {param}.map((item) => new Date(item));"])
            return ConditionalBlock(condition, [f"return new Date({param});"])

        suffix = "" if has_date_time else ".split('T')[0]"
        condition = expr(f"{item} instanceof Date")
        if is_array:
            return ConditionalBlock(condition, [f"return {param}.map((item) => item.toISOString(){suffix});"])
        return ConditionalBlock(condition, [f"return {param}.toISOString(){suffix};"])

    def _record_blocks(
        self, records: list[ComplexValue], union: SimpleUnion, role: Role, item: str, is_array: bool
    ) -> list[ConditionalBlock]:
        blocks: list[ConditionalBlock] = []
        undistinguished: list[ComplexValue] = []
        for member in records:
            others = [
                ComplexValue(type_name=record.name)
                for record in self._collect_records([other for other in records if other is not member])
            ]
            heuristics = self.discriminator.heuristics(member, others)
            if not heuristics:
                undistinguished.append(member)
                continue
            condition = self._heuristic_condition(heuristics[0], role, item)
            blocks.append(ConditionalBlock(condition, [self._delegate(member, role, is_array)]))

        is_object = and_(expr(f"typeof {item} === 'object'"), expr(f"{item} !== null"))
        if len(undistinguished) == 1:
            blocks.append(ConditionalBlock(is_object, [self._delegate(undistinguished[0], role, is_array)]))
        elif len(undistinguished) > 1:
            blocks.append(ConditionalBlock(is_object, self._merged_mapping(undistinguished, union, role, is_array)))
        return blocks

    def _heuristic_condition(self, heuristic: Heuristic, role: Role, item: str) -> Condition:
        def present(name: str) -> Condition:
            return expr(f"{naming.quote(self.mapper.source_name(name, role))} in {item}")

        if isinstance(heuristic, RequiredPropertyHeuristic):
            return present(heuristic.property)
        if isinstance(heuristic, ConstantValueHeuristic):
            member = f"{item}{naming.accessor(self.mapper.source_name(heuristic.property, role))}"
            return and_(present(heuristic.property), expr(f"{member} === {naming.literal(heuristic.value)}"))
        return and_(*(present(name) for name in heuristic.properties))

    def _delegate(self, member: ComplexValue, role: Role, is_array: bool) -> str:
        param = parameter_name(role)
        mapper = self.mapper.mapper_reference(member.type_name, role)
        return f"return {param}.map({mapper});" if is_array else f"return {mapper}({param});"

    def _merged_mapping(
        self, members: list[ComplexValue], union: SimpleUnion, role: Role, is_array: bool
    ) -> list[str]:
        """Map indistinguishable members with one property-wise conversion.

        Only one member is present at runtime, so every collected property is
        treated as optional. This is sound only when same-named properties
        convert identically and no member is an open map.
        """
        names = [member.type_name for member in members]
        records = self._collect_records(members)
        if is_array or any(record.map_properties is not None for record in records):
            raise NoDiscriminatingHeuristicError(union.name, names)

        properties: dict[str, Property] = {}
        conversions: dict[str, str] = {}
        for record in records:
            for prop in record.properties:
                optional = prop.model_copy(update={"value": as_optional(prop.value)})
                conversion = self.mapper.property_assignment(optional, role, "union")
                if prop.name in conversions and conversions[prop.name] != conversion:
                    raise NoDiscriminatingHeuristicError(union.name, names)
                properties.setdefault(prop.name, optional)
                conversions[prop.name] = conversion

        self.mapper.helpers.add(COMPACT)
        lines = [f"const union = {parameter_name(role)} as any;", "return compact({"]
        lines.extend(conversions[name] for name in properties)
        lines.append("}) as any;")
        return lines

    def _collect_records(self, members: list[ComplexValue]) -> list[TypeDef]:
        """Collect the records reachable from *members* through nested unions."""
        index = self.mapper.index
        records: list[TypeDef] = []
        seen: set[str] = set()
        worklist = [member.type_name for member in reversed(members)]
        while worklist:
            name = worklist.pop()
            if name in seen:
                continue
            seen.add(name)
            type_def = index.get_type(name)
            if type_def is not None:
                records.append(type_def)
                continue
            nested = index.get_union(name)
            if nested is not None:
                worklist.extend(
                    m.type_name for m in reversed(nested.members) if isinstance(m, ComplexValue)
                )
        return records


def _discriminator_value(type_def: TypeDef | None, discriminator: str) -> PrimitiveValue | None:
    """Return the constant primitive value of *discriminator* on *type_def*, if any."""
    if type_def is None:
        return None
    for prop in type_def.properties:
        if prop.name == discriminator:
            value = prop.value
            if isinstance(value, PrimitiveValue) and value.constant is not None:
                return value
            return None
    return None
