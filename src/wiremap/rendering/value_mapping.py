# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Synthesis of conversion expressions between the internal and wire representations.

Only dates differ in representation among primitives (native ``Date`` objects
internally, ISO 8601 strings on the wire). Records and unions are converted
by generated mapper functions named after the type and the direction:
``mapFrom<Type>Dto`` reads the wire representation and ``mapTo<Type>Dto``
writes it. Enums and unresolved references pass through unchanged.
"""

from __future__ import annotations

from wiremap.model.entities import TypeDef
from wiremap.model.types import ComplexValue, MapProperties, Primitive, PrimitiveValue, Property, as_required
from wiremap.rendering import naming
from wiremap.rendering.classifier import ServiceIndex, ValueShape, classify, is_date
from wiremap.rendering.roles import Direction, Facet, Role
from wiremap.rendering.type_renderer import NameScope

# ###############
# Public Interface
# ###############

COMPACT = "compact"
IS_ISO_DATE = "isIsoDate"
IS_ISO_DATE_TIME = "isIsoDateTime"

# Helper definitions in the order they are emitted.
HELPER_SOURCES: dict[str, list[str]] = {
    IS_ISO_DATE: [
        "const isoDateRegex = /^\\d{4}-\\d{2}-\\d{2}$/;",
        "function isIsoDate(s: string): boolean {",
        "if (!isoDateRegex.test(s)) return false;",
        "const d = new Date(s + 'T00:00:00Z');",
        "return !Number.isNaN(d.valueOf()) && d.toISOString().slice(0, 10) === s;",
        "}",
    ],
    IS_ISO_DATE_TIME: [
        "const isoDateTimeRegex = /^\\d{4}-\\d{2}-\\d{2}T\\d{2}:\\d{2}:\\d{2}(?:\\.\\d{1,9})?(?:Z|[+-]\\d{2}:\\d{2})$/;",  # noqa: E501
        "function isIsoDateTime(s: string): boolean {",
        "if (!isoDateTimeRegex.test(s)) return false;",
        "return !Number.isNaN(new Date(s).valueOf());",
        "}",
    ],
    COMPACT: [
        "function compact<T extends object>(obj: T): T {",
        "return Object.keys(obj).reduce((acc, key) => {",
        "const value = obj[key as keyof T];",
        "if (value !== undefined) {",
        "acc[key as keyof T] = value;",
        "}",
        "return acc;",
        "}, {} as T);",
        "}",
    ],
}


def mapper_name(type_name: str, role: Role) -> str:
    """Return the name of the mapper converting *type_name* in *role*."""
    prefix = "mapFrom" if role.direction is Direction.WIRE_TO_INTERNAL else "mapTo"
    return f"{prefix}{naming.dto_name(type_name)}"


def parameter_name(role: Role) -> str:
    """Return the name of a mapper's single parameter in *role*."""
    return "dto" if role.direction is Direction.WIRE_TO_INTERNAL else "obj"


class ValueMapper:
    """Builds conversion expressions for values of one service.

    Args:
        index: Name lookup for the service.
        scope: Module qualification for type names used in casts and signatures.
        helpers: Write-only set collecting the runtime helpers referenced by
            generated code (see :data:`HELPER_SOURCES`).
        mapper_module: Module under which mapper functions are imported, or
            ``None`` when they are defined in the same artifact.
    """

    def __init__(
        self,
        index: ServiceIndex,
        scope: NameScope | None = None,
        helpers: set[str] | None = None,
        mapper_module: str | None = None,
    ) -> None:
        self.index = index
        self.scope = scope if scope is not None else NameScope()
        self.helpers = helpers if helpers is not None else set()
        self.mapper_module = mapper_module

    def mapper_reference(self, type_name: str, role: Role) -> str:
        """Return the (possibly module qualified) mapper for *type_name*."""
        name = mapper_name(type_name, role)
        if self.mapper_module is None:
            return name
        return f"{self.scope.module(self.mapper_module)}.{name}"

    def map_expression(
        self,
        value: PrimitiveValue | ComplexValue,
        role: Role,
        accessor: str,
        as_type: str | None = None,
    ) -> str:
        """Return the expression converting the value at *accessor* in *role*.

        Identity conversions are returned unguarded. Any other conversion is
        guarded so that ``undefined`` and ``null`` pass through untouched, with
        the ``undefined`` test first when both apply.
        """
        inner = self._convert(value, role, accessor, as_type)
        if inner == accessor:
            return accessor
        guards = []
        if value.is_optional:
            guards.append(f"typeof {accessor} === 'undefined'")
        if value.is_nullable:
            guards.append(f"{accessor} === null")
        if not guards:
            return inner
        return f"{' || '.join(guards)} ? {accessor} : {inner}"

    def source_name(self, name: str, role: Role) -> str:
        """Return how a member named *name* is spelled on the mapper's input."""
        return name if role.source is Facet.WIRE else naming.property_name(name)

    def target_key(self, name: str, role: Role) -> str:
        """Return the object key under which *name* is written on the mapper's output."""
        if role.target is Facet.WIRE:
            return naming.member_key(name)
        return naming.member_key(naming.property_name(name))

    def property_accessor(self, prop: Property, role: Role, parent: str) -> str:
        """Return the expression reading *prop* from *parent* on the mapper's input."""
        return f"{parent}{naming.accessor(self.source_name(prop.name, role))}"

    def signature(self, type_name: str, role: Role) -> str:
        """Return the ``export function`` signature of a mapper."""
        source = self.scope.declared(type_name, role.source)
        target = self.scope.declared(type_name, role.target)
        return f"export function {mapper_name(type_name, role)}({parameter_name(role)}: {source}): {target}"

    def property_assignment(self, prop: Property, role: Role, parent: str) -> str:
        """Return the ``key: expression,`` line converting *prop* read from *parent*."""
        key = self.target_key(prop.name, role)
        return f"{key}: {self.map_expression(prop.value, role, self.property_accessor(prop, role, parent))},"

    # ################
    # Implementation
    # ################

    def _convert(self, value: PrimitiveValue | ComplexValue, role: Role, accessor: str, as_type: str | None) -> str:
        if isinstance(value, PrimitiveValue):
            if not is_date(value):
                return accessor
            return self._convert_date(value, role, accessor)

        shape = classify(value, self.index)
        if shape in (ValueShape.ENUM_REF, ValueShape.UNRESOLVED):
            return accessor
        mapper = self.mapper_reference(value.type_name, role)
        if shape is ValueShape.COMPLEX_ARRAY:
            return f"{accessor}.map({mapper})"
        argument = f"{accessor} as {as_type}" if as_type else accessor
        return f"{mapper}({argument})"

    def _convert_date(self, value: PrimitiveValue, role: Role, accessor: str) -> str:
        if role.direction is Direction.WIRE_TO_INTERNAL:
            if value.is_array:
                return f"{accessor}.map((item) => new Date(item))"
            return f"new Date({accessor})"
        suffix = ".split('T')[0]" if value.type_name is Primitive.DATE else ""
        if value.is_array:
            return f"{accessor}.map((item) => item.toISOString(){suffix})"
        return f"{accessor}.toISOString(){suffix}"


class RecordMapperBuilder:
    """Builds the mapper function converting a whole record."""

    def __init__(self, mapper: ValueMapper) -> None:
        self.mapper = mapper

    def build(self, type_def: TypeDef, role: Role) -> list[str]:
        """Return the lines of the mapper for *type_def* in *role*.

        * A record with only declared properties converts each property.
        * A record with a map clause destructures its declared properties and
          required keys, then folds the remaining keys through the map value
          conversion unless the maximum property count leaves no room for them.
        * An empty record, or a map clause admitting no keys, maps to an empty object.

        Keys whose converted value is ``undefined`` are omitted from the result.
        """
        lines = [f"{self.mapper.signature(type_def.name, role)} {{"]
        if type_def.map_properties is not None:
            lines.extend(self._map_body(type_def, type_def.map_properties, role))
        elif type_def.properties:
            lines.extend(self._pure_body(type_def, role))
        else:
            lines.append("return {};")
        lines.append("}")
        return lines

    # ################
    # Implementation
    # ################

    def _pure_body(self, type_def: TypeDef, role: Role) -> list[str]:
        param = parameter_name(role)
        self.mapper.helpers.add(COMPACT)
        lines = ["return compact({"]
        lines.extend(self.mapper.property_assignment(prop, role, param) for prop in type_def.properties)
        lines.append("});")
        return lines

    def _map_body(self, type_def: TypeDef, map_properties: MapProperties, role: Role) -> list[str]:
        param = parameter_name(role)
        defined = len(type_def.properties) + len(map_properties.required_keys)
        maximum = type_def.max_properties
        reduce_map = maximum is None or maximum != defined
        destructure = defined > 0

        names = [prop.name for prop in type_def.properties] + list(map_properties.required_keys)
        local_names = self._local_names(names)

        lines: list[str] = []
        if destructure:
            lines.append("const {")
            for name in names:
                lines.append(self._binding(name, local_names[name], role))
            if reduce_map:
                lines.append("...__rest__,")
            lines.append(f"}} = {param};")
            lines.append("")

            self.mapper.helpers.add(COMPACT)
            lines.append("const __defined__ = compact({" if reduce_map else "return compact({")
            for prop in type_def.properties:
                expression = self.mapper.map_expression(prop.value, role, local_names[prop.name])
                lines.append(self._assignment(prop.name, expression, role))
            value = as_required(map_properties.value)
            for key in map_properties.required_keys:
                expression = self.mapper.map_expression(value, role, local_names[key])
                lines.append(self._assignment(key, expression, role))
            lines.append("});")

        if reduce_map:
            source = "__rest__" if destructure else param
            initial = "__defined__" if destructure else "{}"
            as_type = None
            if self.mapper.index.resolve(map_properties.value).is_mapped:
                as_type = self.mapper.scope.declared(map_properties.value.type_name, role.source)
            converted = self.mapper.map_expression(map_properties.value, role, f"{param}[key]", as_type)
            target = self.mapper.scope.declared(type_def.name, role.target)
            if destructure:
                lines.append("")
            lines.append(f"return Object.keys({source}).reduce((acc, key) => {{")
            lines.append(f"const value = {converted};")
            lines.append("return value === undefined ? acc : { ...acc, [key]: value };")
            lines.append(f"}}, {initial} as {target});")
        if not lines:
            # The maximum property count admits no keys at all.
            lines.append("return {};")
        return lines

    def _local_names(self, names: list[str]) -> dict[str, str]:
        """Assign each destructured member a distinct local variable.

        A local never repeats another one and never hides the mapper parameter,
        the generated locals, a runtime helper or a generated mapper.
        """
        taken = {"dto", "obj", "__rest__", "__defined__", "Object", "undefined", *HELPER_SOURCES}
        service = self.mapper.index.service
        for declaration in [*service.types, *service.unions]:
            taken.update(mapper_name(declaration.name, role) for role in Role)

        local_names: dict[str, str] = {}
        for name in names:
            if name in local_names:
                continue
            local = naming.local_name(name)
            while local in taken:
                local = f"_{local}"
            taken.add(local)
            local_names[name] = local
        return local_names

    def _binding(self, name: str, local: str, role: Role) -> str:
        key = naming.member_key(self.mapper.source_name(name, role))
        return f"{local}," if key == local else f"{key}: {local},"

    def _assignment(self, name: str, expression: str, role: Role) -> str:
        key = self.mapper.target_key(name, role)
        return f"{key}," if key == expression else f"{key}: {expression},"
