# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of IR values and declarations as TypeScript type expressions.

The same IR renders differently for each :class:`~wiremap.rendering.roles.Facet`:
internal declarations use idiomatic names and native ``Date`` objects, while
wire declarations keep raw property names and ISO 8601 strings.
"""

from __future__ import annotations

from wiremap.model.entities import DiscriminatedUnion, EnumDef, Parameter, SimpleUnion, TypeDef
from wiremap.model.types import NUMERIC_PRIMITIVES, ComplexValue, Primitive, PrimitiveValue, Property, as_required
from wiremap.rendering import naming
from wiremap.rendering.classifier import ResolutionKind, ServiceIndex, ValueShape, classify
from wiremap.rendering.errors import InvalidMaxPropertiesError
from wiremap.rendering.roles import Facet
from wiremap.rendering.text import doc_comment

# ###############
# Public Interface
# ###############


class NameScope:
    """Qualifies declared names with the module they are imported under in one artifact.

    A module of ``None`` means the declarations live in the artifact itself.
    Every module handed out is recorded in :attr:`used_modules` so the artifact
    can render only the imports it needs.
    """

    def __init__(self, internal_module: str | None = None, wire_module: str | None = None) -> None:
        self.internal_module = internal_module
        self.wire_module = wire_module
        self.used_modules: set[str] = set()

    def module(self, alias: str) -> str:
        """Record *alias* as used and return it."""
        self.used_modules.add(alias)
        return alias

    def internal(self, name: str) -> str:
        """Qualify an internal declaration name."""
        if self.internal_module is None:
            return name
        return f"{self.module(self.internal_module)}.{name}"

    def wire(self, name: str) -> str:
        """Qualify a wire (DTO) declaration name."""
        if self.wire_module is None:
            return name
        return f"{self.module(self.wire_module)}.{name}"

    def declared(self, type_name: str, facet: Facet) -> str:
        """Return the qualified name of the *facet* representation of a type or union."""
        if facet is Facet.INTERNAL:
            return self.internal(naming.type_name(type_name))
        return self.wire(naming.dto_name(type_name))


class TypeRenderer:
    """Renders values, members and declarations for one facet.

    Args:
        index: Name lookup for the service being rendered.
        facet: Whether internal or wire declarations are produced.
        scope: Module qualification for referenced names. Defaults to a scope
            in which every declaration is local.
    """

    def __init__(self, index: ServiceIndex, facet: Facet, scope: NameScope | None = None) -> None:
        self.index = index
        self.facet = facet
        self.scope = scope if scope is not None else NameScope()

    def value_parts(self, value: PrimitiveValue | ComplexValue) -> list[str]:
        """Return the alternatives making up the type of *value*.

        The first part is the (possibly array) base type; ``null`` follows when
        the value is nullable. Optionality is never part of the type.
        """
        base = self._render_base(value)
        if value.is_array:
            base = f"{base}[]"
        return [base, "null"] if value.is_nullable else [base]

    def render_value(self, value: PrimitiveValue | ComplexValue) -> str:
        """Render the type expression of *value*."""
        return " | ".join(self.value_parts(value))

    def member_key(self, name: str) -> str:
        """Return the object key under which a property named *name* is declared."""
        if self.facet is Facet.INTERNAL:
            return naming.member_key(naming.property_name(name))
        return naming.member_key(name)

    def render_property(self, prop: Property) -> str:
        """Render a property line such as ``pageSize?: number;``."""
        marker = "?" if prop.value.is_optional else ""
        return f"{self.member_key(prop.name)}{marker}: {self.render_value(prop.value)};"

    def render_parameter(self, param: Parameter) -> str:
        """Render a parameter member such as ``pageSize?: number;``."""
        marker = "?" if param.value.is_optional else ""
        return f"{naming.member_key(naming.property_name(param.name))}{marker}: {self.render_value(param.value)};"

    def render_record(self, type_def: TypeDef) -> str:
        """Render the type expression of a record.

        Raises:
            InvalidMaxPropertiesError: If the maximum property count is lower
                than the number of declared properties plus required map keys.
        """
        properties = self.ordered_properties(type_def)
        map_properties = type_def.map_properties

        if not properties and map_properties is None:
            return "Record<string, unknown>"

        required_keys = map_properties.required_keys if map_properties is not None else []
        defined_count = len(properties) + len(required_keys)
        maximum = type_def.max_properties
        if maximum is not None and maximum < defined_count:
            raise InvalidMaxPropertiesError(type_def.name, maximum, defined_count)

        terms: list[str] = []
        member_types: set[str] = set()

        if properties or required_keys:
            lines = ["{"]
            for prop in properties:
                if prop.value.is_optional:
                    member_types.add("undefined")
                member_types.update(self.value_parts(prop.value))
                if self.facet is Facet.INTERNAL:
                    lines.extend(doc_comment(prop.description, prop.deprecated))
                lines.append(self.render_property(prop))
            if map_properties is not None:
                value_type = self.render_value(as_required(map_properties.value))
                for key in required_keys:
                    lines.append(f"{self.member_key(key)}: {value_type};")
            lines.append("}")
            terms.append("\n".join(lines))

        if map_properties is not None and (maximum is None or maximum > defined_count):
            member_types.update(self.value_parts(map_properties.value))
            if map_properties.value.is_optional:
                member_types.add("undefined")
            key_type = self.render_value(as_required(map_properties.key))
            record = f"Record<{key_type}, {' | '.join(sorted(member_types))}>"
            if self.index.resolve(map_properties.key).kind is ResolutionKind.ENUM:
                record = f"Partial<{record}>"
            terms.append(record)

        if not terms:
            # A map clause whose maximum leaves no room for any key.
            return "Record<string, never>"
        return " & ".join(terms)

    def render_union(self, union: SimpleUnion | DiscriminatedUnion) -> str:
        """Render a union as the alternation of its members."""
        if not union.members:
            return "never"
        return " | ".join(self.render_value(member) for member in union.members)

    def render_enum(self, enum_def: EnumDef) -> str:
        """Render an enum as a union of string literals."""
        if not enum_def.members:
            return "never"
        return " | ".join(naming.quote(member.content) for member in enum_def.members)

    def ordered_properties(self, type_def: TypeDef) -> list[Property]:
        """Return declared properties in rendering order.

        Internal declarations keep declaration order; wire declarations are
        sorted by wire name.
        """
        if self.facet is Facet.INTERNAL:
            return list(type_def.properties)
        return sorted(type_def.properties, key=lambda prop: prop.name)

    # ################
    # Implementation
    # ################

    def _render_base(self, value: PrimitiveValue | ComplexValue) -> str:
        if isinstance(value, PrimitiveValue):
            if value.constant is not None:
                return naming.literal(value.constant.value)
            return self._render_primitive(value.type_name)
        shape = classify(value, self.index)
        if shape is ValueShape.UNRESOLVED:
            return "unknown"
        if shape is ValueShape.ENUM_REF:
            # Enums share one declaration between both facets.
            return self.scope.internal(naming.type_name(value.type_name))
        return self.scope.declared(value.type_name, self.facet)

    def _render_primitive(self, primitive: Primitive) -> str:
        if primitive is Primitive.STRING:
            return "string"
        if primitive in NUMERIC_PRIMITIVES:
            return "number"
        if primitive is Primitive.BOOLEAN:
            return "boolean"
        if primitive in (Primitive.DATE, Primitive.DATE_TIME):
            return "Date" if self.facet is Facet.INTERNAL else "string"
        if primitive is Primitive.NULL:
            return "null"
        if primitive is Primitive.UNTYPED:
            return "any"
        return "unknown"

