# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``types.ts``: the idiomatic (internal) declarations of a service."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile
from wiremap.model.entities import DiscriminatedUnion, Interface, Method, TypeDef
from wiremap.model.types import PrimitiveValue
from wiremap.rendering import naming
from wiremap.rendering.roles import Facet
from wiremap.rendering.text import doc_comment, reindent
from wiremap.rendering.type_renderer import TypeRenderer

# ###############
# Public Interface
# ###############


class TypesEmitter(Emitter):
    """Renders service interfaces, parameter types, enums, records, unions and type guards."""

    def emit(self) -> list[GeneratedFile]:
        renderer = TypeRenderer(self.index, Facet.INTERNAL, self.scope)
        body: list[str] = []
        for interface in sorted(self.service.interfaces, key=lambda i: i.name):
            body += ["", *self._interface(interface, renderer)]
        methods = [method for interface in self.service.interfaces for method in interface.methods]
        for method in sorted(methods, key=lambda m: m.name):
            if method.parameters:
                body += ["", *self._params_type(method, renderer)]
        for enum_def in sorted(self.service.enums, key=lambda e: e.name):
            body += ["", *doc_comment(enum_def.description, enum_def.deprecated)]
            body.append(f"export type {naming.type_name(enum_def.name)} = {renderer.render_enum(enum_def)};")
        for type_def in self.info.types:
            body += ["", *doc_comment(type_def.description, type_def.deprecated)]
            body.append(f"export type {naming.type_name(type_def.name)} = {renderer.render_record(type_def)};")
        for union in self.info.unions:
            body += ["", *doc_comment(union.description, union.deprecated)]
            body.append(f"export type {naming.type_name(union.name)} = {renderer.render_union(union)};")
        body += self._type_guards()

        return [self.file("types.ts", contents=reindent(self.preamble() + body))]

    # ################
    # Implementation
    # ################

    def _interface(self, interface: Interface, renderer: TypeRenderer) -> list[str]:
        nomenclature = self.options.interface_nomenclature
        description = interface.description or (
            f"Interface for the {naming.title(interface.name)} {naming.title(nomenclature)}"
        )
        lines = doc_comment(description, interface.deprecated)
        lines.append(f"export interface {naming.interface_name(interface.name, nomenclature)} {{")
        for method in sorted(interface.methods, key=lambda m: m.name):
            lines.extend(doc_comment(method.description, method.deprecated))
            signature = f"{naming.method_name(method.name)}({self._params_argument(method)})"
            lines.append(f"{signature}: {self._returns(method, renderer)};")
        lines.append("}")
        return lines

    def _params_argument(self, method: Method) -> str:
        if not method.parameters:
            return ""
        marker = "" if any(not p.value.is_optional for p in method.parameters) else "?"
        return f"params{marker}: {naming.params_type_name(method.name)}"

    def _returns(self, method: Method, renderer: TypeRenderer) -> str:
        if method.returns is None:
            return "Promise<void>"
        return f"Promise<{renderer.render_value(method.returns)}>"

    def _params_type(self, method: Method, renderer: TypeRenderer) -> list[str]:
        required = [p for p in method.parameters if not p.value.is_optional]
        optional = [p for p in method.parameters if p.value.is_optional]
        lines = [f"export type {naming.params_type_name(method.name)} = {{"]
        for param in required + optional:
            lines.extend(doc_comment(param.description, param.deprecated))
            lines.append(renderer.render_parameter(param))
        lines.append("};")
        return lines

    def _type_guards(self) -> list[str]:
        """Render ``is<Member>`` guards narrowing discriminated unions to one member."""
        unions_by_member: dict[str, list[DiscriminatedUnion]] = {}
        for union in self.info.unions:
            if isinstance(union, DiscriminatedUnion):
                for member in union.members:
                    unions_by_member.setdefault(member.type_name, []).append(union)

        lines: list[str] = []
        for member_name in sorted(unions_by_member):
            type_def = self.index.get_type(member_name)
            if type_def is None:
                continue
            checks = self._discriminator_checks(type_def, unions_by_member[member_name])
            if not checks:
                continue
            unions = " | ".join(naming.type_name(u.name) for u in unions_by_member[member_name])
            member = naming.type_name(member_name)
            lines += [
                "",
                f"export function {naming.type_guard_name(member_name)}(obj: {unions}): obj is {member} {{",
                f"return {' && '.join(checks)};",
                "}",
            ]
        return lines

    def _discriminator_checks(self, type_def: TypeDef, unions: list[DiscriminatedUnion]) -> list[str]:
        checks: dict[str, str] = {}
        for union in unions:
            for prop in type_def.properties:
                value = prop.value
                if prop.name != union.discriminator or not isinstance(value, PrimitiveValue):
                    continue
                if value.constant is not None:
                    member = f"obj{naming.accessor(naming.property_name(prop.name))}"
                    checks[member] = f"{member} === {naming.literal(value.constant.value)}"
        return list(checks.values())
