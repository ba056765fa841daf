# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``dtos/types.ts``: the over-the-wire declarations of a service."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.rendering import naming
from wiremap.rendering.roles import Facet
from wiremap.rendering.text import reindent
from wiremap.rendering.type_renderer import NameScope, TypeRenderer

# ###############
# Public Interface
# ###############


class DtoEmitter(Emitter):
    """Renders a ``<Name>Dto`` declaration for every record and union.

    Enums are shared with the internal declarations and are referenced
    through the ``types`` module.
    """

    def create_scope(self) -> NameScope:
        return NameScope(internal_module="types")

    def modules(self) -> dict[str, ModuleImport]:
        return {"types": ModuleImport(self.options.types_import_path)}

    def emit(self) -> list[GeneratedFile]:
        renderer = TypeRenderer(self.index, Facet.WIRE, self.scope)
        body: list[str] = []
        for type_def in self.info.types:
            body += ["", self._summary(type_def.name)]
            body.append(f"export type {naming.dto_name(type_def.name)} = {renderer.render_record(type_def)};")
        for union in self.info.unions:
            body += ["", self._summary(union.name)]
            body.append(f"export type {naming.dto_name(union.name)} = {renderer.render_union(union)};")
        return [self.file("dtos", "types.ts", contents=reindent(self.preamble() + body))]

    # ################
    # Implementation
    # ################

    def _summary(self, name: str) -> str:
        internal = naming.type_name(name)
        link = f"{{@link {self.scope.internal(internal)}|{internal}}}"
        return f"/** The over-the-wire representation of the {link} type. */"
