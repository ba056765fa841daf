# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``dtos/mappers.ts``: functions converting between internal and wire values."""

from __future__ import annotations

import logging

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.model.entities import TypeDef, UnionDef
from wiremap.rendering.roles import Facet, Role
from wiremap.rendering.text import reindent
from wiremap.rendering.type_renderer import NameScope
from wiremap.rendering.union_mapping import UnionMapperBuilder
from wiremap.rendering.value_mapping import HELPER_SOURCES, RecordMapperBuilder, ValueMapper

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class MapperEmitter(Emitter):
    """Renders one mapper per record and union that crosses the wire.

    Types reachable from method parameters get mappers in the input role and
    types reachable from return values get mappers in the output role; which
    of those reads from the wire depends on the configured perspective.
    Runtime helpers are rendered after every mapper has been built.
    """

    def create_scope(self) -> NameScope:
        return NameScope(internal_module="types", wire_module="dtos")

    def modules(self) -> dict[str, ModuleImport]:
        return {
            "types": ModuleImport(self.options.types_import_path),
            "dtos": ModuleImport("./types"),
        }

    def emit(self) -> list[GeneratedFile]:
        mapper = ValueMapper(self.index, self.scope, self.helpers)
        records = RecordMapperBuilder(mapper)
        unions = UnionMapperBuilder(mapper)

        mappers: list[str] = []
        for role, types, union_defs in self._plan():
            for type_def in types:
                logger.debug("Building %s mapper for type '%s'", role.value, type_def.name)
                mappers += ["", *records.build(type_def, role)]
            for union in union_defs:
                logger.debug("Building %s mapper for union '%s'", role.value, union.name)
                mappers += ["", *unions.build(union, role)]

        helpers: list[str] = []
        for name, source in HELPER_SOURCES.items():
            if name in self.helpers:
                helpers += ["", *source]

        contents = reindent(self.preamble() + helpers + mappers)
        return [self.file("dtos", "mappers.ts", contents=contents)]

    # ################
    # Implementation
    # ################

    def _plan(self) -> list[tuple[Role, list[TypeDef], list[UnionDef]]]:
        """Return (role, types, unions) groups in emission order: wire readers first."""
        inputs = (self.input_role, self.info.input_types, self.info.input_unions)
        outputs = (self.output_role, self.info.output_types, self.info.output_unions)
        return [outputs, inputs] if self.input_role.source is Facet.INTERNAL else [inputs, outputs]
