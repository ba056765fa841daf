# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``express/index.ts``, the entry point of the Express binding."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile
from wiremap.rendering.text import reindent

# ###############
# Public Interface
# ###############


class IndexEmitter(Emitter):
    """Re-exports the Express modules and the DTO and mapper namespaces."""

    def emit(self) -> list[GeneratedFile]:
        body = [
            "",
            f"export * as dtos from '{self.options.dtos_import_path}';",
            f"export * as mappers from '{self.options.mappers_import_path}';",
            "export * from './errors';",
            "export * from './handlers';",
            "export * from './types';",
        ]
        return [self.file("express", "index.ts", contents=reindent(self.preamble() + body))]
