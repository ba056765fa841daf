# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``dtos/README.md``, explaining the generated types and mappers."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile
from wiremap.rendering.roles import Perspective

# ###############
# Public Interface
# ###############


class ReadmeEmitter(Emitter):
    """Renders a Markdown guide whose wording follows the configured perspective."""

    def emit(self) -> list[GeneratedFile]:
        is_client = self.perspective is Perspective.CLIENT
        internal = f"[**internal types**]({self.options.types_import_path}.ts)"
        dtos = "[**DTO types**](./types.ts)"
        mappers = "[mappers](./mappers.ts)"
        side = "client" if is_client else "API"
        counterpart = "API" if is_client else "client"

        lines = [
            "<!--",
            "This file was generated by wiremap. Changes to this file may cause",
            "incorrect behavior and will be lost if the code is regenerated.",
            "",
            f"Service: {self.service.title} v{self.service.major_version}",
            "-->",
            "",
            f"# {self.service.title}",
            "",
            "## Data Transfer Objects (DTOs)",
            "",
            f"The generated {side} code contains two sets of types: {internal} and {dtos}.",
            "",
            f"- {internal} follow TypeScript conventions: camelCase properties,",
            "  `Date` objects for dates and no `null` where a value may simply be absent.",
            f"- {dtos} describe the over-the-wire format exactly as the API contract",
            "  defines it, including its original property names.",
            "",
            f"Hand-written code should use {internal}. "
            + (
                "Forms and other UI code interacting with the API belong in this category."
                if is_client
                else "Service implementations containing the business logic belong in this category."
            ),
            f"Use {dtos} only at the boundary where data is exchanged with the {counterpart}.",
            "",
            "## Mappers",
            "",
            f"The {mappers} module converts between {internal} and {dtos}.",
            "Every mapper is generated from the API contract, so regenerating the code keeps",
            "the conversions in sync as the contract evolves.",
            "",
        ]
        if is_client:
            lines += [
                "Use the mappers directly when hand-writing network calls:",
                "",
                "- convert request values into DTOs before sending them,",
                "- convert response DTOs into internal types after receiving them.",
            ]
        else:
            lines += [
                "The generated Express handlers already apply the mappers. Use them directly",
                "when hand-writing handlers:",
                "",
                "- convert request DTOs into internal types before calling the service,",
                "- convert service results into DTOs before sending the response.",
            ]
        return [self.file("dtos", "README.md", contents="\n".join(lines) + "\n")]
