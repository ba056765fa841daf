# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``express/types.ts``: the ``RequestHandler`` type of every HTTP method."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.model.entities import HttpMethod, Method
from wiremap.rendering import naming
from wiremap.rendering.roles import Facet
from wiremap.rendering.text import reindent
from wiremap.rendering.type_renderer import NameScope, TypeRenderer

# ###############
# Public Interface
# ###############


class HandlerTypesEmitter(Emitter):
    """Renders ``<Method>RequestHandler`` types parameterized by route, body and query shapes."""

    def create_scope(self) -> NameScope:
        return NameScope(internal_module="types", wire_module="dtos")

    def modules(self) -> dict[str, ModuleImport]:
        return {
            "types": ModuleImport(self.options.types_import_path),
            "dtos": ModuleImport(self.options.dtos_import_path),
        }

    def emit(self) -> list[GeneratedFile]:
        renderer = TypeRenderer(self.index, Facet.WIRE, self.scope)
        handler_types: list[tuple[str, list[str]]] = []
        for interface in self.service.interfaces:
            for route in interface.http:
                for http_method in route.methods:
                    method = next((m for m in interface.methods if m.name == http_method.name), None)
                    if method is not None:
                        handler_types.append((method.name, self._handler_type(method, http_method, renderer)))

        body: list[str] = []
        for _, lines in sorted(handler_types, key=lambda entry: entry[0]):
            body += ["", *lines]
        return [self.file("express", "types.ts", contents=reindent(self.preamble() + body))]

    # ################
    # Implementation
    # ################

    def _handler_type(self, method: Method, http_method: HttpMethod, renderer: TypeRenderer) -> list[str]:
        request_handler = self.import_named("express", "RequestHandler")
        parameters = {param.name: param for param in method.parameters}

        route_params: list[str] = []
        query_params: list[str] = []
        request_body = "never"
        for http_param in http_method.parameters:
            param = parameters.get(http_param.name)
            key = naming.member_key(http_param.name)
            if http_param.location == "path":
                route_params.append(f"{key}: string;")
            elif http_param.location == "query":
                marker = "?" if param is None or param.value.is_optional else ""
                multi = param is not None and param.value.is_array and http_param.array_format == "multi"
                query_params.append(f"{key}{marker}: {'string[]' if multi else 'string'};")
            elif http_param.location == "body" and param is not None:
                request_body = renderer.render_value(param.value)

        response_body = renderer.render_value(method.returns) if method.returns is not None else "void"
        arguments = ", ".join([_object(route_params), response_body, request_body, _object(query_params)])
        lines = ["/** @deprecated */"] if method.deprecated else []
        lines.append(f"export type {naming.request_handler_type_name(method.name)} = {request_handler}<{arguments}>;")
        return lines


def _object(members: list[str]) -> str:
    return "{ " + " ".join(members) + " }" if members else "{}"
