# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``express/handlers.ts``: one Express request handler per HTTP method.

Each handler reads the method's parameters off the request, validates them,
calls the service, converts the result to its wire representation and sends
it with the method's success status code. Failures are forwarded to
``next()`` as the error values declared in ``express/errors.ts``.
"""

from __future__ import annotations

import re

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.model.entities import HttpMethod, HttpParameter, Interface, Method, Parameter
from wiremap.rendering import naming
from wiremap.rendering.roles import Role
from wiremap.rendering.text import reindent
from wiremap.rendering.type_renderer import NameScope
from wiremap.rendering.value_mapping import ValueMapper

# ###############
# Public Interface
# ###############


def express_route(pattern: str) -> str:
    """Convert a route pattern to Express syntax (``/widgets/{id}`` -> ``/widgets/:id``)."""
    return _PATH_PARAMETER.sub(r":\1", pattern)


class HandlerEmitter(Emitter):
    """Renders ``handle<Method>`` factories for every HTTP-bound method."""

    def create_scope(self) -> NameScope:
        return NameScope(internal_module="types", wire_module="dtos")

    def modules(self) -> dict[str, ModuleImport]:
        return {
            "types": ModuleImport(self.options.types_import_path),
            "dtos": ModuleImport(self.options.dtos_import_path),
            "mappers": ModuleImport(self.options.mappers_import_path, type_only=False),
            "schemas": ModuleImport(self.options.schemas_import_path, type_only=False),
            "validators": ModuleImport(self.options.validators_import_path, type_only=False),
            "errors": ModuleImport("./errors", type_only=False),
            "expressTypes": ModuleImport("./types"),
        }

    def emit(self) -> list[GeneratedFile]:
        self.mapper = ValueMapper(self.index, self.scope, self.helpers, mapper_module="mappers")
        handlers: list[tuple[str, list[str]]] = []
        for interface in self.service.interfaces:
            for route in interface.http:
                for http_method in route.methods:
                    method = next((m for m in interface.methods if m.name == http_method.name), None)
                    if method is None:
                        continue
                    handlers.append((method.name, self._handler(interface, method, route.pattern, http_method)))

        body: list[str] = []
        for _, lines in sorted(handlers, key=lambda handler: handler[0]):
            body += ["", *lines]
        return [self.file("express", "handlers.ts", contents=reindent(self.preamble() + body))]

    # ################
    # Implementation
    # ################

    def _handler(self, interface: Interface, method: Method, pattern: str, http_method: HttpMethod) -> list[str]:
        request = self.import_named("express", "Request")
        response = self.import_named("express", "Response")
        service_type = self.scope.internal(naming.interface_name(interface.name, self.options.interface_nomenclature))
        handler_type = f"{self.scope.module('expressTypes')}.{naming.request_handler_type_name(method.name)}"
        deprecated = " @deprecated" if method.deprecated else ""

        lines = [
            f"/** {http_method.verb.upper()} {express_route(pattern)}{deprecated} */",
            f"export const {naming.handler_name(method.name)} =",
            f"(getService: (req: {request}, res: {response}) => {service_type}): {handler_type} =>",
            "async (req, res, next) => {",
            "try {",
        ]
        if method.parameters:
            lines += self._parse_parameters(method, http_method)
            lines.append("")

        arguments = "params" if method.parameters else ""
        call = f"service.{naming.method_name(method.name)}({arguments})"
        lines += ["// Execute service method", "const service = getService(req, res);"]
        lines.append(f"const result = await {call};" if method.returns is not None else f"await {call};")
        lines += [f"const status = {http_method.success_code};", "", "// Respond"]
        if method.returns is not None:
            response_dto = self.mapper.map_expression(method.returns, Role.SERVER_OUTBOUND, "result")
            lines += [f"const responseDto = {response_dto};", "res.status(status).json(responseDto);"]
        else:
            lines.append("res.sendStatus(status);")

        errors = self.scope.module("errors")
        lines.append("} catch (err) {")
        if self._uses_zod:
            zod_error = self.import_named("zod", "ZodError", type_only=False)
            lines += [
                f"if (err instanceof {zod_error}) {{",
                "const statusCode = res.headersSent ? 500 : 400;",
                f"return next({errors}.validationErrors(statusCode, err.errors));",
                "} else {",
                f"next({errors}.unhandledException(err));",
                "}",
            ]
        else:
            lines.append(f"next({errors}.unhandledException(err));")
        lines += ["}", "};"]
        return lines

    @property
    def _uses_zod(self) -> bool:
        return self.options.validation == "zod"

    def _parse_parameters(self, method: Method, http_method: HttpMethod) -> list[str]:
        params_type = self.scope.internal(naming.params_type_name(method.name))
        fields: list[str] = []
        for param in method.parameters:
            http_param = next((p for p in http_method.parameters if p.name == param.name), None)
            if http_param is None:
                continue
            key = naming.member_key(naming.property_name(param.name))
            fields.append(f"{key}: {self._parameter_source(param, http_param)},")

        lines = ["// Parse parameters from request"]
        if self._uses_zod:
            required = any(not p.value.is_optional for p in method.parameters)
            schema = f"{self.scope.module('schemas')}.{naming.params_type_name(method.name)}Schema"
            if required:
                lines.append(f"const params: {params_type} = {schema}.parse({{")
            else:
                lines.append(f"const params: {params_type} | undefined = {schema}.optional().parse({{")
            lines += fields
            lines.append("});")
            return lines

        validator = f"{self.scope.module('validators')}.validate{naming.params_type_name(method.name)}"
        errors = self.scope.module("errors")
        lines.append(f"const params: {params_type} = {{")
        lines += fields
        lines += [
            "};",
            f"const validationErrors = {validator}(params);",
            "if (validationErrors.length) {",
            f"return next({errors}.validationErrors(400, validationErrors));",
            "}",
        ]
        return lines

    def _parameter_source(self, param: Parameter, http_param: HttpParameter) -> str:
        location = http_param.location
        if location in ("body", "formData"):
            return self.mapper.map_expression(param.value, Role.SERVER_INBOUND, "req.body")
        if location == "path":
            source = f"req.params{naming.accessor(param.name)}"
        elif location == "query":
            source = f"req.query{naming.accessor(param.name)}"
        else:
            source = f"req.header({naming.quote(param.name)})"
        if param.value.is_array and http_param.array_format != "multi":
            return f"{source}?.split({naming.quote(_SEPARATORS[http_param.array_format or 'csv'])})"
        return source


_PATH_PARAMETER = re.compile(r"\{([^}]+)\}")

_SEPARATORS = {"csv": ",", "ssv": " ", "tsv": "\t", "pipes": "|"}
