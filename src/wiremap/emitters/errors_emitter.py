# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitter for ``express/errors.ts``: the error values passed to ``next()`` by handlers."""

from __future__ import annotations

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.rendering.text import reindent

# ###############
# Public Interface
# ###############


class ErrorsEmitter(Emitter):
    """Renders constructors, type guards and types for handler errors.

    The element type of validation errors depends on the validation option:
    ``ZodIssue`` for zod, ``validators.ValidationError`` otherwise.
    """

    def modules(self) -> dict[str, ModuleImport]:
        return {"validators": ModuleImport(self.options.validators_import_path)}

    def emit(self) -> list[GeneratedFile]:
        if self.options.validation == "zod":
            issue = self.import_named("zod", "ZodIssue")
        else:
            issue = f"{self.scope.module('validators')}.ValidationError"

        body = [
            "",
            "export function methodNotAllowed(): MethodNotAllowedError {",
            "return { code: 'METHOD_NOT_ALLOWED', status: 405, title: 'Method Not Allowed' };",
            "}",
            "export function isMethodNotAllowed(error: any): error is MethodNotAllowedError {",
            "return error.code === 'METHOD_NOT_ALLOWED';",
            "}",
            "export type MethodNotAllowedError = { code: 'METHOD_NOT_ALLOWED'; status: number; title: string };",
            "",
            f"export function validationErrors(status: 400 | 500, errors: {issue}[]): ValidationErrorsError {{",
            "return { code: 'VALIDATION_ERRORS', status, errors };",
            "}",
            "export function isValidationErrors(error: any): error is ValidationErrorsError {",
            "return error.code === 'VALIDATION_ERRORS';",
            "}",
            f"export type ValidationErrorsError = {{ code: 'VALIDATION_ERRORS'; status: number; errors: {issue}[] }};",
            "",
            "export function unhandledException(exception: any): UnhandledExceptionError {",
            "return { code: 'UNHANDLED_EXCEPTION', status: 500, exception };",
            "}",
            "export function isUnhandledException(error: any): error is UnhandledExceptionError {",
            "return error.code === 'UNHANDLED_EXCEPTION';",
            "}",
            "export type UnhandledExceptionError = { code: 'UNHANDLED_EXCEPTION'; status: number; exception: any };",
        ]
        return [self.file("express", "errors.ts", contents=reindent(self.preamble() + body))]
