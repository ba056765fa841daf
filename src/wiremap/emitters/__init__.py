# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Emitters rendering the generated TypeScript artifacts."""

from wiremap.emitters.base import Emitter, GeneratedFile, ModuleImport
from wiremap.emitters.dto_emitter import DtoEmitter
from wiremap.emitters.errors_emitter import ErrorsEmitter
from wiremap.emitters.handler_emitter import HandlerEmitter, express_route
from wiremap.emitters.handler_types_emitter import HandlerTypesEmitter
from wiremap.emitters.index_emitter import IndexEmitter
from wiremap.emitters.mapper_emitter import MapperEmitter
from wiremap.emitters.readme_emitter import ReadmeEmitter
from wiremap.emitters.service_info import ServiceInfo
from wiremap.emitters.types_emitter import TypesEmitter

__all__ = [
    # Base
    "Emitter",
    "GeneratedFile",
    "ModuleImport",
    "ServiceInfo",
    # Shared artifacts
    "TypesEmitter",
    "DtoEmitter",
    "MapperEmitter",
    "ReadmeEmitter",
    # Express artifacts
    "HandlerEmitter",
    "HandlerTypesEmitter",
    "ErrorsEmitter",
    "IndexEmitter",
    "express_route",
]
