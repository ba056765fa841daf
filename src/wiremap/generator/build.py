# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation pipeline: validate a service, run the emitters and write the artifacts.

Generation is all-or-nothing. Every artifact is rendered in memory first, so
a failure in any emitter leaves the output directory untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from wiremap.emitters.base import Emitter, GeneratedFile
from wiremap.emitters.dto_emitter import DtoEmitter
from wiremap.emitters.errors_emitter import ErrorsEmitter
from wiremap.emitters.handler_emitter import HandlerEmitter
from wiremap.emitters.handler_types_emitter import HandlerTypesEmitter
from wiremap.emitters.index_emitter import IndexEmitter
from wiremap.emitters.mapper_emitter import MapperEmitter
from wiremap.emitters.readme_emitter import ReadmeEmitter
from wiremap.emitters.types_emitter import TypesEmitter
from wiremap.model.entities import Service
from wiremap.options.config import GeneratorOptions
from wiremap.rendering.errors import RenderError
from wiremap.rendering.roles import Perspective
from wiremap.validation.checks import validate

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Raised when code cannot be generated for a service.

    Covers validation errors and errors raised while rendering, such as a
    union whose members cannot be told apart.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def generate(service: Service, options: GeneratorOptions | None = None) -> list[GeneratedFile]:
    """Generate all artifacts for *service*.

    The steps are:
    1. Validate the service; any validation error aborts generation.
    2. Select the emitters for the configured role. The Express artifacts
       are only generated for the server.
    3. Render every artifact in memory.

    Args:
        service: The service IR.
        options: Generator options; defaults are used when omitted.

    Returns:
        The generated files in emitter order.

    Raises:
        GenerationError: On validation errors or rendering failures.
    """
    options = options if options is not None else GeneratorOptions()
    result = validate(service)
    for warning in result.warnings:
        logger.debug("Validation warning: %s", warning.message)
    if result.has_errors:
        messages = "\n".join(f"  {error.message}" for error in result.errors)
        raise GenerationError(f"Service '{service.title}' is invalid:\n{messages}")

    files: list[GeneratedFile] = []
    for emitter in _emitters(service, options):
        logger.debug("Running %s", type(emitter).__name__)
        try:
            generated = emitter.emit()
        except RenderError as exc:
            raise GenerationError(str(exc)) from exc
        for generated_file in generated:
            logger.debug("Rendered %s", generated_file.relative_path)
        files.extend(generated)
    return files


def write_files(files: list[GeneratedFile], output_dir: Path) -> list[Path]:
    """Write generated files below *output_dir*, creating directories as needed.

    Returns:
        The paths of the written files.
    """
    written: list[Path] = []
    for generated_file in files:
        path = output_dir.joinpath(*generated_file.path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(generated_file.contents, encoding="utf-8")
        written.append(path)
    return written


# ################
# Implementation
# ################


def _emitters(service: Service, options: GeneratorOptions) -> list[Emitter]:
    emitter_types: list[type[Emitter]] = [TypesEmitter, DtoEmitter, MapperEmitter, ReadmeEmitter]
    if options.role is Perspective.SERVER:
        emitter_types += [HandlerEmitter, HandlerTypesEmitter, ErrorsEmitter, IndexEmitter]
    return [emitter_type(service, options) for emitter_type in emitter_types]
