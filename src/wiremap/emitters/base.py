# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Base class shared by all artifact emitters.

An emitter renders one or more files from a service. While rendering, it
records which modules, named imports and runtime helpers the generated code
references; the import block is rendered from these records once the body
is complete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wiremap.emitters.service_info import ServiceInfo
from wiremap.model.entities import Service
from wiremap.options.config import GeneratorOptions
from wiremap.rendering.classifier import ServiceIndex
from wiremap.rendering.roles import Perspective, Role
from wiremap.rendering.type_renderer import NameScope

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class GeneratedFile:
    """A generated artifact.

    Attributes:
        path: Path segments relative to the output directory.
        contents: Full text of the file.
    """

    path: tuple[str, ...]
    contents: str

    @property
    def relative_path(self) -> str:
        return "/".join(self.path)


@dataclass(frozen=True)
class ModuleImport:
    """A namespace import (``import * as alias from 'path'``)."""

    path: str
    type_only: bool = True


class Emitter(ABC):
    """Renders artifacts for one service.

    Subclasses implement :meth:`emit` and may override :meth:`create_scope`
    and :meth:`modules` to declare which namespace imports are available.
    """

    def __init__(self, service: Service, options: GeneratorOptions | None = None) -> None:
        self.service = service
        self.options = options if options is not None else GeneratorOptions()
        self.index = ServiceIndex(service)
        self.info = ServiceInfo(self.index)
        self.scope = self.create_scope()
        self.helpers: set[str] = set()
        self._named_imports: dict[tuple[str, bool], set[str]] = {}

    @abstractmethod
    def emit(self) -> list[GeneratedFile]:
        """Render the artifacts of this emitter."""

    def create_scope(self) -> NameScope:
        """Return the name scope for the artifact. Declarations are local by default."""
        return NameScope()

    def modules(self) -> dict[str, ModuleImport]:
        """Return the namespace imports the artifact may use, keyed by alias."""
        return {}

    @property
    def perspective(self) -> Perspective:
        return self.options.role

    @property
    def input_role(self) -> Role:
        return Role.for_inputs(self.perspective)

    @property
    def output_role(self) -> Role:
        return Role.for_outputs(self.perspective)

    def import_named(self, package: str, name: str, type_only: bool = True) -> str:
        """Record a named import from *package* and return the imported name."""
        self._named_imports.setdefault((package, type_only), set()).add(name)
        return name

    def file(self, *segments: str, contents: str) -> GeneratedFile:
        """Build a generated file, prefixing the path with the major version if enabled."""
        prefix = (f"v{self.service.major_version}",) if self.options.include_version else ()
        return GeneratedFile(path=prefix + segments, contents=contents)

    def preamble(self) -> list[str]:
        """Return the generated-code banner and the import block.

        Must be called after the body has been rendered.
        """
        lines = [
            "/**",
            " * This code was generated by wiremap. Changes to this file may cause",
            " * incorrect behavior and will be lost if the code is regenerated.",
            " *",
            f" * Service: {self.service.title} v{self.service.major_version}",
            " */",
            "",
        ]
        for (package, type_only), names in sorted(self._named_imports.items()):
            keyword = "import type" if type_only else "import"
            lines.append(f"{keyword} {{ {', '.join(sorted(names))} }} from '{package}';")
        modules = self.modules()
        for alias in sorted(self.scope.used_modules):
            module = modules[alias]
            keyword = "import type" if module.type_only else "import"
            lines.append(f"{keyword} * as {alias} from '{module.path}';")
        return lines
