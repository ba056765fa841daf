# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the wiremap generator options file.

Example ``wiremap.yaml``::

    role: server
    types-import-path: ../types
    interface-nomenclature: service
    validation: zod
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from wiremap.rendering.roles import Perspective

# ###############
# Public Interface
# ###############


class GeneratorOptionsError(Exception):
    """Raised when a generator options file is invalid or cannot be loaded."""


@dataclass
class GeneratorOptions:
    """Options controlling what the generators emit.

    Attributes:
        role: Whether the generated code runs in the API server or in a client.
            Selects which mappers read from and which write to the wire.
        types_import_path: Import path of the internal types module, relative
            to the ``dtos`` and ``express`` directories.
        validators_import_path: Import path of the validators module.
        dtos_import_path: Import path of the DTO types module from ``express``.
        mappers_import_path: Import path of the mappers module from ``express``.
        schemas_import_path: Import path of the zod schemas module.
        interface_nomenclature: Suffix of generated service interface names.
        validation: ``zod`` to parse parameters with zod schemas; any other
            value uses the validators module.
        include_version: Prefix output paths with ``v<major version>``.
    """

    role: Perspective = Perspective.SERVER
    types_import_path: str = "../types"
    validators_import_path: str = "../validators"
    dtos_import_path: str = "../dtos/types"
    mappers_import_path: str = "../dtos/mappers"
    schemas_import_path: str = "../schemas"
    interface_nomenclature: str = "service"
    validation: str = "zod"
    include_version: bool = True


def load_generator_options(path: Path) -> GeneratorOptions:
    """Load and parse a generator options file.

    Args:
        path: Path to the YAML options file.

    Returns:
        A GeneratorOptions instance; keys absent from the file keep their defaults.

    Raises:
        GeneratorOptionsError: If the file cannot be read or the options are invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise GeneratorOptionsError(f"Generator options file not found: {path}") from None
    except OSError as exc:
        raise GeneratorOptionsError(f"Cannot read generator options file: {exc}") from exc

    return parse_generator_options(text, source_label=str(path))


def parse_generator_options(text: str, source_label: str = "<string>") -> GeneratorOptions:
    """Parse generator options YAML text.

    Raises:
        GeneratorOptionsError: If the YAML is invalid, contains unknown keys,
            or a value has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise GeneratorOptionsError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return GeneratorOptions()
    if not isinstance(data, dict):
        raise GeneratorOptionsError(f"{source_label}: generator options must be a YAML mapping")

    known = {f.name.replace("_", "-"): f.name for f in fields(GeneratorOptions)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise GeneratorOptionsError(f"{source_label}: unknown option(s): {', '.join(unknown)}")

    values: dict[str, object] = {}
    for key, attribute in known.items():
        if key not in data:
            continue
        if attribute == "role":
            values[attribute] = _parse_role(data[key], source_label)
        elif attribute == "include_version":
            values[attribute] = _require_bool(data, key, source_label)
        else:
            values[attribute] = _require_string(data, key, source_label)
    return GeneratorOptions(**values)  # type: ignore[arg-type]


# ################
# Implementation
# ################


def _parse_role(value: object, source_label: str) -> Perspective:
    try:
        return Perspective(value)
    except ValueError:
        choices = ", ".join(p.value for p in Perspective)
        raise GeneratorOptionsError(f"{source_label}: 'role' must be one of {choices}") from None


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    value = mapping[key]
    if not isinstance(value, str):
        raise GeneratorOptionsError(f"{source_label}: '{key}' must be a string")
    return value


def _require_bool(mapping: dict[str, object], key: str, source_label: str) -> bool:
    value = mapping[key]
    if not isinstance(value, bool):
        raise GeneratorOptionsError(f"{source_label}: '{key}' must be a boolean")
    return value
