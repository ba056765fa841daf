# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading of service IR documents from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from wiremap.model.entities import Service

# ###############
# Public Interface
# ###############

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


class IRLoadError(Exception):
    """Raised when an IR document cannot be read, parsed or validated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


def load_service(path: Path) -> Service:
    """Read a service IR document from *path*.

    The format is chosen by file suffix: ``.json`` documents are parsed with
    :mod:`json`, ``.yaml`` and ``.yml`` documents with PyYAML.

    Raises:
        IRLoadError: If the file cannot be read, is not well-formed or does
            not describe a valid service.
    """
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        raise IRLoadError(f"Unsupported IR file type '{path.suffix}': expected .json, .yaml or .yml")
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise IRLoadError(f"IR file not found: {path}") from None
    except OSError as exc:
        raise IRLoadError(f"Cannot read IR file: {exc}") from exc
    if suffix in JSON_SUFFIXES:
        return parse_service_json(text, source_label=str(path))
    return parse_service_yaml(text, source_label=str(path))


def parse_service_json(text: str, source_label: str = "<string>") -> Service:
    """Parse a service IR from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise IRLoadError(f"Invalid JSON in {source_label}: {exc}") from exc
    return _to_service(data, source_label)


def parse_service_yaml(text: str, source_label: str = "<string>") -> Service:
    """Parse a service IR from a YAML string."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise IRLoadError(f"Invalid YAML in {source_label}: {exc}") from exc
    return _to_service(data, source_label)


# ################
# Implementation
# ################


def _to_service(data: Any, source_label: str) -> Service:
    if not isinstance(data, dict):
        raise IRLoadError(f"IR document {source_label} must be a mapping at the top level")
    try:
        return Service.model_validate(data)
    except PydanticValidationError as exc:
        raise IRLoadError(f"Invalid IR document {source_label}:\n{exc}") from exc
