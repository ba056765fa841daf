# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier casing and spelling rules for generated TypeScript.

Every IR name has two spellings: the *wire* spelling (the raw name, as it
appears in JSON payloads) and the *idiomatic* spelling (camelCase for members,
PascalCase for declarations).
"""

from __future__ import annotations

import re

from wiremap.model.types import ConstantLiteral

# ###############
# Public Interface
# ###############


def words(name: str) -> list[str]:
    """Split *name* into words on separators and case boundaries."""
    spaced = _SEPARATORS.sub(" ", name)
    spaced = _LOWER_UPPER.sub(r"\1 \2", spaced)
    spaced = _ACRONYM.sub(r"\1 \2", spaced)
    return spaced.split()


def camel(name: str) -> str:
    """Return the camelCase spelling of *name* (``page_size`` -> ``pageSize``)."""
    parts = words(name)
    if not parts:
        return name
    return parts[0].lower() + "".join(_capitalize(part) for part in parts[1:])


def pascal(name: str) -> str:
    """Return the PascalCase spelling of *name* (``widget_part`` -> ``WidgetPart``)."""
    return "".join(_capitalize(part) for part in words(name)) or name


def title(name: str) -> str:
    """Return *name* as space separated capitalized words."""
    return " ".join(_capitalize(part) for part in words(name))


def is_identifier(name: str) -> bool:
    """Return True if *name* is a valid TypeScript identifier."""
    return _IDENTIFIER.match(name) is not None


def quote(text: str) -> str:
    """Return *text* as a single-quoted TypeScript string literal."""
    escaped = text.replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n").replace("\t", "\\t")
    return f"'{escaped}'"


def literal(value: ConstantLiteral) -> str:
    """Render a constant as a TypeScript literal."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quote(value)
    return repr(value)


def member_key(name: str) -> str:
    """Return *name* as an object key, quoted only when it is not an identifier."""
    return name if is_identifier(name) else quote(name)


def accessor(name: str) -> str:
    """Return a member access suffix for *name* (``.foo`` or ``['foo-bar']``)."""
    return f".{name}" if is_identifier(name) else f"[{quote(name)}]"


def property_name(name: str) -> str:
    """Idiomatic spelling of a property or parameter name."""
    return camel(name)


def local_name(name: str) -> str:
    """Spelling of *name* as a local variable, avoiding reserved words."""
    candidate = camel(name)
    if not is_identifier(candidate) or candidate in _RESERVED_WORDS:
        return f"_{candidate}"
    return candidate


def type_name(name: str) -> str:
    """Idiomatic spelling of a declared type, enum or union name."""
    return pascal(name)


def dto_name(name: str) -> str:
    """Spelling of the over-the-wire representation of a declared type or union."""
    return f"{pascal(name)}Dto"


def interface_name(name: str, nomenclature: str) -> str:
    """Spelling of a service interface (``widget`` + ``service`` -> ``WidgetService``)."""
    return pascal(f"{name}_{nomenclature}")


def method_name(name: str) -> str:
    """Idiomatic spelling of a service method."""
    return camel(name)


def params_type_name(method: str) -> str:
    """Name of the type holding a method's parameters."""
    return pascal(f"{method}_params")


def handler_name(method: str) -> str:
    """Name of the Express handler factory for a method."""
    return camel(f"handle_{method}")


def request_handler_type_name(method: str) -> str:
    """Name of the Express ``RequestHandler`` type for a method."""
    return pascal(f"{method}_request_handler")


def type_guard_name(name: str) -> str:
    """Name of the type guard narrowing a union to *name*."""
    return camel(f"is_{pascal(name)}")


# ################
# Implementation
# ################

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM = re.compile(r"([A-Z]+)([A-Z][a-z])")
_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_RESERVED_WORDS = frozenset(
    {
        "break", "case", "catch", "class", "const", "continue", "debugger", "default", "delete", "do",
        "else", "enum", "export", "extends", "false", "finally", "for", "function", "if", "import", "in",
        "instanceof", "new", "null", "return", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with", "let", "static", "yield", "await",
    }
)  # fmt: skip


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()
