# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""A small boolean algebra for runtime type tests and the if/else chains built from them."""

from __future__ import annotations

from dataclasses import dataclass, field

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Expression:
    """A literal TypeScript boolean expression."""

    value: str


@dataclass(frozen=True)
class AndClause:
    """Conjunction of conditions."""

    clauses: tuple[Condition, ...] = ()


@dataclass(frozen=True)
class OrClause:
    """Disjunction of conditions."""

    clauses: tuple[Condition, ...] = ()


Condition = Expression | AndClause | OrClause


@dataclass
class ConditionalBlock:
    """Statements guarded by a condition in an if/else chain."""

    condition: Condition
    statements: list[str] = field(default_factory=list)


def expr(value: str) -> Expression:
    return Expression(value)


def and_(*clauses: Condition) -> AndClause:
    return AndClause(tuple(clauses))


def or_(*clauses: Condition) -> OrClause:
    return OrClause(tuple(clauses))


def flatten(condition: Condition) -> Condition:
    """Merge nested clauses of the same kind into their parent."""
    if isinstance(condition, Expression):
        return condition
    merged: list[Condition] = []
    for clause in condition.clauses:
        flat = flatten(clause)
        if type(flat) is type(condition):
            merged.extend(flat.clauses)  # type: ignore[union-attr]
        else:
            merged.append(flat)
    return type(condition)(tuple(merged))


def dedup(conditions: tuple[Condition, ...] | list[Condition]) -> list[Condition]:
    """Remove conditions that render identically, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[Condition] = []
    for condition in conditions:
        rendered = render(condition)
        if rendered not in seen:
            seen.add(rendered)
            unique.append(condition)
    return unique


def render(condition: Condition) -> str:
    """Render *condition* as TypeScript. Nested clauses are parenthesized."""
    return _render(condition, nested=False)


def render_blocks(blocks: list[ConditionalBlock]) -> list[str]:
    """Render blocks as an if/else-if chain whose last block is the ``else`` branch.

    A single block renders as its bare statements.
    """
    if len(blocks) == 1:
        return list(blocks[0].statements)
    lines: list[str] = []
    for i, block in enumerate(blocks):
        if i == len(blocks) - 1:
            lines.append("else {")
        else:
            keyword = "if" if i == 0 else "else if"
            lines.append(f"{keyword} ({render(block.condition)}) {{")
        lines.extend(block.statements)
        lines.append("}")
    return _join_else(lines)


# ################
# Implementation
# ################


def _render(condition: Condition, nested: bool) -> str:
    if isinstance(condition, Expression):
        return condition.value
    operator = " && " if isinstance(condition, AndClause) else " || "
    clauses = dedup(flatten(condition).clauses)  # type: ignore[union-attr]
    if not clauses:
        return "true" if isinstance(condition, AndClause) else "false"
    if len(clauses) == 1:
        return _render(clauses[0], nested)
    text = operator.join(_render(clause, nested=True) for clause in clauses)
    return f"({text})" if nested else text


def _join_else(lines: list[str]) -> list[str]:
    """Pull ``else`` onto the line of the closing brace before it."""
    joined: list[str] = []
    for line in lines:
        if joined and joined[-1] == "}" and line.startswith("else"):
            joined[-1] = f"}} {line}"
        else:
            joined.append(line)
    return joined
