# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Errors raised when a type declaration or mapper cannot be rendered correctly."""

from __future__ import annotations

# ###############
# Public Interface
# ###############


class RenderError(Exception):
    """Base class for conditions that prevent correct code from being emitted."""


class NoDiscriminatingHeuristicError(RenderError):
    """Raised when members of a simple union cannot be told apart at runtime."""

    def __init__(self, union_name: str, member_names: list[str]) -> None:
        self.union_name = union_name
        self.member_names = member_names
        super().__init__(
            f"Union '{union_name}': no heuristic distinguishes members {', '.join(member_names)}"
        )


class MissingDiscriminatorValueError(RenderError):
    """Raised when a discriminated union member has no constant discriminator value."""

    def __init__(self, union_name: str, member_name: str, discriminator: str) -> None:
        self.union_name = union_name
        self.member_name = member_name
        self.discriminator = discriminator
        super().__init__(
            f"Union '{union_name}': member '{member_name}' has no constant value "
            f"for discriminator '{discriminator}'"
        )


class InvalidMaxPropertiesError(RenderError):
    """Raised when a type's maximum property count is below its defined property count."""

    def __init__(self, type_name: str, maximum: int, count: int) -> None:
        self.type_name = type_name
        self.maximum = maximum
        self.count = count
        super().__init__(
            f"Type '{type_name}': maximum of {maximum} properties is less than its "
            f"{count} declared and required-key properties"
        )
