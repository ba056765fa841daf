# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Closed enumerations describing which representation a value is moving between."""

from __future__ import annotations

from enum import Enum

# ###############
# Public Interface
# ###############


class Facet(Enum):
    """Which representation of a type is being rendered."""

    INTERNAL = "internal"
    WIRE = "wire"


class Direction(Enum):
    """The semantic direction of a value conversion."""

    WIRE_TO_INTERNAL = "wire-to-internal"
    INTERNAL_TO_WIRE = "internal-to-wire"


class Perspective(Enum):
    """Whether generated code runs in the API server or in a client of it."""

    CLIENT = "client"
    SERVER = "server"


class Role(Enum):
    """A mapping role: a perspective combined with a side of the API contract.

    "Inbound" values are API inputs (method parameters) and "outbound" values
    are API outputs (return values). A server reads inputs off the wire and
    writes outputs to it; a client does the opposite.
    """

    SERVER_INBOUND = "server-inbound"
    SERVER_OUTBOUND = "server-outbound"
    CLIENT_INBOUND = "client-inbound"
    CLIENT_OUTBOUND = "client-outbound"

    @property
    def perspective(self) -> Perspective:
        if self in (Role.SERVER_INBOUND, Role.SERVER_OUTBOUND):
            return Perspective.SERVER
        return Perspective.CLIENT

    @property
    def direction(self) -> Direction:
        if self in (Role.SERVER_INBOUND, Role.CLIENT_OUTBOUND):
            return Direction.WIRE_TO_INTERNAL
        return Direction.INTERNAL_TO_WIRE

    @property
    def source(self) -> Facet:
        """The facet a mapper in this role accepts."""
        return Facet.WIRE if self.direction is Direction.WIRE_TO_INTERNAL else Facet.INTERNAL

    @property
    def target(self) -> Facet:
        """The facet a mapper in this role produces."""
        return Facet.INTERNAL if self.direction is Direction.WIRE_TO_INTERNAL else Facet.WIRE

    @classmethod
    def for_inputs(cls, perspective: Perspective) -> Role:
        """Return the role used to map API inputs for *perspective*."""
        return cls.SERVER_INBOUND if perspective is Perspective.SERVER else cls.CLIENT_INBOUND

    @classmethod
    def for_outputs(cls, perspective: Perspective) -> Role:
        """Return the role used to map API outputs for *perspective*."""
        return cls.SERVER_OUTBOUND if perspective is Perspective.SERVER else cls.CLIENT_OUTBOUND
