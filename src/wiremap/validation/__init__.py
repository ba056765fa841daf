# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Checks run on a service IR before code is generated."""

from wiremap.validation.checks import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
