# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generator options and their YAML configuration file."""

from wiremap.options.config import (
    GeneratorOptions,
    GeneratorOptionsError,
    load_generator_options,
    parse_generator_options,
)

__all__ = [
    "GeneratorOptions",
    "GeneratorOptionsError",
    "load_generator_options",
    "parse_generator_options",
]
