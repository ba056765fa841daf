# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Generation pipeline: IR loading, validation, emission and output."""

from wiremap.generator.build import GenerationError, generate, write_files
from wiremap.generator.loader import IRLoadError, load_service, parse_service_json, parse_service_yaml

__all__ = [
    # Loading
    "load_service",
    "parse_service_json",
    "parse_service_yaml",
    "IRLoadError",
    # Generation
    "generate",
    "write_files",
    "GenerationError",
]
