# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the generator options file parser."""

from pathlib import Path

import pytest

from wiremap.options.config import (
    GeneratorOptions,
    GeneratorOptionsError,
    load_generator_options,
    parse_generator_options,
)
from wiremap.rendering.roles import Perspective


class TestParseGeneratorOptions:
    def test_empty_text_gives_defaults(self) -> None:
        assert parse_generator_options("") == GeneratorOptions()

    def test_defaults(self) -> None:
        options = GeneratorOptions()
        assert options.role is Perspective.SERVER
        assert options.types_import_path == "../types"
        assert options.validators_import_path == "../validators"
        assert options.dtos_import_path == "../dtos/types"
        assert options.interface_nomenclature == "service"
        assert options.validation == "zod"
        assert options.include_version is True

    def test_all_keys(self) -> None:
        text = """
role: client
types-import-path: ../model
validators-import-path: ../checks
dtos-import-path: ../wire/types
mappers-import-path: ../wire/mappers
schemas-import-path: ../zod
interface-nomenclature: api
validation: native
include-version: false
"""
        assert parse_generator_options(text) == GeneratorOptions(
            role=Perspective.CLIENT,
            types_import_path="../model",
            validators_import_path="../checks",
            dtos_import_path="../wire/types",
            mappers_import_path="../wire/mappers",
            schemas_import_path="../zod",
            interface_nomenclature="api",
            validation="native",
            include_version=False,
        )

    def test_unknown_key(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="unknown option\\(s\\): typesImportPath"):
            parse_generator_options("typesImportPath: ../types\n")

    def test_invalid_role(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="'role' must be one of client, server"):
            parse_generator_options("role: browser\n")

    def test_non_string_value(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="'validation' must be a string"):
            parse_generator_options("validation: 3\n")

    def test_non_boolean_value(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="'include-version' must be a boolean"):
            parse_generator_options("include-version: maybe\n")

    def test_non_mapping(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="must be a YAML mapping"):
            parse_generator_options("- role\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(GeneratorOptionsError, match="Invalid YAML in opts.yaml"):
            parse_generator_options("role: [client\n", source_label="opts.yaml")


class TestLoadGeneratorOptions:
    def test_load_file(self, tmp_path: Path) -> None:
        path = tmp_path / "wiremap.yaml"
        path.write_text("role: client\n", encoding="utf-8")
        assert load_generator_options(path).role is Perspective.CLIENT

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GeneratorOptionsError, match="not found"):
            load_generator_options(tmp_path / "missing.yaml")
