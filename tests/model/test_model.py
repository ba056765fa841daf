# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the wiremap IR models."""

import pytest
from pydantic import ValidationError

from wiremap.model.entities import DiscriminatedUnion, Service, SimpleUnion, TypeDef
from wiremap.model.types import (
    ComplexValue,
    Constant,
    ObjectMaxPropertiesRule,
    ObjectMinPropertiesRule,
    Primitive,
    PrimitiveValue,
    as_optional,
    as_required,
    is_required,
)

# ###############
# Test Helpers
# ###############


def _document() -> dict:
    """Return a small IR document using the camelCase keys of the JSON format."""
    return {
        "title": "Widgets",
        "majorVersion": 2,
        "types": [
            {
                "name": "widget",
                "properties": [
                    {"name": "id", "value": {"kind": "PrimitiveValue", "typeName": "string"}},
                    {
                        "name": "parts",
                        "value": {"kind": "ComplexValue", "typeName": "part", "isArray": True, "isOptional": True},
                    },
                ],
                "rules": [{"id": "ObjectMaxProperties", "max": 4}],
            }
        ],
        "unions": [
            {
                "kind": "DiscriminatedUnion",
                "name": "shape",
                "discriminator": "type",
                "members": [{"kind": "ComplexValue", "typeName": "square"}],
            },
            {
                "kind": "SimpleUnion",
                "name": "id",
                "members": [
                    {"kind": "PrimitiveValue", "typeName": "string"},
                    {"kind": "PrimitiveValue", "typeName": "number"},
                ],
            },
        ],
    }


# ###############
# Document Parsing
# ###############


class TestDocumentParsing:
    def test_camel_case_keys(self) -> None:
        service = Service.model_validate(_document())
        assert service.major_version == 2
        parts = service.types[0].properties[1].value
        assert isinstance(parts, ComplexValue)
        assert parts.type_name == "part"
        assert parts.is_array
        assert parts.is_optional
        assert not parts.is_nullable

    def test_value_kind_selects_model(self) -> None:
        service = Service.model_validate(_document())
        assert isinstance(service.types[0].properties[0].value, PrimitiveValue)
        assert service.types[0].properties[0].value.type_name is Primitive.STRING

    def test_union_kind_selects_model(self) -> None:
        service = Service.model_validate(_document())
        assert isinstance(service.unions[0], DiscriminatedUnion)
        assert isinstance(service.unions[1], SimpleUnion)

    def test_rules_parse_by_id(self) -> None:
        service = Service.model_validate(_document())
        assert service.types[0].rules == [ObjectMaxPropertiesRule(max=4)]
        assert service.types[0].max_properties == 4
        assert service.types[0].min_properties is None

    def test_unknown_key_is_rejected(self) -> None:
        document = _document()
        document["types"][0]["colour"] = "red"
        with pytest.raises(ValidationError):
            Service.model_validate(document)

    def test_unknown_primitive_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PrimitiveValue.model_validate({"typeName": "decimal"})

    def test_snake_case_names_are_accepted(self) -> None:
        value = PrimitiveValue(type_name=Primitive.DATE_TIME, is_nullable=True)
        assert value.type_name is Primitive.DATE_TIME
        assert value.is_nullable

    def test_defaults(self) -> None:
        service = Service(title="Empty")
        assert service.major_version == 1
        assert service.interfaces == []
        assert service.types == []


# ###############
# Constants
# ###############


class TestConstants:
    @pytest.mark.parametrize("literal", ["square", 1, 2.5, True, None])
    def test_literal_kinds(self, literal: object) -> None:
        assert Constant.model_validate({"value": literal}).value == literal

    def test_boolean_stays_boolean(self) -> None:
        assert Constant.model_validate({"value": True}).value is True


# ###############
# Modifiers
# ###############


class TestModifiers:
    def test_is_required(self) -> None:
        assert is_required(ComplexValue(type_name="a"))
        assert not is_required(ComplexValue(type_name="a", is_optional=True))

    def test_as_optional_copies(self) -> None:
        value = ComplexValue(type_name="a", is_array=True)
        optional = as_optional(value)
        assert optional.is_optional
        assert optional.is_array
        assert not value.is_optional

    def test_as_required_returns_same_when_required(self) -> None:
        value = PrimitiveValue(type_name=Primitive.STRING)
        assert as_required(value) is value

    def test_as_required_clears_optional(self) -> None:
        assert not as_required(PrimitiveValue(type_name=Primitive.STRING, is_optional=True)).is_optional


class TestTypeDefRules:
    def test_min_and_max(self) -> None:
        type_def = TypeDef(name="bag", rules=[ObjectMinPropertiesRule(min=1), ObjectMaxPropertiesRule(max=3)])
        assert type_def.min_properties == 1
        assert type_def.max_properties == 3
