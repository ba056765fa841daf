# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for value classification and name resolution."""

import pytest

from wiremap.model.entities import EnumDef, EnumMember, Service, SimpleUnion, TypeDef
from wiremap.model.types import ComplexValue, MapProperties, Primitive, PrimitiveValue, Property
from wiremap.rendering.classifier import ResolutionKind, ServiceIndex, ValueShape, classify, is_date

# ###############
# Test Helpers
# ###############


def _index() -> ServiceIndex:
    """Return an index over a service declaring one of each kind of declaration."""
    string = PrimitiveValue(type_name=Primitive.STRING)
    return ServiceIndex(
        Service(
            title="Test",
            types=[
                TypeDef(name="widget", properties=[Property(name="id", value=string)]),
                TypeDef(name="labels", map_properties=MapProperties(key=string, value=string)),
            ],
            enums=[EnumDef(name="color", members=[EnumMember(content="red")])],
            unions=[SimpleUnion(name="id", members=[string])],
        )
    )


# ###############
# Resolution
# ###############


class TestResolve:
    def test_primitive(self) -> None:
        assert _index().resolve(PrimitiveValue(type_name=Primitive.STRING)).kind is ResolutionKind.PRIMITIVE

    @pytest.mark.parametrize(
        ("name", "kind"),
        [
            ("widget", ResolutionKind.TYPE),
            ("color", ResolutionKind.ENUM),
            ("id", ResolutionKind.UNION),
            ("missing", ResolutionKind.UNRESOLVED),
        ],
    )
    def test_complex(self, name: str, kind: ResolutionKind) -> None:
        assert _index().resolve(ComplexValue(type_name=name)).kind is kind

    def test_target_is_declaration(self) -> None:
        index = _index()
        assert index.resolve(ComplexValue(type_name="widget")).target is index.get_type("widget")

    def test_is_mapped(self) -> None:
        index = _index()
        assert index.resolve(ComplexValue(type_name="widget")).is_mapped
        assert index.resolve(ComplexValue(type_name="id")).is_mapped
        assert not index.resolve(ComplexValue(type_name="color")).is_mapped
        assert not index.resolve(ComplexValue(type_name="missing")).is_mapped


# ###############
# Classification
# ###############


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "shape"),
        [
            (PrimitiveValue(type_name=Primitive.NUMBER), ValueShape.PRIMITIVE),
            (PrimitiveValue(type_name=Primitive.NUMBER, is_array=True), ValueShape.PRIMITIVE_ARRAY),
            (ComplexValue(type_name="color"), ValueShape.ENUM_REF),
            (ComplexValue(type_name="color", is_array=True), ValueShape.ENUM_REF),
            (ComplexValue(type_name="widget"), ValueShape.COMPLEX_REF),
            (ComplexValue(type_name="widget", is_array=True), ValueShape.COMPLEX_ARRAY),
            (ComplexValue(type_name="id"), ValueShape.COMPLEX_REF),
            (ComplexValue(type_name="labels"), ValueShape.MAP_VALUE),
            (ComplexValue(type_name="labels", is_array=True), ValueShape.COMPLEX_ARRAY),
            (ComplexValue(type_name="missing"), ValueShape.UNRESOLVED),
        ],
    )
    def test_shape(self, value: PrimitiveValue | ComplexValue, shape: ValueShape) -> None:
        assert classify(value, _index()) is shape

    def test_modifiers_do_not_change_shape(self) -> None:
        value = ComplexValue(type_name="widget", is_optional=True, is_nullable=True)
        assert classify(value, _index()) is ValueShape.COMPLEX_REF


class TestIsDate:
    def test_date_primitives(self) -> None:
        assert is_date(PrimitiveValue(type_name=Primitive.DATE))
        assert is_date(PrimitiveValue(type_name=Primitive.DATE_TIME, is_array=True))

    def test_other_values(self) -> None:
        assert not is_date(PrimitiveValue(type_name=Primitive.STRING))
        assert not is_date(ComplexValue(type_name="date"))
