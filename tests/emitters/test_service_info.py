# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for input/output reachability of types and unions."""

from wiremap.emitters.service_info import ServiceInfo
from wiremap.model.entities import Interface, Method, Parameter, Service, SimpleUnion, TypeDef
from wiremap.model.types import ComplexValue, MapProperties, Primitive, PrimitiveValue, Property
from wiremap.rendering.classifier import ServiceIndex

# ###############
# Test Helpers
# ###############


def _ref(name: str) -> ComplexValue:
    return ComplexValue(type_name=name)


def _info() -> ServiceInfo:
    """Return reachability for a service with nested input and output types."""
    string = PrimitiveValue(type_name=Primitive.STRING)
    service = Service(
        title="Test",
        interfaces=[
            Interface(
                name="widget",
                methods=[
                    Method(name="createWidget", parameters=[Parameter(name="body", value=_ref("new_widget"))]),
                    Method(name="getWidget", returns=_ref("widget_or_error")),
                ],
            )
        ],
        types=[
            TypeDef(name="new_widget", properties=[Property(name="labels", value=_ref("labels"))]),
            TypeDef(name="labels", map_properties=MapProperties(key=string, value=_ref("label"))),
            TypeDef(name="label", properties=[Property(name="text", value=string)]),
            TypeDef(name="widget", properties=[Property(name="labels", value=_ref("labels"))]),
            TypeDef(name="error"),
            TypeDef(name="unused"),
        ],
        unions=[SimpleUnion(name="widget_or_error", members=[_ref("widget"), _ref("error")])],
    )
    return ServiceInfo(ServiceIndex(service))


def _names(declarations: list) -> list[str]:
    return [d.name for d in declarations]


class TestServiceInfo:
    def test_input_types_follow_properties_and_maps(self) -> None:
        assert _names(_info().input_types) == ["label", "labels", "new_widget"]
        assert _info().input_unions == []

    def test_output_types_follow_unions(self) -> None:
        info = _info()
        assert _names(info.output_types) == ["error", "label", "labels", "widget"]
        assert _names(info.output_unions) == ["widget_or_error"]

    def test_all_declarations_are_sorted(self) -> None:
        info = _info()
        assert _names(info.types) == ["error", "label", "labels", "new_widget", "unused", "widget"]
        assert _names(info.unions) == ["widget_or_error"]

    def test_self_reference_terminates(self) -> None:
        service = Service(
            title="Test",
            interfaces=[Interface(name="tree", methods=[Method(name="getTree", returns=_ref("node"))])],
            types=[TypeDef(name="node", properties=[Property(name="children", value=_ref("node"))])],
        )
        assert _names(ServiceInfo(ServiceIndex(service)).output_types) == ["node"]
