# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for the wiremap IR validation checks."""

from wiremap.model.entities import (
    DiscriminatedUnion,
    EnumDef,
    EnumMember,
    HttpMethod,
    HttpParameter,
    HttpRoute,
    Interface,
    Method,
    Parameter,
    Service,
    SimpleUnion,
    TypeDef,
)
from wiremap.model.types import (
    ComplexValue,
    Constant,
    MapProperties,
    ObjectMaxPropertiesRule,
    ObjectMinPropertiesRule,
    Primitive,
    PrimitiveValue,
    Property,
)
from wiremap.validation.checks import ValidationError, ValidationResult, ValidationWarning, validate

# ###############
# Test Helpers
# ###############


def _string(**modifiers: object) -> PrimitiveValue:
    """Create a string primitive value."""
    return PrimitiveValue(type_name=Primitive.STRING, **modifiers)


def _ref(name: str, **modifiers: object) -> ComplexValue:
    """Create a reference to a named declaration."""
    return ComplexValue(type_name=name, **modifiers)


def _prop(name: str, value: PrimitiveValue | ComplexValue) -> Property:
    return Property(name=name, value=value)


def _tagged(name: str, tag: str | None, discriminator: str = "type") -> TypeDef:
    """Create a record whose discriminator property has the constant *tag*."""
    constant = Constant(value=tag) if tag is not None else None
    return TypeDef(name=name, properties=[_prop(discriminator, _string(constant=constant))])


def _service(**kwargs: object) -> Service:
    return Service(title="Test", **kwargs)


def _warnings(result: ValidationResult) -> list[str]:
    return [w.message for w in result.warnings]


def _errors(result: ValidationResult) -> list[str]:
    return [e.message for e in result.errors]


def _assert_clean(service: Service) -> None:
    result = validate(service)
    assert result.warnings == [], f"Expected no warnings but got: {_warnings(result)}"
    assert result.errors == [], f"Expected no errors but got: {_errors(result)}"


def _assert_warning(service: Service, fragment: str) -> None:
    msgs = _warnings(validate(service))
    assert any(fragment in m for m in msgs), f"Expected warning containing {fragment!r} but got: {msgs}"


def _assert_error(service: Service, fragment: str) -> None:
    msgs = _errors(validate(service))
    assert any(fragment in m for m in msgs), f"Expected error containing {fragment!r} but got: {msgs}"


# ###############
# Result Types
# ###############


class TestValidationResult:
    def test_empty_result_has_no_errors(self) -> None:
        assert not ValidationResult().has_errors

    def test_warnings_only_has_no_errors(self) -> None:
        assert not ValidationResult(warnings=[ValidationWarning(message="w")]).has_errors

    def test_errors_set_has_errors(self) -> None:
        assert ValidationResult(errors=[ValidationError(message="e")]).has_errors

    def test_empty_service_is_clean(self) -> None:
        _assert_clean(_service())


# ###############
# Duplicate Names
# ###############


class TestDuplicateNames:
    """Check 1: types, enums and unions share one namespace."""

    def test_duplicate_type_names(self) -> None:
        service = _service(types=[TypeDef(name="widget"), TypeDef(name="widget")])
        _assert_error(service, "Duplicate name 'widget'")

    def test_type_and_enum_with_same_name(self) -> None:
        service = _service(
            types=[TypeDef(name="color")],
            enums=[EnumDef(name="color", members=[EnumMember(content="red")])],
        )
        _assert_error(service, "declared as type and enum")

    def test_distinct_names_are_clean(self) -> None:
        service = _service(
            types=[TypeDef(name="widget")],
            enums=[EnumDef(name="color", members=[EnumMember(content="red")])],
            unions=[SimpleUnion(name="id", members=[_string()])],
        )
        _assert_clean(service)


# ###############
# Unresolved References
# ###############


class TestUnresolvedReferences:
    """Check 2: references to undeclared names are warnings."""

    def test_unresolved_property_reference_warns(self) -> None:
        service = _service(types=[TypeDef(name="widget", properties=[_prop("part", _ref("part"))])])
        _assert_warning(service, "Unresolved reference 'part' in property 'widget.part'")

    def test_unresolved_reference_is_not_an_error(self) -> None:
        service = _service(types=[TypeDef(name="widget", properties=[_prop("part", _ref("part"))])])
        assert not validate(service).has_errors

    def test_unresolved_union_member_warns(self) -> None:
        service = _service(unions=[SimpleUnion(name="either", members=[_ref("missing"), _string()])])
        _assert_warning(service, "member of union 'either'")

    def test_unresolved_return_value_warns(self) -> None:
        interface = Interface(name="widget", methods=[Method(name="getWidget", returns=_ref("missing"))])
        _assert_warning(_service(interfaces=[interface]), "return value of 'getWidget'")

    def test_unresolved_map_value_warns(self) -> None:
        type_def = TypeDef(name="bag", map_properties=MapProperties(key=_string(), value=_ref("missing")))
        _assert_warning(_service(types=[type_def]), "map value of 'bag'")

    def test_resolved_references_are_clean(self) -> None:
        service = _service(
            types=[TypeDef(name="widget", properties=[_prop("part", _ref("part"))]), TypeDef(name="part")]
        )
        _assert_clean(service)


# ###############
# Property Limits
# ###############


class TestPropertyLimits:
    """Check 3: unsatisfiable property count rules are errors."""

    def test_max_below_defined_count(self) -> None:
        type_def = TypeDef(
            name="pair",
            properties=[_prop("a", _string()), _prop("b", _string())],
            rules=[ObjectMaxPropertiesRule(max=1)],
        )
        _assert_error(_service(types=[type_def]), "Type 'pair' allows at most 1 properties but defines 2")

    def test_max_equal_to_defined_count_is_clean(self) -> None:
        type_def = TypeDef(
            name="pair",
            properties=[_prop("a", _string()), _prop("b", _string())],
            rules=[ObjectMaxPropertiesRule(max=2)],
        )
        _assert_clean(_service(types=[type_def]))

    def test_min_above_max(self) -> None:
        type_def = TypeDef(name="bag", rules=[ObjectMinPropertiesRule(min=3), ObjectMaxPropertiesRule(max=2)])
        _assert_error(_service(types=[type_def]), "requires at least 3 properties")


# ###############
# Required Keys
# ###############


class TestRequiredKeys:
    """Check 4: required map keys must not repeat defined property names."""

    def test_colliding_required_key(self) -> None:
        type_def = TypeDef(
            name="bag",
            properties=[_prop("id", _string())],
            map_properties=MapProperties(key=_string(), value=_string(), required_keys=["id"]),
        )
        _assert_error(_service(types=[type_def]), "Required key 'id' of type 'bag'")

    def test_distinct_required_key_is_clean(self) -> None:
        type_def = TypeDef(
            name="bag",
            properties=[_prop("id", _string())],
            map_properties=MapProperties(key=_string(), value=_string(), required_keys=["name"]),
        )
        _assert_clean(_service(types=[type_def]))


# ###############
# Discriminated Members
# ###############


class TestDiscriminatedMembers:
    """Check 5: discriminated union members must be records tagged with a constant."""

    def test_tagged_members_are_clean(self) -> None:
        service = _service(
            types=[_tagged("square", "square"), _tagged("circle", "circle")],
            unions=[DiscriminatedUnion(name="shape", discriminator="type", members=[_ref("square"), _ref("circle")])],
        )
        _assert_clean(service)

    def test_member_without_constant_warns(self) -> None:
        service = _service(
            types=[_tagged("square", "square"), _tagged("circle", None)],
            unions=[DiscriminatedUnion(name="shape", discriminator="type", members=[_ref("square"), _ref("circle")])],
        )
        _assert_warning(service, "Member 'circle' of discriminated union 'shape' has no constant value")
        assert not validate(service).has_errors

    def test_member_without_discriminator_property_warns(self) -> None:
        service = _service(
            types=[_tagged("square", "square"), TypeDef(name="circle")],
            unions=[DiscriminatedUnion(name="shape", discriminator="type", members=[_ref("square"), _ref("circle")])],
        )
        _assert_warning(service, "discriminator 'type'")

    def test_enum_member_is_an_error(self) -> None:
        service = _service(
            types=[_tagged("square", "square")],
            enums=[EnumDef(name="color", members=[EnumMember(content="red")])],
            unions=[DiscriminatedUnion(name="shape", discriminator="type", members=[_ref("square"), _ref("color")])],
        )
        _assert_error(service, "Member 'color' of discriminated union 'shape' is not a type")


# ###############
# HTTP Bindings
# ###############


class TestHttpBindings:
    """Check 6: HTTP bindings must match interface methods and parameters."""

    def test_unknown_method_warns(self) -> None:
        interface = Interface(
            name="widget",
            http=[HttpRoute(pattern="/widgets", methods=[HttpMethod(name="listWidgets", verb="get")])],
        )
        _assert_warning(_service(interfaces=[interface]), "unknown method 'listWidgets'")

    def test_unknown_parameter_warns(self) -> None:
        interface = Interface(
            name="widget",
            methods=[Method(name="getWidget", parameters=[Parameter(name="id", value=_string())])],
            http=[
                HttpRoute(
                    pattern="/widgets/{widgetId}",
                    methods=[
                        HttpMethod(
                            name="getWidget",
                            verb="get",
                            parameters=[HttpParameter(name="widgetId", location="path")],
                        )
                    ],
                )
            ],
        )
        _assert_warning(_service(interfaces=[interface]), "unknown parameter 'widgetId'")

    def test_matching_binding_is_clean(self) -> None:
        interface = Interface(
            name="widget",
            methods=[Method(name="getWidget", parameters=[Parameter(name="id", value=_string())])],
            http=[
                HttpRoute(
                    pattern="/widgets/{id}",
                    methods=[
                        HttpMethod(name="getWidget", verb="get", parameters=[HttpParameter(name="id", location="path")])
                    ],
                )
            ],
        )
        _assert_clean(_service(interfaces=[interface]))
