# Copyright 2026 Wiremap Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation checks for service IR documents.

These checks run before generation and detect IR content that would produce
incorrect or incomplete TypeScript. Problems that only degrade the output are
reported as warnings; problems that make generation impossible are errors.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from wiremap.model.entities import DiscriminatedUnion, Interface, Service, TypeDef
from wiremap.model.types import ComplexValue, PrimitiveValue
from wiremap.rendering.classifier import ResolutionKind, ServiceIndex

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class ValidationWarning:
    """A non-fatal problem detected during validation.

    Code is still generated, but parts of it may be weakly typed or fail at
    runtime for some inputs.

    Attributes:
        message: Human-readable description of the warning.
    """

    message: str


@dataclass(frozen=True)
class ValidationError:
    """A fatal problem detected during validation.

    No code is generated for a service with errors.

    Attributes:
        message: Human-readable description of the error.
    """

    message: str


@dataclass
class ValidationResult:
    """Result of running validation checks.

    Attributes:
        warnings: Non-fatal issues found during validation.
        errors: Fatal errors that prevent generation.
    """

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any fatal validation errors were found."""
        return len(self.errors) > 0


def validate(service: Service) -> ValidationResult:
    """Run all validation checks on a service.

    Checks performed:

    1. **Duplicate names** (error): Types, enums and unions share one
       namespace in the generated code, so a name may be declared only once
       across all three.

    2. **Unresolved references** (warning): A complex value naming no
       declared type, enum or union is rendered as ``unknown`` and passed
       through the mappers unchanged.

    3. **Property limits** (error): An ``ObjectMaxProperties`` rule below the
       number of defined properties and required map keys, or below an
       ``ObjectMinProperties`` rule, cannot be satisfied by any value.

    4. **Required key collisions** (error): A required key of a map clause
       must not repeat the name of a defined property of the same type.

    5. **Discriminated members** (error / warning): Every member of a
       discriminated union must reference a type (error). Each member type
       should declare the discriminator with a constant value (warning);
       mappers cannot be generated for the union otherwise.

    6. **HTTP bindings** (warning): HTTP methods and parameters should name a
       method and parameter of their interface; unmatched bindings produce
       no handler code.

    Args:
        service: The service to validate.

    Returns:
        A :class:`ValidationResult` containing any warnings and errors found.
    """
    index = ServiceIndex(service)
    warnings: list[ValidationWarning] = []
    errors: list[ValidationError] = []

    errors.extend(_check_duplicate_names(service))
    warnings.extend(_check_unresolved_references(service, index))
    for type_def in service.types:
        errors.extend(_check_property_limits(type_def))
        errors.extend(_check_required_keys(type_def))
    for union in service.unions:
        if isinstance(union, DiscriminatedUnion):
            member_errors, member_warnings = _check_discriminated_members(union, index)
            errors.extend(member_errors)
            warnings.extend(member_warnings)
    for interface in service.interfaces:
        warnings.extend(_check_http_bindings(interface))

    return ValidationResult(warnings=warnings, errors=errors)


# ################
# Implementation
# ################


def _check_duplicate_names(service: Service) -> list[ValidationError]:
    seen: dict[str, str] = {}
    errors: list[ValidationError] = []
    declarations = (
        [("type", t.name) for t in service.types]
        + [("enum", e.name) for e in service.enums]
        + [("union", u.name) for u in service.unions]
    )
    for kind, name in declarations:
        if name in seen:
            errors.append(ValidationError(message=f"Duplicate name '{name}': declared as {seen[name]} and {kind}"))
        else:
            seen[name] = kind
    return errors


def _referenced_values(service: Service) -> Iterator[tuple[str, PrimitiveValue | ComplexValue]]:
    """Yield every value of the service together with a label of where it occurs."""
    for type_def in service.types:
        for prop in type_def.properties:
            yield f"property '{type_def.name}.{prop.name}'", prop.value
        if type_def.map_properties is not None:
            yield f"map key of '{type_def.name}'", type_def.map_properties.key
            yield f"map value of '{type_def.name}'", type_def.map_properties.value
    for union in service.unions:
        for member in union.members:
            yield f"member of union '{union.name}'", member
    for interface in service.interfaces:
        for method in interface.methods:
            for param in method.parameters:
                yield f"parameter '{method.name}.{param.name}'", param.value
            if method.returns is not None:
                yield f"return value of '{method.name}'", method.returns


def _check_unresolved_references(service: Service, index: ServiceIndex) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    for location, value in _referenced_values(service):
        if index.resolve(value).kind is ResolutionKind.UNRESOLVED:
            message = f"Unresolved reference '{value.type_name}' in {location}; rendered as unknown"
            warnings.append(ValidationWarning(message=message))
    return warnings


def _check_property_limits(type_def: TypeDef) -> list[ValidationError]:
    maximum = type_def.max_properties
    if maximum is None:
        return []
    errors: list[ValidationError] = []
    required_keys = type_def.map_properties.required_keys if type_def.map_properties is not None else []
    count = len(type_def.properties) + len(required_keys)
    if maximum < count:
        errors.append(
            ValidationError(
                message=f"Type '{type_def.name}' allows at most {maximum} properties but defines {count}"
            )
        )
    minimum = type_def.min_properties
    if minimum is not None and minimum > maximum:
        errors.append(
            ValidationError(
                message=f"Type '{type_def.name}' requires at least {minimum} properties but allows at most {maximum}"
            )
        )
    return errors


def _check_required_keys(type_def: TypeDef) -> list[ValidationError]:
    if type_def.map_properties is None:
        return []
    defined = {prop.name for prop in type_def.properties}
    return [
        ValidationError(message=f"Required key '{key}' of type '{type_def.name}' collides with a defined property")
        for key in type_def.map_properties.required_keys
        if key in defined
    ]


def _check_discriminated_members(
    union: DiscriminatedUnion, index: ServiceIndex
) -> tuple[list[ValidationError], list[ValidationWarning]]:
    errors: list[ValidationError] = []
    warnings: list[ValidationWarning] = []
    for member in union.members:
        resolution = index.resolve(member)
        if resolution.kind is ResolutionKind.UNRESOLVED:
            continue
        if not isinstance(resolution.target, TypeDef):
            errors.append(
                ValidationError(
                    message=f"Member '{member.type_name}' of discriminated union '{union.name}' is not a type"
                )
            )
            continue
        prop = next((p for p in resolution.target.properties if p.name == union.discriminator), None)
        if prop is None or not isinstance(prop.value, PrimitiveValue) or prop.value.constant is None:
            warnings.append(
                ValidationWarning(
                    message=(
                        f"Member '{member.type_name}' of discriminated union '{union.name}' "
                        f"has no constant value for discriminator '{union.discriminator}'"
                    )
                )
            )
    return errors, warnings


def _check_http_bindings(interface: Interface) -> list[ValidationWarning]:
    warnings: list[ValidationWarning] = []
    methods = {method.name: method for method in interface.methods}
    for route in interface.http:
        for http_method in route.methods:
            method = methods.get(http_method.name)
            if method is None:
                warnings.append(
                    ValidationWarning(
                        message=f"HTTP binding '{route.pattern}' references unknown method '{http_method.name}'"
                    )
                )
                continue
            parameters = {param.name for param in method.parameters}
            for http_param in http_method.parameters:
                if http_param.name not in parameters:
                    warnings.append(
                        ValidationWarning(
                            message=(
                                f"HTTP binding of method '{method.name}' references unknown parameter "
                                f"'{http_param.name}'"
                            )
                        )
                    )
    return warnings
