"""Unified exception hierarchy for AutoConstruct.

All library exceptions inherit from AutoConstructException, enabling unified
error handling in test code. Every error is raised at the call that detects
it and is never recovered internally.

Categories:
- SignatureResolutionException: constructor discovery and disambiguation
- InjectionException: invalid or conflicting injections
- ConstructionException: failures while building the object under test
"""

from __future__ import annotations

from typing import Any

from autoconstruct.kernel.types import describe_type, describe_types

# =============================================================================
# Base Exception
# =============================================================================


class AutoConstructException(Exception):
    """Base exception for all AutoConstruct errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "AUTOCONSTRUCT_UNMOCKABLE_TYPE").
        context: Arbitrary key-value pairs naming the offending type/parameter.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Signature Resolution Exceptions
# =============================================================================


class SignatureResolutionException(AutoConstructException):
    """The constructor to build the target with could not be determined."""


class NoPublicConstructorError(SignatureResolutionException):
    """The target type exposes no public constructor."""

    def __init__(self, target: type) -> None:
        self.target = target
        super().__init__(
            f"There are no public constructors for type {describe_type(target)}.",
            code="AUTOCONSTRUCT_NO_PUBLIC_CONSTRUCTOR",
            context={"target": describe_type(target)},
        )


class AmbiguousConstructorError(SignatureResolutionException):
    """The target type has several public constructors and none was selected."""

    def __init__(self, target: type, count: int) -> None:
        self.target = target
        self.count = count
        super().__init__(
            f"There is more than one public constructor for type {describe_type(target)}. "
            "Pass the constructor parameter types to disambiguate.",
            code="AUTOCONSTRUCT_AMBIGUOUS_CONSTRUCTOR",
            context={"target": describe_type(target), "constructors": count},
        )


class NoMatchingConstructorError(SignatureResolutionException):
    """No public constructor has exactly the requested parameter types."""

    def __init__(self, target: type, parameter_types: tuple[Any, ...]) -> None:
        self.target = target
        self.parameter_types = parameter_types
        super().__init__(
            f"No constructor of {describe_type(target)} matches ({describe_types(parameter_types)})",
            code="AUTOCONSTRUCT_NO_MATCHING_CONSTRUCTOR",
            context={
                "target": describe_type(target),
                "parameter_types": [describe_type(tp) for tp in parameter_types],
            },
        )


class UnresolvableAnnotationError(SignatureResolutionException):
    """A constructor annotation could not be evaluated to a type."""

    def __init__(self, target: type, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(
            f"Cannot resolve constructor annotations of {describe_type(target)}: {reason}",
            code="AUTOCONSTRUCT_UNRESOLVABLE_ANNOTATION",
            context={"target": describe_type(target)},
        )


# =============================================================================
# Injection Exceptions
# =============================================================================


class InjectionException(AutoConstructException):
    """An injected value was rejected by the bound constructor signature."""


class UnknownParameterNameError(InjectionException):
    """Named injection for a name the constructor does not declare."""

    def __init__(self, target: type, parameter_name: str) -> None:
        self.target = target
        self.parameter_name = parameter_name
        super().__init__(
            f"Named parameter {parameter_name} is not among formal parameters of the "
            f"{describe_type(target)} constructor.",
            code="AUTOCONSTRUCT_UNKNOWN_PARAMETER_NAME",
            context={"target": describe_type(target), "parameter": parameter_name},
        )


class ParameterTypeMismatchError(InjectionException):
    """Named injection whose type differs from the declared parameter type."""

    def __init__(self, parameter_name: str, expected_type: Any, actual_type: Any) -> None:
        self.parameter_name = parameter_name
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"Named parameter {parameter_name} is not of type {describe_type(expected_type)}",
            code="AUTOCONSTRUCT_PARAMETER_TYPE_MISMATCH",
            context={
                "parameter": parameter_name,
                "expected": describe_type(expected_type),
                "actual": describe_type(actual_type),
            },
        )


class UnusedParameterTypeError(InjectionException):
    """Unnamed injection whose type matches no constructor parameter."""

    def __init__(self, target: type, parameter_type: Any) -> None:
        self.target = target
        self.parameter_type = parameter_type
        super().__init__(
            f"Cannot autoinject parameter of type {describe_type(parameter_type)} "
            f"as it is not used in the constructor of {describe_type(target)}",
            code="AUTOCONSTRUCT_UNUSED_PARAMETER_TYPE",
            context={"target": describe_type(target), "type": describe_type(parameter_type)},
        )


class DuplicateNamedInjectionError(InjectionException):
    """A second named injection for the same parameter name."""

    def __init__(self, parameter_name: str) -> None:
        self.parameter_name = parameter_name
        super().__init__(
            f"Named parameter {parameter_name} has already been injected.",
            code="AUTOCONSTRUCT_DUPLICATE_NAMED_INJECTION",
            context={"parameter": parameter_name},
        )


class DuplicateUnnamedInjectionError(InjectionException):
    """A second unnamed injection for the same type."""

    def __init__(self, parameter_type: Any) -> None:
        self.parameter_type = parameter_type
        super().__init__(
            f"Unnamed parameter of type {describe_type(parameter_type)} has already been injected.",
            code="AUTOCONSTRUCT_DUPLICATE_UNNAMED_INJECTION",
            context={"type": describe_type(parameter_type)},
        )


# =============================================================================
# Construction Exceptions
# =============================================================================


class ConstructionException(AutoConstructException):
    """The object under test could not be built."""


class UnmockableTypeError(ConstructionException):
    """A parameter left unfilled has a type no substitute can be generated for."""

    def __init__(self, mocked_type: Any) -> None:
        self.mocked_type = mocked_type
        super().__init__(
            f"Cannot generate a mock for type {describe_type(mocked_type)}: "
            "only protocols and abstract classes can be mocked.",
            code="AUTOCONSTRUCT_UNMOCKABLE_TYPE",
            context={"type": describe_type(mocked_type)},
        )


class AlreadyConstructedError(ConstructionException):
    """``build()`` was called more than once on the same context."""

    def __init__(self, target: type) -> None:
        self.target = target
        super().__init__(
            f"build() may only be called once per ConstructorContext ({describe_type(target)}).",
            code="AUTOCONSTRUCT_ALREADY_CONSTRUCTED",
            context={"target": describe_type(target)},
        )


class InstantiationError(ConstructionException):
    """The resolved arguments do not bind to the selected constructor.

    Signature resolution guarantees compatibility, so this signals an
    inconsistent metadata provider rather than a mistake in the test.
    """

    def __init__(self, target: type, selector: str, reason: str) -> None:
        self.target = target
        self.selector = selector
        self.reason = reason
        super().__init__(
            f"Arguments do not fit {describe_type(target)}.{selector}: {reason}",
            code="AUTOCONSTRUCT_INSTANTIATION_FAILED",
            context={"target": describe_type(target), "selector": selector},
        )


class UnconfiguredMemberError(ConstructionException):
    """A generated substitute was called on a member the test never configured."""

    def __init__(self, mocked_type: Any, member: str) -> None:
        self.mocked_type = mocked_type
        self.member = member
        super().__init__(
            f"{describe_type(mocked_type)}.{member} was called on a generated mock "
            "but has no configured behaviour. Set its return_value or side_effect.",
            code="AUTOCONSTRUCT_UNCONFIGURED_MEMBER",
            context={"type": describe_type(mocked_type), "member": member},
        )
