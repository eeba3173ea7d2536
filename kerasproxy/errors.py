# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
kerasproxy Error Hierarchy

Provides error types for the Keras proxy layer with:
- Clear error categorization
- Helpful error messages with suggestions
- Context information for debugging

Error Categories:
- KerasProxyError: Base class for all kerasproxy errors
- InitializationError: Runtime setup or module import failed
- UnsupportedTypeError: Value cannot be marshalled into the runtime
- ValidationError: Invalid argument (shape, arity, range)
- ConfigurationError: Invalid configuration or environment value
"""

from typing import Optional


class KerasProxyError(Exception):
    """
    Base class for all kerasproxy errors.

    Attributes:
        message: Human-readable error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)


class InitializationError(KerasProxyError):
    """
    The external runtime could not be brought up.

    Raised when:
    - The runtime dependency is missing and could not be installed
    - The installed version is below the required minimum
    - Importing a root module failed

    Fatal for every operation that needs the runtime.
    """

    def __init__(
        self,
        message: str,
        dependency: Optional[str] = None,
        module: Optional[str] = None,
        min_version: Optional[str] = None,
    ):
        self.dependency = dependency
        self.module = module

        context = {}
        if dependency:
            context["dependency"] = dependency
        if min_version:
            context["min_version"] = min_version
        if module:
            context["module"] = module

        suggestions = [
            f"Install the runtime manually: pip install '{dependency or 'tensorflow'}"
            f">={min_version or '2.0'}'",
            "Check network access if automatic installation is enabled",
            "Set KERASPROXY_AUTO_INSTALL=1 to allow installing on first use",
        ]

        super().__init__(
            message=f"Runtime initialization failed: {message}",
            suggestions=suggestions,
            context=context,
        )


class UnsupportedTypeError(KerasProxyError):
    """
    Value type not supported by the marshaller.

    Raised when a value outside the known set of convertible types is
    passed to the runtime. This is a programming error, not a runtime
    condition to recover from.
    """

    def __init__(
        self,
        type_name: str,
        supported_types: Optional[list[str]] = None,
    ):
        self.type_name = type_name
        self.supported_types = supported_types or []

        context = {"type": type_name}
        if supported_types:
            context["supported"] = ", ".join(supported_types)

        suggestions = [
            "Convert the value to a primitive, list, tuple or Shape first",
            "Wrap runtime objects in an ObjectHandle to pass them through",
            "Register a converter with kerasproxy.core.register_converter()",
        ]

        super().__init__(
            message=f"Type is not supported: {type_name}",
            suggestions=suggestions,
            context=context,
        )


class ValidationError(KerasProxyError):
    """
    Input validation error.

    Raised when:
    - A tuple does not have the expected arity
    - A parameter value is out of range
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        expected: Optional[str] = None,
        received: Optional[str] = None,
    ):
        context = {}
        if parameter:
            context["parameter"] = parameter
        if expected:
            context["expected"] = expected
        if received:
            context["received"] = received

        suggestions = [
            "Check the parameter value and type",
            "Review the Keras documentation for this argument",
        ]

        super().__init__(
            message=f"Validation failed: {message}",
            suggestions=suggestions,
            context=context,
        )


class ConfigurationError(KerasProxyError):
    """
    Configuration or setup error.

    Raised when an environment override or config field holds a value
    that cannot be interpreted.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value:
            context["config_value"] = str(config_value)

        suggestions = [
            "Check configuration parameters",
            "Review the KERASPROXY_* environment variables",
        ]

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=suggestions,
            context=context,
        )


def format_arity_mismatch(
    expected: int,
    received: int,
    parameter: Optional[str] = None,
) -> ValidationError:
    """Create a ValidationError for a tuple of the wrong length."""
    return ValidationError(
        message=f"Arity mismatch: expected {expected} values, got {received}",
        parameter=parameter or "tuple",
        expected=str(expected),
        received=str(received),
    )
