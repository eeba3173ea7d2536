# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for kerasproxy Error Handling

Validates:
- Error hierarchy
- Error message formatting
- Suggestions and context information
"""

import pytest

from kerasproxy.errors import (
    KerasProxyError,
    InitializationError,
    UnsupportedTypeError,
    ValidationError,
    ConfigurationError,
    format_arity_mismatch,
)


class TestKerasProxyError:
    """Tests for KerasProxyError base class."""

    def test_basic_error(self):
        error = KerasProxyError("Test error")
        assert "Test error" in str(error)

    def test_error_with_suggestions(self):
        error = KerasProxyError("Test error", suggestions=["Fix A", "Fix B"])
        msg = str(error)
        assert "Suggestions:" in msg
        assert "1. Fix A" in msg
        assert "2. Fix B" in msg

    def test_error_with_context(self):
        error = KerasProxyError("Test error", context={"key1": "value1"})
        msg = str(error)
        assert "Context:" in msg
        assert "key1: value1" in msg

    def test_error_attributes(self):
        error = KerasProxyError(
            "Test error", suggestions=["Fix A"], context={"key": "value"}
        )
        assert error.message == "Test error"
        assert error.suggestions == ["Fix A"]
        assert error.context == {"key": "value"}


class TestInitializationError:
    def test_message_and_context(self):
        error = InitializationError(
            "could not import 'tensorflow.keras'",
            dependency="tensorflow",
            module="tensorflow.keras",
            min_version="2.0",
        )
        msg = str(error)
        assert "Runtime initialization failed:" in msg
        assert "dependency: tensorflow" in msg
        assert "module: tensorflow.keras" in msg
        assert "pip install 'tensorflow>=2.0'" in msg
        assert error.dependency == "tensorflow"
        assert error.module == "tensorflow.keras"


class TestUnsupportedTypeError:
    def test_names_type(self):
        error = UnsupportedTypeError("frozenset")
        assert "Type is not supported: frozenset" in str(error)
        assert error.type_name == "frozenset"

    def test_lists_supported_types(self):
        error = UnsupportedTypeError("set", supported_types=["int", "str"])
        assert "supported: int, str" in str(error)
        assert error.supported_types == ["int", "str"]


class TestValidationAndConfiguration:
    def test_arity_mismatch(self):
        error = format_arity_mismatch(2, 3, "kernel_size")
        assert isinstance(error, ValidationError)
        msg = str(error)
        assert "expected 2 values, got 3" in msg
        assert "parameter: kernel_size" in msg

    def test_configuration_error(self):
        error = ConfigurationError(
            "bad value", config_key="KERASPROXY_AUTO_INSTALL", config_value="maybe"
        )
        msg = str(error)
        assert "Configuration error: bad value" in msg
        assert "config_value: maybe" in msg


@pytest.mark.parametrize(
    "error",
    [
        InitializationError("x"),
        UnsupportedTypeError("object"),
        ValidationError("x"),
        ConfigurationError("x"),
    ],
)
def test_all_errors_share_base(error):
    assert isinstance(error, KerasProxyError)
    assert isinstance(error, Exception)
