# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Value Marshaller

Converts local values into values the Keras runtime accepts natively.
Conversion is a type dispatch over a closed set of registered types; the
lookup walks the value's MRO so subclasses (IntEnum, numpy scalar types,
proxy subclasses) resolve to their nearest registered base. Anything that
resolves to nothing raises UnsupportedTypeError.

Example:
    from kerasproxy.core import to_python, to_tuple, Shape

    to_python([1, 2.5, "relu"])        # [1, 2.5, 'relu']
    to_python(Shape(None, 224, 224))   # (None, 224, 224)
    to_tuple([3, 3], arity=2)          # (3, 3)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np

from ..errors import UnsupportedTypeError, format_arity_mismatch
from .types import ObjectHandle, Shape

# Signature: (value) -> external value
Converter = Callable[[Any], Any]

# Accepted by to_tuple/to_list
SEQUENCE_TYPES = ["Shape", "list", "ndarray", "tuple"]


class ValueMarshaller:
    """
    Registry of converters keyed by local type.

    Conversion never mutates its input and never touches shared state
    besides reading the registry, so it is safe to call from any thread.

    Example:
        @ValueMarshaller.register(Fraction)
        def convert_fraction(value):
            return float(value)
    """

    _registry: Dict[type, Converter] = {}

    @classmethod
    def register(cls, *types: type) -> Callable[[Converter], Converter]:
        """
        Decorator to register a converter for one or more types.

        Args:
            *types: Local types handled by the decorated converter.

        Returns:
            Decorator function.
        """

        def decorator(func: Converter) -> Converter:
            for value_type in types:
                cls._registry[value_type] = func
            return func

        return decorator

    @classmethod
    def resolve(cls, value_type: type) -> Optional[Converter]:
        """Find the converter for a type, following its MRO."""
        for base in value_type.__mro__:
            converter = cls._registry.get(base)
            if converter is not None:
                return converter
        return None

    @classmethod
    def is_supported(cls, value_type: type) -> bool:
        return cls.resolve(value_type) is not None

    @classmethod
    def supported_types(cls) -> List[str]:
        """Names of all registered types."""
        return sorted(t.__name__ for t in cls._registry)

    @classmethod
    def convert(cls, value: Any) -> Any:
        """
        Convert a local value to its runtime representation.

        Raises:
            UnsupportedTypeError: If no converter is registered for the
                value's type or any of its bases.
        """
        # object is never registered, so the MRO walk ends in a miss
        converter = cls.resolve(type(value))
        if converter is None:
            raise UnsupportedTypeError(
                type(value).__name__, supported_types=cls.supported_types()
            )
        return converter(value)


# =============================================================================
# Built-in converters
# =============================================================================


@ValueMarshaller.register(type(None))
def _convert_none(value: None) -> None:
    return None


@ValueMarshaller.register(bool, np.bool_)
def _convert_bool(value) -> bool:
    # Always the True/False singletons, never a fresh object
    return True if value else False


@ValueMarshaller.register(int, np.integer)
def _convert_int(value) -> int:
    return int(value)


@ValueMarshaller.register(float, np.floating)
def _convert_float(value) -> float:
    return float(value)


@ValueMarshaller.register(str)
def _convert_str(value: str) -> str:
    return str(value)


@ValueMarshaller.register(list)
def _convert_list(value: list) -> list:
    return to_list(value)


@ValueMarshaller.register(tuple)
def _convert_tuple(value: tuple) -> tuple:
    return to_tuple(value)


@ValueMarshaller.register(dict)
def _convert_dict(value: dict) -> dict:
    return {to_python(k): to_python(v) for k, v in value.items()}


@ValueMarshaller.register(slice)
def _convert_slice(value: slice) -> slice:
    return slice(to_python(value.start), to_python(value.stop), to_python(value.step))


@ValueMarshaller.register(Shape)
def _convert_shape(value: Shape) -> tuple:
    return to_tuple(value.dims)


@ValueMarshaller.register(np.ndarray)
def _convert_ndarray(value: np.ndarray) -> np.ndarray:
    # Keras consumes numpy arrays directly
    return value


@ValueMarshaller.register(ObjectHandle)
def _convert_handle(value: ObjectHandle) -> Any:
    return value.py_object


# =============================================================================
# Public API
# =============================================================================


def to_python(value: Any) -> Any:
    """
    Convert a local value into a value the Keras runtime accepts.

    None, bools, numbers and strings map to the matching Python builtin
    (bools to the True/False singletons). Lists, tuples, dicts and slices
    are converted element by element. Shapes become tuples. Numpy arrays,
    object handles and proxies pass through as the object they carry.

    Raises:
        UnsupportedTypeError: For any other type.
    """
    return ValueMarshaller.convert(value)


def _sequence_items(values: Any) -> list:
    # Ordered arrays only; a str, set or dict is not a sequence of values here
    if isinstance(values, Shape):
        values = values.dims
    if not isinstance(values, (list, tuple, np.ndarray)):
        raise UnsupportedTypeError(
            type(values).__name__, supported_types=SEQUENCE_TYPES
        )
    return [to_python(v) for v in values]


def to_tuple(
    values: Sequence[Any],
    arity: Optional[int] = None,
    parameter: Optional[str] = None,
) -> tuple:
    """
    Convert a sequence into a fixed-size tuple, preserving order.

    Args:
        values: A list, tuple, Shape or numpy array of convertible values.
        arity: Required number of elements, if the target argument has a
            fixed size (e.g. 2 for a Conv2D kernel size).
        parameter: Argument name reported on arity mismatch.

    Raises:
        ValidationError: If arity is given and does not match.
        UnsupportedTypeError: If values is not one of those sequence types,
            or an element cannot be converted.
    """
    items = _sequence_items(values)
    if arity is not None and len(items) != arity:
        raise format_arity_mismatch(arity, len(items), parameter)
    return tuple(items)


def to_list(values: Sequence[Any]) -> list:
    """
    Convert a sequence into a list, preserving order and length.

    Raises:
        UnsupportedTypeError: If values is not a list, tuple, Shape or numpy
            array, or an element cannot be converted.
    """
    return _sequence_items(values)


def to_kwargs(parameters: Mapping[str, Any]) -> dict:
    """
    Convert a parameter mapping into keyword arguments for a Keras call.

    None values are passed on as None; proxies leave out arguments that
    Keras treats differently when absent.
    """
    return {name: to_python(value) for name, value in parameters.items()}


def register_converter(*types: type) -> Callable[[Converter], Converter]:
    """Register a converter for additional local types."""
    return ValueMarshaller.register(*types)
