# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
kerasproxy Core Types

Local value types understood by the marshaller:
- Shape: tensor dimensions, converted to a tuple
- ObjectHandle and subclasses: wrappers around objects that already live
  in the Keras runtime, passed through untouched
"""

from typing import Any, Iterable, Optional, Union

Dim = Optional[int]


class Shape:
    """
    Represents tensor dimensions.

    A dimension of None means the size is unknown until runtime (for
    example the batch dimension of a Keras Input).
    """

    def __init__(self, *dims: Union[Dim, Iterable[Dim]]):
        if len(dims) == 1 and isinstance(dims[0], (list, tuple)):
            dims = tuple(dims[0])
        self.dims = list(dims)

    def rank(self) -> int:
        """Get number of dimensions."""
        return len(self.dims)

    def numel(self) -> int:
        """Get total number of elements, or -1 if any dimension is unknown."""
        if not self.dims:
            return 0
        result = 1
        for d in self.dims:
            if d is None or d < 0:
                return -1
            result *= d
        return result

    def is_dynamic(self) -> bool:
        """Check if shape has unknown dimensions."""
        return any(d is None or d < 0 for d in self.dims)

    def __getitem__(self, idx: int) -> Dim:
        return self.dims[idx]

    def __len__(self) -> int:
        return len(self.dims)

    def __iter__(self):
        return iter(self.dims)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Shape):
            return self.dims == other.dims
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Shape({self.dims})"


class ObjectHandle:
    """
    Opaque reference to an object owned by the Keras runtime.

    The marshaller hands `py_object` over as-is; it never inspects it.
    """

    __slots__ = ("py_object",)

    def __init__(self, py_object: Any):
        self.py_object = py_object

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.py_object!r})"


class StringOrInstance(ObjectHandle):
    """
    Either the registered name of a Keras object ("adam", "relu") or an
    instance of one (an optimizer or activation proxy).
    """

    __slots__ = ()

    @classmethod
    def from_string(cls, name: str) -> "StringOrInstance":
        return cls(name)

    @classmethod
    def from_instance(cls, proxy: Any) -> "StringOrInstance":
        """Wrap the Keras object held by a proxy (anything with py_instance)."""
        return cls(proxy.py_instance)


class KerasFunction(ObjectHandle):
    """Handle to a Keras callable, e.g. the result of keras.backend.function."""

    __slots__ = ()


class KerasIterator(ObjectHandle):
    """Handle to a Keras data iterator."""

    __slots__ = ()


class DirectoryIterator(ObjectHandle):
    """Handle to an ImageDataGenerator.flow_from_directory iterator."""

    __slots__ = ()
