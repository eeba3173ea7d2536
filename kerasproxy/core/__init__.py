# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""kerasproxy Core Module"""

from .types import (
    Shape,
    ObjectHandle,
    StringOrInstance,
    KerasFunction,
    KerasIterator,
    DirectoryIterator,
)
from .marshal import (
    ValueMarshaller,
    to_python,
    to_tuple,
    to_list,
    to_kwargs,
    register_converter,
)

__all__ = [
    "Shape",
    "ObjectHandle",
    "StringOrInstance",
    "KerasFunction",
    "KerasIterator",
    "DirectoryIterator",
    "ValueMarshaller",
    "to_python",
    "to_tuple",
    "to_list",
    "to_kwargs",
    "register_converter",
]
