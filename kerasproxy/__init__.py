# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
kerasproxy: Keras through thin proxy objects

Each proxy collects its arguments, converts them into values the Keras
runtime accepts and constructs the matching tensorflow.keras object. The
runtime is imported (and if needed installed) on first use, once per
process.

Example:
    from kerasproxy import Shape
    from kerasproxy.layers import Input, Dense, GaussianNoise
    from kerasproxy.models import Model

    inputs = Input(shape=Shape(784))
    noisy = GaussianNoise(0.1).set(inputs)
    outputs = Dense(10, activation="softmax").set(noisy)
    model = Model(inputs, outputs)
"""

__version__ = "0.1.0"
__author__ = "Wahyu Ardiansyah"

from .core import (
    Shape,
    ObjectHandle,
    StringOrInstance,
    KerasFunction,
    KerasIterator,
    DirectoryIterator,
    to_python,
    to_tuple,
    to_list,
    register_converter,
)

from .base import Base
from .config import BridgeConfig
from .runtime import RuntimeBridge, get_bridge, set_bridge, get_root_module

# Observability
from .observability import set_verbosity, Verbosity

# Errors
from .errors import (
    KerasProxyError,
    InitializationError,
    UnsupportedTypeError,
    ValidationError,
    ConfigurationError,
)

from . import layers
from . import models
from . import applications

__all__ = [
    # Core types
    "Shape",
    "ObjectHandle",
    "StringOrInstance",
    "KerasFunction",
    "KerasIterator",
    "DirectoryIterator",
    # Marshalling
    "to_python",
    "to_tuple",
    "to_list",
    "register_converter",
    # Runtime
    "Base",
    "BridgeConfig",
    "RuntimeBridge",
    "get_bridge",
    "set_bridge",
    "get_root_module",
    # Observability
    "set_verbosity",
    "Verbosity",
    # Errors
    "KerasProxyError",
    "InitializationError",
    "UnsupportedTypeError",
    "ValidationError",
    "ConfigurationError",
    # Submodules
    "layers",
    "models",
    "applications",
]
