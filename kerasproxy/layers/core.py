# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Core layers: Input, Dense, Flatten, Dropout."""

from typing import Any, Optional, Union

from ..core import Shape, StringOrInstance
from ..runtime import keras
from .base import BaseLayer

Activation = Union[str, StringOrInstance, None]


class Input(BaseLayer):
    """
    Instantiate a Keras tensor to feed a functional model.

    Args:
        shape: Shape of one sample, without the batch dimension.
        batch_size: Optional static batch size.
        name: Optional layer name.
        dtype: Expected data type, e.g. "float32".
        sparse: Whether the placeholder is sparse.
    """

    def __init__(
        self,
        shape: Shape,
        batch_size: Optional[int] = None,
        name: Optional[str] = None,
        dtype: Optional[str] = None,
        sparse: bool = False,
    ):
        super().__init__()
        self.parameters["shape"] = shape
        self.parameters["batch_size"] = batch_size
        self.parameters["name"] = name
        self.parameters["dtype"] = dtype
        self.parameters["sparse"] = sparse
        self.py_instance = keras().layers.Input
        self.init()


class Dense(BaseLayer):
    """
    Densely-connected layer: activation(dot(input, kernel) + bias).

    Args:
        units: Dimensionality of the output space.
        activation: Activation name or instance; None means linear.
        use_bias: Whether the layer uses a bias vector.
        kernel_initializer: Initializer for the kernel weights.
        bias_initializer: Initializer for the bias vector.
        kernel_regularizer: Optional regularizer for the kernel.
        bias_regularizer: Optional regularizer for the bias.
        input_shape: Optional input shape when used as a first layer.
    """

    def __init__(
        self,
        units: int,
        activation: Activation = None,
        use_bias: bool = True,
        kernel_initializer: Any = "glorot_uniform",
        bias_initializer: Any = "zeros",
        kernel_regularizer: Any = None,
        bias_regularizer: Any = None,
        input_shape: Optional[Shape] = None,
    ):
        super().__init__()
        self.parameters["units"] = units
        self.parameters["activation"] = activation
        self.parameters["use_bias"] = use_bias
        self.parameters["kernel_initializer"] = kernel_initializer
        self.parameters["bias_initializer"] = bias_initializer
        self.parameters["kernel_regularizer"] = kernel_regularizer
        self.parameters["bias_regularizer"] = bias_regularizer
        if input_shape is not None:
            self.parameters["input_shape"] = input_shape
        self.py_instance = keras().layers.Dense
        self.init()


class Flatten(BaseLayer):
    """Flattens the input. Does not affect the batch size."""

    def __init__(self, data_format: Optional[str] = None):
        super().__init__()
        self.parameters["data_format"] = data_format
        self.py_instance = keras().layers.Flatten
        self.init()


class Dropout(BaseLayer):
    """
    Randomly sets input units to 0 with frequency `rate` during training.

    Args:
        rate: Fraction of the input units to drop, between 0 and 1.
        noise_shape: Shape of the binary dropout mask.
        seed: Optional random seed.
    """

    def __init__(
        self,
        rate: float,
        noise_shape: Optional[Shape] = None,
        seed: Optional[int] = None,
    ):
        super().__init__()
        self.parameters["rate"] = rate
        self.parameters["noise_shape"] = noise_shape
        self.parameters["seed"] = seed
        self.py_instance = keras().layers.Dropout
        self.init()
