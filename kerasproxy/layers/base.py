# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Base class for layer proxies."""

from typing import Any

from ..base import Base
from ..core import to_python


class BaseLayer(Base):
    """
    Proxy around a Keras layer.

    Layers are connected with set(), which calls the Keras layer on its
    inputs (functional API) and returns the output tensor as a new proxy.

    Example:
        inputs = Input(shape=Shape(784))
        hidden = Dense(64, activation="relu").set(inputs)
        outputs = Dense(10).set(hidden)
        model = Model(inputs, outputs)
    """

    def set(self, *inputs: Any) -> "BaseLayer":
        """
        Call the layer on one or more inputs.

        Args:
            *inputs: Layer proxies (or tensors / handles) feeding this layer.
                Several inputs are passed to Keras as a list.

        Returns:
            Proxy wrapping the layer's output tensor.
        """
        if len(inputs) == 1:
            arg = to_python(inputs[0])
        else:
            arg = to_python(list(inputs))
        return BaseLayer.wrap(self.py_instance(arg))

    @property
    def name(self) -> str:
        return self.py_instance.name

    @property
    def trainable(self) -> bool:
        return self.py_instance.trainable

    @trainable.setter
    def trainable(self, value: bool) -> None:
        self.py_instance.trainable = to_python(value)

    def get_weights(self) -> list:
        return self.invoke_method("get_weights")

    def set_weights(self, weights: list) -> None:
        self.invoke_method("set_weights", weights)

    def get_config(self) -> dict:
        return self.invoke_method("get_config")
