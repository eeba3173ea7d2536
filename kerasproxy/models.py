# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Model proxies.

Example:
    model = Sequential([
        Dense(64, activation="relu", input_shape=Shape(784)),
        Dropout(0.2),
        Dense(10, activation="softmax"),
    ])
    model.compile(optimizer="adam", loss="categorical_crossentropy",
                  metrics=["accuracy"])
    model.fit(x_train, y_train, batch_size=32, epochs=5)
"""

from typing import Any, Optional, Sequence, Union

from .base import Base
from .core import StringOrInstance
from .layers.base import BaseLayer
from .runtime import keras

Optimizer = Union[str, StringOrInstance, Base]


def _listed(value: Any) -> Any:
    # Tuples become lists; a single value (e.g. metrics="accuracy") is passed as is
    return list(value) if isinstance(value, (list, tuple)) else value


class BaseModel(Base):
    """Training and inference methods shared by all model proxies."""

    def compile(
        self,
        optimizer: Optimizer,
        loss: Any,
        metrics: Optional[Sequence[Any]] = None,
        loss_weights: Optional[Sequence[float]] = None,
    ) -> None:
        """Configure the model for training."""
        self.invoke_method(
            "compile",
            optimizer=optimizer,
            loss=loss,
            metrics=_listed(metrics),
            loss_weights=_listed(loss_weights),
        )

    def fit(
        self,
        x: Any,
        y: Any = None,
        batch_size: Optional[int] = None,
        epochs: int = 1,
        verbose: int = 1,
        validation_split: float = 0.0,
        shuffle: bool = True,
        class_weight: Optional[dict] = None,
    ) -> Any:
        """
        Train the model for a fixed number of epochs.

        Returns:
            The Keras History object.
        """
        return self.invoke_method(
            "fit",
            x=x,
            y=y,
            batch_size=batch_size,
            epochs=epochs,
            verbose=verbose,
            validation_split=validation_split,
            shuffle=shuffle,
            class_weight=class_weight,
        )

    def evaluate(
        self,
        x: Any,
        y: Any = None,
        batch_size: Optional[int] = None,
        verbose: int = 1,
    ) -> Any:
        """Return the loss value and metric values in test mode."""
        return self.invoke_method(
            "evaluate", x=x, y=y, batch_size=batch_size, verbose=verbose
        )

    def predict(
        self,
        x: Any,
        batch_size: Optional[int] = None,
        verbose: int = 0,
    ) -> Any:
        """Generate output predictions for the input samples."""
        return self.invoke_method("predict", x, batch_size=batch_size, verbose=verbose)

    def summary(self, line_length: Optional[int] = None) -> None:
        self.invoke_method("summary", line_length=line_length)

    def get_weights(self) -> list:
        return self.invoke_method("get_weights")

    def set_weights(self, weights: list) -> None:
        self.invoke_method("set_weights", weights)

    def save(self, filepath: str, overwrite: bool = True) -> None:
        self.invoke_method("save", filepath, overwrite=overwrite)

    @property
    def layers(self) -> list[BaseLayer]:
        """Proxies for the model's layers."""
        return [BaseLayer.wrap(layer) for layer in self.py_instance.layers]


class Sequential(BaseModel):
    """
    Linear stack of layers.

    Args:
        layers: Optional initial list of layer proxies.
        name: Optional model name.
    """

    def __init__(
        self,
        layers: Optional[Sequence[BaseLayer]] = None,
        name: Optional[str] = None,
    ):
        super().__init__()
        self.parameters["layers"] = _listed(layers)
        self.parameters["name"] = name
        self.py_instance = keras().models.Sequential
        self.init()

    def add(self, layer: BaseLayer) -> None:
        """Add a layer on top of the stack."""
        self.invoke_method("add", layer)


class Model(BaseModel):
    """
    Model built from the functional API.

    Args:
        inputs: Input proxy, or a list of them.
        outputs: Output proxy (from BaseLayer.set), or a list of them.
        name: Optional model name.
    """

    def __init__(
        self,
        inputs: Union[BaseLayer, Sequence[BaseLayer]],
        outputs: Union[BaseLayer, Sequence[BaseLayer]],
        name: Optional[str] = None,
    ):
        super().__init__()
        self.parameters["inputs"] = _listed(inputs)
        self.parameters["outputs"] = _listed(outputs)
        self.parameters["name"] = name
        self.py_instance = keras().models.Model
        self.init()
