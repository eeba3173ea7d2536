# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for layer proxies.

Keras is replaced by a MagicMock tree, so these tests check which Keras
callables are invoked and with which converted arguments.
"""

import numpy as np
import pytest

from kerasproxy.base import Base
from kerasproxy.core import Shape, StringOrInstance
from kerasproxy.errors import UnsupportedTypeError, ValidationError
from kerasproxy.layers import (
    AlphaDropout,
    BaseLayer,
    Dense,
    Dropout,
    Flatten,
    GaussianDropout,
    GaussianNoise,
    Input,
)


class TestBase:
    def test_init_without_callable(self):
        with pytest.raises(ValidationError):
            Base().init()

    def test_init_converts_parameters(self):
        calls = []

        def factory(**kwargs):
            calls.append(kwargs)
            return "built"

        proxy = Base(factory)
        proxy.parameters["shape"] = Shape(2, 3)
        proxy.parameters["flag"] = np.bool_(True)
        proxy.init()

        assert proxy.py_instance == "built"
        assert calls == [{"shape": (2, 3), "flag": True}]
        assert calls[0]["flag"] is True

    def test_init_rejects_unsupported(self):
        proxy = Base(lambda **kwargs: None)
        proxy.parameters["bad"] = object()
        with pytest.raises(UnsupportedTypeError):
            proxy.init()

    def test_invoke_method(self, fake_keras):
        proxy = Base.wrap(fake_keras.some_object)
        proxy.invoke_method("call", Shape(1), flag=np.bool_(False))
        fake_keras.some_object.call.assert_called_once_with((1,), flag=False)

    def test_wrap_does_not_construct(self, fake_keras):
        proxy = BaseLayer.wrap(fake_keras.layers.Dense)
        assert proxy.py_instance is fake_keras.layers.Dense
        assert proxy.parameters == {}
        fake_keras.layers.Dense.assert_not_called()


class TestNoiseLayers:
    def test_gaussian_noise(self, bridge, fake_keras):
        layer = GaussianNoise(0.1)
        fake_keras.layers.GaussianNoise.assert_called_once_with(stddev=0.1, seed=None)
        assert layer.py_instance is fake_keras.layers.GaussianNoise.return_value

    def test_gaussian_dropout(self, bridge, fake_keras):
        GaussianDropout(0.3, seed=7)
        fake_keras.layers.GaussianDropout.assert_called_once_with(rate=0.3, seed=7)

    def test_alpha_dropout(self, bridge, fake_keras):
        AlphaDropout(0.2, noise_shape=Shape(None, 1), seed=3)
        fake_keras.layers.AlphaDropout.assert_called_once_with(
            rate=0.2, noise_shape=(None, 1), seed=3
        )


class TestCoreLayers:
    def test_input(self, bridge, fake_keras):
        Input(shape=Shape(784), name="pixels")
        fake_keras.layers.Input.assert_called_once_with(
            shape=(784,), batch_size=None, name="pixels", dtype=None, sparse=False
        )

    def test_dense(self, bridge, fake_keras):
        Dense(10, activation="relu", input_shape=Shape(784))
        fake_keras.layers.Dense.assert_called_once_with(
            units=10,
            activation="relu",
            use_bias=True,
            kernel_initializer="glorot_uniform",
            bias_initializer="zeros",
            kernel_regularizer=None,
            bias_regularizer=None,
            input_shape=(784,),
        )

    def test_dense_without_input_shape(self, bridge, fake_keras):
        Dense(4)
        kwargs = fake_keras.layers.Dense.call_args.kwargs
        assert "input_shape" not in kwargs

    def test_dense_activation_instance(self, bridge, fake_keras):
        activation = StringOrInstance(fake_keras.activations.swish)
        Dense(4, activation=activation)
        kwargs = fake_keras.layers.Dense.call_args.kwargs
        assert kwargs["activation"] is fake_keras.activations.swish

    def test_flatten_and_dropout(self, bridge, fake_keras):
        Flatten()
        Dropout(0.5, noise_shape=Shape(None, 1, 8))
        fake_keras.layers.Flatten.assert_called_once_with(data_format=None)
        fake_keras.layers.Dropout.assert_called_once_with(
            rate=0.5, noise_shape=(None, 1, 8), seed=None
        )


class TestFunctionalApi:
    def test_set_single_input(self, bridge, fake_keras):
        inputs = Input(shape=Shape(784))
        dense = Dense(10)
        output = dense.set(inputs)

        dense.py_instance.assert_called_once_with(inputs.py_instance)
        assert isinstance(output, BaseLayer)
        assert output.py_instance is dense.py_instance.return_value

    def test_set_multiple_inputs(self, bridge, fake_keras):
        first = Input(shape=Shape(4))
        second = Input(shape=Shape(4))
        dense = Dense(2)
        dense.set(first, second)

        dense.py_instance.assert_called_once_with(
            [first.py_instance, second.py_instance]
        )

    def test_layer_properties(self, bridge, fake_keras):
        layer = Dense(3)
        layer.py_instance.name = "dense_1"
        assert layer.name == "dense_1"

        layer.trainable = np.bool_(False)
        assert layer.py_instance.trainable is False

        layer.get_weights()
        layer.py_instance.get_weights.assert_called_once_with()
