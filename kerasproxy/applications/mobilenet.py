# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
MobileNet models, with weights pre-trained on ImageNet.

Both only support the 'channels_last' data format (height, width,
channels). The default input size is 224x224.
"""

from typing import Any, Optional

from ..core import Shape
from ..runtime import keras
from .base import AppModelBase

# classifier_activation exists from TF 2.3 on; the default is never sent
_DEFAULT_CLASSIFIER_ACTIVATION = "softmax"


def _set_classifier_activation(parameters: dict, activation: Optional[str]) -> None:
    if activation != _DEFAULT_CLASSIFIER_ACTIVATION:
        parameters["classifier_activation"] = activation


class MobileNetV1(AppModelBase):
    """
    MobileNet (v1).

    Args:
        input_shape: Only used when include_top is False; otherwise the input
            must be (224, 224, 3). Needs exactly 3 channels, width and height
            of at least 32.
        alpha: Width multiplier. Below 1.0 proportionally decreases the
            number of filters in each layer, above 1.0 increases it.
        depth_multiplier: Depth multiplier for depthwise convolution (also
            called the resolution multiplier).
        dropout: Dropout rate.
        include_top: Whether to include the fully-connected classifier.
        weights: None (random initialization), "imagenet", or the path to a
            weights file.
        input_tensor: Optional Keras tensor (e.g. an Input proxy) to use as
            the image input.
        pooling: None, "avg" or "max"; pooling applied to the last
            convolutional output when include_top is False.
        classes: Number of classes, only when include_top is True and no
            weights are given.
        classifier_activation: Activation of the top layer. Only passed to
            Keras when it differs from "softmax", which needs TF 2.3 or newer.
    """

    def __init__(
        self,
        input_shape: Optional[Shape] = None,
        alpha: float = 1.0,
        depth_multiplier: int = 1,
        dropout: float = 1e-3,
        include_top: bool = True,
        weights: Optional[str] = "imagenet",
        input_tensor: Any = None,
        pooling: Optional[str] = None,
        classes: int = 1000,
        classifier_activation: Optional[str] = "softmax",
    ):
        super().__init__(keras().applications.mobilenet)
        self.parameters["input_shape"] = input_shape
        self.parameters["alpha"] = alpha
        self.parameters["depth_multiplier"] = depth_multiplier
        self.parameters["dropout"] = dropout
        self.parameters["include_top"] = include_top
        self.parameters["weights"] = weights
        self.parameters["input_tensor"] = input_tensor
        self.parameters["pooling"] = pooling
        self.parameters["classes"] = classes
        _set_classifier_activation(self.parameters, classifier_activation)
        self.py_instance = self.caller.MobileNet
        self.init()


class MobileNetV2(AppModelBase):
    """
    MobileNetV2.

    Takes the same arguments as MobileNetV1 except depth_multiplier and
    dropout, which MobileNetV2 does not have.
    """

    def __init__(
        self,
        input_shape: Optional[Shape] = None,
        alpha: float = 1.0,
        include_top: bool = True,
        weights: Optional[str] = "imagenet",
        input_tensor: Any = None,
        pooling: Optional[str] = None,
        classes: int = 1000,
        classifier_activation: Optional[str] = "softmax",
    ):
        super().__init__(keras().applications.mobilenet_v2)
        self.parameters["input_shape"] = input_shape
        self.parameters["alpha"] = alpha
        self.parameters["include_top"] = include_top
        self.parameters["weights"] = weights
        self.parameters["input_tensor"] = input_tensor
        self.parameters["pooling"] = pooling
        self.parameters["classes"] = classes
        _set_classifier_activation(self.parameters, classifier_activation)
        self.py_instance = self.caller.MobileNetV2
        self.init()
