# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Noise regularization layers.

All three are only active at training time.
"""

from typing import Optional

from ..core import Shape
from ..runtime import keras
from .base import BaseLayer


class GaussianNoise(BaseLayer):
    """
    Apply additive zero-centered Gaussian noise.

    Useful to mitigate overfitting (a form of random data augmentation).
    Gaussian noise is a natural corruption process for real valued inputs.

    Args:
        stddev: Standard deviation of the noise distribution.
        seed: Optional random seed.
    """

    def __init__(self, stddev: float, seed: Optional[int] = None):
        super().__init__()
        self.parameters["stddev"] = stddev
        self.parameters["seed"] = seed
        self.py_instance = keras().layers.GaussianNoise
        self.init()


class GaussianDropout(BaseLayer):
    """
    Apply multiplicative 1-centered Gaussian noise.

    Args:
        rate: Drop probability (as with Dropout). The multiplicative noise
            has standard deviation sqrt(rate / (1 - rate)).
        seed: Optional random seed.
    """

    def __init__(self, rate: float, seed: Optional[int] = None):
        super().__init__()
        self.parameters["rate"] = rate
        self.parameters["seed"] = seed
        self.py_instance = keras().layers.GaussianDropout
        self.init()


class AlphaDropout(BaseLayer):
    """
    Apply Alpha Dropout to the input.

    Keeps mean and variance of the inputs at their original values, which
    preserves the self-normalizing property; pairs with SELU activations.

    Args:
        rate: Drop probability.
        noise_shape: Shape of the randomly generated keep/drop flags.
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
        self.py_instance = keras().layers.AlphaDropout
        self.init()
