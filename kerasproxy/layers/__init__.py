# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Layer proxies."""

from .base import BaseLayer
from .core import Input, Dense, Flatten, Dropout
from .noise import GaussianNoise, GaussianDropout, AlphaDropout

__all__ = [
    "BaseLayer",
    "Input",
    "Dense",
    "Flatten",
    "Dropout",
    "GaussianNoise",
    "GaussianDropout",
    "AlphaDropout",
]
