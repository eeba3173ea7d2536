# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Pre-trained application model proxies."""

from .base import AppModelBase
from .mobilenet import MobileNetV1, MobileNetV2

__all__ = [
    "AppModelBase",
    "MobileNetV1",
    "MobileNetV2",
]
