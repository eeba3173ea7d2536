# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Base class for pre-trained application models."""

from typing import Any

from ..models import BaseModel


class AppModelBase(BaseModel):
    """
    Model proxy bound to a keras.applications module.

    The application module (e.g. keras.applications.mobilenet) provides the
    model constructor along with the matching preprocessing and decoding
    helpers.

    Attributes:
        caller: The keras.applications submodule.
    """

    def __init__(self, caller: Any):
        super().__init__()
        self.caller = caller

    def preprocess_input(self, x: Any) -> Any:
        """Scale input samples the way the pre-trained weights expect."""
        return self.invoke_static_method(self.caller, "preprocess_input", x)

    def decode_predictions(self, preds: Any, top: int = 5) -> Any:
        """
        Decode ImageNet predictions.

        Returns:
            One list of (class_name, class_description, score) tuples per
            sample.
        """
        return self.invoke_static_method(self.caller, "decode_predictions", preds, top=top)
