# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Base proxy for Keras objects.

Every layer, model and application proxy follows the same pattern:
collect constructor arguments in `parameters`, point `py_instance` at the
Keras callable, then call init() to construct the Keras object. After
init(), `py_instance` holds the Keras object itself.

Example:
    class GaussianNoise(BaseLayer):
        def __init__(self, stddev):
            super().__init__()
            self.parameters["stddev"] = stddev
            self.py_instance = keras().layers.GaussianNoise
            self.init()
"""

import logging
from typing import Any, Optional

from .core import register_converter, to_kwargs, to_list
from .errors import ValidationError

logger = logging.getLogger("kerasproxy.base")


class Base:
    """
    Proxy around a single Keras object.

    Attributes:
        parameters: Constructor arguments, converted on init().
        py_instance: The Keras callable before init(), the constructed
            Keras object afterwards.
    """

    def __init__(self, py_instance: Any = None):
        self.parameters: dict[str, Any] = {}
        self.py_instance = py_instance

    @classmethod
    def wrap(cls, py_object: Any) -> "Base":
        """Wrap an existing Keras object without constructing anything."""
        proxy = cls.__new__(cls)
        Base.__init__(proxy, py_object)
        return proxy

    def init(self) -> "Base":
        """
        Construct the Keras object from the collected parameters.

        Raises:
            ValidationError: If no Keras callable was set.
            UnsupportedTypeError: If a parameter cannot be converted.
        """
        if self.py_instance is None:
            raise ValidationError(
                f"{type(self).__name__} has no Keras callable to construct",
                parameter="py_instance",
            )
        kwargs = to_kwargs(self.parameters)
        logger.debug(f"Constructing {type(self).__name__} with {sorted(kwargs)}")
        self.py_instance = self.py_instance(**kwargs)
        return self

    def invoke_method(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call a method on the Keras object with converted arguments.

        The raw Keras return value is returned.
        """
        return self.invoke_static_method(self.py_instance, name, *args, **kwargs)

    @staticmethod
    def invoke_static_method(obj: Any, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call `obj.name(...)` with converted arguments."""
        method = getattr(obj, name)
        return method(*to_list(args), **to_kwargs(kwargs))

    def to_python(self) -> Any:
        return self.py_instance

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.py_instance!r})"


@register_converter(Base)
def _convert_proxy(value: Base) -> Any:
    return value.py_instance
