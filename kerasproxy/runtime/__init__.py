# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
kerasproxy Runtime Module

Process-wide access to the Keras runtime.

Usage:
    from kerasproxy import runtime

    keras = runtime.keras()
    tf = runtime.tensorflow()
    apps = runtime.get_root_module("tensorflow.keras.applications")
"""

import threading
from typing import Any, Optional

from .bridge import RuntimeBridge, SingleFlight
from .installer import (
    ensure_runtime_ready,
    import_module,
    installed_version,
    is_satisfied,
)

_default_bridge: Optional[RuntimeBridge] = None
_bridge_lock = threading.Lock()


def get_bridge() -> RuntimeBridge:
    """Get or create the default bridge."""
    global _default_bridge
    if _default_bridge is None:
        with _bridge_lock:
            if _default_bridge is None:
                _default_bridge = RuntimeBridge()
    return _default_bridge


def set_bridge(bridge: Optional[RuntimeBridge]) -> Optional[RuntimeBridge]:
    """
    Install the bridge every proxy uses.

    Passing None makes the next get_bridge() call build a fresh default.

    Returns:
        The previously installed bridge.
    """
    global _default_bridge
    with _bridge_lock:
        previous = _default_bridge
        _default_bridge = bridge
    return previous


def get_root_module(name: str) -> Any:
    """Import a root module through the default bridge."""
    return get_bridge().get_root_module(name)


def keras() -> Any:
    """The Keras root module from the default bridge."""
    return get_bridge().keras


def tensorflow() -> Any:
    """The TensorFlow root module from the default bridge."""
    return get_bridge().tensorflow


__all__ = [
    "RuntimeBridge",
    "SingleFlight",
    "ensure_runtime_ready",
    "import_module",
    "installed_version",
    "is_satisfied",
    "get_bridge",
    "set_bridge",
    "get_root_module",
    "keras",
    "tensorflow",
]
