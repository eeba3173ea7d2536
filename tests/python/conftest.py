# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Pytest configuration for kerasproxy tests.

The suite never imports TensorFlow: a MagicMock module tree stands in for
tensorflow.keras and is served through a RuntimeBridge with injected
collaborators.
"""

import io
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add the project root to sys.path so we can import kerasproxy
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

# Skip test modules that require optional dependencies not installed
collect_ignore = []

# Check for hypothesis
try:
    import hypothesis  # noqa: F401
except ImportError:
    collect_ignore.append("test_property_based.py")


from kerasproxy.config import BridgeConfig  # noqa: E402
from kerasproxy.observability import ProxyLogger  # noqa: E402
from kerasproxy.runtime import RuntimeBridge, set_bridge  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh logger per test, writing to a buffer instead of stderr."""
    ProxyLogger.reset()
    logger = ProxyLogger.get()
    buffer = io.StringIO()
    logger.set_output(buffer)
    yield buffer
    ProxyLogger.reset()


@pytest.fixture
def fake_keras():
    return MagicMock(name="tensorflow.keras")


@pytest.fixture
def fake_tf():
    return MagicMock(name="tensorflow")


@pytest.fixture
def bridge(fake_keras, fake_tf):
    """Default bridge serving the fake runtime modules."""
    modules = {"tensorflow.keras": fake_keras, "tensorflow": fake_tf}

    bridge = RuntimeBridge(
        config=BridgeConfig(auto_install=False),
        ensure_ready=lambda dependency, min_version: True,
        importer=modules.__getitem__,
    )
    previous = set_bridge(bridge)
    yield bridge
    set_bridge(previous)
