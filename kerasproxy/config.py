# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Runtime bridge configuration.

Defaults target TensorFlow 2.x with its bundled Keras. Every field can be
overridden from the environment:

    KERASPROXY_DEPENDENCY       distribution to install (default: tensorflow)
    KERASPROXY_MIN_VERSION      minimum accepted version (default: 2.0)
    KERASPROXY_KERAS_MODULE     dotted path of the Keras root module
    KERASPROXY_AUTO_INSTALL     1/0, true/false, yes/no
    KERASPROXY_INSTALL_TIMEOUT  seconds allowed for pip (default: unlimited)
"""

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from .compat import VersionInfo
from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class BridgeConfig:
    """Configuration for the runtime bridge."""

    # Distribution providing the runtime and its minimum version
    dependency: str = "tensorflow"
    min_version: str = "2.0"

    # Root modules exposed by the bridge
    keras_module: str = "tensorflow.keras"
    tensorflow_module: str = "tensorflow"

    # Installation behaviour
    auto_install: bool = True
    pip_args: tuple[str, ...] = field(default_factory=tuple)
    install_timeout: Optional[float] = None

    def __post_init__(self):
        try:
            VersionInfo.parse(self.min_version)
        except ValueError as e:
            raise ConfigurationError(
                "min_version is not a valid version string",
                config_key="min_version",
                config_value=self.min_version,
            ) from e

    @property
    def requirement(self) -> str:
        """pip requirement specifier, e.g. 'tensorflow>=2.0'."""
        return f"{self.dependency}>={self.min_version}"

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides,
    ) -> "BridgeConfig":
        """
        Build a config from KERASPROXY_* environment variables.

        Args:
            environ: Mapping to read instead of os.environ.
            **overrides: Explicit field values, applied last.

        Raises:
            ConfigurationError: If a variable holds an unusable value.
        """
        env = os.environ if environ is None else environ
        config = cls()
        values = {}

        if "KERASPROXY_DEPENDENCY" in env:
            values["dependency"] = env["KERASPROXY_DEPENDENCY"].strip()
        if "KERASPROXY_MIN_VERSION" in env:
            values["min_version"] = env["KERASPROXY_MIN_VERSION"].strip()
        if "KERASPROXY_KERAS_MODULE" in env:
            values["keras_module"] = env["KERASPROXY_KERAS_MODULE"].strip()
        if "KERASPROXY_AUTO_INSTALL" in env:
            values["auto_install"] = _parse_bool(
                "KERASPROXY_AUTO_INSTALL", env["KERASPROXY_AUTO_INSTALL"]
            )
        if "KERASPROXY_INSTALL_TIMEOUT" in env:
            values["install_timeout"] = _parse_timeout(
                "KERASPROXY_INSTALL_TIMEOUT", env["KERASPROXY_INSTALL_TIMEOUT"]
            )

        values.update(overrides)
        return replace(config, **values)


def _parse_bool(key: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        "expected a boolean (1/0, true/false, yes/no)",
        config_key=key,
        config_value=raw,
    )


def _parse_timeout(key: str, raw: str) -> Optional[float]:
    if not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            "expected a number of seconds", config_key=key, config_value=raw
        ) from e
    if timeout <= 0:
        raise ConfigurationError(
            "timeout must be positive", config_key=key, config_value=raw
        )
    return timeout
