# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Runtime environment setup.

The two collaborators the runtime bridge relies on:
- ensure_runtime_ready: make sure the runtime distribution is installed at
  a sufficient version, installing it with pip when allowed
- import_module: resolve a dotted module path

Installing is a real side effect (network and disk) and only happens on
the first access to the runtime.
"""

import importlib
import importlib.metadata
import logging
import subprocess
import sys
from typing import Optional

from ..compat import satisfies
from ..config import BridgeConfig
from ..observability import get_logger

logger = logging.getLogger("kerasproxy.runtime.installer")


def installed_version(dependency: str) -> Optional[str]:
    """Return the installed version of a distribution, or None if absent."""
    try:
        return importlib.metadata.version(dependency)
    except importlib.metadata.PackageNotFoundError:
        return None


def is_satisfied(dependency: str, min_version: str) -> bool:
    """Check whether the dependency is installed at min_version or newer."""
    version = installed_version(dependency)
    return version is not None and satisfies(version, min_version)


def pip_install(requirement: str, config: BridgeConfig) -> bool:
    """
    Install a requirement with pip into the running interpreter.

    Args:
        requirement: pip requirement specifier, e.g. "tensorflow>=2.0".
        config: Supplies extra pip arguments and the timeout.

    Returns:
        True if pip exited successfully.
    """
    cmd = [sys.executable, "-m", "pip", "install", requirement, *config.pip_args]
    logger.info(f"Running: {' '.join(cmd)}")
    try:
        subprocess.run(
            cmd,
            check=True,
            capture_output=True,
            text=True,
            timeout=config.install_timeout,
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"pip install {requirement} failed:\n{e.stderr}")
        return False
    except subprocess.TimeoutExpired:
        logger.error(
            f"pip install {requirement} timed out after {config.install_timeout}s"
        )
        return False
    except OSError as e:
        logger.error(f"Could not run pip: {e}")
        return False

    importlib.invalidate_caches()
    return True


def ensure_runtime_ready(
    dependency: str,
    min_version: str,
    config: Optional[BridgeConfig] = None,
) -> bool:
    """
    Make sure a runtime dependency is installed at a sufficient version.

    Idempotent: returns immediately when the requirement already holds.

    Args:
        dependency: Distribution name, e.g. "tensorflow".
        min_version: Minimum accepted version, e.g. "2.0".
        config: Controls auto-install, pip arguments and timeout.

    Returns:
        True when the requirement holds after this call.
    """
    config = config or BridgeConfig()
    plog = get_logger()

    current = installed_version(dependency)
    if current is not None and satisfies(current, min_version):
        logger.debug(f"{dependency} {current} satisfies >={min_version}")
        return True

    if current is None:
        reason = "not installed"
    else:
        reason = f"version {current} is older than {min_version}"

    if not config.auto_install:
        plog.warning(
            f"{dependency} {reason} and auto-install is disabled",
            component="installer",
            dependency=dependency,
        )
        return False

    plog.info(
        f"{dependency} {reason}, installing {dependency}>={min_version}",
        component="installer",
        dependency=dependency,
    )
    if not pip_install(f"{dependency}>={min_version}", config):
        plog.error(
            f"Installing {dependency} failed",
            component="installer",
            dependency=dependency,
        )
        return False

    return is_satisfied(dependency, min_version)


def import_module(dotted_path: str):
    """Resolve a dotted module path against the running interpreter."""
    return importlib.import_module(dotted_path)
