# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
kerasproxy Command Line Interface

Simple CLI to inspect and prepare the Keras runtime.
"""

from __future__ import annotations

import argparse
import sys


def main(argv=None):
    """Main entry point for kerasproxy CLI."""
    parser = argparse.ArgumentParser(
        prog="kerasproxy",
        description="kerasproxy - Keras proxy layer",
    )

    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version information",
    )

    parser.add_argument(
        "--info",
        action="store_true",
        help="Show runtime information",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    setup_parser = subparsers.add_parser(
        "setup",
        help="Check the runtime dependency and install it if needed",
    )
    setup_parser.add_argument(
        "--no-install",
        action="store_true",
        help="Only check; never run pip",
    )

    args = parser.parse_args(argv)

    if args.version:
        from kerasproxy import __version__

        print(f"kerasproxy v{__version__}")
        return 0

    if args.info:
        _show_info()
        return 0

    if args.command == "setup":
        return _run_setup(args)

    # Default: show help
    parser.print_help()
    return 0


def _run_setup(args):
    """Ensure the runtime dependency is installed."""
    from kerasproxy.config import BridgeConfig
    from kerasproxy.errors import ConfigurationError
    from kerasproxy.runtime import ensure_runtime_ready

    overrides = {"auto_install": False} if args.no_install else {}
    try:
        config = BridgeConfig.from_env(**overrides)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 1

    if ensure_runtime_ready(config.dependency, config.min_version, config):
        print(f"{config.requirement}: ready")
        return 0

    print(f"{config.requirement}: not available")
    return 1


def _show_info():
    """Show system and runtime information."""
    import platform

    from kerasproxy import __version__
    from kerasproxy.config import BridgeConfig
    from kerasproxy.errors import ConfigurationError
    from kerasproxy.runtime import installed_version

    print("=" * 50)
    print("kerasproxy Runtime Information")
    print("=" * 50)

    print(f"kerasproxy Version: {__version__}")
    print(f"Python Version: {platform.python_version()}")
    print(f"Platform: {platform.platform()}")

    try:
        config = BridgeConfig.from_env()
    except ConfigurationError as e:
        print(f"Configuration: invalid ({e.message})")
        config = BridgeConfig()

    print(f"Requirement: {config.requirement}")
    print(f"Keras Module: {config.keras_module}")
    print(f"Auto Install: {config.auto_install}")

    version = installed_version(config.dependency)
    print(f"Installed: {version or 'no'}")

    print("=" * 50)


if __name__ == "__main__":
    sys.exit(main())
