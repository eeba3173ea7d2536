# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Version Utilities for kerasproxy

Parses and compares the version strings reported by installed
distributions, so the runtime bridge can tell whether the installed
TensorFlow satisfies the configured minimum.

Usage:
    from kerasproxy.compat import VersionInfo

    if VersionInfo.parse(tf_version) >= VersionInfo.parse("2.0"):
        print("Runtime is recent enough")
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class VersionInfo:
    """
    Semantic version representation.

    Supports comparison operators for version checks.

    Example:
        v = VersionInfo.parse("2.15.0")
        if v >= VersionInfo(2, 0, 0):
            print("Feature available")
    """

    major: int
    minor: int
    patch: int

    @classmethod
    def parse(cls, version_str: str) -> "VersionInfo":
        """
        Parse version string to VersionInfo.

        Args:
            version_str: Version string like "2", "2.0", "2.15.1" or "2.16.0rc0"

        Returns:
            VersionInfo instance

        Raises:
            ValueError: If version string is invalid
        """
        if not version_str or not isinstance(version_str, str):
            raise ValueError(f"Invalid version string: {version_str}")

        # Remove local/build suffixes like +cpu, -gpu
        clean_version = re.split(r"[+\-]", version_str.strip())[0]
        # Also handle .devN, .postN, rcN suffixes
        clean_version = re.split(r"\.?(dev|post|rc|a|b)\d*", clean_version)[0]

        parts = clean_version.split(".")
        try:
            major = int(parts[0])
            minor = int(parts[1]) if len(parts) > 1 else 0
            patch = int(parts[2]) if len(parts) > 2 else 0
        except ValueError as e:
            raise ValueError(f"Invalid version string: {version_str}") from e

        return cls(major=major, minor=minor, patch=patch)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __lt__(self, other: "VersionInfo") -> bool:
        return self.as_tuple() < other.as_tuple()

    def __le__(self, other: "VersionInfo") -> bool:
        return self.as_tuple() <= other.as_tuple()

    def __gt__(self, other: "VersionInfo") -> bool:
        return self.as_tuple() > other.as_tuple()

    def __ge__(self, other: "VersionInfo") -> bool:
        return self.as_tuple() >= other.as_tuple()


def satisfies(installed: str, minimum: str) -> bool:
    """
    Check whether an installed version meets a minimum.

    Args:
        installed: Version string of the installed distribution.
        minimum: Required minimum version string.

    Returns:
        True if installed >= minimum. Unparseable installed versions
        are treated as not satisfying the requirement.
    """
    try:
        return VersionInfo.parse(installed) >= VersionInfo.parse(minimum)
    except ValueError:
        return False
