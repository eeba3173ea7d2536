# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

import os
import re

from setuptools import find_packages, setup


def read_version():
    """Read __version__ without importing the package."""
    init_path = os.path.join(os.path.dirname(__file__), "kerasproxy", "__init__.py")
    with open(init_path, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in kerasproxy/__init__.py")
    return match.group(1)


setup(
    name="kerasproxy",
    version=read_version(),
    author="Wahyu Ardiansyah",
    description="Keras models, layers and applications through lazy proxy objects",
    license="Apache-2.0",
    packages=find_packages(include=["kerasproxy", "kerasproxy.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
    ],
    extras_require={
        # The runtime is normally installed on first use; this pins it upfront
        "tensorflow": ["tensorflow>=2.0"],
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "kerasproxy=kerasproxy.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
