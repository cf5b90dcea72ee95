#!/usr/bin/env python3

"""Setup script for the occupancy splitter package."""

from setuptools import setup, find_packages

setup(
    name="occupancy-splitter",
    version="0.1.0",
    description="Split alternate-conformation chains of mmCIF structures into clash-free models",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.20.0",
        "networkx>=2.6.0",
        "biopython>=1.79",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "occupancy-splitter=occupancy_splitter.presentation.cli.split_occupancy:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Chemistry",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)
