#!/usr/bin/env python
"""
Setup.py for incidencegraph.
Pure Python package; the only runtime dependency is numpy.
"""

from setuptools import setup, find_packages

setup(
    name="incidencegraph",
    version="0.1.0",
    description="Directed, weighted graph as a modified incidence list with O(1) amortized operations",
    author="Chang Liao",
    packages=find_packages(include=["incidencegraph", "incidencegraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
