#!/usr/bin/env python3
"""
Setup script for optionstore package.
"""

from setuptools import setup, find_packages

setup(
    name="optionstore",
    version="0.1.0",
    description="Typesafe whitelisted option storage with bool/int/string coercion",
    author="optionstore Team",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
