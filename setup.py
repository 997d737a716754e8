"""
setup.py

Packaging metadata and CLI entry point for content-gatekeeper.

Version: 1.0.0. Validation gate for machine-generated game manifests:
structural schema checks, business rules, markup sanitization, recovery
suggestions and validation statistics, with a click-based CLI.
"""
from setuptools import setup, find_packages

setup(
    name="content-gatekeeper",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "content-gatekeeper=cli:cli",
        ],
    },
    python_requires=">=3.9",
)
