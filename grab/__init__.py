# grab/__init__.py
"""Grab the latest release asset of a GitHub project."""

__version__ = "1.0.0"
