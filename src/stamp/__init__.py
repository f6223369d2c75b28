"""
Top-level package for stamp.

This package exposes the main CLI entry point via the
``stamp.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
