"""Diagnostic and autofix core for stylesheet linting."""

__version__ = "0.1.0"
