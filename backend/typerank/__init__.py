"""Typerank: scoring and ranking engine for typing competitions."""

__version__ = "0.1.0"
__author__ = "Typerank Team"

__all__ = ["__version__", "__author__"]
