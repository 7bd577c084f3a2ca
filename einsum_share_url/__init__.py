"""Shareable tensor_expressions_webapp links from contraction expressions."""

__version__ = "0.1.0"
