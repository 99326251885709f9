"""Validation and error-modeling core of the user-account domain."""

__version__ = "0.1.0"
