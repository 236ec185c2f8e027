"""Strata exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class StrataError(Exception):
    """Base exception for all Strata failures."""


class StrataConfigError(StrataError):
    """Raised for invalid runtime or pipeline configuration."""


class StoreError(StrataError):
    """Raised when a storage backend fails to persist or load a value."""


class InvalidKeyError(StrataError):
    """Raised when a cipher key is empty."""


class NotFoundError(StrataError):
    """Raised when reading a key that was never written."""


class TypeMismatchError(StrataError):
    """Raised when a data source receives a value of the wrong shape."""


class EncodingError(StrataError):
    """Raised when text cannot be converted into bytes."""


class DecodingError(StrataError):
    """Raised when bytes cannot be converted back into text."""
