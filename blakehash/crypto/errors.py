"""Shared exceptions for :mod:`blakehash.crypto`.

All failures surface at configuration time; a validly configured engine never
raises from ``update`` or ``finalize``.
"""

from __future__ import annotations


class CryptoError(Exception):
    """Base error for cryptographic operations."""


class ConfigurationError(CryptoError, ValueError):
    """Raised when hash parameters are out of range or set too late."""


class InvalidKeyError(ConfigurationError):
    """Raised when key material is malformed or too long."""


class VerificationError(CryptoError):
    """Raised when a MAC tag does not match the recomputed value."""
