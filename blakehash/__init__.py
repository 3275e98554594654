"""blakehash: incremental keyed BLAKE2b."""

__version__ = "0.1.0"

# crypto must be imported before config.
from .crypto import (
    Blake2b,
    ConfigurationError,
    CryptoError,
    InvalidKeyError,
    VerificationError,
    blake2b_digest,
    derive_subkey,
    hash,
    mac,
    verify_mac,
)
from .config import Blake2bParams

__all__ = [
    "Blake2b",
    "Blake2bParams",
    "ConfigurationError",
    "CryptoError",
    "InvalidKeyError",
    "VerificationError",
    "blake2b_digest",
    "derive_subkey",
    "hash",
    "mac",
    "verify_mac",
]
