"""BLAKE2b hashing, MAC and subkey derivation.

The engine in :mod:`blakehash.crypto.blake2b` is a pure-Python implementation
of RFC 7693 BLAKE2b with key, salt and personalization support. The helpers in
:mod:`blakehash.crypto.hashes` and :mod:`blakehash.crypto.kdf` are thin
wrappers for the common one-shot uses.
"""

from __future__ import annotations

from .blake2b import Blake2b, hash, mac
from .compress import compress, mix
from .counter import ByteCounter
from .errors import (
    ConfigurationError,
    CryptoError,
    InvalidKeyError,
    VerificationError,
)
from .hashes import blake2b_digest, verify_mac
from .kdf import derive_subkey

__all__ = [
    "Blake2b",
    "ByteCounter",
    "ConfigurationError",
    "CryptoError",
    "InvalidKeyError",
    "VerificationError",
    "blake2b_digest",
    "compress",
    "derive_subkey",
    "hash",
    "mac",
    "mix",
    "verify_mac",
]
