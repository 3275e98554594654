"""Subkey derivation with keyed BLAKE2b.

A master key and a 64-bit subkey id are turned into independent subkeys. The
id goes into the salt and a short application context into the
personalization, so different contexts never share subkeys::

    salt            = le64(subkey_id) || 0x00 * 8
    personalization = context || 0x00 * (16 - len(context))
    subkey          = BLAKE2b(key=master_key, salt, personalization, msg=b"")
"""

from __future__ import annotations

import struct

from ..config import Blake2bParams
from .blake2b import Blake2b
from .constants import MASK64, MAX_DIGEST_SIZE, MAX_KEY_SIZE, PERSONALIZATION_SIZE
from .errors import ConfigurationError, InvalidKeyError

MIN_SUBKEY_SIZE = 16
MIN_MASTER_KEY_SIZE = 16


def derive_subkey(
    master_key: bytes,
    subkey_id: int,
    context: bytes,
    *,
    length: int = 32,
) -> bytes:
    """Derive subkey number ``subkey_id`` from ``master_key``.

    Args:
        master_key: 16..64 bytes of secret key material.
        subkey_id: Subkey index in ``[0, 2**64)``.
        context: Application label, at most 16 bytes.
        length: Subkey size (16..64).

    Returns:
        ``length`` bytes of derived key material.
    """

    if not (MIN_SUBKEY_SIZE <= length <= MAX_DIGEST_SIZE):
        raise ConfigurationError(f"length must be in range {MIN_SUBKEY_SIZE}..{MAX_DIGEST_SIZE}")
    if not (MIN_MASTER_KEY_SIZE <= len(master_key) <= MAX_KEY_SIZE):
        raise InvalidKeyError(
            f"master key must be {MIN_MASTER_KEY_SIZE}..{MAX_KEY_SIZE} bytes"
        )
    if not (0 <= subkey_id <= MASK64):
        raise ConfigurationError("subkey_id must fit in 64 unsigned bits")
    if len(context) > PERSONALIZATION_SIZE:
        raise ConfigurationError(f"context must be at most {PERSONALIZATION_SIZE} bytes")

    params = Blake2bParams(
        digest_size=length,
        key=master_key,
        salt=struct.pack("<Q", subkey_id) + bytes(8),
        personalization=bytes(context).ljust(PERSONALIZATION_SIZE, b"\x00"),
    )
    return Blake2b.from_params(params).finalize()
