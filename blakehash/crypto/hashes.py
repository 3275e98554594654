"""Digest and MAC helpers built on :class:`~blakehash.crypto.blake2b.Blake2b`."""

from __future__ import annotations

from cryptography.hazmat.primitives import constant_time

from ..config import Blake2bParams
from .blake2b import Blake2b
from .constants import MAX_DIGEST_SIZE
from .errors import ConfigurationError, VerificationError


def blake2b_digest(
    data: bytes,
    *,
    digest_size: int = 32,
    key: bytes | None = None,
    salt: bytes | None = None,
    person: bytes | None = None,
) -> bytes:
    """Compute a BLAKE2b digest.

    Args:
        data: Data to hash.
        digest_size: Output size (1..64). For KDF-like usage, 32 bytes is typical.
        key: Optional key for keyed BLAKE2b (MAC-like usage).
        salt: Optional 16-byte salt.
        person: Optional 16-byte personalization string.

    Returns:
        Digest bytes.

    Raises:
        ConfigurationError: If any parameter is out of range.
    """

    params = Blake2bParams(
        digest_size=digest_size,
        key=key or b"",
        salt=salt,
        personalization=person,
    )
    return Blake2b.from_params(params).finalize(data)


def verify_mac(
    key: bytes,
    data: bytes,
    tag: bytes,
    *,
    salt: bytes | None = None,
    person: bytes | None = None,
    raise_on_failure: bool = False,
) -> bool:
    """Check ``tag`` against keyed BLAKE2b of ``data``.

    The digest size is taken from ``len(tag)``. Comparison is constant time.

    Returns:
        ``True`` if the tag matches. On mismatch returns ``False``, or raises
        :class:`VerificationError` when ``raise_on_failure`` is set.
    """

    if not (1 <= len(tag) <= MAX_DIGEST_SIZE):
        raise ConfigurationError(f"tag must be 1..{MAX_DIGEST_SIZE} bytes")

    expected = blake2b_digest(data, digest_size=len(tag), key=key, salt=salt, person=person)
    ok = constant_time.bytes_eq(expected, bytes(tag))
    if not ok and raise_on_failure:
        raise VerificationError("MAC verification failed")
    return ok
