"""Parameter handling for BLAKE2b engines."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from .crypto.constants import (
    MAX_DIGEST_SIZE,
    MAX_KEY_SIZE,
    PERSONALIZATION_SIZE,
    SALT_SIZE,
)
from .crypto.errors import ConfigurationError, InvalidKeyError

DEFAULT_DIGEST_SIZE = MAX_DIGEST_SIZE

_BYTES_LIKE = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class Blake2bParams:
    """Parameters fixed for the lifetime of an engine.

    ``digest_size`` and ``key`` are set at construction. ``salt`` and
    ``personalization`` are optional 16-byte values for domain separation.
    Byte values are stored as immutable ``bytes`` copies.
    """

    digest_size: int = DEFAULT_DIGEST_SIZE
    key: bytes = b""
    salt: Optional[bytes] = None
    personalization: Optional[bytes] = None

    def __post_init__(self) -> None:
        # Freeze caller buffers so later mutation cannot change the parameters.
        for name in ("key", "salt", "personalization"):
            value = getattr(self, name)
            if isinstance(value, (bytearray, memoryview)):
                object.__setattr__(self, name, bytes(value))
        if self.key is None:
            object.__setattr__(self, "key", b"")

    @property
    def key_size(self) -> int:
        return len(self.key)

    def validate(self) -> List[str]:
        """
        Validate the parameter set.

        Returns:
            List of validation errors. Empty if valid.
        """
        errors = []

        if isinstance(self.digest_size, bool) or not isinstance(self.digest_size, int):
            errors.append("digest_size must be an integer")
        elif not (1 <= self.digest_size <= MAX_DIGEST_SIZE):
            errors.append(f"digest_size must be in range 1..{MAX_DIGEST_SIZE}")

        if not isinstance(self.key, _BYTES_LIKE):
            errors.append("key must be bytes-like")
        elif len(self.key) > MAX_KEY_SIZE:
            errors.append(f"key must be no more than {MAX_KEY_SIZE} bytes")

        if self.salt is not None:
            if not isinstance(self.salt, _BYTES_LIKE):
                errors.append("salt must be bytes-like")
            elif len(self.salt) != SALT_SIZE:
                errors.append(f"salt must be exactly {SALT_SIZE} bytes")

        if self.personalization is not None:
            if not isinstance(self.personalization, _BYTES_LIKE):
                errors.append("personalization must be bytes-like")
            elif len(self.personalization) != PERSONALIZATION_SIZE:
                errors.append(
                    f"personalization must be exactly {PERSONALIZATION_SIZE} bytes"
                )

        return errors

    def check(self) -> "Blake2bParams":
        """Raise :class:`ConfigurationError` unless the parameters are valid."""

        errors = self.validate()
        if errors:
            message = "; ".join(errors)
            if any(e.startswith("key ") for e in errors):
                raise InvalidKeyError(message)
            raise ConfigurationError(message)
        return self

    def with_salt(self, salt: bytes) -> "Blake2bParams":
        return replace(self, salt=salt).check()

    def with_personalization(self, personalization: bytes) -> "Blake2bParams":
        return replace(self, personalization=personalization).check()

    def __repr__(self) -> str:
        # Key material stays out of reprs and logs.
        return (
            f"Blake2bParams(digest_size={self.digest_size!r}, key_size={self.key_size}, "
            f"salt={'set' if self.salt is not None else None}, "
            f"personalization={'set' if self.personalization is not None else None})"
        )
