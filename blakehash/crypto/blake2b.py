"""Incremental BLAKE2b engine.

:class:`Blake2b` implements keyed, salted and personalized BLAKE2b with
deferred initialization. The engine buffers input in 128-byte blocks and
always withholds the last block of the message until :meth:`Blake2b.finalize`,
because that block is compressed with the final flag set.

After ``finalize`` the engine returns to its post-initialization state, so the
same instance can hash another message with the same parameters::

    >>> h = Blake2b(32, key=b"secret")
    >>> tag1 = h.update(b"first").finalize()
    >>> tag2 = h.finalize(b"second")

Instances are not thread safe; use one engine per thread.
"""

from __future__ import annotations

import logging

import numpy as np

from ..config import DEFAULT_DIGEST_SIZE, Blake2bParams
from .compress import compress, state_bytes
from .constants import BLOCK_SIZE, IV, PARAM_WORD0
from .counter import ByteCounter
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def _le_words(data: bytes) -> list[int]:
    return np.frombuffer(data, dtype="<u8").tolist()


class Blake2b:
    """Incremental BLAKE2b hash / MAC.

    Args:
        digest_size: Output size in bytes (1..64).
        key: Optional key of up to 64 bytes. A non-empty key turns the hash
            into a MAC.

    Raises:
        ConfigurationError: If ``digest_size`` or the key length is out of range.
    """

    name = "blake2b"
    block_size = BLOCK_SIZE

    def __init__(self, digest_size: int = DEFAULT_DIGEST_SIZE, key: bytes | None = None) -> None:
        self._init_from_params(Blake2bParams(digest_size=digest_size, key=key).check())

    @classmethod
    def from_params(cls, params: Blake2bParams) -> "Blake2b":
        """Build an engine from a complete parameter set."""

        engine = cls.__new__(cls)
        engine._init_from_params(params.check())
        return engine

    def _init_from_params(self, params: Blake2bParams) -> None:
        self._params = params
        self._state: list[int] = list(IV)
        self._counter = ByteCounter()
        self._buffer = bytearray(BLOCK_SIZE)
        self._offset = 0
        self._needs_init = True
        self._absorbed = False

    @property
    def params(self) -> Blake2bParams:
        return self._params

    @property
    def digest_size(self) -> int:
        return self._params.digest_size

    def salt(self, salt: bytes) -> "Blake2b":
        """Set a 16-byte salt.

        Must be called before any message bytes are absorbed (or after a
        ``finalize``). The state is rebuilt on next use.

        Raises:
            ConfigurationError: If ``salt`` is not 16 bytes or the engine is
                already hashing a message.
        """

        self._ensure_configurable("salt")
        self._params = self._params.with_salt(salt)
        self._needs_init = True
        return self

    def personalization(self, personalization: bytes) -> "Blake2b":
        """Set a 16-byte personalization string for domain separation.

        Same timing rules as :meth:`salt`.
        """

        self._ensure_configurable("personalization")
        self._params = self._params.with_personalization(personalization)
        self._needs_init = True
        return self

    def _ensure_configurable(self, what: str) -> None:
        if self._absorbed:
            logger.debug("rejected late %s on engine with pending message data", what)
            raise ConfigurationError(
                f"{what} must be set before the first update or after finalize"
            )

    def _initialize(self) -> None:
        params = self._params
        key = params.key
        state = list(IV)
        state[0] ^= PARAM_WORD0 | (len(key) << 8) | params.digest_size

        if params.salt is not None:
            s0, s1 = _le_words(params.salt)
            state[4] ^= s0
            state[5] ^= s1

        if params.personalization is not None:
            p0, p1 = _le_words(params.personalization)
            state[6] ^= p0
            state[7] ^= p1

        self._state = state
        self._counter.reset()
        self._offset = 0

        # The key block stays buffered until the buffer-full rule flushes it.
        if key:
            self._buffer[:] = bytes(BLOCK_SIZE)
            self._buffer[: len(key)] = key
            self._offset = BLOCK_SIZE

        self._needs_init = False
        self._absorbed = False
        logger.debug("initialized %r", params)

    def _compress_block(self, block, offset: int = 0, final: bool = False) -> None:
        self._state = compress(
            self._state, block, self._counter.low, self._counter.high, final, offset
        )

    def update(self, data: bytes) -> "Blake2b":
        """Absorb ``data`` (any bytes-like object); returns ``self`` for chaining."""

        if self._needs_init:
            self._initialize()

        view = memoryview(data).cast("B")
        n = len(view)
        if n == 0:
            return self
        self._absorbed = True

        pos = 0
        if self._offset:
            take = min(n, BLOCK_SIZE - self._offset)
            self._buffer[self._offset : self._offset + take] = view[:take]
            self._offset += take
            pos = take
            if pos == n:
                return self
            # Buffer is full and more input follows, so it is not the last block.
            self._counter.increment(BLOCK_SIZE)
            self._compress_block(self._buffer)
            self._offset = 0

        # Interior blocks go straight from the caller's buffer.
        while n - pos > BLOCK_SIZE:
            self._counter.increment(BLOCK_SIZE)
            self._compress_block(view, pos)
            pos += BLOCK_SIZE

        tail = n - pos
        self._buffer[:tail] = view[pos:]
        self._offset = tail
        return self

    def finalize(self, data: bytes | None = None) -> bytes:
        """Return the digest and reset the engine for reuse.

        Args:
            data: Optional final chunk, equivalent to ``update(data)`` first.

        Returns:
            ``digest_size`` bytes.
        """

        if data is not None:
            self.update(data)
        elif self._needs_init:
            self._initialize()

        self._counter.increment(self._offset)
        self._buffer[self._offset :] = bytes(BLOCK_SIZE - self._offset)
        self._compress_block(self._buffer, final=True)

        out = state_bytes(self._state)[: self.digest_size]

        self._needs_init = True
        self._absorbed = False
        return out

    def __repr__(self) -> str:
        return f"Blake2b(digest_size={self.digest_size}, keyed={bool(self._params.key)})"


def hash(data: bytes, digest_size: int = DEFAULT_DIGEST_SIZE) -> bytes:
    """One-shot unkeyed BLAKE2b digest of ``data``."""

    return Blake2b(digest_size).finalize(data)


def mac(key: bytes, data: bytes, digest_size: int = DEFAULT_DIGEST_SIZE) -> bytes:
    """One-shot keyed BLAKE2b (MAC) of ``data`` under ``key``."""

    return Blake2b(digest_size, key=key).finalize(data)
