"""BLAKE2b mixing function and compression core."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from .constants import BLOCK_SIZE, IV, MASK64, NUM_ROUNDS, SIGMA, STATE_WORDS


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & MASK64


def mix(v: list[int], a: int, b: int, c: int, d: int, x: int, y: int) -> None:
    """The G function: mix message words ``x`` and ``y`` into slots a, b, c, d of ``v``."""

    va, vb, vc, vd = v[a], v[b], v[c], v[d]
    va = (va + vb + x) & MASK64
    vd = _rotr(vd ^ va, 32)
    vc = (vc + vd) & MASK64
    vb = _rotr(vb ^ vc, 24)
    va = (va + vb + y) & MASK64
    vd = _rotr(vd ^ va, 16)
    vc = (vc + vd) & MASK64
    vb = _rotr(vb ^ vc, 63)
    v[a], v[b], v[c], v[d] = va, vb, vc, vd


def message_words(block, offset: int = 0) -> list[int]:
    """Parse 128 bytes at ``offset`` of ``block`` as 16 little-endian u64 words."""

    return np.frombuffer(block, dtype="<u8", count=16, offset=offset).tolist()


def state_bytes(state: Sequence[int]) -> bytes:
    """Serialize hash state words as little-endian bytes."""

    return np.array(state, dtype="<u8").tobytes()


def compress(
    state: Sequence[int],
    block,
    counter_low: int,
    counter_high: int,
    final: bool,
    offset: int = 0,
) -> list[int]:
    """Mix one 128-byte block into ``state`` and return the new state.

    Args:
        state: Current 8-word hash state. Not modified.
        block: Any bytes-like object holding at least ``offset + 128`` bytes.
        counter_low: Low word of the byte counter, including this block.
        counter_high: High word of the byte counter.
        final: Whether this is the last block of the message.
        offset: Start of the block within ``block``.

    Returns:
        The updated 8-word state.
    """

    if len(block) - offset < BLOCK_SIZE:
        raise ValueError("compress requires a full 128-byte block")

    m = message_words(block, offset)

    v = list(state) + list(IV)
    v[12] ^= counter_low
    v[13] ^= counter_high
    if final:
        v[14] ^= MASK64

    for r in range(NUM_ROUNDS):
        s = SIGMA[r]
        mix(v, 0, 4, 8, 12, m[s[0]], m[s[1]])
        mix(v, 1, 5, 9, 13, m[s[2]], m[s[3]])
        mix(v, 2, 6, 10, 14, m[s[4]], m[s[5]])
        mix(v, 3, 7, 11, 15, m[s[6]], m[s[7]])
        mix(v, 0, 5, 10, 15, m[s[8]], m[s[9]])
        mix(v, 1, 6, 11, 12, m[s[10]], m[s[11]])
        mix(v, 2, 7, 8, 13, m[s[12]], m[s[13]])
        mix(v, 3, 4, 9, 14, m[s[14]], m[s[15]])

    return [state[i] ^ v[i] ^ v[i + STATE_WORDS] for i in range(STATE_WORDS)]
