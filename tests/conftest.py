"""Test configuration for blakehash package."""

import random

import pytest


@pytest.fixture
def rng():
    """Seeded random generator so failures are reproducible."""
    return random.Random(0xB1A4E2B)


@pytest.fixture
def message(rng):
    """Provide a multi-block message that does not end on a block boundary."""
    return bytes(rng.getrandbits(8) for _ in range(1000))


@pytest.fixture
def key():
    """Provide a 32-byte MAC key."""
    return bytes(range(32))


@pytest.fixture
def salt():
    """Provide a 16-byte salt."""
    return b"0123456789abcdef"


@pytest.fixture
def person():
    """Provide a 16-byte personalization string."""
    return b"blakehash-test!!"
