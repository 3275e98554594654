"""Unit tests for blakehash.crypto module."""

import hashlib

import pytest

from blakehash.crypto import (
    Blake2b,
    ConfigurationError,
    CryptoError,
    InvalidKeyError,
    VerificationError,
    blake2b_digest,
    hash,
    mac,
    verify_mac,
)


class TestErrors:
    """Test the exception hierarchy."""

    def test_configuration_error_inheritance(self):
        """Test ConfigurationError is both a CryptoError and a ValueError."""
        error = ConfigurationError("bad digest size")
        assert isinstance(error, CryptoError)
        assert isinstance(error, ValueError)
        assert str(error) == "bad digest size"

    def test_invalid_key_error_inheritance(self):
        """Test InvalidKeyError is a ConfigurationError."""
        assert issubclass(InvalidKeyError, ConfigurationError)

    def test_verification_error_inheritance(self):
        """Test VerificationError is not a configuration problem."""
        assert issubclass(VerificationError, CryptoError)
        assert not issubclass(VerificationError, ConfigurationError)


class TestBlake2bConstruction:
    """Test Blake2b constructor validation."""

    @pytest.mark.parametrize("digest_size", [1, 64])
    def test_digest_size_boundaries_succeed(self, digest_size):
        """Test output sizes 1 and 64."""
        engine = Blake2b(digest_size)
        assert engine.digest_size == digest_size
        assert len(engine.finalize(b"abc")) == digest_size

    @pytest.mark.parametrize("digest_size", [0, 65])
    def test_digest_size_boundaries_fail(self, digest_size):
        """Test output sizes 0 and 65."""
        with pytest.raises(ConfigurationError):
            Blake2b(digest_size)

    def test_key_length_64_succeeds(self):
        """Test the maximum key length."""
        engine = Blake2b(32, key=b"\xaa" * 64)
        assert len(engine.finalize(b"")) == 32

    def test_key_length_65_fails(self):
        """Test a key one byte too long."""
        with pytest.raises(ConfigurationError):
            Blake2b(32, key=b"\xaa" * 65)

    def test_attributes(self):
        """Test hashlib-style attributes."""
        engine = Blake2b(20)
        assert engine.name == "blake2b"
        assert engine.block_size == 128
        assert engine.params.digest_size == 20
        assert "keyed=False" in repr(engine)

    def test_salt_wrong_size(self):
        """Test salt length validation happens at the call."""
        engine = Blake2b(32)
        with pytest.raises(ConfigurationError):
            engine.salt(b"too short")

    def test_personalization_wrong_size(self):
        """Test personalization length validation happens at the call."""
        engine = Blake2b(32)
        with pytest.raises(ConfigurationError):
            engine.personalization(b"p" * 17)

    def test_configuration_is_chainable(self, salt, person):
        """Test salt and personalization return the engine."""
        engine = Blake2b(32)
        assert engine.salt(salt).personalization(person) is engine

    def test_update_rejects_text(self):
        """Test str input is not silently encoded."""
        with pytest.raises(TypeError):
            Blake2b(32).update("abc")


class TestHashHelpers:
    """Test one-shot helpers."""

    def test_hash_default_size(self):
        """Test hash defaults to a 64-byte digest."""
        assert hash(b"abc") == hashlib.blake2b(b"abc").digest()

    def test_mac_matches_reference(self, key):
        """Test mac against hashlib keyed BLAKE2b."""
        assert mac(key, b"data", 32) == hashlib.blake2b(b"data", key=key, digest_size=32).digest()

    def test_blake2b_digest_all_params(self, key, salt, person):
        """Test blake2b_digest forwards every parameter."""
        expected = hashlib.blake2b(
            b"payload", digest_size=24, key=key, salt=salt, person=person
        ).digest()
        assert blake2b_digest(b"payload", digest_size=24, key=key, salt=salt, person=person) == expected

    def test_blake2b_digest_validation(self):
        """Test blake2b_digest propagates configuration errors."""
        with pytest.raises(ConfigurationError):
            blake2b_digest(b"", digest_size=0)


class TestVerifyMac:
    """Test MAC verification."""

    def test_valid_tag(self, key):
        """Test a correct tag verifies."""
        tag = mac(key, b"message", 16)
        assert verify_mac(key, b"message", tag) is True

    def test_tampered_tag(self, key):
        """Test a modified tag is rejected."""
        tag = bytearray(mac(key, b"message", 16))
        tag[-1] ^= 0x01
        assert verify_mac(key, b"message", bytes(tag)) is False

    def test_wrong_key_raises(self, key):
        """Test raise_on_failure turns a mismatch into an exception."""
        tag = mac(key, b"message", 32)
        with pytest.raises(VerificationError):
            verify_mac(b"other key", b"message", tag, raise_on_failure=True)

    def test_salted_tag(self, key, salt):
        """Test salt is part of the verified MAC."""
        tag = blake2b_digest(b"m", digest_size=32, key=key, salt=salt)
        assert verify_mac(key, b"m", tag, salt=salt)
        assert not verify_mac(key, b"m", tag)

    @pytest.mark.parametrize("size", [0, 65])
    def test_bad_tag_length(self, key, size):
        """Test tags outside 1..64 bytes are a configuration error."""
        with pytest.raises(ConfigurationError):
            verify_mac(key, b"m", b"\x00" * size)
