"""
Primitive Adapter Unit Tests
Tests for dispnet_hash/crypto/adapter.py

Tests:
- pinned digests of b"test" for every algorithm
- determinism of content hash and checksum
- salt resolution for the password hash
- primitive failures propagate
"""
import pytest

from dispnet_hash.config.runtime import DEFAULT_SALT, HashConfig
from dispnet_hash.crypto.adapter import produce
from dispnet_hash.schemas.digest import AlgorithmTag
from dispnet_hash.schemas.errors import ErrorCodes, PrimitiveFailureError

from fixtures import (
    ARGON2_DEFAULT_CREDENTIAL,
    ARGON2_SALTED_CREDENTIAL,
    BLAKE3_TEST_HEX,
    CRC32C_TEST_VALUE,
    TEST_INPUT,
    TEST_SALT,
)


class TestContentHash:
    """Tests for CONTENT_HASH production."""

    def test_known_digest(self):
        digest = produce(AlgorithmTag.CONTENT_HASH, TEST_INPUT)

        assert digest.hash_type is AlgorithmTag.CONTENT_HASH
        assert digest.digest_length == 32
        assert digest.digest_value.hex() == BLAKE3_TEST_HEX

    def test_salt_ignored(self):
        plain = produce(AlgorithmTag.CONTENT_HASH, TEST_INPUT)
        salted = produce(AlgorithmTag.CONTENT_HASH, TEST_INPUT, HashConfig(salt=TEST_SALT))

        assert plain == salted

    def test_deterministic(self):
        assert produce(AlgorithmTag.CONTENT_HASH, b"x") == produce(AlgorithmTag.CONTENT_HASH, b"x")

    def test_different_inputs_different_digests(self):
        assert produce(AlgorithmTag.CONTENT_HASH, b"a") != produce(AlgorithmTag.CONTENT_HASH, b"b")


class TestChecksum:
    """Tests for CHECKSUM production."""

    def test_digest_is_decimal_text(self):
        digest = produce(AlgorithmTag.CHECKSUM, TEST_INPUT)

        assert digest.digest_value == CRC32C_TEST_VALUE
        assert digest.digest_length == 10
        assert digest.digest_value.isdigit()

    def test_short_checksum_not_zero_padded(self):
        digest = produce(AlgorithmTag.CHECKSUM, b"")

        assert digest.digest_value == b"0"
        assert digest.digest_length == 1

    def test_deterministic(self):
        assert produce(AlgorithmTag.CHECKSUM, b"abc") == produce(AlgorithmTag.CHECKSUM, b"abc")


class TestPasswordHash:
    """Tests for PASSWORD_HASH production."""

    def test_explicit_salt(self):
        digest = produce(AlgorithmTag.PASSWORD_HASH, TEST_INPUT, HashConfig(salt=TEST_SALT))

        assert digest.digest_value == ARGON2_SALTED_CREDENTIAL
        assert digest.digest_length == 84

    def test_default_salt(self):
        digest = produce(AlgorithmTag.PASSWORD_HASH, TEST_INPUT)

        assert digest.digest_value == ARGON2_DEFAULT_CREDENTIAL
        assert digest.digest_length == 121

    def test_empty_salt_uses_default(self):
        assert HashConfig(salt=b"").resolve_salt() == DEFAULT_SALT
        assert produce(
            AlgorithmTag.PASSWORD_HASH, TEST_INPUT, HashConfig(salt=b"")
        ).digest_value == ARGON2_DEFAULT_CREDENTIAL

    def test_salt_sensitive(self):
        a = produce(AlgorithmTag.PASSWORD_HASH, TEST_INPUT, HashConfig(salt=b"saltsalt"))
        b = produce(AlgorithmTag.PASSWORD_HASH, TEST_INPUT, HashConfig(salt=b"tlastlas"))

        assert a != b

    def test_digest_is_ascii(self):
        digest = produce(AlgorithmTag.PASSWORD_HASH, b"\xff\x00binary", HashConfig(salt=TEST_SALT))

        assert digest.digest_value.decode("ascii").startswith("$argon2i$")

    def test_short_salt_propagates_primitive_failure(self):
        with pytest.raises(PrimitiveFailureError) as exc_info:
            produce(AlgorithmTag.PASSWORD_HASH, TEST_INPUT, HashConfig(salt=b"short"))

        assert exc_info.value.code == ErrorCodes.PRIMITIVE_FAILURE
        assert exc_info.value.details["algorithm"] == "PASSWORD_HASH"
        assert exc_info.value.__cause__ is not None


class TestDispatch:
    """Tests for algorithm dispatch."""

    def test_unknown_algorithm_raises(self):
        with pytest.raises(TypeError):
            produce("md5", TEST_INPUT)
