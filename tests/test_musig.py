"""
zkscrypto MuSig Signature Tests
"""

from unittest.mock import patch

import pytest

from zkscrypto.constants import SUBGROUP_ORDER, MAX_SIGNED_MESSAGE_LEN
from zkscrypto.core.errors import MessageTooLongError, InvalidKeyError, InternalError
from zkscrypto.crypto.curve import IDENTITY, compress, decompress, scalar_mult
from zkscrypto.crypto.field import P
from zkscrypto.crypto.keys import private_key_from_seed, private_key_to_public_key
from zkscrypto.crypto.musig import (
    sign_musig,
    verify_musig,
    message_to_elements,
    deterministic_nonce,
    challenge,
)


@pytest.fixture
def raw_keys(seed_ones):
    """(private key, public key) bytes for the 0x01 seed."""
    private_key = private_key_from_seed(seed_ones)
    return private_key, private_key_to_public_key(private_key)


class TestMessageLength:
    """Tests for the message length limit."""

    @pytest.mark.parametrize("length", [0, 1, 31, 62, 91, 92])
    def test_accepted_lengths(self, raw_keys, length):
        """Test messages up to 92 bytes sign."""
        private_key, _ = raw_keys
        assert len(sign_musig(private_key, b"\xab" * length, verify=False)) == 64

    def test_too_long(self, raw_keys):
        """Test 93-byte message is rejected."""
        private_key, _ = raw_keys
        with pytest.raises(MessageTooLongError):
            sign_musig(private_key, b"\x00" * (MAX_SIGNED_MESSAGE_LEN + 1))

    def test_length_checked_first(self):
        """Test message length is checked before the key."""
        with pytest.raises(MessageTooLongError):
            sign_musig(bytes(32), b"\x00" * 93)
        with pytest.raises(InvalidKeyError):
            sign_musig(bytes(32), b"\x00" * 92)


class TestSigning:
    """Tests for signature generation."""

    def test_deterministic(self, raw_keys):
        """Test same key and message give same signature."""
        private_key, _ = raw_keys
        assert sign_musig(private_key, b"hello") == sign_musig(private_key, b"hello")

    def test_distinct_messages(self, raw_keys):
        """Test different messages give different nonces and signatures."""
        private_key, _ = raw_keys
        sig1 = sign_musig(private_key, b"hello")
        sig2 = sign_musig(private_key, b"hellp")
        assert sig1[:32] != sig2[:32]
        assert sig1[32:] != sig2[32:]

    def test_distinct_keys(self, raw_keys):
        """Test different keys give different signatures."""
        private_key, _ = raw_keys
        other = private_key_from_seed(bytes(32))
        assert sign_musig(private_key, b"hello") != sign_musig(other, b"hello")

    def test_s_canonical(self, raw_keys):
        """Test s is below the subgroup order."""
        private_key, _ = raw_keys
        signature = sign_musig(private_key, b"hello")
        assert int.from_bytes(signature[32:], "little") < SUBGROUP_ORDER

    def test_nonce_in_range(self):
        """Test nonce is a valid non-zero scalar."""
        for message in (b"", b"a", b"\xff" * 92):
            assert 0 < deterministic_nonce(12345, message) < SUBGROUP_ORDER

    def test_self_check_failure(self, raw_keys):
        """Test a signature failing self-verification is never returned."""
        private_key, _ = raw_keys
        with patch("zkscrypto.crypto.musig.verify_musig", return_value=False):
            with pytest.raises(InternalError):
                sign_musig(private_key, b"hello", verify=True)

    def test_self_check_disabled(self, raw_keys):
        """Test self-verification can be skipped."""
        private_key, _ = raw_keys
        with patch("zkscrypto.crypto.musig.verify_musig", return_value=False) as mocked:
            sign_musig(private_key, b"hello", verify=False)
            mocked.assert_not_called()


class TestVerification:
    """Tests for signature verification."""

    def test_valid_signature(self, raw_keys):
        """Test fresh signatures verify."""
        private_key, public_key = raw_keys
        for message in (b"", b"hello", b"\xff" * 92):
            signature = sign_musig(private_key, message)
            assert verify_musig(public_key, message, signature)

    def test_wrong_message(self, raw_keys):
        """Test signature does not verify another message."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"hello")
        assert not verify_musig(public_key, b"hellp", signature)

    def test_zero_padding_not_equivalent(self, raw_keys):
        """Test trailing zero bytes change the signed message."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"a")
        assert not verify_musig(public_key, b"a\x00", signature)

    def test_wrong_key(self, raw_keys):
        """Test signature does not verify under another key."""
        private_key, _ = raw_keys
        other_public = private_key_to_public_key(private_key_from_seed(bytes(32)))
        signature = sign_musig(private_key, b"hello")
        assert not verify_musig(other_public, b"hello", signature)

    def test_tampered_s(self, raw_keys):
        """Test modified s fails."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"hello")
        s = int.from_bytes(signature[32:], "little")
        tampered = signature[:32] + ((s + 1) % SUBGROUP_ORDER).to_bytes(32, "little")
        assert not verify_musig(public_key, b"hello", tampered)

    def test_non_canonical_s(self, raw_keys):
        """Test s + l is rejected."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"hello")
        s = int.from_bytes(signature[32:], "little")
        malleated = signature[:32] + (s + SUBGROUP_ORDER).to_bytes(32, "little")
        assert not verify_musig(public_key, b"hello", malleated)

    def test_tampered_r(self, raw_keys):
        """Test modified R fails."""
        private_key, public_key = raw_keys
        signature = bytearray(sign_musig(private_key, b"hello"))
        signature[0] ^= 0x01
        assert not verify_musig(public_key, b"hello", bytes(signature))

    def test_low_order_r(self, raw_keys):
        """Test R outside the subgroup is rejected."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"hello")
        bad = (P - 1).to_bytes(32, "little") + signature[32:]
        assert not verify_musig(public_key, b"hello", bad)

    def test_malformed_inputs(self, raw_keys):
        """Test malformed inputs return False instead of raising."""
        private_key, public_key = raw_keys
        signature = sign_musig(private_key, b"hello")
        assert not verify_musig(public_key, b"hello", signature[:63])
        assert not verify_musig(public_key, b"\x00" * 93, signature)
        assert not verify_musig(b"\xff" * 32, b"hello", signature)
        assert not verify_musig(b"", b"hello", signature)

    @pytest.mark.parametrize("message", [b"", b"pay mallory 1000", b"\xff" * 92])
    def test_identity_public_key(self, params, message):
        """Test no signature verifies under the identity public key."""
        s = 123456789
        forged = compress(scalar_mult(s, params.generator)) + s.to_bytes(32, "little")
        assert not verify_musig(compress(IDENTITY), message, forged)

    def test_identity_r(self, raw_keys):
        """Test a signature with R at the identity is rejected."""
        private_key, public_key = raw_keys
        scalar = int.from_bytes(private_key, "big")
        e = challenge(decompress(public_key), IDENTITY, b"hello")
        s = e * scalar % SUBGROUP_ORDER
        signature = compress(IDENTITY) + s.to_bytes(32, "little")
        assert not verify_musig(public_key, b"hello", signature)


class TestMessagePacking:
    """Tests for challenge message packing."""

    def test_element_count(self):
        """Test every message packs to length plus three chunks."""
        for length in (0, 31, 32, 92):
            elements = message_to_elements(b"\x01" * length)
            assert len(elements) == 4
            assert elements[0] == length

    def test_chunks_below_modulus(self):
        """Test chunks are field elements."""
        assert all(e < P for e in message_to_elements(b"\xff" * 92))

    def test_chunk_layout(self):
        """Test little-endian 31-byte chunks."""
        elements = message_to_elements(b"\x01" + b"\x00" * 30 + b"\x02")
        assert elements == [32, 1, 2, 0]
