"""
zkscrypto MuSig Signatures

Single-signer Schnorr over Baby Jubjub with MuSig-style nonce and challenge:

  r = H*(NONCE_TAG || k || m)          deterministic nonce in [1, l)
  R = r * G
  e = Rescue(Px, Py, Rx, Ry, |m|, m_0, m_1, m_2) mod l
  s = r + e * k mod l

Signature: packed R (32 bytes) || s (32 bytes, little-endian).
Verification: s * G == R + e * P.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from zkscrypto.config import get_config
from zkscrypto.constants import (
    MAX_SIGNED_MESSAGE_LEN,
    MESSAGE_CHUNK_LEN,
    MESSAGE_CHUNKS,
    NONCE_TAG,
    PACKED_POINT_LEN,
    PACKED_SIGNATURE_LEN,
    SCALAR_LEN,
    SUBGROUP_ORDER,
)
from zkscrypto.core.errors import MessageTooLongError, InvalidKeyError, InternalError
from zkscrypto.crypto.curve import (
    Point,
    point_add,
    scalar_mult,
    points_equal,
    compress,
    decompress,
    to_affine,
    is_identity,
)
from zkscrypto.crypto.keys import (
    sha256,
    hash_to_scalar,
    scalar_from_private_key,
    public_point,
    decode_public_key,
)
from zkscrypto.crypto.params import get_params
from zkscrypto.crypto.rescue import rescue_hash

logger = logging.getLogger(__name__)


def check_message_len(message: bytes) -> None:
    """
    Raises:
        MessageTooLongError: If the message exceeds MAX_SIGNED_MESSAGE_LEN
    """
    if len(message) > MAX_SIGNED_MESSAGE_LEN:
        raise MessageTooLongError(
            f"Musig message length must not be larger than {MAX_SIGNED_MESSAGE_LEN}"
        )


def message_to_elements(message: bytes) -> List[int]:
    """Pack a message into length || fixed number of 31-byte LE chunks."""
    padded = message.ljust(MESSAGE_CHUNK_LEN * MESSAGE_CHUNKS, b"\x00")
    chunks = [
        int.from_bytes(padded[i:i + MESSAGE_CHUNK_LEN], "little")
        for i in range(0, len(padded), MESSAGE_CHUNK_LEN)
    ]
    return [len(message)] + chunks


def deterministic_nonce(scalar: int, message: bytes) -> int:
    """Derive the per-message nonce from the private scalar and message."""
    seed = NONCE_TAG + scalar.to_bytes(SCALAR_LEN, "big") + message
    return hash_to_scalar(sha256(seed))


def challenge(public: Point, nonce_point: Point, message: bytes) -> int:
    """Challenge scalar binding the signer key, nonce commitment and message."""
    px, py = to_affine(public)
    rx, ry = to_affine(nonce_point)
    inputs = [px, py, rx, ry] + message_to_elements(message)
    return rescue_hash(inputs, get_params().rescue) % SUBGROUP_ORDER


def sign_musig(
    private_key: bytes,
    message: bytes,
    verify: Optional[bool] = None,
) -> bytes:
    """
    Sign a message.

    Args:
        private_key: 32-byte big-endian scalar
        message: At most MAX_SIGNED_MESSAGE_LEN bytes
        verify: Verify the signature before returning it. Defaults to
            CryptoConfig.verify_after_sign

    Returns:
        64-byte packed signature

    Raises:
        MessageTooLongError: If the message is too long
        InvalidKeyError: If the private key is invalid
        InternalError: If the fresh signature fails verification
    """
    check_message_len(message)
    scalar = scalar_from_private_key(private_key)

    public = public_point(scalar)
    nonce = deterministic_nonce(scalar, message)
    nonce_point = scalar_mult(nonce, get_params().generator)

    e = challenge(public, nonce_point, message)
    s = (nonce + e * scalar) % SUBGROUP_ORDER

    signature = compress(nonce_point) + s.to_bytes(SCALAR_LEN, "little")

    if verify is None:
        verify = get_config().verify_after_sign
    if verify and not verify_musig(compress(public), message, signature):
        raise InternalError("Signature failed verification after signing")

    return signature


def verify_musig(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify a signature.

    Returns False for any malformed input instead of raising.
    """
    if len(message) > MAX_SIGNED_MESSAGE_LEN:
        logger.debug("Verification failed: message too long")
        return False

    if len(signature) != PACKED_SIGNATURE_LEN:
        logger.debug(f"Verification failed: signature length {len(signature)}")
        return False

    try:
        public = decode_public_key(public_key)
    except InvalidKeyError as e:
        logger.debug(f"Verification failed: {e}")
        return False

    try:
        nonce_point = decompress(signature[:PACKED_POINT_LEN])
    except ValueError as e:
        logger.debug(f"Verification failed: bad R: {e}")
        return False

    if is_identity(nonce_point):
        logger.debug("Verification failed: R is the identity")
        return False

    s = int.from_bytes(signature[PACKED_POINT_LEN:], "little")
    if s >= SUBGROUP_ORDER:
        logger.debug("Verification failed: s is not canonical")
        return False

    e = challenge(public, nonce_point, message)
    generator = get_params().generator

    lhs = scalar_mult(s, generator)
    rhs = point_add(nonce_point, scalar_mult(e, public))
    if not points_equal(lhs, rhs):
        logger.debug("Verification failed: equation does not hold")
        return False
    return True
