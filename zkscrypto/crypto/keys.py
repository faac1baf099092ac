"""
zkscrypto Key Derivation

seed -> private key -> public key -> public key hash

All functions work on raw bytes:
- private key: 32-byte big-endian scalar in [1, l)
- public key: 32-byte packed point
- public key hash: 20 bytes, low 160 bits of Rescue(x, y), big-endian
"""

from __future__ import annotations
import logging

from Crypto.Hash import SHA256

from zkscrypto.constants import (
    MIN_SEED_LEN,
    PRIVATE_KEY_LEN,
    PUBKEY_HASH_LEN,
    PUBKEY_HASH_BITS,
    SUBGROUP_ORDER,
)
from zkscrypto.core.errors import SeedTooShortError, InvalidKeyError
from zkscrypto.crypto.curve import (
    Point,
    scalar_mult,
    compress,
    decompress,
    to_affine,
    is_identity,
)
from zkscrypto.crypto.params import get_params
from zkscrypto.crypto.rescue import rescue_hash

logger = logging.getLogger(__name__)


def sha256(data: bytes) -> bytes:
    """Compute SHA-256 hash."""
    return SHA256.new(data).digest()


def hash_to_scalar(digest: bytes) -> int:
    """
    Rejection-sample a scalar in [1, l) from a 32-byte digest.

    Re-hashes the digest until its big-endian value is a valid non-zero
    scalar. The result is uniform over [1, l).
    """
    attempts = 1
    candidate = int.from_bytes(digest, "big")
    while not 0 < candidate < SUBGROUP_ORDER:
        digest = sha256(digest)
        candidate = int.from_bytes(digest, "big")
        attempts += 1

    logger.debug(f"Scalar sampled after {attempts} attempt(s)")
    return candidate


def private_key_from_seed(seed: bytes) -> bytes:
    """
    Derive a private key from seed material.

    Args:
        seed: At least MIN_SEED_LEN bytes

    Returns:
        32-byte big-endian scalar

    Raises:
        SeedTooShortError: If the seed is shorter than MIN_SEED_LEN
    """
    if len(seed) < MIN_SEED_LEN:
        raise SeedTooShortError(
            f"Given seed is too short, length must be greater than {MIN_SEED_LEN}"
        )

    scalar = hash_to_scalar(sha256(sha256(seed)))
    return scalar.to_bytes(PRIVATE_KEY_LEN, "big")


def scalar_from_private_key(private_key: bytes) -> int:
    """
    Read and range-check a private key.

    Raises:
        InvalidKeyError: If the key is not 32 bytes or not in [1, l)
    """
    if len(private_key) != PRIVATE_KEY_LEN:
        raise InvalidKeyError(
            f"Private key must be {PRIVATE_KEY_LEN} bytes, got {len(private_key)}"
        )

    scalar = int.from_bytes(private_key, "big")
    if not 0 < scalar < SUBGROUP_ORDER:
        raise InvalidKeyError("Private key is outside the scalar range")
    return scalar


def public_point(scalar: int) -> Point:
    return scalar_mult(scalar, get_params().generator)


def private_key_to_public_key(private_key: bytes) -> bytes:
    """
    Derive the packed public key P = k * G.

    Raises:
        InvalidKeyError: If the private key is invalid
    """
    try:
        scalar = scalar_from_private_key(private_key)
    except InvalidKeyError as e:
        raise InvalidKeyError(f"Error on public key generation: {e}") from e
    return compress(public_point(scalar))


def decode_public_key(public_key: bytes) -> Point:
    """
    Unpack a public key and check subgroup membership.

    The identity point is in the subgroup but has no private key, so it is
    rejected as well.

    Raises:
        InvalidKeyError: If the bytes are not a valid public key
    """
    try:
        point = decompress(public_key)
    except ValueError as e:
        raise InvalidKeyError(f"Invalid public key: {e}") from e

    if is_identity(point):
        raise InvalidKeyError("Invalid public key: identity point")
    return point


def public_key_to_pubkey_hash(public_key: bytes) -> bytes:
    """
    Compress a public key into its 20-byte account identifier.

    Raises:
        InvalidKeyError: If the public key does not decode
    """
    try:
        point = decode_public_key(public_key)
    except InvalidKeyError as e:
        raise InvalidKeyError(f"Error on public key hash generation: {e}") from e

    x, y = to_affine(point)
    digest = rescue_hash([x, y], get_params().rescue)

    low_bits = digest & ((1 << PUBKEY_HASH_BITS) - 1)
    return low_bits.to_bytes(PUBKEY_HASH_LEN, "big")
