"""
zkscrypto Baby Jubjub Curve Arithmetic

Twisted Edwards curve a*x^2 + y^2 = 1 + d*x^2*y^2 over the BN254 scalar
field. a is a square and d is not, so the unified addition law is complete:
the same formula adds, doubles and handles the identity.

Points are projective triples (X, Y, Z) with x = X/Z, y = Y/Z.
Identity is (0, 1, 1).

Packed encoding (32 bytes): y little-endian, top bit of the last byte set
iff x is odd.
"""

from __future__ import annotations
import logging
from typing import Tuple

from Crypto.Hash import BLAKE2s

from zkscrypto.constants import (
    EDWARDS_A,
    EDWARDS_D,
    SUBGROUP_ORDER,
    COFACTOR,
    SCALAR_BITS,
    PACKED_POINT_LEN,
    POINT_SIGN_MASK,
    GROUP_HASH_MAX_ATTEMPTS,
)
from zkscrypto.core.errors import InternalError
from zkscrypto.crypto.field import P, inv, sqrt

logger = logging.getLogger(__name__)

Point = Tuple[int, int, int]

IDENTITY: Point = (0, 1, 1)


def point_add(p1: Point, p2: Point) -> Point:
    """Unified projective addition (add-2008-bbjlp)."""
    x1, y1, z1 = p1
    x2, y2, z2 = p2

    a = z1 * z2 % P
    b = a * a % P
    c = x1 * x2 % P
    d = y1 * y2 % P
    e = EDWARDS_D * c % P * d % P
    f = (b - e) % P
    g = (b + e) % P

    x3 = a * f % P * (((x1 + y1) * (x2 + y2) - c - d) % P) % P
    y3 = a * g % P * ((d - EDWARDS_A * c) % P) % P
    z3 = f * g % P
    return x3, y3, z3


def point_double(p: Point) -> Point:
    return point_add(p, p)


def point_negate(p: Point) -> Point:
    x, y, z = p
    return (-x) % P, y, z


def scalar_mult(k: int, p: Point) -> Point:
    """
    Multiply point by non-negative scalar k.

    Left-to-right double-and-add that always computes the addition and
    iterates over at least SCALAR_BITS bits, so the operation count does not
    depend on the value of k.
    """
    if k < 0:
        raise ValueError(f"Scalar must be non-negative: {k}")

    result = IDENTITY
    for i in reversed(range(max(k.bit_length(), SCALAR_BITS))):
        result = point_double(result)
        added = point_add(result, p)
        if (k >> i) & 1:
            result = added
    return result


def to_affine(p: Point) -> Tuple[int, int]:
    x, y, z = p
    z_inv = inv(z)
    return x * z_inv % P, y * z_inv % P


def from_affine(x: int, y: int) -> Point:
    return x % P, y % P, 1


def points_equal(p1: Point, p2: Point) -> bool:
    x1, y1, z1 = p1
    x2, y2, z2 = p2
    return (x1 * z2 - x2 * z1) % P == 0 and (y1 * z2 - y2 * z1) % P == 0


def is_identity(p: Point) -> bool:
    return points_equal(p, IDENTITY)


def is_on_curve(x: int, y: int) -> bool:
    """Check the affine curve equation."""
    xx = x * x % P
    yy = y * y % P
    return (EDWARDS_A * xx + yy - 1 - EDWARDS_D * xx % P * yy) % P == 0


def is_in_subgroup(p: Point) -> bool:
    """Check that l * P is the identity."""
    return is_identity(scalar_mult(SUBGROUP_ORDER, p))


def recover_x(y: int, is_odd: bool) -> int:
    """
    Solve the curve equation for x.

    Raises:
        ValueError: If no point with this y exists
    """
    yy = y * y % P
    num = (1 - yy) % P
    den = (EDWARDS_A - EDWARDS_D * yy) % P
    if den == 0:
        raise ValueError("No curve point with this y coordinate")

    x = sqrt(num * inv(den) % P)
    if x is None:
        raise ValueError("No curve point with this y coordinate")
    if x == 0 and is_odd:
        raise ValueError("Sign bit set for x = 0")
    if (x & 1) != int(is_odd):
        x = P - x
    return x


def compress(p: Point) -> bytes:
    """Pack a point into 32 bytes."""
    x, y = to_affine(p)
    packed = bytearray(y.to_bytes(PACKED_POINT_LEN, "little"))
    if x & 1:
        packed[-1] |= POINT_SIGN_MASK
    return bytes(packed)


def decompress(data: bytes, check_subgroup: bool = True) -> Point:
    """
    Unpack a 32-byte point.

    Args:
        data: Packed point
        check_subgroup: Also require the point to lie in the prime-order subgroup

    Raises:
        ValueError: If data is not a valid packed point
    """
    if len(data) != PACKED_POINT_LEN:
        raise ValueError(
            f"Packed point must be {PACKED_POINT_LEN} bytes, got {len(data)}"
        )

    is_odd = bool(data[-1] & POINT_SIGN_MASK)
    raw = bytearray(data)
    raw[-1] &= ~POINT_SIGN_MASK & 0xFF
    y = int.from_bytes(raw, "little")
    if y >= P:
        raise ValueError("Point y coordinate is not canonical")

    x = recover_x(y, is_odd)
    point = from_affine(x, y)

    if check_subgroup and not is_in_subgroup(point):
        raise ValueError("Point is not in the prime-order subgroup")
    return point


def hash_to_point(tag: bytes) -> Point:
    """
    Group hash: map a tag to a point of the prime-order subgroup.

    Try-and-increment over BLAKE2s(tag || counter), decoding each digest as
    a packed point and clearing the cofactor. The first non-identity result
    is returned.

    Raises:
        InternalError: If no candidate decodes within GROUP_HASH_MAX_ATTEMPTS
    """
    for counter in range(GROUP_HASH_MAX_ATTEMPTS):
        digest = BLAKE2s.new(
            digest_bits=256,
            data=tag + counter.to_bytes(4, "little"),
        ).digest()

        try:
            candidate = decompress(digest, check_subgroup=False)
        except ValueError:
            continue

        point = scalar_mult(COFACTOR, candidate)
        if is_identity(point):
            continue

        logger.debug(f"Group hash for {tag!r} found at counter {counter}")
        return point

    raise InternalError(
        f"Group hash failed after {GROUP_HASH_MAX_ATTEMPTS} attempts"
    )
