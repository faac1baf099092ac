"""
zkscrypto Prime Field Arithmetic

Helpers over the BN254 scalar field, which is the base field of the
Baby Jubjub curve. Elements are plain Python ints in [0, p).
"""

from __future__ import annotations
from typing import Optional

from Crypto.Util.number import inverse

from zkscrypto.constants import FIELD_MODULUS, FIELD_BYTES

P = FIELD_MODULUS


def _two_adic_split(n: int) -> tuple[int, int]:
    """Write n as q * 2^s with q odd, return (q, s)."""
    s = 0
    while n % 2 == 0:
        n //= 2
        s += 1
    return n, s


def legendre(a: int) -> int:
    """
    Legendre symbol of a.

    Returns:
        1 for a non-zero square, -1 for a non-square, 0 for zero
    """
    a %= P
    if a == 0:
        return 0
    ls = pow(a, (P - 1) // 2, P)
    return 1 if ls == 1 else -1


def _find_non_residue() -> int:
    z = 2
    while legendre(z) != -1:
        z += 1
    return z


_ODD_PART, _TWO_ADICITY = _two_adic_split(P - 1)
_NON_RESIDUE = _find_non_residue()


def inv(a: int) -> int:
    """Multiplicative inverse. Raises ZeroDivisionError for zero."""
    a %= P
    if a == 0:
        raise ZeroDivisionError("Zero has no inverse in the field")
    return inverse(a, P)


def sqrt(a: int) -> Optional[int]:
    """
    Square root by Tonelli-Shanks.

    Returns one root r with r*r == a (mod p), or None if a is not a square.
    The caller picks between r and p - r.
    """
    a %= P
    if a == 0:
        return 0
    if legendre(a) != 1:
        return None

    m = _TWO_ADICITY
    c = pow(_NON_RESIDUE, _ODD_PART, P)
    t = pow(a, _ODD_PART, P)
    r = pow(a, (_ODD_PART + 1) // 2, P)

    while t != 1:
        # Least i with t^(2^i) == 1
        i = 0
        t2 = t
        while t2 != 1:
            t2 = t2 * t2 % P
            i += 1
        b = pow(c, 1 << (m - i - 1), P)
        m = i
        c = b * b % P
        t = t * c % P
        r = r * b % P

    return r


def to_le_bytes(a: int) -> bytes:
    return (a % P).to_bytes(FIELD_BYTES, "little")


def from_le_bytes(data: bytes) -> int:
    """Read a canonical element. Raises ValueError if not below p."""
    value = int.from_bytes(data, "little")
    if value >= P:
        raise ValueError("Field element is not canonical")
    return value
