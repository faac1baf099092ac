"""
zkscrypto Rescue Hash

Rescue sponge over the BN254 scalar field, used wherever a hash must be
native to the curve's base field (public key hash, signature challenge).

Parameters:
- Width 3, rate 2, capacity 1
- S-boxes x^5 and x^(1/5), alternating within each round
- 22 rounds
- Cauchy MDS matrix M[i][j] = 1 / (i + width + j)
- Round constants squeezed from SHAKE256(tag), 64 bytes each, reduced mod p
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from Crypto.Hash import SHAKE256

from zkscrypto.constants import (
    RESCUE_WIDTH,
    RESCUE_RATE,
    RESCUE_ROUNDS,
    RESCUE_ALPHA,
    RESCUE_CONSTANT_BYTES,
    RESCUE_TAG,
)
from zkscrypto.crypto.field import P, inv


@dataclass(frozen=True)
class RescueParams:
    """Fixed parameter set of a Rescue instance."""
    width: int
    rate: int
    rounds: int
    alpha: int
    alpha_inv: int
    mds: Tuple[Tuple[int, ...], ...]
    round_constants: Tuple[Tuple[int, ...], ...]

    def __repr__(self) -> str:
        return (
            f"RescueParams(width={self.width}, rate={self.rate}, "
            f"rounds={self.rounds}, alpha={self.alpha})"
        )

    @classmethod
    def generate(
        cls,
        tag: bytes = RESCUE_TAG,
        width: int = RESCUE_WIDTH,
        rate: int = RESCUE_RATE,
        rounds: int = RESCUE_ROUNDS,
        alpha: int = RESCUE_ALPHA,
    ) -> RescueParams:
        """
        Derive a parameter set deterministically from a domain tag.

        Raises:
            ValueError: If rate does not leave capacity, or alpha is not
                invertible modulo p - 1
        """
        if not 0 < rate < width:
            raise ValueError(f"Rate must be in (0, {width}): {rate}")
        alpha_inv = pow(alpha, -1, P - 1)

        mds = tuple(
            tuple(inv(i + width + j) for j in range(width))
            for i in range(width)
        )

        shake = SHAKE256.new(tag)
        round_constants = tuple(
            tuple(
                int.from_bytes(shake.read(RESCUE_CONSTANT_BYTES), "little") % P
                for _ in range(width)
            )
            for _ in range(2 * rounds + 1)
        )

        return cls(
            width=width,
            rate=rate,
            rounds=rounds,
            alpha=alpha,
            alpha_inv=alpha_inv,
            mds=mds,
            round_constants=round_constants,
        )


def _mix(state: List[int], mds: Tuple[Tuple[int, ...], ...]) -> List[int]:
    return [sum(m * s for m, s in zip(row, state)) % P for row in mds]


def _add_constants(state: List[int], constants: Tuple[int, ...]) -> List[int]:
    return [(s + c) % P for s, c in zip(state, constants)]


def rescue_permutation(state: Sequence[int], params: RescueParams) -> List[int]:
    """Apply the full Rescue permutation to a state of params.width elements."""
    if len(state) != params.width:
        raise ValueError(f"State must have {params.width} elements, got {len(state)}")

    rc = params.round_constants
    current = _add_constants(list(state), rc[0])

    for r in range(params.rounds):
        current = [pow(s, params.alpha_inv, P) for s in current]
        current = _add_constants(_mix(current, params.mds), rc[2 * r + 1])

        current = [pow(s, params.alpha, P) for s in current]
        current = _add_constants(_mix(current, params.mds), rc[2 * r + 2])

    return current


def rescue_hash(inputs: Sequence[int], params: RescueParams) -> int:
    """
    Hash a sequence of field elements to one field element.

    The capacity element starts at the number of inputs, so inputs that differ
    only by trailing zeros hash differently.

    Raises:
        ValueError: If an input is not a canonical field element
    """
    for value in inputs:
        if not 0 <= value < P:
            raise ValueError("Rescue input is not a canonical field element")

    state = [0] * params.width
    state[-1] = len(inputs) % P

    for start in range(0, max(len(inputs), 1), params.rate):
        chunk = inputs[start:start + params.rate]
        for i, value in enumerate(chunk):
            state[i] = (state[i] + value) % P
        state = rescue_permutation(state, params)

    return state[0]
