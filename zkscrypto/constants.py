"""
zkscrypto Constants

All byte widths, curve parameters and domain tags defined here for single
source of truth.

All multi-byte scalars are BIG-ENDIAN, all packed points LITTLE-ENDIAN.
"""

from typing import Final

# ==============================================================================
# ARTIFACT WIDTHS
# ==============================================================================

PRIVATE_KEY_LEN: Final[int] = 32            # Raw scalar, big-endian
PUBLIC_KEY_LEN: Final[int] = 32             # Packed Edwards point
PUBKEY_HASH_LEN: Final[int] = 20            # Account identifier
PACKED_SIGNATURE_LEN: Final[int] = 64       # Packed R || s
PACKED_POINT_LEN: Final[int] = 32
SCALAR_LEN: Final[int] = 32

MIN_SEED_LEN: Final[int] = 32               # Shorter seeds are rejected
MAX_SIGNED_MESSAGE_LEN: Final[int] = 92     # Longer messages are rejected

EMPTY_HEX: Final[str] = "0x"                # Encoding of an absent artifact

# ==============================================================================
# CURVE: BABY JUBJUB OVER THE BN254 SCALAR FIELD
# ==============================================================================

# Base field modulus (BN254 group order r)
FIELD_MODULUS: Final[int] = (
    21888242871839275222246405745257275088548364400416034343698204186575808495617
)
FIELD_BYTES: Final[int] = 32

# Twisted Edwards form: a*x^2 + y^2 = 1 + d*x^2*y^2
EDWARDS_A: Final[int] = 168700
EDWARDS_D: Final[int] = 168696

# Prime subgroup order and cofactor
SUBGROUP_ORDER: Final[int] = (
    2736030358979909402780800718157159386076813972158567259200215660948447373041
)
COFACTOR: Final[int] = 8
SCALAR_BITS: Final[int] = SUBGROUP_ORDER.bit_length()

# Sign bit of x stored in the top bit of the last packed byte
POINT_SIGN_MASK: Final[int] = 0x80

# ==============================================================================
# RESCUE HASH PARAMETERS
# ==============================================================================

RESCUE_WIDTH: Final[int] = 3                # State elements
RESCUE_RATE: Final[int] = 2                 # Absorbed per permutation
RESCUE_ROUNDS: Final[int] = 22
RESCUE_ALPHA: Final[int] = 5                # S-box exponent
RESCUE_CONSTANT_BYTES: Final[int] = 64      # Wide sample per round constant

# Message packing for the signature challenge
MESSAGE_CHUNK_LEN: Final[int] = 31          # Fits below the field modulus
MESSAGE_CHUNKS: Final[int] = 3              # ceil(92 / 31)

# Bits of the hash kept as the account identifier
PUBKEY_HASH_BITS: Final[int] = PUBKEY_HASH_LEN * 8

# ==============================================================================
# DOMAIN TAGS
# ==============================================================================

GENERATOR_TAG: Final[bytes] = b"zks_crypto_spending_key_generator"
RESCUE_TAG: Final[bytes] = b"zks_crypto_rescue_bn254_w3_r2"
NONCE_TAG: Final[bytes] = b"zks_crypto_musig_nonce"
GROUP_HASH_MAX_ATTEMPTS: Final[int] = 256
