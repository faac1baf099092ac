"""
zkscrypto
Account keys and MuSig signatures for a zk-rollup ledger

Baby Jubjub keys, Rescue public key hashes, Schnorr signatures.
"""

__version__ = "0.1.0"
__author__ = "zkscrypto"

from zkscrypto.constants import (
    PRIVATE_KEY_LEN,
    PUBLIC_KEY_LEN,
    PUBKEY_HASH_LEN,
    PACKED_SIGNATURE_LEN,
    MAX_SIGNED_MESSAGE_LEN,
)
from zkscrypto.core.types import PrivateKey, PublicKey, PublicKeyHash, Signature
from zkscrypto.core.errors import (
    ZksCryptoError,
    SeedTooShortError,
    MessageTooLongError,
    InvalidKeyError,
    InternalError,
    MalformedEncodingError,
)
from zkscrypto.api import (
    init,
    new_private_key,
    public_key,
    public_key_hash,
    sign_musig,
    verify_musig,
)

__all__ = [
    "PRIVATE_KEY_LEN",
    "PUBLIC_KEY_LEN",
    "PUBKEY_HASH_LEN",
    "PACKED_SIGNATURE_LEN",
    "MAX_SIGNED_MESSAGE_LEN",
    "PrivateKey",
    "PublicKey",
    "PublicKeyHash",
    "Signature",
    "ZksCryptoError",
    "SeedTooShortError",
    "MessageTooLongError",
    "InvalidKeyError",
    "InternalError",
    "MalformedEncodingError",
    "init",
    "new_private_key",
    "public_key",
    "public_key_hash",
    "sign_musig",
    "verify_musig",
    "__version__",
]
