"""
zkscrypto Core Data Structures
"""

from zkscrypto.core.types import PrivateKey, PublicKey, PublicKeyHash, Signature
from zkscrypto.core.errors import (
    ZksCryptoError,
    SeedTooShortError,
    MessageTooLongError,
    InvalidKeyError,
    InternalError,
    MalformedEncodingError,
)

__all__ = [
    # Types
    "PrivateKey",
    "PublicKey",
    "PublicKeyHash",
    "Signature",
    # Errors
    "ZksCryptoError",
    "SeedTooShortError",
    "MessageTooLongError",
    "InvalidKeyError",
    "InternalError",
    "MalformedEncodingError",
]
