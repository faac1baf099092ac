"""
zkscrypto Cryptographic Primitives
"""

from zkscrypto.crypto.params import CryptoParams, get_params, is_initialized
from zkscrypto.crypto.keys import (
    private_key_from_seed,
    private_key_to_public_key,
    public_key_to_pubkey_hash,
)
from zkscrypto.crypto.musig import sign_musig, verify_musig
from zkscrypto.crypto.rescue import RescueParams, rescue_hash

__all__ = [
    # Parameters
    "CryptoParams",
    "get_params",
    "is_initialized",
    # Keys
    "private_key_from_seed",
    "private_key_to_public_key",
    "public_key_to_pubkey_hash",
    # Signatures
    "sign_musig",
    "verify_musig",
    # Rescue hash
    "RescueParams",
    "rescue_hash",
]
