"""
zkscrypto Public API

Boundary operations for callers that work with typed artifacts:

  init()                      -> one-time parameter setup (idempotent)
  new_private_key(seed)       -> PrivateKey
  sign_musig(key, message)    -> Signature
  verify_musig(pub, msg, sig) -> bool
"""

from __future__ import annotations
import logging

from zkscrypto.core.types import PrivateKey, PublicKey, PublicKeyHash, Signature
from zkscrypto.crypto.params import get_params, is_initialized

logger = logging.getLogger(__name__)


def init() -> None:
    """Build the curve and hash parameters now instead of on first use."""
    if is_initialized():
        return
    get_params()
    logger.debug("zkscrypto initialized")


def new_private_key(seed: bytes) -> PrivateKey:
    """
    Raises:
        SeedTooShortError: If the seed is shorter than 32 bytes
    """
    return PrivateKey.from_seed(seed)


def public_key(private_key: PrivateKey) -> PublicKey:
    return private_key.public_key()


def public_key_hash(public_key: PublicKey) -> PublicKeyHash:
    return public_key.hash()


def sign_musig(private_key: PrivateKey, message: bytes) -> Signature:
    """
    Raises:
        MessageTooLongError: If the message is longer than 92 bytes
    """
    return private_key.sign(message)


def verify_musig(public_key: PublicKey, message: bytes, signature: Signature) -> bool:
    return public_key.verify(message, signature)
