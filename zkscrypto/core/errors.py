"""
zkscrypto Errors

One exception class per failure kind. All are raised to the caller, never
retried: every operation is deterministic, so the same input fails the
same way.
"""


class ZksCryptoError(Exception):
    """Base error for all zkscrypto failures."""
    pass


class SeedTooShortError(ZksCryptoError):
    """Seed shorter than MIN_SEED_LEN bytes."""
    pass


class MessageTooLongError(ZksCryptoError):
    """Message longer than MAX_SIGNED_MESSAGE_LEN bytes."""
    pass


class InvalidKeyError(ZksCryptoError):
    """Malformed key material: scalar out of range, point off the curve, empty key."""
    pass


class InternalError(ZksCryptoError):
    """Unexpected arithmetic failure. Unreachable with validated inputs."""
    pass


class MalformedEncodingError(ZksCryptoError, ValueError):
    """Hex text that is odd-length, non-hex, or the wrong width."""
    pass
