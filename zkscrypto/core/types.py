"""
zkscrypto Artifact Types

PrivateKey, PublicKey, PublicKeyHash and Signature wrap fixed-width bytes.
Each type also accepts empty data, the "absent" artifact, which encodes as
"0x" and fails every cryptographic operation with InvalidKeyError.

All multi-byte scalars are BIG-ENDIAN, packed points LITTLE-ENDIAN.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import ClassVar

from zkscrypto.config import get_config
from zkscrypto.constants import (
    PRIVATE_KEY_LEN,
    PUBLIC_KEY_LEN,
    PUBKEY_HASH_LEN,
    PACKED_SIGNATURE_LEN,
    PACKED_POINT_LEN,
    EMPTY_HEX,
)
from zkscrypto.core.errors import InvalidKeyError, MalformedEncodingError
from zkscrypto.crypto.keys import (
    private_key_from_seed,
    private_key_to_public_key,
    public_key_to_pubkey_hash,
)
from zkscrypto.crypto.musig import sign_musig, verify_musig

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


class _Artifact:
    """Shared codec for fixed-width byte artifacts."""
    __slots__ = ()

    SIZE: ClassVar[int] = 0

    def _check_data(self) -> None:
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) not in (0, self.SIZE):
            raise ValueError(
                f"{type(self).__name__} must be {self.SIZE} bytes, got {len(self.data)}"
            )

    def __bytes__(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return len(self.data) == 0

    def _require_data(self) -> bytes:
        if self.is_empty():
            raise InvalidKeyError(f"{type(self).__name__} is empty")
        return self.data

    def hex(self) -> str:
        return self.hex_string()

    def hex_string(self) -> str:
        """
        Hex representation.

        Empty data gives exactly "0x". Otherwise lowercase hex of 2 * SIZE
        characters, prefixed with "0x" when CryptoConfig.hex_prefix is set.
        """
        if self.is_empty():
            return EMPTY_HEX
        encoded = self.data.hex()
        if get_config().hex_prefix:
            return EMPTY_HEX + encoded
        return encoded

    @classmethod
    def from_hex(cls, hex_string: str):
        """
        Decode the output of hex_string(). A leading "0x" is optional.

        Raises:
            MalformedEncodingError: For odd-length, non-hex or wrong-width input
        """
        body = hex_string[2:] if hex_string[:2].lower() == EMPTY_HEX else hex_string

        if len(body) % 2 != 0:
            raise MalformedEncodingError(
                f"{cls.__name__} hex has odd length {len(body)}"
            )
        if not _HEX_RE.fullmatch(body):
            raise MalformedEncodingError(f"{cls.__name__} hex contains non-hex characters")

        data = bytes.fromhex(body)
        if len(data) not in (0, cls.SIZE):
            raise MalformedEncodingError(
                f"{cls.__name__} must be {cls.SIZE} bytes, got {len(data)}"
            )
        return cls(data)

    @classmethod
    def empty(cls):
        return cls(b"")

    def serialize(self) -> bytes:
        """Serialize to raw bytes."""
        return self.data

    @classmethod
    def deserialize(cls, data: bytes, offset: int = 0):
        """Deserialize from bytes, return (artifact, bytes_consumed)."""
        chunk = data[offset:offset + cls.SIZE]
        if len(chunk) != cls.SIZE:
            raise ValueError(
                f"Need {cls.SIZE} bytes for {cls.__name__}, got {len(chunk)}"
            )
        return cls(chunk), cls.SIZE


@dataclass(frozen=True, slots=True)
class PrivateKey(_Artifact):
    """
    Private signing key.

    SIZE: 32 bytes
    SERIALIZATION: big-endian scalar in [1, l)
    NOTE: Never logged.
    """
    SIZE: ClassVar[int] = PRIVATE_KEY_LEN

    data: bytes = b""

    def __post_init__(self):
        self._check_data()

    def __repr__(self) -> str:
        # Never expose secret key data
        return "PrivateKey(data=<redacted>)"

    @classmethod
    def from_seed(cls, seed: bytes) -> PrivateKey:
        """
        Derive a private key from at least 32 bytes of seed.

        Raises:
            SeedTooShortError: If the seed is too short
        """
        return cls(private_key_from_seed(seed))

    def public_key(self) -> PublicKey:
        """
        Raises:
            InvalidKeyError: If the key is empty or out of range
        """
        return PublicKey(private_key_to_public_key(self._require_data()))

    def sign(self, message: bytes) -> Signature:
        """
        Sign a message of at most 92 bytes.

        Raises:
            MessageTooLongError: If the message is too long
            InvalidKeyError: If the key is empty or out of range
        """
        return Signature(sign_musig(self._require_data(), message))


@dataclass(frozen=True, slots=True)
class PublicKey(_Artifact):
    """
    Public key.

    SIZE: 32 bytes
    SERIALIZATION: packed point, y little-endian with x parity in the top bit
    """
    SIZE: ClassVar[int] = PUBLIC_KEY_LEN

    data: bytes = b""

    def __post_init__(self):
        self._check_data()

    def __repr__(self) -> str:
        return f"PublicKey({self.data.hex()[:16]}...)"

    def hash(self) -> PublicKeyHash:
        """
        Derive the account identifier.

        Raises:
            InvalidKeyError: If the key is empty or not a valid point
        """
        return PublicKeyHash(public_key_to_pubkey_hash(self._require_data()))

    def verify(self, message: bytes, signature: Signature) -> bool:
        """Verify a signature made by the matching private key."""
        if self.is_empty() or signature.is_empty():
            return False
        return verify_musig(self.data, message, signature.data)


@dataclass(frozen=True, slots=True)
class PublicKeyHash(_Artifact):
    """
    Account identifier.

    SIZE: 20 bytes
    SERIALIZATION: low 160 bits of Rescue(x, y), big-endian
    """
    SIZE: ClassVar[int] = PUBKEY_HASH_LEN

    data: bytes = b""

    def __post_init__(self):
        self._check_data()

    def __repr__(self) -> str:
        return f"PublicKeyHash({self.data.hex()})"


@dataclass(frozen=True, slots=True)
class Signature(_Artifact):
    """
    MuSig signature.

    SIZE: 64 bytes
    SERIALIZATION: packed R (32 bytes) || s (32 bytes, little-endian)
    """
    SIZE: ClassVar[int] = PACKED_SIGNATURE_LEN

    data: bytes = b""

    def __post_init__(self):
        self._check_data()

    def __repr__(self) -> str:
        return f"Signature({self.data.hex()[:16]}...)"

    @property
    def r(self) -> bytes:
        return self._require_data()[:PACKED_POINT_LEN]

    @property
    def s(self) -> bytes:
        return self._require_data()[PACKED_POINT_LEN:]
