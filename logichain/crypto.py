"""Byte helpers, BLAKE2b hashing and Ed25519 key handling."""

from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import SigningKey, VerifyKey

HASH_SIZE = 32
SEED_SIZE = 32
PUBLIC_KEY_SIZE = 32
PRIVATE_KEY_SIZE = 64
SIGNATURE_SIZE = 64


class ByteSerializable(ABC):
    """An object with a canonical byte representation."""

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the canonical byte representation."""

    def __bytes__(self) -> bytes:
        return self.serialize()


@dataclass(frozen=True)
class KeyPair:
    """An Ed25519 key pair; the private key holds the seed followed by the public key."""

    private_key: bytes = field(repr=False)
    public_key: bytes


def from_int(n: int) -> bytes:
    """Encode ``n`` as a 4-byte big-endian unsigned integer, wrapping modulo 2**32."""
    return (n & 0xFFFFFFFF).to_bytes(4, "big")


def to_hex(data: bytes) -> str:
    """Return the lower-case hexadecimal form of ``data``."""
    return bytes(data).hex()


def blake2b(message: bytes) -> bytes:
    """Return the unkeyed 32-byte BLAKE2b digest of ``message``."""
    return hashlib.blake2b(bytes(message), digest_size=HASH_SIZE).digest()


def blake2b_pair(m1: bytes, m2: bytes) -> bytes:
    """Return the BLAKE2b digest of ``m1`` followed by ``m2``."""
    return blake2b(bytes(m1) + bytes(m2))


def _seed_bytes(seed: str | bytes) -> bytes:
    raw = seed.encode("utf-8") if isinstance(seed, str) else bytes(seed)
    return raw[:SEED_SIZE].ljust(SEED_SIZE, b"\x00")


def ed25519_keygen(seed: str | bytes | None = None) -> KeyPair:
    """Create a key pair.

    Without a seed the pair is random. A seed is zero-padded or truncated
    to 32 bytes, so the same seed always gives the same pair.
    """
    signing_key = SigningKey.generate() if seed is None else SigningKey(_seed_bytes(seed))
    public_key = bytes(signing_key.verify_key)
    return KeyPair(private_key=bytes(signing_key) + public_key, public_key=public_key)


def ed25519_sign(message: bytes, private_key: bytes) -> bytes:
    """Return the detached 64-byte signature of ``message``."""
    if len(private_key) != PRIVATE_KEY_SIZE:
        raise ValueError(f"private key must be {PRIVATE_KEY_SIZE} bytes, got {len(private_key)}")
    signing_key = SigningKey(bytes(private_key[:SEED_SIZE]))
    return signing_key.sign(bytes(message)).signature


def ed25519_verify(message: bytes, sig: bytes, public_key: bytes) -> bool:
    """Tell whether ``sig`` is a valid signature of ``message`` under ``public_key``."""
    if len(sig) != SIGNATURE_SIZE or len(public_key) != PUBLIC_KEY_SIZE:
        return False
    try:
        VerifyKey(bytes(public_key)).verify(bytes(message), bytes(sig))
    except (BadSignatureError, CryptoError, ValueError):
        return False
    return True