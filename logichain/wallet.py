"""A wallet holding one Ed25519 key pair."""

from __future__ import annotations

from .crypto import KeyPair, ed25519_keygen, ed25519_sign


class Wallet:
    """Holds the keys derived from a seed and signs transaction data."""

    def __init__(self, seed: str | bytes) -> None:
        self._keys: KeyPair = ed25519_keygen(seed)

    @property
    def send_address(self) -> bytes:
        """The public key that funds are sent to."""
        return self._keys.public_key

    def sign_transaction(self, transaction_data: bytes) -> bytes:
        """Return the signature of ``transaction_data``."""
        return ed25519_sign(transaction_data, self._keys.private_key)