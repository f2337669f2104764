"""A small in-memory blockchain with BLAKE2b hashing, Ed25519 wallets, UTXO transactions and proof-of-work blocks."""

__version__ = "0.0.2"

__all__ = ["crypto", "txio", "wallet", "transaction", "block", "node"]