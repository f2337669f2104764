"""Blocks that collect transactions under a Merkle root and a proof of work."""

from __future__ import annotations

from collections.abc import Iterator

from .crypto import HASH_SIZE, blake2b, blake2b_pair, from_int, to_hex
from .transaction import Transaction, TransactionError


class Block:
    """A block of finalized transactions linked to its parent by hash."""

    _next_order = 0

    def __init__(self, parent: Block | None = None) -> None:
        self._parent = parent
        if parent is None:
            self._parent_hash = bytes(HASH_SIZE)
            self._order = 0
            Block._next_order = 1
        else:
            self._parent_hash = parent.block_hash
            self._order = Block._next_order
            Block._next_order += 1
        self._block_hash = b""
        self._merkle_root = b""
        self._transactions: list[Transaction] = []
        self._nonce = 0

    @property
    def parent(self) -> Block | None:
        return self._parent

    @property
    def parent_hash(self) -> bytes:
        return self._parent_hash

    @property
    def order(self) -> int:
        return self._order

    @property
    def block_hash(self) -> bytes:
        return self._block_hash

    @property
    def hash_string(self) -> str:
        return to_hex(self._block_hash)

    @property
    def merkle_root(self) -> bytes:
        return self._merkle_root

    @property
    def nonce(self) -> int:
        return self._nonce

    def add_transaction(self, transaction: Transaction) -> None:
        """Add a finalized transaction to the block."""
        if not transaction.finalized:
            raise TransactionError("only finalized transactions can be added to a block")
        self._transactions.append(transaction)

    def __getitem__(self, n: int) -> Transaction:
        return self._transactions[n]

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def _calculate_merkle_root(self) -> bytes:
        level = [tx.txid for tx in self._transactions]
        if not level:
            raise ValueError("cannot compute a Merkle root without transactions")
        while len(level) > 1:
            if len(level) % 2:
                level.append(level[-1])
            level = [blake2b_pair(left, right) for left, right in zip(level[::2], level[1::2])]
        return level[0]

    def mine(self) -> str:
        """Find a nonce whose block hash starts with two zero bytes; return the hash in hex."""
        self._merkle_root = self._calculate_merkle_root()
        prefix = self._parent_hash + self._merkle_root
        digest = blake2b(prefix + from_int(self._nonce))
        while digest[0] != 0 or digest[1] != 0:
            self._nonce = (self._nonce + 1) & 0xFFFFFFFF
            digest = blake2b(prefix + from_int(self._nonce))
        self._block_hash = digest
        return to_hex(digest)

    def __str__(self) -> str:
        parts = [
            f"===== Block {self._order:02d} =====\n",
            f"Block Hash: {self.hash_string}\n",
            f"Parent Hash:{to_hex(self._parent_hash)}\n",
            f"Merkle Root: {to_hex(self._merkle_root)}\n",
            "\n",
        ]
        parts.extend(str(tx) for tx in self._transactions)
        parts.append("\n")
        parts.append("====================\n")
        return "".join(parts)