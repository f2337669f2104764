"""A node that keeps a blockchain, a memory pool and the unspent outputs."""

from __future__ import annotations

from collections import deque

from .block import Block
from .crypto import to_hex
from .transaction import Transaction, TransactionError
from .txio import TxInput
from .wallet import Wallet


class Node:
    """A single participant that mines blocks and tracks balances."""

    COINBASE_AMOUNT = 1024

    def __init__(self, seed: str | bytes) -> None:
        self._wallet = Wallet(seed)
        self._blockchain: list[Block] = []
        self._memory_pool: deque[Transaction] = deque()
        self._utxo_map: dict[str, list[TxInput]] = {}

    @property
    def wallet(self) -> Wallet:
        return self._wallet

    @property
    def send_address(self) -> bytes:
        """The public key of the node's own wallet."""
        return self._wallet.send_address

    @property
    def blockchain(self) -> tuple[Block, ...]:
        return tuple(self._blockchain)

    @property
    def pending(self) -> tuple[Transaction, ...]:
        """Transactions waiting in the memory pool."""
        return tuple(self._memory_pool)

    def add_transaction(self, to: bytes, amount: int, sender: Wallet | None = None) -> Transaction:
        """Send ``amount`` from ``sender`` (the node's wallet by default) to ``to``.

        The first unspent output of the sender that covers the amount is used;
        the remainder goes back to the sender. The transaction waits in the
        memory pool until the next block is mined.
        """
        wallet = self._wallet if sender is None else sender
        sender_address = wallet.send_address
        candidates = self._utxo_map.get(to_hex(sender_address))
        if not candidates:
            raise TransactionError("sender has no unspent outputs")

        tx_input = next((utxo for utxo in candidates if utxo.amount >= amount), None)
        if tx_input is None:
            raise TransactionError(f"no unspent output covers amount {amount}")

        transaction = Transaction(tx_input)
        transaction.add_output(amount, to)
        transaction.add_output(transaction.unspent, sender_address)
        transaction.unlock(wallet.sign_transaction(transaction.sign_data()))
        transaction.finalize()

        tx_input.mark_spent()
        self._memory_pool.append(transaction)
        return transaction

    def _add_coinbase(self, coinbase_msg: str | bytes, block_depth: int) -> None:
        coinbase = Transaction.coinbase(self.COINBASE_AMOUNT)
        coinbase.add_output(self.COINBASE_AMOUNT, self._wallet.send_address)
        coinbase.unlock_coinbase(coinbase_msg, block_depth)
        coinbase.finalize()
        self._memory_pool.append(coinbase)

    def mine_new_block(self, coinbase_msg: str | bytes) -> Block:
        """Mine a block holding the memory pool and a coinbase; return it."""
        block = Block(self._blockchain[-1] if self._blockchain else None)

        self._add_coinbase(coinbase_msg, block.order)

        while self._memory_pool:
            block.add_transaction(self._memory_pool.popleft())

        block.mine()

        for transaction in block:
            spent_input = transaction.input
            owned = self._utxo_map.get(to_hex(spent_input.dest_pk))
            if owned is not None and spent_input in owned:
                owned.remove(spent_input)

            txid = transaction.txid
            for index, output in enumerate(transaction.outputs):
                new_input = TxInput.from_output(txid, index, output)
                self._utxo_map.setdefault(to_hex(output.dest_pk), []).append(new_input)

        self._blockchain.append(block)
        return block

    def format_blockchain(self) -> str:
        """Return the printable form of every block in order."""
        return "".join(str(block) for block in self._blockchain)

    def print_blockchain(self) -> None:
        print(self.format_blockchain(), end="")

    def address_balance(self, addr: bytes) -> int:
        """Return the sum of the unspent outputs held by ``addr``."""
        return sum(utxo.amount for utxo in self._utxo_map.get(to_hex(addr), ()))