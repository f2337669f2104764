"""Transactions that spend one input into any number of outputs."""

from __future__ import annotations

from .crypto import blake2b, ed25519_verify, from_int, to_hex
from .txio import TxInput, TxOutput


class TransactionError(RuntimeError):
    """Raised when a transaction is built or used in an invalid way."""


class Transaction:
    """A transfer of the amount held by one input to a list of outputs."""

    def __init__(self, tx_input: TxInput) -> None:
        self._input = tx_input
        self._coinbase = False
        self._unspent = tx_input.amount
        self._outputs: list[TxOutput] = []
        self._unlock_code = b""
        self._txid = b""
        self._unlocked = False
        self._finalized = False

    @classmethod
    def coinbase(cls, amount: int) -> Transaction:
        """Create a coinbase transaction that mints ``amount`` from nothing."""
        tx = cls(TxInput.coinbase())
        tx._coinbase = True
        tx._unspent = amount
        return tx

    @property
    def input(self) -> TxInput:
        return self._input

    @property
    def is_coinbase(self) -> bool:
        return self._coinbase

    @property
    def unspent(self) -> int:
        """The part of the input amount not yet assigned to an output."""
        return self._unspent

    @property
    def unlock_code(self) -> bytes:
        return self._unlock_code

    @property
    def unlocked(self) -> bool:
        return self._unlocked

    @property
    def finalized(self) -> bool:
        return self._finalized

    @property
    def outputs(self) -> tuple[TxOutput, ...]:
        return tuple(self._outputs)

    @property
    def output_count(self) -> int:
        return len(self._outputs)

    @property
    def txid(self) -> bytes:
        """The transaction id; only available once finalized."""
        if not self._finalized:
            raise TransactionError("Transaction not finalized")
        return self._txid

    def add_output(self, amount: int, dest_pk: bytes) -> TxOutput:
        """Pay ``amount`` of the unspent funds to ``dest_pk``."""
        if amount > self._unspent:
            raise TransactionError(
                f"output amount {amount} exceeds unspent amount {self._unspent}"
            )
        output = TxOutput(amount, bytes(dest_pk))
        self._outputs.append(output)
        self._unspent -= amount
        return output

    def unlock(self, unlock_code: bytes) -> None:
        """Unlock the input with a signature of :meth:`sign_data` by its owner."""
        if not ed25519_verify(self.sign_data(), unlock_code, self._input.dest_pk):
            raise TransactionError("invalid unlock code")
        self._unlock_code = bytes(unlock_code)
        self._unlocked = True

    def unlock_coinbase(self, message: str | bytes, block_depth: int) -> None:
        """Unlock a coinbase with a free message followed by the block depth."""
        raw = message.encode("utf-8") if isinstance(message, str) else bytes(message)
        self._unlock_code = raw + from_int(block_depth)
        self._unlocked = True

    def finalize(self) -> bytes:
        """Compute and return the transaction id; the transaction is then fixed."""
        if not self._unlocked:
            raise TransactionError("Transaction not unlocked")
        if self._finalized:
            raise TransactionError("Transaction Already finalized")
        combined_outputs = b"".join(out.serialize() for out in self._outputs)
        self._txid = blake2b(bytes(self._input.output_txid) + self._unlock_code + combined_outputs)
        self._finalized = True
        return self._txid

    def output(self, n: int) -> TxOutput:
        """Return output number ``n``."""
        if not 0 <= n < len(self._outputs):
            raise TransactionError("Output does not exist")
        return self._outputs[n]

    def sign_data(self) -> bytes:
        """Return the serialized input followed by all serialized outputs."""
        return self._input.serialize() + b"".join(out.serialize() for out in self._outputs)

    def __str__(self) -> str:
        lines = ["=== Transaction ==="]
        if not self._finalized:
            lines.append("Warning: transaction not finalized!")
        lines.append(f"TXID: {to_hex(self._txid)}")
        lines.append(f"Coinbase: {'true' if self._coinbase else 'false'}")
        if self._coinbase:
            message = self._unlock_code[:-4].decode("utf-8", errors="replace")
            lines.append(f"Coinbase Message: {message}")
        else:
            lines.append(f"Unlock Code: {to_hex(self._unlock_code)}")
        lines.append(f"Unspent amount: {self._unspent}")
        lines.append("")
        lines.append(f"Input TxID: {to_hex(self._input.output_txid)}")
        lines.append(f"Input Index: {self._input.output_index}")
        lines.append(f"Input Amount: {self._input.amount}")
        lines.append(f"Input Dest PK:{to_hex(self._input.dest_pk)}")
        lines.append("")
        for index, out in enumerate(self._outputs):
            lines.append(f"Output {index}")
            lines.append(f"Output Amount: {out.amount}")
            lines.append(f"Ouput Dest PK: {out.dest_string}")
            lines.append("")
        lines.append(f"Output Total: {sum(out.amount for out in self._outputs)}")
        lines.append("==============")
        lines.append("")
        return "\n".join(lines) + "\n"