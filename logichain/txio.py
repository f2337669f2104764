"""Transaction inputs and outputs."""

from __future__ import annotations

from dataclasses import dataclass

from .crypto import HASH_SIZE, ByteSerializable, from_int, to_hex


@dataclass(frozen=True)
class TxOutput(ByteSerializable):
    """An amount paid to a destination public key."""

    amount: int
    dest_pk: bytes

    @property
    def dest_string(self) -> str:
        return to_hex(self.dest_pk)

    def serialize(self) -> bytes:
        """Return the amount (4 bytes, big-endian) followed by the destination key."""
        return from_int(self.amount) + bytes(self.dest_pk)

    def __str__(self) -> str:
        return (
            f"Amount: {self.amount}\n"
            f"Dest Pk: {self.dest_string}\n"
            f"Data: {to_hex(self.serialize())}\n"
        )


@dataclass(eq=False)
class TxInput(ByteSerializable):
    """A reference to an earlier transaction output that can be spent."""

    output_txid: bytes
    output_index: int
    amount: int
    dest_pk: bytes
    spent: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.output_index <= 0xFF:
            raise ValueError(f"output index out of range: {self.output_index}")

    @classmethod
    def from_output(cls, output_txid: bytes, output_index: int, output: TxOutput) -> TxInput:
        """Create an input spending ``output`` of the transaction ``output_txid``."""
        return cls(bytes(output_txid), output_index, output.amount, output.dest_pk)

    @classmethod
    def coinbase(cls) -> TxInput:
        """Create the empty input used by a coinbase transaction."""
        return cls(bytes(HASH_SIZE), 0, 0, bytes(HASH_SIZE))

    def mark_spent(self) -> None:
        self.spent = True

    def serialize(self) -> bytes:
        """Return txid, index (1 byte), amount (4 bytes) and destination key."""
        return (
            bytes(self.output_txid)
            + bytes([self.output_index])
            + from_int(self.amount)
            + bytes(self.dest_pk)
        )