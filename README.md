# logichain

A compact, readable blockchain for learning how the pieces fit together.
Everything runs in memory inside one Python process.

## Modules

- **`logichain.crypto`**: hashing, signatures and byte helpers.
  - `blake2b(message)` returns an unkeyed 32-byte BLAKE2b digest;
    `blake2b_pair(m1, m2)` hashes the two values joined together.
  - `ed25519_keygen(seed=None)` returns a `KeyPair` with `private_key`
    (64 bytes: seed then public key) and `public_key` (32 bytes). A seed,
    `str` or `bytes`, is zero-padded or cut to 32 bytes, so the same seed
    always gives the same keys. Without a seed the keys are random.
  - `ed25519_sign(message, private_key)` returns a 64-byte detached
    signature. It raises `ValueError` if the private key is not 64 bytes.
    `ed25519_verify(message, sig, public_key)` returns `True` or `False`.
  - `from_int(n)` encodes `n` as 4 big-endian bytes, wrapping modulo 2**32.
    `to_hex(data)` returns lower-case hex.
  - `ByteSerializable` is the abstract base for objects with a `serialize()`
    method. `bytes(obj)` gives the same result.
- **`logichain.txio`**: transaction inputs and outputs.
  - `TxOutput(amount, dest_pk)` is frozen. `serialize()` gives the amount as
    4 bytes followed by the key. `dest_string` is the key in hex.
  - `TxInput` refers to an earlier output. Build one with
    `TxInput.from_output(txid, index, output)`, or use `TxInput.coinbase()`
    for the empty input of a coinbase. The index must fit in one byte, or
    `ValueError` is raised. `mark_spent()` sets `spent`. `serialize()` gives
    txid, index byte, amount and key.
- **`logichain.wallet`**: `Wallet(seed)` derives its keys from the seed.
  `send_address` is its public key. `sign_transaction(data)` signs bytes.
- **`logichain.transaction`**: `Transaction(tx_input)` spends one input, and
  `Transaction.coinbase(amount)` mints new funds.
  - `add_output(amount, dest_pk)` assigns part of `unspent`.
  - `unlock(signature)` checks a signature of `sign_data()` against the
    input's key. `unlock_coinbase(message, block_depth)` is the coinbase
    case.
  - `finalize()` computes and returns the `txid`.
  - `output(n)` returns output number `n`.
  - `str(tx)` gives a readable dump.

  Misuse raises `TransactionError`. This covers an output larger than the
  unspent amount, a bad signature, finalizing twice or before unlocking,
  reading `txid` before finalizing, and a missing output.
- **`logichain.block`**: `Block(parent=None)` collects finalized transactions
  through `add_transaction`. A non-finalized transaction raises
  `TransactionError`.
  - A block supports indexing, iteration and `len()`.
  - `mine()` computes the Merkle root and searches nonces until the BLAKE2b
    hash of parent hash + Merkle root + nonce starts with two zero bytes. It
    returns that hash in hex. Mining a block with no transactions raises
    `ValueError`.
  - A block without a parent has order 0 and an all-zero parent hash, and it
    restarts the order numbering.
  - `str(block)` prints the block with its transactions.
- **`logichain.node`**: `Node(seed)` keeps a chain, a memory pool and the set
  of unspent outputs per address.
  - `mine_new_block(msg)` adds a coinbase of `Node.COINBASE_AMOUNT` (1024)
    paid to the node's own wallet. It then moves every pending transaction
    into a new block, mines it, updates the unspent outputs, and returns the
    block.
  - `add_transaction(to, amount, sender=None)` picks the first unspent output
    of the sender that covers `amount`. Without a `sender`, the node's own
    wallet pays. The change goes back to the sender. The signed, finalized
    transaction is queued in `pending` and returned. It raises
    `TransactionError` when the sender has no output that covers the amount.
  - `address_balance(addr)` sums the unspent outputs of an address.
  - `format_blockchain()` and `print_blockchain()` show the whole chain.

## Installation

```
pip install logichain
```

## Example

```python
from logichain.node import Node
from logichain.wallet import Wallet

node = Node("miner seed")
node.mine_new_block("genesis")

alice = Wallet("alice seed")
node.add_transaction(alice.send_address, 100)   # paid from the node's own wallet
node.mine_new_block("second block")

print(node.address_balance(alice.send_address))  # 100
node.print_blockchain()
```

Lower-level building blocks can be used on their own:

```python
from logichain.crypto import blake2b, ed25519_keygen, ed25519_sign, ed25519_verify, to_hex

keys = ed25519_keygen("some seed")
sig = ed25519_sign(b"message", keys.private_key)
assert ed25519_verify(b"message", sig, keys.public_key)
print(to_hex(blake2b(b"hello")))
```

## What it does not do

logichain is a library only. It has no command-line program, no networking
between nodes, and no storage. A `Node`'s chain and balances exist only for
the life of the Python object.

## Running the tests

```
pip install -e ".[test]"
pytest
```