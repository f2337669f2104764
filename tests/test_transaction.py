import pytest

from logichain.crypto import from_int
from logichain.transaction import Transaction, TransactionError
from logichain.txio import TxInput, TxOutput
from logichain.wallet import Wallet


@pytest.fixture
def alice():
    return Wallet("alice")


@pytest.fixture
def bob():
    return Wallet("bob")


def _funded(wallet, amount=100):
    source = TxOutput(amount, wallet.send_address)
    return Transaction(TxInput.from_output(bytes(range(32)), 0, source))


def _coinbase(address, message="hello", depth=0):
    tx = Transaction.coinbase(1024)
    tx.add_output(1024, address)
    tx.unlock_coinbase(message, depth)
    tx.finalize()
    return tx


def test_unspent_starts_with_input_amount(alice):
    tx = _funded(alice, 100)
    assert tx.unspent == 100
    assert tx.is_coinbase is False


def test_add_output_reduces_unspent(alice, bob):
    tx = _funded(alice, 100)
    out = tx.add_output(30, bob.send_address)
    assert out.amount == 30
    assert tx.unspent == 70
    assert tx.output_count == 1
    assert tx.output(0) == out


def test_add_output_over_unspent_raises(alice, bob):
    tx = _funded(alice, 100)
    tx.add_output(30, bob.send_address)
    with pytest.raises(TransactionError):
        tx.add_output(71, bob.send_address)
    assert tx.unspent == 70


def test_output_out_of_range(alice, bob):
    tx = _funded(alice)
    tx.add_output(10, bob.send_address)
    with pytest.raises(TransactionError):
        tx.output(1)
    with pytest.raises(TransactionError):
        tx.output(-1)


def test_sign_data_layout(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    tx.add_output(60, alice.send_address)
    data = tx.sign_data()
    assert data.startswith(tx.input.serialize())
    assert data.endswith(from_int(60) + alice.send_address)
    assert len(data) == len(tx.input.serialize()) + 2 * (4 + 32)


def test_unlock_with_owner_signature(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    signature = alice.sign_transaction(tx.sign_data())
    tx.unlock(signature)
    assert tx.unlocked is True
    assert tx.unlock_code == signature


def test_unlock_with_foreign_signature_raises(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    with pytest.raises(TransactionError):
        tx.unlock(bob.sign_transaction(tx.sign_data()))
    assert tx.unlocked is False


def test_finalize_requires_unlock(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    with pytest.raises(TransactionError):
        tx.finalize()


def test_txid_requires_finalize(alice):
    tx = _funded(alice)
    with pytest.raises(TransactionError) as excinfo:
        _ = tx.txid
    assert "not finalized" in str(excinfo.value)
    assert tx.finalized is False


def test_finalize_twice_raises(alice):
    tx = _coinbase(alice.send_address)
    with pytest.raises(TransactionError):
        tx.finalize()


def test_finalize_returns_txid(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    tx.unlock(alice.sign_transaction(tx.sign_data()))
    txid = tx.finalize()
    assert len(txid) == 32
    assert tx.txid == txid
    assert tx.finalized is True


def test_coinbase_unlock_code_format(alice):
    tx = _coinbase(alice.send_address, "hello", 3)
    assert tx.unlock_code == b"hello\x00\x00\x00\x03"
    assert tx.is_coinbase is True
    assert tx.input.amount == 0
    assert tx.unspent == 0


def test_coinbase_starts_with_minted_amount():
    tx = Transaction.coinbase(1024)
    assert tx.unspent == 1024
    assert tx.is_coinbase is True
    assert tx.input.amount == 0


def test_coinbase_txid_is_deterministic(alice):
    assert _coinbase(alice.send_address).txid == _coinbase(alice.send_address).txid
    assert _coinbase(alice.send_address, "a").txid != _coinbase(alice.send_address, "b").txid


def test_str_of_coinbase(alice):
    text = str(_coinbase(alice.send_address, "hello", 0))
    assert text.startswith("=== Transaction ===\n")
    assert "Coinbase: true\n" in text
    assert "Coinbase Message: hello\n" in text
    assert "Output Total: 1024\n" in text
    assert "Warning" not in text


def test_str_of_unfinalized(alice, bob):
    tx = _funded(alice)
    tx.add_output(40, bob.send_address)
    text = str(tx)
    assert "Warning: transaction not finalized!\n" in text
    assert "Coinbase: false\n" in text
    assert "Unspent amount: 60\n" in text
    assert f"Ouput Dest PK: {bob.send_address.hex()}\n" in text