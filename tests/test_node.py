import pytest

from logichain.crypto import HASH_SIZE, to_hex
from logichain.node import Node
from logichain.transaction import TransactionError
from logichain.wallet import Wallet


@pytest.fixture
def node():
    return Node("alice seed")


def test_send_address_matches_wallet_from_same_seed(node):
    assert node.send_address == Wallet("alice seed").send_address


def test_fresh_node_has_no_balance(node):
    assert node.address_balance(node.send_address) == 0
    assert node.blockchain == ()


def test_transaction_without_funds_raises(node):
    other = Wallet("bob seed").send_address
    with pytest.raises(TransactionError):
        node.add_transaction(other, 10)


def test_first_block_pays_coinbase(node):
    block = node.mine_new_block("hello")
    assert node.address_balance(node.send_address) == 1024
    assert block.order == 0
    assert block.parent_hash == bytes(HASH_SIZE)
    assert block.block_hash[:2] == b"\x00\x00"
    assert len(block) == 1
    assert block[0].is_coinbase


def test_second_block_links_to_first(node):
    first = node.mine_new_block("one")
    second = node.mine_new_block("two")
    assert second.parent is first
    assert second.parent_hash == first.block_hash
    assert second.order == first.order + 1
    assert node.blockchain == (first, second)


def test_transfer_applies_after_mining(node):
    node.mine_new_block("genesis")
    bob = Wallet("bob seed").send_address
    tx = node.add_transaction(bob, 100)
    assert tx.finalized
    assert node.pending == (tx,)
    assert node.address_balance(bob) == 0
    assert node.address_balance(node.send_address) == Node.COINBASE_AMOUNT

    block = node.mine_new_block("second")
    assert node.pending == ()
    assert len(block) == 2
    assert block[0] is tx
    assert node.address_balance(bob) == 100
    assert node.address_balance(node.send_address) == 2 * Node.COINBASE_AMOUNT - 100


def test_total_supply_is_preserved(node):
    node.mine_new_block("a")
    bob = Wallet("bob seed").send_address
    carol = Wallet("carol seed").send_address
    node.add_transaction(bob, 300)
    node.mine_new_block("b")
    node.add_transaction(carol, 50)
    node.mine_new_block("c")
    total = sum(node.address_balance(a) for a in (node.send_address, bob, carol))
    assert total == len(node.blockchain) * Node.COINBASE_AMOUNT


def test_other_wallet_can_spend_received_funds(node):
    node.mine_new_block("a")
    bob = Wallet("bob seed")
    node.add_transaction(bob.send_address, 200)
    node.mine_new_block("b")
    tx = node.add_transaction(node.send_address, 30, bob)
    assert tx.input.dest_pk == bob.send_address
    node.mine_new_block("c")
    assert node.address_balance(bob.send_address) == 200 - 30


def test_amount_larger_than_any_single_output_raises(node):
    node.mine_new_block("a")
    node.mine_new_block("b")
    assert node.address_balance(node.send_address) == 2 * Node.COINBASE_AMOUNT
    with pytest.raises(TransactionError):
        node.add_transaction(Wallet("bob seed").send_address, Node.COINBASE_AMOUNT + 1)


def test_format_and_print_blockchain(node, capsys):
    block = node.mine_new_block("hello")
    text = node.format_blockchain()
    assert text.startswith("===== Block 00 =====\n")
    assert "Coinbase Message: hello\n" in text
    assert f"Block Hash: {to_hex(block.block_hash)}\n" in text
    node.print_blockchain()
    assert capsys.readouterr().out == text