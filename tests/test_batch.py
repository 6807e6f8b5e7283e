import pytest

from ledgerkit.batch import BatchProcessor
from ledgerkit.merkle import MerkleTree
from ledgerkit.txpool import Transaction, TxPool


def _pool(*fees):
    pool = TxPool(100)
    for i, fee in enumerate(fees):
        pool.add(Transaction(hash=f"tx{i}", fee=fee))
    return pool


def test_create_batch_respects_gas_budget():
    pool = _pool(10, 20, 30)
    batch = BatchProcessor(3, 50).create_batch(pool)
    assert [tx.fee for tx in batch] == [30, 20]


def test_create_batch_respects_size():
    pool = _pool(1, 2, 3, 4)
    batch = BatchProcessor(2, 1000).create_batch(pool)
    assert [tx.fee for tx in batch] == [4, 3]


def test_merkle_root_matches_tree():
    pool = _pool(5, 6)
    processor = BatchProcessor(5, 1000)
    batch = processor.create_batch(pool)
    assert processor.merkle_root(batch) == MerkleTree([tx.hash for tx in batch]).root


def test_merkle_root_of_empty_batch_raises():
    with pytest.raises(ValueError):
        BatchProcessor(5, 100).merkle_root([])


def test_validate_batch():
    processor = BatchProcessor(2, 100)
    assert processor.validate_batch([]) is False
    assert processor.validate_batch([Transaction("a", 1)]) is True
    assert processor.validate_batch([Transaction(str(i), 1) for i in range(3)]) is False


def test_process_batch_removes_from_pool():
    pool = _pool(10, 20, 30)
    batch, returned = BatchProcessor(2, 1000).process_batch(pool)
    assert returned is pool
    assert len(pool) == 1
    for tx in batch:
        assert tx.hash not in pool