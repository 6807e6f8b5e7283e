"""Batching of pending transactions for block packing."""

from __future__ import annotations

from collections.abc import Sequence

from ledgerkit.merkle import MerkleTree
from ledgerkit.txpool import Transaction, TxPool


class BatchProcessor:
    """Selects the highest-fee transactions under a size and gas budget."""

    def __init__(self, batch_size: int, max_gas: int) -> None:
        self.batch_size = batch_size
        self.max_gas = max_gas

    def create_batch(self, pool: TxPool) -> list[Transaction]:
        """Take the top transactions while their running fee total stays within ``max_gas``."""
        batch = []
        total_gas = 0
        for tx in pool.top(self.batch_size):
            total_gas += tx.fee
            if total_gas <= self.max_gas:
                batch.append(tx)
        return batch

    def merkle_root(self, batch: Sequence[Transaction]) -> str:
        """Merkle root over the hashes of the batch's transactions."""
        return MerkleTree(tx.hash for tx in batch).root

    def validate_batch(self, batch: Sequence[Transaction]) -> bool:
        """A batch must be non-empty and no larger than ``batch_size``."""
        return 0 < len(batch) <= self.batch_size

    def process_batch(self, pool: TxPool) -> tuple[list[Transaction], TxPool]:
        """Create a batch and remove its transactions from ``pool``."""
        batch = self.create_batch(pool)
        for tx in batch:
            pool.remove(tx.hash)
        return batch, pool