"""Pending transaction pool ordered by fee."""

from __future__ import annotations

import heapq
from dataclasses import dataclass


@dataclass
class Transaction:
    """A pending transaction."""

    hash: str
    fee: int
    data: bytes = b""
    timestamp: int = 0


class TxPool:
    """Bounded pool of unique transactions keyed by hash, in arrival order."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self.transactions: dict[str, Transaction] = {}

    def add(self, tx: Transaction) -> bool:
        """Add ``tx`` unless it is already present or the pool is full."""
        if tx.hash in self.transactions or len(self.transactions) >= self.max_size:
            return False
        self.transactions[tx.hash] = tx
        return True

    def remove(self, tx_hash: str) -> Transaction | None:
        """Remove and return the transaction with ``tx_hash``, if present."""
        return self.transactions.pop(tx_hash, None)

    def top(self, count: int) -> list[Transaction]:
        """The ``count`` transactions with the highest fee (ties by highest hash)."""
        return heapq.nlargest(count, self.transactions.values(), key=lambda tx: (tx.fee, tx.hash))

    def clear(self) -> None:
        """Remove every transaction."""
        self.transactions.clear()

    def __len__(self) -> int:
        return len(self.transactions)

    def __contains__(self, tx_hash: object) -> bool:
        return tx_hash in self.transactions