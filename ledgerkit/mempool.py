"""Eviction of expired and surplus transactions from a pool."""

from __future__ import annotations

from ledgerkit.chain import now_millis
from ledgerkit.txpool import TxPool


class MempoolCleaner:
    """Removes transactions older than a maximum age and trims the pool to a size."""

    def __init__(self, max_age_minutes: int, max_size: int) -> None:
        self.max_age = max_age_minutes * 60 * 1000
        self.max_size = max_size

    def clean_expired(self, pool: TxPool) -> int:
        """Remove transactions older than the maximum age; return how many."""
        now = now_millis()
        expired = [h for h, tx in pool.transactions.items() if now - tx.timestamp > self.max_age]
        for tx_hash in expired:
            pool.remove(tx_hash)
        return len(expired)

    def enforce_size_limit(self, pool: TxPool) -> int:
        """Remove the earliest-added transactions beyond ``max_size``; return how many."""
        overflow = len(pool) - self.max_size
        if overflow <= 0:
            return 0
        oldest = list(pool.transactions)[:overflow]
        for tx_hash in oldest:
            pool.remove(tx_hash)
        return overflow

    def full_clean(self, pool: TxPool) -> int:
        """Remove expired transactions, then enforce the size limit."""
        return self.clean_expired(pool) + self.enforce_size_limit(pool)