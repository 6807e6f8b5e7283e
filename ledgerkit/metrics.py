"""Collection of chain performance metrics."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from decimal import Decimal
from time import monotonic

HISTORY_LIMIT = 100


@dataclass
class ChainMetrics:
    """One snapshot of chain performance."""

    tps: float
    block_height: int
    peer_count: int
    mempool_size: int
    cpu_usage: float
    memory_usage_mb: int
    timestamp: int


def _format_float(value: float) -> str:
    """Shortest round-trip decimal text, without exponent or trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class MetricsCollector:
    """Keeps the latest snapshots and a running transaction count."""

    def __init__(self) -> None:
        self.history: deque[ChainMetrics] = deque(maxlen=HISTORY_LIMIT)
        self._start = monotonic()
        self.tx_total = 0

    def record(self, metrics: ChainMetrics) -> None:
        """Store a snapshot, dropping the oldest beyond the limit."""
        self.history.append(metrics)

    def update_tps(self, new_txs: int) -> float:
        """Count ``new_txs`` and return transactions per second since start."""
        self.tx_total += new_txs
        elapsed = monotonic() - self._start
        return 0.0 if elapsed == 0 else self.tx_total / elapsed

    def average_tps(self) -> float:
        """Mean TPS over the stored snapshots, or 0.0 with none."""
        if not self.history:
            return 0.0
        return sum(m.tps for m in self.history) / len(self.history)

    def export_metrics(self) -> dict[str, str]:
        """Key figures of the latest snapshot as strings; empty with none."""
        if not self.history:
            return {}
        latest = self.history[-1]
        return {
            "tps": _format_float(latest.tps),
            "height": str(latest.block_height),
            "peers": str(latest.peer_count),
            "cpu": _format_float(latest.cpu_usage),
        }