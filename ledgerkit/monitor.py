"""Runtime statistics for a chain: height, throughput, peers and uptime."""

from __future__ import annotations

from datetime import timedelta
from time import monotonic

from ledgerkit.chain import Blockchain


def _format_duration(seconds: float) -> str:
    nanos = max(0, round(seconds * 1_000_000_000))
    for unit, scale, digits in (("s", 10**9, 9), ("ms", 10**6, 6), ("µs", 10**3, 3)):
        if nanos >= scale:
            whole, frac = divmod(nanos, scale)
            text = str(whole)
            if frac:
                text += "." + str(frac).zfill(digits).rstrip("0")
            return text + unit
    return f"{nanos}ns"


class ChainMonitor:
    """Tracks block and transaction counts since it was created."""

    def __init__(self, chain: Blockchain) -> None:
        now = monotonic()
        self._start = now
        self._last_block = now
        self.block_count = len(chain)
        self.tx_count = 0
        self.peer_count = 0
        self.chain_version = chain.version

    def record_block(self) -> None:
        """Count a new block and note when it arrived."""
        self.block_count += 1
        self._last_block = monotonic()

    def record_txs(self, count: int) -> None:
        """Count ``count`` new transactions."""
        self.tx_count += count

    def set_peers(self, count: int) -> None:
        """Set the current number of peers."""
        self.peer_count = count

    def tps(self) -> float:
        """Transactions per second since the monitor started."""
        elapsed = monotonic() - self._start
        return 0.0 if elapsed == 0 else self.tx_count / elapsed

    def block_age(self) -> timedelta:
        """Time since the last block was recorded."""
        return timedelta(seconds=monotonic() - self._last_block)

    def status(self) -> str:
        """One-line summary of the monitored chain."""
        uptime = _format_duration(monotonic() - self._start)
        return (
            f"Version: {self.chain_version} | Blocks: {self.block_count} | "
            f"TPS: {self.tps():.2f} | Peers: {self.peer_count} | Uptime: {uptime}"
        )