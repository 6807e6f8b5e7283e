"""Cross-chain asset locking and relay queue."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

SUPPORTED_CHAINS = ("ETH", "BSC", "SOL", "TRON")


@dataclass
class CrossChainTx:
    """A transfer of assets from one chain to another."""

    source_chain: str
    target_chain: str
    sender: str
    receiver: str
    amount: int
    nonce: int
    signature: bytes = b""


class CrossChainBridge:
    """Locks assets bound for supported chains until they are relayed."""

    def __init__(self, chain_id: int) -> None:
        self.chain_id = chain_id
        self.supported_chains = list(SUPPORTED_CHAINS)
        self.pending_txs: deque[CrossChainTx] = deque()
        self.relayers: list[str] = []

    def add_relayer(self, relayer: str) -> None:
        """Register a relayer."""
        self.relayers.append(relayer)

    def lock_asset(self, tx: CrossChainTx) -> bool:
        """Queue ``tx`` if its target chain is supported and its amount non-zero."""
        if tx.target_chain not in self.supported_chains or tx.amount == 0:
            return False
        self.pending_txs.append(tx)
        return True

    def unlock_asset(self, tx: CrossChainTx) -> bool:
        """Whether a pending transfer with the same nonce exists."""
        return any(pending.nonce == tx.nonce for pending in self.pending_txs)

    def process_pending(self) -> list[CrossChainTx]:
        """Take every pending transfer, oldest first."""
        processed = list(self.pending_txs)
        self.pending_txs.clear()
        return processed