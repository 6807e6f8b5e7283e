"""Header-only client that verifies transaction inclusion proofs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ledgerkit.sha256 import sha256_hex


@dataclass
class BlockHeader:
    """The header of a block."""

    height: int
    prev_hash: str
    merkle_root: str
    timestamp: int


class LightClient:
    """Keeps a chain of headers from a trusted genesis header."""

    def __init__(self, trusted_genesis: BlockHeader) -> None:
        self.headers = [trusted_genesis]
        self.trusted_height = 0

    def last_hash(self) -> str:
        """Hash of the latest header."""
        last = self.headers[-1]
        return sha256_hex(f"{last.height}{last.prev_hash}{last.merkle_root}{last.timestamp}")

    def add_header(self, header: BlockHeader) -> bool:
        """Append ``header`` if it follows the latest header; report whether it did."""
        last = self.headers[-1]
        if header.height != last.height + 1 or header.prev_hash != self.last_hash():
            return False
        self.headers.append(header)
        self.trusted_height = header.height
        return True

    def verify_tx(self, tx_hash: str, proof: Sequence[str], height: int) -> bool:
        """Fold ``proof`` onto ``tx_hash`` and compare with the Merkle root at ``height``."""
        header = next((h for h in self.headers if h.height == height), None)
        if header is None:
            return False
        digest = tx_hash
        for sibling in proof:
            digest = sha256_hex(digest + sibling)
        return digest == header.merkle_root