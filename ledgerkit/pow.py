"""Proof-of-work mining and verification."""

from __future__ import annotations

from dataclasses import replace
from itertools import count

from ledgerkit.chain import Block
from ledgerkit.sha256 import sha256_hex


class PowConsensus:
    """Proof of work requiring block hashes to start with ``difficulty`` zeros."""

    def __init__(self, difficulty: int) -> None:
        self.difficulty = difficulty
        self.target_prefix = "0" * difficulty

    def block_hash(self, block: Block) -> str:
        """Hash of the block's contents and nonce."""
        return sha256_hex(
            f"{block.index}{block.timestamp}{block.prev_hash}{block.data}{block.nonce}"
        )

    def mine_block(self, block: Block) -> Block:
        """Return a copy of ``block`` with a nonce and hash that meet the target."""
        for nonce in count():
            candidate = replace(block, nonce=nonce)
            digest = self.block_hash(candidate)
            if digest.startswith(self.target_prefix):
                candidate.hash = digest
                return candidate
        raise AssertionError("unreachable")

    def validate_block(self, block: Block) -> bool:
        """Check the stored hash matches the contents and meets the target."""
        digest = self.block_hash(block)
        return digest == block.hash and digest.startswith(self.target_prefix)

    def adjust_difficulty(self, latest_index: int) -> int:
        """Raise difficulty by one on every tenth block (other than genesis)."""
        if latest_index % 10 == 0 and latest_index != 0:
            return self.difficulty + 1
        return self.difficulty