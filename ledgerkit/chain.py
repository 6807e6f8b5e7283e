"""Core chain of blocks with genesis creation and linkage checks."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from itertools import pairwise

CHAIN_VERSION = "ledgerkit-v1.0.0"
GENESIS_PREV_HASH = "0" * 64
GENESIS_HASH = "genesis-block-hash-core"
GENESIS_DATA = "genesis-block-initialized"


@dataclass
class Block:
    """A single block of the chain."""

    index: int
    timestamp: int
    prev_hash: str
    hash: str
    data: str
    nonce: int = 0


def now_millis() -> int:
    """Current UTC time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def _genesis_block() -> Block:
    return Block(
        index=0,
        timestamp=now_millis(),
        prev_hash=GENESIS_PREV_HASH,
        hash=GENESIS_HASH,
        data=GENESIS_DATA,
        nonce=0,
    )


class Blockchain:
    """An append-only chain starting from a fixed genesis block."""

    def __init__(self) -> None:
        self.version = CHAIN_VERSION
        self.blocks: deque[Block] = deque([_genesis_block()])

    @property
    def latest_block(self) -> Block:
        """The most recently appended block."""
        return self.blocks[-1]

    def add_block(self, block: Block) -> bool:
        """Append ``block`` if it links to the latest block; report whether it did."""
        latest = self.latest_block
        if block.prev_hash != latest.hash or block.index != latest.index + 1:
            return False
        self.blocks.append(block)
        return True

    def is_valid(self) -> bool:
        """Check that every block links to the hash of its predecessor."""
        return all(
            current.hash != prev.hash and current.prev_hash == prev.hash
            for prev, current in pairwise(self.blocks)
        )

    def __len__(self) -> int:
        return len(self.blocks)