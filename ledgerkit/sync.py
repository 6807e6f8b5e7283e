"""Batch-wise block synchronisation protocol state."""

from __future__ import annotations

import enum
from collections import deque

from ledgerkit.chain import Block


class SyncState(enum.Enum):
    """Phases of a synchronisation."""

    IDLE = "idle"
    REQUESTING = "requesting"
    RECEIVING = "receiving"
    VERIFYING = "verifying"
    COMPLETED = "completed"


class ChainSyncProtocol:
    """Tracks the block range being fetched and the blocks received."""

    def __init__(self, batch_size: int) -> None:
        self.state = SyncState.IDLE
        self.start_index = 0
        self.end_index = 0
        self.received_blocks: deque[Block] = deque()
        self.batch_size = batch_size

    def start_sync(self, local_height: int, remote_height: int) -> None:
        """Begin requesting the first batch above ``local_height``."""
        self.state = SyncState.REQUESTING
        self.start_index = local_height + 1
        self.end_index = min(local_height + self.batch_size, remote_height)

    def add_block(self, block: Block) -> bool:
        """Accept ``block`` while receiving and within the current range."""
        if self.state is SyncState.RECEIVING and self.start_index <= block.index <= self.end_index:
            self.received_blocks.append(block)
            return True
        return False

    def next_batch(self) -> tuple[int, int] | None:
        """Advance to the next range when the current one is done, returning it."""
        if len(self.received_blocks) == self.batch_size or self.start_index >= self.end_index:
            self.start_index = self.end_index + 1
            self.end_index = self.start_index + self.batch_size
            return self.start_index, self.end_index
        return None

    def complete_sync(self) -> list[Block]:
        """Finish the synchronisation and hand over the received blocks."""
        self.state = SyncState.COMPLETED
        blocks = list(self.received_blocks)
        self.received_blocks.clear()
        return blocks