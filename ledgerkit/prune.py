"""Pruning of old blocks into JSON archive files."""

from __future__ import annotations

import json
import time
from collections import deque
from dataclasses import asdict
from pathlib import Path

from ledgerkit.chain import Block


class ChainPruner:
    """Keeps the newest ``keep_blocks`` blocks and archives the rest."""

    def __init__(self, keep_blocks: int, archive_path: str | Path) -> None:
        self.keep_blocks = keep_blocks
        self.archive_path = Path(archive_path)

    def should_prune(self, chain: deque[Block]) -> bool:
        """Whether ``chain`` holds more blocks than are kept."""
        return len(chain) > self.keep_blocks

    def prune(self, chain: deque[Block]) -> int:
        """Remove the oldest surplus blocks from ``chain``, archive them, return how many."""
        if not self.should_prune(chain):
            return 0
        prune_count = len(chain) - self.keep_blocks
        archived = [chain.popleft() for _ in range(prune_count)]
        self._archive(archived)
        return prune_count

    def _archive(self, blocks: list[Block]) -> None:
        target = self.archive_path / f"archive_{int(time.time())}.bin"
        payload = json.dumps([asdict(block) for block in blocks]).encode("utf-8")
        try:
            target.write_bytes(payload)
        except OSError:
            pass

    def keep_height(self, current_height: int) -> int:
        """The lowest height kept for a chain at ``current_height``."""
        return max(0, current_height - self.keep_blocks)