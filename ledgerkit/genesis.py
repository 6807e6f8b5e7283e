"""Configurable genesis block construction."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass

from ledgerkit.chain import Block, now_millis
from ledgerkit.sha256 import sha256_hex


@dataclass
class GenesisConfig:
    """Parameters of a new chain."""

    chain_id: int = 1024
    initial_supply: int = 1_000_000_000
    consensus: str = "PoW+PoS"
    block_time: int = 3000
    genesis_address: str = "0x0000000000000000000000000000000000000000"


class GenesisBuilder:
    """Builds the genesis block for a given configuration."""

    def __init__(self, config: GenesisConfig | None = None) -> None:
        self.config = config if config is not None else GenesisConfig()

    def build_genesis_block(self) -> Block:
        """Create a genesis block describing the configuration."""
        cfg = self.config
        data = (
            f"genesis:chain_id={cfg.chain_id}:supply={cfg.initial_supply}"
            f":consensus={cfg.consensus}:block_time={cfg.block_time}"
        )
        return Block(
            index=0,
            timestamp=now_millis(),
            prev_hash="0" * 64,
            hash=f"genesis_{sha256_hex(data)}",
            data=data,
            nonce=0,
        )

    def export_config(self) -> str:
        """The configuration as indented JSON."""
        return json.dumps(asdict(self.config), indent=2)