"""Proof-of-stake validator registry and stake-weighted proposer choice."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PosValidator:
    """A staking validator."""

    address: str
    stake: int
    reputation: int = 100
    is_active: bool = True


class PosConsensus:
    """Validators with stake above a minimum; misbehaviour is slashed."""

    def __init__(self, min_stake: int, epoch_blocks: int) -> None:
        self.validators: dict[str, PosValidator] = {}
        self.min_stake = min_stake
        self.epoch_blocks = epoch_blocks

    def register_validator(self, address: str, stake: int) -> bool:
        """Register a new validator with at least the minimum stake."""
        if stake < self.min_stake or address in self.validators:
            return False
        self.validators[address] = PosValidator(address, stake)
        return True

    def add_stake(self, address: str, amount: int) -> bool:
        """Increase a registered validator's stake."""
        validator = self.validators.get(address)
        if validator is None:
            return False
        validator.stake += amount
        return True

    def elect_proposer(self) -> PosValidator | None:
        """The first active validator at which cumulative stake reaches half the total."""
        active = [v for v in self.validators.values() if v.is_active]
        if not active:
            return None
        remaining = sum(v.stake for v in active) // 2
        for validator in active:
            remaining = max(0, remaining - validator.stake)
            if remaining == 0:
                return validator
        return active[0]

    def slash_validator(self, address: str) -> None:
        """Halve the stake and cut reputation; deactivate below 50 reputation."""
        validator = self.validators.get(address)
        if validator is None:
            return
        validator.stake //= 2
        validator.reputation = max(0, validator.reputation - 20)
        if validator.reputation < 50:
            validator.is_active = False