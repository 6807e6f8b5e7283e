"""Permissioned validator set with round-robin proposer election."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ValidatorNode:
    """A validator and its liveness record."""

    address: str
    power: int
    online: bool = True
    missed_blocks: int = 0


class ValidatorManager:
    """Validators keyed by address; those missing too many blocks go offline."""

    def __init__(self, max_missed: int) -> None:
        self.validators: dict[str, ValidatorNode] = {}
        self.max_missed = max_missed
        self.total_power = 0

    def add_validator(self, address: str, power: int) -> bool:
        """Add a validator unless the address is already known."""
        if address in self.validators:
            return False
        self.total_power += power
        self.validators[address] = ValidatorNode(address, power)
        return True

    def report_missed(self, address: str) -> None:
        """Count a missed block; take the validator offline at the limit."""
        node = self.validators.get(address)
        if node is None:
            return
        node.missed_blocks += 1
        if node.missed_blocks >= self.max_missed and node.online:
            node.online = False
            self.total_power -= node.power

    def _active(self) -> list[ValidatorNode]:
        return [node for node in self.validators.values() if node.online]

    def elect_proposer(self, height: int) -> ValidatorNode | None:
        """Pick the online validator for ``height`` in rotation."""
        active = self._active()
        if not active:
            return None
        return active[height % len(active)]

    def active_count(self) -> int:
        """Number of online validators."""
        return len(self._active())