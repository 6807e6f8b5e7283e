"""Unspent transaction output tracking with double-spend detection."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass


@dataclass
class Utxo:
    """One transaction output."""

    tx_hash: str
    index: int
    address: str
    amount: int
    is_spent: bool = False

    @property
    def key(self) -> str:
        """The outpoint identifier ``tx_hash:index``."""
        return _key(self.tx_hash, self.index)


def _key(tx_hash: str, index: int) -> str:
    return f"{tx_hash}:{index}"


class UtxoManager:
    """Set of outputs indexed by outpoint and by owning address."""

    def __init__(self) -> None:
        self.utxo_set: dict[str, Utxo] = {}
        self.address_utxos: defaultdict[str, list[str]] = defaultdict(list)

    def add_utxo(self, utxo: Utxo) -> None:
        """Record an output."""
        self.address_utxos[utxo.address].append(utxo.key)
        self.utxo_set[utxo.key] = utxo

    def spend_utxo(self, tx_hash: str, index: int) -> bool:
        """Mark an output spent; fails if unknown or already spent."""
        utxo = self.utxo_set.get(_key(tx_hash, index))
        if utxo is None or utxo.is_spent:
            return False
        utxo.is_spent = True
        return True

    def balance(self, address: str) -> int:
        """Sum of the unspent outputs owned by ``address``."""
        return sum(
            utxo.amount
            for key in self.address_utxos.get(address, ())
            if (utxo := self.utxo_set.get(key)) is not None and not utxo.is_spent
        )

    def is_double_spend(self, tx_hash: str, index: int) -> bool:
        """Whether the output exists and has already been spent."""
        utxo = self.utxo_set.get(_key(tx_hash, index))
        return utxo is not None and utxo.is_spent