"""Merkle tree over transaction strings with simple inclusion proofs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ledgerkit.sha256 import sha256_hex


class MerkleTree:
    """A Merkle tree whose leaves are the SHA-256 hex digests of the transactions."""

    def __init__(self, transactions: Iterable[str]) -> None:
        self.leaves = [sha256_hex(tx) for tx in transactions]
        if not self.leaves:
            raise ValueError("a Merkle tree needs at least one transaction")
        self.levels = self._build_levels(self.leaves)
        self._root = self.levels[-1][0]

    @staticmethod
    def _build_levels(leaves: list[str]) -> list[list[str]]:
        levels = [list(leaves)]
        current = leaves
        while len(current) > 1:
            pairs = zip(current[::2], current[1::2] + [current[-1]] * (len(current) % 2))
            current = [sha256_hex(left + right) for left, right in pairs]
            levels.append(current)
        return levels

    @property
    def root(self) -> str:
        """The root hash."""
        return self._root

    def verify_proof(self, leaf: str, proof: Sequence[str]) -> bool:
        """Hash ``leaf`` and fold each proof element onto it; compare with the root."""
        digest = sha256_hex(leaf)
        for sibling in proof:
            digest = sha256_hex(digest + sibling)
        return digest == self._root

    def get_proof(self, index: int) -> list[str]:
        """Return the sibling hashes on the path from leaf ``index`` to the root."""
        proof = []
        position = index
        for level in self.levels[:-1]:
            sibling = position + 1 if position % 2 == 0 else position - 1
            if sibling < len(level):
                proof.append(level[sibling])
            position //= 2
        return proof