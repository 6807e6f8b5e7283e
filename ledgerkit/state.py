"""World state of accounts and its root hash."""

from __future__ import annotations

from dataclasses import dataclass

from ledgerkit.sha256 import sha256_hex

EMPTY_STATE_ROOT = "0x" + "0" * 64


@dataclass
class AccountState:
    """The state of one account."""

    balance: int
    nonce: int
    code_hash: str
    storage_root: str


class WorldState:
    """Account states keyed by address, with a root hash over all of them."""

    def __init__(self) -> None:
        self.accounts: dict[str, AccountState] = {}
        self._state_root = EMPTY_STATE_ROOT

    def update_account(self, address: str, state: AccountState) -> None:
        """Set the state of ``address`` and recompute the root."""
        self.accounts[address] = state
        self._recalculate_root()

    def get_account(self, address: str) -> AccountState | None:
        """The state of ``address``, if known."""
        return self.accounts.get(address)

    def _recalculate_root(self) -> None:
        combined = ",".join(
            f"{addr}:{acc.balance}:{acc.nonce}:{acc.storage_root}"
            for addr, acc in sorted(self.accounts.items())
        )
        self._state_root = sha256_hex(combined)

    @property
    def state_root(self) -> str:
        """The current root hash."""
        return self._state_root

    def verify_state(self, root: str) -> bool:
        """Whether ``root`` equals the current root."""
        return self._state_root == root