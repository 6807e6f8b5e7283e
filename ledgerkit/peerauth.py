"""Peer admission by trusted Ed25519 keys and signed challenges."""

from __future__ import annotations

import secrets

from ledgerkit.ed25519 import Ed25519Crypto

CHALLENGE_SIZE = 32


class PeerAuth:
    """Admits peers whose trusted key signed the issued challenge."""

    def __init__(self, require_auth: bool) -> None:
        self.require_auth = require_auth
        self.trusted_pubkeys: set[bytes] = set()
        self.crypto = Ed25519Crypto()

    def add_trusted(self, pubkey: bytes) -> None:
        """Trust ``pubkey``."""
        self.trusted_pubkeys.add(bytes(pubkey))

    def authenticate(self, pubkey: bytes, challenge: bytes, signature: bytes) -> bool:
        """Accept any peer when authentication is off; else a trusted key with a valid signature."""
        if not self.require_auth:
            return True
        if bytes(pubkey) not in self.trusted_pubkeys:
            return False
        return self.crypto.verify(pubkey, challenge, signature)

    def generate_challenge(self) -> bytes:
        """A fresh random challenge."""
        return secrets.token_bytes(CHALLENGE_SIZE)

    def remove_trusted(self, pubkey: bytes) -> None:
        """Stop trusting ``pubkey``; unknown keys are ignored."""
        self.trusted_pubkeys.discard(bytes(pubkey))

    def trusted_count(self) -> int:
        """Number of trusted keys."""
        return len(self.trusted_pubkeys)