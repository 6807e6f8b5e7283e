"""AES-256-GCM encryption with a random nonce prepended to the ciphertext."""

from __future__ import annotations

import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

KEY_SIZE = 32
NONCE_SIZE = 12


def generate_key() -> bytes:
    """A fresh random 256-bit key."""
    return secrets.token_bytes(KEY_SIZE)


class AesCrypto:
    """Seals and opens data with a fixed 256-bit key."""

    def __init__(self, key: bytes) -> None:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise ValueError(f"key must be {KEY_SIZE} bytes, got {len(key)}")
        self._cipher = AESGCM(key)

    def encrypt(self, data: bytes) -> bytes:
        """Return nonce followed by the sealed ``data`` and its tag."""
        nonce = secrets.token_bytes(NONCE_SIZE)
        return nonce + self._cipher.encrypt(nonce, bytes(data), b"")

    def decrypt(self, ciphertext: bytes) -> bytes | None:
        """Open ``ciphertext``; None if it is too short or fails authentication."""
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < NONCE_SIZE:
            return None
        nonce, sealed = ciphertext[:NONCE_SIZE], ciphertext[NONCE_SIZE:]
        try:
            return self._cipher.decrypt(nonce, sealed, b"")
        except InvalidTag:
            return None