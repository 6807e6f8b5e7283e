"""Ed25519 key generation, signing and verification."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)


def _load_private(keypair: bytes) -> Ed25519PrivateKey:
    key = serialization.load_der_private_key(bytes(keypair), None)
    if not isinstance(key, Ed25519PrivateKey):
        raise ValueError("key pair is not an Ed25519 key")
    return key


class Ed25519Crypto:
    """Ed25519 operations on PKCS#8 DER key pairs and raw 32-byte public keys."""

    def generate_keypair(self) -> bytes:
        """Generate a new key pair, encoded as PKCS#8 DER."""
        return Ed25519PrivateKey.generate().private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )

    def sign(self, keypair: bytes, message: bytes) -> bytes:
        """Sign ``message`` with ``keypair``; returns a 64-byte signature."""
        return _load_private(keypair).sign(bytes(message))

    def verify(self, public_key: bytes, message: bytes, signature: bytes) -> bool:
        """Whether ``signature`` over ``message`` is valid for ``public_key``."""
        try:
            key = Ed25519PublicKey.from_public_bytes(bytes(public_key))
            key.verify(bytes(signature), bytes(message))
        except (InvalidSignature, ValueError):
            return False
        return True

    def public_key(self, keypair: bytes) -> bytes:
        """The raw public key of ``keypair``."""
        return _load_private(keypair).public_key().public_bytes(
            serialization.Encoding.Raw, serialization.PublicFormat.Raw
        )