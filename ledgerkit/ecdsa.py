"""ECDSA over P-256 with SHA-256, plus address derivation."""

from __future__ import annotations

import hashlib

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec


def _load_private(key_pair: bytes) -> ec.EllipticCurvePrivateKey:
    key = serialization.load_der_private_key(bytes(key_pair), None)
    if not isinstance(key, ec.EllipticCurvePrivateKey) or not isinstance(key.curve, ec.SECP256R1):
        raise ValueError("key pair is not a P-256 key")
    return key


class EcdsaHandler:
    """P-256 key pairs in PKCS#8 DER, uncompressed public keys, DER signatures."""

    def generate_key_pair(self) -> bytes:
        """Generate a new key pair, encoded as PKCS#8 DER."""
        return ec.generate_private_key(ec.SECP256R1()).private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )

    def public_key(self, key_pair: bytes) -> bytes:
        """The uncompressed SEC1 public point of ``key_pair``."""
        return _load_private(key_pair).public_key().public_bytes(
            serialization.Encoding.X962, serialization.PublicFormat.UncompressedPoint
        )

    def sign_message(self, key_pair: bytes, msg: bytes) -> bytes:
        """An ASN.1 DER signature of ``msg``."""
        return _load_private(key_pair).sign(bytes(msg), ec.ECDSA(hashes.SHA256()))

    def verify_signature(self, pub_key: bytes, msg: bytes, sig: bytes) -> bool:
        """Whether ``sig`` over ``msg`` is valid for ``pub_key``."""
        try:
            key = ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256R1(), bytes(pub_key))
            key.verify(bytes(sig), bytes(msg), ec.ECDSA(hashes.SHA256()))
        except (InvalidSignature, ValueError):
            return False
        return True

    def pub_key_to_address(self, pub_key: bytes) -> str:
        """``0x`` and the hex of the first 20 bytes of the key's SHA-256."""
        return "0x" + hashlib.sha256(bytes(pub_key)).digest()[:20].hex()