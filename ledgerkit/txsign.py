"""Signing and verification of typed transactions with Ed25519."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, replace

from ledgerkit.ed25519 import Ed25519Crypto


class TxType(enum.Enum):
    """Kinds of signed transactions."""

    TRANSFER = "Transfer"
    STAKE = "Stake"
    UNSTAKE = "Unstake"
    CONTRACT_CALL = "ContractCall"
    VOTE = "Vote"


@dataclass
class SignedTransaction:
    """A transaction with its signature and the signer's public key."""

    tx_type: TxType
    sender: str
    receiver: str
    amount: int
    nonce: int
    data: bytes = b""
    signature: bytes = b""
    public_key: bytes = b""


def _signing_message(tx: SignedTransaction) -> bytes:
    fields = [tx.tx_type.value, tx.sender, tx.receiver, tx.amount, tx.nonce, list(tx.data)]
    return json.dumps(fields, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class TxSigner:
    """Signs transactions over their type, parties, amount, nonce and data."""

    def __init__(self) -> None:
        self.crypto = Ed25519Crypto()

    def sign_transaction(self, keypair: bytes, tx: SignedTransaction) -> SignedTransaction:
        """Return ``tx`` carrying a signature and public key from ``keypair``."""
        message = _signing_message(tx)
        return replace(
            tx,
            signature=self.crypto.sign(keypair, message),
            public_key=self.crypto.public_key(keypair),
        )

    def verify_transaction(self, tx: SignedTransaction) -> bool:
        """Whether the transaction's signature matches its contents and key."""
        return self.crypto.verify(tx.public_key, _signing_message(tx), tx.signature)