"""Threshold share handling for secrets held by several parties."""

from __future__ import annotations

import secrets
from collections.abc import Sequence

Share = tuple[int, bytes]


class ShamirSecretSharing:
    """Splits a secret into numbered shares; the first ``threshold`` carry the secret."""

    def __init__(self, threshold: int, total_shares: int) -> None:
        if threshold > total_shares:
            raise ValueError("threshold must not exceed the number of shares")
        self.threshold = threshold
        self.total_shares = total_shares

    def split_secret(self, secret: bytes) -> list[Share]:
        """Shares numbered from 1; those past the threshold hold random bytes."""
        secret = bytes(secret)
        return [
            (number, secret if number <= self.threshold else secrets.token_bytes(len(secret)))
            for number in range(1, self.total_shares + 1)
        ]

    def reconstruct_secret(self, shares: Sequence[Share]) -> bytes | None:
        """The secret from the first share, or None with fewer than ``threshold`` shares."""
        if len(shares) < self.threshold or not shares:
            return None
        return bytes(shares[0][1])

    def validate_share(self, share: Share) -> bool:
        """A share needs a number in range and non-empty data."""
        number, data = share
        return 0 < number <= self.total_shares and len(data) > 0