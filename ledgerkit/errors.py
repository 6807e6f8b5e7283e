"""Chain error types and an in-memory error log."""

from __future__ import annotations

import enum
import time


class ChainErrorType(enum.Enum):
    """Categories of chain failures."""

    BLOCK_INVALID = "BlockInvalid"
    CONSENSUS_FAILED = "ConsensusFailed"
    TX_INVALID = "TxInvalid"
    SIGNATURE_FAILED = "SignatureFailed"
    NETWORK_ERROR = "NetworkError"
    STORAGE_ERROR = "StorageError"
    CONTRACT_ERROR = "ContractError"
    SYNC_ERROR = "SyncError"

    def __str__(self) -> str:
        return self.value


class ChainError(Exception):
    """An error raised by a chain component."""

    def __init__(self, error_type: ChainErrorType, message: str, module: str, timestamp: int) -> None:
        super().__init__(message)
        self.error_type = error_type
        self.message = message
        self.module = module
        self.timestamp = timestamp

    def __str__(self) -> str:
        return f"[{self.timestamp}] [{self.module}] {self.error_type}: {self.message}"


class ErrorLog:
    """Records every error it creates."""

    def __init__(self) -> None:
        self._errors: list[ChainError] = []

    def throw(self, error_type: ChainErrorType, message: str, module: str) -> ChainError:
        """Create, record and return an error, ready to be raised."""
        error = ChainError(error_type, message, module, time.time_ns() // 1_000_000)
        self._errors.append(error)
        return error

    @property
    def errors(self) -> tuple[ChainError, ...]:
        """The recorded errors, oldest first."""
        return tuple(self._errors)

    def clear(self) -> None:
        """Forget all recorded errors."""
        self._errors.clear()