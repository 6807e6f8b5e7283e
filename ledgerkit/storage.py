"""Persistent key-value store for chain data."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator
from pathlib import Path

_DB_FILE = "ledger.sqlite"


class BlockchainDB:
    """Byte keys and values in a database directory, iterated in key order."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)
        self._file = self.path / _DB_FILE
        self._conn = sqlite3.connect(self._file)
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL)"
            )

    def put(self, key: bytes, value: bytes) -> bool:
        """Store ``value`` under ``key``; report success."""
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (bytes(key), bytes(value)),
                )
        except sqlite3.Error:
            return False
        return True

    def get(self, key: bytes) -> bytes | None:
        """The value under ``key``, or None."""
        try:
            row = self._conn.execute("SELECT value FROM kv WHERE key = ?", (bytes(key),)).fetchone()
        except sqlite3.Error:
            return None
        return None if row is None else bytes(row[0])

    def delete(self, key: bytes) -> bool:
        """Remove ``key``; absent keys are not an error."""
        try:
            with self._conn:
                self._conn.execute("DELETE FROM kv WHERE key = ?", (bytes(key),))
        except sqlite3.Error:
            return False
        return True

    def batch_write(self, items: Iterable[tuple[bytes, bytes | None]]) -> bool:
        """Apply puts and deletes (value None) atomically; report success."""
        try:
            with self._conn:
                for key, value in items:
                    if value is None:
                        self._conn.execute("DELETE FROM kv WHERE key = ?", (bytes(key),))
                    else:
                        self._conn.execute(
                            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                            (bytes(key), bytes(value)),
                        )
        except sqlite3.Error:
            return False
        return True

    def __iter__(self) -> Iterator[tuple[bytes, bytes]]:
        rows = self._conn.execute("SELECT key, value FROM kv ORDER BY key").fetchall()
        for key, value in rows:
            yield bytes(key), bytes(value)

    def close(self) -> None:
        """Close the database and delete its files."""
        self._conn.close()
        for suffix in ("", "-journal", "-wal", "-shm"):
            Path(f"{self._file}{suffix}").unlink(missing_ok=True)
        try:
            self.path.rmdir()
        except OSError:
            pass