"""Durable storage primitives the store is built on.

A counter cell holds a single integer; a record map holds opaque byte
payloads keyed by integer. Both must survive process restarts. Failures
to read or persist are reported as StorageError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class CounterCell(ABC):

    @abstractmethod
    def get(self) -> int:
        """Return the current value (0 if never written)."""

    @abstractmethod
    def set(self, value: int) -> None:
        """Persist a new value."""


class RecordMap(ABC):

    @abstractmethod
    def get(self, key: int) -> bytes | None:
        """Return the payload stored at *key*, or None."""

    @abstractmethod
    def insert(self, key: int, value: bytes) -> None:
        """Store *value* at *key*, replacing any previous payload."""

    @abstractmethod
    def remove(self, key: int) -> bytes | None:
        """Delete *key* and return its previous payload, or None."""
