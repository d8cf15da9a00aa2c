"""Domain service: monotonic identifier allocation."""

from __future__ import annotations

from stockroom.domain.exceptions import IdentifierExhaustedError
from stockroom.domain.repository.storage import CounterCell

# Identifiers are unsigned 64-bit values.
MAX_ID = 2**64 - 1


class IdAllocator:
    """Hands out strictly increasing product ids.

    The allocator is the only writer of the counter cell. Because the cell
    is durable, ids keep increasing across restarts and a removed record's
    id is never handed out again. A failure to persist the increment
    propagates (StorageError) instead of returning an id that could be
    issued twice.
    """

    def __init__(self, counter: CounterCell) -> None:
        self._counter = counter

    def next_id(self) -> int:
        current = self._counter.get()
        if current >= MAX_ID:
            raise IdentifierExhaustedError(f"Identifier counter exhausted at {current}")
        new_id = current + 1
        self._counter.set(new_id)
        return new_id
