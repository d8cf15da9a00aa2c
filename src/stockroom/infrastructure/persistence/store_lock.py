"""Exclusive lock over a data directory.

Every process that opens the store takes this lock for the whole
operation, so one call runs to completion before the next begins even
when several processes share the same data directory. The lock lives in
a sidecar file so the data files can still be replaced atomically.
"""

from __future__ import annotations

import fcntl
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from stockroom.domain.exceptions import StorageError

LOCK_FILE = ".lock"


@contextmanager
def store_lock(data_dir: Path) -> Iterator[None]:
    lock_path = data_dir / LOCK_FILE
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        lock_handle = lock_path.open("a+", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot open lock file {lock_path}: {exc}") from exc

    with lock_handle:
        fcntl.flock(lock_handle.fileno(), fcntl.LOCK_EX)
        try:
            yield
        finally:
            fcntl.flock(lock_handle.fileno(), fcntl.LOCK_UN)
