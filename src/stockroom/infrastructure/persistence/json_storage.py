"""JSON-file-backed implementations of the durable storage primitives.

Each primitive owns one file, the way each stable structure owns its own
memory region. Writes go to a temporary sibling first and are then renamed
over the target, so a crash mid-write leaves the previous state intact.
"""

from __future__ import annotations

import base64
import binascii
import json
from pathlib import Path

from stockroom.domain.exceptions import StorageError
from stockroom.domain.repository.storage import CounterCell, RecordMap


class JsonCounterCell(CounterCell):

    def __init__(self, file_path: Path, initial: int = 0) -> None:
        self._file_path = file_path
        _ensure_file(self._file_path, json.dumps(initial))

    def get(self) -> int:
        value = _load_json(self._file_path)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise StorageError(f"Counter file {self._file_path} holds {value!r}")
        return value

    def set(self, value: int) -> None:
        _write_atomic(self._file_path, json.dumps(value) + "\n")


class JsonRecordMap(RecordMap):
    """Ordered map of integer keys to byte payloads.

    Payloads are stored base64-encoded under their decimal key, sorted by
    key so the file reads in id order.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        _ensure_file(self._file_path, "{}")

    # --- RecordMap interface --------------------------------------------------

    def get(self, key: int) -> bytes | None:
        return self._load().get(key)

    def insert(self, key: int, value: bytes) -> None:
        records = self._load()
        records[key] = value
        self._persist(records)

    def remove(self, key: int) -> bytes | None:
        records = self._load()
        previous = records.pop(key, None)
        if previous is not None:
            self._persist(records)
        return previous

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, bytes]:
        raw = _load_json(self._file_path)
        if not isinstance(raw, dict):
            raise StorageError(f"Record file {self._file_path} is not a JSON object")
        try:
            return {
                int(key): base64.b64decode(value, validate=True)
                for key, value in raw.items()
            }
        except (ValueError, TypeError, binascii.Error) as exc:
            raise StorageError(f"Record file {self._file_path} is corrupt: {exc}") from exc

    def _persist(self, records: dict[int, bytes]) -> None:
        raw = {
            str(key): base64.b64encode(records[key]).decode("ascii")
            for key in sorted(records)
        }
        _write_atomic(self._file_path, json.dumps(raw, indent=2) + "\n")


# --- File helpers -------------------------------------------------------------


def _load_json(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StorageError(f"Cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise StorageError(f"{path} is not valid JSON: {exc}") from exc


def _write_atomic(path: Path, text: str) -> None:
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)
    except OSError as exc:
        raise StorageError(f"Cannot write {path}: {exc}") from exc


def _ensure_file(path: Path, initial_text: str) -> None:
    if path.exists():
        return
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Cannot create data directory {path.parent}: {exc}") from exc
    _write_atomic(path, initial_text + "\n")
