"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_DIR_ENV = "STOCKROOM_DATA_DIR"
LOG_LEVEL_ENV = "STOCKROOM_LOG_LEVEL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL

    @staticmethod
    def from_env() -> Settings:
        return Settings(
            data_dir=Path(os.environ.get(DATA_DIR_ENV, str(DEFAULT_DATA_DIR))),
            log_level=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(),
        )
