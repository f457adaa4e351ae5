"""Configuration management using environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file, if present
load_dotenv()

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


class Settings:
    """Application settings read from the environment."""

    def __init__(self) -> None:
        self.data_dir = Path(os.getenv("ORDERING_DATA_DIR", str(DEFAULT_DATA_DIR)))
        self.log_level = self._parse_log_level(os.getenv("ORDERING_LOG_LEVEL", "WARNING"))

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @staticmethod
    def _parse_log_level(raw: str) -> int:
        level = logging.getLevelName(raw.strip().upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown ORDERING_LOG_LEVEL: {raw!r}")
        return level
