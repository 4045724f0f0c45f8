"""Runtime settings.

Values come from the root CLI options, which fall back to the
``STOREFRONT_*`` environment variables (see ``cli.main``).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_DATA_DIR = Path("data")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    currency: str = "USD"

    @property
    def store_path(self) -> Path:
        return self.data_dir / "store.json"

    @property
    def cart_path(self) -> Path:
        return self.data_dir / "cart.json"
