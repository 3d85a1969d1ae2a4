"""
Data ingestion package for the dining concierge.

Responsibilities:
- Locate the venue and menu-item exports on disk.
- Normalize them into the canonical Venue and MenuItem schemas.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class IngestionConfig:
    """
    Configuration for the venue/menu ingestion pipeline.
    """

    data_dir: Path = Path(os.getenv("CONCIERGE_DATA_DIR", "data"))
    venues_filename: str = "venues.csv"
    menu_filename: str = "menu_items.csv"
    min_fields: int = 5
    include_signature_dishes: bool = True
    # Keep only dishes served by venues whose type is "Restaurant".
    restaurant_dishes_only: bool = False

    @property
    def venues_path(self) -> Path:
        return self.data_dir / self.venues_filename

    @property
    def menu_path(self) -> Path:
        return self.data_dir / self.menu_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
