from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class ScheduleConfig:
    utc_offset_hours: float = float(os.getenv("CONCIERGE_UTC_OFFSET_HOURS", "4"))
    visible_start: int = 12 * 60  # 12:00
    visible_end: int = MINUTES_PER_DAY + 2 * 60  # 02:00 next day
    slot_step: int = 30
    window_length: int = 120
    opening_soon_minutes: int = 60
    booking_lead_minutes: int = 15
    always_open_markers: tuple[str, ...] = ("24 hours", "all opening hours", "open now")
    fallback_slots: tuple[str, ...] = (
        "7:00 PM",
        "7:30 PM",
        "8:00 PM",
        "8:30 PM",
        "9:00 PM",
    )
    error_fallback_slots: tuple[str, ...] = ("7:00 PM", "8:00 PM", "9:00 PM")


DEFAULT_SCHEDULE_CONFIG = ScheduleConfig()
