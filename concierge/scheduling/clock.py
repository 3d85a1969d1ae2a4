from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from .config import DEFAULT_SCHEDULE_CONFIG, ScheduleConfig

Clock = Callable[[], datetime]


def target_timezone(config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG) -> timezone:
    return timezone(timedelta(hours=config.utc_offset_hours))


def target_now(config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG) -> datetime:
    """Current civil time at the fixed venue offset, whatever the host timezone."""
    return datetime.now(timezone.utc).astimezone(target_timezone(config))


def fixed_clock(instant: datetime) -> Clock:
    """Clock that always answers *instant*."""
    return lambda: instant


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute
