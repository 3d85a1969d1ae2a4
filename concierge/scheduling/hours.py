from __future__ import annotations

import logging
import re
from datetime import date, datetime

from ..recommendations.models import TimeBlock, VenueStatus
from .clock import Clock, minutes_of_day, target_now, target_timezone
from .config import DEFAULT_SCHEDULE_CONFIG, MINUTES_PER_DAY, ScheduleConfig

logger = logging.getLogger(__name__)

_MERIDIEM_RE = re.compile(r"am|pm", re.IGNORECASE)
_DASH_RE = re.compile(r"[–—]")
_SPACE_RE = re.compile(r"\s")


# ---------------------------------------------------------------------------
# Clock-time text <-> minutes
# ---------------------------------------------------------------------------


def time_to_minutes(text: str) -> int:
    """
    Parse clock-time text into minutes since midnight.

    Accepts "7:30 PM", "19:30", "7 PM" and similar; "12 AM" is midnight and
    "12 PM" is noon. Raises ``ValueError`` when no time can be read.
    """
    lower = text.lower()
    is_pm = "pm" in lower
    is_am = "am" in lower

    time_part = _MERIDIEM_RE.sub("", text).strip()
    if ":" in time_part:
        hour_text, _, minute_text = time_part.partition(":")
    else:
        hour_text, minute_text = time_part, "0"
    hours = int(hour_text)
    minutes = int(minute_text)
    if not 0 <= hours <= 24 or not 0 <= minutes < 60:
        raise ValueError(f"time out of range: {text!r}")

    if is_pm and hours < 12:
        hours += 12
    if is_am and hours == 12:
        hours = 0

    return (hours * 60 + minutes) % MINUTES_PER_DAY


def minutes_to_12h(total: int) -> str:
    """Format minutes as "7:30 PM"; values past midnight wrap to the next day."""
    display = total % MINUTES_PER_DAY
    hours, minutes = divmod(display, 60)
    meridiem = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {meridiem}"


def minutes_to_24h(total: int) -> str:
    hours, minutes = divmod(total % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{minutes:02d}"


# ---------------------------------------------------------------------------
# Opening-hours ranges
# ---------------------------------------------------------------------------


def _range_parts(opening_hours: str) -> list[str]:
    clean = _SPACE_RE.sub("", _DASH_RE.sub("-", opening_hours))
    return clean.split("-")


def is_range(opening_hours: str) -> bool:
    return len(_range_parts(opening_hours)) == 2


def parse_hours_range(opening_hours: str) -> tuple[int, int]:
    """
    Parse "start-end" into minute offsets.

    When the end is not after the start the range crosses midnight and the
    returned end is pushed into the next day (``end + 1440``).
    """
    parts = _range_parts(opening_hours)
    if len(parts) != 2:
        raise ValueError(f"not a start-end range: {opening_hours!r}")
    start = time_to_minutes(parts[0])
    end = time_to_minutes(parts[1])
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def is_always_open(text: str, config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG) -> bool:
    lower = text.lower()
    return any(marker in lower for marker in config.always_open_markers)


def _local_now(clock: Clock | None, config: ScheduleConfig) -> datetime:
    moment = clock() if clock else target_now(config)
    if moment.tzinfo is not None:
        moment = moment.astimezone(target_timezone(config))
    return moment


def _visible_bounds(
    opening_hours: str, config: ScheduleConfig
) -> tuple[int, int]:
    start, end = parse_hours_range(opening_hours)
    # Hours that close before noon belong to the night after midnight.
    if end <= config.visible_start:
        start += MINUTES_PER_DAY
        end += MINUTES_PER_DAY
    return max(start, config.visible_start), min(end, config.visible_end)


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------


def venue_status(
    opening_hours: str,
    availability: str | None = None,
    clock: Clock | None = None,
    config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG,
) -> VenueStatus | None:
    """
    Return the open/closed indicator for a venue at the current target time.

    None means the hours text could not be read.
    """
    combined = f"{opening_hours} {availability or ''}"
    if is_always_open(combined, config):
        return VenueStatus.open_now

    if not is_range(opening_hours):
        if "always open" in combined.lower():
            return VenueStatus.open_now
        return None

    try:
        start, end = parse_hours_range(opening_hours)
    except ValueError:
        logger.debug("Unreadable opening hours %r", opening_hours)
        return None

    current = minutes_of_day(_local_now(clock, config))
    if start <= current < end or current + MINUTES_PER_DAY < end:
        return VenueStatus.open_now

    to_opening = (start - current) % MINUTES_PER_DAY
    if 0 < to_opening <= config.opening_soon_minutes:
        return VenueStatus.opening_soon

    return VenueStatus.closed


# ---------------------------------------------------------------------------
# Slots and windows
# ---------------------------------------------------------------------------


def _slot_labels(start: int, end: int, config: ScheduleConfig) -> list[str]:
    return [minutes_to_12h(m) for m in range(start, end + 1, config.slot_step)]


def generate_time_slots(
    opening_hours: str, config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG
) -> list[str]:
    """
    Bookable 30-minute slots, as "7:30 PM" text, between 12:00 and 02:00.

    The visible range is narrowed to the venue's hours when they can be read.
    Unreadable hours give a small fixed set of evening slots, never an empty
    list.
    """
    if not opening_hours or is_always_open(opening_hours, config):
        return _slot_labels(config.visible_start, config.visible_end, config)

    if not is_range(opening_hours):
        return list(config.fallback_slots)

    try:
        start, end = _visible_bounds(opening_hours, config)
    except ValueError:
        logger.debug("Unreadable opening hours %r", opening_hours)
        return list(config.error_fallback_slots)

    return _slot_labels(start, end, config)


def generate_two_hour_windows(
    opening_hours: str, config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG
) -> list[TimeBlock]:
    """
    Consecutive two-hour blocks inside the venue's visible hours.

    A trailing block that would run past closing is dropped. Unreadable
    hours give an empty list.
    """
    if not opening_hours or is_always_open(opening_hours, config):
        start, end = config.visible_start, config.visible_end
    else:
        try:
            start, end = _visible_bounds(opening_hours, config)
        except ValueError:
            logger.debug("Unreadable opening hours %r", opening_hours)
            return []

    blocks: list[TimeBlock] = []
    block_start = start
    while block_start + config.window_length <= end:
        block_end = block_start + config.window_length
        label_start = minutes_to_24h(block_start)
        label_end = minutes_to_24h(block_end)
        blocks.append(TimeBlock(
            start=label_start,
            end=label_end,
            label=f"{label_start} - {label_end}",
        ))
        block_start = block_end
    return blocks


def available_time_slots(
    opening_hours: str,
    booking_date: date,
    clock: Clock | None = None,
    config: ScheduleConfig = DEFAULT_SCHEDULE_CONFIG,
) -> list[str]:
    """
    Slots still bookable on *booking_date*.

    For today's date only slots later than now plus the booking lead time
    are kept. Slots before the visible start belong to the night after
    midnight.
    """
    slots = generate_time_slots(opening_hours, config)
    now = _local_now(clock, config)
    if booking_date != now.date():
        return slots

    cutoff = minutes_of_day(now) + config.booking_lead_minutes
    upcoming: list[str] = []
    for slot in slots:
        position = time_to_minutes(slot)
        if position < config.visible_start:
            position += MINUTES_PER_DAY
        if position > cutoff:
            upcoming.append(slot)
    return upcoming
