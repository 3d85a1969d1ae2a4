from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from concierge.recommendations.models import TimeBlock, VenueStatus
from concierge.scheduling.clock import fixed_clock, target_now
from concierge.scheduling.config import ScheduleConfig
from concierge.scheduling.hours import (
    available_time_slots,
    generate_time_slots,
    generate_two_hour_windows,
    minutes_to_12h,
    parse_hours_range,
    time_to_minutes,
    venue_status,
)


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 10, 19, hour, minute)


# ── Parsing ──────────────────────────────────────────────────────────────


class TestTimeToMinutes:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("7:30 PM", 1170),
            ("19:30", 1170),
            ("7 PM", 1140),
            ("7pm", 1140),
            ("12 AM", 0),
            ("12:30 am", 30),
            ("12 PM", 720),
            ("00:00", 0),
        ],
    )
    def test_formats(self, text, expected):
        assert time_to_minutes(text) == expected

    def test_twelve_hour_text_round_trips(self):
        for m in range(24 * 60):
            assert time_to_minutes(minutes_to_12h(m)) == m

    @pytest.mark.parametrize("text", ["", "late", "25:00", "7:75 PM"])
    def test_unreadable_raises(self, text):
        with pytest.raises(ValueError):
            time_to_minutes(text)


class TestParseHoursRange:
    def test_same_day(self):
        assert parse_hours_range("12:00-23:00") == (720, 1380)

    def test_overnight_end_moves_to_next_day(self):
        assert parse_hours_range("22:00 – 03:00") == (1320, 180 + 1440)

    def test_twelve_hour_text(self):
        assert parse_hours_range("7:30 PM - 2 AM") == (1170, 120 + 1440)

    def test_not_a_range(self):
        with pytest.raises(ValueError):
            parse_hours_range("Weekends only")


# ── Status ───────────────────────────────────────────────────────────────


class TestVenueStatus:
    def test_overnight_open_before_and_after_midnight(self):
        assert venue_status("22:00-03:00", clock=fixed_clock(_at(23, 30))) == VenueStatus.open_now
        assert venue_status("22:00-03:00", clock=fixed_clock(_at(1, 30))) == VenueStatus.open_now

    def test_overnight_closed_at_noon(self):
        assert venue_status("22:00-03:00", clock=fixed_clock(_at(12))) == VenueStatus.closed

    def test_closing_minute_is_closed(self):
        assert venue_status("22:00-03:00", clock=fixed_clock(_at(3))) == VenueStatus.closed

    def test_opening_soon_window(self):
        assert venue_status("19:00-23:00", clock=fixed_clock(_at(18, 15))) == VenueStatus.opening_soon
        assert venue_status("19:00-23:00", clock=fixed_clock(_at(18, 0))) == VenueStatus.opening_soon
        assert venue_status("19:00-23:00", clock=fixed_clock(_at(17, 59))) == VenueStatus.closed

    def test_opening_soon_across_midnight(self):
        assert venue_status("00:30-06:00", clock=fixed_clock(_at(23, 45))) == VenueStatus.opening_soon

    def test_aware_clock_is_converted_to_venue_time(self):
        utc_evening = datetime(2026, 10, 19, 19, 30, tzinfo=timezone.utc)  # 23:30 at UTC+4
        assert venue_status("22:00-03:00", clock=fixed_clock(utc_evening)) == VenueStatus.open_now

    @pytest.mark.parametrize(
        "hours, availability",
        [
            ("24 hours", None),
            ("10:00-12:00", "All opening hours"),
            ("", "Open now"),
        ],
    )
    def test_always_open_markers(self, hours, availability):
        status = venue_status(hours, availability, clock=fixed_clock(_at(5)))
        assert status == VenueStatus.open_now

    def test_always_open_text_without_range(self):
        assert venue_status("Always open", clock=fixed_clock(_at(5))) == VenueStatus.open_now

    def test_unreadable_hours_have_no_status(self):
        assert venue_status("Weekends only", clock=fixed_clock(_at(20))) is None
        assert venue_status("late-later", clock=fixed_clock(_at(20))) is None


def test_target_now_uses_fixed_offset():
    now = target_now(ScheduleConfig(utc_offset_hours=4))
    assert now.utcoffset() == timedelta(hours=4)


# ── Slots ────────────────────────────────────────────────────────────────


class TestTimeSlots:
    def test_evening_hours(self):
        slots = generate_time_slots("19:00-23:00")
        assert slots[0] == "7:00 PM"
        assert slots[-1] == "11:00 PM"
        assert len(slots) == 9

    def test_clipped_to_noon(self):
        slots = generate_time_slots("10:00-15:00")
        assert slots[0] == "12:00 PM"
        assert slots[-1] == "3:00 PM"

    def test_overnight_clipped_to_two_am(self):
        slots = generate_time_slots("20:00-04:00")
        assert slots[0] == "8:00 PM"
        assert slots[-2:] == ["1:30 AM", "2:00 AM"]

    def test_always_open_uses_full_visible_range(self):
        slots = generate_time_slots("All opening hours")
        assert slots[0] == "12:00 PM"
        assert slots[-1] == "2:00 AM"
        assert len(slots) == 29

    def test_unsplittable_hours_fall_back(self):
        assert generate_time_slots("Weekends only") == [
            "7:00 PM", "7:30 PM", "8:00 PM", "8:30 PM", "9:00 PM",
        ]

    def test_unreadable_times_fall_back(self):
        assert generate_time_slots("late-later") == ["7:00 PM", "8:00 PM", "9:00 PM"]

    def test_hours_after_midnight_fall_in_visible_range(self):
        assert generate_time_slots("00:00-03:00") == [
            "12:00 AM", "12:30 AM", "1:00 AM", "1:30 AM", "2:00 AM",
        ]

    def test_morning_only_hours_have_no_slots(self):
        assert generate_time_slots("07:00-11:00") == []


class TestTwoHourWindows:
    def test_exact_fit(self):
        assert generate_two_hour_windows("12:00-14:00") == [
            TimeBlock(start="12:00", end="14:00", label="12:00 - 14:00"),
        ]

    def test_partial_window_dropped(self):
        assert generate_two_hour_windows("12:00-13:00") == []

    def test_trailing_partial_window_dropped(self):
        labels = [b.label for b in generate_two_hour_windows("18:00-23:00")]
        assert labels == ["18:00 - 20:00", "20:00 - 22:00"]

    def test_overnight_windows(self):
        labels = [b.label for b in generate_two_hour_windows("22:00-03:00")]
        assert labels == ["22:00 - 00:00", "00:00 - 02:00"]

    def test_always_open(self):
        blocks = generate_two_hour_windows("24 hours")
        assert len(blocks) == 7
        assert blocks[0].label == "12:00 - 14:00"
        assert blocks[-1].label == "00:00 - 02:00"

    def test_unsplittable_hours_give_nothing(self):
        assert generate_two_hour_windows("Weekends only") == []

    def test_hours_after_midnight(self):
        labels = [b.label for b in generate_two_hour_windows("00:00-03:00")]
        assert labels == ["00:00 - 02:00"]

    def test_late_start_after_midnight(self):
        assert generate_two_hour_windows("01:00-05:00") == []


def test_slot_and_window_fallbacks_diverge():
    assert generate_time_slots("Weekends only") != []
    assert generate_two_hour_windows("Weekends only") == []


# ── Bookable slots ───────────────────────────────────────────────────────


class TestAvailableTimeSlots:
    def test_today_drops_past_and_imminent_slots(self):
        slots = available_time_slots(
            "19:00-23:00", date(2026, 10, 19), clock=fixed_clock(_at(19, 20)),
        )
        assert slots[0] == "8:00 PM"

    def test_other_day_keeps_everything(self):
        slots = available_time_slots(
            "19:00-23:00", date(2026, 10, 20), clock=fixed_clock(_at(19, 20)),
        )
        assert slots == generate_time_slots("19:00-23:00")

    def test_after_midnight_slots_stay_bookable_tonight(self):
        slots = available_time_slots(
            "20:00-02:00", date(2026, 10, 19), clock=fixed_clock(_at(23, 0)),
        )
        assert slots == ["11:30 PM", "12:00 AM", "12:30 AM", "1:00 AM", "1:30 AM", "2:00 AM"]
