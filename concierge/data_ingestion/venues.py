from __future__ import annotations

import logging
import re

from ..recommendations.models import IndoorOutdoor, Venue
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .tabular import iter_rows

logger = logging.getLogger(__name__)

DRIVE_MARKER = "drive.google.com"
_DRIVE_ID_RE = re.compile(r"[-\w]{25,}")
_LEADING_INT_RE = re.compile(r"^\s*(-?\d+)")

# Fixed column positions of the venue export.
COL_ID = 0
COL_NAME = 1
COL_LOCATION_URL = 2
COL_IMAGE = 3
COL_MENU = 4
COL_CONTACT = 5
COL_TYPE = 8
COL_LOCATION = 9
COL_COMMISSION = 10
COL_FAMILY = 11
COL_CUISINE = 12
COL_HOURS = 13
COL_AVAILABILITY = 14
COL_PRICE = 15
COL_PROMO = 17
COL_SIGNATURE = 18
COL_HIGH_TRAFFIC = 19
COL_LOUDNESS = 20
COL_ROMANTIC = 21
COL_PARTY = 22
COL_INSTAGRAM = 23
COL_SUNSET = 24
COL_INDOOR_OUTDOOR = 25
COL_BUSINESS = 26
COL_DRESS_CODE = 27
COL_BIRTHDAY = 28
COL_USP = 29
COL_EXTRA = 30


def drive_image_url(url: str) -> str:
    """Rewrite a Drive share link into a direct image URL."""
    if not url:
        return ""
    match = _DRIVE_ID_RE.search(url)
    if match and DRIVE_MARKER in url:
        return f"https://lh3.googleusercontent.com/d/{match.group(0)}"
    return url


def drive_embed_url(url: str) -> str:
    """Rewrite a Drive share link into an embeddable preview URL."""
    if not url:
        return ""
    match = _DRIVE_ID_RE.search(url)
    if match and DRIVE_MARKER in url:
        return f"https://drive.google.com/file/d/{match.group(0)}/preview"
    return url


def _strip_quotes(value: str) -> str:
    return value.lstrip('"').rstrip('"')


def clean_prefix(value: str, venue_name: str) -> str:
    """Drop a leading ``"<venue name>,"`` from a text column."""
    if not value:
        return ""
    prefix = f"{venue_name},"
    if value.startswith(prefix):
        return _strip_quotes(value[len(prefix):].strip())
    if "," in value:
        parts = value.split(",")
        if parts[0].strip().lower() == venue_name.strip().lower():
            return _strip_quotes(",".join(parts[1:]).strip())
    return _strip_quotes(value)


def compute_rating(romantic: int, party: int, instagrammable: int) -> float:
    raw_score = romantic + party + instagrammable
    rating = round(3.8 + (raw_score / 20) * 1.1, 1)
    return min(rating, 5.0)


def _field(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def _flag(row: list[str], index: int) -> bool:
    return "yes" in _field(row, index).lower()


def _parse_int(raw: str) -> int:
    if not raw.strip():
        return 0
    match = _LEADING_INT_RE.match(raw)
    if not match:
        raise ValueError(f"not an integer: {raw!r}")
    return int(match.group(1))


def _parse_amount(raw: str, keep: str = r"[^0-9.]") -> float:
    digits = re.sub(keep, "", raw)
    return float(digits) if digits else 0.0


def _parse_indoor_outdoor(raw: str) -> IndoorOutdoor:
    lower = raw.strip().lower()
    if "indoor" in lower and "outdoor" in lower:
        return IndoorOutdoor.both
    for option in IndoorOutdoor:
        if lower == option.value.lower():
            return option
    return IndoorOutdoor.unknown


def _parse_promo(raw: str) -> bool:
    return len(raw) > 0 and "no" not in raw.lower()


def venue_from_row(row: list[str]) -> Venue:
    """Map one raw venue row onto a Venue, raising ``ValueError`` on bad data."""
    venue_name = _field(row, COL_NAME)
    romantic = _parse_int(_field(row, COL_ROMANTIC))
    party = _parse_int(_field(row, COL_PARTY))
    insta = _parse_int(_field(row, COL_INSTAGRAM))

    return Venue(
        id=_field(row, COL_ID),
        name=venue_name,
        google_location_url=_field(row, COL_LOCATION_URL),
        image_address=drive_image_url(_field(row, COL_IMAGE)),
        menu_link=drive_embed_url(_field(row, COL_MENU)),
        contact_number=_field(row, COL_CONTACT),
        type=_field(row, COL_TYPE),
        location=_field(row, COL_LOCATION),
        commission=_parse_amount(_field(row, COL_COMMISSION)),
        family_friendly=_flag(row, COL_FAMILY),
        cuisine=_field(row, COL_CUISINE),
        opening_hours=_field(row, COL_HOURS),
        availability=_field(row, COL_AVAILABILITY),
        price_per_person=_parse_amount(_field(row, COL_PRICE), keep=r"[^0-9]"),
        promo_venue=_parse_promo(_field(row, COL_PROMO)),
        signature_dish=clean_prefix(_field(row, COL_SIGNATURE), venue_name),
        high_traffic_area=_flag(row, COL_HIGH_TRAFFIC),
        loudness=_parse_int(_field(row, COL_LOUDNESS)),
        romantic_score=romantic,
        party_vibe=party,
        instagrammable=insta,
        sunset_view=_flag(row, COL_SUNSET),
        indoor_outdoor=_parse_indoor_outdoor(_field(row, COL_INDOOR_OUTDOOR)),
        business_friendly=_flag(row, COL_BUSINESS),
        dress_code=clean_prefix(_field(row, COL_DRESS_CODE), venue_name),
        birthday_venue=_flag(row, COL_BIRTHDAY),
        usp=clean_prefix(_field(row, COL_USP), venue_name),
        extra_details=_field(row, COL_EXTRA),
        google_rating=compute_rating(romantic, party, insta),
    )


def parse_venues(
    text: str, config: IngestionConfig = DEFAULT_INGESTION_CONFIG
) -> list[Venue]:
    """
    Parse the venue export into Venue records in source row order.

    Rows that fail conversion are logged and skipped; so are rows repeating
    an id seen earlier in the export.
    """
    venues: list[Venue] = []
    seen_ids: set[str] = set()
    for index, row in iter_rows(text, min_fields=config.min_fields):
        try:
            venue = venue_from_row(row)
        except ValueError:
            logger.warning("Failed to parse venue row %d", index, exc_info=True)
            continue
        if venue.id in seen_ids:
            logger.warning("Skipping venue row %d: duplicate id %r", index, venue.id)
            continue
        seen_ids.add(venue.id)
        venues.append(venue)
    return venues
