from __future__ import annotations

import logging
import re

from ..recommendations.models import MenuItem, Venue
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .tabular import iter_rows

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_LEADING_FLOAT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")
_WHITESPACE_RE = re.compile(r"\s+")

SIGNATURE_COURSE = "Signature"
DEFAULT_SIGNATURE_DESCRIPTION = "Our curated signature creation."


def normalize(value: str) -> str:
    """Lowercase *value* and drop everything that is not a-z or 0-9."""
    return _NON_ALNUM_RE.sub("", value.lower())


def _parse_price(raw: str) -> float:
    match = _LEADING_FLOAT_RE.match(raw)
    return float(match.group(1)) if match else 0.0


def _parse_tags(raw: str) -> list[str]:
    return [tag.strip() for tag in raw.split(";") if tag.strip()]


def parse_menu_items(
    text: str,
    venues: list[Venue],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> list[MenuItem]:
    """
    Parse the menu export, attaching each row to its venue.

    A row joins a venue when the normalized slug equals the normalized venue
    name. Rows without a matching venue are dropped.
    """
    by_name: dict[str, Venue] = {}
    for venue in venues:
        by_name.setdefault(normalize(venue.name), venue)

    items: list[MenuItem] = []
    for index, row in iter_rows(text, min_fields=config.min_fields):
        venue_slug = row[0]
        venue = by_name.get(normalize(venue_slug))
        if venue is None:
            logger.debug("Dropping menu row %d: no venue for slug %r", index, venue_slug)
            continue
        try:
            items.append(MenuItem(
                id=f"m-{index}",
                venue_slug=venue_slug,
                course=row[1],
                item=row[2],
                description=row[3],
                price=_parse_price(row[4]),
                dietary_tags=_parse_tags(row[5] if len(row) > 5 else ""),
                venue_name=venue.name,
                venue_image=venue.image_address,
            ))
        except ValueError:
            logger.warning("Failed to parse menu row %d", index, exc_info=True)
    return items


def signature_dish_items(venues: list[Venue]) -> list[MenuItem]:
    """Turn every venue's signature dish into a synthetic menu item."""
    items: list[MenuItem] = []
    for venue in venues:
        if not venue.signature_dish:
            continue
        items.append(MenuItem(
            id=f"sig-{venue.id}",
            venue_slug=_WHITESPACE_RE.sub("-", venue.name.lower()),
            course=SIGNATURE_COURSE,
            item=venue.signature_dish.split("|")[0].strip(),
            description=venue.usp or DEFAULT_SIGNATURE_DESCRIPTION,
            price=venue.price_per_person,
            dietary_tags=[venue.cuisine],
            venue_name=venue.name,
            venue_image=venue.image_address,
            is_signature=True,
        ))
    return items


def merge_menu_items(
    parsed: list[MenuItem], signatures: list[MenuItem]
) -> list[MenuItem]:
    """Append signature items whose dish name is not already on a menu."""
    merged = list(parsed)
    known = {item.item.lower() for item in parsed}
    for signature in signatures:
        name = signature.item.lower()
        if name in known:
            continue
        known.add(name)
        merged.append(signature)
    return merged


def venue_menu(venue: Venue, items: list[MenuItem]) -> list[MenuItem]:
    """
    Return the menu items belonging to *venue*.

    Looser than the ingestion join: a slug that contains, or is contained
    in, the normalized venue name also counts.
    """
    target = normalize(venue.name)
    if not target:
        return []
    matches: list[MenuItem] = []
    for item in items:
        slug = normalize(item.venue_slug)
        owner = normalize(item.venue_name or "")
        if (
            slug == target
            or owner == target
            or (slug and (target in slug or slug in target))
        ):
            matches.append(item)
    return matches


def group_by_course(items: list[MenuItem]) -> dict[str, list[MenuItem]]:
    groups: dict[str, list[MenuItem]] = {}
    for item in items:
        groups.setdefault(item.course or "Other", []).append(item)
    return groups
