from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..recommendations.models import MenuItem, Venue
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from .menu import merge_menu_items, parse_menu_items, signature_dish_items
from .venues import parse_venues

logger = logging.getLogger(__name__)

RESTAURANT_TYPE = "restaurant"


@dataclass(frozen=True)
class Catalog:
    venues: list[Venue] = field(default_factory=list)
    menu_items: list[MenuItem] = field(default_factory=list)


def restaurant_dishes(items: list[MenuItem], venues: list[Venue]) -> list[MenuItem]:
    """Keep items whose venue (matched by exact name) is a restaurant."""
    restaurants = {
        v.name for v in venues if v.type.lower().strip() == RESTAURANT_TYPE
    }
    return [i for i in items if i.venue_name in restaurants]


def build_catalog(
    venues_text: str,
    menu_text: str,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> Catalog:
    """Normalize both exports into a Catalog."""
    venues = parse_venues(venues_text, config=config)
    menu_items = parse_menu_items(menu_text, venues, config=config)
    if config.include_signature_dishes:
        menu_items = merge_menu_items(menu_items, signature_dish_items(venues))
    if config.restaurant_dishes_only:
        menu_items = restaurant_dishes(menu_items, venues)
    logger.info(
        "Catalog built: %d venues, %d menu items", len(venues), len(menu_items)
    )
    return Catalog(venues=venues, menu_items=menu_items)


def load_catalog(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Catalog:
    """
    Read the venue and menu exports from ``config.data_dir``.

    A missing menu export yields a catalog without menu items; a missing
    venue export raises ``FileNotFoundError``.
    """
    venues_text = config.venues_path.read_text(encoding="utf-8")
    if config.menu_path.is_file():
        menu_text = config.menu_path.read_text(encoding="utf-8")
    else:
        logger.warning("Menu export not found at %s", config.menu_path)
        menu_text = ""
    return build_catalog(venues_text, menu_text, config=config)


if __name__ == "__main__":
    catalog = load_catalog()
    print(
        f"Ingestion complete. {len(catalog.venues)} venues, "
        f"{len(catalog.menu_items)} menu items from {DEFAULT_INGESTION_CONFIG.data_dir}"
    )
