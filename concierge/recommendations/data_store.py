from __future__ import annotations

import pandas as pd

from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG, IngestionConfig
from ..data_ingestion.ingest import Catalog, load_catalog
from .models import MenuItem, Venue

_catalog: Catalog | None = None


def get_catalog(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Catalog:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(config)
    return _catalog


def set_catalog(catalog: Catalog) -> None:
    """Install an already-built catalog (e.g. from bundled strings)."""
    global _catalog
    _catalog = catalog


def clear_catalog() -> None:
    global _catalog
    _catalog = None


def get_venues() -> list[Venue]:
    return get_catalog().venues


def get_menu_items() -> list[MenuItem]:
    return get_catalog().menu_items


def venues_dataframe(venues: list[Venue]) -> pd.DataFrame:
    df = pd.DataFrame([v.model_dump(mode="json") for v in venues])
    if df.empty:
        return pd.DataFrame(columns=list(Venue.model_fields))

    # Pre-parse cuisines into lists for grouping
    df["cuisines_list"] = (
        df["cuisine"]
        .fillna("")
        .apply(lambda s: [c.strip() for c in s.split(",") if c.strip()])
    )
    return df


def catalog_metadata(venues: list[Venue] | None = None) -> dict:
    """Distinct areas, cuisines and venue types, for filter pickers."""
    df = venues_dataframe(get_venues() if venues is None else venues)
    if df.empty:
        return {"areas": [], "cuisines": [], "venue_types": [], "venue_count": 0}

    areas = sorted(a for a in df["location"].dropna().str.strip().unique() if a)
    venue_types = sorted(t for t in df["type"].dropna().str.strip().unique() if t)
    cuisines: set[str] = set()
    for values in df["cuisines_list"]:
        cuisines.update(values)

    return {
        "areas": areas,
        "cuisines": sorted(cuisines),
        "venue_types": venue_types,
        "venue_count": int(len(df)),
    }
