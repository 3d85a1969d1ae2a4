from __future__ import annotations

from .models import MenuItem, UserProfile, Venue


def unseen_venues(venues: list[Venue], profile: UserProfile | None) -> list[Venue]:
    """Venues the user has neither saved nor binned."""
    if profile is None:
        return list(venues)
    seen = set(profile.saved_venues) | set(profile.binned_venues)
    return [v for v in venues if v.id not in seen]


def unseen_dishes(items: list[MenuItem], profile: UserProfile | None) -> list[MenuItem]:
    if profile is None:
        return list(items)
    seen = set(profile.saved_dishes) | set(profile.binned_dishes)
    return [item for item in items if item.id not in seen]


def saved_venues(venues: list[Venue], profile: UserProfile | None) -> list[Venue]:
    if profile is None:
        return []
    saved = set(profile.saved_venues)
    return [v for v in venues if v.id in saved]
