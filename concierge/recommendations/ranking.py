from __future__ import annotations

import logging

from ..scheduling.hours import is_always_open, time_to_minutes
from .config import DEFAULT_RANKING_WEIGHTS, RankingWeights
from .models import (
    MealType,
    RankingResult,
    ScoredVenue,
    UserPreferences,
    UserProfile,
    Venue,
)

logger = logging.getLogger(__name__)

REQUESTED_VENUE_REASON = "Requested Venue"
ROMANTIC_REASON = "Ultra-Romantic"
PARTY_REASON = "High Energy"
REASON_SEPARATOR = " • "


def _contains_either_way(a: str, b: str) -> bool:
    """Bidirectional substring match; an empty string is contained in anything."""
    return a in b or b in a


def match_requested_venue(venues: list[Venue], venue_name: str) -> list[Venue]:
    target = venue_name.lower().strip()
    return [v for v in venues if _contains_either_way(v.name.lower(), target)]


def _matches_area(venue: Venue, area: str) -> bool:
    target = area.lower().strip()
    return (
        _contains_either_way(venue.location.lower().strip(), target)
        or _contains_either_way(venue.name.lower().strip(), target)
        or target in venue.google_location_url.lower()
    )


def _is_disliked(venue: Venue, profile: UserProfile | None) -> bool:
    if profile is None:
        return False
    cuisine = venue.cuisine.lower()
    return any(d.lower() in cuisine for d in profile.dislikes)


def _opening_start(venue: Venue) -> int:
    if is_always_open(f"{venue.opening_hours} {venue.availability}"):
        return 0
    return time_to_minutes(venue.opening_hours.split("-")[0] or "0")


def _score_venue(
    venue: Venue,
    prefs: UserPreferences,
    profile: UserProfile | None,
    weights: RankingWeights,
) -> float:
    """Compute the additive heuristic score for a single venue."""
    score: float = 0

    if _is_disliked(venue, profile):
        score -= weights.dislike_penalty

    if prefs.area:
        if _matches_area(venue, prefs.area):
            score += weights.area_boost
        else:
            score -= weights.area_penalty

    if prefs.meal_type == MealType.lunch:
        try:
            lunch_friendly = _opening_start(venue) <= weights.lunch_cutoff_minutes
        except ValueError:
            lunch_friendly = False
        if lunch_friendly:
            score += weights.lunch_boost
        else:
            score -= weights.lunch_penalty

    vibe = prefs.vibe
    if vibe and vibe.romantic:
        if venue.romantic_score >= weights.romantic_threshold:
            score += weights.romantic_boost
        else:
            score += venue.romantic_score * weights.romantic_factor
    if vibe and vibe.party:
        if venue.party_vibe >= weights.party_threshold:
            score += weights.party_boost
        else:
            score += venue.party_vibe * weights.party_factor
    if vibe and vibe.instagrammable:
        score += venue.instagrammable * weights.instagram_factor

    if prefs.cuisine:
        cuisine = venue.cuisine.lower()
        if any(c.lower() in cuisine for c in prefs.cuisine):
            score += weights.cuisine_boost

    if prefs.budget:
        if venue.price_per_person <= prefs.budget:
            score += weights.budget_boost
        else:
            score -= weights.budget_penalty

    score += venue.google_rating * weights.rating_factor
    return score


def _match_reason(
    venue: Venue, prefs: UserPreferences, weights: RankingWeights
) -> str:
    details: list[str] = []
    if prefs.area and prefs.area.lower() in venue.location.lower():
        details.append(f"Match: {venue.location}")
    vibe = prefs.vibe
    if vibe and vibe.romantic and venue.romantic_score >= weights.romantic_threshold:
        details.append(ROMANTIC_REASON)
    if vibe and vibe.party and venue.party_vibe >= weights.party_threshold:
        details.append(PARTY_REASON)
    return REASON_SEPARATOR.join(details[: weights.max_reasons]) or venue.usp


def rank_venues(
    venues: list[Venue],
    prefs: UserPreferences | None = None,
    profile: UserProfile | None = None,
    weights: RankingWeights = DEFAULT_RANKING_WEIGHTS,
) -> RankingResult:
    """
    Rank *venues* against the user's preferences.

    Steps:
    - A requested venue name short-circuits scoring and returns the matches.
    - Otherwise every venue is scored; ties keep the catalogue order.
    - With an area preference only positively scored venues are kept,
      unless none scored positively.
    - Each result gets a short match reason.

    The input venues are never modified; results are scored copies.
    """
    prefs = prefs or UserPreferences()

    if prefs.venue_name:
        matches = match_requested_venue(venues, prefs.venue_name)
        if matches:
            return RankingResult(
                venues=[
                    ScoredVenue(**v.model_dump(exclude={"score"})) for v in matches
                ],
                match_reasons={v.id: REQUESTED_VENUE_REASON for v in matches},
            )
        logger.debug("No venue matches requested name %r", prefs.venue_name)

    scored = [
        ScoredVenue(
            **v.model_dump(exclude={"score"}),
            score=_score_venue(v, prefs, profile, weights),
        )
        for v in venues
    ]
    # sorted() is stable, so equal scores keep catalogue order.
    results = sorted(scored, key=lambda v: v.score, reverse=True)

    if prefs.area:
        positive = [v for v in results if v.score > 0]
        if positive:
            results = positive

    reasons = {v.id: _match_reason(v, prefs, weights) for v in results}
    return RankingResult(venues=results, match_reasons=reasons)


def suggest_venues(
    venues: list[Venue],
    prefs: UserPreferences | None = None,
    profile: UserProfile | None = None,
    limit: int | None = None,
    weights: RankingWeights = DEFAULT_RANKING_WEIGHTS,
) -> RankingResult:
    """Top-N slice of :func:`rank_venues`, used for chat suggestions."""
    ranked = rank_venues(venues, prefs, profile, weights=weights)
    top = ranked.venues[: limit or weights.suggestion_limit]
    return RankingResult(
        venues=top,
        match_reasons={v.id: ranked.match_reasons[v.id] for v in top},
    )
