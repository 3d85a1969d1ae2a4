from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IndoorOutdoor(str, Enum):
    indoor = "Indoor"
    outdoor = "Outdoor"
    both = "Both"
    unknown = "Unknown"


class MealType(str, Enum):
    lunch = "lunch"
    dinner = "dinner"
    breakfast = "breakfast"
    any = "any"


class Occasion(str, Enum):
    date = "date"
    birthday = "birthday"
    business = "business"
    family = "family"
    party = "party"
    casual = "casual"
    other = "other"


class Loudness(str, Enum):
    quiet = "quiet"
    lively = "lively"
    any = "any"


class SeatingPreference(str, Enum):
    indoor = "Indoor"
    outdoor = "Outdoor"
    any = "Any"


class VenueStatus(str, Enum):
    open_now = "Open Now"
    opening_soon = "Opening soon"
    closed = "Closed"


class Venue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    google_location_url: str = ""
    image_address: str = ""
    menu_link: str = ""
    contact_number: str = ""
    type: str = ""
    location: str = ""
    commission: float = Field(default=0.0, ge=0.0)
    family_friendly: bool = False
    cuisine: str = ""
    opening_hours: str = ""
    days_closed: list[str] = Field(default_factory=list)
    availability: str = ""
    price_per_person: float = Field(default=0.0, ge=0.0, description="AED")
    promo_venue: bool = False
    signature_dish: str = ""
    high_traffic_area: bool = False
    loudness: int = Field(default=0, ge=0)
    romantic_score: int = Field(default=0, ge=0)
    party_vibe: int = Field(default=0, ge=0)
    instagrammable: int = Field(default=0, ge=0)
    sunset_view: bool = False
    indoor_outdoor: IndoorOutdoor = IndoorOutdoor.unknown
    best_time_to_arrive: str = ""
    business_friendly: bool = False
    dress_code: str = ""
    birthday_venue: bool = False
    usp: str = ""
    notes: str = ""
    extra_details: str = ""
    google_rating: float = Field(default=0.0, ge=0.0, le=5.0)


class ScoredVenue(Venue):
    """Copy of a Venue carrying the transient ranking score."""

    score: float | None = None


class MenuItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    venue_slug: str
    course: str = ""
    item: str
    description: str = ""
    price: float = 0.0
    dietary_tags: list[str] = Field(default_factory=list)
    venue_name: str | None = None
    venue_image: str | None = None
    is_signature: bool = False


class TimeBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: str
    end: str
    label: str


# ── Query objects ────────────────────────────────────────────────────────
# Built from untyped chat/tool arguments, so camelCase keys are accepted.


class VibePreferences(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    loudness: Loudness | None = None
    romantic: bool | None = None
    party: bool | None = None
    instagrammable: bool | None = None


class UserPreferences(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    when: str | None = None
    meal_type: MealType | None = None
    party_size: int | None = Field(default=None, ge=1)
    area: str | None = None
    venue_name: str | None = None
    budget: float | None = Field(default=None, ge=0.0)
    occasion: Occasion | None = None
    cuisine: list[str] = Field(default_factory=list)
    venue_types: list[str] = Field(default_factory=list)
    vibe: VibePreferences | None = None
    sunset: bool | None = None
    indoor_outdoor: SeatingPreference | None = None
    dress_code_comfort: str | None = None
    looking_for_promo: bool | None = None
    user_notes: str | None = None


class UserProfile(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    dislikes: list[str] = Field(default_factory=list)
    favorite_cuisines: list[str] = Field(default_factory=list)
    favourite_areas: list[str] = Field(default_factory=list)
    saved_venues: list[str] = Field(default_factory=list)
    binned_venues: list[str] = Field(default_factory=list)
    saved_dishes: list[str] = Field(default_factory=list)
    binned_dishes: list[str] = Field(default_factory=list)


# ── Results ──────────────────────────────────────────────────────────────


class RankingResult(BaseModel):
    venues: list[ScoredVenue]
    match_reasons: dict[str, str] = Field(default_factory=dict)
