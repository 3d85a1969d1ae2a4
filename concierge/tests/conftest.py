from __future__ import annotations

import pytest

VENUE_HEADER = ",".join(f"col{i}" for i in range(31))
MENU_HEADER = "venue,course,item,description,price,dietary"

_VENUE_COLUMNS = {
    "id": 0,
    "name": 1,
    "location_url": 2,
    "image": 3,
    "menu": 4,
    "contact": 5,
    "type": 8,
    "location": 9,
    "commission": 10,
    "family": 11,
    "cuisine": 12,
    "hours": 13,
    "availability": 14,
    "price": 15,
    "promo": 17,
    "signature": 18,
    "high_traffic": 19,
    "loudness": 20,
    "romantic": 21,
    "party": 22,
    "instagram": 23,
    "sunset": 24,
    "indoor_outdoor": 25,
    "business": 26,
    "dress_code": 27,
    "birthday": 28,
    "usp": 29,
    "extra": 30,
}

DRIVE_ID = "1AbCdEfGhIjKlMnOpQrStUvWxYz012"


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def venue_line(**values) -> str:
    fields = [""] * 31
    for key, value in values.items():
        fields[_VENUE_COLUMNS[key]] = str(value)
    return ",".join(_quote(f) for f in fields)


@pytest.fixture
def make_venue_line():
    return venue_line


@pytest.fixture
def venue_csv() -> str:
    rows = [
        venue_line(
            id="v1",
            name="Sky Lounge",
            image=f"https://drive.google.com/file/d/{DRIVE_ID}/view?usp=sharing",
            menu=f"https://drive.google.com/file/d/{DRIVE_ID}/view?usp=sharing",
            type="Restaurant",
            location="Dubai Marina",
            commission="10%",
            cuisine="Mediterranean, Seafood",
            hours="19:00-02:00",
            price="AED 450",
            promo="Yes",
            signature="Sky Lounge,Wagyu Sliders | Truffle Fries",
            romantic=9,
            party=3,
            instagram=8,
            sunset="Yes",
            indoor_outdoor="Both",
            dress_code="Sky Lounge, Smart elegant",
            usp="Sky Lounge, Panoramic marina views",
        ),
        venue_line(
            id="v2",
            name="Bait Al Bahar",
            type="Restaurant",
            location="Jumeirah",
            cuisine="Lebanese",
            hours="12:00-23:00",
            price="AED 250",
            family="Yes",
            romantic=5,
            party=2,
            instagram=4,
            usp="Family seafood grill",
        ),
        venue_line(
            id="v3",
            name="Neon Nights",
            type="Club",
            location="Downtown",
            cuisine="Japanese",
            hours="22:00-04:00",
            price="600",
            signature="Neon Nights,Dragon Roll",
            romantic=2,
            party=9,
            instagram=7,
            indoor_outdoor="Indoor",
        ),
    ]
    return "\n".join([VENUE_HEADER, *rows])


@pytest.fixture
def menu_csv() -> str:
    rows = [
        "sky-lounge,Mains,Wagyu Sliders,Mini burgers,95,Contains Gluten; Beef",
        "SKY LOUNGE,Desserts,Kunafa,Warm cheese pastry,45,Vegetarian",
        'bait al bahar,Mezze,Hummus,"Chickpea, tahini",30,Vegan; Gluten Free;;',
        "unknown place,Mains,Ghost Dish,Never shown,10,",
        "too,short",
    ]
    return "\n".join([MENU_HEADER, *rows])
