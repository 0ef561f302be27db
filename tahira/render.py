"""HTML page listing places fetched from the API."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import urllib.error
import urllib.request
from collections.abc import Iterable

from markupsafe import Markup

from .models import Place

DEFAULT_URL = "http://localhost:3000/tahira/api/places"
LOGO_URL = "https://cdn.saladin.pro/tahira-logo-no-text.png"

_log = logging.getLogger(__name__)

_CARD = Markup(
    '<article class="card" style="padding: 1rem; display: flex; '
    'flex-direction: column; height: 100%;">\n'
    '  <div style="text-align: center;">\n'
    '    <img src="{image_url}" alt="{alt}" style="width: 100%; max-height: 200px; '
    'object-fit: cover; border-radius: 0.5rem;" />\n'
    '    <h3 style="margin-top: 0.5rem; min-height: 4rem; overflow: hidden; '
    'text-overflow: ellipsis;">{name}</h3>\n'
    '    <p style="margin: 0; font-style: italic; color: gray; min-height: 1.5rem;">'
    "{place_type}</p>\n"
    "  </div>\n"
    '  <section style="margin-top: 1rem; flex-grow: 1;">\n'
    '    <p style="min-height: 2rem;"><strong>Halal Rating: </strong>{rating}</p>\n'
    '    <p style="min-height: 6rem; overflow: hidden; text-overflow: ellipsis;">'
    "<strong>Address: </strong>{address}</p>\n"
    '    <p style="min-height: 2rem;"><strong>Contact: </strong>{mobile}</p>\n'
    '    <p style="min-height: 6rem; overflow: hidden; text-overflow: ellipsis;">'
    "<strong>Description: </strong>{description}</p>\n"
    '    <p style="min-height: 2.5rem;"><strong>Label Details: </strong>'
    "{label_description}</p>\n"
    "{recommended}"
    "  </section>\n"
    '  <div style="margin-top: auto;">\n'
    '    <a href="{map_url}" target="_blank">View on Map 🗺️</a>\n'
    "  </div>\n"
    "</article>\n"
)

_RECOMMENDED = Markup(
    '    <p class="contrast" style="margin-top: 0.5rem;">Recommended ✅</p>\n'
)

_LIST = Markup(
    '<section class="container">\n'
    "  <h2>Some spots from our Database📍</h2>\n"
    '  <div class="grid">\n{cards}  </div>\n'
    "</section>\n"
)

_APP = Markup(
    '<header class="container" style="text-align: center;">\n'
    "  <h1>Tahira</h1>\n"
    '  <img src="{logo}" alt="Tahira Logo" style="max-width: 250px; '
    'margin-bottom: 1rem;" />\n'
    '  <p class="lead">Discover Halal. Dine with Dignity. 🌙✨</p>\n'
    "  <p>Discover local eateries that respect your values — no haram music 🎧🚫, "
    "no disrespect to dress codes 👳🧕, just wholesome meals 🍽️.</p>\n"
    "</header>\n"
    '<main class="container">\n{place_list}</main>\n'
)


def render_place_card(place: Place) -> Markup:
    """One place as an HTML card, with all text escaped."""
    return _CARD.format(
        image_url=place.image_url,
        alt=f"Image of {place.name}",
        name=place.name,
        place_type=place.place_type.label(),
        rating=place.halal_label.label(),
        address=place.address,
        mobile=place.mobile_number,
        description=place.place_description,
        label_description=place.label_description,
        recommended=_RECOMMENDED if place.recommended else Markup(""),
        map_url=place.map_url,
    )


def render_place_list(places: Iterable[Place]) -> Markup:
    """A grid section holding one card per place."""
    cards = Markup("").join(render_place_card(place) for place in places)
    return _LIST.format(cards=cards)


def render_app(places: Iterable[Place]) -> Markup:
    """The whole page body: header, then the list of places."""
    return _APP.format(logo=LOGO_URL, place_list=render_place_list(places))


def fetch_places(url: str = DEFAULT_URL) -> list[Place]:
    """Load places from the API; raises OSError or ValueError on failure."""
    with urllib.request.urlopen(url) as response:
        payload = json.load(response)
    if not isinstance(payload, list):
        raise ValueError("invalid type: expected a JSON array of places")
    return [Place.from_dict(item) for item in payload]


def main(argv: list[str] | None = None) -> None:
    """Fetch places and print the page; an empty list if fetching fails."""
    parser = argparse.ArgumentParser(prog="tahira-page", description=main.__doc__)
    parser.add_argument("--url", default=DEFAULT_URL)
    args = parser.parse_args(argv)

    try:
        places = fetch_places(args.url)
    except (OSError, ValueError):
        _log.warning("Failed to fetch places")
        print("Failed to fetch places", file=sys.stderr)
        places = []
    print(render_app(places))