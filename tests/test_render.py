import json

import pytest

from tahira.enums import Rating, SpotType
from tahira.models import Place
from tahira.render import (
    fetch_places,
    main,
    render_app,
    render_place_card,
    render_place_list,
)


def _place(**changes):
    data = {
        "id": 1,
        "name": "Kebab Corner",
        "image_url": "img.png",
        "halal_label": "Halal",
        "locality_id": 1,
        "address": "Main road",
        "recommended": True,
        "place_description": "Grills",
        "label_description": "Owner confirmed",
        "map_url": "map.html",
        "mobile_number": "none",
        "place_type": "Restaurant",
    }
    data.update(changes)
    return Place.from_dict(data)


def test_card_shows_labels_and_fields():
    html = render_place_card(_place())
    assert "Halal Food ✅" in html
    assert SpotType.RESTAURANT.label() in html
    assert 'alt="Image of Kebab Corner"' in html
    assert 'href="map.html"' in html
    assert "View on Map 🗺️" in html


def test_card_recommended_only_when_set():
    assert "Recommended ✅" in render_place_card(_place(recommended=True))
    assert "Recommended ✅" not in render_place_card(_place(recommended=False))


def test_card_escapes_text():
    html = render_place_card(_place(name="<b>Tikka & Co</b>"))
    assert "<b>" not in html
    assert "&lt;b&gt;Tikka &amp; Co&lt;/b&gt;" in html


@pytest.mark.parametrize("rating", list(Rating))
def test_card_uses_every_rating_label(rating):
    assert rating.label() in render_place_card(_place(halal_label=rating.value))


def test_list_has_one_card_per_place():
    places = [_place(id=n, name=f"Spot {n}") for n in range(1, 4)]
    html = render_place_list(places)
    assert html.count('<article class="card"') == len(places)
    assert "Some spots from our Database📍" in html
    for place in places:
        assert place.name in html


def test_app_contains_header_and_list():
    html = render_app([_place()])
    assert "<h1>Tahira</h1>" in html
    assert "Discover Halal. Dine with Dignity. 🌙✨" in html
    assert html.index("<header") < html.index("<main") < html.index("Kebab Corner")


def test_fetch_places_round_trip(tmp_path):
    places = [_place(id=1), _place(id=2, halal_label="Haram", place_type="Hotel")]
    source = tmp_path / "places.json"
    source.write_text(json.dumps([p.to_dict() for p in places]), encoding="utf-8")
    assert fetch_places(source.as_uri()) == places


def test_fetch_places_rejects_non_list(tmp_path):
    source = tmp_path / "places.json"
    source.write_text(json.dumps({"id": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        fetch_places(source.as_uri())


def test_main_prints_page(tmp_path, capsys):
    source = tmp_path / "places.json"
    source.write_text(json.dumps([_place().to_dict()]), encoding="utf-8")
    main(["--url", source.as_uri()])
    out = capsys.readouterr().out
    assert "Kebab Corner" in out
    assert out.count('<article class="card"') == 1


def test_main_failed_fetch_renders_empty_list(tmp_path, capsys):
    main(["--url", (tmp_path / "missing.json").as_uri()])
    captured = capsys.readouterr()
    assert "Failed to fetch places" in captured.err
    assert '<article class="card"' not in captured.out
    assert "<h1>Tahira</h1>" in captured.out