# tahira

Discover halal. Dine with dignity.

`tahira` keeps a small directory of eateries, each with a halal rating,
and the localities they are found in. It comes in two parts:

- a JSON API, built on Flask and stored in SQLite, for adding, listing,
  reading, updating and deleting places and localities;
- a renderer that fetches the list of places from that API and prints an
  HTML page of place cards.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install ".[test]"
pytest
```

## Running the API

```
tahira-api
```

Options: `--host` (default `0.0.0.0`) and `--port` (default `3000`).

The database is an SQLite file named by `DATABASE_URL`, read from the
environment or from a `.env` file found from the working directory. It may
be a plain path or a `sqlite:///path` URL. If `DATABASE_URL` is not set the
command exits with `DATABASE_URL not set`. On start-up the enum types and
the `localities` and `places` tables are created if they do not yet exist.

Every response carries `Access-Control-Allow-Origin: *`.

### Routes

| Method | Path                          | Does                                |
|--------|-------------------------------|-------------------------------------|
| GET    | `/tahira/api`                 | the text `Assalamu Alaykum`         |
| GET    | `/tahira/api/places`          | list every place                    |
| POST   | `/tahira/api/places`          | add a place, echo it back           |
| GET    | `/tahira/api/places/<id>`     | one place, 404 if none              |
| PUT    | `/tahira/api/places/<id>`     | update a place                      |
| DELETE | `/tahira/api/places/<id>`     | delete a place                      |
| GET    | `/tahira/api/localities`      | list every locality                 |
| POST   | `/tahira/api/localities`      | add a locality, echo it back        |
| GET    | `/tahira/api/localities/<id>` | one locality, 404 if none           |
| PUT    | `/tahira/api/localities/<id>` | update a locality                   |
| DELETE | `/tahira/api/localities/<id>` | delete a locality                   |

A locality must exist before a place can refer to it. A new locality
looks like this:

```json
{
  "name": "Jamia Nagar",
  "country_code": "IN",
  "city": "Delhi",
  "latitude": 28.56,
  "longitude": 77.28,
  "locality_verifier": "community"
}
```

and a new place like this:

```json
{
  "name": "Example Kitchen",
  "image_url": "https://example.com/kitchen.png",
  "halal_label": "Halal",
  "locality_id": 1,
  "address": "Main Road",
  "recommended": true,
  "place_description": "Family restaurant.",
  "label_description": "Certificate on display.",
  "map_url": "https://example.com/map",
  "mobile_number": "n/a",
  "place_type": "Restaurant"
}
```

A `PUT` body is a whole record including an `id` field; the id in the URL
decides which row is changed. Every field is required.

Allowed values:

- `halal_label`: `Halal`, `Unconfirmed`, `Unknown`, `Haram`
- `city`: `Delhi`, `Noida`
- `place_type`: `Restaurant`, `Hotel`, `Meatshop`, `Street`

Errors come back as plain text:

- 415 when the body is not sent as `application/json`;
- 400 when the body is not valid JSON or the id in the URL is not a
  32-bit integer;
- 422 when the body does not fit the record (a field missing, of the
  wrong type, or an unknown enum value);
- 404 when a single place or locality is asked for and does not exist;
- 500 when the database refuses the operation, for instance a place
  whose `locality_id` names no locality.

Deleting or updating an id that does not exist still answers with the
success message.

## Rendering the page

With the API running:

```
tahira-render
```

fetches the places from `http://localhost:3000/tahira/api/places` (change
it with `--url`) and prints the HTML to standard output: a header, then one
card per place showing its type, halal rating, address, contact,
description, label details, whether it is recommended, and a link to its
map. If fetching fails, `Failed to fetch places` goes to standard error and
the page is printed with no cards.

## Using it from Python

```python
from tahira.app import create_app
from tahira.render import render_app, fetch_places

app = create_app("tahira.db")          # a Flask application
html = render_app(fetch_places("http://localhost:3000/tahira/api/places"))
```

- `tahira.enums`: `Rating`, `City` and `SpotType`; `Rating.label()` and
  `SpotType.label()` give the readable text shown on the cards.
- `tahira.models`: the records `NewPlace`, `Place`, `NewLocality` and
  `Locality`, converted to and from plain dictionaries with `from_dict`
  (raising `ValueError`) and `to_dict`.
- `tahira.db`: `connect(database)`, `setup(conn)` and
  `create_enum_type_if_not_exists(conn, enum_name, variants)`.
- `tahira.handlers`: the functions behind each route, taking an SQLite
  connection and raising `ApiError` (with `status` and `message`) on
  failure.
- `tahira.render`: `render_place_card`, `render_place_list`, `render_app`
  (all returning escaped `Markup`) and `fetch_places`.

## What it does not do

The renderer prints a page body once; it is not served by the API, has no
`<html>` wrapper or stylesheet, and does not refresh itself. Storage is a
local SQLite file only.