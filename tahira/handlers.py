"""Operations behind the places and localities endpoints."""

from __future__ import annotations

import sqlite3
from http import HTTPStatus
from typing import Any

from .models import Locality, NewLocality, NewPlace, Place

_ROW_NOT_FOUND = "no rows returned by a query that expected to return at least one row"


class ApiError(Exception):
    """A request that failed, with the HTTP status and plain-text message to return."""

    def __init__(self, status: HTTPStatus | int, message: str) -> None:
        super().__init__(message)
        self.status = HTTPStatus(status)
        self.message = message


def _decode(cls: Any, data: Any) -> Any:
    try:
        return cls.from_dict(data)
    except ValueError as err:
        raise ApiError(
            HTTPStatus.UNPROCESSABLE_ENTITY,
            f"Failed to deserialize the JSON body into the target type: {err}",
        ) from err


def _write(conn: sqlite3.Connection, sql: str, params: tuple, prefix: str) -> None:
    try:
        with conn:
            conn.execute(sql, params)
    except sqlite3.Error as err:
        raise ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, f"{prefix}{err}") from err


def _rows(cursor: sqlite3.Cursor, rows: list) -> list[dict[str, Any]]:
    names = [column[0] for column in cursor.description]
    return [dict(zip(names, row)) for row in rows]


def _fetch_all(conn: sqlite3.Connection, sql: str, cls: Any) -> list[dict[str, Any]]:
    try:
        cursor = conn.execute(sql)
        return [cls.from_dict(row).to_dict() for row in _rows(cursor, cursor.fetchall())]
    except (sqlite3.Error, ValueError) as err:
        raise ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, f"Error is {err}") from err


def _fetch_one(
    conn: sqlite3.Connection, sql: str, params: tuple, cls: Any
) -> dict[str, Any]:
    try:
        cursor = conn.execute(sql, params)
        row = cursor.fetchone()
        if row is None:
            raise ApiError(HTTPStatus.NOT_FOUND, f"Error is {_ROW_NOT_FOUND}")
        return cls.from_dict(_rows(cursor, [row])[0]).to_dict()
    except (sqlite3.Error, ValueError) as err:
        raise ApiError(HTTPStatus.INTERNAL_SERVER_ERROR, f"Error is {err}") from err


def _place_params(place: NewPlace | Place) -> tuple:
    return (
        place.name,
        place.image_url,
        place.halal_label.value,
        place.locality_id,
        place.address,
        place.recommended,
        place.place_description,
        place.label_description,
        place.map_url,
        place.mobile_number,
        place.place_type.value,
    )


def _locality_params(locality: NewLocality | Locality) -> tuple:
    return (
        locality.name,
        locality.country_code,
        locality.city.value,
        locality.latitude,
        locality.longitude,
        locality.locality_verifier,
    )


def add_place(conn: sqlite3.Connection, data: Any) -> dict[str, Any]:
    """Store a new place and echo it back."""
    place = _decode(NewPlace, data)
    _write(
        conn,
        "INSERT INTO places (name, image_url, halal_label, locality_id, address, "
        "recommended, place_description, label_description, map_url, mobile_number, "
        "place_type) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
        _place_params(place),
        "Error is: ",
    )
    return place.to_dict()


def add_locality(conn: sqlite3.Connection, data: Any) -> dict[str, Any]:
    """Store a new locality and echo it back."""
    locality = _decode(NewLocality, data)
    _write(
        conn,
        "INSERT INTO localities (name, country_code, city, latitude, longitude, "
        "locality_verifier) VALUES (?, ?, ?, ?, ?, ?)",
        _locality_params(locality),
        "Error is: ",
    )
    return locality.to_dict()


def get_places(conn: sqlite3.Connection) -> list[dict[str, Any]]:
    """Every stored place."""
    return _fetch_all(conn, "SELECT * FROM places", Place)


def get_localities(conn: sqlite3.Connection) -> list[dict[str, Any]]:
    """Every stored locality."""
    return _fetch_all(conn, "SELECT * FROM localities", Locality)


def get_place_by_id(conn: sqlite3.Connection, place_id: int) -> dict[str, Any]:
    """The place with the given id; 404 if there is none."""
    return _fetch_one(
        conn,
        "SELECT id, name, image_url, halal_label, locality_id, address, recommended, "
        "place_description, label_description, map_url, mobile_number, place_type "
        "FROM places WHERE id = ?",
        (place_id,),
        Place,
    )


def get_locality_by_id(conn: sqlite3.Connection, locality_id: int) -> dict[str, Any]:
    """The locality with the given id; 404 if there is none."""
    return _fetch_one(
        conn,
        "SELECT id, name, country_code, city, latitude, longitude, locality_verifier "
        "FROM localities WHERE id = ?",
        (locality_id,),
        Locality,
    )


def delete_place_by_id(conn: sqlite3.Connection, place_id: int) -> dict[str, str]:
    """Remove the place with the given id."""
    _write(conn, "DELETE FROM places WHERE id = ?", (place_id,), "Error is ")
    return {"msg": "Place deleted successfully"}


def delete_locality_by_id(conn: sqlite3.Connection, locality_id: int) -> dict[str, str]:
    """Remove the locality with the given id."""
    _write(conn, "DELETE FROM localities WHERE id = ?", (locality_id,), "Error is ")
    return {"msg": "Locality deleted successfully"}


def update_place_by_id(
    conn: sqlite3.Connection, place_id: int, data: Any
) -> dict[str, str]:
    """Overwrite the place with the given id; the id in the body is ignored."""
    place = _decode(Place, data)
    _write(
        conn,
        "UPDATE places SET name = ?, image_url = ?, halal_label = ?, locality_id = ?, "
        "address = ?, recommended = ?, place_description = ?, label_description = ?, "
        "map_url = ?, mobile_number = ?, place_type = ? WHERE id = ?",
        (*_place_params(place), place_id),
        "Error is ",
    )
    return {"msg": "Place updated successfully"}


def update_locality_by_id(
    conn: sqlite3.Connection, locality_id: int, data: Any
) -> dict[str, str]:
    """Overwrite the locality with the given id; the id in the body is ignored."""
    locality = _decode(Locality, data)
    _write(
        conn,
        "UPDATE localities SET name = ?, country_code = ?, city = ?, latitude = ?, "
        "longitude = ?, locality_verifier = ? WHERE id = ?",
        (*_locality_params(locality), locality_id),
        "Error is ",
    )
    return {"msg": "Locality updated successfully"}