"""Database connection and schema for places and localities."""

from __future__ import annotations

import re
import sqlite3
from collections.abc import Iterable
from enum import Enum
from os import PathLike

from .enums import City, Rating, SpotType

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")

sqlite3.register_converter("BOOLEAN", lambda raw: bool(int(raw)))
for _enum_cls in (Rating, City, SpotType):
    sqlite3.register_adapter(_enum_cls, lambda member: member.value)


def connect(database: str | PathLike[str]) -> sqlite3.Connection:
    """Open a database with rows addressable by column name and foreign keys enforced."""
    conn = sqlite3.connect(database, detect_types=sqlite3.PARSE_DECLTYPES)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def _values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def _sql_list(values: Iterable[str]) -> str:
    return ", ".join("'" + value.replace("'", "''") + "'" for value in values)


def create_enum_type_if_not_exists(
    conn: sqlite3.Connection, enum_name: str, variants: Iterable[str]
) -> bool:
    """Register an enum type with its variants unless one of that name exists.

    Returns True when the type was created, False when it was already there.
    """
    if not isinstance(enum_name, str) or not _IDENTIFIER.match(enum_name):
        raise ValueError(f"invalid enum type name: {enum_name!r}")
    variants = list(variants)
    for variant in variants:
        if not isinstance(variant, str):
            raise ValueError(f"enum variant must be a string: {variant!r}")

    with conn:
        conn.execute(
            "CREATE TABLE IF NOT EXISTS enum_types (name TEXT PRIMARY KEY)"
        )
        conn.execute(
            """CREATE TABLE IF NOT EXISTS enum_variants (
              type_name TEXT NOT NULL REFERENCES enum_types(name),
              position INTEGER NOT NULL,
              variant TEXT NOT NULL,
              PRIMARY KEY (type_name, position),
              UNIQUE (type_name, variant)
            )"""
        )
        exists = conn.execute(
            "SELECT EXISTS (SELECT 1 FROM enum_types WHERE name = ?)", (enum_name,)
        ).fetchone()[0]
        if exists:
            return False
        conn.execute("INSERT INTO enum_types (name) VALUES (?)", (enum_name,))
        conn.executemany(
            "INSERT INTO enum_variants (type_name, position, variant) VALUES (?, ?, ?)",
            [(enum_name, position, variant) for position, variant in enumerate(variants)],
        )
    return True


def _create_localities_table_if_not_exists(conn: sqlite3.Connection) -> None:
    conn.execute(
        f"""CREATE TABLE IF NOT EXISTS localities (
          id INTEGER PRIMARY KEY AUTOINCREMENT,
          name TEXT NOT NULL,
          country_code TEXT NOT NULL,
          city TEXT NOT NULL CHECK (city IN ({_sql_list(_values(City))})),
          latitude DOUBLE PRECISION NOT NULL,
          longitude DOUBLE PRECISION NOT NULL,
          locality_verifier TEXT NOT NULL
        )"""
    )


def _create_places_table_if_not_exists(conn: sqlite3.Connection) -> None:
    conn.execute(
        f"""CREATE TABLE IF NOT EXISTS places (
          id INTEGER PRIMARY KEY AUTOINCREMENT,
          name TEXT NOT NULL,
          image_url TEXT,
          halal_label TEXT NOT NULL
            CHECK (halal_label IN ({_sql_list(_values(Rating))})),
          locality_id INTEGER NOT NULL REFERENCES localities(id),
          address TEXT,
          recommended BOOLEAN NOT NULL CHECK (recommended IN (0, 1)),
          place_description TEXT,
          label_description TEXT NOT NULL,
          map_url TEXT,
          mobile_number TEXT,
          place_type TEXT NOT NULL
            CHECK (place_type IN ({_sql_list(_values(SpotType))}))
        )"""
    )


def setup(conn: sqlite3.Connection) -> None:
    """Create the enum types and the localities and places tables if missing."""
    create_enum_type_if_not_exists(conn, "rating", _values(Rating))
    create_enum_type_if_not_exists(conn, "city", _values(City))
    create_enum_type_if_not_exists(conn, "spot_type", _values(SpotType))
    with conn:
        _create_localities_table_if_not_exists(conn)
        _create_places_table_if_not_exists(conn)