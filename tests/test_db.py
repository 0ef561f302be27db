import sqlite3

import pytest

from tahira.db import connect, create_enum_type_if_not_exists, setup
from tahira.enums import City, Rating, SpotType


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def variants_of(connection, name):
    rows = connection.execute(
        "SELECT variant FROM enum_variants WHERE type_name = ? ORDER BY position",
        (name,),
    ).fetchall()
    return [row[0] for row in rows]


def table_names(connection):
    rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    return {row[0] for row in rows}


def count_rows(connection, table):
    return connection.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]


def insert_locality(connection, city="Delhi"):
    with connection:
        cur = connection.execute(
            "INSERT INTO localities (name, country_code, city, latitude, longitude, "
            "locality_verifier) VALUES (?, ?, ?, ?, ?, ?)",
            ("Old Market", "IN", city, 28.5, 77.25, "volunteer"),
        )
    return cur.lastrowid


def insert_place(connection, locality_id, label="Halal", recommended=True):
    with connection:
        cur = connection.execute(
            "INSERT INTO places (name, image_url, halal_label, locality_id, address, "
            "recommended, place_description, label_description, map_url, "
            "mobile_number, place_type) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                "Corner Kebab",
                "https://images.example.com/kebab.png",
                label,
                locality_id,
                "Lane 4",
                recommended,
                "Grills",
                "Certificate",
                "https://maps.example.com/kebab",
                "unlisted",
                SpotType.STREET,
            ),
        )
    return cur.lastrowid


def test_setup_creates_tables(conn):
    setup(conn)
    assert {"localities", "places"} <= table_names(conn)


def test_setup_registers_enum_types(conn):
    setup(conn)
    assert variants_of(conn, "rating") == ["Halal", "Unconfirmed", "Unknown", "Haram"]
    assert variants_of(conn, "city") == ["Delhi", "Noida"]
    assert variants_of(conn, "spot_type") == ["Restaurant", "Hotel", "Meatshop", "Street"]


def test_setup_is_idempotent(conn):
    setup(conn)
    insert_locality(conn)
    setup(conn)
    assert variants_of(conn, "city") == [c.value for c in City]
    assert conn.execute("SELECT COUNT(*) FROM localities").fetchone()[0] == 1


def test_create_enum_only_once(conn):
    assert create_enum_type_if_not_exists(conn, "mood", ["Calm", "Busy"]) is True
    assert create_enum_type_if_not_exists(conn, "mood", ["Other"]) is False
    assert variants_of(conn, "mood") == ["Calm", "Busy"]


def test_create_empty_enum_is_remembered(conn):
    assert create_enum_type_if_not_exists(conn, "nothing", []) is True
    assert create_enum_type_if_not_exists(conn, "nothing", ["Late"]) is False
    assert variants_of(conn, "nothing") == []


@pytest.mark.parametrize("name", ["", "1abc", "drop table", "a;b", None])
def test_invalid_enum_name_raises(conn, name):
    with pytest.raises(ValueError):
        create_enum_type_if_not_exists(conn, name, ["X"])


def test_duplicate_variant_raises(conn):
    with pytest.raises(sqlite3.IntegrityError):
        create_enum_type_if_not_exists(conn, "dup", ["A", "A"])
    assert create_enum_type_if_not_exists(conn, "dup", ["A"]) is True


def test_round_trip_of_rows(conn):
    setup(conn)
    locality_id = insert_locality(conn, city=City.NOIDA)
    place_id = insert_place(conn, locality_id)
    row = conn.execute("SELECT * FROM places WHERE id = ?", (place_id,)).fetchone()
    assert row["recommended"] is True
    assert row["place_type"] == "Street"
    assert row["locality_id"] == locality_id
    city = conn.execute("SELECT city FROM localities").fetchone()["city"]
    assert city == "Noida"


def test_false_is_read_back_as_false(conn):
    setup(conn)
    place_id = insert_place(conn, insert_locality(conn), recommended=False)
    row = conn.execute("SELECT recommended FROM places WHERE id = ?", (place_id,)).fetchone()
    assert row["recommended"] is False


def test_ids_increase(conn):
    setup(conn)
    first = insert_locality(conn)
    second = insert_locality(conn)
    assert second > first


def test_bad_label_rejected(conn):
    setup(conn)
    locality_id = insert_locality(conn)
    with pytest.raises(sqlite3.IntegrityError):
        insert_place(conn, locality_id, label="Halaal")
    assert count_rows(conn, "places") == 0


def test_enum_member_bound_as_value(conn):
    setup(conn)
    place_id = insert_place(conn, insert_locality(conn), label=Rating.HARAM)
    row = conn.execute("SELECT halal_label FROM places WHERE id = ?", (place_id,)).fetchone()
    assert row["halal_label"] == "Haram"


def test_bad_city_rejected(conn):
    setup(conn)
    with pytest.raises(sqlite3.IntegrityError):
        insert_locality(conn, city="Mumbai")
    assert count_rows(conn, "localities") == 0


def test_unknown_locality_rejected(conn):
    setup(conn)
    with pytest.raises(sqlite3.IntegrityError):
        insert_place(conn, 999)
    assert count_rows(conn, "places") == 0


def test_referenced_locality_cannot_be_deleted(conn):
    setup(conn)
    locality_id = insert_locality(conn)
    insert_place(conn, locality_id)
    with pytest.raises(sqlite3.IntegrityError):
        with conn:
            conn.execute("DELETE FROM localities WHERE id = ?", (locality_id,))


def test_file_database_persists(tmp_path):
    path = tmp_path / "tahira.db"
    first = connect(path)
    setup(first)
    locality_id = insert_locality(first)
    first.close()

    second = connect(path)
    try:
        setup(second)
        row = second.execute(
            "SELECT name FROM localities WHERE id = ?", (locality_id,)
        ).fetchone()
        assert row["name"] == "Old Market"
    finally:
        second.close()