"""HTTP API for places and localities."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sqlite3
from collections.abc import Callable
from contextlib import closing
from http import HTTPStatus
from os import PathLike
from typing import Any

from dotenv import find_dotenv, load_dotenv
from flask import Flask, Response, current_app, g, jsonify, request

from . import handlers
from .db import connect, setup
from .handlers import ApiError

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _conn() -> sqlite3.Connection:
    if "conn" not in g:
        g.conn = connect(current_app.config["DATABASE"])
    return g.conn


def _json_body() -> Any:
    if not request.is_json:
        raise ApiError(
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE,
            "Expected request with `Content-Type: application/json`",
        )
    try:
        return json.loads(request.get_data(as_text=True))
    except ValueError as err:
        raise ApiError(
            HTTPStatus.BAD_REQUEST, f"Failed to parse the request body as JSON: {err}"
        ) from err


def _path_id(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        value = None
    if value is None or not _I32_MIN <= value <= _I32_MAX or not raw.strip() == raw:
        raise ApiError(HTTPStatus.BAD_REQUEST, f"Invalid URL: Cannot parse `{raw}` to a `i32`")
    return value


def _collection(list_all: Callable, add: Callable) -> Callable:
    def view():
        if request.method == "POST":
            return jsonify(add(_conn(), _json_body()))
        return jsonify(list_all(_conn()))

    return view


def _item(get_one: Callable, delete: Callable, update: Callable) -> Callable:
    def view(item_id: str):
        ident = _path_id(item_id)
        if request.method == "DELETE":
            return jsonify(delete(_conn(), ident))
        if request.method == "PUT":
            return jsonify(update(_conn(), ident, _json_body()))
        return jsonify(get_one(_conn(), ident))

    return view


def create_app(database: str | PathLike[str]) -> Flask:
    """Build the API, creating the schema in the given database if needed."""
    with closing(connect(database)) as conn:
        setup(conn)

    app = Flask(__name__)
    app.config["DATABASE"] = database
    app.json.sort_keys = False

    @app.teardown_appcontext
    def _close_connection(_exc):
        conn = g.pop("conn", None)
        if conn is not None:
            conn.close()

    @app.errorhandler(ApiError)
    def _api_error(err: ApiError):
        return Response(err.message, status=int(err.status), mimetype="text/plain")

    @app.after_request
    def _cors(response: Response) -> Response:
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.get("/tahira/api")
    def root():
        return Response("Assalamu Alaykum", mimetype="text/plain")

    app.add_url_rule(
        "/tahira/api/places",
        "places",
        _collection(handlers.get_places, handlers.add_place),
        methods=["GET", "POST"],
    )
    app.add_url_rule(
        "/tahira/api/localities",
        "localities",
        _collection(handlers.get_localities, handlers.add_locality),
        methods=["GET", "POST"],
    )
    app.add_url_rule(
        "/tahira/api/places/<item_id>",
        "place",
        _item(handlers.get_place_by_id, handlers.delete_place_by_id,
              handlers.update_place_by_id),
        methods=["GET", "DELETE", "PUT"],
    )
    app.add_url_rule(
        "/tahira/api/localities/<item_id>",
        "locality",
        _item(handlers.get_locality_by_id, handlers.delete_locality_by_id,
              handlers.update_locality_by_id),
        methods=["GET", "DELETE", "PUT"],
    )
    return app


def _database_path(url: str) -> str:
    for prefix in ("sqlite:///", "sqlite://"):
        if url.startswith(prefix):
            return url[len(prefix):]
    return url


def main(argv: list[str] | None = None) -> None:
    """Serve the API on the database named by DATABASE_URL."""
    parser = argparse.ArgumentParser(prog="tahira-api", description=main.__doc__)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    load_dotenv(find_dotenv(usecwd=True))
    database_url = os.environ.get("DATABASE_URL")
    if not database_url:
        raise SystemExit("DATABASE_URL not set")

    app = create_app(_database_path(database_url))
    app.run(host=args.host, port=args.port)