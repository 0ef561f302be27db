"""Places and localities as they travel between the database, the API and the page."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from .enums import City, Rating, SpotType

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _mapping(data: Any) -> Mapping:
    if not isinstance(data, Mapping):
        raise ValueError("invalid type: expected a JSON object")
    return data


def _require(data: Mapping, name: str) -> Any:
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _string(data: Mapping, name: str) -> str:
    value = _require(data, name)
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{name}`: expected a string")
    return value


def _integer(data: Mapping, name: str) -> int:
    value = _require(data, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type for `{name}`: expected i32")
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"invalid value for `{name}`: {value} is out of range for i32")
    return value


def _number(data: Mapping, name: str) -> float:
    value = _require(data, name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"invalid type for `{name}`: expected f64")
    return float(value)


def _boolean(data: Mapping, name: str) -> bool:
    value = _require(data, name)
    if not isinstance(value, bool):
        raise ValueError(f"invalid type for `{name}`: expected a boolean")
    return value


def _variant(data: Mapping, name: str, enum_cls: type[Enum]) -> Any:
    value = _require(data, name)
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{name}`: expected a string")
    try:
        return enum_cls(value)
    except ValueError:
        expected = ", ".join(f"`{m.value}`" for m in enum_cls)
        raise ValueError(
            f"unknown variant `{value}` for `{name}`, expected one of {expected}"
        ) from None


def _place_fields(data: Any) -> dict[str, Any]:
    data = _mapping(data)
    return {
        "name": _string(data, "name"),
        "image_url": _string(data, "image_url"),
        "halal_label": _variant(data, "halal_label", Rating),
        "locality_id": _integer(data, "locality_id"),
        "address": _string(data, "address"),
        "recommended": _boolean(data, "recommended"),
        "place_description": _string(data, "place_description"),
        "label_description": _string(data, "label_description"),
        "map_url": _string(data, "map_url"),
        "mobile_number": _string(data, "mobile_number"),
        "place_type": _variant(data, "place_type", SpotType),
    }


def _locality_fields(data: Any) -> dict[str, Any]:
    data = _mapping(data)
    return {
        "name": _string(data, "name"),
        "country_code": _string(data, "country_code"),
        "city": _variant(data, "city", City),
        "latitude": _number(data, "latitude"),
        "longitude": _number(data, "longitude"),
        "locality_verifier": _string(data, "locality_verifier"),
    }


def _to_plain(record: Any) -> dict[str, Any]:
    result = {}
    for field in fields(record):
        value = getattr(record, field.name)
        result[field.name] = value.value if isinstance(value, Enum) else value
    return result


@dataclass(frozen=True)
class NewPlace:
    """A place submitted for creation, before it has an id."""

    name: str
    image_url: str
    halal_label: Rating
    locality_id: int
    address: str
    recommended: bool
    place_description: str
    label_description: str
    map_url: str
    mobile_number: str
    place_type: SpotType

    @classmethod
    def from_dict(cls, data: Any) -> NewPlace:
        """Build from a decoded JSON object; raises ValueError if it does not fit."""
        return cls(**_place_fields(data))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping, enums as their PascalCase names."""
        return _to_plain(self)


@dataclass(frozen=True)
class NewLocality:
    """A locality submitted for creation, before it has an id."""

    name: str
    country_code: str
    city: City
    latitude: float
    longitude: float
    locality_verifier: str

    @classmethod
    def from_dict(cls, data: Any) -> NewLocality:
        """Build from a decoded JSON object; raises ValueError if it does not fit."""
        return cls(**_locality_fields(data))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping, enums as their PascalCase names."""
        return _to_plain(self)


@dataclass(frozen=True)
class Place:
    """A stored place."""

    id: int
    name: str
    image_url: str
    halal_label: Rating
    locality_id: int
    address: str
    recommended: bool
    place_description: str
    label_description: str
    map_url: str
    mobile_number: str
    place_type: SpotType

    @classmethod
    def from_dict(cls, data: Any) -> Place:
        """Build from a decoded JSON object or row; raises ValueError if it does not fit."""
        data = _mapping(data)
        return cls(id=_integer(data, "id"), **_place_fields(data))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping, enums as their PascalCase names."""
        return _to_plain(self)


@dataclass(frozen=True)
class Locality:
    """A stored locality."""

    id: int
    name: str
    country_code: str
    city: City
    latitude: float
    longitude: float
    locality_verifier: str

    @classmethod
    def from_dict(cls, data: Any) -> Locality:
        """Build from a decoded JSON object or row; raises ValueError if it does not fit."""
        data = _mapping(data)
        return cls(id=_integer(data, "id"), **_locality_fields(data))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping, enums as their PascalCase names."""
        return _to_plain(self)