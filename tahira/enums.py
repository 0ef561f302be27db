"""Labels shared by the API and the web page: halal ratings, cities and spot types."""

from __future__ import annotations

from enum import Enum


class _PascalCaseEnum(str, Enum):
    """String enum whose wire and database form is the PascalCase value."""

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)


class Rating(_PascalCaseEnum):
    """How certain it is that a place serves halal food."""

    HALAL = "Halal"
    UNCONFIRMED = "Unconfirmed"
    UNKNOWN = "Unknown"
    HARAM = "Haram"

    def label(self) -> str:
        """Human-readable text shown on a place card."""
        return _RATING_LABELS[self]


class City(_PascalCaseEnum):
    """Cities that localities belong to."""

    DELHI = "Delhi"
    NOIDA = "Noida"


class SpotType(_PascalCaseEnum):
    """The kind of place a spot is."""

    RESTAURANT = "Restaurant"
    HOTEL = "Hotel"
    MEATSHOP = "Meatshop"
    STREET = "Street"

    def label(self) -> str:
        """Human-readable text shown on a place card."""
        return _SPOT_TYPE_LABELS[self]


_RATING_LABELS = {
    Rating.HALAL: "Halal Food ✅",
    Rating.UNCONFIRMED: "Unconfirmed 🟡",
    Rating.UNKNOWN: "Unknown ❓",
    Rating.HARAM: "Haram ❌",
}

_SPOT_TYPE_LABELS = {
    SpotType.RESTAURANT: "Restaurant 🍽️",
    SpotType.HOTEL: "Hotel 🏨",
    SpotType.MEATSHOP: "Meat shop 🔪",
    SpotType.STREET: "Street Food 🧆",
}