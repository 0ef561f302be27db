"""A directory of halal eateries: a Flask JSON API over SQLite and an HTML page renderer."""

__version__ = "0.1.0"