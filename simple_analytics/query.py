"""
Query-string handling for the Core Reporting API.

Every report request needs a profile (``ids``), a date range and at least
one metric. Query strings are rendered deterministically so the same
properties always produce the same URL.
"""
from typing import Any, Mapping
from urllib.parse import quote

from .errors import InvalidPropertiesError

# Required query parameters are used to configure which data to return.
REQUIRED_PROPERTIES = ("ids", "start-date", "end-date", "metrics")


def check_properties(properties: Mapping[Any, Any]) -> None:
    """Raise InvalidPropertiesError unless every required property is present."""
    keys = {str(k) for k in properties.keys()}
    if not all(p in keys for p in REQUIRED_PROPERTIES):
        raise InvalidPropertiesError(
            f"Properties: {', '.join(REQUIRED_PROPERTIES)} are required."
        )


def escape(value: Any) -> str:
    # Only unreserved characters (letters, digits, "-_.~") survive unescaped
    return quote(str(value), safe="")


def query_string(properties: Mapping[Any, Any]) -> str:
    """
    Render properties as a query string sorted by ``key=value``.

    Args:
        properties: Mapping of query parameter names to values

    Returns:
        str: e.g. ``end-date=2020-01-31&ids=ga%3A123&...``
    """
    pairs = [f"{k}={escape(v)}" for k, v in properties.items()]
    return "&".join(sorted(pairs))
