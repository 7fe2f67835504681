"""Key filtering for object metadata mappings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, NamedTuple


class FieldMatch(NamedTuple):
    """A key/value pair selected by ``filter_object_fields``."""

    key: str
    value: Any


def filter_object_fields(obj: Mapping[Any, Any], pattern: str | re.Pattern[str]) -> list[FieldMatch]:
    """Return the key/value pairs of a mapping whose key matches a regex.

    The key matches if the pattern is found anywhere in it. Pairs come back
    in the mapping's iteration order, and the mapping is not modified.

    Args:
        obj: Mapping to filter.
        pattern: Regex (string or compiled) to search each key for.

    Returns:
        Matching pairs in insertion order.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return [
        FieldMatch(str(key), value)
        for key, value in obj.items()
        if regex.search(str(key)) is not None
    ]


def filter_custom_metadata(
    metadata: Mapping[str, Any] | None,
    pattern: str | re.Pattern[str],
) -> dict[str, Any]:
    """Select custom metadata entries by key.

    Storage events omit the ``metadata`` field entirely when an object has
    no custom metadata, so ``None`` is accepted.

    Args:
        metadata: Custom metadata of an object, or None.
        pattern: Regex to search each key for.

    Returns:
        Dict of the matching entries, in insertion order.
    """
    if not metadata:
        return {}
    return {match.key: match.value for match in filter_object_fields(metadata, pattern)}
