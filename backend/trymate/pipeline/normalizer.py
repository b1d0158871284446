"""Locate suggestion text inside a model response of unknown shape.

The generate endpoint has returned the text under ``candidates[0].content``,
``output[0].content``, ``text``, ``result`` and other paths depending on the
API version, so the search does not look at key names at all: it walks the
value depth-first and returns the first string it meets. Mapping values are
visited in insertion order, which for parsed JSON is document order.

This can surface an unrelated string (a model version, for example) if the
response puts metadata ahead of content.

Empty strings are not skipped. A ``""`` leaf ends the walk and is returned
as is; the splitter rejects blank text and the caller serves fallback
suggestions, so a later non-empty string in the same response is never
reached.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

JsonValue: TypeAlias = "str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]"


def extract_text(raw: JsonValue) -> str | None:
    """Return the first string found in a depth-first walk, or None if there is none."""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, list):
        return _first_match(raw)
    if isinstance(raw, dict):
        return _first_match(raw.values())
    return None


def _first_match(values: Iterable[JsonValue]) -> str | None:
    for value in values:
        found = extract_text(value)
        if found is not None:
            return found
    return None
