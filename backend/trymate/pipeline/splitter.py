"""Turn one block of model text into at most three suggestions."""

from __future__ import annotations

import re

from trymate.pipeline.errors import ExtractionError

MAX_SUGGESTIONS = 3

_LINE_BREAK = re.compile(r"\r?\n")
_SENTENCE_BREAK = re.compile(r"(?<=[.?!])\s+")


def _clean(parts: list[str]) -> list[str]:
    return [p.strip() for p in parts if p.strip()]


def split_suggestions(text: str) -> list[str]:
    """Split text into 1-3 suggestions.

    Rules, first match wins:
    1. three or more non-empty lines: the first three lines;
    2. one or more sentences (split after ``.``, ``?`` or ``!``): up to three;
    3. the whole text, trimmed.

    Raises ExtractionError for blank text, which has no suggestion in it.
    """
    if not text.strip():
        raise ExtractionError("Model response text is blank.")

    lines = _clean(_LINE_BREAK.split(text))
    if len(lines) >= MAX_SUGGESTIONS:
        return lines[:MAX_SUGGESTIONS]

    sentences = _clean(_SENTENCE_BREAK.split(text))
    if sentences:
        return sentences[:MAX_SUGGESTIONS]

    return [text.strip()]
