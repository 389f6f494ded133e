"""Utility helpers for the CineVault service."""

from __future__ import annotations

import json
import math
import re
from typing import Any


JSON_BLOCK_RE = re.compile(r"```(?:json)?\s*([\[{].*?[\]}])\s*```", re.DOTALL)
BARE_JSON_RE = re.compile(r"\{.*\}|\[.*\]", re.DOTALL)
SEASON_MARKER_RE = re.compile(r"\s\(?S\d\)?")
FILM_ID_RE = re.compile(r"[^a-z0-9]")


def clean_title(title: str) -> str:
    """Strip season markers and series suffixes from a display title."""

    cleaned = SEASON_MARKER_RE.sub("", title, count=1)
    return cleaned.replace(" (Series)", "").strip()


def film_id_from_title(title: str, external_id: int | str | None = None) -> str:
    """Derive the stable film identifier from its title.

    Every character outside ``[a-z0-9]`` of the cleaned, lower-cased title is
    replaced with ``-``. Films sharing a cleaned title share an id unless an
    external catalog id is known, in which case it is appended as a suffix.
    """

    film_id = FILM_ID_RE.sub("-", clean_title(title).lower())
    if external_id is not None and str(external_id).strip():
        return f"{film_id}-{str(external_id).strip()}"
    return film_id


def title_hash(text: str) -> int:
    """Return the non-negative 32-bit ``h * 31 + c`` hash of a title.

    The hash runs over UTF-16 code units with signed 32-bit wraparound so
    derived catalog values stay stable across releases.
    """

    encoded = text.encode("utf-16-be")
    value = 0
    for index in range(0, len(encoded), 2):
        unit = (encoded[index] << 8) | encoded[index + 1]
        value = (value * 31 + unit) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return abs(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up."""

    return int(math.floor(value + 0.5))


def extract_json_object(content: str) -> Any:
    """Extract and parse the first JSON object or array from a model response."""

    match = JSON_BLOCK_RE.search(content)
    if match:
        payload = match.group(1)
    else:
        match = BARE_JSON_RE.search(content)
        if not match:
            raise ValueError("No JSON object found in response")
        payload = match.group(0)

    try:
        return json.loads(payload)
    except json.JSONDecodeError as exc:  # pragma: no cover - defensive branch
        raise ValueError("Invalid JSON payload produced by the model") from exc
