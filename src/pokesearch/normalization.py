"""Search term and display normalization helpers."""

from __future__ import annotations

import re

import ftfy
from unidecode import unidecode


_GENDER_SIGNS = {"♀": "-f", "♂": "-m"}
_APOSTROPHE_PATTERN = re.compile(r"['‘’`]")
_SEPARATOR_PATTERN = re.compile(r"[\s._:]+")
_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9-]")
_MULTI_HYPHEN_PATTERN = re.compile(r"-{2,}")
_DIGITS_PATTERN = re.compile(r"[0-9]+")


def normalize_query(term: str) -> str:
    """Return `term` as a PokeAPI resource slug (or numeric id)."""

    raw = str(term or "").strip()
    if not raw:
        return ""

    if _DIGITS_PATTERN.fullmatch(raw):
        return str(int(raw))

    fixed = ftfy.fix_text(raw)
    for sign, suffix in _GENDER_SIGNS.items():
        fixed = fixed.replace(sign, suffix)
    fixed = _APOSTROPHE_PATTERN.sub("", fixed)

    slug = unidecode(fixed).lower()
    slug = _SEPARATOR_PATTERN.sub("-", slug)
    slug = _NON_SLUG_PATTERN.sub("", slug)
    slug = _MULTI_HYPHEN_PATTERN.sub("-", slug)
    return slug.strip("-")


def capitalize(name: str) -> str:
    if not name:
        return ""
    return name[0].upper() + name[1:]


def format_dex_number(pokemon_id: int) -> str:
    """Return the Pokédex label for `pokemon_id`, e.g. ``#025``."""

    return f"#{int(pokemon_id):03d}"


def id_from_url(url: str) -> int:
    """Return the numeric id at the end of a PokeAPI resource `url`."""

    segments = [segment for segment in str(url or "").split("/") if segment]
    if not segments or not _DIGITS_PATTERN.fullmatch(segments[-1]):
        raise ValueError(f"No resource id found in '{url}'")
    return int(segments[-1])
