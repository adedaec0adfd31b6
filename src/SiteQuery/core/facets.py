"""Derivation of keyword, location and exclusion terms from raw selections."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from SiteQuery.catalog import COUNTRIES, Country
from SiteQuery.core.query import normalize_terms


def split_csv(text: str | None) -> tuple[str, ...]:
    """Split a comma-separated field into trimmed, non-empty terms."""
    if not text:
        return ()
    return tuple(part.strip() for part in text.split(",") if part.strip())


def dedupe(terms: Iterable[str]) -> tuple[str, ...]:
    return normalize_terms(terms)


def merge_keywords(
    preset_groups: Mapping[str, Iterable[str]],
    free_text: str | None = None,
) -> tuple[str, ...]:
    """Union preset-selected keywords with free-text keywords.

    Args:
        preset_groups: Selected terms per preset group name.
        free_text: Comma-separated extra keywords.

    Returns:
        Preset terms first, then free-text terms, each term once.
    """
    from_presets = [term for terms in preset_groups.values() for term in normalize_terms(terms)]
    return dedupe([*from_presets, *split_csv(free_text)])


def merge_locations(
    country_codes: Iterable[str],
    cities: Iterable[str],
    countries: Sequence[Country] = COUNTRIES,
) -> tuple[str, ...]:
    """Union lower-cased country names with explicitly selected cities.

    Country names follow catalog order; unknown codes are ignored. Cities are
    used as given and are not checked against their country.
    """
    selected = {code.upper() for code in normalize_terms(country_codes)}
    names = [c.name.lower() for c in countries if c.code in selected]
    return dedupe([*names, *normalize_terms(cities)])
