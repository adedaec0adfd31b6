"""Immutable selection state and its update operations.

A `Selection` is the state a caller (CLI, UI) keeps while the user picks
facets. Every update function returns a new `Selection` and leaves its input
untouched; collections are stored as tuples in the order terms were first
picked, so derived queries are reproducible.

The cascade rule lives here: deselecting a country also deselects that
country's cities. The query builder itself never re-validates it.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Sequence

from SiteQuery.catalog import COUNTRIES, Country, find_country
from SiteQuery.core.facets import merge_keywords, merge_locations, split_csv
from SiteQuery.core.query import JoinOperator, QueryRequest


@dataclass(frozen=True, slots=True)
class Selection:
    """Snapshot of user facet choices.

    Attributes:
        site: Raw site text.
        types: Selected job types.
        preset_keywords: Selected terms per preset group.
        extra_keywords: Free-text comma-separated keywords.
        keyword_join: Operator for the keyword group.
        countries: Selected country codes.
        cities: Selected city names.
        excludes: Free-text comma-separated exclusions.
    """

    site: str = ""
    types: tuple[str, ...] = ()
    preset_keywords: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    extra_keywords: str = ""
    keyword_join: JoinOperator = JoinOperator.OR
    countries: tuple[str, ...] = ()
    cities: tuple[str, ...] = ()
    excludes: str = ""

    def __post_init__(self) -> None:
        groups = {name: _as_tuple(terms) for name, terms in self.preset_keywords.items()}
        object.__setattr__(self, "preset_keywords", MappingProxyType(groups))
        object.__setattr__(self, "types", _as_tuple(self.types))
        object.__setattr__(self, "countries", _as_tuple(self.countries))
        object.__setattr__(self, "cities", _as_tuple(self.cities))
        object.__setattr__(self, "keyword_join", JoinOperator.parse(self.keyword_join))


def _as_tuple(items: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(items, str):
        return (items,)
    return tuple(items)


def default_selection() -> Selection:
    """Return the initial wizard state."""
    return Selection(
        site="github.com",
        types=("frontend",),
        preset_keywords={"Frontend": ("react", "typescript")},
        keyword_join=JoinOperator.OR,
    )


def _toggled(items: tuple[str, ...], item: str, pressed: bool) -> tuple[str, ...]:
    if pressed:
        return items if item in items else (*items, item)
    return tuple(i for i in items if i != item)


def set_site(sel: Selection, site: str) -> Selection:
    return replace(sel, site=site)


def toggle_type(sel: Selection, name: str, pressed: bool) -> Selection:
    return replace(sel, types=_toggled(sel.types, name, pressed))


def toggle_preset_keyword(sel: Selection, group: str, term: str, pressed: bool) -> Selection:
    """Add or remove `term` within preset `group`; unknown groups are created."""
    groups = dict(sel.preset_keywords)
    groups[group] = _toggled(groups.get(group, ()), term, pressed)
    return replace(sel, preset_keywords=groups)


def set_keyword_join(sel: Selection, op: JoinOperator | str) -> Selection:
    return replace(sel, keyword_join=JoinOperator.parse(op))


def set_extra_keywords(sel: Selection, csv: str) -> Selection:
    return replace(sel, extra_keywords=csv)


def set_excludes(sel: Selection, csv: str) -> Selection:
    return replace(sel, excludes=csv)


def toggle_country(
    sel: Selection,
    code: str,
    pressed: bool,
    countries: Sequence[Country] = COUNTRIES,
) -> Selection:
    """Select or deselect a country.

    Deselecting removes the country's cities from the city selection as well.
    """
    key = code.strip().upper()
    if pressed:
        return replace(sel, countries=_toggled(sel.countries, key, True))

    cities = sel.cities
    country = find_country(key, countries)
    if country is not None:
        dropped = set(country.cities)
        cities = tuple(c for c in cities if c not in dropped)
    return replace(sel, countries=_toggled(sel.countries, key, False), cities=cities)


def toggle_city(sel: Selection, name: str, pressed: bool) -> Selection:
    return replace(sel, cities=_toggled(sel.cities, name, pressed))


def to_request(sel: Selection, countries: Sequence[Country] = COUNTRIES) -> QueryRequest:
    """Derive the builder input from a selection snapshot."""
    return QueryRequest(
        site=sel.site,
        types=sel.types,
        keywords=merge_keywords(sel.preset_keywords, sel.extra_keywords),
        keyword_join=sel.keyword_join,
        locations=merge_locations(sel.countries, sel.cities, countries),
        excludes=split_csv(sel.excludes),
    )
