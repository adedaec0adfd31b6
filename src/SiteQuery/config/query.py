"""Query domain configuration: the facet selections to build from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SiteQuery.catalog import find_country
from SiteQuery.config.common import (
    expect_csv,
    expect_str,
    expect_str_list,
    get_optional_value,
    get_section,
)
from SiteQuery.core.query import JoinOperator
from SiteQuery.core.selection import Selection


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store the configured selection."""

    selection: Selection


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load the `query` section into a `Selection`.

    Every key is optional; a missing section yields an empty selection.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If the keyword join is not AND/OR.
    """
    section = get_section(raw, "query", required=False)

    join_raw = expect_str(get_optional_value(section, "keyword_join", "OR"), "query.keyword_join")
    try:
        keyword_join = JoinOperator.parse(join_raw)
    except ValueError as e:
        raise ValueError(f"query.keyword_join must be AND or OR, got {join_raw!r}") from e

    return QueryConfig(
        selection=Selection(
            site=expect_str(get_optional_value(section, "site", ""), "query.site").strip(),
            types=_terms(get_optional_value(section, "types", []), "query.types"),
            preset_keywords=_parse_presets(get_optional_value(section, "presets", {})),
            extra_keywords=expect_csv(get_optional_value(section, "extra_keywords", ""), "query.extra_keywords"),
            keyword_join=keyword_join,
            countries=tuple(
                dict.fromkeys(
                    code.upper() for code in _terms(get_optional_value(section, "countries", []), "query.countries")
                )
            ),
            cities=_terms(get_optional_value(section, "cities", []), "query.cities"),
            excludes=expect_csv(get_optional_value(section, "excludes", ""), "query.excludes"),
        )
    )


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If a country code is not in the catalog.
    """
    for idx, code in enumerate(config.selection.countries):
        if find_country(code) is None:
            raise ValueError(f"query.countries[{idx}] is not a known country code: {code}")


def _parse_presets(value: Any) -> dict[str, tuple[str, ...]]:
    """Parse `query.presets` (group name -> list of terms).

    Raises:
        TypeError: If the value is not a mapping of string lists.
    """
    if not isinstance(value, Mapping):
        raise TypeError("query.presets must be an object")
    groups: dict[str, tuple[str, ...]] = {}
    for group, terms in value.items():
        if not isinstance(group, str):
            raise TypeError("query.presets group names must be strings")
        groups[group] = _terms(terms if terms is not None else [], f"query.presets.{group}")
    return groups


def _terms(value: Any, config_key: str) -> tuple[str, ...]:
    """Normalize a string or list of strings into stripped, unique terms."""
    if isinstance(value, str):
        items = [value]
    else:
        items = expect_str_list(value, config_key)
    out: list[str] = []
    for item in items:
        term = item.strip()
        if term and term not in out:
            out.append(term)
    return tuple(out)
