"""Command implementations for the SiteQuery CLI.

Holds the logic of each command, separated from click parameter handling and
from output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from SiteQuery.catalog import COUNTRIES, Country, find_country
from SiteQuery.core.builder import build_result
from SiteQuery.core.query import JoinOperator, QueryResult
from SiteQuery.core.selection import (
    Selection,
    set_excludes,
    set_extra_keywords,
    set_keyword_join,
    set_site,
    to_request,
    toggle_city,
    toggle_country,
    toggle_type,
)
from SiteQuery.renderers import OutputWriter
from SiteQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class SelectionOverrides:
    """Per-invocation changes layered over the configured selection.

    `site` and `keyword_join` replace the configured value when set; every
    other field adds to what is configured.
    """

    site: str | None = None
    types: Sequence[str] = ()
    keywords: Sequence[str] = ()
    keyword_join: JoinOperator | str | None = None
    countries: Sequence[str] = ()
    cities: Sequence[str] = ()
    excludes: Sequence[str] = ()

    def apply(self, sel: Selection, countries: Sequence[Country] = COUNTRIES) -> Selection:
        """Return `sel` with these overrides applied."""
        if self.site is not None:
            sel = set_site(sel, self.site)
        for name in self.types:
            sel = toggle_type(sel, name, True)
        if self.keywords:
            sel = set_extra_keywords(sel, _append_csv(sel.extra_keywords, self.keywords))
        if self.keyword_join is not None:
            sel = set_keyword_join(sel, self.keyword_join)
        for code in self.countries:
            if find_country(code, countries) is None:
                raise ValueError(f"--country is not a known country code: {code}")
            sel = toggle_country(sel, code, True, countries)
        for city in self.cities:
            sel = toggle_city(sel, city, True)
        if self.excludes:
            sel = set_excludes(sel, _append_csv(sel.excludes, self.excludes))
        return sel


def _append_csv(csv: str, terms: Sequence[str]) -> str:
    parts = [csv] if csv.strip() else []
    parts.extend(terms)
    return ", ".join(parts)


@dataclass(slots=True)
class BuildCommand:
    """Build the query for one selection and hand it to the output writer."""

    selection: Selection
    output_writer: OutputWriter

    def execute(self) -> QueryResult:
        request = to_request(self.selection)
        log.debug("Request: %s", request)
        result = build_result(request)
        if result.query:
            log.debug("Built query (%d chars)", len(result.query))
        self.output_writer.write_result(result)
        return result
