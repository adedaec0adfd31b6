"""Tests for facet assembly and selection updates."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SiteQuery.catalog import Country, find_country
from SiteQuery.core.builder import build_query
from SiteQuery.core.facets import merge_keywords, merge_locations, split_csv
from SiteQuery.core.query import JoinOperator
from SiteQuery.core.selection import (
    Selection,
    default_selection,
    set_excludes,
    set_extra_keywords,
    set_keyword_join,
    set_site,
    to_request,
    toggle_city,
    toggle_country,
    toggle_preset_keyword,
    toggle_type,
)

_COUNTRIES = (
    Country("GB", "United Kingdom", ("London", "Manchester")),
    Country("DE", "Germany", ("Berlin", "Munich")),
)


class TestFacets(unittest.TestCase):
    def test_split_csv(self) -> None:
        self.assertEqual(split_csv(" react, ,vue ,, "), ("react", "vue"))
        self.assertEqual(split_csv(""), ())
        self.assertEqual(split_csv(None), ())

    def test_keywords_preset_and_free_text_dedup(self) -> None:
        keywords = merge_keywords({"Frontend": ["react"]}, "react, vue")
        self.assertEqual(keywords, ("react", "vue"))

    def test_keywords_preset_terms_come_first(self) -> None:
        keywords = merge_keywords({"Frontend": ["vue"], "Backend": ["python"]}, "graphql, python")
        self.assertEqual(keywords, ("vue", "python", "graphql"))

    def test_locations_lowercase_countries_keep_city_case(self) -> None:
        locations = merge_locations(["de", "GB"], ["London"], _COUNTRIES)
        self.assertEqual(locations, ("united kingdom", "germany", "London"))

    def test_locations_ignore_unknown_codes(self) -> None:
        self.assertEqual(merge_locations(["XX"], [], _COUNTRIES), ())

    def test_locations_tolerate_orphan_cities(self) -> None:
        self.assertEqual(merge_locations([], ["Munich"], _COUNTRIES), ("Munich",))

    def test_locations_accept_bare_strings(self) -> None:
        self.assertEqual(merge_locations("de", "Berlin", _COUNTRIES), ("germany", "Berlin"))

    def test_find_country(self) -> None:
        country = find_country(" gb ")
        self.assertIsNotNone(country)
        assert country is not None
        self.assertEqual(country.name, "United Kingdom")
        self.assertIsNone(find_country("ZZ"))


class TestSelection(unittest.TestCase):
    def test_default_selection_query(self) -> None:
        query = build_query(to_request(default_selection()))
        self.assertEqual(query, 'site:github.com AND "frontend" AND ("react" OR "typescript")')

    def test_updates_do_not_mutate_input(self) -> None:
        original = default_selection()
        changed = toggle_type(original, "backend", True)
        changed = toggle_preset_keyword(changed, "Frontend", "react", False)
        changed = set_site(changed, "lever.co")
        self.assertEqual(original.types, ("frontend",))
        self.assertEqual(original.preset_keywords["Frontend"], ("react", "typescript"))
        self.assertEqual(original.site, "github.com")
        self.assertEqual(changed.types, ("frontend", "backend"))
        self.assertEqual(changed.preset_keywords["Frontend"], ("typescript",))

    def test_bare_strings_are_single_entries(self) -> None:
        sel = Selection(types="frontend", preset_keywords={"Backend": "python"}, cities="London")
        self.assertEqual(sel.types, ("frontend",))
        self.assertEqual(sel.preset_keywords["Backend"], ("python",))
        self.assertEqual(sel.cities, ("London",))
        self.assertEqual(build_query(to_request(sel)), '"frontend" AND "python" AND "London"')

    def test_toggle_type_no_duplicates(self) -> None:
        sel = toggle_type(Selection(), "sre", True)
        sel = toggle_type(sel, "sre", True)
        self.assertEqual(sel.types, ("sre",))
        self.assertEqual(toggle_type(sel, "sre", False).types, ())

    def test_toggle_preset_keyword_creates_group(self) -> None:
        sel = toggle_preset_keyword(Selection(), "Mobile", "flutter", True)
        self.assertEqual(dict(sel.preset_keywords), {"Mobile": ("flutter",)})

    def test_preset_keywords_are_read_only(self) -> None:
        sel = default_selection()
        with self.assertRaises(TypeError):
            sel.preset_keywords["Backend"] = ("java",)  # type: ignore[index]

    def test_keyword_join(self) -> None:
        sel = set_keyword_join(Selection(), "and")
        self.assertIs(sel.keyword_join, JoinOperator.AND)
        with self.assertRaises(ValueError):
            set_keyword_join(sel, "XOR")

    def test_country_deselect_cascades_to_its_cities(self) -> None:
        sel = toggle_country(Selection(), "GB", True, _COUNTRIES)
        sel = toggle_country(sel, "DE", True, _COUNTRIES)
        sel = toggle_city(sel, "London", True)
        sel = toggle_city(sel, "Berlin", True)
        self.assertEqual(to_request(sel, _COUNTRIES).locations, ("united kingdom", "germany", "London", "Berlin"))

        sel = toggle_country(sel, "gb", False, _COUNTRIES)
        self.assertEqual(sel.countries, ("DE",))
        self.assertEqual(sel.cities, ("Berlin",))
        self.assertEqual(to_request(sel, _COUNTRIES).locations, ("germany", "Berlin"))

    def test_free_text_and_excludes_flow_into_request(self) -> None:
        sel = set_extra_keywords(default_selection(), "react, vue")
        sel = set_excludes(sel, "recruiter, hiring")
        request = to_request(sel)
        self.assertEqual(request.keywords, ("react", "typescript", "vue"))
        self.assertEqual(request.excludes, ("recruiter", "hiring"))
        self.assertEqual(
            build_query(request),
            'site:github.com AND "frontend" AND ("react" OR "typescript" OR "vue") -("recruiter" OR "hiring")',
        )


if __name__ == "__main__":
    unittest.main()
