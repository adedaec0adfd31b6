"""Tests for the site: boolean query builder."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SiteQuery.core.builder import build_query, build_result, join_group, quote, search_url
from SiteQuery.core.query import JoinOperator, QueryRequest


def _request(**kwargs) -> QueryRequest:
    base = {
        "site": "github.com",
        "types": ["frontend"],
        "keywords": ["react", "typescript"],
        "keyword_join": JoinOperator.OR,
    }
    base.update(kwargs)
    return QueryRequest(**base)


class TestQuote(unittest.TestCase):
    def test_wraps_in_double_quotes(self) -> None:
        self.assertEqual(quote("react native"), '"react native"')

    def test_escapes_embedded_quotes(self) -> None:
        self.assertEqual(quote('he said "hi"'), '"he said \\"hi\\""')

    def test_does_not_trim(self) -> None:
        self.assertEqual(quote(" x "), '" x "')


class TestJoinGroup(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(join_group([], JoinOperator.OR), "")

    def test_single_term_unparenthesized(self) -> None:
        self.assertEqual(join_group(["x"], JoinOperator.AND), "x")

    def test_two_terms_and(self) -> None:
        self.assertEqual(join_group(["a", "b"], JoinOperator.AND), "(a AND b)")

    def test_three_terms_or(self) -> None:
        self.assertEqual(join_group(["a", "b", "c"], JoinOperator.OR), "(a OR b OR c)")

    def test_accepts_operator_name(self) -> None:
        self.assertEqual(join_group(["a", "b"], "and"), "(a AND b)")

    def test_unknown_operator_rejected(self) -> None:
        with self.assertRaises(ValueError):
            join_group(["a", "b"], "NOT")


class TestBuildQuery(unittest.TestCase):
    def test_site_type_keywords(self) -> None:
        self.assertEqual(
            build_query(_request()),
            'site:github.com AND "frontend" AND ("react" OR "typescript")',
        )

    def test_exclusions_appended_as_negated_or_group(self) -> None:
        query = build_query(_request(excludes=["recruiter", "hiring"]))
        self.assertEqual(
            query,
            'site:github.com AND "frontend" AND ("react" OR "typescript") -("recruiter" OR "hiring")',
        )

    def test_single_exclusion_stays_bare(self) -> None:
        query = build_query(_request(keywords=[], excludes=["senior"]))
        self.assertEqual(query, 'site:github.com AND "frontend" -"senior"')

    def test_and_keywords_with_location(self) -> None:
        query = build_query(_request(keywords=["python"], keyword_join=JoinOperator.AND, locations=["london"]))
        self.assertEqual(query, 'site:github.com AND "frontend" AND "python" AND "london"')

    def test_and_join_applies_only_to_keywords(self) -> None:
        query = build_query(
            QueryRequest(
                types=["backend", "fullstack"],
                keywords=["python", "django"],
                keyword_join=JoinOperator.AND,
                locations=["berlin", "munich"],
            )
        )
        self.assertEqual(
            query,
            '("backend" OR "fullstack") AND ("python" AND "django") AND ("berlin" OR "munich")',
        )

    def test_all_empty_gives_empty_string(self) -> None:
        self.assertEqual(build_query(QueryRequest()), "")

    def test_whitespace_only_input_gives_empty_string(self) -> None:
        request = QueryRequest(site="   ", types=[" "], keywords=["", "  "], excludes=["\t"])
        self.assertEqual(build_query(request), "")

    def test_only_exclusions(self) -> None:
        self.assertEqual(build_query(QueryRequest(excludes=["a", "b"])), '-("a" OR "b")')

    def test_site_is_trimmed(self) -> None:
        self.assertEqual(build_query(QueryRequest(site="  lever.co ")), "site:lever.co")

    def test_terms_with_quotes_are_escaped(self) -> None:
        query = build_query(QueryRequest(keywords=['"senior" dev']))
        self.assertEqual(query, '"\\"senior\\" dev"')

    def test_duplicate_terms_collapse(self) -> None:
        query = build_query(QueryRequest(keywords=["react", " react", "vue"]))
        self.assertEqual(query, '("react" OR "vue")')

    def test_same_request_same_output(self) -> None:
        request = _request(locations=["london", "paris"], excludes=["intern"])
        self.assertEqual(build_query(request), build_query(request))


class TestSearchUrl(unittest.TestCase):
    def test_empty_query_has_no_url(self) -> None:
        self.assertIsNone(search_url(""))

    def test_encodes_like_uri_component(self) -> None:
        url = search_url('site:a.com AND "x y"')
        self.assertEqual(url, "https://www.google.com/search?q=site%3Aa.com%20AND%20%22x%20y%22")

    def test_keeps_unreserved_marks(self) -> None:
        url = search_url("-(a)")
        self.assertEqual(url, "https://www.google.com/search?q=-(a)")

    def test_encodes_non_ascii_as_utf8(self) -> None:
        self.assertEqual(search_url("zürich"), "https://www.google.com/search?q=z%C3%BCrich")

    def test_build_result_pairs_query_and_url(self) -> None:
        result = build_result(QueryRequest(site="github.com"))
        self.assertEqual(result.query, "site:github.com")
        self.assertEqual(result.url, "https://www.google.com/search?q=site%3Agithub.com")

        empty = build_result(QueryRequest())
        self.assertEqual(empty.query, "")
        self.assertIsNone(empty.url)


class TestQueryRequest(unittest.TestCase):
    def test_normalizes_terms(self) -> None:
        request = QueryRequest(site=" ", types=[" frontend ", "frontend", ""], keyword_join="and")
        self.assertIsNone(request.site)
        self.assertEqual(request.types, ("frontend",))
        self.assertIs(request.keyword_join, JoinOperator.AND)
        self.assertFalse(request.is_empty())

    def test_bare_string_is_one_term(self) -> None:
        request = QueryRequest(types="frontend", locations=" london ")
        self.assertEqual(request.types, ("frontend",))
        self.assertEqual(request.locations, ("london",))
        self.assertEqual(build_query(request), '"frontend" AND "london"')

    def test_dedup_is_case_sensitive(self) -> None:
        request = QueryRequest(keywords=["React", "react"])
        self.assertEqual(request.keywords, ("React", "react"))

    def test_empty(self) -> None:
        self.assertTrue(QueryRequest(site="", locations=[" "]).is_empty())


if __name__ == "__main__":
    unittest.main()
