"""Google `site:` query builder.

Renders a `QueryRequest` into one boolean search string.

Rules
- Every term is wrapped in double quotes; embedded quotes become `\\"`.
- Each facet is one group: a single term stays bare, two or more terms are
  joined by the facet operator and wrapped in one pair of parentheses.
- Operators per facet:
    site      -> site:<domain>
    types     -> OR
    keywords  -> request.keyword_join (AND or OR)
    locations -> OR
    excludes  -> OR, negated as a whole with a leading `-`
- Positive groups are joined with ` AND `; the exclusion group follows after
  a single space (the engine treats adjacent clauses as conjunctive).

Example
    site:github.com AND "frontend" AND ("react" OR "typescript") -("recruiter" OR "hiring")
"""

from __future__ import annotations

from typing import Iterable, Sequence
from urllib.parse import quote as _percent_encode

from SiteQuery.core.query import JoinOperator, QueryRequest, QueryResult


SEARCH_ENDPOINT = "https://www.google.com/search"

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def quote(term: str) -> str:
    return '"' + term.replace('"', '\\"') + '"'


def join_group(terms: Sequence[str], op: JoinOperator | str) -> str:
    """Join already-rendered terms into one group.

    Args:
        terms: Rendered terms (usually quoted).
        op: Operator placed between terms.

    Returns:
        Empty string for no terms, the bare term for one, otherwise the
        parenthesized join.
    """
    if len(terms) <= 1:
        return "".join(terms)
    op_name = JoinOperator.parse(op).value
    return "(" + f" {op_name} ".join(terms) + ")"


def _quoted_group(terms: Iterable[str], op: JoinOperator | str) -> str:
    return join_group([quote(t) for t in terms], op)


def build_query(request: QueryRequest) -> str:
    """Build the boolean search string for `request`.

    Args:
        request: Normalized facet selections.

    Returns:
        The query text, or an empty string when every facet is empty.
    """
    site_part = f"site:{request.site}" if request.site else ""
    type_part = _quoted_group(request.types, JoinOperator.OR)
    kw_part = _quoted_group(request.keywords, request.keyword_join)
    loc_part = _quoted_group(request.locations, JoinOperator.OR)
    exclude_part = ""
    if request.excludes:
        exclude_part = "-" + _quoted_group(request.excludes, JoinOperator.OR)

    positive = " AND ".join(p for p in (site_part, type_part, kw_part, loc_part) if p)
    return " ".join(p for p in (positive, exclude_part) if p)


def search_url(query: str) -> str | None:
    """Return the search engine URL for `query`, or None for an empty query."""
    if not query:
        return None
    return f"{SEARCH_ENDPOINT}?q={_percent_encode(query, safe=_URI_COMPONENT_SAFE)}"


def build_result(request: QueryRequest) -> QueryResult:
    query = build_query(request)
    return QueryResult(request=request, query=query, url=search_url(query))
