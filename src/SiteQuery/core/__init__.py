"""Query model, builder and selection state."""

from __future__ import annotations

from SiteQuery.core.builder import build_query, build_result, join_group, quote, search_url
from SiteQuery.core.query import JoinOperator, QueryRequest, QueryResult

__all__ = [
    "JoinOperator",
    "QueryRequest",
    "QueryResult",
    "build_query",
    "build_result",
    "join_group",
    "quote",
    "search_url",
]
