from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence


class JoinOperator(str, Enum):
    """How the terms of one facet group combine."""

    AND = "AND"
    OR = "OR"

    @classmethod
    def parse(cls, value: str | JoinOperator) -> JoinOperator:
        """Return the operator named by `value` (case-insensitive).

        Raises:
            ValueError: If `value` is neither AND nor OR.
        """
        if isinstance(value, JoinOperator):
            return value
        name = str(value).strip().upper()
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unsupported join operator: {value!r} (expected AND or OR)") from None


def normalize_terms(terms: Iterable[str]) -> tuple[str, ...]:
    """Strip terms, drop empty ones and remove exact duplicates.

    The first occurrence of every term wins, so output is reproducible. A bare
    string counts as a single term.
    """
    if isinstance(terms, str):
        terms = (terms,)
    seen: set[str] = set()
    out: list[str] = []
    for term in terms:
        value = str(term).strip()
        if not value or value in seen:
            continue
        seen.add(value)
        out.append(value)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class QueryRequest:
    """Facet selections for a single query build.

    Terms are normalized on construction: whitespace is stripped, empty terms
    are dropped and duplicates collapse to one occurrence. A site made only of
    whitespace is treated as absent.

    Attributes:
        site: Domain for the `site:` operator, or None.
        types: Job type / profession labels, always OR-joined.
        keywords: Keyword terms, joined with `keyword_join`.
        keyword_join: Operator used inside the keyword group.
        locations: Location names, always OR-joined.
        excludes: Terms to exclude, negated as one OR group.
    """

    site: Optional[str] = None
    types: Sequence[str] = ()
    keywords: Sequence[str] = ()
    keyword_join: JoinOperator = JoinOperator.OR
    locations: Sequence[str] = ()
    excludes: Sequence[str] = ()

    def __post_init__(self) -> None:
        site = (self.site or "").strip()
        object.__setattr__(self, "site", site or None)
        object.__setattr__(self, "types", normalize_terms(self.types))
        object.__setattr__(self, "keywords", normalize_terms(self.keywords))
        object.__setattr__(self, "keyword_join", JoinOperator.parse(self.keyword_join))
        object.__setattr__(self, "locations", normalize_terms(self.locations))
        object.__setattr__(self, "excludes", normalize_terms(self.excludes))

    def is_empty(self) -> bool:
        """Return True when no facet carries a term."""
        return not (self.site or self.types or self.keywords or self.locations or self.excludes)


@dataclass(frozen=True, slots=True)
class QueryResult:
    """A built query together with the request it came from."""

    request: QueryRequest
    query: str
    url: Optional[str]
