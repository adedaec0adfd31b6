"""Static choices offered when assembling a query.

Holds the suggested sites, job type labels, keyword preset groups, and the
country/city table used to derive location terms.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Country:
    """A selectable country.

    Attributes:
        code: ISO-3166 alpha-2 code (upper case).
        name: Display name; its lower-cased form becomes the location term.
        cities: Major cities that can be selected on their own.
    """

    code: str
    name: str
    cities: Sequence[str] = ()


SITE_SUGGESTIONS: tuple[str, ...] = (
    "github.com",
    "linkedin.com",
    "wellfound.com",
    "stackoverflow.com",
    "glassdoor.com",
    "indeed.com",
    "lever.co",
    "greenhouse.io",
    "hired.com",
    "monster.com",
    "ziprecruiter.com",
    "careerbuilder.com",
    "dribbble.com",
    "behance.net",
    "remoteok.com",
    "weworkremotely.com",
    "eurojobs.com",
    "jobsite.co.uk",
    "reed.co.uk",
    "stepstone.de",
    "jobs.ch",
    "irishjobs.ie",
)

TYPE_OPTIONS: tuple[str, ...] = (
    "frontend",
    "backend",
    "fullstack",
    "devops",
    "mobile",
    "data engineer",
    "data scientist",
    "machine learning engineer",
    "ai engineer",
    "mlops engineer",
    "research scientist",
    "analytics engineer",
    "llm engineer",
    "nlp engineer",
    "computer vision",
    "platform engineer",
    "sre",
    "security engineer",
)

PRESETS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Frontend": ("react", "typescript", "angular", "vue", "next.js", "vite"),
        "Backend": ("node", "java", "python", "golang", "django", "spring boot"),
        "Mobile": ("react native", "flutter", "swift", "kotlin", "android", "ios"),
        "DataAI": ("machine learning", "deep learning", "nlp", "pytorch", "tensorflow", "llm"),
    }
)

COUNTRIES: tuple[Country, ...] = (
    Country("US", "United States", ("New York", "San Francisco", "Seattle", "Austin", "Boston", "Chicago")),
    Country("CA", "Canada", ("Toronto", "Vancouver", "Montreal")),
    Country("GB", "United Kingdom", ("London", "Manchester", "Edinburgh", "Cambridge")),
    Country("IE", "Ireland", ("Dublin", "Cork")),
    Country("DE", "Germany", ("Berlin", "Munich", "Hamburg", "Frankfurt")),
    Country("FR", "France", ("Paris", "Lyon")),
    Country("NL", "Netherlands", ("Amsterdam", "Rotterdam", "Eindhoven")),
    Country("CH", "Switzerland", ("Zurich", "Geneva", "Basel")),
    Country("ES", "Spain", ("Madrid", "Barcelona")),
    Country("PT", "Portugal", ("Lisbon", "Porto")),
    Country("SE", "Sweden", ("Stockholm", "Gothenburg")),
    Country("PL", "Poland", ("Warsaw", "Krakow")),
    Country("IN", "India", ("Bangalore", "Hyderabad", "Pune")),
    Country("SG", "Singapore", ("Singapore",)),
    Country("AU", "Australia", ("Sydney", "Melbourne")),
)


def find_country(code: str, countries: Sequence[Country] = COUNTRIES) -> Optional[Country]:
    """Look up a country by code, ignoring case and surrounding whitespace."""
    key = code.strip().upper()
    for country in countries:
        if country.code == key:
            return country
    return None
