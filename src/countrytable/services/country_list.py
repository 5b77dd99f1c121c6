"""Filter, sort and window operations over an in-memory country list."""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Literal, Sequence

from countrytable.ui.constants import PAGE_SIZE

SortKey = Literal["name", "population", "area"]


@dataclass(frozen=True)
class Country:
    """A single country record as fetched from the data source."""

    name: str
    population: int = 0
    area: float | None = None
    gini: float | None = None


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "Direction":
        if self is Direction.ASCENDING:
            return Direction.DESCENDING
        return Direction.ASCENDING


@dataclass(frozen=True)
class SortSpec:
    """Active sort column and its direction."""

    key: SortKey = "name"
    direction: Direction = Direction.ASCENDING

    def toggled(self, key: SortKey) -> "SortSpec":
        """Return the sort that follows a click on the ``key`` column header.

        Clicking the active column flips its direction. Clicking any other
        column makes it active and starts it ascending.
        """
        if key not in SORT_FIELDS:
            raise KeyError(f"Column '{key}' is not sortable")
        if key == self.key:
            return SortSpec(key=key, direction=self.direction.flipped())
        return SortSpec(key=key, direction=Direction.ASCENDING)


def collation_key(text: str) -> tuple[str, str, str]:
    """Locale-style ordering key: accents and case are ignored first, then case, then raw text."""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), text.casefold(), text)


def numeric_key(value: float | None) -> float:
    # Missing measurements order as zero
    return value if value is not None else 0


@dataclass(frozen=True)
class SortField:
    """A sortable column: how to read the value off a country and how to compare it."""

    name: str
    label: str
    kind: Literal["text", "numeric"]
    extract: Callable[[Country], object]

    def key(self, country: Country):
        value = self.extract(country)
        if self.kind == "text":
            return collation_key(value)
        return numeric_key(value)


SORT_FIELDS: dict[str, SortField] = {
    field.name: field
    for field in (
        SortField("name", "Name", "text", lambda country: country.name),
        SortField("population", "Population", "numeric", lambda country: country.population),
        SortField("area", "Area", "numeric", lambda country: country.area),
    )
}


def matches_query(country: Country, query: str) -> bool:
    return query.casefold() in country.name.casefold()


def filter_countries(countries: Iterable[Country], query: str = "") -> list[Country]:
    """Keep countries whose name contains ``query``, ignoring case."""
    if not query:
        return list(countries)
    return [country for country in countries if matches_query(country, query)]


def sort_countries(countries: Iterable[Country], sort_spec: SortSpec) -> list[Country]:
    """Stable sort by the chosen column. Equal keys keep their incoming order in both directions."""
    field = SORT_FIELDS[sort_spec.key]
    return sorted(countries, key=field.key, reverse=sort_spec.direction is Direction.DESCENDING)


def derive_rows(countries: Iterable[Country], query: str, sort_spec: SortSpec) -> list[Country]:
    """Run the whole list through filter then sort."""
    return sort_countries(filter_countries(countries, query), sort_spec)


def window_data(rows: Sequence[Country], page: int = 1, per: int = PAGE_SIZE) -> list[Country]:
    """Return page ``page`` (1-based) of ``rows``. Pages outside the list are empty."""
    if page < 1:
        return []
    return list(rows[(page - 1) * per : page * per])
