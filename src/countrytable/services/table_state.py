"""Immutable table state and the single update function that advances it.

Every user or network event is expressed as an action object and fed to
:func:`reduce`, which returns a fresh :class:`TableState`. The widget never
mutates state fields directly, so a render always sees one consistent
snapshot of query, sort, page and visible rows.

Invariants kept by every transition::

    rows == derive_rows(countries, query, sort)
    visible == rows[: page * page_size]
"""

from dataclasses import dataclass, field, replace
from typing import Union

from countrytable.services.country_list import (
    Country,
    SortKey,
    SortSpec,
    derive_rows,
    window_data,
)
from countrytable.ui.constants import PAGE_SIZE


@dataclass(frozen=True)
class TableState:
    countries: tuple[Country, ...] = ()
    query: str = ""
    sort: SortSpec = field(default_factory=SortSpec)
    page: int = 1
    page_size: int = PAGE_SIZE
    rows: tuple[Country, ...] = ()
    visible: tuple[Country, ...] = ()
    is_loading: bool = False
    fetch_failed: bool = False

    @property
    def total(self) -> int:
        """Number of countries matching the current query."""
        return len(self.rows)

    @property
    def has_more(self) -> bool:
        return len(self.visible) < len(self.rows)


# Actions


@dataclass(frozen=True)
class FetchStarted:
    pass


@dataclass(frozen=True)
class CountriesLoaded:
    countries: tuple[Country, ...]


@dataclass(frozen=True)
class FetchFailed:
    error: str = ""


@dataclass(frozen=True)
class QueryChanged:
    query: str


@dataclass(frozen=True)
class SortToggled:
    key: SortKey


@dataclass(frozen=True)
class LoadMore:
    pass


Action = Union[FetchStarted, CountriesLoaded, FetchFailed, QueryChanged, SortToggled, LoadMore]


def _rederive(state: TableState, **changes) -> TableState:
    """Apply ``changes`` and rebuild rows and the first page from the full list."""
    state = replace(state, **changes)
    rows = tuple(derive_rows(state.countries, state.query, state.sort))
    return replace(state, rows=rows, page=1, visible=tuple(window_data(rows, 1, state.page_size)))


def _load_more(state: TableState) -> TableState:
    next_page = state.page + 1
    appended = window_data(state.rows, next_page, state.page_size)
    return replace(state, page=next_page, visible=state.visible + tuple(appended))


def reduce(state: TableState, action: Action) -> TableState:
    """Return the state that follows ``state`` once ``action`` has happened."""
    if isinstance(action, FetchStarted):
        return replace(state, is_loading=True, fetch_failed=False)
    if isinstance(action, CountriesLoaded):
        return _rederive(state, countries=tuple(action.countries), is_loading=False, fetch_failed=False)
    if isinstance(action, FetchFailed):
        return _rederive(state, countries=(), is_loading=False, fetch_failed=True)
    if isinstance(action, QueryChanged):
        return _rederive(state, query=action.query)
    if isinstance(action, SortToggled):
        return _rederive(state, sort=state.sort.toggled(action.key))
    if isinstance(action, LoadMore):
        return _load_more(state)
    raise TypeError(f"Unknown table action: {action!r}")


def visible_slice_added(previous: TableState, current: TableState) -> tuple[Country, ...] | None:
    """Rows appended by a transition, or ``None`` when the visible window was rebuilt.

    Lets the view append a page instead of redrawing every row.
    """
    if previous.sort != current.sort or previous.rows is not current.rows:
        return None
    shown = len(previous.visible)
    if current.visible[:shown] != previous.visible:
        return None
    return current.visible[shown:]
