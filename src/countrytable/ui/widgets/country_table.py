import threading
from typing import Callable

from loguru import logger
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import DataTable, Input, LoadingIndicator, Static

from countrytable.services.country_list import SORT_FIELDS, Country
from countrytable.services.country_list_service import CountryListService
from countrytable.services.table_state import (
    Action,
    CountriesLoaded,
    FetchFailed,
    FetchStarted,
    LoadMore,
    QueryChanged,
    SortToggled,
    TableState,
    reduce,
    visible_slice_added,
)
from countrytable.ui.constants import PAGE_SIZE, SCROLL_DEBOUNCE_MS
from countrytable.ui.scroll_trigger import ScrollTrigger
from countrytable.ui.utils import format_area, format_count, format_gini, format_header

# Column keys in display order; only the ones in SORT_FIELDS are sortable
COLUMNS = [
    ("name", "Name"),
    ("population", "Population"),
    ("area", "Area"),
    ("gini", "Gini"),
]


def country_cells(country: Country) -> tuple[str, str, str, str]:
    return (
        country.name,
        format_count(country.population),
        format_area(country.area),
        format_gini(country.gini),
    )


class CountryTable(Static):
    """Searchable, sortable country table that loads more rows as it is scrolled."""

    table_state: TableState = reactive(TableState, init=False)

    class StatusChanged(Message):
        """Message sent after every render with the visible/matching counts."""

        def __init__(self, shown: int, total: int, fetch_failed: bool) -> None:
            super().__init__()
            self.shown = shown
            self.total = total
            self.fetch_failed = fetch_failed

    def __init__(
        self,
        loader: Callable[[], list[Country]] | None = None,
        page_size: int = PAGE_SIZE,
        scroll_debounce_ms: int = SCROLL_DEBOUNCE_MS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._loader = loader or CountryListService.list_countries
        self._scroll_debounce_ms = scroll_debounce_ms
        self._scroll_trigger: ScrollTrigger | None = None
        self._on_load_complete_callback: Callable[[], None] | None = None
        self.set_reactive(CountryTable.table_state, TableState(page_size=page_size))

    def compose(self) -> ComposeResult:
        with Vertical(id="country-table-container"):
            yield Input(placeholder="Enter the text to search country name", id="country-search")
            yield LoadingIndicator(id="country-loading")
            yield DataTable(id="country-data-table", cursor_type="row", zebra_stripes=True)

    def on_mount(self) -> None:
        """Attach the scroll trigger and start the initial fetch."""
        table = self.query_one("#country-data-table", DataTable)
        self._scroll_trigger = ScrollTrigger(self, table, self.load_more, self._scroll_debounce_ms)
        self._scroll_trigger.attach()
        self._show_state(TableState(), self.table_state)
        self.call_later(self.load_countries)

    def on_unmount(self) -> None:
        if self._scroll_trigger is not None:
            self._scroll_trigger.detach()

    # Event handlers
    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every keystroke in the search box."""
        if event.input.id == "country-search":
            self.update_state(QueryChanged(event.value))

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Sort by the clicked column."""
        column_key = event.column_key.value
        if column_key in SORT_FIELDS:
            self.update_state(SortToggled(column_key))

    # Reactive watchers
    def watch_table_state(self, previous: TableState, current: TableState) -> None:
        self._show_state(previous, current)

    # Public methods
    def update_state(self, action: Action) -> None:
        """Advance the table state by one action."""
        self.table_state = reduce(self.table_state, action)

    def load_more(self) -> None:
        """Append the next page of matching countries."""
        if self.table_state.is_loading:
            return
        self.update_state(LoadMore())

    def clear_search(self) -> None:
        self.query_one("#country-search", Input).value = ""

    def load_countries(self, on_complete: Callable[[], None] | None = None) -> None:
        """Fetch the full country list in the background.

        Args:
            on_complete: Optional callback to call when loading is complete
        """
        self._on_load_complete_callback = on_complete
        self.update_state(FetchStarted())

        thread = threading.Thread(target=self._load_countries_async, daemon=True)
        thread.start()

    def focus_table(self) -> None:
        try:
            self.query_one("#country-data-table", DataTable).focus()
        except Exception:
            super().focus()

    # Private methods
    def _load_countries_async(self) -> None:
        """Run the loader off the UI thread and hand the result back to it."""
        try:
            countries = self._loader()
        except Exception as e:
            logger.exception(f"Failed to load countries: {e}")
            self.app.call_from_thread(self._on_countries_error, e)
            return
        self.app.call_from_thread(self._on_countries_loaded, countries)

    def _on_countries_loaded(self, countries: list[Country]) -> None:
        self.update_state(CountriesLoaded(tuple(countries)))
        self._run_load_complete_callback()

    def _on_countries_error(self, error: Exception) -> None:
        # The table is left empty with no banner; the title bar indicator shows the failure
        self.update_state(FetchFailed(str(error)))
        self._run_load_complete_callback()

    def _run_load_complete_callback(self) -> None:
        if self._on_load_complete_callback:
            callback = self._on_load_complete_callback
            self._on_load_complete_callback = None
            callback()

    def _show_state(self, previous: TableState, current: TableState) -> None:
        self._update_loading_state(current.is_loading)

        table = self.query_one("#country-data-table", DataTable)
        appended = visible_slice_added(previous, current)
        if appended is None or not table.columns:
            self._rebuild_table(table, current)
        elif appended:
            table.add_rows(country_cells(country) for country in appended)

        self.post_message(self.StatusChanged(len(current.visible), current.total, current.fetch_failed))

    def _rebuild_table(self, table: DataTable, state: TableState) -> None:
        table.clear(columns=True)
        for key, label in COLUMNS:
            table.add_column(format_header(label, key, state.sort), key=key)
        table.add_rows(country_cells(country) for country in state.visible)
        table.scroll_home(animate=False)

    def _update_loading_state(self, is_loading: bool) -> None:
        """Swap the table for the loading indicator while a fetch is pending."""
        loading_indicator = self.query_one("#country-loading", LoadingIndicator)
        table = self.query_one("#country-data-table", DataTable)
        loading_indicator.display = is_loading
        table.display = not is_loading
