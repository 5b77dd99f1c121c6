from typing import Callable

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer

from countrytable.services.country_list import Country
from countrytable.ui.constants import PAGE_SIZE, SCROLL_DEBOUNCE_MS
from countrytable.ui.widgets.country_table import CountryTable
from countrytable.ui.widgets.title_bar import TitleBar


class MainScreen(Screen):
    """Main screen displaying the country table."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("ctrl+n", "load_more", "More"),
        Binding("escape", "clear_search", "Clear search"),
        Binding("h", "help", "Help", show=False),
    ]

    def __init__(
        self,
        loader: Callable[[], list[Country]] | None = None,
        page_size: int = PAGE_SIZE,
        scroll_debounce_ms: int = SCROLL_DEBOUNCE_MS,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._loader = loader
        self._page_size = page_size
        self._scroll_debounce_ms = scroll_debounce_ms

    def compose(self) -> ComposeResult:
        """Create the layout for the main screen."""
        with Container(id="main-container"):
            yield TitleBar(id="title-bar")
            yield CountryTable(
                loader=self._loader,
                page_size=self._page_size,
                scroll_debounce_ms=self._scroll_debounce_ms,
                id="country-table",
            )
            yield Footer(id="main-footer", show_command_palette=False)

    def on_mount(self) -> None:
        """Start with the cursor in the search box."""
        self.query_one("#country-search").focus()

    def on_country_table_status_changed(self, message: CountryTable.StatusChanged) -> None:
        """Mirror the table's counters and fetch status in the title bar"""
        title_bar = self.query_one("#title-bar", TitleBar)
        title_bar.connection_error = message.fetch_failed
        title_bar.set_status(message.shown, message.total)

    def action_refresh(self) -> None:
        """Fetch the country list again, keeping the current search and sort"""
        country_table = self.query_one("#country-table", CountryTable)
        country_table.load_countries(on_complete=lambda: self.call_later(country_table.focus_table))

    def action_load_more(self) -> None:
        self.query_one("#country-table", CountryTable).load_more()

    def action_clear_search(self) -> None:
        self.query_one("#country-table", CountryTable).clear_search()

    def action_help(self) -> None:
        """Show help information"""
        self.notify(
            "Help: type to search, click a column header to sort, scroll to the bottom or press ctrl+n to "
            "load more, 'r' to refresh, 'escape' to clear the search, 'q' to quit.",
            severity="information",
        )
