"""Main countrytable application."""

from typing import Callable

from textual.app import App
from textual.binding import Binding

from countrytable.gateways.rest_countries import RestCountries
from countrytable.services.country_list import Country
from countrytable.ui.constants import PAGE_SIZE, SCROLL_DEBOUNCE_MS
from countrytable.ui.screens.main_screen import MainScreen


class CountryTableApp(App):
    """Terminal country table application."""

    TITLE = "Countries"
    CSS_PATH = "app.tcss"

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        endpoint_url: str = None,
        timeout: float = None,
        page_size: int = PAGE_SIZE,
        scroll_debounce_ms: int = SCROLL_DEBOUNCE_MS,
        theme: str = "textual-dark",
        loader: Callable[[], list[Country]] = None,
        **kwargs,
    ):
        """Initialize the app.

        Args:
            endpoint_url: URL returning the full country list as a JSON array.
            timeout: Seconds to wait for the country list request.
            page_size: Number of rows appended per page.
            scroll_debounce_ms: Quiet period before a scroll burst is evaluated.
            theme: Name of the Textual theme to start with.
            loader: Replaces the HTTP fetch; returns the country list.
        """
        super().__init__(**kwargs)
        self.page_size = page_size
        self.scroll_debounce_ms = scroll_debounce_ms
        self.initial_theme = theme
        self.loader = loader

        # Set the endpoint and timeout globally for the gateway
        RestCountries.set_endpoint_url(endpoint_url)
        RestCountries.set_timeout(timeout)

    def on_mount(self) -> None:
        """Called when app starts."""
        self.theme = self.initial_theme
        self.push_screen(
            MainScreen(
                loader=self.loader,
                page_size=self.page_size,
                scroll_debounce_ms=self.scroll_debounce_ms,
            )
        )
