from urllib.parse import urlparse

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.reactive import reactive
from textual.widgets import Static

from countrytable.gateways.rest_countries import RestCountries
from countrytable.ui.utils import format_status


class TitleBar(Static):
    """Title bar with the data source, a connection dot and the row counter"""

    connection_error: bool = reactive(False)
    status: str = reactive(format_status(0, 0))

    def compose(self) -> ComposeResult:
        with Horizontal(id="title-bar-container"):
            yield Static("Sort/Search Countries", id="title")
            with Horizontal(id="status-container"):
                yield Static("●", id="connected-indicator")
                yield Static(f"source: {urlparse(RestCountries.endpoint_url).netloc}", id="source-info")
                yield Static(self.status, id="country-count")

    def watch_connection_error(self, connection_error: bool) -> None:
        try:
            indicator = self.query_one("#connected-indicator", Static)
            indicator.set_class(connection_error, "error")
        except Exception:
            # Not composed yet
            pass

    def watch_status(self, status: str) -> None:
        try:
            self.query_one("#country-count", Static).update(status)
        except Exception:
            pass

    def set_status(self, shown: int, total: int) -> None:
        self.status = format_status(shown, total)
