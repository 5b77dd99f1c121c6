"""Debounced "scrolled to the bottom" detection for a scrollable widget."""

from typing import Callable

from textual.timer import Timer
from textual.widget import Widget


def is_near_bottom(scroll_height: int, scroll_top: int, client_height: int) -> bool:
    """True once the visible region reaches the end of the scrollable content."""
    return scroll_height - scroll_top - client_height <= 0


class Debouncer:
    """Collapse a burst of calls into one callback after ``delay_ms`` of quiet.

    Timers are created on ``owner`` so they are tied to its lifetime.
    """

    def __init__(self, owner: Widget, delay_ms: int, callback: Callable[[], None]):
        self._owner = owner
        self._delay = delay_ms / 1000
        self._callback = callback
        self._timer: Timer | None = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def __call__(self) -> None:
        self.cancel()
        self._timer = self._owner.set_timer(self._delay, self._fire)

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        self._callback()


class ScrollTrigger:
    """Call ``on_near_bottom`` when ``scrollable`` settles at the bottom after scrolling.

    Create one per mount with :meth:`attach` and release it with :meth:`detach`.
    """

    def __init__(
        self,
        owner: Widget,
        scrollable: Widget,
        on_near_bottom: Callable[[], None],
        delay_ms: int,
    ):
        self._owner = owner
        self._scrollable = scrollable
        self._on_near_bottom = on_near_bottom
        self._debouncer = Debouncer(owner, delay_ms, self.check)
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        if self._attached:
            return
        self._attached = True
        self._owner.watch(self._scrollable, "scroll_y", self._on_scroll, init=False)

    def detach(self) -> None:
        # Textual drops the watcher together with the owner; until then scroll events are ignored
        self._attached = False
        self._debouncer.cancel()

    def _on_scroll(self) -> None:
        if self._attached:
            self._debouncer()

    def at_bottom(self) -> bool:
        scrollable = self._scrollable
        return is_near_bottom(
            scroll_height=scrollable.virtual_size.height,
            scroll_top=round(scrollable.scroll_y),
            client_height=scrollable.scrollable_content_region.height,
        )

    def check(self) -> None:
        """Evaluate the scroll position once and fire if near the bottom."""
        if self._attached and self.at_bottom():
            self._on_near_bottom()
