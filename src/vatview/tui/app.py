"""vatview TUI application with Elm-inspired architecture.

- One immutable snapshot, fetched before the app starts
- Keystrokes go through keys.handle_key, which dispatches state actions
- Views are pure functions of the projected view (projector.project)
- The only side effect (opening a browser) lives in actions.py
"""

from __future__ import annotations

import logging
import webbrowser

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.widgets import Footer, Header
from textual.containers import Horizontal

from vatview.config import Settings
from vatview.models import Snapshot
from vatview.tui import actions, keys
from vatview.tui.projector import ProjectedView, project
from vatview.tui.state import AppState
from vatview.tui.views.table import TableView


def _key(key: str, description: str, show: bool = True) -> Binding:
    # Priority: runs before the focused widget or screen sees the key.
    return Binding(key, f"keystroke('{key}')", description, show=show, priority=True)


class VatviewApp(App):
    CSS_PATH = "tui.css"
    TITLE = "VATSIM online"
    BINDINGS = [
        _key("q", "Quit"),
        _key("down", "Down", show=False),
        _key("up", "Up", show=False),
        _key("pagedown", "Page Down", show=False),
        _key("pageup", "Page Up", show=False),
        _key("tab", "Switch Tab"),
        _key("enter", "Details"),
        _key("escape", "Close"),
        _key("b", "Open in Browser"),
    ]

    def __init__(self, snapshot: Snapshot, settings: Settings | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.snapshot = snapshot
        self.settings = settings or Settings()
        self.state = AppState(snapshot=snapshot)
        self.views = {"table": TableView()}

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(id="main")
        yield Footer()

    def on_mount(self) -> None:
        logging.debug(
            "TUI started, %d pilots, %d controllers",
            len(self.snapshot.pilots),
            len(self.snapshot.controllers),
        )
        self._render_view()

    # =====================
    # Input
    # =====================

    def action_keystroke(self, key: str) -> None:
        outcome = keys.handle_key(self.state, key)

        if outcome == "quit":
            self.exit()
        elif outcome == "open_external":
            self._open_external()
        elif outcome == "handled":
            self._render_view()

    def _open_external(self) -> None:
        """Open the highlighted entity in a browser; failures are only logged."""
        row = self.current_view().popup
        if row is None:
            return
        try:
            url = actions.open_in_browser(row, self.settings.browser_url)
        except (webbrowser.Error, OSError, ValueError) as e:
            logging.exception("Could not open browser")
            self.notify(f"Could not open browser: {e}", severity="warning")
            return
        logging.debug("Opened %s", url)
        self.notify(f"Opened {url}")

    # =====================
    # Rendering
    # =====================

    def current_view(self) -> ProjectedView:
        return project(self.snapshot, self.state)

    def _render_view(self) -> None:
        """Schedule a view re-render.

        Textual's `remove_children()` / `mount()` are async. If we call them
        synchronously, removals are deferred and we can briefly have duplicate ids
        in the DOM.
        """
        self.run_worker(
            self._render_view_async(),
            group="render",
            exclusive=True,
            exit_on_error=False,
        )

    async def _render_view_async(self) -> None:
        try:
            container = self.screen.query_one("#main")
        except NoMatches:
            return

        await container.remove_children()

        view = self.views["table"]
        widgets = view.render(self.current_view(), self.snapshot)
        await container.mount_all(widgets)
