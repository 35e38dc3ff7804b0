"""Keystroke dispatch.

Maps a Textual key name to a state action or to an outcome the app acts on.
While the detail popup is open, navigation keys are swallowed.

    browsing: q quits, navigation keys move, enter opens the popup
    detail:   escape closes, b opens the entity in a browser, q quits
"""

from typing import Literal

from vatview.tui.state import (
    AppState,
    ClosePopup,
    MoveDown,
    MoveUp,
    OpenPopup,
    PageDown,
    PageUp,
    SwitchTab,
)

Outcome = Literal["quit", "open_external", "handled", "ignored"]

QUIT_KEY = "q"
OPEN_KEY = "enter"
CLOSE_KEY = "escape"
BROWSER_KEY = "b"

NAVIGATION = {
    "down": MoveDown(),
    "up": MoveUp(),
    "tab": SwitchTab(),
    "pagedown": PageDown(),
    "pageup": PageUp(),
}

KEYS = frozenset({QUIT_KEY, OPEN_KEY, CLOSE_KEY, BROWSER_KEY, *NAVIGATION})


def handle_key(state: AppState, key: str) -> Outcome:
    """Apply one keystroke to state and report what the app must do next."""
    if key == QUIT_KEY:
        return "quit"

    if state.mode == "detail":
        if key == CLOSE_KEY:
            state.dispatch(ClosePopup())
            return "handled"
        if key == BROWSER_KEY:
            return "open_external"
        return "ignored"

    if key in NAVIGATION:
        state.dispatch(NAVIGATION[key])
        return "handled"

    if key == OPEN_KEY:
        # Nothing to show for an empty tab
        if state.active_length == 0:
            return "ignored"
        state.dispatch(OpenPopup())
        return "handled"

    return "ignored"
