"""
TUI navigation state and actions.

Architecture:
- Actions are frozen dataclasses representing state transitions
- reduce(state, action) applies one transition to the state in place
- AppState.dispatch(action) mutates self by applying reduce
- Computed properties provide convenient access to derived state

The snapshot is held by reference and never mutated; only the tab, the
per-tab cursors and the popup flag change.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

from vatview.models import Snapshot


# =============================================================================
# Data Types
# =============================================================================

TabIndex = Literal[0, 1]
ModeName = Literal["browsing", "detail"]

PILOTS_TAB: TabIndex = 0
CONTROLLERS_TAB: TabIndex = 1

PAGE_SIZE = 10


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class SwitchTab:
    """Toggle between pilots and controllers."""
    pass


@dataclass(frozen=True)
class MoveDown:
    """Move the cursor down one row, wrapping to the top."""
    pass


@dataclass(frozen=True)
class MoveUp:
    """Move the cursor up one row, wrapping to the bottom."""
    pass


@dataclass(frozen=True)
class PageDown:
    """Jump down a page, stopping at the last row."""
    pass


@dataclass(frozen=True)
class PageUp:
    """Jump up a page, stopping at the first row."""
    pass


@dataclass(frozen=True)
class OpenPopup:
    """Open the detail popup for the highlighted row."""
    pass


@dataclass(frozen=True)
class ClosePopup:
    """Close the detail popup."""
    pass


Action = Union[
    SwitchTab,
    MoveDown,
    MoveUp,
    PageDown,
    PageUp,
    OpenPopup,
    ClosePopup,
]


# =============================================================================
# Reducer
# =============================================================================

def reduce(state: "AppState", action: Action) -> None:
    """
    Apply an action to mutate state.

    Every transition is total: boundary cases (empty list, first/last row)
    are handled by wrapping or clamping, never by raising.
    """
    length = state.active_length
    cursor = state.cursor

    match action:
        case SwitchTab():
            state.tab = CONTROLLERS_TAB if state.tab == PILOTS_TAB else PILOTS_TAB
            # Both cursors go back to the top, not only the entered tab's.
            state.cursors[PILOTS_TAB] = 0
            state.cursors[CONTROLLERS_TAB] = 0

        case MoveDown():
            if length == 0:
                return
            state.cursor = 0 if cursor >= length - 1 else cursor + 1

        case MoveUp():
            if length == 0:
                return
            state.cursor = length - 1 if cursor == 0 else cursor - 1

        case PageDown():
            if length == 0:
                return
            state.cursor = length - 1 if cursor + PAGE_SIZE >= length else cursor + PAGE_SIZE

        case PageUp():
            if length == 0:
                return
            state.cursor = 0 if cursor <= PAGE_SIZE else cursor - PAGE_SIZE

        case OpenPopup():
            state.popup_open = True

        case ClosePopup():
            state.popup_open = False


# =============================================================================
# App State
# =============================================================================

@dataclass
class AppState:
    """
    Navigation state over one snapshot.

    This is a mutable dataclass. State changes happen via dispatch(action),
    which calls the reduce function to apply transitions.
    """

    snapshot: Snapshot = field(default_factory=Snapshot)

    # Active tab: 0 = pilots, 1 = controllers
    tab: TabIndex = PILOTS_TAB

    # One scroll position per tab
    cursors: list[int] = field(default_factory=lambda: [0, 0])

    popup_open: bool = False

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> None:
        """Apply an action to update state."""
        reduce(self, action)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> ModeName:
        return "detail" if self.popup_open else "browsing"

    @property
    def cursor(self) -> int:
        """Cursor of the active tab."""
        return self.cursors[self.tab]

    @cursor.setter
    def cursor(self, value: int) -> None:
        self.cursors[self.tab] = value

    @property
    def active_items(self) -> tuple:
        """Entities listed on the active tab, in snapshot order."""
        if self.tab == PILOTS_TAB:
            return self.snapshot.pilots
        return self.snapshot.controllers

    @property
    def active_length(self) -> int:
        return len(self.active_items)
