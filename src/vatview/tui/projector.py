"""Per-frame view data derived from state.

project() is a pure function of the snapshot and the navigation state.
It is called on every render and its result is never cached, so views
stay pure functions of what it returns.
"""

from dataclasses import dataclass
from typing import Optional, Union

from vatview.models import Controller, Pilot, Snapshot
from vatview.tui.columns import PLACEHOLDER, TABS
from vatview.tui.state import AppState, PILOTS_TAB


# =============================================================================
# Selected row (tagged by the tab it came from)
# =============================================================================

@dataclass(frozen=True)
class PilotRow:
    pilot: Pilot


@dataclass(frozen=True)
class ControllerRow:
    controller: Controller


SelectedRow = Union[PilotRow, ControllerRow]


@dataclass(frozen=True)
class ProjectedView:
    title: str
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    highlighted: Optional[int]
    popup_open: bool
    popup: Optional[SelectedRow]
    tab: int
    tab_labels: tuple[str, ...]


# =============================================================================
# Field derivation
# =============================================================================

def aircraft_label(pilot: Pilot) -> str:
    """FAA aircraft code, else the short code, else the placeholder."""
    plan = pilot.flight_plan
    if plan is None:
        return PLACEHOLDER
    for value in (plan.aircraft_faa, plan.aircraft_short):
        if value:
            return value
    return PLACEHOLDER


def pilot_row(pilot: Pilot) -> tuple[str, ...]:
    return (
        pilot.callsign,
        pilot.name,
        aircraft_label(pilot),
        str(pilot.latitude),
        str(pilot.longitude),
    )


def controller_row(snapshot: Snapshot, controller: Controller) -> tuple[str, ...]:
    return (
        controller.callsign,
        controller.name,
        controller.frequency,
        snapshot.rating_label(controller.rating),
    )


# =============================================================================
# Projection
# =============================================================================

def project(snapshot: Snapshot, state: AppState) -> ProjectedView:
    config = TABS[state.tab]

    if state.tab == PILOTS_TAB:
        items = snapshot.pilots
        rows = tuple(pilot_row(p) for p in items)
    else:
        items = snapshot.controllers
        rows = tuple(controller_row(snapshot, c) for c in items)

    highlighted = None
    if items:
        highlighted = min(max(state.cursors[state.tab], 0), len(items) - 1)

    popup = None
    if state.popup_open and highlighted is not None:
        popup = selected_row(state.tab, items[highlighted])

    return ProjectedView(
        title=config.label,
        headers=config.headers,
        rows=rows,
        highlighted=highlighted,
        popup_open=state.popup_open,
        popup=popup,
        tab=state.tab,
        tab_labels=tuple(t.label for t in TABS),
    )


def selected_row(tab: int, item) -> SelectedRow:
    if tab == PILOTS_TAB:
        return PilotRow(item)
    return ControllerRow(item)
