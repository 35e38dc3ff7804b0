"""Shared fixtures for TUI tests.

No network: snapshots are built in memory, either from the V3 fixture
document or directly from model instances.
"""

import pytest

from vatview.models import Controller, Pilot, ReferenceItem, Snapshot
from vatview.tui.state import AppState


def make_pilots(count: int) -> tuple[Pilot, ...]:
    return tuple(
        Pilot(cid=1000 + i, name=f"Pilot {i}", callsign=f"TST{i:03d}")
        for i in range(count)
    )


def make_controllers(count: int) -> tuple[Controller, ...]:
    return tuple(
        Controller(
            cid=2000 + i,
            name=f"Controller {i}",
            callsign=f"CTR{i:03d}",
            frequency="118.000",
            rating=2,
        )
        for i in range(count)
    )


def make_state(pilots: int = 5, controllers: int = 3) -> AppState:
    snapshot = Snapshot(
        pilots=make_pilots(pilots),
        controllers=make_controllers(controllers),
        ratings=(ReferenceItem(id=2, short="S1"),),
    )
    return AppState(snapshot=snapshot)


@pytest.fixture
def snapshot(v3_data):
    """The V3 fixture document, parsed and sorted like the data provider does."""
    return Snapshot.from_dict(v3_data).sorted_by_callsign()


@pytest.fixture
def state(snapshot):
    return AppState(snapshot=snapshot)


@pytest.fixture
def state_factory():
    """Build an AppState over synthetic lists of the given sizes."""
    return make_state
