"""Static per-tab table configuration.

Built once at import time and never modified.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TabConfig:
    label: str
    headers: tuple[str, ...]


PILOTS = TabConfig(
    label="Pilots",
    headers=("Callsign", "Name", "Aircraft", "Lat", "Long"),
)

CONTROLLERS = TabConfig(
    label="Controllers",
    headers=("Callsign", "Name", "Frequency", "Rating"),
)

# Indexed by tab number
TABS: tuple[TabConfig, TabConfig] = (PILOTS, CONTROLLERS)

PLACEHOLDER = "???"

BROWSE_HINTS = "↑/↓:move  PgUp/PgDn:page  Tab:switch  Enter:details  q:quit"
DETAIL_HINTS = "b:open in browser  Esc:close  q:quit"
