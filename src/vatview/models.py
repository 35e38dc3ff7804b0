"""Snapshot data types for the VATSIM V3 data feed.

A Snapshot is built once by the data provider and never mutated afterwards.
Every type here is a frozen dataclass with tuple collections so that sharing
a reference is as safe as sharing a copy.

Only the fields the viewer displays are kept; unknown keys in the feed are
ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


class SnapshotError(RuntimeError):
    """The snapshot could not be fetched or parsed."""


UNKNOWN_LABEL = "?"


# =============================================================================
# Entities
# =============================================================================


@dataclass(frozen=True)
class FlightPlan:
    flight_rules: str = ""
    aircraft: str = ""
    aircraft_faa: str = ""
    aircraft_short: str = ""
    departure: str = ""
    arrival: str = ""
    alternate: str = ""
    cruise_tas: str = ""
    altitude: str = ""
    deptime: str = ""
    enroute_time: str = ""
    fuel_time: str = ""
    remarks: str = ""
    route: str = ""
    revision_id: int = 0
    assigned_transponder: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "FlightPlan":
        return cls(
            flight_rules=_text(raw.get("flight_rules")),
            aircraft=_text(raw.get("aircraft")),
            aircraft_faa=_text(raw.get("aircraft_faa")),
            aircraft_short=_text(raw.get("aircraft_short")),
            departure=_text(raw.get("departure")),
            arrival=_text(raw.get("arrival")),
            alternate=_text(raw.get("alternate")),
            cruise_tas=_text(raw.get("cruise_tas")),
            altitude=_text(raw.get("altitude")),
            deptime=_text(raw.get("deptime")),
            enroute_time=_text(raw.get("enroute_time")),
            fuel_time=_text(raw.get("fuel_time")),
            remarks=_text(raw.get("remarks")),
            route=_text(raw.get("route")),
            revision_id=int(raw.get("revision_id") or 0),
            assigned_transponder=_text(raw.get("assigned_transponder")),
        )


@dataclass(frozen=True)
class Pilot:
    cid: int
    name: str
    callsign: str
    server: str = ""
    pilot_rating: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    altitude: int = 0
    groundspeed: int = 0
    transponder: str = ""
    heading: int = 0
    qnh_i_hg: float = 0.0
    qnh_mb: int = 0
    flight_plan: Optional[FlightPlan] = None
    logon_time: str = ""
    last_updated: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Pilot":
        plan = raw.get("flight_plan")
        if plan and not isinstance(plan, dict):
            raise TypeError(f"flight_plan must be an object, got {type(plan).__name__}")
        return cls(
            cid=int(raw["cid"]),
            name=_text(raw["name"]),
            callsign=_text(raw["callsign"]),
            server=_text(raw.get("server")),
            pilot_rating=int(raw.get("pilot_rating") or 0),
            latitude=float(raw["latitude"]),
            longitude=float(raw["longitude"]),
            altitude=int(raw.get("altitude") or 0),
            groundspeed=int(raw.get("groundspeed") or 0),
            transponder=_text(raw.get("transponder")),
            heading=int(raw.get("heading") or 0),
            qnh_i_hg=float(raw.get("qnh_i_hg") or 0.0),
            qnh_mb=int(raw.get("qnh_mb") or 0),
            flight_plan=FlightPlan.from_dict(plan) if plan else None,
            logon_time=_text(raw.get("logon_time")),
            last_updated=_text(raw.get("last_updated")),
        )


@dataclass(frozen=True)
class Controller:
    cid: int
    name: str
    callsign: str
    frequency: str = ""
    facility: int = 0
    rating: int = 0
    server: str = ""
    visual_range: int = 0
    text_atis: Optional[tuple[str, ...]] = None
    last_updated: str = ""
    logon_time: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Controller":
        atis = raw.get("text_atis")
        if atis is not None and not isinstance(atis, list):
            raise TypeError(f"text_atis must be a list, got {type(atis).__name__}")
        return cls(
            cid=int(raw["cid"]),
            name=_text(raw["name"]),
            callsign=_text(raw["callsign"]),
            frequency=_text(raw.get("frequency")),
            facility=int(raw.get("facility") or 0),
            rating=int(raw.get("rating") or 0),
            server=_text(raw.get("server")),
            visual_range=int(raw.get("visual_range") or 0),
            text_atis=tuple(_text(line) for line in atis) if atis is not None else None,
            last_updated=_text(raw.get("last_updated")),
            logon_time=_text(raw.get("logon_time")),
        )


# =============================================================================
# Reference data
# =============================================================================


@dataclass(frozen=True)
class ReferenceItem:
    """A code -> label row (e.g. rating 2 -> "S1")."""

    id: int
    short: str
    long: str = ""

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ReferenceItem":
        return cls(
            id=int(raw["id"]),
            short=_text(raw["short"]),
            long=_text(raw.get("long")),
        )


@dataclass(frozen=True)
class GeneralData:
    version: int = 0
    reload: int = 0
    update: str = ""
    update_timestamp: str = ""
    connected_clients: int = 0
    unique_users: int = 0

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "GeneralData":
        return cls(
            version=int(raw.get("version") or 0),
            reload=int(raw.get("reload") or 0),
            update=_text(raw.get("update")),
            update_timestamp=_text(raw.get("update_timestamp")),
            connected_clients=int(raw.get("connected_clients") or 0),
            unique_users=int(raw.get("unique_users") or 0),
        )


# =============================================================================
# Snapshot
# =============================================================================


@dataclass(frozen=True)
class Snapshot:
    """Everything the viewer browses for one session."""

    general: GeneralData = field(default_factory=GeneralData)
    pilots: tuple[Pilot, ...] = ()
    controllers: tuple[Controller, ...] = ()
    ratings: tuple[ReferenceItem, ...] = ()
    facilities: tuple[ReferenceItem, ...] = ()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Snapshot":
        """Build a snapshot from a decoded V3 document.

        Raises SnapshotError if required keys are missing or malformed.
        """
        if not isinstance(raw, dict):
            raise SnapshotError("V3 data is not a JSON object")
        try:
            return cls(
                general=GeneralData.from_dict(raw.get("general") or {}),
                pilots=tuple(Pilot.from_dict(p) for p in raw["pilots"]),
                controllers=tuple(
                    Controller.from_dict(c) for c in raw["controllers"]
                ),
                ratings=tuple(ReferenceItem.from_dict(r) for r in raw.get("ratings", [])),
                facilities=tuple(
                    ReferenceItem.from_dict(f) for f in raw.get("facilities", [])
                ),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SnapshotError(f"Malformed V3 data: {e!r}") from e

    def sorted_by_callsign(self) -> "Snapshot":
        """Return a copy with both entity lists ordered by callsign."""
        return Snapshot(
            general=self.general,
            pilots=tuple(sorted(self.pilots, key=lambda p: p.callsign)),
            controllers=tuple(sorted(self.controllers, key=lambda c: c.callsign)),
            ratings=self.ratings,
            facilities=self.facilities,
        )

    def rating_label(self, code: int) -> str:
        """Controller rating code -> short name like "S1", "C3", "L1"."""
        return _lookup(self.ratings, code)

    def facility_label(self, code: int) -> str:
        return _lookup(self.facilities, code)


def _lookup(items: tuple[ReferenceItem, ...], code: int) -> str:
    for item in items:
        if item.id == code:
            return item.short
    return UNKNOWN_LABEL


def _text(value: Any) -> str:
    return "" if value is None else str(value)
