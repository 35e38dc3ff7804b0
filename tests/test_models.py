"""Parsing the V3 document into a Snapshot."""

import pytest

from vatview.models import FlightPlan, Snapshot, SnapshotError


def test_parses_entities(v3_data):
    snapshot = Snapshot.from_dict(v3_data)
    assert len(snapshot.pilots) == 3
    assert len(snapshot.controllers) == 2
    assert snapshot.general.connected_clients == 5

    pilot = snapshot.pilots[0]
    assert pilot.callsign == "UAL123"
    assert isinstance(pilot.flight_plan, FlightPlan)
    assert pilot.flight_plan.arrival == "KSFO"
    assert snapshot.pilots[1].flight_plan is None


def test_text_atis_becomes_tuple(v3_data):
    snapshot = Snapshot.from_dict(v3_data)
    assert snapshot.controllers[0].text_atis == ("Seattle approach",)
    assert snapshot.controllers[1].text_atis is None


def test_sorted_by_callsign(v3_data):
    snapshot = Snapshot.from_dict(v3_data).sorted_by_callsign()
    assert [p.callsign for p in snapshot.pilots] == ["AAL1", "DAL42", "UAL123"]
    assert [c.callsign for c in snapshot.controllers] == ["KSEA_TWR", "SEA_APP"]
    assert snapshot.ratings == Snapshot.from_dict(v3_data).ratings


def test_rating_lookup(v3_data):
    snapshot = Snapshot.from_dict(v3_data)
    assert snapshot.rating_label(2) == "S1"
    assert snapshot.rating_label(5) == "C1"
    assert snapshot.rating_label(42) == "?"


def test_facility_lookup(v3_data):
    snapshot = Snapshot.from_dict(v3_data)
    assert snapshot.facility_label(4) == "TWR"
    assert snapshot.facility_label(0) == "?"


def test_missing_lookup_tables_default_empty(v3_data):
    del v3_data["ratings"]
    del v3_data["facilities"]
    snapshot = Snapshot.from_dict(v3_data)
    assert snapshot.rating_label(2) == "?"


def test_unknown_keys_are_ignored(v3_data):
    v3_data["pilots"][0]["military_rating"] = 0
    v3_data["atis"] = []
    Snapshot.from_dict(v3_data)


def test_missing_required_key(v3_data):
    del v3_data["pilots"][0]["callsign"]
    with pytest.raises(SnapshotError):
        Snapshot.from_dict(v3_data)


def test_missing_list(v3_data):
    del v3_data["controllers"]
    with pytest.raises(SnapshotError):
        Snapshot.from_dict(v3_data)


def test_not_an_object():
    with pytest.raises(SnapshotError):
        Snapshot.from_dict([])


def test_snapshot_is_frozen(v3_data):
    snapshot = Snapshot.from_dict(v3_data)
    with pytest.raises(AttributeError):
        snapshot.pilots = ()


def test_flight_plan_not_an_object(v3_data):
    v3_data["pilots"][0]["flight_plan"] = "IFR KSEA-KSFO"
    with pytest.raises(SnapshotError, match="flight_plan must be an object"):
        Snapshot.from_dict(v3_data)


def test_text_atis_not_a_list(v3_data):
    v3_data["controllers"][0]["text_atis"] = "Seattle approach"
    with pytest.raises(SnapshotError, match="text_atis must be a list"):
        Snapshot.from_dict(v3_data)


def test_pilot_entry_not_an_object(v3_data):
    v3_data["pilots"].append("UAL9")
    with pytest.raises(SnapshotError):
        Snapshot.from_dict(v3_data)
