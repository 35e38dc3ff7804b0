"""Shared fixtures: a small V3 document shaped like the live feed."""

import json

import pytest


def _pilot(cid, callsign, name, lat, lon, plan=None):
    return {
        "cid": cid,
        "name": name,
        "callsign": callsign,
        "server": "USA-EAST",
        "pilot_rating": 0,
        "latitude": lat,
        "longitude": lon,
        "altitude": 35000,
        "groundspeed": 450,
        "transponder": "2200",
        "heading": 270,
        "qnh_i_hg": 29.92,
        "qnh_mb": 1013,
        "flight_plan": plan,
        "logon_time": "2026-10-17T10:00:00Z",
        "last_updated": "2026-10-17T11:00:00Z",
    }


def _plan(aircraft_faa="B738/L", aircraft_short="B738"):
    return {
        "flight_rules": "I",
        "aircraft": "B738/M-SDE2E3FGHIJ1RWXY/LB1",
        "aircraft_faa": aircraft_faa,
        "aircraft_short": aircraft_short,
        "departure": "KSEA",
        "arrival": "KSFO",
        "alternate": "KOAK",
        "cruise_tas": "450",
        "altitude": "35000",
        "deptime": "1000",
        "enroute_time": "0200",
        "fuel_time": "0400",
        "remarks": "/v/",
        "route": "HAROB6 ERAVE Q1 ETCHY MLBEC BDEGA4",
        "revision_id": 1,
        "assigned_transponder": "4521",
    }


def _controller(cid, callsign, name, frequency, rating, facility=5, atis=None):
    return {
        "cid": cid,
        "name": name,
        "callsign": callsign,
        "frequency": frequency,
        "facility": facility,
        "rating": rating,
        "server": "USA-WEST",
        "visual_range": 150,
        "text_atis": atis,
        "last_updated": "2026-10-17T11:00:00Z",
        "logon_time": "2026-10-17T09:00:00Z",
    }


@pytest.fixture
def v3_data():
    """Unsorted V3 document: 3 pilots, 2 controllers."""
    return {
        "general": {
            "version": 3,
            "reload": 1,
            "update": "20261017110000",
            "update_timestamp": "2026-10-17T11:00:00Z",
            "connected_clients": 5,
            "unique_users": 5,
        },
        "pilots": [
            _pilot(1000003, "UAL123", "Carol Pilot", 47.45, -122.3, _plan()),
            _pilot(1000001, "AAL1", "Alice Pilot", 40.64, -73.78, None),
            _pilot(1000002, "DAL42", "Bob Pilot", 33.64, -84.43, _plan("", "A320")),
        ],
        "controllers": [
            _controller(
                2000002, "SEA_APP", "Dan Controller", "119.200", 5, atis=["Seattle approach"]
            ),
            _controller(2000001, "KSEA_TWR", "Eve Controller", "119.900", 99),
        ],
        "facilities": [
            {"id": 4, "short": "TWR", "long": "Tower"},
            {"id": 5, "short": "APP", "long": "Approach/Departure"},
        ],
        "ratings": [
            {"id": 2, "short": "S1", "long": "Tower Trainee"},
            {"id": 5, "short": "C1", "long": "Enroute Controller"},
        ],
    }


@pytest.fixture
def v3_file(tmp_path, v3_data):
    path = tmp_path / "v3.json"
    path.write_text(json.dumps(v3_data))
    return path
