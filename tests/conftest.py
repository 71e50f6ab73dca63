"""Shared fixtures for the test suite."""

import sqlite3
from unittest.mock import MagicMock

import pandas as pd
import pytest

import pyhydat.search


AGENCIES = [
    (1, 'WSC', 'WATER SURVEY OF CANADA', 'RELEVE HYDROLOGIQUE DU CANADA'),
    (2, 'BCMOE', 'BC MINISTRY OF ENVIRONMENT', 'MINISTERE DE L\'ENVIRONNEMENT DE LA C.-B.'),
]

OFFICES = [
    (1, 'VANCOUVER', 'VANCOUVER'),
    (2, 'WHITEHORSE', 'WHITEHORSE'),
]

DATUMS = [
    (0, 'APPARENT', 'APPARENT'),
    (10, 'GEODETIC SURVEY OF CANADA DATUM', 'DATUM DES LEVES GEODESIQUES DU CANADA'),
]

# (number, name, prov, regional office, hyd status, lat, lon)
HYDAT_STATIONS = [
    ('08HF001', 'COWICHAN RIVER NEAR DUNCAN', 'BC', 1, 'D', 48.77, -123.71),
    ('08HA011', 'COWICHAN RIVER AT LAKE COWICHAN', 'BC', 1, 'A', 48.82, -124.05),
    ('09AB001', 'YUKON RIVER AT WHITEHORSE', 'YT', 2, 'A', 60.72, -135.05),
    ('02HC024', 'DON RIVER AT TODMORDEN (HISTORIC)', 'ON', 1, 'D', 43.69, -79.36),
]


def build_hydat(db_path, version_date='2020-01-01 00:00:00'):
    """Write a small HYDAT-shaped SQLite file."""
    conn = sqlite3.connect(db_path)
    conn.executescript("""
        CREATE TABLE AGENCY_LIST (
            AGENCY_ID INTEGER PRIMARY KEY,
            AGENCY_EN TEXT, AGENCY_FR TEXT, AGENCY_DESC TEXT
        );
        CREATE TABLE REGIONAL_OFFICE_LIST (
            REGIONAL_OFFICE_ID INTEGER PRIMARY KEY,
            REGIONAL_OFFICE_NAME_EN TEXT, REGIONAL_OFFICE_NAME_FR TEXT
        );
        CREATE TABLE DATUM_LIST (
            DATUM_ID INTEGER PRIMARY KEY,
            DATUM_EN TEXT, DATUM_FR TEXT
        );
        CREATE TABLE VERSION (Version TEXT, Date TEXT);
        CREATE TABLE STATIONS (
            STATION_NUMBER TEXT PRIMARY KEY,
            STATION_NAME TEXT,
            PROV_TERR_STATE_LOC TEXT,
            REGIONAL_OFFICE_ID INTEGER,
            HYD_STATUS TEXT,
            LATITUDE REAL,
            LONGITUDE REAL
        );
    """)
    conn.executemany("INSERT INTO AGENCY_LIST VALUES (?, ?, ?, ?)", AGENCIES)
    conn.executemany("INSERT INTO REGIONAL_OFFICE_LIST VALUES (?, ?, ?)", OFFICES)
    conn.executemany("INSERT INTO DATUM_LIST VALUES (?, ?, ?)", DATUMS)
    conn.execute("INSERT INTO VERSION VALUES (?, ?)", ('1.0', version_date))
    conn.executemany("INSERT INTO STATIONS VALUES (?, ?, ?, ?, ?, ?, ?)", HYDAT_STATIONS)
    conn.commit()
    conn.close()
    return str(db_path)


@pytest.fixture
def hydat_db(tmp_path):
    """Path to a fixture HYDAT database in tmp_path."""
    return build_hydat(tmp_path / "Hydat.sqlite3")


@pytest.fixture
def hydat_conn(hydat_db):
    """A caller-owned connection to the fixture database."""
    conn = sqlite3.connect(hydat_db)
    yield conn
    conn.close()


@pytest.fixture
def realtime_station_list():
    """Realtime stations as returned by realtime_stations()."""
    return pd.DataFrame({
        'STATION_NUMBER': ['08HF001', '08MF005', '05BB001'],
        'STATION_NAME': ['COWICHAN RIVER NEAR DUNCAN (REALTIME)', 'FRASER RIVER AT HOPE',
                         'BOW RIVER AT BANFF'],
        'LATITUDE': [48.7731, 49.3860, 51.1722],
        'LONGITUDE': [-123.7136, -121.4542, -115.5719],
        'PROV_TERR_STATE_LOC': ['BC', 'BC', 'AB'],
        'TIMEZONE': ['UTC-08:00', 'UTC-08:00', 'UTC-07:00'],
    })


@pytest.fixture
def offline_realtime(monkeypatch, realtime_station_list):
    """Replace the network fetch used by the station search."""
    monkeypatch.setattr(pyhydat.search, 'realtime_stations', lambda: realtime_station_list.copy())
    return realtime_station_list


@pytest.fixture
def mock_response():
    """Factory for mock HTTP responses."""
    def _make(text='', status_code=200):
        resp = MagicMock()
        resp.status_code = status_code
        resp.text = text
        resp.raise_for_status.return_value = None
        return resp
    return _make
