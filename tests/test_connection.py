"""Tests for resolving HYDAT sources and connection ownership."""

import sqlite3
from pathlib import Path

import pytest

from pyhydat.data.database.connection import (
    DatabaseConnection, HydatConnection, HydatPath, as_source, hy_src, hy_src_disconnect,
)
from pyhydat.exceptions import HydatError, MissingDatabaseError
from pyhydat.utils.config import HYDAT_PATH_ENV


class TestAsSource:
    def test_none_is_default_path(self):
        assert as_source(None) == HydatPath(None)

    def test_string_path(self):
        assert as_source("/tmp/Hydat.sqlite3") == HydatPath("/tmp/Hydat.sqlite3")

    def test_pathlike(self, tmp_path):
        assert as_source(tmp_path / "h.db") == HydatPath(str(tmp_path / "h.db"))

    def test_connection(self, hydat_conn):
        source = as_source(hydat_conn)
        assert isinstance(source, HydatConnection)
        assert source.conn is hydat_conn

    def test_source_passes_through(self):
        source = HydatPath("x.db")
        assert as_source(source) is source

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_source(42)


class TestDatabaseConnection:
    def test_missing_database(self, tmp_path):
        db_path = tmp_path / "nope.sqlite3"
        db = DatabaseConnection(str(db_path))
        with pytest.raises(MissingDatabaseError) as excinfo:
            db.open()
        assert "download_hydat" in str(excinfo.value)
        # sqlite must not have created an empty file
        assert not db_path.exists()

    def test_missing_database_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DatabaseConnection(str(tmp_path / "nope.sqlite3")).open()
        with pytest.raises(HydatError):
            DatabaseConnection(str(tmp_path / "nope.sqlite3")).open()

    def test_default_path_from_env(self, monkeypatch, hydat_db):
        monkeypatch.setenv(HYDAT_PATH_ENV, hydat_db)
        db = DatabaseConnection()
        assert db.db_path == hydat_db
        assert db.owns_connection

    def test_owned_connection_closed_on_exit(self, hydat_db):
        db = DatabaseConnection(hydat_db)
        with db.get_connection() as conn:
            conn.execute("SELECT 1")
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_owned_connection_closed_on_error(self, hydat_db):
        db = DatabaseConnection(hydat_db)
        with pytest.raises(RuntimeError):
            with db.get_connection() as conn:
                raise RuntimeError("boom")
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_caller_connection_left_open(self, hydat_conn):
        db = DatabaseConnection(hydat_conn)
        assert not db.owns_connection
        assert db.db_path is None
        with db.get_connection() as conn:
            assert conn is hydat_conn
        assert hydat_conn.execute("SELECT COUNT(*) FROM STATIONS").fetchone()[0] == 4

    def test_read_table_rejects_unknown_table(self, hydat_db):
        with pytest.raises(ValueError):
            DatabaseConnection(hydat_db).read_table("sqlite_master")

    def test_read_table_with_condition(self, hydat_db):
        df = DatabaseConnection(hydat_db).read_table(
            "STATIONS", where="PROV_TERR_STATE_LOC = ?", params=("YT",)
        )
        assert df['STATION_NUMBER'].tolist() == ['09AB001']


class TestHySrc:
    def test_open_and_disconnect(self, hydat_db):
        conn = hy_src(hydat_db)
        assert conn.execute("SELECT Version FROM VERSION").fetchone()[0] == '1.0'
        hy_src_disconnect(conn)
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")

    def test_existing_connection_returned(self, hydat_conn):
        assert hy_src(hydat_conn) is hydat_conn

    def test_missing(self, tmp_path):
        with pytest.raises(MissingDatabaseError):
            hy_src(Path(tmp_path) / "missing.sqlite3")
