"""
HYDAT Connection Management

Resolves where a HYDAT connection comes from and who is responsible for closing it.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Optional, Union

import pandas as pd

from ...exceptions import MissingDatabaseError
from ...utils.config import LOOKUP_TABLES
from ...utils.paths import hy_default_db

logger = logging.getLogger(__name__)


class HydatSource:
    """Base for the two ways a caller can point at a HYDAT database."""


@dataclass(frozen=True)
class HydatPath(HydatSource):
    """A database file to open (and close) locally; None means the default path."""
    path: Optional[str] = None


@dataclass(frozen=True)
class HydatConnection(HydatSource):
    """A connection opened by the caller. It is never closed here."""
    conn: sqlite3.Connection


HydatLike = Union[None, str, os.PathLike, sqlite3.Connection, HydatSource]


def as_source(hydat_path: HydatLike = None) -> HydatSource:
    """
    Normalize the ``hydat_path`` argument accepted by public functions.

    Parameters:
    -----------
    hydat_path : None, str, PathLike, sqlite3.Connection or HydatSource
        None uses the default database location.

    Returns:
    --------
    HydatSource
    """
    if isinstance(hydat_path, HydatSource):
        return hydat_path
    if isinstance(hydat_path, sqlite3.Connection):
        return HydatConnection(hydat_path)
    if hydat_path is None:
        return HydatPath()
    if isinstance(hydat_path, (str, os.PathLike)):
        return HydatPath(os.fspath(hydat_path))
    raise TypeError(
        f"hydat_path must be a path, a sqlite3.Connection or None, "
        f"not {type(hydat_path).__name__}"
    )


class DatabaseConnection:
    """
    Resolves a HYDAT source once and manages the connection it yields.

    Usage:
        db = DatabaseConnection("Hydat.sqlite3")
        with db.get_connection() as conn:
            conn.execute("SELECT * FROM VERSION")

    A connection opened here is closed when the ``with`` block exits. A
    connection passed in by the caller is handed back untouched.
    """

    def __init__(self, hydat_path: HydatLike = None):
        """
        Initialize the connection manager.

        Parameters:
        -----------
        hydat_path : None, str, PathLike, sqlite3.Connection or HydatSource
            Where to find HYDAT
        """
        self.source = as_source(hydat_path)
        self.owns_connection = isinstance(self.source, HydatPath)

    @property
    def db_path(self) -> Optional[str]:
        """Resolved database file path, or None for a caller-supplied connection."""
        if isinstance(self.source, HydatPath):
            return self.source.path or hy_default_db()
        return None

    def database_exists(self) -> bool:
        """
        Check if the database file exists.

        Returns:
        --------
        bool
            True for caller-supplied connections or an existing file
        """
        if not self.owns_connection:
            return True
        return os.path.exists(self.db_path)

    def open(self) -> sqlite3.Connection:
        """
        Return a query-ready connection.

        Raises:
        -------
        MissingDatabaseError
            If the resolved path has no database file. Checked before
            connecting so sqlite does not create an empty file.
        """
        if not self.owns_connection:
            return self.source.conn

        if not self.database_exists():
            raise MissingDatabaseError(self.db_path)

        logger.debug("Opening HYDAT at %s", self.db_path)
        return sqlite3.connect(self.db_path)

    @contextmanager
    def get_connection(self):
        """
        Get a database connection as a context manager.

        Yields:
        -------
        sqlite3.Connection
            Closed on exit only if it was opened here
        """
        conn = self.open()
        try:
            yield conn
        finally:
            if self.owns_connection:
                conn.close()

    def read_table(self, table_name: str, where: Optional[str] = None,
                   params: tuple = ()) -> pd.DataFrame:
        """
        Read a HYDAT table into a DataFrame.

        Parameters:
        -----------
        table_name : str
            One of the known HYDAT tables
        where : str, optional
            SQL condition with ``?`` placeholders
        params : tuple
            Values for the placeholders

        Returns:
        --------
        pd.DataFrame
        """
        if table_name not in LOOKUP_TABLES:
            raise ValueError(f"Unknown HYDAT table: {table_name}")

        query = f"SELECT * FROM {table_name}"
        if where:
            query += f" WHERE {where}"

        with self.get_connection() as conn:
            return pd.read_sql_query(query, conn, params=params)


def hy_src(hydat_path: HydatLike = None) -> sqlite3.Connection:
    """
    Open HYDAT so one connection can be shared across several calls.

    Close it with ``hy_src_disconnect`` when finished. Passing an
    already-open connection returns it unchanged.
    """
    return DatabaseConnection(hydat_path).open()


def hy_src_disconnect(conn: sqlite3.Connection) -> None:
    """Close a connection returned by ``hy_src``."""
    conn.close()
