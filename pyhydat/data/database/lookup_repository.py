"""
Lookup Repository

Reads the small HYDAT reference tables: agencies, regional offices, datums
and the database version.
"""

import pandas as pd

from ...exceptions import MalformedTimestampError
from ...utils.config import (
    AGENCY_TABLE, DATUM_TABLE, REGIONAL_OFFICE_TABLE, VERSION_TABLE, VERSION_DATE_FORMAT,
)
from .connection import DatabaseConnection, HydatLike


class LookupRepository:
    """
    Repository for HYDAT look-up tables.

    Every read returns the whole table; nothing is filtered or cached.
    """

    def __init__(self, hydat_path: HydatLike = None):
        """
        Initialize lookup repository.

        Parameters:
        -----------
        hydat_path : None, str, PathLike or sqlite3.Connection
            HYDAT location or an open connection to reuse
        """
        self.db = DatabaseConnection(hydat_path)

    def get_agencies(self) -> pd.DataFrame:
        """AGENCY look-up table."""
        return self.db.read_table(AGENCY_TABLE)

    def get_regional_offices(self) -> pd.DataFrame:
        """OFFICE look-up table."""
        return self.db.read_table(REGIONAL_OFFICE_TABLE)

    def get_datums(self) -> pd.DataFrame:
        """DATUM look-up table."""
        return self.db.read_table(DATUM_TABLE)

    def get_version(self) -> pd.DataFrame:
        """
        Version number and release date of the database.

        Returns:
        --------
        pd.DataFrame
            VERSION table with ``Date`` parsed to datetime64

        Raises:
        -------
        MalformedTimestampError
            If a stored Date is not ``YYYY-MM-DD HH:MM:SS``
        """
        version = self.db.read_table(VERSION_TABLE)
        try:
            version['Date'] = pd.to_datetime(version['Date'], format=VERSION_DATE_FORMAT)
        except ValueError as e:
            raise MalformedTimestampError(
                f"VERSION.Date does not match {VERSION_DATE_FORMAT!r}: {e}"
            ) from e
        return version


def hy_agency_list(hydat_path: HydatLike = None) -> pd.DataFrame:
    """Return the HYDAT agency list."""
    return LookupRepository(hydat_path).get_agencies()


def hy_reg_office_list(hydat_path: HydatLike = None) -> pd.DataFrame:
    """Return the HYDAT regional office list."""
    return LookupRepository(hydat_path).get_regional_offices()


def hy_datum_list(hydat_path: HydatLike = None) -> pd.DataFrame:
    """Return the HYDAT datum list."""
    return LookupRepository(hydat_path).get_datums()


def hy_version(hydat_path: HydatLike = None) -> pd.DataFrame:
    """Return the HYDAT version number and release date."""
    return LookupRepository(hydat_path).get_version()
