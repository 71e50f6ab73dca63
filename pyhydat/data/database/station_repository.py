"""
Station Repository

Reads historical station metadata from the HYDAT STATIONS table.
"""

import logging
from typing import List

import pandas as pd

from ...utils.codes import Codes, as_code_list
from ...utils.config import STATIONS_TABLE
from .connection import DatabaseConnection, HydatLike

logger = logging.getLogger(__name__)


class StationRepository:
    """
    Repository for HYDAT station metadata.

    Provides read access to the STATIONS table without exposing SQL to callers.
    """

    def __init__(self, hydat_path: HydatLike = None):
        """
        Initialize station repository.

        Parameters:
        -----------
        hydat_path : None, str, PathLike or sqlite3.Connection
            HYDAT location or an open connection to reuse
        """
        self.db = DatabaseConnection(hydat_path)

    def get_all_stations(self) -> pd.DataFrame:
        """
        Get every station in HYDAT.

        Returns:
        --------
        pd.DataFrame
            DataFrame of all stations ordered by STATION_NUMBER
        """
        stations = self.db.read_table(STATIONS_TABLE)
        return stations.sort_values('STATION_NUMBER', kind='stable').reset_index(drop=True)

    def get_stations_by_number(self, station_numbers: Codes) -> pd.DataFrame:
        """
        Get stations by station number.

        Parameters:
        -----------
        station_numbers : str or list of str
            Station numbers, matched case-insensitively

        Returns:
        --------
        pd.DataFrame
            DataFrame of matching stations
        """
        return self._filter_by('STATION_NUMBER', as_code_list(station_numbers))

    def get_stations_by_province(self, provinces: Codes) -> pd.DataFrame:
        """
        Get stations filtered by province, territory or state.

        Parameters:
        -----------
        provinces : str or list of str
            Two-letter codes such as ``BC`` or ``YT``

        Returns:
        --------
        pd.DataFrame
            DataFrame of filtered stations
        """
        return self._filter_by('PROV_TERR_STATE_LOC', as_code_list(provinces))

    def _filter_by(self, column: str, values: List[str]) -> pd.DataFrame:
        if not values:
            return self.get_all_stations()

        placeholders = ','.join('?' for _ in values)
        stations = self.db.read_table(
            STATIONS_TABLE,
            where=f"UPPER({column}) IN ({placeholders})",
            params=tuple(values),
        )

        missing = set(values) - set(stations[column].str.upper())
        if missing:
            logger.info("%s not found in HYDAT: %s", column, ', '.join(sorted(missing)))

        return stations.sort_values('STATION_NUMBER', kind='stable').reset_index(drop=True)


def hy_stations(station_number: Codes = None, prov_terr_state_loc: Codes = None,
                hydat_path: HydatLike = None) -> pd.DataFrame:
    """
    Station metadata from HYDAT.

    Station numbers take precedence over provinces; with neither, every
    station is returned.

    Parameters:
    -----------
    station_number : str or list of str, optional
        Station numbers to return
    prov_terr_state_loc : str or list of str, optional
        Province, territory or state codes to return
    hydat_path : None, str, PathLike or sqlite3.Connection
        HYDAT location or an open connection to reuse

    Returns:
    --------
    pd.DataFrame
    """
    repo = StationRepository(hydat_path)
    if as_code_list(station_number):
        return repo.get_stations_by_number(station_number)
    if as_code_list(prov_terr_state_loc):
        return repo.get_stations_by_province(prov_terr_state_loc)
    return repo.get_all_stations()
