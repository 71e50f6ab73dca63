"""
Station search across realtime and historical (HYDAT) stations.
"""

import logging

import pandas as pd

from .data.database.connection import DatabaseConnection, HydatLike
from .data.database.station_repository import hy_stations
from .data.realtime import realtime_stations
from .utils.config import STATION_COLUMNS

logger = logging.getLogger(__name__)


def _combined_stations(hydat_path: HydatLike) -> pd.DataFrame:
    """
    Realtime stations followed by HYDAT stations, one row per STATION_NUMBER.

    Realtime rows come first, so their metadata wins when a station is in both.
    """
    db = DatabaseConnection(hydat_path)
    with db.get_connection() as conn:
        historical = hy_stations(hydat_path=conn)

    realtime = realtime_stations()

    stations = pd.concat([realtime, historical], ignore_index=True)
    stations = stations.drop_duplicates(subset='STATION_NUMBER', keep='first')
    return stations[STATION_COLUMNS]


def _search(search_term: str, column: str, hydat_path: HydatLike, label: str) -> pd.DataFrame:
    stations = _combined_stations(hydat_path)

    # Literal substring match; regex metacharacters in the term are not special
    matches = stations[column].astype(str).str.upper().str.contains(
        str(search_term).upper(), regex=False, na=False
    )
    results = stations[matches].reset_index(drop=True)

    if results.empty:
        logger.info("No station %s match this criteria!", label)
    return results


def search_stn_name(search_term: str, hydat_path: HydatLike = None) -> pd.DataFrame:
    """
    Search realtime and HYDAT stations by partial station name.

    Parameters:
    -----------
    search_term : str
        Part of a station name, matched case-insensitively
    hydat_path : None, str, PathLike or sqlite3.Connection
        HYDAT location or an open connection to reuse

    Returns:
    --------
    pd.DataFrame
        Matching STATION_NUMBER, STATION_NAME, PROV_TERR_STATE_LOC, LATITUDE,
        LONGITUDE rows; empty when nothing matches

    Example:
    --------
    search_stn_name("Cowichan")
    """
    return _search(search_term, 'STATION_NAME', hydat_path, 'names')


def search_stn_number(search_term: str, hydat_path: HydatLike = None) -> pd.DataFrame:
    """
    Search realtime and HYDAT stations by partial station number.

    Example:
    --------
    search_stn_number("08HF")
    """
    return _search(search_term, 'STATION_NUMBER', hydat_path, 'numbers')
