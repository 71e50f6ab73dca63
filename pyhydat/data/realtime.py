"""
Realtime hydrometric data from the Environment and Climate Change Canada datamart.

Provides the list of currently reporting stations and their recent
hourly/daily water level and discharge values.
"""

import io
import logging
from typing import Dict, List, Optional

import numpy as np
import pandas as pd
import requests

from ..utils.codes import Codes, as_code_list
from ..utils.config import (
    REALTIME_CONFIG,
    REALTIME_CSV_URL,
    REALTIME_DATA_COLUMNS,
    REALTIME_PARAMETERS,
    REALTIME_STATION_LIST_COLUMNS,
    REALTIME_STATION_LIST_URL,
)

logger = logging.getLogger(__name__)


class RealtimeClient:
    """Fetches realtime station metadata and data from the hydrometric datamart."""

    def __init__(self, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Parameters:
        -----------
        session : requests.Session, optional
            Session to reuse; a new one is created otherwise
        """
        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': REALTIME_CONFIG['user_agent']})
        self.timeout = REALTIME_CONFIG['timeout']

    def _get_csv(self, url: str, columns: List[str]) -> pd.DataFrame:
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()

        # The datamart header row is bilingual; replace it with our own names
        return pd.read_csv(
            io.StringIO(response.text),
            skiprows=1,
            header=None,
            names=columns,
            dtype={'STATION_NUMBER': str},
        )

    def realtime_stations(self, prov_terr_state_loc: Codes = None) -> pd.DataFrame:
        """
        Stations currently reporting realtime data.

        Parameters:
        -----------
        prov_terr_state_loc : str or list of str, optional
            Restrict to these province/territory codes

        Returns:
        --------
        pd.DataFrame
            STATION_NUMBER, STATION_NAME, LATITUDE, LONGITUDE,
            PROV_TERR_STATE_LOC, TIMEZONE
        """
        stations = self._get_csv(REALTIME_STATION_LIST_URL, REALTIME_STATION_LIST_COLUMNS)
        logger.debug("Fetched %d realtime stations", len(stations))

        provinces = as_code_list(prov_terr_state_loc)
        if provinces:
            stations = stations[stations['PROV_TERR_STATE_LOC'].str.upper().isin(provinces)]
        return stations.reset_index(drop=True)

    def realtime_dd(self, station_number: Codes,
                    prov_terr_state_loc: Optional[str] = None) -> pd.DataFrame:
        """
        Recent realtime data for one or more stations in long format.

        Parameters:
        -----------
        station_number : str or list of str
            Realtime station numbers
        prov_terr_state_loc : str, optional
            Province of the stations; looked up from the station list if omitted

        Returns:
        --------
        pd.DataFrame
            STATION_NUMBER, PROV_TERR_STATE_LOC, Date (UTC), Parameter,
            Value, Grade, Symbol, Code
        """
        station_numbers = as_code_list(station_number)
        if not station_numbers:
            raise ValueError("At least one station number is required")

        provinces = self._resolve_provinces(station_numbers, prov_terr_state_loc)

        frames = []
        for number in station_numbers:
            for frequency in REALTIME_CONFIG['frequencies']:
                url = REALTIME_CSV_URL.format(
                    prov=provinces[number], station_number=number, frequency=frequency
                )
                logger.debug("Downloading %s", url)
                frames.append(self._get_csv(url, REALTIME_DATA_COLUMNS))

        data = pd.concat(frames, ignore_index=True)
        data['Date'] = pd.to_datetime(data['Date'], utc=True)
        data['PROV_TERR_STATE_LOC'] = data['STATION_NUMBER'].map(provinces)

        long_data = self._to_long(data)
        long_data = long_data.drop_duplicates(
            subset=['STATION_NUMBER', 'Date', 'Parameter'], keep='first'
        )
        long_data = long_data.sort_values(['Parameter', 'STATION_NUMBER', 'Date'], kind='stable')

        logger.info("Retrieved %d realtime values for %d station(s)",
                    len(long_data), len(station_numbers))
        return long_data.reset_index(drop=True)

    def _resolve_provinces(self, station_numbers: List[str],
                           prov_terr_state_loc: Optional[str]) -> Dict[str, str]:
        if prov_terr_state_loc:
            return {number: prov_terr_state_loc.upper() for number in station_numbers}

        stations = self.realtime_stations()
        lookup = dict(zip(stations['STATION_NUMBER'].str.upper(),
                          stations['PROV_TERR_STATE_LOC']))
        unknown = [number for number in station_numbers if number not in lookup]
        if unknown:
            raise ValueError(f"Not realtime stations: {', '.join(unknown)}")
        return {number: lookup[number] for number in station_numbers}

    @staticmethod
    def _to_long(data: pd.DataFrame) -> pd.DataFrame:
        """Stack the wide Level/Flow columns into Parameter/Value rows."""
        parts = []
        for parameter in REALTIME_PARAMETERS:
            part = data[['STATION_NUMBER', 'PROV_TERR_STATE_LOC', 'Date']].copy()
            part['Parameter'] = parameter
            part['Value'] = pd.to_numeric(data[parameter], errors='coerce')
            part['Grade'] = data[f'{parameter}_GRADE']
            part['Symbol'] = data[f'{parameter}_SYMBOL']
            part['Code'] = data[f'{parameter}_CODE']
            parts.append(part)

        long_data = pd.concat(parts, ignore_index=True)
        long_data['Value'] = long_data['Value'].astype(np.float64)
        return long_data


_default_client: Optional[RealtimeClient] = None


def get_realtime_client() -> RealtimeClient:
    """Get the shared module-level client, creating it on first use."""
    global _default_client
    if _default_client is None:
        _default_client = RealtimeClient()
    return _default_client


def realtime_stations(prov_terr_state_loc: Codes = None) -> pd.DataFrame:
    """Stations currently reporting realtime data."""
    return get_realtime_client().realtime_stations(prov_terr_state_loc)


def realtime_dd(station_number: Codes, prov_terr_state_loc: Optional[str] = None) -> pd.DataFrame:
    """Recent realtime data for one or more stations in long format."""
    return get_realtime_client().realtime_dd(station_number, prov_terr_state_loc)
