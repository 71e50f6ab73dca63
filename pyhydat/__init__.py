"""
pyhydat

Lookup and search utilities for the HYDAT hydrometric database and the
realtime hydrometric datamart.
"""

from .analysis.aggregate import realtime_daily_mean
from .data.database import (
    hy_agency_list,
    hy_datum_list,
    hy_reg_office_list,
    hy_src,
    hy_src_disconnect,
    hy_stations,
    hy_version,
)
from .data.realtime import realtime_dd, realtime_stations
from .exceptions import HydatError, MalformedTimestampError, MissingDatabaseError
from .search import search_stn_name, search_stn_number
from .utils.paths import hy_default_db, hy_dir

__version__ = '0.1.0'

__all__ = [
    'hy_agency_list',
    'hy_datum_list',
    'hy_reg_office_list',
    'hy_src',
    'hy_src_disconnect',
    'hy_stations',
    'hy_version',
    'hy_dir',
    'hy_default_db',
    'realtime_dd',
    'realtime_stations',
    'realtime_daily_mean',
    'search_stn_name',
    'search_stn_number',
    'HydatError',
    'MalformedTimestampError',
    'MissingDatabaseError',
]
