"""
HYDAT Database Layer

Read-only access to a HYDAT SQLite file, organised by the Repository pattern.

Architecture:
- connection.py: resolving a path or caller connection and closing what we open
- lookup_repository.py: agency, regional office, datum and version tables
- station_repository.py: historical station metadata
"""

from .connection import (
    DatabaseConnection,
    HydatConnection,
    HydatPath,
    HydatSource,
    as_source,
    hy_src,
    hy_src_disconnect,
)
from .lookup_repository import (
    LookupRepository,
    hy_agency_list,
    hy_datum_list,
    hy_reg_office_list,
    hy_version,
)
from .station_repository import StationRepository, hy_stations

__all__ = [
    'DatabaseConnection',
    'HydatConnection',
    'HydatPath',
    'HydatSource',
    'as_source',
    'hy_src',
    'hy_src_disconnect',
    'LookupRepository',
    'hy_agency_list',
    'hy_datum_list',
    'hy_reg_office_list',
    'hy_version',
    'StationRepository',
    'hy_stations',
]
