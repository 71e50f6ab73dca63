"""
Configuration settings for pyhydat
"""

# Application identifier used for the per-user data directory
APP_NAME = "pyhydat"

# HYDAT Database Settings
HYDAT_FILENAME = "Hydat.sqlite3"
HYDAT_PATH_ENV = "PYHYDAT_DB_PATH"  # Overrides the default database location when set

AGENCY_TABLE = "AGENCY_LIST"
REGIONAL_OFFICE_TABLE = "REGIONAL_OFFICE_LIST"
DATUM_TABLE = "DATUM_LIST"
VERSION_TABLE = "VERSION"
STATIONS_TABLE = "STATIONS"

LOOKUP_TABLES = (
    AGENCY_TABLE,
    REGIONAL_OFFICE_TABLE,
    DATUM_TABLE,
    VERSION_TABLE,
    STATIONS_TABLE,
)

# Columns returned by the station search, in order
STATION_COLUMNS = [
    'STATION_NUMBER',
    'STATION_NAME',
    'PROV_TERR_STATE_LOC',
    'LATITUDE',
    'LONGITUDE',
]

VERSION_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Realtime Datamart Settings
REALTIME_BASE_URL = "https://dd.weather.gc.ca/hydrometric"
REALTIME_STATION_LIST_URL = f"{REALTIME_BASE_URL}/doc/hydrometric_StationList.csv"
REALTIME_CSV_URL = (
    REALTIME_BASE_URL
    + "/csv/{prov}/{frequency}/{prov}_{station_number}_{frequency}_hydrometric.csv"
)

# Column names applied to the datamart CSV files (their own headers are bilingual)
REALTIME_STATION_LIST_COLUMNS = [
    'STATION_NUMBER',
    'STATION_NAME',
    'LATITUDE',
    'LONGITUDE',
    'PROV_TERR_STATE_LOC',
    'TIMEZONE',
]

REALTIME_DATA_COLUMNS = [
    'STATION_NUMBER',
    'Date',
    'Level',
    'Level_GRADE',
    'Level_SYMBOL',
    'Level_CODE',
    'Flow',
    'Flow_GRADE',
    'Flow_SYMBOL',
    'Flow_CODE',
]

REALTIME_PARAMETERS = ['Flow', 'Level']

REALTIME_CONFIG = {
    'timeout': 60,  # seconds per request
    'user_agent': 'pyhydat/0.1 (+https://dd.weather.gc.ca/hydrometric)',
    'frequencies': ['hourly', 'daily'],
}

# Daily Mean Aggregation
DAILY_MEAN_KEYS = ['STATION_NUMBER', 'PROV_TERR_STATE_LOC', 'Date', 'Parameter']
