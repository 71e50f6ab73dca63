"""
Errors raised by pyhydat.

Database, pandas and HTTP errors are not wrapped; they reach the caller as-is.
"""


class HydatError(Exception):
    """Base class for pyhydat errors."""


class MissingDatabaseError(HydatError, FileNotFoundError):
    """No HYDAT database file exists at the resolved path."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        super().__init__(
            f"No HYDAT database found at {db_path}. "
            f"Run download_hydat() to download the database first."
        )


class MalformedTimestampError(HydatError, ValueError):
    """A stored timestamp does not match the expected date-time format."""
