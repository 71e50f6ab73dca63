"""
Filesystem locations used by pyhydat.
"""

import os

from platformdirs import user_data_dir

from .config import APP_NAME, HYDAT_FILENAME, HYDAT_PATH_ENV


def hy_dir(*args, **kwargs) -> str:
    """
    Return the per-user data directory where the HYDAT database is cached.

    Arguments are accepted and ignored so the helper can stand in for
    ``user_data_dir`` call sites. No directory is created.
    """
    return user_data_dir(APP_NAME)


def hy_default_db() -> str:
    """Default HYDAT path, honouring the PYHYDAT_DB_PATH override."""
    override = os.environ.get(HYDAT_PATH_ENV)
    if override:
        return override
    return os.path.join(hy_dir(), HYDAT_FILENAME)
