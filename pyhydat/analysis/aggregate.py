"""
Aggregation of realtime data.
"""

import pandas as pd

from ..utils.config import DAILY_MEAN_KEYS


def realtime_daily_mean(data: pd.DataFrame, drop_missing: bool = False) -> pd.DataFrame:
    """
    Calculate daily means from higher resolution realtime data.

    Intended for the output of ``realtime_dd``. Timestamps are truncated to
    their calendar date (UTC for timezone-aware values) and Value is averaged
    per station, province, date and parameter.

    Parameters:
    -----------
    data : pd.DataFrame
        Realtime data with Date, STATION_NUMBER, PROV_TERR_STATE_LOC,
        Parameter and Value columns
    drop_missing : bool
        If True, NaN values are ignored in the mean. If False, a single NaN
        makes its group's mean NaN.

    Returns:
    --------
    pd.DataFrame
        One row per STATION_NUMBER, PROV_TERR_STATE_LOC, Date, Parameter

    Example:
    --------
    realtime_daily_mean(realtime_dd("08MF005"))
    """
    missing = [col for col in DAILY_MEAN_KEYS + ['Value'] if col not in data.columns]
    if missing:
        raise ValueError(f"Missing required columns: {', '.join(missing)}")

    df_mean = data[DAILY_MEAN_KEYS + ['Value']].copy()
    df_mean['Value'] = pd.to_numeric(df_mean['Value'])

    dates = pd.to_datetime(df_mean['Date'])
    if dates.dt.tz is not None:
        dates = dates.dt.tz_convert('UTC')
    df_mean['Date'] = dates.dt.date

    grouped = df_mean.groupby(DAILY_MEAN_KEYS, sort=True, dropna=False)['Value']
    if drop_missing:
        daily = grouped.mean()
    else:
        daily = grouped.agg(lambda values: values.mean(skipna=False))

    return daily.reset_index()
