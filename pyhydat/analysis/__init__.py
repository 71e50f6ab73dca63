"""Post-processing helpers for realtime data."""

from .aggregate import realtime_daily_mean

__all__ = ['realtime_daily_mean']
