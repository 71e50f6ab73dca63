"""Configuration and path helpers."""

from .paths import hy_dir, hy_default_db

__all__ = ['hy_dir', 'hy_default_db']
