"""Helpers for station and province code arguments."""

from typing import Iterable, List, Union

Codes = Union[None, str, Iterable[str]]


def as_code_list(codes: Codes) -> List[str]:
    """Accept a single code or an iterable of codes and return them uppercased."""
    if codes is None:
        return []
    if isinstance(codes, str):
        codes = [codes]
    return [str(code).upper() for code in codes]
