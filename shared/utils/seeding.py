"""Deterministic seeds for template rotation"""

import hashlib
from datetime import date
from typing import Iterable


def stable_int(*parts: str) -> int:
    """Hash string parts into a non-negative int, stable across runs"""
    joined = "\x1f".join(parts)
    return int(hashlib.sha256(joined.encode("utf-8")).hexdigest()[:12], 16)


def day_of_year(on_date: date) -> int:
    """1-based ordinal day within the year"""
    return on_date.timetuple().tm_yday


def sorted_join(values: Iterable[str]) -> str:
    return "".join(sorted(values))
