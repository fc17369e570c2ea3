# envsugar/parsers.py
"""
Parse rules for raw environment strings.

Every parser returns ``None`` when the input is not a valid literal so the
getters can fall back to their default without exception handling at each
call site.
"""

import math
import re
from typing import List, Optional

from .config_types import EnvBool

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(raw: str) -> Optional[int]:
    """Base-10 signed integer within the 64-bit range."""
    if not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float(raw: str) -> Optional[float]:
    """
    Decimal or scientific float.

    ``float()`` is more lenient than an environment value should be: it
    strips whitespace, accepts digit-group underscores and non-ASCII
    digits, so all of those are rejected up front. A finite literal that overflows to infinity is a
    parse failure; an explicit ``inf`` is not.
    """
    if not raw or not raw.isascii() or raw != raw.strip() or "_" in raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if math.isinf(value) and "inf" not in raw.lower():
        return None
    return value


def parse_bool(raw: str) -> Optional[bool]:
    flag = EnvBool.parse(raw)
    return flag.as_bool if flag is not None else None


def split(raw: str, separator: str) -> List[str]:
    """Split ``raw`` on ``separator``; an empty separator splits into characters."""
    if separator == "":
        return list(raw)
    return raw.split(separator)


def parse_int_list(raw: str, separator: str) -> List[int]:
    """
    Split and parse each element.

    Elements that fail to parse become ``0`` rather than being dropped, so
    positions in the result line up with positions in the raw value.
    """
    values = []
    for element in split(raw, separator):
        value = parse_int(element)
        values.append(value if value is not None else 0)
    return values


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "parse_int",
    "parse_float",
    "parse_bool",
    "parse_int_list",
    "split",
]
