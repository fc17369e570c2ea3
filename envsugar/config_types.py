# envsugar/config_types.py
"""Type definitions shared by the accessor and the logging setup."""

from enum import Enum
from typing import Optional
import logging


class EnvBool(str, Enum):
    """
    Canonical textual forms of an environment flag.

    Parsing is case-insensitive and accepts the short and long spellings
    listed in ``TRUTHY`` / ``FALSY``.

    Examples:
        >>> EnvBool.parse("True")
        <EnvBool.TRUE: 'true'>
        >>> EnvBool.parse("off").as_bool
        False
        >>> EnvBool.parse("maybe") is None
        True
    """

    TRUE = "true"
    FALSE = "false"

    @property
    def as_bool(self) -> bool:
        return self is EnvBool.TRUE

    @classmethod
    def parse(cls, raw: str) -> Optional["EnvBool"]:
        """Return the flag spelled by ``raw``, or None when it is not a known form."""
        lowered = raw.lower()
        if lowered in TRUTHY:
            return cls.TRUE
        if lowered in FALSY:
            return cls.FALSE
        return None

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


TRUTHY = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSY = frozenset({"0", "f", "false", "n", "no", "off"})


class EnvLogLevel(str, Enum):
    """
    Supported log levels.

    Inherits from str so values compare and print as plain strings.

    Examples:
        >>> EnvLogLevel("DEBUG").level
        10
        >>> str(EnvLogLevel.INFO)
        'INFO'
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


__all__ = [
    "EnvBool",
    "EnvLogLevel",
    "TRUTHY",
    "FALSY",
]
