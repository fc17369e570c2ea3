# envsugar/accessor.py
"""
Typed, prefix-aware access to environment variables.

Usage:
    from envsugar import check_many, get_int, Directive

    check_many("billing", [
        Directive(name="db_url", required=True),
        Directive(name="workers", default_value="4"),
    ])
    workers = get_int("billing", "workers", 1)   # reads BILLING_WORKERS

Every lookup goes through normalize(): both parts are trimmed, joined with
an underscore when the prefix is non-empty, and upper-cased. Getters never
raise; an absent, empty or malformed value resolves to the default.
"""

from typing import Iterable, List, Optional

from .directives import Directive
from .environment import EnvironmentTable, ProcessEnvironment
from .errors import EnvironmentWriteError, RequiredVariableError
from .parsers import parse_bool, parse_float, parse_int, parse_int_list, split
from .structlog_config import get_logger


def normalize(prefix: str, key: str) -> str:
    """
    Build the lookup key for ``key`` under ``prefix``.

    Examples:
        >>> normalize(" billing ", " db_url ")
        'BILLING_DB_URL'
        >>> normalize("", "port")
        'PORT'
    """
    prefix = prefix.strip()
    key = key.strip()
    if prefix:
        key = f"{prefix}_{key}"
    return key.upper()


class EnvAccessor:
    """
    Environment accessor bound to one environment table.

    Args:
        environ: Table to read from and write defaults into. Defaults to
            the live process environment.
    """

    def __init__(self, environ: Optional[EnvironmentTable] = None) -> None:
        self._environ = environ if environ is not None else ProcessEnvironment()

    @property
    def environ(self) -> EnvironmentTable:
        return self._environ

    def _raw(self, prefix: str, key: str) -> Optional[str]:
        """Return the raw value, or None when unset or empty."""
        return self._environ.get(normalize(prefix, key)) or None

    # Validation

    def check(
        self,
        prefix: str,
        key: str,
        default_value: str = "",
        required: bool = False,
        verbose: bool = False,
    ) -> None:
        """
        Verify that a variable is set, injecting ``default_value`` when it is not.

        Raises:
            RequiredVariableError: required, unset and no default
            EnvironmentWriteError: the default could not be written
        """
        key = normalize(prefix, key)
        log = get_logger(__name__) if verbose else None

        if log:
            log.info("checking env var", key=key)

        if self._environ.get(key):
            if log:
                log.info("ok", key=key)
            return

        if default_value:
            try:
                self._environ.set(key, default_value)
            except (OSError, ValueError) as exc:
                get_logger(__name__).error(
                    "setting default value failed", key=key, error=str(exc)
                )
                raise EnvironmentWriteError(key, str(exc)) from exc

            if log:
                log.info("set with default value", key=key)
            return

        if required:
            if log:
                log.warning("required but not set", key=key)
            raise RequiredVariableError(key)

        if log:
            log.info("ok", key=key, optional=True)

    def check_many(
        self,
        prefix: str,
        directives: Iterable[Directive],
        verbose: bool = False,
    ) -> None:
        """
        Run check() for each directive in order, stopping at the first failure.
        """
        for d in directives:
            self.check(prefix, d.name, d.default_value, d.required, verbose)

    # Typed getters

    def get_string(self, prefix: str, key: str, default_value: str = "") -> str:
        raw = self._raw(prefix, key)
        return raw if raw is not None else default_value

    def get_string_list(
        self,
        prefix: str,
        key: str,
        separator: str = ",",
        default_value: Optional[Iterable[str]] = None,
    ) -> List[str]:
        raw = self._raw(prefix, key)
        if raw is not None:
            return split(raw, separator)
        return list(default_value or [])

    def get_int(self, prefix: str, key: str, default_value: int = 0) -> int:
        raw = self._raw(prefix, key)
        if raw is not None:
            value = parse_int(raw)
            if value is not None:
                return value
        return default_value

    def get_int64(self, prefix: str, key: str, default_value: int = 0) -> int:
        """Same rules as get_int(); values outside the signed 64-bit range fall back."""
        return self.get_int(prefix, key, default_value)

    def get_int_list(
        self,
        prefix: str,
        key: str,
        separator: str = ",",
        default_value: Optional[Iterable[int]] = None,
    ) -> List[int]:
        """
        Split and parse each element; elements that do not parse become ``0``.

        Example:
            ``PORTS="80,x,443"`` reads as ``[80, 0, 443]``.
        """
        raw = self._raw(prefix, key)
        if raw is not None:
            return parse_int_list(raw, separator)
        return list(default_value or [])

    def get_float(self, prefix: str, key: str, default_value: float = 0.0) -> float:
        raw = self._raw(prefix, key)
        if raw is not None:
            value = parse_float(raw)
            if value is not None:
                return value
        return default_value

    def get_bool(self, prefix: str, key: str, default_value: bool = False) -> bool:
        raw = self._raw(prefix, key)
        if raw is not None:
            value = parse_bool(raw)
            if value is not None:
                return value
        return default_value


# Convenience instance bound to the process environment
default_accessor = EnvAccessor()

check = default_accessor.check
check_many = default_accessor.check_many
get_string = default_accessor.get_string
get_string_list = default_accessor.get_string_list
get_int = default_accessor.get_int
get_int64 = default_accessor.get_int64
get_int_list = default_accessor.get_int_list
get_float = default_accessor.get_float
get_bool = default_accessor.get_bool

__all__ = [
    "normalize",
    "EnvAccessor",
    "default_accessor",
    "check",
    "check_many",
    "get_string",
    "get_string_list",
    "get_int",
    "get_int64",
    "get_int_list",
    "get_float",
    "get_bool",
]
