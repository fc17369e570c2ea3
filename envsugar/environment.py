# envsugar/environment.py
"""
Environment table capability.

The accessor never touches ``os.environ`` directly; it reads and writes
through an ``EnvironmentTable`` so callers (and tests) can substitute an
in-memory table for the live process environment.
"""

import os
from typing import (
    Dict,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Protocol,
    runtime_checkable,
)


@runtime_checkable
class EnvironmentTable(Protocol):
    """Minimal get/set view over a string key-value store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class ProcessEnvironment:
    """
    Environment table backed by the live process environment.

    Writes go through ``os.environ`` so child processes and later
    ``os.getenv`` calls observe injected defaults. ``os.environ`` raises
    ``ValueError`` for keys or values it cannot store (empty key, ``=`` in
    the key, NUL bytes) and ``OSError`` when the platform call fails.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def set(self, key: str, value: str) -> None:
        self._environ[key] = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MemoryEnvironment:
    """Dict-backed environment table for isolated use and tests."""

    def __init__(self, values: Optional[Mapping[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(values or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if not key or "=" in key:
            raise ValueError(f"illegal environment variable name: {key!r}")
        if "\0" in key or "\0" in value:
            raise ValueError("embedded null byte")
        self._values[key] = value

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the stored values."""
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


__all__ = ["EnvironmentTable", "ProcessEnvironment", "MemoryEnvironment"]
