# envsugar/dotenv_loader.py
"""Seed an environment table from a ``.env`` file."""

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from .environment import EnvironmentTable, ProcessEnvironment
from .errors import EnvironmentWriteError


def load_env_file(
    path: Union[str, Path] = ".env",
    override: bool = False,
    environ: Optional[EnvironmentTable] = None,
) -> Dict[str, str]:
    """
    Write the entries of a ``.env`` file into the environment table.

    Variables that already hold a non-empty value win unless ``override``
    is set. Entries without a value (``KEY`` or ``KEY=``) are skipped.

    Args:
        path: Dotenv file; a missing file loads nothing
        override: Replace values that are already set
        environ: Target table, the process environment by default

    Returns:
        The entries actually written

    Raises:
        EnvironmentWriteError: If the table rejects an entry
    """
    table = environ if environ is not None else ProcessEnvironment()
    path = Path(path)
    if not path.is_file():
        return {}

    applied: Dict[str, str] = {}
    for key, value in dotenv_values(path).items():
        if not value:
            continue
        if table.get(key) and not override:
            continue
        try:
            table.set(key, value)
        except (OSError, ValueError) as exc:
            raise EnvironmentWriteError(key, str(exc)) from exc
        applied[key] = value
    return applied


__all__ = ["load_env_file"]
