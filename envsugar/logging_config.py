# envsugar/logging_config.py
from dataclasses import dataclass
from typing import Optional

from .config_types import EnvLogLevel
from .environment import EnvironmentTable, ProcessEnvironment
from .errors import ConfigurationError

_default_log_level_env_key = "ENVSUGAR_LOG_LEVEL"
_default_log_level = EnvLogLevel.INFO


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    log_level: EnvLogLevel

    @property
    def level_value(self) -> str:
        """Get string value of log level."""
        return self.log_level.value

    @property
    def level_int(self) -> int:
        """Get numeric log level."""
        return self.log_level.level


def load_logging_config(
    log_level_env_key: str = _default_log_level_env_key,
    environ: Optional[EnvironmentTable] = None,
) -> LoggingConfig:
    """
    Load logging configuration from environment.

    Args:
        log_level_env_key: Environment variable name
        environ: Table to read from, the process environment by default

    Returns:
        LoggingConfig instance, INFO when the variable is unset

    Raises:
        ConfigurationError: If the log level is not a known level
    """
    table = environ if environ is not None else ProcessEnvironment()
    raw = (table.get(log_level_env_key) or "").strip()
    if not raw:
        return LoggingConfig(log_level=_default_log_level)

    try:
        return LoggingConfig(log_level=EnvLogLevel(raw.upper()))
    except ValueError as exc:
        valid_levels = ", ".join(level.value for level in EnvLogLevel)
        raise ConfigurationError(
            f"Invalid logging configuration. "
            f"{log_level_env_key} must be one of [{valid_levels}], got {raw!r}"
        ) from exc


__all__ = [
    "LoggingConfig",
    "load_logging_config",
]
