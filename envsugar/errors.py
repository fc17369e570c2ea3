# envsugar/errors.py
class EnvSugarError(Exception):
    """Base error for all envsugar issues."""

    def __init__(
        self,
        message: str,
        code: str = "ENVSUGAR_ERROR",
    ):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(EnvSugarError):
    """
    Raised when configuration is invalid.
    """

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR"):
        super().__init__(message, code=code)


class RequiredVariableError(ConfigurationError):
    """A required variable has no value and no default."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"required but not set: {key}", code="REQUIRED_NOT_SET")


class EnvironmentWriteError(EnvSugarError):
    """Writing a default value into the environment table failed."""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(
            f"could not set {key} with default value: {reason}",
            code="ENV_WRITE_FAILED",
        )


__all__ = [
    "EnvSugarError",
    "ConfigurationError",
    "RequiredVariableError",
    "EnvironmentWriteError",
]
