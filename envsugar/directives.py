# envsugar/directives.py
"""
Validation directives.

A directive names one variable, whether it is required, and the default to
inject when it is unset. Directives are plain, frozen data; they can be
built in code or loaded from a parsed config file with load_directives().
"""

from typing import Any, Iterable, List, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError


class Directive(BaseModel):
    """Rule describing how one environment variable is validated."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Variable name, before normalization")
    required: bool = Field(default=False, description="Fail when unset and no default")
    default_value: str = Field(
        default="", description="Injected when unset; empty means no default"
    )


def load_directives(items: Iterable[Mapping[str, Any]]) -> List[Directive]:
    """
    Build directives from plain mappings, e.g. a parsed YAML or JSON list.

    Raises:
        ConfigurationError: listing every invalid field as ``index.field: message``
    """
    directives: List[Directive] = []
    errors: List[str] = []

    for index, item in enumerate(items):
        try:
            directives.append(Directive.model_validate(item))
        except ValidationError as e:
            for error in e.errors():
                field = ".".join(str(x) for x in (index, *error["loc"]))
                errors.append(f"{field}: {error['msg']}")

    if errors:
        raise ConfigurationError(
            "Directive validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )
    return directives


__all__ = ["Directive", "load_directives"]
