"""Configuration for query rendering."""

from dataclasses import dataclass, replace
from typing import Any

from sqlchain.exceptions import ImproperConfigurationError
from sqlchain.parameters import ParameterStyle

__all__ = ("BuilderConfig",)


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for query builder rendering behavior."""

    parameter_style: ParameterStyle = ParameterStyle.NUMERIC
    """Positional placeholder syntax for the rendered SQL."""

    strict: bool = False
    """Raise on incomplete or inconsistent builder state instead of rendering a best-effort statement."""

    validate_parameter_types: bool = False
    """Classify every bound value at build time and reject unsupported types."""

    def __post_init__(self) -> None:
        if not isinstance(self.parameter_style, ParameterStyle):
            msg = f"parameter_style must be a ParameterStyle, got {self.parameter_style!r}"
            raise ImproperConfigurationError(msg)

    def replace(self, **changes: Any) -> "BuilderConfig":
        """Return a copy of this configuration with ``changes`` applied."""
        return replace(self, **changes)
