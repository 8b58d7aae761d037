"""Core suikit functionality: errors, configuration and logging setup."""

from .config import LabelConfig, RenderConfig, SuikitConfig, find_config, load_config
from .errors import (
    ConfigError,
    PropsError,
    RenderError,
    SuikitError,
    UnknownComponentError,
)
from .logging import configure_logging

__all__ = [
    "SuikitError",
    "PropsError",
    "UnknownComponentError",
    "ConfigError",
    "RenderError",
    "SuikitConfig",
    "RenderConfig",
    "LabelConfig",
    "find_config",
    "load_config",
    "configure_logging",
]
