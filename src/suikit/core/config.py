"""
suikit.toml configuration.

Example:

    [render]
    templates_dir = "templates"
    autoescape = true

    [label]
    remove_icon = "delete"
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "suikit.toml"
CONFIG_ENV_VAR = "SUIKIT_CONFIG"


@dataclass
class RenderConfig:
    """HTML renderer configuration."""

    templates_dir: Path | None = None  # project templates searched before the built-in ones
    autoescape: bool = True


@dataclass
class LabelConfig:
    """Label component configuration."""

    remove_icon: str = "delete"  # icon name used when no custom remove icon is given


@dataclass
class SuikitConfig:
    """Top-level configuration."""

    render: RenderConfig = field(default_factory=RenderConfig)
    label: LabelConfig = field(default_factory=LabelConfig)
    path: Path | None = None  # file the config was read from, None for defaults


def find_config(path: Path | None = None) -> Path | None:
    """
    Locate the configuration file.

    Lookup order: explicit path, $SUIKIT_CONFIG, ./suikit.toml.
    An explicit path or env var that does not exist is an error; a missing
    ./suikit.toml just means defaults.
    """
    if path is not None:
        if not path.is_file():
            raise ConfigError("config file not found", source=path)
        return path

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        if not candidate.is_file():
            raise ConfigError(f"config file named by {CONFIG_ENV_VAR} not found", source=candidate)
        return candidate

    candidate = Path.cwd() / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> SuikitConfig:
    """Load configuration, falling back to defaults when no file is found."""
    config_path = find_config(path)
    if config_path is None:
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return SuikitConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"invalid TOML: {e}", source=config_path) from e

    config = parse_config(data, base_dir=config_path.parent)
    config.path = config_path
    logger.info("Loaded configuration from %s", config_path)
    return config


def parse_config(data: dict, base_dir: Path | None = None) -> SuikitConfig:
    """Build a SuikitConfig from already-parsed TOML data."""
    render_data = _section(data, "render")
    label_data = _section(data, "label")

    templates_dir = render_data.get("templates_dir")
    if templates_dir is not None:
        if not isinstance(templates_dir, str):
            raise ConfigError("render.templates_dir must be a string")
        templates_path = Path(templates_dir)
        if base_dir is not None and not templates_path.is_absolute():
            templates_path = base_dir / templates_path
    else:
        templates_path = None

    autoescape = render_data.get("autoescape", True)
    if not isinstance(autoescape, bool):
        raise ConfigError("render.autoescape must be a boolean")

    remove_icon = label_data.get("remove_icon", "delete")
    if not isinstance(remove_icon, str) or not remove_icon:
        raise ConfigError("label.remove_icon must be a non-empty string")

    return SuikitConfig(
        render=RenderConfig(templates_dir=templates_path, autoescape=autoescape),
        label=LabelConfig(remove_icon=remove_icon),
    )


def _section(data: dict, name: str) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section
