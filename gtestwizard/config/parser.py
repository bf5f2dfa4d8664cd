"""YAML configuration parser for gtestwizard.

This module provides parsing and validation for gtestwizard.yaml files.
All settings are optional; ``load_config()`` without a path returns the
defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from gtestwizard.core.exceptions import ConfigError, ToolsetError
from gtestwizard.toolset.rank import ToolsetRank

KNOWN_TRANSIENT_FAULT = (
    "Error HRESULT E_FAIL has been returned from a call to a COM component."
)


@dataclass
class PlaceholderConfig:
    """Names of the placeholders owned by the wizard."""

    toolset: str = "$gta_toolset$"
    link_gtest_as_dll: str = "$link_gtest_as_dll$"
    gtest_include: str = "$gtestinclude$"


@dataclass
class WizardConfig:
    """Complete wizard configuration."""

    version: int = 1
    known_transient_fault: str = KNOWN_TRANSIENT_FAULT
    extra_toolsets: List[str] = field(default_factory=list)
    placeholders: PlaceholderConfig = field(default_factory=PlaceholderConfig)
    extra_replacements: Dict[str, str] = field(default_factory=dict)
    host_toolsets: Dict[str, str] = field(default_factory=dict)


def load_config(config_path: Optional[Path] = None) -> WizardConfig:
    """
    Load configuration, falling back to defaults when no path is given.

    Raises:
        ConfigError: If configuration is invalid
    """
    if config_path is None:
        return WizardConfig()
    return parse_config(Path(config_path))


def parse_config(config_path: Path) -> WizardConfig:
    """
    Parse gtestwizard.yaml configuration file.

    Args:
        config_path: Path to gtestwizard.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        raise ConfigError("Configuration file is empty")

    return _parse_and_validate(data)


def _parse_and_validate(data: Any) -> WizardConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    config = WizardConfig(version=1)

    if "known_transient_fault" in data:
        fault = data["known_transient_fault"]
        if not isinstance(fault, str) or not fault:
            raise ConfigError("known_transient_fault must be a non-empty string")
        config.known_transient_fault = fault

    extra_toolsets = data.get("extra_toolsets") or []
    if not isinstance(extra_toolsets, list) or not all(
        isinstance(ts, str) and ts for ts in extra_toolsets
    ):
        raise ConfigError("extra_toolsets must be a list of non-empty strings")
    config.extra_toolsets = list(extra_toolsets)
    try:
        ranking = ToolsetRank(config.extra_toolsets)
    except ToolsetError as e:
        raise ConfigError(f"Invalid extra_toolsets: {e}") from e

    config.placeholders = _parse_placeholders(data.get("placeholders") or {})
    config.extra_replacements = _parse_string_map(
        data.get("extra_replacements") or {}, "extra_replacements"
    )

    host_toolsets = _parse_string_map(
        data.get("host_toolsets") or {}, "host_toolsets"
    )
    for major in host_toolsets:
        if not major.split(".", 1)[0].isdigit():
            raise ConfigError(f"Invalid host version in host_toolsets: {major}")
        if not ranking.is_known(host_toolsets[major]):
            raise ConfigError(
                f"Unknown toolset in host_toolsets: {host_toolsets[major]} "
                "(add it to extra_toolsets)"
            )
    config.host_toolsets = host_toolsets

    reserved = set(vars(config.placeholders).values())
    clashes = reserved.intersection(config.extra_replacements)
    if clashes:
        raise ConfigError(
            f"extra_replacements redefine wizard placeholders: {sorted(clashes)}"
        )

    return config


def _parse_placeholders(data: Any) -> PlaceholderConfig:
    if not isinstance(data, dict):
        raise ConfigError("placeholders must be a mapping")

    placeholders = PlaceholderConfig()
    for key, value in data.items():
        if not hasattr(placeholders, key):
            raise ConfigError(f"Unknown placeholder: {key}")
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Placeholder {key} must be a non-empty string")
        setattr(placeholders, key, value)

    names = list(vars(placeholders).values())
    if len(set(names)) != len(names):
        raise ConfigError("Placeholder names must be unique")
    return placeholders


def _parse_string_map(data: Any, name: str) -> Dict[str, str]:
    # YAML reads unquoted 15.0 as a float, so keys and values are stringified
    if not isinstance(data, dict):
        raise ConfigError(f"{name} must be a mapping")
    result = {}
    for key, value in data.items():
        if value is None or isinstance(value, (dict, list)):
            raise ConfigError(f"{name}.{key} must be a scalar value")
        result[str(key)] = str(value)
    return result
