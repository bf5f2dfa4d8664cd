"""
Configuration management for gtestwizard.
"""

from .parser import (
    KNOWN_TRANSIENT_FAULT,
    PlaceholderConfig,
    WizardConfig,
    load_config,
    parse_config,
)

__all__ = [
    "KNOWN_TRANSIENT_FAULT",
    "PlaceholderConfig",
    "WizardConfig",
    "load_config",
    "parse_config",
]
