"""Configuration handling for license-disclosure."""
from __future__ import annotations

from license_disclosure.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_disclosure.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_disclosure.models.config import DisclosureConfig, LicenseOverride

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "DisclosureConfig",
    "LicenseOverride",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
