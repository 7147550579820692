"""Default configuration values for license-disclosure."""

from __future__ import annotations

from license_disclosure.models.config import DisclosureConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-disclosure.yaml", ".license-disclosure.yml"]


def get_default_config() -> DisclosureConfig:
    """Get the default configuration.

    Returns:
        DisclosureConfig describing the stock vendor/ and browser/ layout.
    """
    return DisclosureConfig()
