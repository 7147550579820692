"""Custom exceptions for license-disclosure."""


class DisclosureError(Exception):
    """Base exception for all license-disclosure errors."""

    pass


class ConfigurationError(DisclosureError):
    """Exception raised when configuration is invalid."""

    pass


class ManifestError(DisclosureError):
    """Exception raised when a dependency manifest cannot be read or decoded."""

    pass


class ScanError(DisclosureError):
    """Exception raised when a scan operation fails."""

    pass
