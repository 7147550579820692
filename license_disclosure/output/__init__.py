"""Output formatters for license-disclosure."""

from license_disclosure.output.disclosure import DisclosureFormatter
from license_disclosure.output.disclosure_json import DisclosureJsonFormatter

__all__ = [
    "DisclosureFormatter",
    "DisclosureJsonFormatter",
]
