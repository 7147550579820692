"""Pydantic data models for license-disclosure."""

from license_disclosure.models.component import (
    Component,
    DisclosureReport,
    Ecosystem,
    EvidenceSource,
    LicenseTag,
)
from license_disclosure.models.config import DisclosureConfig, LicenseOverride
from license_disclosure.models.manifest import (
    DeclaredLicense,
    PackageAuthor,
    PackageMetadata,
    VendorManifest,
    VendorPackage,
)

__all__ = [
    "Component",
    "DeclaredLicense",
    "DisclosureConfig",
    "DisclosureReport",
    "Ecosystem",
    "EvidenceSource",
    "LicenseOverride",
    "LicenseTag",
    "PackageAuthor",
    "PackageMetadata",
    "VendorManifest",
    "VendorPackage",
]
