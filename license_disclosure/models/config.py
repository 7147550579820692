"""Configuration Pydantic models for license-disclosure."""
from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from license_disclosure.models.component import LicenseTag


class LicenseOverride(BaseModel):
    """Manual license override for a package.

    Used when heuristic classification fails or needs correction.
    """

    model_config = {"extra": "forbid"}

    license: LicenseTag = Field(description="License tag to use")
    reason: str = Field(description="Reason for the override")


class DisclosureConfig(BaseModel):
    """Configuration for license-disclosure.

    Every default reproduces the stock layout: a Go `vendor/` tree and an
    npm project in `browser/`. Relative paths resolve against the project
    directory.
    """

    model_config = {"extra": "forbid"}

    vendor_manifest: str = Field(
        default="vendor/vendor.json",
        description="Path of the Go vendor manifest.",
    )
    vendor_root: str = Field(
        default="vendor",
        description="Root of the vendored Go tree; license search stops here.",
    )
    npm_dir: Optional[str] = Field(
        default="browser",
        description="Directory holding the npm project. Null disables npm scanning.",
    )
    npm_command: List[str] = Field(
        default_factory=lambda: ["npm", "list", "--prod", "--parseable"],
        description="Command printing one installed package directory per line.",
    )
    stdlib_prefixes: List[str] = Field(
        default_factory=lambda: ["golang.org/"],
        description="Import path prefixes mirrored from the Go standard library.",
    )
    title: str = Field(
        default="open_source_disclosures",
        description="Title line of the disclosure document.",
    )
    release: Optional[str] = Field(
        default=None,
        description="Release label appended to the title line.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="Package names to leave out of the disclosure.",
    )
    overrides: Optional[Dict[str, LicenseOverride]] = Field(
        default=None,
        description="Manual license overrides by package name.",
    )
