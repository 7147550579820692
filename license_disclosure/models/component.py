"""Component and report Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class LicenseTag(Enum):
    """Closed set of license classifications.

    Definition order is the canonical order used by every report section.
    """

    MIT = "MIT"
    APACHE_2 = "Apache-2.0"
    BSD_2 = "BSD-2-Clause"
    BSD_3 = "BSD-3-Clause"
    ISC = "ISC"
    MPL_2 = "MPL-2.0"
    EPL_1 = "EPL-1.0"
    CREATIVE_COMMONS = "CreativeCommons"
    UNKNOWN = "Unknown"

    @classmethod
    def from_declared(cls, declared: Optional[str]) -> Optional[LicenseTag]:
        """Normalize a free-form declared license string onto a tag.

        Tries an exact (case-insensitive) tag match, then the alias table,
        then the text classifier.

        Args:
            declared: License string as written in package metadata.

        Returns:
            Matching LicenseTag, or None if nothing was declared.
        """
        if declared is None or not declared.strip():
            return None

        cleaned = declared.strip()
        for tag in cls:
            if tag.value.lower() == cleaned.lower():
                return tag

        alias = DECLARED_LICENSE_ALIASES.get(cleaned.lower())
        if alias is not None:
            return alias

        from license_disclosure.analysis.classifier import classify

        return classify(cleaned)


# Common declared-license spellings that the classifier cascade would miss
DECLARED_LICENSE_ALIASES: dict[str, LicenseTag] = {
    "mit license": LicenseTag.MIT,
    "apache 2.0": LicenseTag.APACHE_2,
    "apache-2": LicenseTag.APACHE_2,
    "apache2": LicenseTag.APACHE_2,
    "apache license 2.0": LicenseTag.APACHE_2,
    "bsd": LicenseTag.BSD_3,
    "bsd-3": LicenseTag.BSD_3,
    "new bsd": LicenseTag.BSD_3,
    "bsd-2": LicenseTag.BSD_2,
    "simplified bsd": LicenseTag.BSD_2,
    "freebsd": LicenseTag.BSD_2,
    "mpl 2.0": LicenseTag.MPL_2,
    "mpl2": LicenseTag.MPL_2,
    "epl-1": LicenseTag.EPL_1,
    "epl 1.0": LicenseTag.EPL_1,
    "cc-by-3.0": LicenseTag.CREATIVE_COMMONS,
    "cc-by-4.0": LicenseTag.CREATIVE_COMMONS,
    "cc-by-sa-4.0": LicenseTag.CREATIVE_COMMONS,
    "cc0-1.0": LicenseTag.CREATIVE_COMMONS,
}


class Ecosystem(Enum):
    """Package ecosystems scanned for dependencies."""

    GO = "go"
    NPM = "npm"


class EvidenceSource(Enum):
    """Which piece of evidence produced a component's license data."""

    STDLIB = "stdlib"
    LICENSE_FILE = "license_file"
    README = "readme"
    METADATA = "metadata"


class Component(BaseModel):
    """A resolved dependency with its license classification."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name or import path")
    version: str = Field(description="Package version or vendored revision")
    copyright: str = Field(description="Extracted copyright or license text")
    license: LicenseTag = Field(description="License classification")
    ecosystem: Ecosystem = Field(description="Ecosystem the package belongs to")
    evidence: EvidenceSource = Field(
        default=EvidenceSource.LICENSE_FILE,
        description="Evidence the license and copyright were taken from",
    )
    override_reason: Optional[str] = Field(
        default=None, description="Reason for a configured license override"
    )

    @property
    def is_overridden(self) -> bool:
        """Check if this component has a configured override applied.

        Returns:
            True if override_reason is set, False otherwise.
        """
        return self.override_reason is not None


class DisclosureReport(BaseModel):
    """All resolved components of a single scan, grouped by ecosystem."""

    model_config = {"extra": "forbid"}

    go_components: list[Component] = Field(
        default_factory=list, description="Components from the Go vendor manifest"
    )
    npm_components: list[Component] = Field(
        default_factory=list, description="Components from the npm package tree"
    )

    @property
    def total_components(self) -> int:
        """Total number of components across both ecosystems."""
        return len(self.go_components) + len(self.npm_components)

    @property
    def unknown_components(self) -> list[Component]:
        """Components that could not be classified."""
        return [
            c
            for c in self.go_components + self.npm_components
            if c.license is LicenseTag.UNKNOWN
        ]

    @property
    def has_issues(self) -> bool:
        """Check if any component was left unclassified."""
        return len(self.unknown_components) > 0

    def go_components_for(self, tag: LicenseTag) -> list[Component]:
        """Go components carrying the given tag, in scan order."""
        return [c for c in self.go_components if c.license is tag]

    def npm_components_for(self, tag: LicenseTag) -> list[Component]:
        """npm components carrying the given tag, in scan order."""
        return [c for c in self.npm_components if c.license is tag]

    def count_by_license(self) -> dict[LicenseTag, int]:
        """Count components per tag, every tag present in canonical order."""
        return {
            tag: len(self.go_components_for(tag)) + len(self.npm_components_for(tag))
            for tag in LicenseTag
        }
