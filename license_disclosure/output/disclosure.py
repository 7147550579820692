"""Plain-text disclosure document formatter."""

from __future__ import annotations

from license_disclosure.models.component import DisclosureReport, LicenseTag
from license_disclosure.models.config import DisclosureConfig
from license_disclosure.templates import get_template

TOC_BANNER = "=============== TABLE OF CONTENTS ============================="

TOC_PREAMBLE = """The following is a listing of the open source components detailed in
this document. This list is provided for your convenience; please read
further if you wish to review the copyright notice(s) and the full text
of the license associated with each component."""

STANDARD_LICENSES_HEADER = "APPENDIX: Standard License Files and Templates"

TEMPLATES_BANNER = (
    "=============== APPENDIX: License Files and Templates =============="
)


class DisclosureFormatter:
    """Format a disclosure report as a plain-text document.

    Layout, in order: title block, table of contents by license, list of
    standard licenses, per-license copyright sections, license templates.
    Every license tag gets a section and a template, used or not.
    """

    def __init__(self, config: DisclosureConfig | None = None) -> None:
        """Initialize formatter.

        Args:
            config: Configuration supplying the title and release label.
        """
        self._config = config or DisclosureConfig()

    def format_report(self, report: DisclosureReport) -> str:
        """Format the disclosure report.

        Args:
            report: Resolved components of both ecosystems.

        Returns:
            The full disclosure document.
        """
        parts: list[str] = []
        parts.append(self._format_title())
        parts.append(self._format_table_of_contents(report))
        parts.append(self._format_license_list())
        parts.append(self._format_sections(report))
        parts.append(self._format_templates())
        return "".join(parts)

    def _format_title(self) -> str:
        title = self._config.title
        if self._config.release:
            title = f"{title} {self._config.release}"
        return f"{title}\n\n{TOC_BANNER}\n\n\n{TOC_PREAMBLE}\n\n"

    def _format_table_of_contents(self, report: DisclosureReport) -> str:
        lines: list[str] = []
        for index, tag in enumerate(LicenseTag, start=1):
            lines.append(f"\nSECTION {index}: {tag.value} License\n\n")
            for component in report.go_components_for(tag):
                lines.append(f"  >>> {component.name} {component.version}\n")
            for component in report.npm_components_for(tag):
                lines.append(f"  >>> npm:{component.name} {component.version}\n")
        return "".join(lines)

    def _format_license_list(self) -> str:
        lines = [f"\n{STANDARD_LICENSES_HEADER}\n\n"]
        for tag in LicenseTag:
            lines.append(f"  >>> {tag.value} License\n")
        return "".join(lines)

    def _format_sections(self, report: DisclosureReport) -> str:
        """Format the per-license sections with each component's copyright."""
        lines: list[str] = []
        for index, tag in enumerate(LicenseTag, start=1):
            lines.append(
                f"\n--------------- SECTION {index}: {tag.value} License ----------\n\n"
            )
            for component in report.go_components_for(tag):
                lines.append(
                    f"\n>>> Go package: {component.name} {component.version}\n\n"
                )
                lines.append(component.copyright)
                lines.append(f"\nLicense Type: {component.license.value}\n")
            for component in report.npm_components_for(tag):
                lines.append(
                    f"\n>>> NPM package: {component.name} {component.version}\n\n"
                )
                lines.append(component.copyright)
                lines.append(f"\nLicense Type: {component.license.value}\n")
        return "".join(lines)

    def _format_templates(self) -> str:
        lines = [f"\n{TEMPLATES_BANNER}\n\n\n"]
        for index, tag in enumerate(LicenseTag, start=1):
            lines.append(
                f"\n--------------- APPENDIX {index}: {tag.value} License "
                f"(Template) -----------\n\n"
            )
            lines.append(f"{get_template(tag)}\n")
        return "".join(lines)
