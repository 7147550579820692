"""JSON output formatter for disclosure reports."""
import json
from datetime import datetime, timezone
from typing import Any

from license_disclosure import __version__
from license_disclosure.models.component import Component, DisclosureReport


class DisclosureJsonFormatter:
    """Format disclosure reports as JSON for programmatic processing.

    Carries the same components and copyright texts as the plain-text
    document; license templates are left out.
    """

    def format_report(self, report: DisclosureReport) -> str:
        """Format the disclosure report as a JSON string.

        Args:
            report: Resolved components of both ecosystems.

        Returns:
            JSON string representation of the report.
        """
        output = self._build_output(report)
        return json.dumps(output, indent=2)

    def _build_output(self, report: DisclosureReport) -> dict[str, Any]:
        return {
            "scan_metadata": self._build_scan_metadata(),
            "summary": self._build_summary(report),
            "components": [
                self._build_component(c)
                for c in report.go_components + report.npm_components
            ],
        }

    def _build_scan_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
        }

    def _build_summary(self, report: DisclosureReport) -> dict[str, Any]:
        """Build summary section with per-license counts in canonical order."""
        return {
            "total_components": report.total_components,
            "go_components": len(report.go_components),
            "npm_components": len(report.npm_components),
            "unknown_components": len(report.unknown_components),
            "licenses": {
                tag.value: count for tag, count in report.count_by_license().items()
            },
        }

    def _build_component(self, component: Component) -> dict[str, Any]:
        return {
            "ecosystem": component.ecosystem.value,
            "name": component.name,
            "version": component.version,
            "license": component.license.value,
            "evidence": component.evidence.value,
            "copyright": component.copyright,
            "override_reason": component.override_reason,
        }
