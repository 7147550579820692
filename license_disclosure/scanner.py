"""Scanner module for dependency discovery and license resolution."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape

from license_disclosure.analysis.classifier import classify, classify_file, read_text
from license_disclosure.analysis.overrides import (
    apply_license_overrides,
    filter_ignored_components,
)
from license_disclosure.constants import COPYRIGHT_NOT_SPECIFIED, MODULE_AUTHOR_PREFIX
from license_disclosure.models.component import (
    Component,
    DisclosureReport,
    Ecosystem,
    EvidenceSource,
    LicenseTag,
)
from license_disclosure.models.config import DisclosureConfig
from license_disclosure.models.manifest import PackageMetadata, VendorManifest
from license_disclosure.resolvers.evidence import (
    extract_readme_copyright,
    find_license_file,
    find_license_file_upward,
    find_readme,
    get_copyright,
)
from license_disclosure.resolvers.manifest import (
    load_package_metadata,
    load_vendor_manifest,
)
from license_disclosure.resolvers.npm import list_npm_packages
from license_disclosure.templates import GO_LICENSE

# Licenses whose text is boilerplate; only the copyright notice is shown
GO_ATTRIBUTION_LICENSES = {LicenseTag.APACHE_2, LicenseTag.MPL_2, LicenseTag.EPL_1}
NPM_ATTRIBUTION_LICENSES = GO_ATTRIBUTION_LICENSES | {LicenseTag.CREATIVE_COMMONS}

# Source files searched for license header comments, per ecosystem
GO_SOURCE_SUFFIXES = (".go",)
NPM_SOURCE_SUFFIXES = (".js",)


def _log(console: Optional[Console], message: str) -> None:
    """Print a diagnostic line when a console is attached."""
    if console is not None:
        console.print(message, highlight=False)


def is_stdlib_mirror(import_path: str, prefixes: list[str]) -> bool:
    """Check if an import path belongs to a standard-library mirror namespace."""
    return any(import_path.startswith(prefix) for prefix in prefixes)


def resolve_go_components(
    manifest: VendorManifest,
    vendor_root: Path,
    config: DisclosureConfig,
    console: Optional[Console] = None,
) -> list[Component]:
    """Resolve license information for every pinned Go vendor entry.

    Args:
        manifest: Parsed vendor manifest.
        vendor_root: Directory holding the vendored sources.
        config: Configuration (standard-library prefixes).
        console: Optional Rich Console for diagnostics.

    Returns:
        One Component per resolved entry, in manifest order. Entries
        without a revision or without any license file are skipped.

    Raises:
        ScanError: If a package directory or license file cannot be read.
    """
    components: list[Component] = []

    for package in manifest.package:
        if not package.is_resolved:
            continue

        if is_stdlib_mirror(package.path, config.stdlib_prefixes):
            components.append(
                Component(
                    name=package.path,
                    version=package.revision,
                    copyright=GO_LICENSE,
                    license=LicenseTag.BSD_3,
                    ecosystem=Ecosystem.GO,
                    evidence=EvidenceSource.STDLIB,
                )
            )
            _log(
                console,
                f"[dim]go[/dim] {escape(package.path)}: BSD-3-Clause (stdlib mirror)",
            )
            continue

        found = find_license_file_upward(vendor_root / package.path, vendor_root)
        if found is None:
            _log(
                console,
                f"[yellow]go {escape(package.path)}: no license file found, skipped[/yellow]",
            )
            continue

        license_dir, license_file = found
        license_tag = classify_file(license_file)
        if license_tag in GO_ATTRIBUTION_LICENSES:
            copyright_text = (
                get_copyright(license_dir, GO_SOURCE_SUFFIXES) or COPYRIGHT_NOT_SPECIFIED
            )
        else:
            copyright_text = read_text(license_file)

        components.append(
            Component(
                name=package.path,
                version=package.revision,
                copyright=copyright_text,
                license=license_tag,
                ecosystem=Ecosystem.GO,
                evidence=EvidenceSource.LICENSE_FILE,
            )
        )
        _log(
            console,
            f"[dim]go[/dim] {escape(package.path)}: {license_tag.value} "
            f"({escape(str(license_file))})",
        )

    return components


def fallback_copyright(metadata: PackageMetadata) -> str:
    """Copyright text used when no notice exists, naming the author if declared."""
    author = metadata.author_display
    if author:
        return COPYRIGHT_NOT_SPECIFIED + MODULE_AUTHOR_PREFIX + author
    return COPYRIGHT_NOT_SPECIFIED


def resolve_npm_component(package_dir: Path) -> Component:
    """Resolve license information for one installed npm package.

    Evidence is tried in order: a license file, the readme, then the
    declared fields of `package.json`.

    Args:
        package_dir: Installed package directory.

    Returns:
        The resolved Component.

    Raises:
        ManifestError: If `package.json` is missing or invalid.
        ScanError: If a located evidence file cannot be read.
    """
    metadata = load_package_metadata(package_dir)
    declared = LicenseTag.from_declared(metadata.declared_license)

    license_file = find_license_file(package_dir)
    if license_file is not None:
        license_tag = classify_file(license_file)
        if license_tag in NPM_ATTRIBUTION_LICENSES:
            copyright_text = get_copyright(
                package_dir, NPM_SOURCE_SUFFIXES
            ) or fallback_copyright(metadata)
        else:
            copyright_text = read_text(license_file)
        return _npm_component(
            metadata, copyright_text, license_tag, EvidenceSource.LICENSE_FILE
        )

    readme = find_readme(package_dir)
    if readme is None:
        return _npm_component(
            metadata,
            fallback_copyright(metadata),
            declared or LicenseTag.UNKNOWN,
            EvidenceSource.METADATA,
        )

    readme_text = read_text(readme)
    readme_tag = classify(readme_text)
    copyright_text = extract_readme_copyright(readme_text)
    if copyright_text is None:
        return _npm_component(
            metadata,
            fallback_copyright(metadata),
            declared or readme_tag,
            EvidenceSource.METADATA,
        )
    return _npm_component(metadata, copyright_text, readme_tag, EvidenceSource.README)


def _npm_component(
    metadata: PackageMetadata,
    copyright_text: str,
    license_tag: LicenseTag,
    evidence: EvidenceSource,
) -> Component:
    return Component(
        name=metadata.name,
        version=metadata.version,
        copyright=copyright_text,
        license=license_tag,
        ecosystem=Ecosystem.NPM,
        evidence=evidence,
    )


def resolve_npm_components(
    package_dirs: list[Path],
    console: Optional[Console] = None,
) -> list[Component]:
    """Resolve license information for installed npm packages.

    Args:
        package_dirs: Installed package directories in listing order.
        console: Optional Rich Console for diagnostics.

    Returns:
        One Component per directory, in the same order.
    """
    components: list[Component] = []
    for package_dir in package_dirs:
        component = resolve_npm_component(package_dir)
        components.append(component)
        _log(
            console,
            f"[dim]npm[/dim] {escape(component.name)} {component.version}: "
            f"{component.license.value} ({component.evidence.value})",
        )
    return components


def run_scan(
    project_dir: Path,
    config: DisclosureConfig,
    console: Optional[Console] = None,
    skip_npm: bool = False,
) -> DisclosureReport:
    """Scan both ecosystems of a project and build the disclosure report.

    The Go vendor tree is scanned first, then the npm project. Nothing is
    returned unless both phases complete.

    Args:
        project_dir: Project root; relative config paths resolve against it.
        config: Scan configuration.
        console: Optional Rich Console for diagnostics.
        skip_npm: Skip the npm phase regardless of configuration.

    Returns:
        DisclosureReport with overrides applied and ignored packages removed.

    Raises:
        ManifestError: If a manifest or package.json cannot be read.
        ScanError: If the filesystem walk or npm listing fails.
    """
    manifest = load_vendor_manifest(project_dir / config.vendor_manifest)
    go_components = resolve_go_components(
        manifest, project_dir / config.vendor_root, config, console
    )

    npm_components: list[Component] = []
    if config.npm_dir is not None and not skip_npm:
        package_dirs = list_npm_packages(project_dir / config.npm_dir, config.npm_command)
        npm_components = resolve_npm_components(package_dirs, console)

    go_components = apply_license_overrides(
        filter_ignored_components(go_components, config), config
    )
    npm_components = apply_license_overrides(
        filter_ignored_components(npm_components, config), config
    )

    return DisclosureReport(go_components=go_components, npm_components=npm_components)
