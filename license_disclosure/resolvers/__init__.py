"""Evidence and manifest resolvers."""

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

__all__ = [
    "extract_readme_copyright",
    "find_license_file",
    "find_license_file_upward",
    "find_readme",
    "get_copyright",
    "list_npm_packages",
    "load_package_metadata",
    "load_vendor_manifest",
]
