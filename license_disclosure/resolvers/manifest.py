"""Loading of dependency manifests and package metadata."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from license_disclosure.exceptions import ManifestError
from license_disclosure.models.manifest import PackageMetadata, VendorManifest

# npm package metadata file name
PACKAGE_JSON = "package.json"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _load_json_model(path: Path, model: type[_ModelT]) -> _ModelT:
    """Read a JSON document and validate it against a model.

    Raises:
        ManifestError: If the file is unreadable, not JSON, or invalid.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read '{path}': {e}") from e

    try:
        data: Any = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(
            f"Invalid manifest '{path}': expected an object, got {type(data).__name__}"
        )

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest '{path}': {e}") from e


def load_vendor_manifest(path: Path) -> VendorManifest:
    """Load the Go vendor manifest.

    Args:
        path: Path of `vendor.json`.

    Returns:
        Parsed manifest, entries in file order.

    Raises:
        ManifestError: If the manifest cannot be read or decoded.
    """
    return _load_json_model(path, VendorManifest)


def load_package_metadata(package_dir: Path) -> PackageMetadata:
    """Load `package.json` from an installed npm package directory.

    Args:
        package_dir: Installed package directory.

    Returns:
        Parsed package metadata.

    Raises:
        ManifestError: If `package.json` is missing, unreadable or invalid.
    """
    return _load_json_model(package_dir / PACKAGE_JSON, PackageMetadata)
