"""License analysis logic for license-disclosure."""
from license_disclosure.analysis.classifier import classify, classify_file, normalize
from license_disclosure.analysis.overrides import (
    apply_license_overrides,
    filter_ignored_components,
)

__all__ = [
    "apply_license_overrides",
    "classify",
    "classify_file",
    "filter_ignored_components",
    "normalize",
]
