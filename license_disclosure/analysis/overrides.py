"""License override and ignore handling for resolved components."""
from __future__ import annotations

from license_disclosure.models.component import Component
from license_disclosure.models.config import DisclosureConfig


def apply_license_overrides(
    components: list[Component],
    config: DisclosureConfig,
) -> list[Component]:
    """Apply manual license overrides to components.

    Overrides replace the tag only; the extracted copyright text is kept.
    Package name matching is case-sensitive.

    Args:
        components: Resolved components.
        config: Configuration with overrides dict.

    Returns:
        Components with overrides applied, in input order.
    """
    if not config.overrides:
        return components

    result: list[Component] = []
    for component in components:
        override = config.overrides.get(component.name)
        if override is None:
            result.append(component)
            continue
        result.append(
            component.model_copy(
                update={"license": override.license, "override_reason": override.reason}
            )
        )
    return result


def filter_ignored_components(
    components: list[Component],
    config: DisclosureConfig,
) -> list[Component]:
    """Drop components listed in `ignored_packages`."""
    if not config.ignored_packages:
        return components

    ignored = set(config.ignored_packages)
    return [c for c in components if c.name not in ignored]
