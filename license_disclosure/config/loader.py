"""Loading of `.license-disclosure.yaml` project settings."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_disclosure.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_disclosure.exceptions import ConfigurationError
from license_disclosure.models.config import DisclosureConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Locate the settings file of a project.

    Only the project root is checked; `.yaml` wins over `.yml`.

    Args:
        start_dir: Project root. Defaults to the current working directory.

    Returns:
        Path of the settings file, or None if the project has none.
    """
    project_root = start_dir or Path.cwd()
    for name in DEFAULT_CONFIG_NAMES:
        candidate = project_root / name
        if candidate.is_file():
            return candidate
    return None


def _read_settings(path: Path) -> Any:
    """Parse a settings file; blank and comment-only files yield None."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file '{path}': {e}") from e

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Settings file '{path}' is not valid YAML: {e}") from e


def load_config_file(path: Path) -> DisclosureConfig:
    """Build the scan settings from a YAML file.

    Keys left out keep their stock values (Go `vendor/`, npm `browser/`).

    Args:
        path: Settings file.

    Returns:
        Validated DisclosureConfig.

    Raises:
        ConfigurationError: If the file is unreadable, not YAML, not a
            mapping, or names unknown keys or license tags.
    """
    data = _read_settings(path)
    if data is None:
        return get_default_config()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Settings file '{path}' must hold a mapping of options, "
            f"not a {type(data).__name__}"
        )

    try:
        return DisclosureConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(
            f"Bad settings in '{path}': {_describe_problems(e)}"
        ) from e


def _describe_problems(error: ValidationError) -> str:
    """One `option.path: message` entry per validation problem."""
    return "; ".join(
        f"{'.'.join(str(part) for part in problem['loc']) or 'root'}: {problem['msg']}"
        for problem in error.errors()
    )


def load_config(
    config_path: str | None = None, project_dir: Path | None = None
) -> DisclosureConfig:
    """Resolve the settings for one scan.

    An explicit `--config` file wins; otherwise the project root is
    checked for a settings file; otherwise the stock settings apply.

    Raises:
        ConfigurationError: If the chosen settings file is invalid.
    """
    if config_path is not None:
        return load_config_file(Path(config_path))

    discovered = find_config_file(project_dir)
    if discovered is None:
        return get_default_config()
    return load_config_file(discovered)
