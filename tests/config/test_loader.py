"""Tests for configuration file loader."""
from __future__ import annotations

from pathlib import Path

import pytest

from license_disclosure.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_disclosure.exceptions import ConfigurationError
from license_disclosure.models.component import LicenseTag
from license_disclosure.models.config import DisclosureConfig


class TestFindConfigFile:
    """Tests for find_config_file function."""

    def test_finds_yaml_extension(self, tmp_path: Path) -> None:
        """Test that .yaml extension is found."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("npm_dir: web\n")

        assert find_config_file(tmp_path) == config_file

    def test_finds_yml_extension(self, tmp_path: Path) -> None:
        """Test that .yml extension is found."""
        config_file = tmp_path / ".license-disclosure.yml"
        config_file.write_text("npm_dir: web\n")

        assert find_config_file(tmp_path) == config_file

    def test_prefers_yaml_over_yml(self, tmp_path: Path) -> None:
        """Test that .yaml wins when both exist."""
        yaml_file = tmp_path / ".license-disclosure.yaml"
        yaml_file.write_text("npm_dir: a\n")
        (tmp_path / ".license-disclosure.yml").write_text("npm_dir: b\n")

        assert find_config_file(tmp_path) == yaml_file

    def test_ignores_directory_with_config_name(self, tmp_path: Path) -> None:
        """Test that a directory named like the settings file is skipped."""
        (tmp_path / ".license-disclosure.yaml").mkdir()

        assert find_config_file(tmp_path) is None

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Test that None is returned when no config file exists."""
        assert find_config_file(tmp_path) is None


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_loads_valid_config(self, tmp_path: Path) -> None:
        """Test that a full configuration is parsed."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text(
            "vendor_manifest: third_party/vendor.json\n"
            "vendor_root: third_party\n"
            "npm_dir: null\n"
            "release: 2.4.0\n"
            "ignored_packages:\n"
            "  - github.com/example/internal\n"
            "overrides:\n"
            "  github.com/foo/bar:\n"
            "    license: Apache-2.0\n"
            "    reason: Dual licensed, Apache chosen\n"
        )

        config = load_config_file(config_file)

        assert config.vendor_manifest == "third_party/vendor.json"
        assert config.npm_dir is None
        assert config.release == "2.4.0"
        assert config.ignored_packages == ["github.com/example/internal"]
        assert config.overrides is not None
        assert config.overrides["github.com/foo/bar"].license is LicenseTag.APACHE_2

    def test_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file yields the default configuration."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("")

        assert load_config_file(config_file) == DisclosureConfig()

    def test_comment_only_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that a file with only comments yields defaults."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("# nothing configured yet\n")

        assert load_config_file(config_file) == DisclosureConfig()

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that malformed YAML raises ConfigurationError."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("npm_dir: [unclosed\n")

        with pytest.raises(ConfigurationError, match="is not valid YAML"):
            load_config_file(config_file)

    def test_non_mapping_root_raises(self, tmp_path: Path) -> None:
        """Test that a list at the root raises ConfigurationError."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("- vendor\n- browser\n")

        with pytest.raises(ConfigurationError, match="must hold a mapping"):
            load_config_file(config_file)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        """Test that unknown keys are reported with their location."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text("vendor_dir: third_party\n")

        with pytest.raises(ConfigurationError, match="vendor_dir"):
            load_config_file(config_file)

    def test_invalid_override_tag_raises(self, tmp_path: Path) -> None:
        """Test that an override outside the tag set is rejected."""
        config_file = tmp_path / ".license-disclosure.yaml"
        config_file.write_text(
            "overrides:\n  foo:\n    license: GPL-3.0\n    reason: nope\n"
        )

        with pytest.raises(ConfigurationError, match="overrides.foo.license"):
            load_config_file(config_file)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Test that an unreadable file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read settings file"):
            load_config_file(tmp_path / "missing.yaml")


class TestLoadConfig:
    """Tests for load_config function."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test that an explicit path is loaded."""
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("title: Third party notices\n")

        config = load_config(str(config_file))

        assert config.title == "Third party notices"

    def test_discovers_in_project_dir(self, tmp_path: Path) -> None:
        """Test that the project directory is searched."""
        (tmp_path / ".license-disclosure.yml").write_text("npm_dir: web\n")

        assert load_config(project_dir=tmp_path).npm_dir == "web"

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """Test that defaults are returned when no file exists."""
        assert load_config(project_dir=tmp_path) == DisclosureConfig()
