"""Tests for canonical license templates."""
import pytest

from license_disclosure.analysis.classifier import classify
from license_disclosure.models.component import LicenseTag
from license_disclosure.templates import GO_LICENSE, LICENSE_TEMPLATES, get_template


class TestTemplates:
    """Tests for the license template table."""

    def test_every_tag_has_template(self) -> None:
        """Test the table covers the whole tag set."""
        assert set(LICENSE_TEMPLATES) == set(LicenseTag)

    @pytest.mark.parametrize("tag", list(LicenseTag))
    def test_template_classifies_as_its_tag(self, tag: LicenseTag) -> None:
        """Test each template is recognized by the classifier as its own tag."""
        assert classify(get_template(tag)) is tag

    @pytest.mark.parametrize("tag", list(LicenseTag))
    def test_template_is_non_empty(self, tag: LicenseTag) -> None:
        """Test no template is blank."""
        assert get_template(tag).strip()


class TestGoLicense:
    """Tests for the hardcoded Go license."""

    def test_classifies_as_bsd_3(self) -> None:
        """Test the Go license is a BSD-3-Clause text."""
        assert classify(GO_LICENSE) is LicenseTag.BSD_3

    def test_names_go_authors(self) -> None:
        """Test the Go authors' copyright line is present."""
        assert "Copyright (c) 2009 The Go Authors. All rights reserved." in GO_LICENSE
