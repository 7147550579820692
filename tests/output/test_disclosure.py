"""Tests for the plain-text disclosure formatter."""
from license_disclosure.models.component import (
    Component,
    DisclosureReport,
    Ecosystem,
    LicenseTag,
)
from license_disclosure.models.config import DisclosureConfig
from license_disclosure.output.disclosure import (
    TEMPLATES_BANNER,
    TOC_BANNER,
    DisclosureFormatter,
)
from license_disclosure.templates import get_template


def _go(name: str, version: str, license_tag: LicenseTag, copyright: str = "text") -> Component:
    return Component(
        name=name,
        version=version,
        copyright=copyright,
        license=license_tag,
        ecosystem=Ecosystem.GO,
    )


def _npm(name: str, version: str, license_tag: LicenseTag, copyright: str = "text") -> Component:
    return Component(
        name=name,
        version=version,
        copyright=copyright,
        license=license_tag,
        ecosystem=Ecosystem.NPM,
    )


class TestDisclosureFormatter:
    """Tests for DisclosureFormatter class."""

    def test_title_block(self) -> None:
        """Test the document opens with the title and table of contents banner."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        assert output.startswith(f"open_source_disclosures\n\n{TOC_BANNER}\n\n\n")

    def test_title_with_release(self) -> None:
        """Test the configured release label is appended to the title."""
        config = DisclosureConfig(title="acme_disclosures", release="2.4.0")

        output = DisclosureFormatter(config).format_report(DisclosureReport())

        assert output.startswith("acme_disclosures 2.4.0\n")

    def test_every_tag_listed_once_in_each_part(self) -> None:
        """Test each tag appears once in the contents, sections and templates."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        for index, tag in enumerate(LicenseTag, start=1):
            assert output.count(f"\nSECTION {index}: {tag.value} License\n") == 1
            assert output.count(f"  >>> {tag.value} License\n") == 1
            assert (
                output.count(
                    f"--------------- SECTION {index}: {tag.value} License ----------"
                )
                == 1
            )
            assert (
                output.count(
                    f"--------------- APPENDIX {index}: {tag.value} License "
                    f"(Template) -----------"
                )
                == 1
            )

    def test_parts_in_order(self) -> None:
        """Test contents come before sections and sections before templates."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        toc = output.index("\nSECTION 1: MIT License\n")
        standard = output.index("APPENDIX: Standard License Files and Templates")
        section = output.index("--------------- SECTION 1: MIT License")
        templates = output.index(TEMPLATES_BANNER)
        appendix = output.index("--------------- APPENDIX 1: MIT License (Template)")

        assert toc < standard < section < templates < appendix

    def test_sections_follow_canonical_order(self) -> None:
        """Test sections are numbered in tag order."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        positions = [
            output.index(f"--------------- SECTION {i}: {tag.value} License")
            for i, tag in enumerate(LicenseTag, start=1)
        ]
        assert positions == sorted(positions)

    def test_contents_entries(self) -> None:
        """Test Go and npm components are listed under their tag."""
        report = DisclosureReport(
            go_components=[_go("golang.org/x/net", "abc", LicenseTag.BSD_3)],
            npm_components=[_npm("left-pad", "1.3.0", LicenseTag.BSD_3)],
        )

        output = DisclosureFormatter().format_report(report)

        assert (
            "\nSECTION 4: BSD-3-Clause License\n\n"
            "  >>> golang.org/x/net abc\n"
            "  >>> npm:left-pad 1.3.0\n"
        ) in output

    def test_go_entries_precede_npm_entries(self) -> None:
        """Test Go components come before npm components within a tag."""
        report = DisclosureReport(
            go_components=[_go("github.com/z/z", "r1", LicenseTag.MIT)],
            npm_components=[_npm("aaa", "1.0.0", LicenseTag.MIT)],
        )

        output = DisclosureFormatter().format_report(report)

        assert output.index("  >>> github.com/z/z r1") < output.index("  >>> npm:aaa 1.0.0")

    def test_component_section_block(self) -> None:
        """Test each component's copyright and license type are printed."""
        report = DisclosureReport(
            go_components=[
                _go("github.com/foo/bar", "r1", LicenseTag.MIT, "Copyright 2014 Foo\n")
            ],
            npm_components=[
                _npm("left-pad", "1.3.0", LicenseTag.MIT, "Copyright not specified.")
            ],
        )

        output = DisclosureFormatter().format_report(report)

        assert (
            "\n>>> Go package: github.com/foo/bar r1\n\n"
            "Copyright 2014 Foo\n"
            "\nLicense Type: MIT\n"
        ) in output
        assert (
            "\n>>> NPM package: left-pad 1.3.0\n\n"
            "Copyright not specified."
            "\nLicense Type: MIT\n"
        ) in output

    def test_templates_appended(self) -> None:
        """Test every template text follows its appendix header."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        for index, tag in enumerate(LicenseTag, start=1):
            header = (
                f"--------------- APPENDIX {index}: {tag.value} License "
                f"(Template) -----------\n\n"
            )
            assert f"{header}{get_template(tag)}\n" in output

    def test_template_banner_spacing(self) -> None:
        """Test three newlines separate the template banner from appendix 1."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        assert (
            f"\n{TEMPLATES_BANNER}\n\n\n\n--------------- APPENDIX 1: MIT License"
        ) in output
        assert f"{TEMPLATES_BANNER}\n\n\n\n\n" not in output

    def test_ends_with_unknown_template(self) -> None:
        """Test the document ends after the last template."""
        output = DisclosureFormatter().format_report(DisclosureReport())

        assert output.endswith(get_template(LicenseTag.UNKNOWN) + "\n")
