"""Tests for license and copyright evidence location."""
from pathlib import Path

import pytest

from license_disclosure.exceptions import ScanError
from license_disclosure.resolvers.evidence import (
    README_FILES,
    extract_leading_comment,
    extract_readme_copyright,
    find_license_file,
    find_license_file_upward,
    find_readme,
    find_source_header,
    get_copyright,
)

GO_HEADER = """// Copyright 2015 The Example Authors. All rights reserved.
// Use of this source code is governed by a BSD-style
// license that can be found in the LICENSE file.

package example
"""


class TestFindLicenseFile:
    """Tests for find_license_file function."""

    def test_finds_license(self, tmp_path: Path) -> None:
        """Test a plain LICENSE file is found."""
        (tmp_path / "LICENSE").write_text("MIT")

        assert find_license_file(tmp_path) == tmp_path / "LICENSE"

    @pytest.mark.parametrize(
        "name", ["LICENSE.txt", "LICENCE", "license.md", "MIT-LICENSE", "UNLICENSE"]
    )
    def test_name_variants(self, tmp_path: Path, name: str) -> None:
        """Test names containing a license marker are found."""
        (tmp_path / name).write_text("text")

        assert find_license_file(tmp_path) == tmp_path / name

    def test_marker_match_is_case_sensitive(self, tmp_path: Path) -> None:
        """Test mixed-case names such as 'License.md' are not matched."""
        (tmp_path / "License.md").write_text("text")

        assert find_license_file(tmp_path) is None

    def test_prefers_license_mit(self, tmp_path: Path) -> None:
        """Test LICENSE.MIT wins over lexically earlier candidates."""
        (tmp_path / "LICENSE").write_text("Apache")
        (tmp_path / "LICENSE.APACHE").write_text("Apache")
        (tmp_path / "LICENSE.MIT").write_text("MIT")

        assert find_license_file(tmp_path) == tmp_path / "LICENSE.MIT"

    def test_first_match_by_name(self, tmp_path: Path) -> None:
        """Test the lexically first candidate is returned."""
        (tmp_path / "LICENSE-MIT").write_text("MIT")
        (tmp_path / "LICENSE-APACHE").write_text("Apache")

        assert find_license_file(tmp_path) == tmp_path / "LICENSE-APACHE"

    def test_ignores_directories(self, tmp_path: Path) -> None:
        """Test a directory named like a license file is skipped."""
        (tmp_path / "licenses").mkdir()

        assert find_license_file(tmp_path) is None

    def test_returns_none_without_candidates(self, tmp_path: Path) -> None:
        """Test None when nothing looks like a license file."""
        (tmp_path / "README.md").write_text("readme")

        assert find_license_file(tmp_path) is None

    def test_missing_directory_raises_scan_error(self, tmp_path: Path) -> None:
        """Test a missing package directory is fatal."""
        with pytest.raises(ScanError, match="Cannot list directory"):
            find_license_file(tmp_path / "missing")


class TestFindLicenseFileUpward:
    """Tests for find_license_file_upward function."""

    def test_finds_in_start_directory(self, tmp_path: Path) -> None:
        """Test a license next to the package is used first."""
        root = tmp_path / "vendor"
        package = root / "github.com" / "foo" / "bar"
        package.mkdir(parents=True)
        (package / "LICENSE").write_text("MIT")

        assert find_license_file_upward(package, root) == (package, package / "LICENSE")

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        """Test vendor/a/b/c resolves to the license in vendor/a."""
        root = tmp_path / "vendor"
        start = root / "a" / "b" / "c"
        start.mkdir(parents=True)
        (root / "a" / "LICENSE").write_text("MIT")

        result = find_license_file_upward(start, root)

        assert result == (root / "a", root / "a" / "LICENSE")

    def test_nearest_license_wins(self, tmp_path: Path) -> None:
        """Test the closest ancestor's license is returned."""
        root = tmp_path / "vendor"
        start = root / "a" / "b" / "c"
        start.mkdir(parents=True)
        (root / "a" / "LICENSE").write_text("outer")
        (root / "a" / "b" / "LICENSE").write_text("inner")

        result = find_license_file_upward(start, root)

        assert result == (root / "a" / "b", root / "a" / "b" / "LICENSE")

    def test_does_not_search_root_or_above(self, tmp_path: Path) -> None:
        """Test license files at or above the ecosystem root are ignored."""
        root = tmp_path / "vendor"
        start = root / "a" / "b" / "c"
        start.mkdir(parents=True)
        (root / "LICENSE").write_text("root license")
        (tmp_path / "LICENSE").write_text("project license")

        assert find_license_file_upward(start, root) is None

    def test_start_outside_root_is_not_searched(self, tmp_path: Path) -> None:
        """Test a start directory escaping the root finds nothing."""
        root = tmp_path / "vendor"
        root.mkdir()
        outside = tmp_path / "elsewhere"
        outside.mkdir()
        (outside / "LICENSE").write_text("MIT")

        assert find_license_file_upward(outside, root) is None

    def test_missing_package_directory_raises(self, tmp_path: Path) -> None:
        """Test a declared package that is not on disk is fatal."""
        root = tmp_path / "vendor"
        root.mkdir()

        with pytest.raises(ScanError):
            find_license_file_upward(root / "missing" / "pkg", root)


class TestExtractLeadingComment:
    """Tests for extract_leading_comment function."""

    def test_line_comment_group(self) -> None:
        """Test consecutive // lines form one block."""
        result = extract_leading_comment(GO_HEADER)

        assert result == (
            "Copyright 2015 The Example Authors. All rights reserved.\n"
            "Use of this source code is governed by a BSD-style\n"
            "license that can be found in the LICENSE file.\n"
        )

    def test_stops_at_blank_line(self) -> None:
        """Test a blank line ends the comment group."""
        source = "// first\n\n// second\npackage x\n"

        assert extract_leading_comment(source) == "first\n"

    def test_block_comment(self) -> None:
        """Test /* */ comments have their markers and decorations removed."""
        source = "/*\n * Copyright 2017 Foo\n * Licensed under MIT\n */\nvar x = 1;\n"

        assert extract_leading_comment(source) == "Copyright 2017 Foo\nLicensed under MIT\n"

    def test_first_comment_after_code(self) -> None:
        """Test the first comment is found even after a package clause."""
        source = "package x\n\n// Licensed under the Apache License\nfunc f() {}\n"

        assert extract_leading_comment(source) == "Licensed under the Apache License\n"

    def test_no_comment(self) -> None:
        """Test empty string when the file has no comments."""
        assert extract_leading_comment("package x\n") == ""


class TestFindSourceHeader:
    """Tests for find_source_header function."""

    def test_returns_qualifying_header(self, tmp_path: Path) -> None:
        """Test a header mentioning a license is returned."""
        (tmp_path / "a.go").write_text(GO_HEADER)

        assert "license that can be found" in find_source_header(tmp_path, (".go",))

    def test_skips_non_license_comments(self, tmp_path: Path) -> None:
        """Test the scan continues past files without license headers."""
        (tmp_path / "a.go").write_text("// Package a does things.\npackage a\n")
        (tmp_path / "b.go").write_text(GO_HEADER)

        result = find_source_header(tmp_path, (".go",))

        assert result.startswith("Copyright 2015 The Example Authors")

    def test_lexical_depth_first_order(self, tmp_path: Path) -> None:
        """Test subdirectories are visited in name order with files."""
        (tmp_path / "a").mkdir()
        (tmp_path / "a" / "x.go").write_text("// License: from a\n")
        (tmp_path / "b.go").write_text("// License: from b\n")

        assert find_source_header(tmp_path, (".go",)) == "License: from a\n"

    def test_ignores_other_suffixes(self, tmp_path: Path) -> None:
        """Test files with other suffixes are not read."""
        (tmp_path / "a.js").write_text("// Licensed MIT\n")

        assert find_source_header(tmp_path, (".go",)) == ""

    def test_skips_nested_node_modules(self, tmp_path: Path) -> None:
        """Test bundled dependencies are not mistaken for the package."""
        nested = tmp_path / "node_modules" / "dep"
        nested.mkdir(parents=True)
        (nested / "index.js").write_text("// Licensed MIT\n")

        assert find_source_header(tmp_path, (".js",)) == ""


class TestGetCopyright:
    """Tests for get_copyright function."""

    def test_notice_file_verbatim(self, tmp_path: Path) -> None:
        """Test NOTICE is returned unchanged."""
        (tmp_path / "NOTICE").write_text("Example\nCopyright 2014 Example Inc.\n")
        (tmp_path / "DISTRIBUTION").write_text("other")

        assert get_copyright(tmp_path) == "Example\nCopyright 2014 Example Inc.\n"

    def test_distribution_file_when_no_notice(self, tmp_path: Path) -> None:
        """Test DISTRIBUTION is used when there is no NOTICE."""
        (tmp_path / "DISTRIBUTION").write_text("Copyright 2016 Dist\n")
        (tmp_path / "a.go").write_text(GO_HEADER)

        assert get_copyright(tmp_path) == "Copyright 2016 Dist\n"

    def test_source_header_fallback(self, tmp_path: Path) -> None:
        """Test a license header comment is used when no notice files exist."""
        (tmp_path / "a.go").write_text(GO_HEADER)

        assert get_copyright(tmp_path).startswith("Copyright 2015")

    def test_custom_suffixes(self, tmp_path: Path) -> None:
        """Test the source suffixes can be chosen per ecosystem."""
        (tmp_path / "index.js").write_text("/* Licensed under Apache 2.0 */\n")

        assert get_copyright(tmp_path, (".js",)) == "Licensed under Apache 2.0\n"

    def test_empty_when_nothing_found(self, tmp_path: Path) -> None:
        """Test empty string when there is no copyright evidence."""
        (tmp_path / "a.go").write_text("package a\n")

        assert get_copyright(tmp_path) == ""


class TestFindReadme:
    """Tests for find_readme function."""

    def test_finds_readme(self, tmp_path: Path) -> None:
        """Test README.md is found."""
        (tmp_path / "README.md").write_text("# Foo")

        assert find_readme(tmp_path) == tmp_path / "README.md"

    def test_variant_order(self) -> None:
        """Test readme variants are tried in the documented order."""
        assert README_FILES == ["README.md", "README.MD", "README", "Readme.md", "readme.md"]

    def test_plain_readme(self, tmp_path: Path) -> None:
        """Test an extensionless README is found."""
        (tmp_path / "README").write_text("Foo")

        assert find_readme(tmp_path) == tmp_path / "README"

    def test_returns_none_without_readme(self, tmp_path: Path) -> None:
        """Test None when the package has no readme."""
        (tmp_path / "README.rst").write_text("Foo")

        assert find_readme(tmp_path) is None


class TestExtractReadmeCopyright:
    """Tests for extract_readme_copyright function."""

    def test_takes_from_copyright_to_end(self) -> None:
        """Test the copyright line and everything after it is returned."""
        text = "# Foo\nsome text Copyright 2020 Jane\nmore text"

        assert extract_readme_copyright(text) == "Copyright 2020 Jane\nmore text"

    def test_lowercase_copyright(self) -> None:
        """Test lowercase 'copyright' is found as well."""
        assert extract_readme_copyright("## License\ncopyright (c) Bob") == "copyright (c) Bob"

    def test_no_copyright(self) -> None:
        """Test None when the readme never mentions a copyright."""
        assert extract_readme_copyright("# Foo\nMIT licensed") is None

    def test_match_at_start_of_text(self) -> None:
        """Test a match at offset zero does not wrap around."""
        assert extract_readme_copyright("opyright odd") == "opyright odd"
