"""Tests for constants module."""
from license_disclosure.constants import (
    COPYRIGHT_NOT_SPECIFIED,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    MODULE_AUTHOR_PREFIX,
)


class TestExitCodes:
    """Tests for exit code constants."""

    def test_exit_codes_are_distinct(self) -> None:
        """Test exit codes are 0, 1 and 2."""
        assert (EXIT_SUCCESS, EXIT_ISSUES, EXIT_ERROR) == (0, 1, 2)


class TestFallbackCopyright:
    """Tests for fallback copyright constants."""

    def test_not_specified_text(self) -> None:
        """Test the placeholder copyright text."""
        assert COPYRIGHT_NOT_SPECIFIED == "Copyright not specified."

    def test_author_prefix_combines(self) -> None:
        """Test the author suffix reads naturally after the placeholder."""
        combined = COPYRIGHT_NOT_SPECIFIED + MODULE_AUTHOR_PREFIX + "Jane"
        assert combined == "Copyright not specified. Module author: Jane"
