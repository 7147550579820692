"""Constants for license-disclosure."""

# Exit codes
EXIT_SUCCESS = 0  # Report generated
EXIT_ISSUES = 1  # Report generated, unclassified components found (--strict)
EXIT_ERROR = 2  # Scan aborted due to error

# Copyright text used when no notice can be located
COPYRIGHT_NOT_SPECIFIED = "Copyright not specified."

# Prefix added before a declared package author in fallback copyright text
MODULE_AUTHOR_PREFIX = " Module author: "
