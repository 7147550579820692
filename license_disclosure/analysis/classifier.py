"""License text classification.

Maps raw license text onto a LicenseTag with an ordered cascade of
substring checks. Newlines, carriage returns and spaces are stripped from
both the text and the signatures first, so reflowed license files still
match. The first matching rule wins: clause signatures come before the
bare "ISC" and "MIT" fallbacks.
"""

from pathlib import Path
from typing import Callable

from license_disclosure.exceptions import ScanError
from license_disclosure.models.component import LicenseTag


def normalize(text: str) -> str:
    """Remove newlines, carriage returns and spaces from text."""
    return text.replace("\n", "").replace("\r", "").replace(" ", "")


MIT_PERMISSION = normalize(
    "Permission is hereby granted, free of charge, to any person obtaining a "
    'copy of this software and associated documentation files (the "Software"), '
    "to deal in the Software without restriction, including without limitation "
    "the rights to use, copy, modify, merge, publish, distribute, sublicense, "
    "and/or sell copies of the Software, and to permit persons to whom the "
    "Software is furnished to do so, subject to the following conditions"
)

APACHE_2_URL = "http://www.apache.org/licenses/LICENSE-2.0"

BSD_3_ENDORSEMENT = normalize(
    "the names of its contributors may be used to endorse or promote products "
    "derived from this software without specific prior written permission"
)

BSD_2_BINARY_FORM = normalize(
    "Redistributions in binary form must reproduce the above copyright notice, "
    "this list of conditions and the following disclaimer in the documentation "
    "and/or other materials provided with the distribution"
)

ISC_PERMISSION = normalize(
    "distribute this software for any purpose with or without fee is hereby "
    "granted, provided that the above copyright notice and this permission "
    "notice appear in all copies"
)

# Ordered rules over normalized text; order is significant
CLASSIFICATION_RULES: list[tuple[Callable[[str], bool], LicenseTag]] = [
    (lambda s: MIT_PERMISSION in s, LicenseTag.MIT),
    (lambda s: APACHE_2_URL in s, LicenseTag.APACHE_2),
    (lambda s: "ApacheLicense" in s and "2.0" in s, LicenseTag.APACHE_2),
    (lambda s: "MozillaPublicLicense" in s and "2.0" in s, LicenseTag.MPL_2),
    (lambda s: "EclipsePublicLicense" in s, LicenseTag.EPL_1),
    (lambda s: "CreativeCommonsPublicLicenses" in s, LicenseTag.CREATIVE_COMMONS),
    (lambda s: BSD_3_ENDORSEMENT in s, LicenseTag.BSD_3),
    (lambda s: BSD_2_BINARY_FORM in s, LicenseTag.BSD_2),
    (lambda s: ISC_PERMISSION in s, LicenseTag.ISC),
    (lambda s: "ISC" in s, LicenseTag.ISC),
    (lambda s: "MIT" in s, LicenseTag.MIT),
]


def classify(text: str) -> LicenseTag:
    """Classify license text.

    Args:
        text: Raw license, readme or declared-license text.

    Returns:
        The tag of the first matching rule, or LicenseTag.UNKNOWN.
    """
    normalized = normalize(text)
    for matches, tag in CLASSIFICATION_RULES:
        if matches(normalized):
            return tag
    return LicenseTag.UNKNOWN


def read_text(path: Path) -> str:
    """Read an evidence file, tolerating invalid UTF-8.

    Raises:
        ScanError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ScanError(f"Cannot read '{path}': {e}") from e


def classify_file(path: Path) -> LicenseTag:
    """Classify the contents of a license file.

    Raises:
        ScanError: If the file cannot be read.
    """
    return classify(read_text(path))
