"""Evidence location for license and copyright information.

Finds the files on disk that say something about a dependency's license:
a dedicated license file, a NOTICE or DISTRIBUTION file, a license header
comment in a source file, or a readme. Missing evidence is never an error;
callers fall through to the next strategy.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Optional

from license_disclosure.analysis.classifier import read_text
from license_disclosure.exceptions import ScanError

# Preferred over any other license file in the same directory
PREFERRED_LICENSE_FILE = "LICENSE.MIT"

# Case-sensitive fragments identifying a license file name
LICENSE_NAME_MARKERS = ("LICENSE", "LICENCE", "license")

# Copyright files read verbatim, in priority order
COPYRIGHT_FILES = ("NOTICE", "DISTRIBUTION")

# Readme file names, tried in order
README_FILES = ["README.md", "README.MD", "README", "Readme.md", "readme.md"]

# Subdirectories holding other packages' sources
SKIPPED_SOURCE_DIRS = {"node_modules", ".git"}

# A run of `//` lines or a `/* ... */` block starting a line
_COMMENT_PATTERN = re.compile(
    r"^[ \t]*(//[^\n]*(?:\n[ \t]*//[^\n]*)*|/\*.*?\*/)",
    re.MULTILINE | re.DOTALL,
)


def find_license_file(directory: Path) -> Optional[Path]:
    """Find a license file directly inside a directory.

    Args:
        directory: Directory to inspect (not recursive).

    Returns:
        Path of `LICENSE.MIT` if present, otherwise the first file (by name)
        whose name contains a license marker, or None.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    preferred = directory / PREFERRED_LICENSE_FILE
    if preferred.is_file():
        return preferred

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ScanError(f"Cannot list directory '{directory}': {e}") from e

    for entry in entries:
        if not entry.is_file():
            continue
        if any(marker in entry.name for marker in LICENSE_NAME_MARKERS):
            return entry
    return None


def find_license_file_upward(
    start: Path, root: Path
) -> Optional[tuple[Path, Path]]:
    """Search for a license file from a directory up towards an ecosystem root.

    License files of Go packages often live at the repository boundary
    rather than in the imported subpackage, so each parent is tried in
    turn. The root itself is never searched, nor is anything above it.

    Args:
        start: Installed directory of the dependency.
        root: Ecosystem root (e.g. the `vendor` directory).

    Returns:
        Tuple of (directory the file was found in, license file path),
        or None if no license file exists below the root.

    Raises:
        ScanError: If a directory on the way cannot be listed.
    """
    directory = start
    while directory != root and directory.is_relative_to(root):
        license_file = find_license_file(directory)
        if license_file is not None:
            return directory, license_file
        directory = directory.parent
    return None


def extract_leading_comment(source: str) -> str:
    """Extract the text of the first comment block in a C-style source file.

    Comment markers are removed along with leading and trailing blank
    lines. Non-empty results end with a newline.
    """
    match = _COMMENT_PATTERN.search(source)
    if match is None:
        return ""

    block = match.group(1)
    lines: list[str] = []
    if block.startswith("//"):
        for line in block.splitlines():
            text = line.strip()[2:]
            lines.append(text[1:] if text.startswith(" ") else text)
    else:
        for line in block[2:-2].splitlines():
            text = line.strip()
            if text.startswith("*"):
                text = text[1:]
                text = text[1:] if text.startswith(" ") else text
            lines.append(text.rstrip())

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _iter_source_files(directory: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    """Yield source files depth-first in lexical order.

    Unreadable subdirectories are skipped.
    """
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        return

    for entry in entries:
        if entry.is_dir() and not entry.is_symlink():
            if entry.name in SKIPPED_SOURCE_DIRS:
                continue
            yield from _iter_source_files(entry, suffixes)
        elif entry.name.endswith(suffixes) and entry.is_file():
            yield entry


def find_source_header(directory: Path, suffixes: tuple[str, ...]) -> str:
    """Find the first source file whose leading comment mentions a license.

    Args:
        directory: Package directory to walk.
        suffixes: Source file suffixes to consider (e.g. (".go",)).

    Returns:
        The qualifying comment text, or empty string if none found.
    """
    for source_file in _iter_source_files(directory, suffixes):
        try:
            source = source_file.read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
        comment = extract_leading_comment(source)
        if "icense" in comment:
            return comment
    return ""


def get_copyright(directory: Path, suffixes: tuple[str, ...] = (".go",)) -> str:
    """Extract copyright text for a package directory.

    Tries NOTICE, then DISTRIBUTION (both verbatim), then a license header
    comment in the package's source files.

    Args:
        directory: Package directory.
        suffixes: Source file suffixes scanned for header comments.

    Returns:
        Copyright text, or empty string if nothing was found.

    Raises:
        ScanError: If a NOTICE or DISTRIBUTION file exists but cannot be read.
    """
    for name in COPYRIGHT_FILES:
        candidate = directory / name
        if candidate.is_file():
            return read_text(candidate)

    return find_source_header(directory, suffixes)


def find_readme(directory: Path) -> Optional[Path]:
    """Find a readme file in a package directory.

    Returns:
        Path of the first existing readme variant, or None.
    """
    for name in README_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def extract_readme_copyright(text: str) -> Optional[str]:
    """Take the copyright statement and everything after it from a readme.

    The match is on "opyright" so both "Copyright" and "copyright" are
    found; the returned text starts one character before the match.

    Returns:
        The copyright text, or None if the readme never mentions one.
    """
    index = text.find("opyright")
    if index == -1:
        return None
    return text[max(index - 1, 0):]
