"""Enumeration of installed npm packages."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from license_disclosure.exceptions import ScanError


def parse_parseable_listing(output: str) -> list[Path]:
    """Parse `npm list --parseable` output into package directories.

    The first line is the project itself and is discarded, as are blank
    lines.

    Args:
        output: Raw command output, one absolute path per line.

    Returns:
        Installed package directories in listing order.
    """
    lines = output.split("\n")
    return [Path(line.strip()) for line in lines[1:] if line.strip()]


def list_npm_packages(project_dir: Path, command: Sequence[str]) -> list[Path]:
    """List installed production packages of an npm project.

    The command runs with the npm project as its working directory. Its exit
    status is not checked: npm reports dependency problems with a non-zero
    status while still printing the installed tree.

    Args:
        project_dir: Directory containing the npm project's package.json.
        command: Listing command, e.g. `npm list --prod --parseable`.

    Returns:
        Installed package directories in listing order.

    Raises:
        ScanError: If the project directory is missing or the command
            cannot be started.
    """
    if not project_dir.is_dir():
        raise ScanError(f"npm project directory '{project_dir}' does not exist")

    try:
        completed = subprocess.run(
            list(command),
            cwd=project_dir,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise ScanError(f"Cannot run '{' '.join(command)}': {e}") from e

    return parse_parseable_listing(completed.stdout)
