"""CLI entry point for license-disclosure."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from license_disclosure import __version__
from license_disclosure.analysis.classifier import classify_file
from license_disclosure.config import load_config
from license_disclosure.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_disclosure.exceptions import ConfigurationError, DisclosureError
from license_disclosure.models.component import DisclosureReport
from license_disclosure.models.config import DisclosureConfig
from license_disclosure.output.disclosure import DisclosureFormatter
from license_disclosure.output.disclosure_json import DisclosureJsonFormatter
from license_disclosure.scanner import run_scan

# Diagnostics go to stderr so the document on stdout stays clean
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Disclosure - Build open source disclosure documents.

    Scans vendored Go packages and installed npm packages, classifies
    each dependency's license from the files on disk, and prints a
    disclosure document grouped by license.

    \b
    Examples:
        license-disclosure generate
        license-disclosure generate --output DISCLOSURES.txt
        license-disclosure generate --format json
        license-disclosure classify vendor/github.com/foo/bar/LICENSE
    """
    pass


@main.command()
@click.option(
    "--project-dir",
    "-p",
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project root containing the vendor and npm directories (default: .).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the document to file instead of stdout.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Print the evidence used for each dependency to stderr.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 1 if any dependency has an unknown license.",
)
@click.option(
    "--skip-npm",
    is_flag=True,
    default=False,
    help="Scan the Go vendor tree only.",
)
def generate(
    project_dir: str,
    output_format: str,
    output_path: str | None,
    config_path: str | None,
    verbose_flag: bool,
    strict: bool,
    skip_npm: bool,
) -> None:
    """Generate the open source disclosure document.

    Reads the Go vendor manifest, lists the npm project's production
    packages, resolves each dependency's license and copyright, and
    writes the document only once every dependency has been resolved.

    \b
    Examples:
        license-disclosure generate
        license-disclosure generate --project-dir ../myproject
        license-disclosure generate --output DISCLOSURES.txt
        license-disclosure generate --format json --skip-npm
        license-disclosure generate --verbose --strict
    """
    root = Path(project_dir)

    try:
        config = load_config(config_path, root)
        report = run_scan(
            root,
            config,
            console=_error_console if verbose_flag else None,
            skip_npm=skip_npm,
        )
        _display_report(report, config, output_format.lower(), output_path)

        if strict and report.has_issues:
            _error_console.print(
                f"[yellow]{len(report.unknown_components)} component(s) "
                f"with unknown license[/yellow]"
            )
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except DisclosureError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
)
def classify(files: tuple[str, ...]) -> None:
    """Classify license files and print their license tags.

    \b
    Examples:
        license-disclosure classify LICENSE
        license-disclosure classify vendor/*/LICENSE*
    """
    try:
        for file in files:
            tag = classify_file(Path(file))
            click.echo(f"{file}: {tag.value}")
    except DisclosureError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_SUCCESS)


def _write_output_to_file(content: str, path: str) -> None:
    """Write the document to a file.

    Raises:
        ConfigurationError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _error_console.print(
                f"[yellow]Warning: Overwriting existing file: {path}[/yellow]"
            )

        file_path.write_text(content, encoding="utf-8")
        file_path.chmod(0o644)
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e

    _error_console.print(f"[green]Disclosure written to {path}[/green]")


def _display_report(
    report: DisclosureReport,
    config: DisclosureConfig,
    format_type: str,
    output_path: str | None = None,
) -> None:
    """Render the report and write it to stdout or a file.

    Args:
        report: The resolved components.
        config: Configuration supplying title and release label.
        format_type: Output format (text, json).
        output_path: Optional file path to write output to.
    """
    if format_type == "json":
        content = DisclosureJsonFormatter().format_report(report) + "\n"
    else:
        content = DisclosureFormatter(config).format_report(report)

    if output_path:
        _write_output_to_file(content, output_path)
    else:
        click.echo(content, nl=False)


def _display_error(error: DisclosureError) -> None:
    """Display error message on stderr."""
    error_type = type(error).__name__
    _error_console.print(
        f"[red bold]Error: {error_type}: {escape(str(error))}[/red bold]", highlight=False
    )


if __name__ == "__main__":
    main()
