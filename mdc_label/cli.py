"""
Lists the bracketed labels of a markdown file.
Each label is printed with its position; `--tokens` also prints its token tree.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

import click

from .config import ConfigError, build_config
from .filesystem import get_max_file_size, read_source
from .logger import ROOT_LOGGER_NAME
from .models import Label, Token
from .scanner import scan_labels

__all__ = ["cli"]


def format_token(token: Token, depth: int = 0) -> list[str]:
    """Render a token and its children as indented lines.

    Examples:
        format_token(label.tokens[0])  # ["label 1:1-1:6", "  labelMarker 1:1-1:2", ...]
    """
    start, end = token.start, token.end
    lines = [f"{'  ' * depth}{token.type} {start.line}:{start.column}-{end.line}:{end.column}"]
    for child in token.children:
        lines.extend(format_token(child, depth + 1))
    return lines


def format_label(label: Label) -> str:
    return f"{label.start.line}:{label.start.column}\t{label.raw}"


@click.command()
@click.version_option(package_name="mdc-label")
@click.option(
    "--allow-eol/--disallow-eol",
    "allow_eol",
    default=None,
    help="Allow line endings inside labels",
)
@click.option("--max-depth", type=int, help="Deepest bracket nesting, outer brackets included")
@click.option("--max-escapes", type=int, help="Escaped characters allowed per label")
@click.option("--tokens", "show_tokens", is_flag=True, help="Print the token tree of each label")
@click.option("--json", "as_json", is_flag=True, help="Print labels as a JSON array")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def cli(
    filepath: Path,
    allow_eol: bool | None = None,
    max_depth: int | None = None,
    max_escapes: int | None = None,
    show_tokens: bool = False,
    as_json: bool = False,
    verbose: bool = False,
):
    """
    Entry point for listing the labels of a file.

    Args:
        filepath: Path to the file to scan.
        allow_eol: Override for whether labels may span lines.
        max_depth: Override for the nesting limit.
        max_escapes: Override for the escape limit.
        show_tokens: Print each label's token tree below it.
        as_json: Print a JSON array instead of text lines.
        verbose: Enable debug logging.

    Raises:
        click.BadParameter: If the options or the configuration file hold
            invalid values.
        click.ClickException: If the file cannot be read or is too large.

    Examples:
        mdc-label README.md --disallow-eol --tokens
    """
    if verbose:
        logging.basicConfig(format="%(name)s: %(message)s")
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)

    try:
        config = build_config(
            filepath.resolve().parent,
            disallow_eol=None if allow_eol is None else not allow_eol,
            max_depth=max_depth,
            max_escapes=max_escapes,
        )
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        max_file_size = get_max_file_size(default=config.max_file_size)
        content = read_source(filepath, max_file_size)
    except (ValueError, IOError) as error:
        raise click.ClickException(str(error)) from error

    labels = scan_labels(content, config)

    if as_json:
        click.echo(json.dumps([dataclasses.asdict(label) for label in labels], indent=2))
        return

    for label in labels:
        click.echo(format_label(label))
        if show_tokens:
            for token in label.tokens:
                for line in format_token(token, depth=1):
                    click.echo(line)


if __name__ == "__main__":
    cli()
