"""emojisheet CLI — extract cheat sheet groups and generate code.

Usage:
    emojisheet extract page.html                 # Print groups as JSON
    emojisheet generate                          # Fetch, enrich, print module
    emojisheet generate --output emojis.py       # ... and write it to a file
    emojisheet generate --url http://host/sheet --no-enrich
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from emojisheet.codegen import generate_module, write_module
from emojisheet.common.exceptions import (
    ExtractionAssumptionException,
    TransientException,
)
from emojisheet.common.request_manager import (
    DEFAULT_URL,
    SyncRequestManager,
)
from emojisheet.enrichment import enrich
from emojisheet.extraction import parse

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("emojisheet").setLevel(log_level)


@click.group()
@click.version_option(package_name="emojisheet")
def cli() -> None:
    """emojisheet — emoji cheat sheet extractor and code generator."""


@cli.command()
@click.argument(
    "html_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="JSON indentation.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Character encoding of HTML_FILE.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def extract(
    html_file: Path, indent: int, encoding: str, verbose: bool
) -> None:
    """Extract the emoji groups from a saved cheat sheet page.

    HTML_FILE is a local copy of the page. Groups are printed as JSON.
    """
    _configure_logging(verbose)

    try:
        groups = parse(
            html_file.read_bytes(),
            source_url=str(html_file),
            encoding=encoding,
        )
    except ExtractionAssumptionException as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        json.dumps(
            [group.model_dump() for group in groups],
            indent=indent,
            ensure_ascii=False,
        )
    )


@cli.command()
@click.option(
    "--url",
    envvar="EMOJISHEET_URL",
    default=DEFAULT_URL,
    show_default=True,
    help="Cheat sheet page to download.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the generated module here instead of stdout.",
)
@click.option(
    "--timeout",
    type=float,
    default=30.0,
    show_default=True,
    help="Download timeout in seconds.",
)
@click.option(
    "--no-enrich",
    is_flag=True,
    help="Skip the name -> emoji lookup; codes stay empty.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def generate(
    url: str,
    output: Path | None,
    timeout: float,
    no_enrich: bool,
    verbose: bool,
) -> None:
    """Download the cheat sheet and generate a Python module from it.

    \b
    Examples:
        emojisheet generate -o emojis.py
        EMOJISHEET_URL=http://127.0.0.1:8080/ emojisheet generate
    """
    _configure_logging(verbose)

    try:
        with SyncRequestManager(timeout=timeout) as manager:
            content = manager.fetch(url)
        groups = parse(content, source_url=url)
    except (ExtractionAssumptionException, TransientException) as e:
        raise click.ClickException(str(e)) from e

    if not no_enrich:
        groups = enrich(groups)

    if output is None:
        click.echo(generate_module(groups, url), nl=False)
        return

    write_module(groups, output, url)
    click.echo(f"Wrote {len(groups)} groups to {output}")


if __name__ == "__main__":
    cli()
