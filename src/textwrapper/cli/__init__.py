from __future__ import annotations

import logging
import pathlib
from typing import TYPE_CHECKING, BinaryIO

import click

from textwrapper import wrapping
from textwrapper.cli.errors import with_error_handling
from textwrapper.config import io as config_io
from textwrapper.config import models
from textwrapper.width import WidthSource

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging for CLI output."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _read_sources(files: tuple[BinaryIO, ...]) -> Iterable[tuple[str, bytes]]:
    """Yield (name, raw bytes) per input, falling back to stdin."""
    if not files:
        yield "<stdin>", click.get_binary_stream("stdin").read()
        return
    for f in files:
        yield getattr(f, "name", "<stdin>"), f.read()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.File("rb"))
@click.option(
    "--width",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help=f"{models.CONFIG_KEY_DESCRIPTIONS['width']} [default: config or {models.DEFAULT_WIDTH}]",
)
@click.option(
    "--width-source",
    type=click.Choice([source.value for source in WidthSource]),
    default=None,
    help=models.CONFIG_KEY_DESCRIPTIONS["width_source"],
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default=None,
    help="YAML config file [default: ~/.config/textwrapper/config.yaml]",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@with_error_handling
def cli(
    files: tuple[BinaryIO, ...],
    width: int | None,
    width_source: str | None,
    config_path: pathlib.Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Wrap text to a maximum terminal display width.

    Reads FILES (or stdin) as UTF-8, collapses whitespace, and prints lines
    no wider than --width columns. East Asian wide characters count as two
    columns. Words longer than the width are split.
    """
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive")
    _setup_logging(verbose, quiet)

    config = config_io.merge_overrides(
        config_io.load_config(config_path), width=width, width_source=width_source
    )
    logger.debug("Wrapping at width %d using %s widths", config.width, config.width_source)
    wrapper = wrapping.TextWrapper(config)

    for index, (name, data) in enumerate(_read_sources(files)):
        logger.debug("Reading %s (%d bytes)", name, len(data))
        lines = wrapper.wrap(data)
        if index > 0:
            click.echo()
        for line in lines:
            click.echo(line)


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
