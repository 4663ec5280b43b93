# topmark:header:start
#
#   project      : mdtitle
#   file         : main.py
#   file_relpath : src/mdtitle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for mdtitle.

The command resolves logging, builds an immutable `Config` from the parsed
options, and runs the title generator inside a ``with`` block so the staging
file is always cleaned up. Domain errors are mapped onto CLI errors carrying
sysexits-aligned exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mdtitle.cli.errors import from_domain_error
from mdtitle.cli.options import common_verbose_options, resolve_log_level
from mdtitle.config.logging import get_logger, setup_logging
from mdtitle.config.model import MutableConfig
from mdtitle.constants import (
    DEFAULT_TAB_SPACE_SIZE,
    DEFAULT_TITLE_MESSAGE,
    MAX_TAB_SPACE_SIZE,
    MDTITLE_VERSION,
)
from mdtitle.errors import MdtitleError
from mdtitle.generator.title_generator import TitleGenerator

if TYPE_CHECKING:
    from mdtitle.config.model import Config

logger = get_logger(__name__)


@click.command(
    name="mdtitle",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Add an auto-generated outline (table of contents) to the top of a Markdown file.",
)
@click.option(
    "-f",
    "--file",
    "file",
    required=True,
    type=click.Path(path_type=Path),
    help="Markdown file to add the outline to.",
)
@click.option(
    "--title-message",
    default=DEFAULT_TITLE_MESSAGE,
    show_default=True,
    help="Text of the top-level outline line.",
)
@click.option(
    "--tab-space-size",
    type=click.IntRange(0, MAX_TAB_SPACE_SIZE),
    default=DEFAULT_TAB_SPACE_SIZE,
    show_default=True,
    help="Number of spaces per outline nesting level.",
)
@click.option(
    "--result-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the result here instead of rewriting --file in place.",
)
@click.option(
    "--skip-first-title",
    is_flag=True,
    default=False,
    help="Drop the first heading and its section from the outline and the document.",
)
@common_verbose_options
@click.version_option(MDTITLE_VERSION, "--version", prog_name="mdtitle")
def cli(
    *,
    file: Path,
    title_message: str,
    tab_space_size: int,
    result_file: Path | None,
    skip_first_title: bool,
    verbose: int,
    quiet: int,
) -> None:
    """Entry point for the mdtitle CLI."""
    setup_logging(level=resolve_log_level(verbose, quiet))

    config: Config = (
        MutableConfig.from_defaults()
        .apply_cli_args(
            {
                "file": file,
                "result_file": result_file,
                "title_message": title_message,
                "tab_space_size": tab_space_size,
                "skip_first_title": skip_first_title,
            }
        )
        .freeze()
    )
    logger.debug("Effective config: %s", config.to_dict())

    try:
        with TitleGenerator.from_config(config) as generator:
            generator.generate(config.skip_first_title).finish(config.destination_path)
    except MdtitleError as exc:
        logger.debug("Run failed: %r", exc)
        raise from_domain_error(exc) from exc

    logger.info(
        "Outline written to %s%s",
        config.destination_path,
        " (in place)" if config.in_place else "",
    )


if __name__ == "__main__":
    cli()
