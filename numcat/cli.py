from __future__ import annotations

import logging
import sys

import click

from numcat import __version__
from numcat.core.config import STDIN_TOKEN, CatConfig
from numcat.core.errors import ConfigError, ReadError
from numcat.core.models import RunReport
from numcat.orchestration.runner import CatRunner
from numcat.services.formatter import ConsoleSink
from numcat.services.input_resolver import DefaultInputResolver

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger("numcat.cli")


def _set_verbosity(verbose: bool) -> None:
    logging.getLogger("numcat").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _run_cat(
    *,
    files: tuple[str, ...],
    number: bool,
    number_nonblank: bool,
    verbose: bool,
) -> RunReport:
    _set_verbosity(verbose)

    config = CatConfig(
        inputs=files or (STDIN_TOKEN,),
        number_all=number,
        number_nonblank=number_nonblank,
    ).validated()

    runner = CatRunner(
        config=config,
        resolver=DefaultInputResolver(),
        sink=ConsoleSink(),
    )
    return runner.run()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=str)
@click.option("--number", "-n", is_flag=True, help="Number all output lines.")
@click.option(
    "--number-nonblank",
    "-b",
    is_flag=True,
    help="Number non-empty output lines; overrides -n for blank lines.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.version_option(version=__version__, prog_name="numcat")
def cli(files: tuple[str, ...], number: bool, number_nonblank: bool, verbose: bool):
    """Concatenate FILES to standard output, optionally numbering lines.

    With no FILES, or when a FILE is -, read standard input.
    """
    try:
        report = _run_cat(
            files=files,
            number=number,
            number_nonblank=number_nonblank,
            verbose=verbose,
        )
    except (ReadError, ConfigError) as e:
        raise click.ClickException(str(e)) from e

    logger.debug(
        "Completed %d input(s), %d line(s), open failures: %d",
        len(report.processed),
        report.lines_written,
        len(report.failures),
    )


def main():
    try:
        cli.main(prog_name="numcat", standalone_mode=False)
    except click.ClickException as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(1)
    except (KeyboardInterrupt, click.exceptions.Abort):
        click.echo("Interrupted by user", err=True)
        sys.exit(130)
    except Exception as e:  # noqa: BLE001
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
