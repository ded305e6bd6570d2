"""Main CLI interface for LineFilter using Click."""

import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..config import ConfigManager
from ..core import LineProcessor
from ..utils.logging import get_console, get_logger, setup_logging

logger = get_logger(__name__)

USAGE = "Usage: linefilter [options] <input files>"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="LineFilter")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(path_type=Path),
    help="Directory for output files (default: current directory)",
)
@click.option("-p", "--prefix", help="Prefix for output file names")
@click.option("-a", "--append", is_flag=True, help="Append to existing output files")
@click.option("-s", "--stats", "show_stats", is_flag=True, help="Print basic statistics")
@click.option(
    "-f", "--full-stats", is_flag=True, help="Print full statistics (implies -s)"
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with default settings",
)
@click.option("--encoding", help="Text encoding of input and output files")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Diagnostic logging level",
)
@click.argument("input_files", nargs=-1, type=click.Path(path_type=Path))
def cli(
    output_dir: Optional[Path],
    prefix: Optional[str],
    append: bool,
    show_stats: bool,
    full_stats: bool,
    config_path: Optional[Path],
    encoding: Optional[str],
    log_level: Optional[str],
    input_files: tuple[Path, ...],
):
    """
    Sort the lines of INPUT_FILES into integers, floats and strings.

    Lines are read from all inputs in turn (one line from each file per
    round) and written to integers.txt, floats.txt and strings.txt.
    """
    console = get_console()

    try:
        config = ConfigManager(config_path).build(
            output_dir=output_dir,
            prefix=prefix,
            # flags only switch features on; unset flags keep the file defaults
            append=append or None,
            show_stats=show_stats or None,
            full_stats=full_stats or None,
            input_files=input_files or None,
            encoding=encoding,
        )
    except (FileNotFoundError, ValueError) as e:
        raise click.UsageError(str(e)) from e

    if log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": log_level.upper()})}
        )

    setup_logging(
        level=config.logging.level,
        log_dir=config.logging.log_dir,
        max_bytes=config.logging.max_bytes,
        backup_count=config.logging.backup_count,
        console_enabled=config.logging.console_enabled,
        file_enabled=config.logging.file_enabled,
    )

    if not config.input_files:
        console.print(USAGE, markup=False, highlight=False)
        return

    try:
        result = LineProcessor(config, console=console).process()
    except Exception as e:
        logger.exception(f"Processing error: {e}")
        sys.exit(1)

    logger.info(
        f"Processed {len(result.opened_inputs)} of {len(config.input_files)} input file(s), "
        f"{len(result.write_results)} output file(s) written"
    )


if __name__ == "__main__":
    cli()
