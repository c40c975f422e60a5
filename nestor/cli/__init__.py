import logging
import sys
from importlib import metadata
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

import click
from appdirs import user_log_dir
from rich.console import Console
from rich.logging import RichHandler

from nestor.cli.commands import run_policy

console = Console()

app_logger = logging.getLogger("nestor")
# Set the logger to capture ALL messages from 'nestor' internally
app_logger.setLevel(logging.DEBUG)

app_name = "nestor"
log_dir = Path(user_log_dir(app_name))
log_file_path = log_dir / f"{app_name}.log"

logger = logging.getLogger(__name__)


def _add_file_handler() -> None:
    if any(isinstance(h, TimedRotatingFileHandler) for h in app_logger.handlers):
        return
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = TimedRotatingFileHandler(
        filename=str(log_file_path), when="D", interval=1, backupCount=7, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    app_logger.addHandler(file_handler)


@click.group(invoke_without_command=True)
@click.option(
    "--verbose", "-v", count=True, help="Increase verbosity. -v for INFO, -vv for DEBUG logs."
)
@click.option("--no-log-file", is_flag=True, help="Do not write logs to the log directory.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, no_log_file: bool) -> None:
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit(0)

    if not no_log_file:
        _add_file_handler()

    if verbose > 0:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_level=True,
            markup=False,
            tracebacks_suppress=[click],
            rich_tracebacks=True,
        )
        if verbose == 1:
            console_handler.setLevel(logging.INFO)
        else:
            console_handler.setLevel(logging.DEBUG)
        app_logger.addHandler(console_handler)


@click.command()
@click.argument(
    "config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option("--pretty/--compact", default=True, help="Indent the printed policy document.")
def policy(config_file: Path, pretty: bool) -> None:
    """Prints the IAM policy document for the permissions in CONFIG_FILE."""
    logger.info("Synthesizing policy from %s", config_file)
    run_policy(config_file, pretty=pretty)


@click.command()
def version() -> None:
    """Shows version and exit."""
    console.print(f"nestor version: {metadata.version('nestor')}", highlight=False)
    sys.exit(0)


cli.add_command(policy)
cli.add_command(version)
