"""node-finder CLI - inspect how a Node-style loader sees a directory tree."""

import logging

import click

from .commands.config import config as config_group
from .commands.resolve import find_cmd
from .commands.resolve import modules_cmd
from .commands.resolve import root_cmd
from .logging_setup import init_json_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="node-finder")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for the JSONL log (default: $NODE_FINDER_LOG_LEVEL or WARNING)",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSONL log file (default: $NODE_FINDER_LOG_PATH or ./node-finder.log.jsonl)",
)
def cli(log_level: str | None, log_file: str | None):
    """node-finder - project root, module and specifier lookups."""
    init_json_logging(path=log_file, level=log_level)
    logger.debug("node-finder started")


cli.add_command(root_cmd)
cli.add_command(modules_cmd)
cli.add_command(find_cmd)
cli.add_command(config_group)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
