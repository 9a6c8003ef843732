import logging

import click
from rich.logging import RichHandler

from edge_quick_setup.distinfo import VERSION
from edge_quick_setup.commands.setup import setup
from edge_quick_setup.commands.dist import dist


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
    # botocore is very chatty at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)


@click.group()
@click.version_option(version=VERSION, prog_name="edge-setup")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """Quick IAM setup for SageMaker Edge device fleets."""
    configure_logging(verbose)

cli.add_command(setup)
cli.add_command(dist)
