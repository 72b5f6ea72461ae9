"""Command-line interface for ipareg."""

import logging

import click

from ipareg.cli.affricates import affricates_cmd
from ipareg.cli.lookup import lookup
from ipareg.cli.query import query


@click.group()
@click.version_option()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log registry construction details to stderr.",
)
def main(verbose: bool) -> None:
    """ipareg: look up and query IPA pulmonic consonants by feature."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


main.add_command(lookup)
main.add_command(query)
main.add_command(affricates_cmd, name="affricates")
