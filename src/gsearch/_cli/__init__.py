import click

from .cli_search import search as search
from .cli_url import url as url


@click.group()
@click.version_option(package_name="gsearch-api")
def cli() -> None:
    """Command line client for the AJAX search API."""


cli.add_command(url)
cli.add_command(search)
