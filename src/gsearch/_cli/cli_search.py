import logging
from typing import Optional

import click

from .._gsearch import GoogleSearch
from ..models.errors import ConfigurationError, TransportError
from ._utils._common import build_request, request_options

logger = logging.getLogger(__name__)


@click.command()
@click.argument("query")
@request_options
@click.option(
    "--timeout",
    type=click.IntRange(min=1),
    help="Request timeout in milliseconds",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging",
)
def search(
    query: str,
    search_type: str,
    version: Optional[str],
    key: Optional[str],
    rsz: Optional[str],
    start: Optional[int],
    hl: Optional[str],
    timeout: Optional[int],
    verbose: bool,
) -> None:
    r"""Run a search and print the raw response body.

    \b
    Examples:
        gsearch search "Google Translate API .NET"
        gsearch search "maui" --type images --timeout 5000
    """
    client = GoogleSearch(debug=verbose)
    request = build_request(query, search_type, version, key, rsz, start, hl)

    try:
        body = client.search.search(request, timeout=timeout)
    except ConfigurationError as e:
        raise click.ClickException(e.message) from e
    except TransportError as e:
        logger.debug(f"Response content: {e.response_content}")
        raise click.ClickException(e.message) from e

    click.echo(body)
