from typing import Optional

import click

from ..models.errors import ConfigurationError
from ._utils._common import build_request, request_options


@click.command()
@click.argument("query")
@request_options
def url(
    query: str,
    search_type: str,
    version: Optional[str],
    key: Optional[str],
    rsz: Optional[str],
    start: Optional[int],
    hl: Optional[str],
) -> None:
    r"""Print the encoded URL of a search request.

    \b
    Examples:
        gsearch url "hello world"
        gsearch url "hello world" --type news --rsz large
    """
    request = build_request(query, search_type, version, key, rsz, start, hl)
    try:
        click.echo(request.url_string)
    except ConfigurationError as e:
        raise click.ClickException(e.message) from e
