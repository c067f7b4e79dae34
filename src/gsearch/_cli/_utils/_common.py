from typing import Optional

import click

from ...models import SEARCH_REQUEST_TYPES, ResultSize, SearchRequestBase


def request_options(function):
    function = click.option("--hl", help="Host language")(function)
    function = click.option(
        "--start",
        type=click.IntRange(min=0),
        help="Index of the first result",
    )(function)
    function = click.option(
        "--rsz",
        type=click.Choice(["small", "large"]),
        help="Number of results per page",
    )(function)
    function = click.option("--key", help="Access key")(function)
    function = click.option(
        "--api-version",
        "version",
        help="API version (default: 1.0)",
    )(function)
    function = click.option(
        "--type",
        "search_type",
        type=click.Choice(list(SEARCH_REQUEST_TYPES)),
        default="web",
        show_default=True,
        help="Search endpoint to query",
    )(function)
    return function


def build_request(
    query: str,
    search_type: str,
    version: Optional[str],
    key: Optional[str],
    rsz: Optional[str],
    start: Optional[int],
    hl: Optional[str],
) -> SearchRequestBase:
    request_type = SEARCH_REQUEST_TYPES[search_type]
    return request_type(
        query,
        version=version,
        key=key,
        result_size=ResultSize[rsz] if rsz else ResultSize.default,
        start=start,
        language=hl,
    )
