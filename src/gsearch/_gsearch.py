from functools import cached_property
from os import environ as env
from typing import Optional

from dotenv import load_dotenv

from ._config import Config
from ._services import SearchService
from ._utils import setup_logging
from ._utils.constants import ENV_API_KEY, ENV_REFERER, ENV_TIMEOUT

load_dotenv()


class GoogleSearch:
    """Entry point for the search API client."""

    def __init__(
        self,
        *,
        key: Optional[str] = None,
        referer: Optional[str] = None,
        timeout: Optional[int] = None,
        debug: bool = False,
    ) -> None:
        """Initialize the search client.

        Args:
            key (Optional[str]): Access key sent with requests that do not carry one.
                If not provided, it is read from the `GSEARCH_API_KEY` environment variable.
            referer (Optional[str]): Value of the Referer header.
                If not provided, it is read from the `GSEARCH_REFERER` environment variable.
            timeout (Optional[int]): Default request timeout in milliseconds.
                If not provided, it is read from the `GSEARCH_TIMEOUT` environment variable.
            debug (bool): Enable debug logging if set to True. Defaults to False.
        """
        self._config = Config(
            key=key or env.get(ENV_API_KEY),
            referer=referer or env.get(ENV_REFERER),
            # pydantic parses and validates the raw environment string
            timeout=timeout if timeout is not None else env.get(ENV_TIMEOUT) or None,  # type: ignore
        )

        setup_logging(debug)

    @cached_property
    def search(self) -> SearchService:
        """Dispatches search requests and returns the raw response bodies."""
        return SearchService(self._config)
