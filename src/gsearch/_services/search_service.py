import json
from typing import Any, Optional

from .._config import Config
from .._utils import RequestSpec
from .._utils.constants import HEADER_REFERER
from ..models import RequestBase
from ..models.errors import ResponseParseError
from ._base_service import BaseService


class SearchService(BaseService):
    """Service for dispatching encoded search requests.

    The service only moves bytes: it issues a GET for the request's encoded
    URL and hands back the response body untouched.
    """

    def __init__(self, config: Config) -> None:
        super().__init__(config=config)

    def search(self, request: RequestBase, *, timeout: Optional[int] = None) -> str:
        """Run a search and return the raw response body.

        Args:
            request (RequestBase): The search request to send.
            timeout (Optional[int]): Timeout in milliseconds. Overrides the one set in the config.

        Returns:
            str: The response body.

        Raises:
            ConfigurationError: If the request cannot be encoded.
            TransportError: If the request fails or the API answers with an error status.

        Examples:
            ```python
            from gsearch import GoogleSearch, WebSearchRequest

            client = GoogleSearch()

            client.search.search(WebSearchRequest("Google Translate API .NET"))
            ```
        """
        return self._send(self._search_spec(request, timeout))

    async def search_async(
        self, request: RequestBase, *, timeout: Optional[int] = None
    ) -> str:
        """Asynchronously run a search and return the raw response body.

        Args:
            request (RequestBase): The search request to send.
            timeout (Optional[int]): Timeout in milliseconds. Overrides the one set in the config.

        Returns:
            str: The response body.
        """
        spec = self._search_spec(request, timeout)
        response = await self.request_async(
            spec.method, spec.url, **self._request_kwargs(spec)
        )
        return response.text

    def search_json(
        self, request: RequestBase, *, timeout: Optional[int] = None
    ) -> dict[str, Any]:
        """Run a search and decode the response body as JSON.

        Raises:
            ResponseParseError: If the body is not JSON.
        """
        spec = self._search_spec(request, timeout)
        body = self._send(spec)
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise ResponseParseError(spec.url, body) from e

    @property
    def custom_headers(self) -> dict[str, str]:
        if self._config.referer:
            return {HEADER_REFERER: self._config.referer}
        return {}

    def _send(self, spec: RequestSpec) -> str:
        response = self.request(spec.method, spec.url, **self._request_kwargs(spec))
        return response.text

    def _search_spec(self, request: RequestBase, timeout: Optional[int]) -> RequestSpec:
        if request.key is None and self._config.key is not None:
            request = request.with_key(self._config.key)

        return request.get_request(
            timeout if timeout is not None else self._config.timeout
        )

    @staticmethod
    def _request_kwargs(spec: RequestSpec) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"headers": spec.headers}
        if spec.timeout is not None:
            kwargs["timeout"] = spec.timeout
        return kwargs
