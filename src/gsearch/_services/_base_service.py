from logging import getLogger
from typing import Any, Union

from httpx import (
    URL,
    AsyncClient,
    Client,
    Headers,
    HTTPError,
    Response,
)

from .._config import Config
from .._utils.constants import HEADER_ACCEPT
from ..models.errors import TransportError


class BaseService:
    def __init__(self, config: Config) -> None:
        self._logger = getLogger("gsearch")
        self._config = config

        self._client = Client(headers=Headers(self.default_headers))
        self._client_async = AsyncClient(headers=Headers(self.default_headers))

        self._logger.debug(f"HEADERS: {self.default_headers}")

        super().__init__()

    def request(self, method: str, url: Union[URL, str], **kwargs: Any) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except HTTPError as e:
            self._logger.warning(f"Request failed: {method} {url}: {e}")
            raise TransportError.from_httpx(e, str(url)) from e

        return response

    async def request_async(
        self, method: str, url: Union[URL, str], **kwargs: Any
    ) -> Response:
        self._logger.debug(f"Request: {method} {url}")

        try:
            response = await self._client_async.request(method, url, **kwargs)
            response.raise_for_status()
        except HTTPError as e:
            self._logger.warning(f"Request failed: {method} {url}: {e}")
            raise TransportError.from_httpx(e, str(url)) from e

        return response

    @property
    def default_headers(self) -> dict[str, str]:
        return {
            HEADER_ACCEPT: "application/json",
            **self.custom_headers,
        }

    @property
    def custom_headers(self) -> dict[str, str]:
        return {}
