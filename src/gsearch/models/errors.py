from typing import Optional

import httpx


class GoogleSearchError(Exception):
    """Base class for all errors raised by the search client."""


class ConfigurationError(GoogleSearchError):
    """Raised when a request type is declared in a way that cannot be encoded.

    This always points at a defect in a request definition, e.g. a required
    argument that has neither a value nor a default. It is never retried.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(GoogleSearchError):
    """Raised when a search request could not be completed over HTTP."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: Optional[int] = None,
        response_content: Optional[str] = None,
    ):
        self.message = message
        self.url = url
        self.status_code = status_code
        self.response_content = response_content
        super().__init__(self.message)

    @staticmethod
    def from_httpx(error: httpx.HTTPError, url: str) -> "TransportError":
        """Create a TransportError from an httpx error.

        Status errors carry the response code and body so that callers can
        tell a rejected request from one that never reached the server.
        """
        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            return TransportError(
                f"Request to {url} failed with status code {response.status_code}",
                url=url,
                status_code=response.status_code,
                response_content=response.text,
            )
        return TransportError(f"Request to {url} failed: {error}", url=url)


class ResponseParseError(GoogleSearchError):
    """Raised when a response body is not the JSON document the API returns."""

    def __init__(self, url: str, content: str):
        self.url = url
        self.content = content
        self.message = f"Response from {url} is not valid JSON"
        super().__init__(self.message)
