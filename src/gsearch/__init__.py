"""Client for the AJAX search API.

Search requests are declared as pydantic models whose fields are tagged with
:class:`~gsearch.models.Argument`; each request encodes itself into the URL
that the search endpoint expects.
"""

from ._config import Config
from ._gsearch import GoogleSearch
from ._services import SearchService
from ._utils import RequestSpec
from .models import (
    SEARCH_REQUEST_TYPES,
    Argument,
    BlogSearchRequest,
    BookSearchRequest,
    ConfigurationError,
    GoogleSearchError,
    ImageColorization,
    ImageSearchRequest,
    ImageSize,
    ImageType,
    LocalResultType,
    LocalSearchRequest,
    NewsSearchRequest,
    PatentSearchRequest,
    RequestBase,
    ResponseParseError,
    ResultSize,
    SafeLevel,
    SearchChoice,
    SearchRequestBase,
    SortType,
    TransportError,
    VideoSearchRequest,
    WebSearchRequest,
)

__all__ = [
    "Config",
    "GoogleSearch",
    "SearchService",
    "RequestSpec",
    "SEARCH_REQUEST_TYPES",
    "Argument",
    "RequestBase",
    "SearchRequestBase",
    "WebSearchRequest",
    "LocalSearchRequest",
    "VideoSearchRequest",
    "BlogSearchRequest",
    "NewsSearchRequest",
    "BookSearchRequest",
    "ImageSearchRequest",
    "PatentSearchRequest",
    "SearchChoice",
    "ResultSize",
    "SafeLevel",
    "SortType",
    "LocalResultType",
    "ImageSize",
    "ImageColorization",
    "ImageType",
    "GoogleSearchError",
    "ConfigurationError",
    "TransportError",
    "ResponseParseError",
]
