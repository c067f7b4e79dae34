from .arguments import Argument, BoundArgument
from .choices import (
    ImageColorization,
    ImageSize,
    ImageType,
    LocalResultType,
    ResultSize,
    SafeLevel,
    SearchChoice,
    SortType,
)
from .errors import (
    ConfigurationError,
    GoogleSearchError,
    ResponseParseError,
    TransportError,
)
from .requests import RequestBase
from .search_requests import (
    SEARCH_REQUEST_TYPES,
    BlogSearchRequest,
    BookSearchRequest,
    ImageSearchRequest,
    LocalSearchRequest,
    NewsSearchRequest,
    PatentSearchRequest,
    SearchRequestBase,
    VideoSearchRequest,
    WebSearchRequest,
)

__all__ = [
    "Argument",
    "BoundArgument",
    "ImageColorization",
    "ImageSize",
    "ImageType",
    "LocalResultType",
    "ResultSize",
    "SafeLevel",
    "SearchChoice",
    "SortType",
    "ConfigurationError",
    "GoogleSearchError",
    "ResponseParseError",
    "TransportError",
    "RequestBase",
    "SEARCH_REQUEST_TYPES",
    "SearchRequestBase",
    "WebSearchRequest",
    "LocalSearchRequest",
    "VideoSearchRequest",
    "BlogSearchRequest",
    "NewsSearchRequest",
    "BookSearchRequest",
    "ImageSearchRequest",
    "PatentSearchRequest",
]
