from typing import Annotated, Optional

from .._utils.constants import (
    BLOG_SEARCH_ADDRESS,
    BOOK_SEARCH_ADDRESS,
    IMAGE_SEARCH_ADDRESS,
    LOCAL_SEARCH_ADDRESS,
    NEWS_SEARCH_ADDRESS,
    PATENT_SEARCH_ADDRESS,
    VIDEO_SEARCH_ADDRESS,
    WEB_SEARCH_ADDRESS,
)
from .arguments import Argument
from .choices import (
    ImageColorization,
    ImageSize,
    ImageType,
    LocalResultType,
    ResultSize,
    SafeLevel,
    SortType,
)
from .requests import RequestBase


class SearchRequestBase(RequestBase):
    """Paging and language arguments shared by every search endpoint."""

    start: Annotated[Optional[int], Argument("start")] = None
    result_size: Annotated[ResultSize, Argument("rsz")] = ResultSize.default
    language: Annotated[Optional[str], Argument("hl")] = None


class WebSearchRequest(SearchRequestBase):
    base_address = WEB_SEARCH_ADDRESS

    safe_level: Annotated[SafeLevel, Argument("safe")] = SafeLevel.default
    language_restrict: Annotated[Optional[str], Argument("lr")] = None
    custom_search_id: Annotated[Optional[str], Argument("cx")] = None
    custom_search_reference: Annotated[
        Optional[str], Argument("cref", need_encode=True)
    ] = None


class LocalSearchRequest(SearchRequestBase):
    """Local search around a point.

    ``center`` and ``span`` are "lat,lng" pairs, sent as-is.
    """

    base_address = LOCAL_SEARCH_ADDRESS

    center: Annotated[Optional[str], Argument("sll")] = None
    span: Annotated[Optional[str], Argument("sspn")] = None
    result_type: Annotated[LocalResultType, Argument("mrt")] = (
        LocalResultType.blended
    )


class VideoSearchRequest(SearchRequestBase):
    base_address = VIDEO_SEARCH_ADDRESS

    sort_by: Annotated[SortType, Argument("scoring")] = SortType.relevance


class BlogSearchRequest(SearchRequestBase):
    base_address = BLOG_SEARCH_ADDRESS

    sort_by: Annotated[SortType, Argument("scoring")] = SortType.relevance


class NewsSearchRequest(SearchRequestBase):
    base_address = NEWS_SEARCH_ADDRESS

    sort_by: Annotated[SortType, Argument("scoring")] = SortType.relevance
    location: Annotated[Optional[str], Argument("geo", need_encode=True)] = None
    topic: Annotated[Optional[str], Argument("topic")] = None
    edition: Annotated[Optional[str], Argument("ned")] = None


class BookSearchRequest(SearchRequestBase):
    base_address = BOOK_SEARCH_ADDRESS

    full_view_only: Annotated[bool, Argument("as_brr")] = False
    library: Annotated[Optional[str], Argument("as_list")] = None


class ImageSearchRequest(SearchRequestBase):
    base_address = IMAGE_SEARCH_ADDRESS

    safe_level: Annotated[SafeLevel, Argument("safe")] = SafeLevel.default
    image_size: Annotated[ImageSize, Argument("imgsz")] = ImageSize.all
    colorization: Annotated[ImageColorization, Argument("imgc")] = (
        ImageColorization.all
    )
    image_type: Annotated[ImageType, Argument("imgtype")] = ImageType.all
    file_type: Annotated[Optional[str], Argument("as_filetype")] = None
    site: Annotated[Optional[str], Argument("as_sitesearch")] = None


class PatentSearchRequest(SearchRequestBase):
    base_address = PATENT_SEARCH_ADDRESS

    issued_only: Annotated[bool, Argument("as_psrg")] = False
    filed_only: Annotated[bool, Argument("as_psra")] = False
    sort_by: Annotated[SortType, Argument("scoring")] = SortType.relevance


SEARCH_REQUEST_TYPES: dict[str, type[SearchRequestBase]] = {
    "web": WebSearchRequest,
    "local": LocalSearchRequest,
    "video": VideoSearchRequest,
    "blogs": BlogSearchRequest,
    "news": NewsSearchRequest,
    "books": BookSearchRequest,
    "images": ImageSearchRequest,
    "patent": PatentSearchRequest,
}
