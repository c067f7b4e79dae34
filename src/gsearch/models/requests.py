import logging
from enum import Enum
from functools import cached_property
from typing import Annotated, Any, ClassVar, Optional
from urllib.parse import quote

from httpx import URL
from pydantic import BaseModel, ConfigDict

from .._utils import RequestSpec
from .._utils.constants import DEFAULT_API_VERSION
from .arguments import Argument, BoundArgument
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def _discover_arguments(model: type[BaseModel]) -> tuple[BoundArgument, ...]:
    """Collect the Argument-tagged fields of a request model.

    Fields come back in declaration order with inherited fields first, which
    is also the order their parameters appear in the query string.
    """
    bound: list[BoundArgument] = []
    for field_name, field_info in model.model_fields.items():
        arguments = [m for m in field_info.metadata if isinstance(m, Argument)]
        if not arguments:
            continue
        if len(arguments) > 1:
            raise ConfigurationError(
                f"Field {model.__name__}.{field_name} declares more than one Argument"
            )
        bound.append(BoundArgument(field_name=field_name, argument=arguments[0]))
    return tuple(bound)


def _value_string(value: Any) -> Optional[str]:
    """Render a field value for the query string, or None to leave it out."""
    if isinstance(value, bool):
        return "1" if value else None
    if isinstance(value, Enum):
        # a zero member means "not specified"
        if value.value == 0:
            return None
        return getattr(value, "display", value.name)
    return str(value)


class RequestBase(BaseModel):
    """Base class for search requests that encode themselves into a URL.

    Subclasses declare ``base_address`` and tag the fields that map to query
    parameters with :class:`Argument`. Fields without an Argument are plain
    data and never sent.

    Examples:
        ```python
        class WebSearchRequest(RequestBase):
            base_address = "http://ajax.googleapis.com/ajax/services/search/web"

        str(WebSearchRequest("hello world"))
        # http://ajax.googleapis.com/ajax/services/search/web?q=hello%20world&v=1.0
        ```
    """

    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )

    base_address: ClassVar[Optional[str]] = None
    __arguments__: ClassVar[tuple[BoundArgument, ...]] = ()

    content: Annotated[
        Optional[str], Argument("q", optional=False, need_encode=True)
    ] = None
    version: Annotated[
        Optional[str], Argument("v", optional=False, default_value=DEFAULT_API_VERSION)
    ] = None
    key: Annotated[Optional[str], Argument("key")] = None

    def __init__(self, content: Optional[str] = None, **data: Any) -> None:
        super().__init__(content=content, **data)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.__arguments__ = _discover_arguments(cls)

    def arguments(self) -> dict[str, str]:
        """Return the query parameters of this request, in URL order.

        Raises:
            ConfigurationError: A required argument has no value and no default.
        """
        arguments: dict[str, str] = {}
        for bound in self.__arguments__:
            argument = bound.argument
            value = getattr(self, bound.field_name)
            if value is None:
                if argument.optional:
                    continue
                value = argument.default_value

            if value is None:
                raise ConfigurationError(f"Field {bound.label} cannot be None")

            value_string = _value_string(value)
            if value_string is None:
                continue

            if argument.need_encode:
                value_string = quote(value_string, safe="")

            arguments[argument.name] = value_string
        return arguments

    @cached_property
    def url_string(self) -> str:
        """The encoded request URL, computed once per request."""
        if not self.base_address:
            raise ConfigurationError(
                f"{type(self).__name__} does not declare a base address"
            )

        arguments = self.arguments()
        if not arguments:
            url = self.base_address
        else:
            query = "&".join(f"{name}={value}" for name, value in arguments.items())
            url = f"{self.base_address}?{query}"

        logger.debug(f"Encoded {type(self).__name__}: {url}")
        return url

    @property
    def uri(self) -> URL:
        return URL(self.url_string)

    def get_request(self, timeout: Optional[int] = None) -> RequestSpec:
        """Build the HTTP request for this search.

        Args:
            timeout (Optional[int]): The length of time, in milliseconds, before the request times out.

        Returns:
            RequestSpec: A GET request for the encoded URL.
        """
        return RequestSpec(url=self.url_string, timeout_ms=timeout)

    def with_key(self, key: Optional[str]) -> "RequestBase":
        """Return a copy of this request carrying the given access key."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values["key"] = key
        return type(self)(**values)

    def __str__(self) -> str:
        return self.url_string
