from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class Argument:
    """Query-parameter metadata for one field of a search request.

    Attach it to a request field with ``Annotated``:

        content: Annotated[Optional[str], Argument("q", optional=False, need_encode=True)] = None

    Args:
        name: The query-parameter key.
        optional: When False and the field holds no value, ``default_value``
            is sent instead. A required argument without a default is a
            configuration error.
        need_encode: Percent-encode the value before adding it to the URL.
        default_value: Value sent for a required argument left unset.
    """

    name: str
    optional: bool = True
    need_encode: bool = False
    default_value: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("Argument name cannot be empty")


@dataclass(frozen=True)
class BoundArgument:
    """An Argument together with the request field it was declared on."""

    field_name: str
    argument: Argument

    @property
    def label(self) -> str:
        return f"{self.field_name}({self.argument.name})"
