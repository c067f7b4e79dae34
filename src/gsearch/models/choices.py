from enum import IntEnum


class SearchChoice(IntEnum):
    """An enumerated search option backed by an integer.

    The member with value 0 means "not specified" and is never sent. Every
    other member is sent as its name; subclasses override ``display`` when
    the API expects a different token.
    """

    @property
    def display(self) -> str:
        return self.name


class ResultSize(SearchChoice):
    default = 0
    small = 1
    large = 2


class SafeLevel(SearchChoice):
    default = 0
    active = 1
    moderate = 2
    off = 3


class SortType(SearchChoice):
    relevance = 0
    date = 1

    @property
    def display(self) -> str:
        # the API sorts by date with scoring=d
        return "d"


class LocalResultType(SearchChoice):
    blended = 0
    kmlonly = 1
    localonly = 2


class ImageSize(SearchChoice):
    all = 0
    icon = 1
    small = 2
    medium = 3
    large = 4
    xlarge = 5
    xxlarge = 6
    huge = 7


class ImageColorization(SearchChoice):
    all = 0
    gray = 1
    color = 2


class ImageType(SearchChoice):
    all = 0
    face = 1
    photo = 2
    clipart = 3
    lineart = 4
