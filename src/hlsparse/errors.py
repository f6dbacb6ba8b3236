from enum import Enum
from typing import Optional


class TagKind(Enum):
    VERSION = "#EXT-X-VERSION"
    DURATION = "#EXT-X-TARGETDURATION"
    SEGMENT_INFO = "#EXTINF"


class ParseError(ValueError):
    """Base class for every playlist that cannot be parsed."""

    message = "Invalid playlist"

    def __init__(
        self, kind: Optional[TagKind] = None, line: Optional[str] = None
    ) -> None:
        self.kind = kind
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        message = self.message
        if self.kind is not None:
            message = f"{message}: {self.kind.value}"
        if self.line is not None:
            message = f"{message} ({self.line!r})"
        return message


class EmptyInputError(ParseError):
    message = "Input contains no data"


class MissingHeaderError(ParseError):
    message = "Input doesn't start with #EXTM3U tag"


class DuplicateTagError(ParseError):
    message = "Playlist contains more than 1 tag"


class MalformedTagError(ParseError):
    message = "Tag found, but could not parse"


class MissingRequiredTagError(ParseError):
    message = "Required tag not found"


class DanglingSegmentError(ParseError):
    message = "Segment tag not followed by a URL"
