"""Parse HTTP Live Streaming (HLS) media playlists, see rfc8216 section 4."""

from .errors import (
    DanglingSegmentError,
    DuplicateTagError,
    EmptyInputError,
    MalformedTagError,
    MissingHeaderError,
    MissingRequiredTagError,
    ParseError,
    TagKind,
)
from .media import MediaPlaylist, MediaSegment, SegmentCollector, parse

__version__ = "0.1.0"

__all__ = [
    "DanglingSegmentError",
    "DuplicateTagError",
    "EmptyInputError",
    "MalformedTagError",
    "MediaPlaylist",
    "MediaSegment",
    "MissingHeaderError",
    "MissingRequiredTagError",
    "ParseError",
    "SegmentCollector",
    "TagKind",
    "parse",
]
