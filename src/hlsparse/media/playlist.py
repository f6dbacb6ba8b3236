import logging
import os
from datetime import timedelta
from typing import List, NamedTuple, Optional, Tuple

from hlsparse.errors import (
    DanglingSegmentError,
    DuplicateTagError,
    EmptyInputError,
    MalformedTagError,
    MissingHeaderError,
    MissingRequiredTagError,
    ParseError,
    TagKind,
)

from .segments import MediaSegment, SegmentCollector
from .tags import ENDLIST_TAG, HEADER_TAG, parse_uint, split_lines

STRICT = os.getenv("HLSPARSE_STRICT", "").lower() in ("1", "true", "yes", "on")

_logger = logging.getLogger("hlsparse")


class MediaPlaylist(NamedTuple):
    """An HLS media playlist (i.e. not a master playlist)."""

    # Whether an #EXT-X-ENDLIST tag was found, see rfc8216 4.3.3.4.
    ended: bool
    segments: Tuple[MediaSegment, ...]
    # No segment may exceed it, see rfc8216 4.3.3.1.
    target_duration: timedelta
    # Compatibility version, see rfc8216 4.3.1.2.
    version: int

    @property
    def duration(self) -> timedelta:
        return sum((segment.duration for segment in self.segments), timedelta(0))

    @classmethod
    def parse(cls, text: str, strict: Optional[bool] = None) -> "MediaPlaylist":
        return parse(text, strict=strict)


def _find_single(lines: List[str], kind: TagKind) -> Optional[str]:
    found = [line for line in lines if line.startswith(kind.value)]
    if len(found) > 1:
        raise DuplicateTagError(kind)
    return found[0] if found else None


def _version(lines: List[str]) -> int:
    line = _find_single(lines, TagKind.VERSION)
    if line is None:
        # No version tag means the playlist only uses version 1 features.
        return 0
    return parse_uint(line, TagKind.VERSION)


def _target_duration(lines: List[str]) -> timedelta:
    line = _find_single(lines, TagKind.DURATION)
    if line is None:
        raise MissingRequiredTagError(TagKind.DURATION)
    try:
        # timedelta stops short of 2**64 seconds; those values are rejected.
        return timedelta(seconds=parse_uint(line, TagKind.DURATION))
    except OverflowError as error:
        raise MalformedTagError(TagKind.DURATION, line) from error


def _segments(lines: List[str], strict: bool) -> Tuple[MediaSegment, ...]:
    collector = SegmentCollector()
    for line in lines:
        collector.feed(line)
    if collector.pending is not None:
        if strict:
            raise DanglingSegmentError(TagKind.SEGMENT_INFO)
        _logger.debug("Dropping #EXTINF without a URL at end of playlist")
    return tuple(collector.segments)


def parse(text: str, strict: Optional[bool] = None) -> MediaPlaylist:
    """Parse ext-m3u text into a :class:`MediaPlaylist`.

    Raises a :class:`~hlsparse.errors.ParseError` subclass if the text
    does not follow rfc8216 section 4. With ``strict`` an #EXTINF tag that
    is never followed by a URL is an error too; it defaults to the
    ``HLSPARSE_STRICT`` environment variable.
    """
    if strict is None:
        strict = STRICT
    lines = split_lines(text)
    try:
        if not lines:
            raise EmptyInputError()
        if lines[0] != HEADER_TAG:
            raise MissingHeaderError(line=lines[0])
        playlist = MediaPlaylist(
            version=_version(lines),
            target_duration=_target_duration(lines),
            segments=_segments(lines, strict),
            ended=any(line == ENDLIST_TAG for line in lines),
        )
    except ParseError as error:
        _logger.debug("Parsing failed: %s", error)
        raise
    _logger.debug(
        "Parsed playlist version %d with %d segment(s)",
        playlist.version,
        len(playlist.segments),
    )
    return playlist
