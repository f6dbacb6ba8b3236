import math
import re
from datetime import timedelta
from typing import List

from hlsparse.errors import MalformedTagError, TagKind

# See rfc8216 section 4 and https://developer.apple.com/documentation/http_live_streaming

HEADER_TAG = "#EXTM3U"
VERSION_TAG = TagKind.VERSION.value
DURATION_TAG = TagKind.DURATION.value
SEGMENT_TAG = TagKind.SEGMENT_INFO.value
BYTERANGE_TAG = "#EXT-X-BYTERANGE"
ENDLIST_TAG = "#EXT-X-ENDLIST"

UINT64_MAX = 2 ** 64 - 1

_uint_re = re.compile(r"\+?[0-9]+")
_seconds_re = re.compile(r"\+?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def split_lines(text: str) -> List[str]:
    """Split a playlist into lines.

    Only ``\\n`` and ``\\r\\n`` end a line, and a trailing line ending does
    not produce an empty last line, so ``""`` has no lines at all.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def payload(line: str, kind: TagKind) -> str:
    """Return what follows ``<tag>:`` on a tag line."""
    prefix = f"{kind.value}:"
    if not line.startswith(prefix):
        raise MalformedTagError(kind, line)
    return line[len(prefix) :]


def parse_uint(line: str, kind: TagKind) -> int:
    value = payload(line, kind)
    if not _uint_re.fullmatch(value):
        raise MalformedTagError(kind, line)
    number = int(value)
    if number > UINT64_MAX:
        raise MalformedTagError(kind, line)
    return number


def parse_segment_duration(line: str) -> timedelta:
    # The title after the first comma is not kept.
    seconds, _, _title = payload(line, TagKind.SEGMENT_INFO).partition(",")
    if not _seconds_re.fullmatch(seconds):
        raise MalformedTagError(TagKind.SEGMENT_INFO, line)
    value = float(seconds)
    if not math.isfinite(value):
        raise MalformedTagError(TagKind.SEGMENT_INFO, line)
    try:
        return timedelta(seconds=value)
    except OverflowError as error:
        raise MalformedTagError(TagKind.SEGMENT_INFO, line) from error
