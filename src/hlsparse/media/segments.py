from datetime import timedelta
from enum import Enum, auto
from typing import List, NamedTuple, Optional

from .tags import BYTERANGE_TAG, ENDLIST_TAG, SEGMENT_TAG, parse_segment_duration


class MediaSegment(NamedTuple):
    """A media segment, see rfc8216 section 3.

    ``duration`` comes from the #EXTINF tag and ``url`` is the line that
    follows it, kept verbatim (neither validated nor resolved).
    """

    url: str
    duration: timedelta


class State(Enum):
    IDLE = auto()
    AWAITING_URL = auto()


class SegmentCollector:
    """Collects segments from playlist lines fed in document order.

    An #EXTINF line moves the collector to ``AWAITING_URL``; the next line
    that is neither a byte range nor the end-of-list tag becomes the URL of
    that segment and moves it back to ``IDLE``. Lines seen while ``IDLE``
    are skipped.
    """

    def __init__(self) -> None:
        self.state = State.IDLE
        self.segments: List[MediaSegment] = []
        self._duration = timedelta(0)

    @property
    def pending(self) -> Optional[timedelta]:
        """Duration announced by an #EXTINF still waiting for its URL."""
        return self._duration if self.state is State.AWAITING_URL else None

    def feed(self, line: str) -> None:
        if line.startswith(SEGMENT_TAG):
            self._duration = parse_segment_duration(line)
            self.state = State.AWAITING_URL
        elif line.startswith(BYTERANGE_TAG) or line == ENDLIST_TAG:
            return
        elif self.state is State.AWAITING_URL:
            self.segments.append(MediaSegment(url=line, duration=self._duration))
            self.state = State.IDLE
