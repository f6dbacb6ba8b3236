from datetime import timedelta

import pytest

from hlsparse.errors import MalformedTagError
from hlsparse.media.segments import MediaSegment, SegmentCollector, State


@pytest.fixture
def collector():
    return SegmentCollector()


def test_initial_state(collector):
    assert collector.state is State.IDLE
    assert collector.pending is None
    assert collector.segments == []


def test_segment_info_then_url(collector):
    collector.feed("#EXTINF:4.5,title")

    assert collector.state is State.AWAITING_URL
    assert collector.pending == timedelta(seconds=4.5)

    collector.feed("https://example.org/0.ts")

    assert collector.state is State.IDLE
    assert collector.pending is None
    assert collector.segments == [
        MediaSegment(url="https://example.org/0.ts", duration=timedelta(seconds=4.5))
    ]


@pytest.mark.parametrize("line", ["#EXT-X-BYTERANGE:100@0", "#EXT-X-ENDLIST"])
def test_lines_that_keep_waiting(collector, line):
    collector.feed("#EXTINF:1,")
    collector.feed(line)

    assert collector.state is State.AWAITING_URL
    assert collector.segments == []


@pytest.mark.parametrize("line", ["0.ts", "#EXT-X-DISCONTINUITY", ""])
def test_idle_lines_are_skipped(collector, line):
    collector.feed(line)

    assert collector.state is State.IDLE
    assert collector.segments == []


def test_any_other_line_is_the_url(collector):
    collector.feed("#EXTINF:1,")
    collector.feed("#EXT-X-DISCONTINUITY")

    assert collector.segments == [
        MediaSegment("#EXT-X-DISCONTINUITY", timedelta(seconds=1))
    ]


def test_later_segment_info_replaces_pending_one(collector):
    collector.feed("#EXTINF:1,")
    collector.feed("#EXTINF:2,")
    collector.feed("0.ts")

    assert collector.segments == [MediaSegment("0.ts", timedelta(seconds=2))]


def test_malformed_segment_info_keeps_state(collector):
    with pytest.raises(MalformedTagError):
        collector.feed("#EXTINF:x,")

    assert collector.state is State.IDLE
