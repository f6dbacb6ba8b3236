import logging
import sys

from .playlist import MediaPlaylist, parse
from .segments import MediaSegment, SegmentCollector

logger = logging.getLogger("hlsparse")
logger.setLevel(logging.INFO)
logger.addHandler(logging.StreamHandler(sys.stderr))

__all__ = ["MediaPlaylist", "MediaSegment", "SegmentCollector", "parse"]
