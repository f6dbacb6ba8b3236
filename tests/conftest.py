import logging

import pytest
from click.testing import CliRunner

BIG_BUCK_BUNNY = """\
#EXTM3U
#EXT-X-VERSION:4
#EXT-X-ALLOW-CACHE:NO
#EXT-X-TARGETDURATION:20
#EXT-X-MEDIA-SEQUENCE:1
#EXT-X-PROGRAM-DATE-TIME:2015-08-25T01:59:23.708+00:00
#EXTINF:12.166,
#EXT-X-BYTERANGE:1430680@4048392
segment_1440468394459_1440468394459_1.ts
#EXTINF:13.292,
#EXT-X-BYTERANGE:840360@5479072
segment_1440468394459_1440468394459_1.ts
#EXTINF:10.500,
#EXT-X-BYTERANGE:1009184@6319432
segment_1440468394459_1440468394459_1.ts
#EXTINF:11.417,
#EXT-X-BYTERANGE:806332@0
segment_1440468394459_1440468394459_2.ts
#EXTINF:12.459,
#EXT-X-BYTERANGE:701616@806332
segment_1440468394459_1440468394459_2.ts
#EXTINF:14.000,
#EXT-X-BYTERANGE:931352@1507948
segment_1440468394459_1440468394459_2.ts
#EXTINF:19.292,
#EXT-X-BYTERANGE:1593676@2439300
segment_1440468394459_1440468394459_2.ts
#EXTINF:7.834,
#EXT-X-BYTERANGE:657812@4032976
segment_1440468394459_1440468394459_2.ts
#EXT-X-ENDLIST
"""


@pytest.fixture
def big_buck_bunny():
    return BIG_BUCK_BUNNY


@pytest.fixture
def m3u8(tmp_path):
    return tmp_path / "playlist.m3u8"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def restore_log_level():
    logger = logging.getLogger("hlsparse")
    level = logger.level
    yield logger
    logger.setLevel(level)
