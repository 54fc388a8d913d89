import struct

import pytest

from xbst.records import (
    HEADER_MAGIC,
    RECORD_SIZE,
    SONG_MAGIC,
    SOUNDTRACK_MAGIC,
    Codec,
    Header,
    Song,
    Soundtrack,
    encode_wide,
)


def test_encode_wide_pads_with_zero_bytes():
    assert encode_wide("AB", 3) == b"A\x00B\x00\x00\x00"


def test_encode_wide_truncates():
    encoded = encode_wide("x" * 40, 32)
    assert len(encoded) == 64
    assert encoded[::2] == b"x" * 32
    assert set(encoded[1::2]) == {0}


@pytest.mark.parametrize("record", [Header(), Soundtrack(), Song()])
def test_records_are_512_bytes(record):
    assert len(record.to_bytes()) == RECORD_SIZE


def test_default_records_are_all_zero():
    assert Header().to_bytes() == bytes(RECORD_SIZE)
    assert Song().to_bytes() == bytes(RECORD_SIZE)


def test_header_layout():
    header = Header(
        magic=HEADER_MAGIC,
        num_soundtracks=2,
        next_soundtrack_id=3,
        soundtrack_ids=[0, 1],
        next_song_id=0,
    )
    data = header.to_bytes()
    assert struct.unpack_from("<3i", data) == (HEADER_MAGIC, 2, 3)
    assert struct.unpack_from("<3i", data, 12) == (0, 1, 0)
    assert data[412:] == bytes(100)


def test_soundtrack_layout():
    soundtrack = Soundtrack(
        magic=SOUNDTRACK_MAGIC,
        id=4,
        num_songs=7,
        song_group_ids=[5, 6],
        total_time_ms=1234,
        name="AB",
    )
    data = soundtrack.to_bytes()
    assert struct.unpack_from("<iiI", data) == (SOUNDTRACK_MAGIC, 4, 7)
    assert struct.unpack_from("<3i", data, 12) == (5, 6, 0)
    assert struct.unpack_from("<i", data, 348) == (1234,)
    assert data[352:416] == encode_wide("AB", 32)


def test_song_layout():
    song = Song(
        magic=SONG_MAGIC,
        soundtrack_id=1,
        id=2,
        song_ids=[10, 11],
        song_times_ms=[100, 200],
        names=["one", "two"],
    )
    data = song.to_bytes()
    assert struct.unpack_from("<4i", data) == (SONG_MAGIC, 1, 2, 0)
    assert struct.unpack_from("<6i", data, 16) == (10, 11, 0, 0, 0, 0)
    assert struct.unpack_from("<6i", data, 40) == (100, 200, 0, 0, 0, 0)
    assert data[64:128] == encode_wide("one", 32)
    assert data[128:192] == encode_wide("two", 32)
    assert data[192:] == bytes(320)


def test_song_group_ids_truncated_to_84():
    soundtrack = Soundtrack(song_group_ids=list(range(1, 100)))
    data = soundtrack.to_bytes()
    ids = struct.unpack_from("<84i", data, 12)
    assert list(ids) == list(range(1, 85))


def test_codec_string_form():
    assert str(Codec.WMAV2) == "wmav2"
    assert Codec("wmav1") is Codec.WMAV1