"""Records of the ST.DB soundtrack database and related value types."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

RECORD_SIZE = 512
HEADER_MAGIC = 1
SOUNDTRACK_MAGIC = 136049
SONG_MAGIC = 200819
MAX_SOUNDTRACKS = 100
MAX_SONG_GROUPS = 84
SONGS_PER_GROUP = 6
NAME_LENGTH = 32

_HEADER = struct.Struct(f"<3i{MAX_SOUNDTRACKS}ii96x")
_SOUNDTRACK = struct.Struct(f"<iiI{MAX_SONG_GROUPS}ii{NAME_LENGTH * 2}s96x")
_SONG = struct.Struct(
    f"<4i{SONGS_PER_GROUP}i{SONGS_PER_GROUP}i{NAME_LENGTH * 2 * SONGS_PER_GROUP}s64x"
)


class Codec(str, Enum):
    """Audio codec used for the converted files."""

    WMAV1 = "wmav1"
    WMAV2 = "wmav2"

    def __str__(self):
        return self.value


@dataclass
class MusicFile:
    """A source file waiting to be converted."""

    path: Path
    soundtrack_name: str
    index: int
    soundtrack_index: int = 0


def _fit(values, length):
    values = list(values)[:length]
    return values + [0] * (length - len(values))


def encode_wide(text, length):
    """Encode text as `length` two-byte characters, truncated or zero padded."""
    raw = text.encode("ascii", "replace")[:length].ljust(length, b"\0")
    return bytes(b for char in raw for b in (char, 0))


@dataclass
class Header:
    """The first record of the database."""

    magic: int = 0
    num_soundtracks: int = 0
    next_soundtrack_id: int = 0
    soundtrack_ids: list[int] = field(default_factory=list)
    next_song_id: int = 0

    def to_bytes(self):
        return _HEADER.pack(
            self.magic,
            self.num_soundtracks,
            self.next_soundtrack_id,
            *_fit(self.soundtrack_ids, MAX_SOUNDTRACKS),
            self.next_song_id,
        )


@dataclass
class Soundtrack:
    """One soundtrack: a named list of song groups."""

    magic: int = 0
    id: int = 0
    num_songs: int = 0
    song_group_ids: list[int] = field(default_factory=list)
    total_time_ms: int = 0
    name: str = ""

    def to_bytes(self):
        return _SOUNDTRACK.pack(
            self.magic,
            self.id,
            self.num_songs,
            *_fit(self.song_group_ids, MAX_SONG_GROUPS),
            self.total_time_ms,
            encode_wide(self.name, NAME_LENGTH),
        )


@dataclass
class Song:
    """A song group of up to six songs."""

    magic: int = 0
    soundtrack_id: int = 0
    id: int = 0
    song_ids: list[int] = field(default_factory=list)
    song_times_ms: list[int] = field(default_factory=list)
    names: list[str] = field(default_factory=list)

    def to_bytes(self):
        names = b"".join(
            encode_wide(name, NAME_LENGTH) for name in self.names[:SONGS_PER_GROUP]
        ).ljust(NAME_LENGTH * 2 * SONGS_PER_GROUP, b"\0")
        return _SONG.pack(
            self.magic,
            self.soundtrack_id,
            self.id,
            0,
            *_fit(self.song_ids, SONGS_PER_GROUP),
            *_fit(self.song_times_ms, SONGS_PER_GROUP),
            names,
        )