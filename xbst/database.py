"""Scanning a music folder and writing the ST.DB database."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path

from unidecode import unidecode

from .errors import InternalError, NoFileToConvertError, UnknownFolderError, XbstError
from .ffmpeg import get_duration
from .records import (
    HEADER_MAGIC,
    MAX_SONG_GROUPS,
    MAX_SOUNDTRACKS,
    RECORD_SIZE,
    SONG_MAGIC,
    SONGS_PER_GROUP,
    SOUNDTRACK_MAGIC,
    Header,
    MusicFile,
    Song,
    Soundtrack,
)

DATABASE_NAME = "ST.DB"


@dataclass
class Library:
    """Everything needed to write the database and convert the songs."""

    header: Header
    soundtracks: list[Soundtrack] = field(default_factory=list)
    songs: list[Song] = field(default_factory=list)
    files: list[MusicFile] = field(default_factory=list)

    @property
    def total_songs(self):
        return len(self.files)


def ascii_name(text):
    """Transliterate text to plain ASCII."""
    return unidecode(text)


def _chunks(items, size):
    iterator = iter(items)
    while chunk := list(islice(iterator, size)):
        yield chunk


def _probe(probe, path):
    try:
        return probe(path)
    except (XbstError, ValueError) as exc:
        print(f"\x1b[0;31mFailed to get duration: {exc}\x1b[0;20m", file=sys.stderr)
        return 0


def _list_dir(path):
    return sorted(Path(path).iterdir())


def build_library(input_dir, probe=get_duration):
    """Scan `input_dir`, whose sub-folders are soundtracks, into database records."""
    try:
        entries = _list_dir(input_dir)
    except OSError as exc:
        raise UnknownFolderError(exc) from exc

    soundtracks = []
    songs = []
    files = []
    total_songs = 0
    total_groups = 0

    # The soundtrack id is the entry's position in the folder, stray files included.
    for soundtrack_id, soundtrack_dir in enumerate(entries):
        if not soundtrack_dir.is_dir():
            continue
        if len(soundtracks) >= MAX_SOUNDTRACKS:
            raise InternalError()

        soundtrack_name = ascii_name(soundtrack_dir.name.strip())
        group_ids = []
        songs_in_soundtrack = 0

        for group_id, chunk in enumerate(_chunks(_list_dir(soundtrack_dir), SONGS_PER_GROUP)):
            group_ids.append(total_groups)
            total_groups += 1
            song_ids = [0] * SONGS_PER_GROUP
            times = [0] * SONGS_PER_GROUP
            names = []

            for slot, song_path in enumerate(chunk):
                if not song_path.is_file():
                    continue
                song_ids[slot] = total_songs
                times[slot] = _probe(probe, song_path)
                names.append(ascii_name(song_path.stem).strip())
                files.append(
                    MusicFile(path=song_path, soundtrack_name=soundtrack_name, index=total_songs)
                )
                total_songs += 1
                songs_in_soundtrack += 1

            songs.append(
                Song(
                    magic=SONG_MAGIC,
                    soundtrack_id=soundtrack_id,
                    id=group_id,
                    song_ids=song_ids,
                    song_times_ms=times,
                    names=names,
                )
            )

        total_time = sum(
            sum(song.song_times_ms) for song in songs if song.soundtrack_id == soundtrack_id
        )
        soundtracks.append(
            Soundtrack(
                magic=SOUNDTRACK_MAGIC,
                id=soundtrack_id,
                num_songs=songs_in_soundtrack,
                song_group_ids=group_ids[:MAX_SONG_GROUPS],
                total_time_ms=total_time,
                name=soundtrack_name,
            )
        )

    count = len(soundtracks)
    header = Header(
        magic=HEADER_MAGIC,
        num_soundtracks=count,
        next_soundtrack_id=count + 1,
        soundtrack_ids=list(range(count)),
        next_song_id=0,
    )

    if not files:
        raise NoFileToConvertError()

    return Library(header=header, soundtracks=soundtracks, songs=songs, files=files)


def write_database(output, header, soundtracks, songs):
    """Write the header, 100 soundtrack slots and all song groups to ST.DB."""
    if len(soundtracks) > MAX_SOUNDTRACKS:
        raise InternalError()
    directory = Path(output)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / DATABASE_NAME
    with path.open("wb") as database:
        database.write(header.to_bytes())
        for soundtrack in soundtracks:
            database.write(soundtrack.to_bytes())
        database.write(bytes(RECORD_SIZE * (MAX_SOUNDTRACKS - len(soundtracks))))
        for song in songs:
            database.write(song.to_bytes())
    return path