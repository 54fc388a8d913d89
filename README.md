# xbst

`xbst` turns a folder of music into a soundtrack library that an original Xbox
can read. It writes the `ST.DB` soundtrack database and converts each track to
WMA with `ffmpeg`. Track durations are read with `ffprobe`.

## Requirements

- Python 3.10 or later
- `ffmpeg` and `ffprobe` on your `PATH`

## Installation

```
pip install .
```

## Preparing your music

Each folder directly inside the input folder becomes one soundtrack, and the
folder's name becomes the soundtrack's name. The files inside each folder
become that soundtrack's songs, and each file's name without its extension
becomes the song's title. Folders and files are read in sorted order. Files
in the input folder itself, and folders nested inside a soundtrack folder, are
skipped.

```
music/
├── Album One/
│   ├── First Song.mp3
│   └── Second Song.flac
└── Album Two/
    └── Another Song.ogg
```

Names are transliterated to plain ASCII and cut to 32 characters, because the
database has no room for anything else.

The database layout sets some limits:

- at most 100 soundtracks; more stops `xbst` with an error;
- songs are stored in groups of six, and a soundtrack lists at most 84 groups.

## Usage

```
xbst [INPUT] [OUTPUT] [--bitrate KBPS] [--codec {wmav1,wmav2}]
```

- `INPUT`: the folder holding your music (default `./music`)
- `OUTPUT`: the folder that receives the database and the converted files
  (default `./output`)
- `-b`, `--bitrate`: the audio bitrate in kbit/s (default `128`)
- `-c`, `--codec`: the WMA codec to use, `wmav1` or `wmav2` (default `wmav2`)
- `--version`: print the version and exit

For example:

```
xbst ./music ./output --bitrate 192 --codec wmav2
```

The output folder then holds `ST.DB` and the converted tracks. Every track is
written to the `0000` folder and named after its position across the whole
library, in eight hexadecimal digits (`0000/00000000.wma`,
`0000/00000001.wma`, ...). Copy the output folder's contents to the
soundtrack folder on the console's hard drive (usually
`E:\TDATA\fffe0000\music`).

A progress bar shows each track as it is converted.

When things go wrong:

- if the input folder cannot be read, holds nothing to convert, or `ffmpeg`
  cannot be started, `xbst` prints the error in red and stops;
- if a track's duration cannot be read (for instance when `ffprobe` is
  missing), `xbst` prints a warning, records the duration as zero and goes on.

## Using it from Python

```python
from xbst.cli import process
from xbst.records import Codec

library = process("./music", "./output", 128, Codec.WMAV2)
print(library.total_songs)
```

The steps can also be run separately:

- `xbst.database.build_library(input_dir, probe)` scans a music folder into a
  `Library` holding the `Header`, `Soundtrack` and `Song` records and the list
  of files to convert; `probe` is the function that returns a file's duration
  in milliseconds (`xbst.ffmpeg.get_duration` by default).
- `xbst.database.write_database(output, header, soundtracks, songs)` writes
  `ST.DB` into `output` and returns its path.
- `xbst.ffmpeg.convert_to_wma(source, output, bitrate, codec, soundtrack_index, song_index)`
  converts a single file.

Errors are raised as subclasses of `xbst.errors.XbstError`.

## What it does not do

`xbst` always builds a fresh library: it overwrites `ST.DB` in the output
folder and does not read or merge with an existing database. It does not
copy anything to the console.