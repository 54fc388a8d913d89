"""Command line entry point: build ST.DB and convert a music folder."""

from __future__ import annotations

import argparse
import sys
from importlib import metadata

from .database import build_library, write_database
from .errors import XbstError
from .ffmpeg import convert_to_wma
from .records import Codec

_BAR_WIDTH = 100 // 3


def _version():
    try:
        return metadata.version("xbst")
    except metadata.PackageNotFoundError:
        return "0.1.2"


def progress_line(index, total):
    """Return the progress bar shown while converting song `index` (0-based)."""
    percentage = (index + 1) / total * 100.0
    whole = int(percentage)
    bar = "=" * (whole // 3)
    if percentage < 100.0:
        bar += ">"
    padding = " " * (_BAR_WIDTH - whole // 3)
    return f"{whole:3}% [{bar}{padding}] {index + 1:3}/{total}"


def process(input_dir="./music", output="./output", bitrate=128, codec=Codec.WMAV2):
    """Write the database for `input_dir` and convert every song into `output`."""
    library = build_library(input_dir)
    write_database(output, library.header, library.soundtracks, library.songs)

    total = library.total_songs
    out = sys.stdout
    for music in library.files:
        out.write(f"\x1b[1A\x1b[K\r{progress_line(music.index, total)}")
        out.write(f"\x1b[1B\r\x1b[KProcessing {music.soundtrack_name} - {music.path.stem}")
        out.flush()
        convert_to_wma(music.path, output, bitrate, codec, music.soundtrack_index, music.index)

    out.write("\x1b[1A\x1b[K\r\x1b[K Done.")
    out.flush()
    return library


def _bitrate(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid bitrate: {text!r}") from None
    if not -(2**15) <= value < 2**15:
        raise argparse.ArgumentTypeError(f"bitrate out of range: {value}")
    return value


def _parser():
    parser = argparse.ArgumentParser(
        prog="xbst", description="Build an Xbox soundtrack database from a music folder."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    parser.add_argument(
        "input", nargs="?", default="./music", help="Input folder of your musics"
    )
    parser.add_argument(
        "output",
        nargs="?",
        default="./output",
        help="Output folder for the database and converted musics",
    )
    parser.add_argument(
        "-b", "--bitrate", type=_bitrate, default=128, help="Bitrate for the output"
    )
    parser.add_argument(
        "-c",
        "--codec",
        type=Codec,
        choices=list(Codec),
        default=Codec.WMAV2,
        help="Codec to use for conversion",
    )
    return parser


def main(argv=None):
    args = _parser().parse_args(argv)
    print("\n  XBST\n")
    try:
        process(args.input, args.output, args.bitrate, args.codec)
    except (XbstError, OSError) as exc:
        print(f"\r\x1b[K\x1b[0;31m{exc}\x1b[0;20m", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())