"""Probing and converting audio files with ffprobe and ffmpeg."""

from __future__ import annotations

import math
import struct
import subprocess
from pathlib import Path

from .errors import MissingFfmpegError, MissingFfprobeError

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _to_f32(value):
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_duration(text):
    """Turn ffprobe's duration in seconds into whole milliseconds."""
    stripped = text.strip()
    if "_" in stripped:
        raise ValueError(f"invalid duration: {text!r}")
    try:
        seconds = _to_f32(float(stripped))
    except ValueError:
        raise ValueError(f"invalid duration: {text!r}") from None
    millis = _to_f32(seconds * 1000.0)
    if math.isnan(millis):
        return 0
    if millis >= _I32_MAX:
        return _I32_MAX
    if millis <= _I32_MIN:
        return _I32_MIN
    return int(millis)


def get_duration(path):
    """Return the duration of an audio file in milliseconds."""
    command = [
        "ffprobe",
        "-v",
        "error",
        "-show_entries",
        "format=duration",
        "-of",
        "default=noprint_wrappers=1:nokey=1",
        str(path),
    ]
    try:
        result = subprocess.run(command, capture_output=True, check=False)
    except OSError as exc:
        raise MissingFfprobeError() from exc
    return parse_duration(result.stdout.decode("utf-8"))


def output_file(output, soundtrack_index, song_index):
    """Return the path of a converted song inside the output folder."""
    return f"{output}/{soundtrack_index:04d}/{song_index:08x}.wma"


def convert_to_wma(source, output, bitrate, codec, soundtrack_index, song_index):
    """Convert one file to WMA in the layout the database expects."""
    Path(f"{output}/{soundtrack_index:04d}").mkdir(parents=True, exist_ok=True)
    command = [
        "ffmpeg",
        "-i",
        str(source),
        "-acodec",
        str(codec),
        "-ac",
        "2",
        "-ar",
        "44100",
        "-b:a",
        f"{bitrate}k",
        "-map_metadata",
        "-1",
        "-map",
        "0:a",
        "-y",
        output_file(output, soundtrack_index, song_index),
    ]
    try:
        subprocess.run(command, capture_output=True, check=False)
    except OSError as exc:
        raise MissingFfmpegError() from exc