import pytest

from xbst.errors import (
    InternalError,
    MissingFfmpegError,
    MissingFfprobeError,
    NoFileToConvertError,
    UnknownFolderError,
    XbstError,
)


def test_no_file_message():
    error = NoFileToConvertError()
    assert isinstance(error, XbstError)
    assert str(error) == (
        "Didn't find any file to convert, is your input folder structured correctly?"
    )


@pytest.mark.parametrize(
    ("error_class", "expected"),
    [
        (
            NoFileToConvertError,
            "Didn't find any file to convert, is your input folder structured correctly?",
        ),
        (MissingFfprobeError, "You are missing ffprobe in your PATH"),
        (MissingFfmpegError, "You are missing ffmpeg in your PATH"),
    ],
)
def test_errors_are_caught_as_xbst_error(error_class, expected):
    error = error_class()
    caught = None
    try:
        raise error
    except XbstError as exc:
        caught = exc
    assert caught is error
    assert str(caught) == expected


def test_missing_tools_messages():
    assert str(MissingFfprobeError()) == "You are missing ffprobe in your PATH"
    assert str(MissingFfmpegError()) == "You are missing ffmpeg in your PATH"


def test_internal_error_message():
    assert str(InternalError()).startswith("Skill issue on the programmer part")


def test_unknown_folder_uses_os_reason():
    cause = FileNotFoundError(2, "No such file or directory")
    error = UnknownFolderError(cause)
    assert str(error) == "Couldn't find your input folder. No such file or directory"
    assert error.cause is cause


def test_custom_message_overrides_default():
    assert str(NoFileToConvertError("custom")) == "custom"