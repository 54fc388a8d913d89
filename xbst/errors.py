"""Errors raised while building a soundtrack database."""


class XbstError(Exception):
    """Base class for every error the tool reports to the user."""

    default_message = "xbst failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class UnknownFolderError(XbstError):
    """The input folder could not be read."""

    def __init__(self, cause=None):
        self.cause = cause
        if isinstance(cause, OSError) and cause.strerror:
            reason = cause.strerror
        elif cause is not None:
            reason = str(cause)
        else:
            reason = "unknown error"
        super().__init__(f"Couldn't find your input folder. {reason}")


class NoFileToConvertError(XbstError):
    """The input folder holds no music to convert."""

    default_message = (
        "Didn't find any file to convert, is your input folder structured correctly?"
    )


class MissingFfprobeError(XbstError):
    """The ffprobe executable could not be started."""

    default_message = "You are missing ffprobe in your PATH"


class MissingFfmpegError(XbstError):
    """The ffmpeg executable could not be started."""

    default_message = "You are missing ffmpeg in your PATH"


class InternalError(XbstError):
    """The input exceeds what the database layout can hold."""

    default_message = "Skill issue on the programmer part ngl, report this to dev pls"