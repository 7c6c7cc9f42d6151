"""Exception hierarchy for the ytframes pipeline.

Every stage raises a subclass of YtFramesError. The pipeline runner wraps
stage failures in StageError so the terminal message names the stage while
the original exception stays reachable through ``__cause__``.
"""

from __future__ import annotations


class YtFramesError(Exception):
    """Base class for all pipeline errors."""


class ConfigurationError(YtFramesError):
    """A required external tool is missing and no fallback is permitted."""


class FetchError(YtFramesError):
    """Acquiring a tool binary failed (network, platform, or filesystem)."""


class ResourceError(YtFramesError):
    """A temporary location for the downloaded video could not be created."""


class InputValidationError(YtFramesError):
    """A step rejected its inputs before running."""


class DownloadError(YtFramesError):
    """The download stage failed."""


class DownloadToolFailed(DownloadError):
    """yt-dlp could not be launched or exited non-zero."""


class MissingOutputError(DownloadError):
    """yt-dlp reported success but the expected file does not exist."""


class ExtractionError(YtFramesError):
    """The frame extraction stage failed."""


class OutputDirUnavailable(ExtractionError):
    """The frame output directory could not be created."""


class ExtractionToolFailed(ExtractionError):
    """ffmpeg could not be launched or exited non-zero."""


class StageError(YtFramesError):
    """A pipeline stage failed; the underlying error is chained as __cause__."""

    def __init__(self, stage: str, message: str):
        super().__init__(message)
        self.stage = stage


def format_error_chain(exc: BaseException) -> list[str]:
    """Flatten an exception and its causes into display lines, outermost first."""
    lines = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        lines.append(str(current) or current.__class__.__name__)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return lines
