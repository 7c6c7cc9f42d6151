"""Where the downloaded video lives: a caller-owned path or a throwaway temp dir."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from .errors import ResourceError

logger = logging.getLogger(__name__)

EPHEMERAL_VIDEO_NAME = "video.mp4"


class EphemeralScope:
    """A uniquely named temporary directory deleted exactly once on scope exit.

    Use as a context manager; ``release()`` is idempotent so an explicit call
    followed by ``__exit__`` is harmless. Cleanup is not guaranteed if the
    process is killed.
    """

    def __init__(self, prefix: str = "ytframes-"):
        try:
            self._tmp = tempfile.TemporaryDirectory(prefix=prefix)
        except OSError as e:
            raise ResourceError(f"cannot create temporary directory: {e}") from e
        self.path = Path(self._tmp.name)
        self._released = False
        logger.debug(f"Created ephemeral dir {self.path}")

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._tmp.cleanup()
        logger.debug(f"Removed ephemeral dir {self.path}")

    def __enter__(self) -> EphemeralScope:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def resolve_video_target(
    keep_video: bool, video_path: Path | None = None
) -> tuple[Path, EphemeralScope | None]:
    """Pick the video destination and, if it is throwaway, the scope that owns it."""
    if keep_video:
        return Path(video_path or EPHEMERAL_VIDEO_NAME), None

    scope = EphemeralScope()
    return scope.path / EPHEMERAL_VIDEO_NAME, scope
