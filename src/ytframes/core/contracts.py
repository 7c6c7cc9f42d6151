"""Common Pydantic models shared across pipeline steps."""

from __future__ import annotations

import os
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ytframes.core.errors import ConfigurationError

# printf-style integer placeholder understood by ffmpeg's image2 muxer; "%%" is a literal %
FRAME_PLACEHOLDER = re.compile(r"%0?\d*d")


def has_frame_placeholder(pattern: str) -> bool:
    return any(FRAME_PLACEHOLDER.search(part) for part in pattern.split("%%"))


def frame_glob(pattern: str) -> str:
    """Glob matching the files ffmpeg writes for a filename template."""
    return "%".join(FRAME_PLACEHOLDER.sub("*", part) for part in pattern.split("%%"))


class RunConfig(BaseModel):
    """Validated, read-only configuration for one pipeline run."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="Source video URL")
    out_dir: Path = Field(Path("frames"), description="Frame output directory (created if absent)")
    fps: int = Field(10, ge=0, description="Frames per second to sample")
    pattern: str = Field("frame_%06d.png", description="Output filename template")
    scale: str | None = Field(None, description="Rescale spec W:H, -1/-2 keep aspect")
    start: str | None = Field(None, description="Input seek offset, e.g. 00:00:05")
    duration: str | None = Field(None, description="Output duration cap, e.g. 10 or 00:00:10")
    keep_video: bool = Field(False, description="Retain the downloaded video at video_path")
    video_path: Path = Field(Path("video.mp4"), description="Destination of the retained video")
    fetch_yt_dlp: bool = Field(False, description="Download yt-dlp if it is not on PATH")
    tools_dir: Path | None = Field(None, description="Where a fetched yt-dlp binary is written")

    @field_validator("pattern")
    @classmethod
    def _pattern_has_placeholder(cls, value: str) -> str:
        if not has_frame_placeholder(value):
            raise ValueError(f"pattern must contain a numeric placeholder such as %06d: {value!r}")
        return value


class ToolResolutionContext(BaseModel):
    """Resolved external tools for one run.

    Fetched tools register their directory in ``extra_dirs``; those directories
    are searched before the inherited PATH and are prepended to PATH in the
    environment handed to child processes. os.environ itself is never touched.
    """

    tools: dict[str, Path] = Field(default_factory=dict)
    extra_dirs: list[Path] = Field(default_factory=list)

    def search_path(self) -> str:
        parts = [str(d) for d in self.extra_dirs]
        inherited = os.environ.get("PATH", "")
        if inherited:
            parts.append(inherited)
        return os.pathsep.join(parts)

    def which(self, name: str) -> Path | None:
        if name in self.tools:
            return self.tools[name]
        from ytframes.utils.tools import locate

        return locate(name, self.search_path())

    def register(self, name: str, path: Path, expose: bool = False) -> Path:
        """Record a resolved tool.

        With ``expose`` the tool's directory joins the search dirs (once), so later
        lookups and child processes find it by name.
        """
        path = Path(path).absolute()
        self.tools[name] = path
        if expose and path.parent not in self.extra_dirs:
            self.extra_dirs.append(path.parent)
        return path

    def require(self, name: str) -> Path:
        path = self.which(name)
        if path is None:
            raise ConfigurationError(f"{name} is not resolved for this run")
        return path

    def env(self) -> dict[str, str] | None:
        """Environment for child processes, or None to inherit unchanged."""
        if not self.extra_dirs:
            return None
        env = dict(os.environ)
        env["PATH"] = self.search_path()
        return env


class PipelineResult(BaseModel):
    """Summary returned by the pipeline runner."""

    out_dir: Path
    output_pattern: Path
    frame_count: int = 0
    video_path: Path | None = Field(None, description="Retained video, None when ephemeral")
    elapsed_seconds: float = 0.0
