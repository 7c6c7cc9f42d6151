"""Configuration for Step 00: Resolve external tools."""

from pathlib import Path

from pydantic import BaseModel, Field


class ResolveToolsConfig(BaseModel):
    transcoder: str = Field("ffmpeg", description="Frame extraction tool, must already be installed")
    downloader: str = Field("yt-dlp", description="Video download tool")
    fetch_missing: bool = Field(False, description="Fetch the downloader if it is not on PATH")
    install_dir: Path | None = Field(None, description="Where a fetched downloader is written")
