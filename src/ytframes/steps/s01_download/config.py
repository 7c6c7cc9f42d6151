"""Configuration for Step 01: Download video."""

from pydantic import BaseModel, Field


class DownloadConfig(BaseModel):
    downloader: str = Field("yt-dlp", description="Tool name looked up in the resolution context")
    format_selector: str = Field(
        "bv*[ext=mp4]+ba[ext=m4a]/b[ext=mp4]/best",
        description="yt-dlp -f expression: mp4+m4a pair, then single mp4, then anything",
    )
    remux_container: str = Field("mp4", description="Container passed to --remux-video")
    extra_args: list[str] = Field(default_factory=list, description="Appended before the URL")
