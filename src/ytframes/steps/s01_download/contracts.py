"""I/O contracts for Step 01: Download video."""

from pathlib import Path

from pydantic import BaseModel, Field

from ytframes.core.contracts import ToolResolutionContext


class DownloadInput(BaseModel):
    url: str = Field(..., description="Remote video URL")
    target_path: Path = Field(..., description="Where the MP4 must end up")
    tools: ToolResolutionContext = Field(default_factory=ToolResolutionContext)


class DownloadOutput(BaseModel):
    video_path: Path = Field(..., description="Downloaded MP4 file")
    size_bytes: int = Field(..., description="Size of the downloaded file")
