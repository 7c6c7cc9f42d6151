"""I/O contracts for Step 00: Resolve external tools."""

from pathlib import Path

from pydantic import BaseModel, Field

from ytframes.core.contracts import ToolResolutionContext


class ResolveToolsInput(BaseModel):
    context: ToolResolutionContext = Field(
        default_factory=ToolResolutionContext,
        description="Context to resolve into; pre-registered tools win over PATH",
    )


class ResolveToolsOutput(BaseModel):
    context: ToolResolutionContext = Field(..., description="Context with both tools registered")
    transcoder: Path = Field(..., description="Resolved ffmpeg executable")
    downloader: Path = Field(..., description="Resolved yt-dlp executable")
    fetched: bool = Field(False, description="True if the downloader was fetched this run")
