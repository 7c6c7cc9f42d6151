"""I/O contracts for Step 02: Video to Frames extraction."""

from pathlib import Path

from pydantic import BaseModel, Field

from ytframes.core.contracts import ToolResolutionContext


class ExtractFramesInput(BaseModel):
    video_path: Path = Field(..., description="Path to input video file (.mp4)")
    out_dir: Path = Field(..., description="Directory receiving the frame images")
    tools: ToolResolutionContext = Field(default_factory=ToolResolutionContext)


class ExtractFramesOutput(BaseModel):
    frames_dir: Path = Field(..., description="Directory containing extracted frames")
    output_pattern: Path = Field(..., description="out_dir joined with the filename template")
    frame_count: int = Field(..., description="Files matching the template after extraction")
    command: list[str] = Field(default_factory=list, description="ffmpeg invocation used")
