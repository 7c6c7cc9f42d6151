"""Configuration for Step 02: Video to Frames."""

from pydantic import BaseModel, Field


class ExtractFramesConfig(BaseModel):
    transcoder: str = Field("ffmpeg", description="Tool name looked up in the resolution context")
    fps: int = Field(10, ge=0, description="Frames per second to sample (0 passed through)")
    pattern: str = Field("frame_%06d.png", description="Output filename template")
    scale: str | None = Field(None, description="scale filter argument, applied after fps")
    start: str | None = Field(None, description="Input seek (-ss), placed before -i")
    duration: str | None = Field(None, description="Output duration (-t), placed after -i")
    vsync: str = Field("vfr", description="Timestamp handling for variable frame rate sources")
    frame_pts: bool = Field(True, description="Number output frames by presentation timestamp")
