"""Step 02: Extract frames from the downloaded video with ffmpeg."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import ClassVar

from ytframes.core.contracts import frame_glob
from ytframes.core.errors import ExtractionToolFailed, OutputDirUnavailable
from ytframes.core.step_base import BaseStep
from .config import ExtractFramesConfig
from .contracts import ExtractFramesInput, ExtractFramesOutput

logger = logging.getLogger(__name__)


def build_filter_chain(fps: int, scale: str | None = None) -> str:
    """fps sampling always comes first so dropped frames are never rescaled."""
    parts = [f"fps={fps}"]
    if scale:
        parts.append(f"scale={scale}")
    return ",".join(parts)


def build_ffmpeg_command(
    transcoder: Path | str, input_path: Path, output_pattern: Path, config: ExtractFramesConfig
) -> list[str]:
    cmd = [str(transcoder), "-hide_banner", "-y"]
    # -ss before -i seeks the input; -t after -i caps the output.
    if config.start:
        cmd += ["-ss", config.start]
    cmd += ["-i", str(input_path)]
    if config.duration:
        cmd += ["-t", config.duration]
    cmd += ["-vf", build_filter_chain(config.fps, config.scale)]
    cmd += ["-vsync", config.vsync]
    if config.frame_pts:
        cmd += ["-frame_pts", "1"]
    cmd.append(str(output_pattern))
    return cmd


def count_frames(out_dir: Path, pattern: str) -> int:
    """Number of files in out_dir matching the printf-style template."""
    return sum(1 for p in out_dir.glob(frame_glob(pattern)) if p.is_file())


class ExtractFramesStep(BaseStep[ExtractFramesInput, ExtractFramesOutput, ExtractFramesConfig]):
    name: ClassVar[str] = "extract_frames"
    input_type: ClassVar = ExtractFramesInput
    output_type: ClassVar = ExtractFramesOutput
    config_type: ClassVar = ExtractFramesConfig

    def validate_inputs(self, inputs: ExtractFramesInput) -> bool:
        if not inputs.video_path.is_file():
            logger.error(f"Video not found: {inputs.video_path}")
            return False
        if inputs.video_path.stat().st_size == 0:
            logger.error(f"Video is empty: {inputs.video_path}")
            return False
        return True

    def run(self, inputs: ExtractFramesInput) -> ExtractFramesOutput:
        out_dir = inputs.out_dir
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirUnavailable(f"cannot create output directory {out_dir}: {e}") from e

        output_pattern = out_dir / self.config.pattern
        transcoder = inputs.tools.require(self.config.transcoder)
        cmd = build_ffmpeg_command(transcoder, inputs.video_path, output_pattern, self.config)
        try:
            result = self.runner.run(cmd, env=inputs.tools.env())
        except (OSError, subprocess.SubprocessError) as e:
            raise ExtractionToolFailed(f"could not run {transcoder}: {e}") from e

        if not result.ok:
            raise ExtractionToolFailed(
                f"{self.config.transcoder} exited with status {result.returncode}: "
                f"{result.stderr_tail()}"
            )

        # Informational only: an empty result is not treated as failure.
        frame_count = count_frames(out_dir, self.config.pattern)
        if frame_count == 0:
            logger.warning(f"No files matching {self.config.pattern} in {out_dir}")
        else:
            logger.info(f"Extracted {frame_count} frames into {out_dir}")

        return ExtractFramesOutput(
            frames_dir=out_dir,
            output_pattern=output_pattern,
            frame_count=frame_count,
            command=cmd,
        )
