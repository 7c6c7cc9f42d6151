"""Step 01: Download a remote video as MP4 with yt-dlp."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import ClassVar

from ytframes.core.errors import DownloadToolFailed, MissingOutputError
from ytframes.core.step_base import BaseStep
from .config import DownloadConfig
from .contracts import DownloadInput, DownloadOutput

logger = logging.getLogger(__name__)


def build_download_command(
    downloader: Path | str, url: str, target_path: Path, config: DownloadConfig
) -> list[str]:
    """yt-dlp -o <target> -f <selector> --remux-video mp4 [extra...] <url>"""
    return [
        str(downloader),
        "-o", str(target_path),
        "-f", config.format_selector,
        "--remux-video", config.remux_container,
        *config.extra_args,
        url,
    ]


class DownloadStep(BaseStep[DownloadInput, DownloadOutput, DownloadConfig]):
    name: ClassVar[str] = "download"
    input_type: ClassVar = DownloadInput
    output_type: ClassVar = DownloadOutput
    config_type: ClassVar = DownloadConfig

    def validate_inputs(self, inputs: DownloadInput) -> bool:
        if not inputs.url.strip():
            logger.error("Empty video URL")
            return False
        return True

    def run(self, inputs: DownloadInput) -> DownloadOutput:
        target = inputs.target_path
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # A failed write is caught by yt-dlp or the existence check below.
            logger.warning(f"Could not create {target.parent}: {e}")

        downloader = inputs.tools.require(self.config.downloader)
        cmd = build_download_command(downloader, inputs.url, target, self.config)
        try:
            result = self.runner.run(cmd, env=inputs.tools.env())
        except (OSError, subprocess.SubprocessError) as e:
            raise DownloadToolFailed(f"could not run {downloader}: {e}") from e

        if not result.ok:
            raise DownloadToolFailed(
                f"{self.config.downloader} exited with status {result.returncode}: "
                f"{result.stderr_tail()}"
            )

        # yt-dlp can exit 0 without writing the requested file.
        if not target.is_file():
            raise MissingOutputError(
                f"{self.config.downloader} did not produce expected file: {target}"
            )

        size = target.stat().st_size
        if size == 0:
            raise MissingOutputError(f"{self.config.downloader} produced an empty file: {target}")
        logger.info(f"Downloaded {target} ({size / (1024 * 1024):.1f}MB)")
        return DownloadOutput(video_path=target, size_bytes=size)
