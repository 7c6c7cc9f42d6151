"""Step 00: Make sure ffmpeg and yt-dlp are invocable before any network work."""

from __future__ import annotations

import logging
from typing import ClassVar

from ytframes.core.errors import ConfigurationError
from ytframes.core.step_base import BaseStep
from ytframes.utils import tools
from .config import ResolveToolsConfig
from .contracts import ResolveToolsInput, ResolveToolsOutput

logger = logging.getLogger(__name__)


class ResolveToolsStep(BaseStep[ResolveToolsInput, ResolveToolsOutput, ResolveToolsConfig]):
    name: ClassVar[str] = "resolve_tools"
    input_type: ClassVar = ResolveToolsInput
    output_type: ClassVar = ResolveToolsOutput
    config_type: ClassVar = ResolveToolsConfig

    def validate_inputs(self, inputs: ResolveToolsInput) -> bool:
        return True

    def run(self, inputs: ResolveToolsInput) -> ResolveToolsOutput:
        ctx = inputs.context
        cfg = self.config

        # Missing ffmpeg is fatal before anything is downloaded.
        transcoder = ctx.which(cfg.transcoder)
        if transcoder is None:
            raise ConfigurationError(
                f"{cfg.transcoder} not found on PATH. "
                "Install it with your package manager (e.g. `apt install ffmpeg`, "
                "`brew install ffmpeg`) or from https://ffmpeg.org/download.html."
            )
        ctx.register(cfg.transcoder, transcoder)
        logger.info(f"Using {cfg.transcoder}: {transcoder}")

        fetched = False
        downloader = ctx.which(cfg.downloader)
        if downloader is None:
            if not cfg.fetch_missing:
                raise ConfigurationError(
                    f"{cfg.downloader} not found on PATH. "
                    "Install it (`pip install yt-dlp`, package manager) or run with --fetch-yt-dlp."
                )
            logger.info(f"{cfg.downloader} not found, fetching a standalone binary")
            acquired = tools.acquire_yt_dlp(cfg.install_dir)
            ctx.register(cfg.downloader, acquired, expose=True)
            downloader = ctx.which(cfg.downloader)
            fetched = True
        else:
            ctx.register(cfg.downloader, downloader)
        logger.info(f"Using {cfg.downloader}: {downloader}")

        return ResolveToolsOutput(
            context=ctx,
            transcoder=transcoder,
            downloader=downloader,
            fetched=fetched,
        )
