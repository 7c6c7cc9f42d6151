"""Pipeline orchestrator: resolve tools, download, extract frames, clean up."""

from __future__ import annotations

import logging
import time
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Any, Iterator

import yaml

from ytframes.steps.s00_resolve_tools.config import ResolveToolsConfig
from ytframes.steps.s00_resolve_tools.contracts import ResolveToolsInput
from ytframes.steps.s00_resolve_tools.step import ResolveToolsStep
from ytframes.steps.s01_download.config import DownloadConfig
from ytframes.steps.s01_download.contracts import DownloadInput
from ytframes.steps.s01_download.step import DownloadStep
from ytframes.steps.s02_extract_frames.config import ExtractFramesConfig
from ytframes.steps.s02_extract_frames.contracts import ExtractFramesInput
from ytframes.steps.s02_extract_frames.step import ExtractFramesStep
from ytframes.utils.subprocess_utils import CommandRunner, SubprocessRunner
from .contracts import PipelineResult, RunConfig, ToolResolutionContext
from .errors import ConfigurationError, StageError
from .scope import resolve_video_target

logger = logging.getLogger(__name__)

STAGE_TOOLS = "checking ffmpeg/yt-dlp availability"
STAGE_SCOPE = "preparing video location"
STAGE_DOWNLOAD = "downloading video with yt-dlp"
STAGE_EXTRACT = "ffmpeg frame extraction"


def load_run_config(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> RunConfig:
    """Merge an optional YAML file with CLI overrides into a validated RunConfig.

    Keys whose override value is None fall back to the file, then to model defaults.
    """
    raw: dict[str, Any] = {}
    if config_path is not None:
        with open(config_path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"cannot parse {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping of options")
        raw.update(loaded)
    raw.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return RunConfig(**raw)


@contextmanager
def _stage(label: str) -> Iterator[None]:
    try:
        yield
    except Exception as e:
        logger.error(f"{label} failed: {e}")
        raise StageError(label, f"{label} failed") from e


def run_pipeline(
    config: RunConfig,
    runner: CommandRunner | None = None,
    context: ToolResolutionContext | None = None,
) -> PipelineResult:
    """Execute the full pipeline for one URL.

    The ephemeral video directory, if any, is removed on every exit path.
    Partial frame output is left in place on failure.
    """
    runner = runner or SubprocessRunner()
    context = context if context is not None else ToolResolutionContext()
    t0 = time.time()

    with _stage(STAGE_TOOLS):
        resolved = ResolveToolsStep(
            ResolveToolsConfig(fetch_missing=config.fetch_yt_dlp, install_dir=config.tools_dir),
            runner=runner,
        ).execute(ResolveToolsInput(context=context))
    tools = resolved.context

    with ExitStack() as stack:
        with _stage(STAGE_SCOPE):
            video_target, scope = resolve_video_target(config.keep_video, config.video_path)
        if scope is not None:
            stack.enter_context(scope)
        logger.info(f"Video target: {video_target}")

        with _stage(STAGE_DOWNLOAD):
            downloaded = DownloadStep(DownloadConfig(), runner=runner).execute(
                DownloadInput(url=config.url, target_path=video_target, tools=tools)
            )

        with _stage(STAGE_EXTRACT):
            frames = ExtractFramesStep(
                ExtractFramesConfig(
                    fps=config.fps,
                    pattern=config.pattern,
                    scale=config.scale,
                    start=config.start,
                    duration=config.duration,
                ),
                runner=runner,
            ).execute(
                ExtractFramesInput(video_path=downloaded.video_path, out_dir=config.out_dir, tools=tools)
            )

    elapsed = time.time() - t0
    logger.info(f"Pipeline complete in {elapsed:.1f}s")
    return PipelineResult(
        out_dir=frames.frames_dir,
        output_pattern=frames.output_pattern,
        frame_count=frames.frame_count,
        video_path=downloaded.video_path if config.keep_video else None,
        elapsed_seconds=elapsed,
    )
