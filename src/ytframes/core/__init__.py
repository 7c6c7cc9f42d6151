"""ytframes core: shared contracts, errors, base step, resource scope."""

from .contracts import PipelineResult, RunConfig, ToolResolutionContext
from .errors import StageError, YtFramesError
from .logging import setup_logging
from .scope import EphemeralScope, resolve_video_target
from .step_base import BaseStep

__all__ = [
    "BaseStep",
    "EphemeralScope",
    "PipelineResult",
    "RunConfig",
    "StageError",
    "ToolResolutionContext",
    "YtFramesError",
    "resolve_video_target",
    "setup_logging",
]
