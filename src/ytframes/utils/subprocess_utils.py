"""Safe subprocess runner for external tools (yt-dlp, ffmpeg)."""

from __future__ import annotations

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def stderr_tail(self, limit: int = 500) -> str:
        return self.stderr.strip()[-limit:]


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    timeout: float | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess:
    """Run an external command with logging and error handling."""
    cmd_str = shlex.join(cmd)
    logger.info(f"Running: {cmd_str}")

    result = subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=timeout,
        check=False,
    )

    if result.stdout:
        logger.debug(f"stdout: {result.stdout[-500:]}")
    if result.stderr:
        logger.debug(f"stderr: {result.stderr[-500:]}")

    if check and result.returncode != 0:
        raise subprocess.CalledProcessError(
            result.returncode, cmd_str, result.stdout, result.stderr
        )
    return result


class CommandRunner(ABC):
    """Launches an external command and reports how it exited.

    Launch failures (missing binary, permission denied) surface as OSError;
    a non-zero exit is reported through ``CommandResult.returncode``.
    """

    @abstractmethod
    def run(self, cmd: list[str], env: dict[str, str] | None = None) -> CommandResult:
        ...


class SubprocessRunner(CommandRunner):
    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def run(self, cmd: list[str], env: dict[str, str] | None = None) -> CommandResult:
        proc = run_command(cmd, env=env, timeout=self.timeout, check=False)
        return CommandResult(proc.returncode, proc.stdout or "", proc.stderr or "")
