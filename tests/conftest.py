"""Shared pytest fixtures for ytframes tests."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Callable

import pytest

from ytframes.utils.subprocess_utils import CommandResult, CommandRunner


def _arg_after(cmd: list[str], flag: str) -> str:
    return cmd[cmd.index(flag) + 1]


def write_video(cmd: list[str]) -> None:
    """Simulate yt-dlp writing the file named by -o."""
    target = Path(_arg_after(cmd, "-o"))
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 64)


def write_frames(cmd: list[str], count: int = 3) -> None:
    """Simulate ffmpeg writing numbered frames to the pattern in the last argument."""
    pattern = cmd[-1]
    for i in range(1, count + 1):
        Path(pattern % i).write_bytes(b"\x89PNG fake")


class FakeRunner(CommandRunner):
    """Records invocations; per-tool hooks simulate output, per-tool exit codes simulate failure."""

    def __init__(
        self,
        hooks: dict[str, Callable[[list[str]], None]] | None = None,
        returncodes: dict[str, int] | None = None,
    ):
        self.hooks = {"yt-dlp": write_video, "ffmpeg": write_frames} if hooks is None else hooks
        self.returncodes = returncodes or {}
        self.calls: list[list[str]] = []
        self.envs: list[dict[str, str] | None] = []

    def run(self, cmd: list[str], env: dict[str, str] | None = None) -> CommandResult:
        self.calls.append(list(cmd))
        self.envs.append(env)
        tool = Path(cmd[0]).name
        code = self.returncodes.get(tool, 0)
        if code == 0 and tool in self.hooks:
            self.hooks[tool](cmd)
        return CommandResult(code, "", f"{tool}: simulated failure" if code else "")

    def calls_for(self, tool: str) -> list[list[str]]:
        return [c for c in self.calls if Path(c[0]).name == tool]


def make_executable(path: Path, body: str = "#!/bin/sh\nexit 0\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def bin_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty directory that is the whole PATH for the test."""
    d = tmp_path / "bin"
    d.mkdir()
    monkeypatch.setenv("PATH", str(d))
    return d


@pytest.fixture
def fake_tools(bin_dir: Path) -> Path:
    """ffmpeg and yt-dlp stand-ins on PATH."""
    make_executable(bin_dir / "ffmpeg")
    make_executable(bin_dir / "yt-dlp")
    return bin_dir


@pytest.fixture
def sample_video(tmp_path: Path) -> Path:
    video = tmp_path / "input" / "video.mp4"
    video.parent.mkdir(parents=True)
    video.write_bytes(b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 64)
    return video
