"""Tests for the ytframes command line."""

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from ytframes.cli import app
from ytframes.core.contracts import PipelineResult
from ytframes.core.errors import MissingOutputError, StageError

runner = CliRunner()


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch("ytframes.cli.setup_logging"):
        yield


def _result(out_dir: str = "frames", video_path: Path | None = None) -> PipelineResult:
    return PipelineResult(
        out_dir=Path(out_dir),
        output_pattern=Path(out_dir) / "frame_%06d.png",
        frame_count=3,
        video_path=video_path,
    )


class TestCli:
    def test_defaults(self):
        with patch("ytframes.core.pipeline_runner.run_pipeline", return_value=_result()) as run:
            result = runner.invoke(app, ["https://example.com/v"])

        assert result.exit_code == 0, result.output
        assert "3 frames in: frames" in result.output
        cfg = run.call_args.args[0]
        assert cfg.url == "https://example.com/v"
        assert cfg.out_dir == Path("frames")
        assert cfg.fps == 10
        assert cfg.pattern == "frame_%06d.png"
        assert cfg.keep_video is False
        assert cfg.fetch_yt_dlp is False

    def test_all_flags(self):
        with patch(
            "ytframes.core.pipeline_runner.run_pipeline",
            return_value=_result("shots", Path("clip.mp4")),
        ) as run:
            result = runner.invoke(app, [
                "https://example.com/v",
                "-o", "shots",
                "-f", "2",
                "--pattern", "img_%04d.jpg",
                "--scale", "1280:-1",
                "--start", "00:00:05",
                "--duration", "10",
                "--keep-video",
                "--video-path", "clip.mp4",
                "--fetch-yt-dlp",
            ])

        assert result.exit_code == 0, result.output
        assert "clip.mp4" in result.output
        cfg = run.call_args.args[0]
        assert cfg.out_dir == Path("shots")
        assert cfg.fps == 2
        assert cfg.pattern == "img_%04d.jpg"
        assert cfg.scale == "1280:-1"
        assert cfg.start == "00:00:05"
        assert cfg.duration == "10"
        assert cfg.keep_video is True
        assert cfg.video_path == Path("clip.mp4")
        assert cfg.fetch_yt_dlp is True

    def test_config_file_defaults(self, tmp_path: Path):
        config_file = tmp_path / "ytframes.yaml"
        config_file.write_text("fps: 4\nscale: '640:-2'\n")
        with patch("ytframes.core.pipeline_runner.run_pipeline", return_value=_result()) as run:
            result = runner.invoke(app, ["u", "--config", str(config_file), "--fps", "6"])

        assert result.exit_code == 0, result.output
        cfg = run.call_args.args[0]
        assert cfg.fps == 6
        assert cfg.scale == "640:-2"

    def test_video_path_requires_keep_video(self):
        with patch("ytframes.core.pipeline_runner.run_pipeline") as run:
            result = runner.invoke(app, ["u", "--video-path", "clip.mp4"])
        assert result.exit_code == 2
        run.assert_not_called()

    def test_unknown_log_level(self):
        with patch("ytframes.cli.setup_logging", side_effect=ValueError("unknown log level 'LOUD'")), patch(
            "ytframes.core.pipeline_runner.run_pipeline"
        ) as run:
            result = runner.invoke(app, ["u", "--log-level", "loud"])
        assert result.exit_code == 2
        run.assert_not_called()

    def test_pattern_without_placeholder(self):
        with patch("ytframes.core.pipeline_runner.run_pipeline") as run:
            result = runner.invoke(app, ["u", "--pattern", "frame.png"])
        assert result.exit_code == 2
        run.assert_not_called()

    def test_stage_failure_exit_code(self):
        try:
            raise MissingOutputError("yt-dlp did not produce expected file: /tmp/x/video.mp4")
        except MissingOutputError as cause:
            error = StageError("downloading video with yt-dlp", "downloading video with yt-dlp failed")
            error.__cause__ = cause

        with patch("ytframes.core.pipeline_runner.run_pipeline", side_effect=error):
            result = runner.invoke(app, ["u"])

        assert result.exit_code == 1
        assert "downloading video with yt-dlp failed" in result.output
        assert "did not produce expected file" in result.output
