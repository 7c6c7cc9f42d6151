"""CLI entry point for ytframes.

Usage:
    ytframes URL                              # frames/frame_000001.png ...
    ytframes URL -o shots -f 2 --scale 1280:-1
    ytframes URL --start 00:00:05 --duration 10 --keep-video
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ytframes.core.errors import YtFramesError, format_error_chain
from ytframes.core.logging import setup_logging

app = typer.Typer(name="ytframes", help="Download a video and extract frames with ffmpeg")
console = Console()
err_console = Console(stderr=True)


@app.command()
def main(
    url: str = typer.Argument(..., help="Video URL"),
    out_dir: Optional[Path] = typer.Option(
        None, "--out-dir", "-o", help="Output directory for frames (created) [default: frames]"
    ),
    fps: Optional[int] = typer.Option(
        None, "--fps", "-f", min=0, help="FPS for frame extraction [default: 10]"
    ),
    pattern: Optional[str] = typer.Option(
        None, "--pattern", help="Output image pattern [default: frame_%06d.png]"
    ),
    scale: Optional[str] = typer.Option(
        None, "--scale", help="Rescale after fps, e.g. 1280:-1 or 720:-2"
    ),
    start: Optional[str] = typer.Option(None, "--start", help="Start time, e.g. 00:00:05"),
    duration: Optional[str] = typer.Option(
        None, "--duration", help="Duration, e.g. 10 or 00:00:10"
    ),
    keep_video: bool = typer.Option(
        False, "--keep-video", help="Keep the downloaded video instead of using a temp dir"
    ),
    video_path: Optional[Path] = typer.Option(
        None, "--video-path", help="Where to save the MP4 with --keep-video [default: video.mp4]"
    ),
    fetch_yt_dlp: bool = typer.Option(
        False, "--fetch-yt-dlp", help="Download yt-dlp if it is not on PATH"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML file with option defaults"
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
) -> None:
    """Download URL with yt-dlp and write frames with ffmpeg."""
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level")
    from ytframes.core.pipeline_runner import load_run_config, run_pipeline

    overrides = {
        "url": url,
        "out_dir": out_dir,
        "fps": fps,
        "pattern": pattern,
        "scale": scale,
        "start": start,
        "duration": duration,
        "keep_video": keep_video or None,
        "video_path": video_path,
        "fetch_yt_dlp": fetch_yt_dlp or None,
    }
    try:
        run_config = load_run_config(config, overrides)
    except (ValidationError, YtFramesError) as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    if video_path is not None and not run_config.keep_video:
        raise typer.BadParameter("--video-path requires --keep-video", param_hint="--video-path")

    try:
        result = run_pipeline(run_config)
    except YtFramesError as e:
        lines = format_error_chain(e)
        err_console.print(f"[red]Error:[/red] {escape(lines[0])}")
        for line in lines[1:]:
            err_console.print(f"  [dim]caused by:[/dim] {escape(line)}")
        raise typer.Exit(1)

    console.print(
        f"[green]Done.[/green] {result.frame_count} frames in: {escape(str(result.out_dir))}"
    )
    if result.video_path is not None:
        console.print(f"  Video kept at: {escape(str(result.video_path))}")


if __name__ == "__main__":
    app()
