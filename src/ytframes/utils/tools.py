"""Locate external tools on a search path and fetch yt-dlp when it is missing."""

from __future__ import annotations

import logging
import os
import platform
import shutil
import stat
import sys
from pathlib import Path

import requests
from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TransferSpeedColumn,
)

from ytframes.core.errors import FetchError

logger = logging.getLogger(__name__)
console = Console(stderr=True)

YT_DLP_RELEASE_URL = "https://github.com/yt-dlp/yt-dlp/releases/latest/download"

# (sys.platform prefix, machine) -> release asset; machine None matches any
_YT_DLP_ASSETS: list[tuple[str, str | None, str]] = [
    ("win32", None, "yt-dlp.exe"),
    ("darwin", None, "yt-dlp_macos"),
    ("linux", "x86_64", "yt-dlp_linux"),
    ("linux", "amd64", "yt-dlp_linux"),
    ("linux", "aarch64", "yt-dlp_linux_aarch64"),
    ("linux", "arm64", "yt-dlp_linux_aarch64"),
    ("linux", "armv7l", "yt-dlp_linux_armv7l"),
]


def locate(name: str, search_path: str | None = None) -> Path | None:
    """Resolve an executable by name; None when it is not on the search path."""
    found = shutil.which(name, path=search_path)
    return Path(found).absolute() if found else None


def yt_dlp_asset_name(system: str | None = None, machine: str | None = None) -> str:
    """Pick the prebuilt yt-dlp release asset for a platform."""
    system = system or sys.platform
    machine = (machine or platform.machine()).lower()
    for prefix, arch, asset in _YT_DLP_ASSETS:
        if system.startswith(prefix) and (arch is None or arch == machine):
            return asset
    raise FetchError(f"no prebuilt yt-dlp binary for platform {system}/{machine}")


def default_install_dir() -> Path:
    """Directory of the running entry script if writable, else the working directory."""
    candidate = Path(sys.argv[0]).resolve().parent if sys.argv and sys.argv[0] else None
    if candidate is not None and candidate.is_dir() and os.access(candidate, os.W_OK):
        return candidate
    return Path.cwd()


def _download_with_progress(url: str, output_path: Path) -> None:
    """Download a file with rich progress bar."""
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        DownloadColumn(),
        TransferSpeedColumn(),
        console=console,
        transient=True,
    ) as progress:
        with requests.get(url, stream=True, timeout=30) as response:
            response.raise_for_status()
            total = int(response.headers.get("content-length", 0))
            task = progress.add_task(f"Downloading {output_path.name}", total=total or None)
            with open(output_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=65536):
                    if chunk:
                        f.write(chunk)
                        progress.update(task, advance=len(chunk))


def acquire_yt_dlp(dest_dir: Path | None = None, asset: str | None = None) -> Path:
    """Fetch the yt-dlp binary into dest_dir and mark it executable.

    Network, platform and filesystem failures all surface as FetchError.
    """
    asset = asset or yt_dlp_asset_name()
    dest_dir = Path(dest_dir) if dest_dir is not None else default_install_dir()
    binary_name = "yt-dlp.exe" if asset.endswith(".exe") else "yt-dlp"
    target = (dest_dir / binary_name).absolute()
    url = f"{YT_DLP_RELEASE_URL}/{asset}"

    logger.info(f"Fetching {url} -> {target}")
    partial = target.with_name(target.name + ".part")
    try:
        _download_with_progress(url, partial)
        partial.replace(target)
        mode = target.stat().st_mode
        target.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except requests.RequestException as e:
        if partial.exists():
            partial.unlink()
        raise FetchError(f"downloading yt-dlp from {url} failed: {e}") from e
    except OSError as e:
        if partial.exists():
            partial.unlink()
        raise FetchError(f"writing yt-dlp to {target} failed: {e}") from e

    logger.warning(f"{target} was fetched without checksum or signature verification")
    return target
