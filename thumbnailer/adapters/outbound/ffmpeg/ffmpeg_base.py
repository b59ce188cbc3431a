"""
FFmpeg / FFprobe path resolution and command execution utilities.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Optional

from thumbnailer.core.exceptions import MediaToolError, MediaToolUnavailableError

logger = logging.getLogger(__name__)

# Common install locations not always present on PATH
_KNOWN_FFMPEG_PATHS = [
    "/usr/local/bin/ffmpeg",
    "/opt/homebrew/bin/ffmpeg",
    r"C:\Program Files\ffmpeg\bin\ffmpeg.exe",
    r"C:\ffmpeg\bin\ffmpeg.exe",
]


def get_ffmpeg_path(configured: str = "") -> str:
    """Resolve ffmpeg executable path. Checks config, then PATH, then known locations."""
    if configured:
        return configured

    path = shutil.which("ffmpeg")
    if path:
        return path

    for candidate in _KNOWN_FFMPEG_PATHS:
        if os.path.exists(candidate):
            logger.info("Found FFmpeg at: %s", candidate)
            return candidate

    return "ffmpeg"


def get_ffprobe_path(ffmpeg_path: str, configured: str = "") -> str:
    """Resolve ffprobe executable path, preferring the one next to ffmpeg."""
    if configured:
        return configured

    directory, name = os.path.split(ffmpeg_path)
    if directory and "ffmpeg" in name:
        probe = os.path.join(directory, name.replace("ffmpeg", "ffprobe"))
        if os.path.exists(probe):
            return probe
    probe = shutil.which("ffprobe")
    return probe or "ffprobe"


def run_ffmpeg(
    binary: str,
    args: list[str],
    *,
    timeout: Optional[int] = None,
) -> subprocess.CompletedProcess[str]:
    """Run an FFmpeg command, overwriting outputs without prompting.

    Args:
        binary: ffmpeg executable.
        args: Command arguments *without* the ffmpeg binary itself.
        timeout: Optional timeout in seconds.

    Returns:
        CompletedProcess instance. The return code is left to the caller.
    """
    cmd = [binary, "-y", *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as exc:
        raise MediaToolUnavailableError(binary) from exc
    except subprocess.TimeoutExpired as exc:
        raise MediaToolError(f"FFmpeg timed out after {timeout}s") from exc
    if result.returncode != 0:
        logger.debug("FFmpeg exited with %d: %s", result.returncode, result.stderr[-500:])
    return result


def run_ffprobe(binary: str, args: list[str], *, timeout: int = 30) -> subprocess.CompletedProcess[str]:
    """Run an FFprobe command, raising on a non-zero return code."""
    cmd = [binary, *args]
    logger.debug("Running: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout)
    except FileNotFoundError as exc:
        raise MediaToolUnavailableError(binary) from exc
    except subprocess.TimeoutExpired as exc:
        raise MediaToolError(f"FFprobe timed out after {timeout}s") from exc
    if result.returncode != 0:
        raise MediaToolError(f"FFprobe failed: {result.stderr[:500]}")
    return result


def get_video_duration(binary: str, video_path: str) -> float:
    """Get video duration in seconds."""
    result = run_ffprobe(binary, [
        "-v", "error",
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
        video_path,
    ])
    try:
        return float(result.stdout.strip())
    except ValueError as exc:
        raise MediaToolError(f"Unreadable duration for {video_path}: {result.stdout.strip()!r}") from exc
