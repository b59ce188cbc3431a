"""FFmpeg subprocess adapter implementing MediaToolPort."""
from __future__ import annotations

import asyncio
import logging
from typing import Optional

from thumbnailer.adapters.outbound.ffmpeg.ffmpeg_base import (
    get_ffmpeg_path,
    get_ffprobe_path,
    get_video_duration,
    run_ffmpeg,
)

logger = logging.getLogger(__name__)


class FFmpegRunner:
    """Runs ffmpeg and ffprobe off the event loop.

    Satisfies :class:`~thumbnailer.ports.outbound.media_tool_port.MediaToolPort`.
    """

    def __init__(
        self,
        ffmpeg_binary: str = "",
        ffprobe_binary: str = "",
        timeout: Optional[int] = 60,
    ) -> None:
        self.ffmpeg_path = get_ffmpeg_path(ffmpeg_binary)
        self.ffprobe_path = get_ffprobe_path(self.ffmpeg_path, ffprobe_binary)
        self._timeout = timeout

    async def execute(self, args: list[str]) -> int:
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, self._run_sync, args)
        return result.returncode

    async def probe_duration_ms(self, video_path: str) -> int:
        loop = asyncio.get_running_loop()
        seconds = await loop.run_in_executor(None, get_video_duration, self.ffprobe_path, video_path)
        logger.info("Probed %s: %.3fs", video_path, seconds)
        return int(seconds * 1000)

    def _run_sync(self, args: list[str]):
        return run_ffmpeg(self.ffmpeg_path, args, timeout=self._timeout)
