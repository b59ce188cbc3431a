"""Observer adapter that reports generation progress through ``logging``."""

from __future__ import annotations

import logging
from typing import Optional

from thumbnailer.application.dto.series_request import SeriesRequest
from thumbnailer.core.services.timecode import format_timecode
from thumbnailer.core.value_objects.thumbnail_result import ThumbnailResult


class LoggingThumbnailObserver:
    """Implements :class:`ThumbnailObserverPort` with log lines."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def series_started(self, request: SeriesRequest, qscale: int) -> None:
        self._logger.info("Generating thumbnails for video: %s", request.video_path)
        self._logger.info("Total thumbnails to generate: %d", request.count)
        self._logger.info("Quality: %d%% (FFmpeg scale: %d)", request.quality, qscale)

    def thumbnail_started(self, index: int, total: int) -> None:
        self._logger.info("Generating thumbnail %d / %d", index, total)

    def thumbnail_generated(self, result: ThumbnailResult) -> None:
        self._logger.info(
            "Generated thumbnail at %s | Size: %.2f kB",
            format_timecode(result.timestamp_ms),
            result.size_kb,
        )

    def thumbnail_failed(self, result: ThumbnailResult) -> None:
        self._logger.warning(
            "Couldn't generate thumbnail at %dms (%s): %s",
            result.timestamp_ms,
            result.failure.value if result.failure else "unknown",
            result.detail,
        )

    def fallback_used(self, index: int) -> None:
        self._logger.info("Using last successful thumbnail as fallback for #%d", index)

    def series_completed(self, total: int) -> None:
        self._logger.info("Thumbnails generated successfully! (%d)", total)

    def series_failed(self, error: Exception) -> None:
        self._logger.error("Couldn't generate thumbnails: %s", error, exc_info=error)
