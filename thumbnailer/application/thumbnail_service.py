"""
Thumbnail generation service.

Grabs single frames through the media tool port and drives evenly spaced
series of them. A failed grab inside a series is replaced by the last good
frame of that series so the strip never falls back to an empty slot once
one frame has been produced.
"""
from __future__ import annotations

import contextlib
import itertools
import time
from typing import AsyncIterator, Optional

from thumbnailer.application.dto.series_request import SeriesRequest
from thumbnailer.core.events.series_events import SeriesCompleted, SeriesEvent, SeriesProgress
from thumbnailer.core.exceptions import MediaToolError, MediaToolUnavailableError
from thumbnailer.core.services.frame_command import build_frame_args
from thumbnailer.core.services.quality_scale import to_ffmpeg_qscale
from thumbnailer.core.services.timestamp_planner import plan_timestamps
from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest
from thumbnailer.core.value_objects.thumbnail_result import FailureReason, ThumbnailResult
from thumbnailer.ports.outbound.media_tool_port import MediaToolPort
from thumbnailer.ports.outbound.scratch_storage_port import ScratchStoragePort
from thumbnailer.ports.outbound.thumbnail_observer_port import (
    NullThumbnailObserver,
    ThumbnailObserverPort,
)


class ThumbnailGenerator:
    """Implements :class:`GenerateThumbnailsUseCase`."""

    def __init__(
        self,
        media_tool: MediaToolPort,
        storage: ScratchStoragePort,
        observer: Optional[ThumbnailObserverPort] = None,
        *,
        filename_prefix: str = "thumbnail_",
        extension: str = "jpg",
    ) -> None:
        self._media_tool = media_tool
        self._storage = storage
        self._observer = observer or NullThumbnailObserver()
        self._filename_prefix = filename_prefix
        self._extension = extension.lstrip(".")
        self._sequence = itertools.count()

    # ── Single frame ──────────────────────────────────────────────

    async def generate_one(self, request: ThumbnailRequest) -> ThumbnailResult:
        """Extract one frame. Never raises; failures come back as a result."""
        output_path = request.output_path or ""
        ts = request.timestamp_ms

        try:
            if request.is_temporary:
                output_path = self._scratch_path()
            result = await self._extract(request, output_path)
        except MediaToolUnavailableError as exc:
            result = ThumbnailResult.failed(ts, FailureReason.TOOL_UNAVAILABLE, str(exc), output_path)
        except MediaToolError as exc:
            result = ThumbnailResult.failed(ts, FailureReason.TOOL_FAILED, str(exc), output_path)
        except OSError as exc:
            result = ThumbnailResult.failed(ts, FailureReason.IO_ERROR, str(exc), output_path)
        except Exception as exc:  # noqa: BLE001
            result = ThumbnailResult.failed(
                ts, FailureReason.UNEXPECTED, f"{type(exc).__name__}: {exc}", output_path
            )

        if result.ok:
            self._observer.thumbnail_generated(result)
        else:
            if request.is_temporary and output_path:
                await self._discard(output_path)
            self._observer.thumbnail_failed(result)
        return result

    async def _extract(self, request: ThumbnailRequest, output_path: str) -> ThumbnailResult:
        if self._storage.exists(output_path):
            await self._storage.delete(output_path)

        returncode = await self._media_tool.execute(build_frame_args(request, output_path))

        if not self._storage.exists(output_path):
            return ThumbnailResult.failed(
                request.timestamp_ms,
                FailureReason.NO_OUTPUT,
                f"exit code {returncode}, nothing written to {output_path}",
                output_path,
            )

        data = await self._storage.read_bytes(output_path)
        if request.is_temporary:
            await self._storage.delete(output_path)
        return ThumbnailResult.success(request.timestamp_ms, data, output_path)

    async def _discard(self, path: str) -> None:
        # The returned result already carries the original failure.
        with contextlib.suppress(OSError):
            if self._storage.exists(path):
                await self._storage.delete(path)

    def _scratch_path(self) -> str:
        name = f"{self._filename_prefix}{time.time_ns()}_{next(self._sequence)}.{self._extension}"
        return str(self._storage.scratch_dir() / name)

    # ── Series ────────────────────────────────────────────────────

    def generate_series(self, request: SeriesRequest) -> AsyncIterator[SeriesEvent]:
        """Stream a growing snapshot after every frame, then a completion marker.

        ``request`` is validated here, before anything is extracted. Frames
        are grabbed lazily and strictly one after another as the consumer
        iterates.
        """
        request.validate()
        return self._run_series(request)

    async def _run_series(self, request: SeriesRequest) -> AsyncIterator[SeriesEvent]:
        total = request.count
        thumbnails: list[Optional[bytes]] = []
        last_bytes: Optional[bytes] = None

        self._observer.series_started(request, to_ffmpeg_qscale(request.quality))

        try:
            for index, timestamp_ms in enumerate(plan_timestamps(request.duration_ms, total), start=1):
                self._observer.thumbnail_started(index, total)

                result = await self.generate_one(
                    ThumbnailRequest(
                        video_path=request.video_path,
                        timestamp_ms=timestamp_ms,
                        quality=request.quality,
                    )
                )

                if result.ok:
                    last_bytes = result.data
                used_fallback = not result.ok and last_bytes is not None
                if used_fallback:
                    self._observer.fallback_used(index)

                thumbnails.append(result.data if result.ok else last_bytes)
                snapshot = tuple(thumbnails)

                yield SeriesProgress(
                    index=index,
                    total=total,
                    timestamp_ms=timestamp_ms,
                    result=result,
                    used_fallback=used_fallback,
                    thumbnails=snapshot,
                )

                if len(thumbnails) == total:
                    self._observer.series_completed(total)
                    yield SeriesCompleted(total=total, thumbnails=snapshot)
        except Exception as exc:  # noqa: BLE001
            # Snapshots already yielded stay valid; the stream just ends here.
            self._observer.series_failed(exc)
