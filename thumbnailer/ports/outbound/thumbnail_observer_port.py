"""Port for progress and diagnostics reporting during thumbnail generation."""
from __future__ import annotations
from typing import TYPE_CHECKING, Protocol, runtime_checkable
if TYPE_CHECKING:
    from thumbnailer.application.dto.series_request import SeriesRequest
    from thumbnailer.core.value_objects.thumbnail_result import ThumbnailResult


@runtime_checkable
class ThumbnailObserverPort(Protocol):
    def series_started(self, request: SeriesRequest, qscale: int) -> None: ...
    def thumbnail_started(self, index: int, total: int) -> None: ...
    def thumbnail_generated(self, result: ThumbnailResult) -> None: ...
    def thumbnail_failed(self, result: ThumbnailResult) -> None: ...
    def fallback_used(self, index: int) -> None: ...
    def series_completed(self, total: int) -> None: ...
    def series_failed(self, error: Exception) -> None: ...


class NullThumbnailObserver:
    """Observer that ignores every notification."""

    def series_started(self, request: SeriesRequest, qscale: int) -> None:
        pass

    def thumbnail_started(self, index: int, total: int) -> None:
        pass

    def thumbnail_generated(self, result: ThumbnailResult) -> None:
        pass

    def thumbnail_failed(self, result: ThumbnailResult) -> None:
        pass

    def fallback_used(self, index: int) -> None:
        pass

    def series_completed(self, total: int) -> None:
        pass

    def series_failed(self, error: Exception) -> None:
        pass
