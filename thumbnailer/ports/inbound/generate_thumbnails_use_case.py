"""Inbound port for thumbnail generation."""
from __future__ import annotations
from typing import TYPE_CHECKING, AsyncIterator, Protocol, runtime_checkable
if TYPE_CHECKING:
    from thumbnailer.application.dto.series_request import SeriesRequest
    from thumbnailer.core.events.series_events import SeriesEvent
    from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest
    from thumbnailer.core.value_objects.thumbnail_result import ThumbnailResult


@runtime_checkable
class GenerateThumbnailsUseCase(Protocol):
    async def generate_one(self, request: ThumbnailRequest) -> ThumbnailResult: ...
    def generate_series(self, request: SeriesRequest) -> AsyncIterator[SeriesEvent]: ...
