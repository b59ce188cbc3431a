"""Function-style entry points mirroring the classic call shapes."""
from __future__ import annotations

from typing import AsyncIterator, Callable, Optional

from thumbnailer.application.dto.series_request import SeriesRequest
from thumbnailer.application.thumbnail_service import ThumbnailGenerator
from thumbnailer.core.events.series_events import SeriesEvent, SeriesProgress
from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest


def _default_generator() -> ThumbnailGenerator:
    from thumbnailer.infrastructure.container import ApplicationContainer

    return ApplicationContainer().thumbnail_generator()


async def generate_single_thumbnail(
    video_path: str,
    timestamp_ms: int,
    quality: int,
    output_path: Optional[str] = None,
    *,
    generator: Optional[ThumbnailGenerator] = None,
) -> Optional[bytes]:
    """Return the image bytes of one frame, or ``None`` if it could not be produced."""
    generator = generator or _default_generator()
    result = await generator.generate_one(
        ThumbnailRequest(
            video_path=video_path,
            timestamp_ms=timestamp_ms,
            quality=quality,
            output_path=output_path,
        )
    )
    return result.data


def generate_thumbnails(
    video_path: str,
    duration_ms: int,
    count: int,
    quality: int,
    on_complete: Optional[Callable[[], None]] = None,
    *,
    generator: Optional[ThumbnailGenerator] = None,
) -> AsyncIterator[list[Optional[bytes]]]:
    """Yield the growing list of thumbnails, one entry longer each time.

    ``on_complete`` fires once, just before the full list is yielded.
    """
    generator = generator or _default_generator()
    events = generator.generate_series(
        SeriesRequest(
            video_path=video_path,
            duration_ms=duration_ms,
            count=count,
            quality=quality,
        )
    )
    return _snapshots(events, on_complete)


async def _snapshots(
    events: AsyncIterator[SeriesEvent],
    on_complete: Optional[Callable[[], None]],
) -> AsyncIterator[list[Optional[bytes]]]:
    async for event in events:
        if not isinstance(event, SeriesProgress):
            continue
        if event.is_last and on_complete is not None:
            on_complete()
        yield list(event.thumbnails)
