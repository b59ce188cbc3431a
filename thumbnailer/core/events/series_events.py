"""Events emitted while a thumbnail series is generated."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from thumbnailer.core.value_objects.thumbnail_result import ThumbnailResult


@dataclass(frozen=True)
class SeriesProgress:
    index: int
    total: int
    timestamp_ms: int
    result: ThumbnailResult
    used_fallback: bool
    thumbnails: tuple[Optional[bytes], ...]

    @property
    def is_last(self) -> bool:
        return self.index == self.total


@dataclass(frozen=True)
class SeriesCompleted:
    total: int
    thumbnails: tuple[Optional[bytes], ...]


SeriesEvent = Union[SeriesProgress, SeriesCompleted]
