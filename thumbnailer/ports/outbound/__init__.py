from thumbnailer.ports.outbound.filmstrip_port import FilmstripPort
from thumbnailer.ports.outbound.media_tool_port import MediaToolPort
from thumbnailer.ports.outbound.scratch_storage_port import ScratchStoragePort
from thumbnailer.ports.outbound.thumbnail_observer_port import (
    NullThumbnailObserver,
    ThumbnailObserverPort,
)

__all__ = [
    "MediaToolPort",
    "ScratchStoragePort",
    "ThumbnailObserverPort",
    "NullThumbnailObserver",
    "FilmstripPort",
]
