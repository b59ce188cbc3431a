"""
Wires ports and adapters together based on configuration.
"""
from __future__ import annotations

import logging
from typing import Optional

from thumbnailer.infrastructure.config import Settings

logger = logging.getLogger(__name__)


class ApplicationContainer:
    """Simplified container that builds concrete instances from settings.

    Usage::

        container = ApplicationContainer(settings)
        generator = container.thumbnail_generator()
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._cache: dict[str, object] = {}

    def _get_or_create(self, key: str, factory):
        if key not in self._cache:
            self._cache[key] = factory(self.settings)
        return self._cache[key]

    # ── Lazy factory helpers ──────────────────────────────────────

    @staticmethod
    def _build_media_tool(settings: Settings):
        from thumbnailer.adapters.outbound.ffmpeg.ffmpeg_runner import FFmpegRunner
        runner = FFmpegRunner(
            ffmpeg_binary=settings.ffmpeg.binary,
            ffprobe_binary=settings.ffmpeg.ffprobe_binary,
            timeout=settings.ffmpeg.timeout,
        )
        logger.debug("Using ffmpeg at %s", runner.ffmpeg_path)
        return runner

    @staticmethod
    def _build_scratch_storage(settings: Settings):
        from thumbnailer.adapters.outbound.storage.local_scratch_storage import LocalScratchStorage
        return LocalScratchStorage(base_dir=settings.thumbnail.scratch_dir or None)

    @staticmethod
    def _build_observer(settings: Settings):
        from thumbnailer.adapters.outbound.observers.logging_observer import LoggingThumbnailObserver
        return LoggingThumbnailObserver()

    @staticmethod
    def _build_filmstrip(settings: Settings):
        from thumbnailer.adapters.outbound.media.pil_filmstrip import PILFilmstripComposer
        return PILFilmstripComposer()

    # ── Port accessors ─────────────────────────────────────────────

    def media_tool(self):
        return self._get_or_create("media_tool", self._build_media_tool)

    def scratch_storage(self):
        return self._get_or_create("scratch_storage", self._build_scratch_storage)

    def observer(self):
        return self._get_or_create("observer", self._build_observer)

    def filmstrip(self):
        return self._get_or_create("filmstrip", self._build_filmstrip)

    # ── Application services ───────────────────────────────────────

    def thumbnail_generator(self):
        from thumbnailer.application.thumbnail_service import ThumbnailGenerator
        return self._get_or_create(
            "thumbnail_generator",
            lambda s: ThumbnailGenerator(
                media_tool=self.media_tool(),
                storage=self.scratch_storage(),
                observer=self.observer(),
                filename_prefix=s.thumbnail.filename_prefix,
                extension=s.thumbnail.extension,
            ),
        )
