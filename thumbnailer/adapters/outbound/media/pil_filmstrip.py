"""Pillow filmstrip adapter.

Stitches a thumbnail series into a single horizontal strip, the way a
trimmer timeline lays them out. Implements :class:`FilmstripPort`.
"""
from __future__ import annotations

import io
import logging
import statistics
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from thumbnailer.core.exceptions import FilmstripError

logger = logging.getLogger(__name__)

_DEFAULT_HEIGHT = 120
_PLACEHOLDER_COLOR = (0, 0, 0)


class PILFilmstripComposer:
    """Satisfies :class:`~thumbnailer.ports.outbound.filmstrip_port.FilmstripPort`."""

    def __init__(self, quality: int = 90) -> None:
        self._quality = quality

    def compose(
        self,
        thumbnails: Sequence[Optional[bytes]],
        output_path: str,
        height: int = _DEFAULT_HEIGHT,
    ) -> str:
        """Write the strip to *output_path* and return it.

        Every tile is scaled to *height* keeping its aspect ratio. Empty
        slots become black tiles as wide as the median real tile.
        """
        if height <= 0:
            raise ValueError(f"height must be positive, got {height}")

        tiles = [self._load_tile(data, height) if data is not None else None for data in thumbnails]
        widths = [tile.width for tile in tiles if tile is not None]
        if not widths:
            raise FilmstripError("No thumbnail data to compose")

        placeholder_width = int(statistics.median(widths))
        strip_width = sum(tile.width if tile is not None else placeholder_width for tile in tiles)
        strip = Image.new("RGB", (strip_width, height), _PLACEHOLDER_COLOR)

        x = 0
        for tile in tiles:
            if tile is None:
                x += placeholder_width
                continue
            strip.paste(tile, (x, 0))
            x += tile.width

        out = Path(output_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        strip.save(out, quality=self._quality)
        logger.info("Filmstrip created: %s (%d tiles, %dx%d)", out, len(tiles), strip_width, height)
        return str(out)

    @staticmethod
    def _load_tile(data: bytes, height: int) -> Image.Image:
        try:
            img = Image.open(io.BytesIO(data))
            img.load()
        except OSError as exc:
            raise FilmstripError(f"Unreadable thumbnail image: {exc}") from exc

        if img.mode != "RGB":
            img = img.convert("RGB")
        width = max(1, round(img.width * height / img.height))
        return img.resize((width, height), Image.Resampling.LANCZOS)
