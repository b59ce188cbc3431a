"""Still-frame thumbnail extraction for video files, backed by ffmpeg."""

from thumbnailer.application.thumbnail_api import (
    generate_single_thumbnail,
    generate_thumbnails,
)
from thumbnailer.application.thumbnail_service import ThumbnailGenerator

__version__ = "0.1.0"

__all__ = [
    "ThumbnailGenerator",
    "generate_single_thumbnail",
    "generate_thumbnails",
    "__version__",
]
