"""ffmpeg argument list for a single-frame grab."""

from __future__ import annotations

from thumbnailer.core.services.quality_scale import to_ffmpeg_qscale
from thumbnailer.core.services.timecode import format_timecode
from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest


def build_frame_args(request: ThumbnailRequest, output_path: str) -> list[str]:
    """Seek, read one video frame, encode it at the mapped quality."""
    return [
        "-ss", format_timecode(request.timestamp_ms),
        "-i", request.video_path,
        "-frames:v", "1",
        "-q:v", str(to_ffmpeg_qscale(request.quality)),
        output_path,
    ]
