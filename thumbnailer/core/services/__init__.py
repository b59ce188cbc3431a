from thumbnailer.core.services.frame_command import build_frame_args
from thumbnailer.core.services.quality_scale import to_ffmpeg_qscale
from thumbnailer.core.services.timecode import format_timecode
from thumbnailer.core.services.timestamp_planner import check_series_bounds, plan_timestamps

__all__ = [
    "build_frame_args",
    "check_series_bounds",
    "format_timecode",
    "plan_timestamps",
    "to_ffmpeg_qscale",
]
