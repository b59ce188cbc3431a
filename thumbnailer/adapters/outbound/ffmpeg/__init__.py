from thumbnailer.adapters.outbound.ffmpeg.ffmpeg_runner import FFmpegRunner

__all__ = ["FFmpegRunner"]
