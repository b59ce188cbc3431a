"""Quality percentage to ffmpeg ``-q:v`` mapping."""

from __future__ import annotations

QSCALE_BEST = 1
QSCALE_WORST = 31


def to_ffmpeg_qscale(quality: int) -> int:
    """Map a 1-100 quality (higher is better) onto ffmpeg's 1-31 scale (lower is better).

    The in-range conversion truncates ``(101 - quality) / 3.25`` rather than
    rounding it, so ``to_ffmpeg_qscale(1) == 30`` and ``to_ffmpeg_qscale(100) == 1``.
    """
    if quality < 1:
        return QSCALE_BEST
    if quality > 100:
        return QSCALE_WORST
    return max(QSCALE_BEST, min(QSCALE_WORST, int((101 - quality) / 3.25)))
