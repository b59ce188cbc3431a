"""Millisecond to ``HH:MM:SS`` conversion for ffmpeg seek arguments."""

from __future__ import annotations

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def format_timecode(milliseconds: int) -> str:
    """Format *milliseconds* as zero-padded ``HH:MM:SS``.

    Hours are not wrapped at 24 and grow past two digits when needed.
    The sub-second remainder is dropped.
    """
    if milliseconds < 0:
        raise ValueError(f"Cannot format negative duration: {milliseconds}ms")

    hours = milliseconds // _MS_PER_HOUR
    minutes = (milliseconds // _MS_PER_MINUTE) % 60
    seconds = (milliseconds // _MS_PER_SECOND) % 60
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
