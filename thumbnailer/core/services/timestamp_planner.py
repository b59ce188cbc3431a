"""Evenly spaced thumbnail positions across a video."""

from __future__ import annotations


def check_series_bounds(duration_ms: int, count: int) -> None:
    """Raise ``ValueError`` unless ``count >= 1`` and ``duration_ms >= 0``."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if duration_ms < 0:
        raise ValueError(f"duration_ms must be non-negative, got {duration_ms}")


def plan_timestamps(duration_ms: int, count: int) -> list[int]:
    """Return ``count`` timestamps at ``k * duration / count`` for ``k = 1..count``.

    The first position is one interval in, never 0, and the last one lands
    on ``duration_ms`` itself.
    """
    check_series_bounds(duration_ms, count)

    each_part = duration_ms / count
    return [int(each_part * k) for k in range(1, count + 1)]
