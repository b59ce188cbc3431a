"""Shared test fixtures for all tests."""
from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from thumbnailer.adapters.outbound.storage.local_scratch_storage import LocalScratchStorage
from thumbnailer.application.thumbnail_service import ThumbnailGenerator


def make_jpeg(color: tuple[int, int, int] = (200, 30, 30), size: tuple[int, int] = (32, 18)) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="JPEG")
    return buf.getvalue()


def seek_of(args: list[str]) -> str:
    """Return the ``-ss`` value of an ffmpeg argument list."""
    return args[args.index("-ss") + 1]


def frame_for(timecode: str) -> bytes:
    """Deterministic, distinct JPEG per ``HH:MM:SS`` position."""
    h, m, s = (int(part) for part in timecode.split(":"))
    total = h * 3600 + m * 60 + s
    return make_jpeg(color=(total % 256, (total * 7) % 256, 90))


# ── Media tool fakes ───────────────────────────────────────────────────────

@pytest.fixture
def fake_media_tool():
    """Media tool that writes a JPEG to the output path unless told to fail.

    Add ``HH:MM:SS`` strings to ``mock.failing`` to make those seeks produce
    no output (exit code 1).
    """
    mock = AsyncMock()
    mock.failing = set()
    mock.seen_existing = []

    def _execute(args: list[str]) -> int:
        out = Path(args[-1])
        mock.seen_existing.append(out.exists())
        ts = seek_of(args)
        if ts in mock.failing:
            return 1
        out.write_bytes(frame_for(ts))
        return 0

    mock.execute.side_effect = _execute
    mock.probe_duration_ms.return_value = 60000
    return mock


# ── Storage / observer fixtures ────────────────────────────────────────────

@pytest.fixture
def scratch_dir(tmp_path) -> Path:
    return tmp_path / "scratch"


@pytest.fixture
def scratch_storage(scratch_dir) -> LocalScratchStorage:
    return LocalScratchStorage(base_dir=scratch_dir)


@pytest.fixture
def mock_observer():
    return MagicMock()


@pytest.fixture
def generator(fake_media_tool, scratch_storage, mock_observer) -> ThumbnailGenerator:
    return ThumbnailGenerator(
        media_tool=fake_media_tool,
        storage=scratch_storage,
        observer=mock_observer,
    )


@pytest.fixture
def jpeg_factory():
    return make_jpeg


@pytest.fixture
def frame_bytes():
    """Bytes the fake media tool writes for a given ``HH:MM:SS`` seek."""
    return frame_for
