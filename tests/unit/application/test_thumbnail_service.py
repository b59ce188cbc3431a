"""Unit tests for ThumbnailGenerator."""
from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from thumbnailer.adapters.outbound.storage.local_scratch_storage import LocalScratchStorage
from thumbnailer.application.dto.series_request import SeriesRequest
from thumbnailer.application.thumbnail_service import ThumbnailGenerator
from thumbnailer.core.events.series_events import SeriesCompleted, SeriesProgress
from thumbnailer.core.exceptions import MediaToolError, MediaToolUnavailableError
from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest
from thumbnailer.core.value_objects.thumbnail_result import FailureReason


async def _collect(events):
    return [event async for event in events]


class TestGenerateOne:
    """Tests for single-frame extraction."""

    @pytest.mark.asyncio
    async def test_temporary_output_is_read_and_removed(self, generator, fake_media_tool, scratch_dir, frame_bytes):
        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=15000, quality=50)
        )

        assert result.ok
        assert result.data == frame_bytes("00:00:15")
        assert Path(result.output_path).parent == scratch_dir
        assert Path(result.output_path).name.startswith("thumbnail_")
        assert not Path(result.output_path).exists()
        assert list(scratch_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_explicit_output_persists(self, generator, tmp_path, frame_bytes):
        target = tmp_path / "keep.jpg"

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=2000, quality=90, output_path=str(target))
        )

        assert result.ok
        assert target.read_bytes() == frame_bytes("00:00:02") == result.data

    @pytest.mark.asyncio
    async def test_existing_output_deleted_before_run(self, generator, fake_media_tool, tmp_path):
        target = tmp_path / "old.jpg"
        target.write_bytes(b"stale")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=1000, quality=50, output_path=str(target))
        )

        assert fake_media_tool.seen_existing == [False]
        assert result.data != b"stale"

    @pytest.mark.asyncio
    async def test_stale_explicit_output_not_reported_when_tool_writes_nothing(
        self, generator, fake_media_tool, tmp_path
    ):
        target = tmp_path / "old.jpg"
        target.write_bytes(b"stale")
        fake_media_tool.failing.add("00:00:01")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=1000, quality=50, output_path=str(target))
        )

        assert result.ok is False
        assert result.failure is FailureReason.NO_OUTPUT
        assert not target.exists()

    @pytest.mark.asyncio
    async def test_passes_ffmpeg_arguments(self, generator, fake_media_tool, tmp_path):
        target = str(tmp_path / "f.jpg")
        await generator.generate_one(
            ThumbnailRequest(video_path="/v/in.mp4", timestamp_ms=3_661_000, quality=1, output_path=target)
        )

        fake_media_tool.execute.assert_awaited_once_with(
            ["-ss", "01:01:01", "-i", "/v/in.mp4", "-frames:v", "1", "-q:v", "30", target]
        )

    @pytest.mark.asyncio
    async def test_no_output_file(self, generator, fake_media_tool, scratch_dir, mock_observer):
        fake_media_tool.failing.add("00:00:05")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=5000, quality=50)
        )

        assert result.ok is False
        assert result.failure is FailureReason.NO_OUTPUT
        assert "exit code 1" in result.detail
        mock_observer.thumbnail_failed.assert_called_once_with(result)
        mock_observer.thumbnail_generated.assert_not_called()

    @pytest.mark.asyncio
    async def test_tool_unavailable(self, generator, fake_media_tool):
        fake_media_tool.execute.side_effect = MediaToolUnavailableError("ffmpeg")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
        )

        assert result.failure is FailureReason.TOOL_UNAVAILABLE
        assert "ffmpeg" in result.detail

    @pytest.mark.asyncio
    async def test_tool_error(self, generator, fake_media_tool):
        fake_media_tool.execute.side_effect = MediaToolError("FFmpeg timed out after 60s")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
        )

        assert result.failure is FailureReason.TOOL_FAILED

    @pytest.mark.asyncio
    async def test_read_error_removes_temporary_file(self, generator, scratch_storage, scratch_dir):
        with patch.object(scratch_storage, "read_bytes", AsyncMock(side_effect=PermissionError("denied"))):
            result = await generator.generate_one(
                ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
            )

        assert result.failure is FailureReason.IO_ERROR
        assert "denied" in result.detail
        assert list(scratch_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_unexpected_error_does_not_escape(self, generator, fake_media_tool):
        fake_media_tool.execute.side_effect = KeyError("boom")

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
        )

        assert result.failure is FailureReason.UNEXPECTED
        assert "KeyError" in result.detail

    @pytest.mark.asyncio
    async def test_unusable_scratch_dir_is_io_error(self, fake_media_tool, mock_observer, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        generator = ThumbnailGenerator(
            fake_media_tool, LocalScratchStorage(base_dir=blocker / "sub"), mock_observer
        )

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=1000, quality=50)
        )

        assert result.failure is FailureReason.IO_ERROR
        assert result.output_path == ""
        fake_media_tool.execute.assert_not_called()
        mock_observer.thumbnail_failed.assert_called_once_with(result)

    @pytest.mark.asyncio
    async def test_temporary_names_are_unique(self, fake_media_tool, scratch_storage):
        fake_media_tool.execute.side_effect = None
        fake_media_tool.execute.return_value = 1
        generator = ThumbnailGenerator(fake_media_tool, scratch_storage)

        paths = set()
        for _ in range(20):
            result = await generator.generate_one(
                ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
            )
            paths.add(result.output_path)

        assert len(paths) == 20

    @pytest.mark.asyncio
    async def test_custom_prefix_and_extension(self, fake_media_tool, scratch_storage):
        generator = ThumbnailGenerator(
            fake_media_tool, scratch_storage, filename_prefix="frame_", extension=".png"
        )

        result = await generator.generate_one(
            ThumbnailRequest(video_path="in.mp4", timestamp_ms=0, quality=50)
        )

        name = Path(result.output_path).name
        assert name.startswith("frame_")
        assert name.endswith(".png")


class TestGenerateSeries:
    """Tests for series orchestration."""

    @pytest.mark.asyncio
    async def test_timestamps_evenly_spaced(self, generator):
        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50)))

        progress = [e for e in events if isinstance(e, SeriesProgress)]
        assert [e.timestamp_ms for e in progress] == [12000, 24000, 36000, 48000, 60000]
        assert [e.index for e in progress] == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_snapshots_grow(self, generator, frame_bytes):
        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 3, 50)))

        progress = [e for e in events if isinstance(e, SeriesProgress)]
        assert [len(e.thumbnails) for e in progress] == [1, 2, 3]
        assert progress[2].thumbnails == (
            frame_bytes("00:00:20"),
            frame_bytes("00:00:40"),
            frame_bytes("00:01:00"),
        )
        assert progress[1].thumbnails == progress[2].thumbnails[:2]

    @pytest.mark.asyncio
    async def test_completion_marker_once_at_end(self, generator, mock_observer):
        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 4, 50)))

        completed = [e for e in events if isinstance(e, SeriesCompleted)]
        assert len(completed) == 1
        assert events[-1] is completed[0]
        assert isinstance(events[-2], SeriesProgress) and events[-2].is_last
        assert completed[0].thumbnails == events[-2].thumbnails
        mock_observer.series_completed.assert_called_once_with(4)

    @pytest.mark.asyncio
    async def test_failed_frame_repeats_previous(self, generator, fake_media_tool, mock_observer):
        fake_media_tool.failing.add("00:00:24")

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50)))

        progress = [e for e in events if isinstance(e, SeriesProgress)]
        second = progress[1]
        assert second.result.ok is False
        assert second.used_fallback is True
        assert second.thumbnails[1] == second.thumbnails[0]
        assert progress[2].thumbnails[2] != progress[2].thumbnails[1]
        mock_observer.fallback_used.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_first_failure_yields_none(self, generator, fake_media_tool, mock_observer):
        fake_media_tool.failing.add("00:00:12")

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50)))

        first = events[0]
        assert first.thumbnails == (None,)
        assert first.used_fallback is False
        assert events[1].thumbnails[0] is None
        assert events[1].thumbnails[1] is not None
        mock_observer.fallback_used.assert_not_called()

    @pytest.mark.asyncio
    async def test_all_failures_still_complete(self, generator, fake_media_tool):
        fake_media_tool.execute.side_effect = None
        fake_media_tool.execute.return_value = 1

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 30000, 3, 50)))

        assert isinstance(events[-1], SeriesCompleted)
        assert events[-1].thumbnails == (None, None, None)

    @pytest.mark.asyncio
    async def test_fallback_carries_across_several_failures(self, generator, fake_media_tool):
        fake_media_tool.failing.update({"00:00:24", "00:00:36", "00:00:48"})

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50)))

        final = events[-1].thumbnails
        assert final[0] == final[1] == final[2] == final[3]
        assert final[4] != final[0]

    @pytest.mark.asyncio
    async def test_count_one(self, generator, mock_observer):
        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 1, 50)))

        assert len(events) == 2
        assert isinstance(events[0], SeriesProgress)
        assert len(events[0].thumbnails) == 1
        assert events[0].timestamp_ms == 60000
        assert isinstance(events[1], SeriesCompleted)
        mock_observer.series_completed.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_extractions_are_lazy(self, generator, fake_media_tool):
        events = generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50))
        assert fake_media_tool.execute.await_count == 0

        async for event in events:
            break
        await events.aclose()

        assert fake_media_tool.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_loop_error_ends_stream_quietly(self, generator, mock_observer):
        def _start(index, total):
            if index == 3:
                raise RuntimeError("observer exploded")

        mock_observer.thumbnail_started.side_effect = _start

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 5, 50)))

        assert len(events) == 2
        assert all(isinstance(e, SeriesProgress) for e in events)
        assert len(events[1].thumbnails) == 2
        mock_observer.series_failed.assert_called_once()
        assert isinstance(mock_observer.series_failed.call_args.args[0], RuntimeError)
        mock_observer.series_completed.assert_not_called()

    @pytest.mark.asyncio
    async def test_unusable_scratch_dir_still_completes(self, fake_media_tool, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        generator = ThumbnailGenerator(fake_media_tool, LocalScratchStorage(base_dir=blocker / "sub"))

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 3, 50)))

        assert len(events) == 4
        assert all(not e.result.ok for e in events[:3])
        assert isinstance(events[-1], SeriesCompleted)
        assert events[-1].thumbnails == (None, None, None)

    def test_invalid_count_raises_eagerly(self, generator, fake_media_tool):
        with pytest.raises(ValueError):
            generator.generate_series(SeriesRequest("in.mp4", 60000, 0, 50))
        fake_media_tool.execute.assert_not_called()

    def test_negative_duration_raises_eagerly(self, generator):
        with pytest.raises(ValueError):
            generator.generate_series(SeriesRequest("in.mp4", -5, 3, 50))

    @pytest.mark.asyncio
    async def test_observer_sees_start_with_qscale(self, generator, mock_observer):
        request = SeriesRequest("in.mp4", 60000, 2, 50)
        await _collect(generator.generate_series(request))

        mock_observer.series_started.assert_called_once_with(request, 15)
        assert mock_observer.thumbnail_started.call_count == 2

    @pytest.mark.asyncio
    async def test_independent_series_do_not_share_fallback(self, generator, fake_media_tool):
        await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 2, 50)))
        fake_media_tool.failing.add("00:00:30")

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 60000, 2, 50)))

        assert events[0].thumbnails == (None,)

    @pytest.mark.asyncio
    async def test_default_observer_is_silent(self, fake_media_tool, scratch_storage):
        generator = ThumbnailGenerator(fake_media_tool, scratch_storage)

        events = await _collect(generator.generate_series(SeriesRequest("in.mp4", 10000, 2, 50)))

        assert isinstance(events[-1], SeriesCompleted)
