"""Command-line entry point for thumbnail extraction."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from thumbnailer import __version__
from thumbnailer.application.dto.series_request import SeriesRequest
from thumbnailer.core.events.series_events import SeriesCompleted, SeriesProgress
from thumbnailer.core.exceptions import FilmstripError, MediaToolError
from thumbnailer.core.services.timecode import format_timecode
from thumbnailer.core.value_objects.thumbnail_request import ThumbnailRequest
from thumbnailer.infrastructure.container import ApplicationContainer
from thumbnailer.infrastructure.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="thumbnailer", description="Extract video thumbnails with ffmpeg")
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--log-level", default=None, help="Logging level override (else LOG_LEVEL or INFO)"
    )

    sub = parser.add_subparsers(dest="command")

    single = sub.add_parser("single", help="Extract one frame at a timestamp")
    single.add_argument("video", type=Path, help="Path to local video file")
    single.add_argument("--at-ms", type=int, required=True, help="Timestamp in milliseconds")
    single.add_argument("-q", "--quality", type=int, default=None, help="Quality 1-100, higher is better")
    target = single.add_mutually_exclusive_group(required=True)
    target.add_argument("-o", "--output", type=Path, help="Where to write the image")
    target.add_argument("--stdout", action="store_true", help="Write image bytes to stdout")

    series = sub.add_parser("series", help="Extract evenly spaced thumbnails")
    series.add_argument("video", type=Path, help="Path to local video file")
    series.add_argument(
        "--duration-ms", type=int, default=None, help="Video duration (probed with ffprobe if omitted)"
    )
    series.add_argument("--count", type=int, default=None, help="Number of thumbnails")
    series.add_argument("-q", "--quality", type=int, default=None, help="Quality 1-100, higher is better")
    series.add_argument("--out-dir", type=Path, required=True, help="Directory for thumb_NNN files")
    series.add_argument("--strip", type=Path, default=None, help="Also write a filmstrip image here")

    probe = sub.add_parser("probe", help="Print video duration in milliseconds")
    probe.add_argument("video", type=Path, help="Path to local video file")

    return parser


async def _run_single(args: argparse.Namespace, container: ApplicationContainer) -> int:
    settings = container.settings
    quality = args.quality if args.quality is not None else settings.thumbnail.default_quality
    request = ThumbnailRequest(
        video_path=str(args.video),
        timestamp_ms=args.at_ms,
        quality=quality,
        output_path=str(args.output) if args.output else None,
    )

    result = await container.thumbnail_generator().generate_one(request)
    if not result.ok:
        print(f"error: {result.failure.value}: {result.detail}", file=sys.stderr)
        return 1

    if args.stdout:
        sys.stdout.buffer.write(result.data)
        sys.stdout.buffer.flush()
    else:
        print(result.output_path)
    return 0


async def _run_series(args: argparse.Namespace, container: ApplicationContainer) -> int:
    settings = container.settings
    duration_ms = args.duration_ms
    if duration_ms is None:
        try:
            duration_ms = await container.media_tool().probe_duration_ms(str(args.video))
        except MediaToolError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    request = SeriesRequest(
        video_path=str(args.video),
        duration_ms=duration_ms,
        count=args.count if args.count is not None else settings.thumbnail.default_count,
        quality=args.quality if args.quality is not None else settings.thumbnail.default_quality,
    )
    events = container.thumbnail_generator().generate_series(request)

    out_dir: Path = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)
    extension = settings.thumbnail.extension.lstrip(".")

    completed: Optional[SeriesCompleted] = None
    async for event in events:
        if isinstance(event, SeriesCompleted):
            completed = event
            continue

        data = event.thumbnails[-1]
        target = "-"
        if data is not None:
            path = out_dir / f"thumb_{event.index:03d}.{extension}"
            path.write_bytes(data)
            target = str(path)
        print(f"[{event.index}/{event.total}] {format_timecode(event.timestamp_ms)} {_status(event)} -> {target}")

    if completed is None:
        print("error: thumbnail series ended early", file=sys.stderr)
        return 1

    if args.strip:
        try:
            strip = container.filmstrip().compose(
                completed.thumbnails, str(args.strip), height=settings.thumbnail.strip_height
            )
        except FilmstripError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        print(strip)
    return 0


async def _run_probe(args: argparse.Namespace, container: ApplicationContainer) -> int:
    try:
        duration_ms = await container.media_tool().probe_duration_ms(str(args.video))
    except MediaToolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(duration_ms)
    return 0


def _status(event: SeriesProgress) -> str:
    if event.result.ok:
        return "ok"
    return "fallback" if event.used_fallback else "missing"


_COMMANDS = {
    "single": _run_single,
    "series": _run_series,
    "probe": _run_probe,
}


def main(argv: Optional[list[str]] = None, container: Optional[ApplicationContainer] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.command is None:
        parser.print_help()
        return 0

    container = container or ApplicationContainer()
    setup_logging(args.log_level, container.settings.logging)

    try:
        return asyncio.run(_COMMANDS[args.command](args, container))
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
