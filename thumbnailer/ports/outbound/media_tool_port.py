"""Port for the external frame-extraction tool."""
from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class MediaToolPort(Protocol):
    async def execute(self, args: list[str]) -> int: ...
    async def probe_duration_ms(self, video_path: str) -> int: ...
