"""Port for stitching a thumbnail series into one image."""
from __future__ import annotations
from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class FilmstripPort(Protocol):
    def compose(self, thumbnails: Sequence[Optional[bytes]], output_path: str, height: int = 120) -> str: ...
