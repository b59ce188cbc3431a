"""Port for the filesystem operations around extracted frames."""
from __future__ import annotations
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ScratchStoragePort(Protocol):
    def scratch_dir(self) -> Path: ...
    def exists(self, path: str) -> bool: ...
    async def delete(self, path: str) -> None: ...
    async def read_bytes(self, path: str) -> bytes: ...
