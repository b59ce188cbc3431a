"""Local filesystem implementation of ScratchStoragePort."""

from __future__ import annotations

import asyncio
import logging
import tempfile
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class LocalScratchStorage:
    """Implements :class:`ScratchStoragePort` using the local filesystem.

    Temporary frames go to *base_dir* when given, otherwise to the
    platform temp directory.
    """

    def __init__(self, base_dir: Optional[str | Path] = None) -> None:
        self._base = Path(base_dir).resolve() if base_dir else None

    def scratch_dir(self) -> Path:
        """Return a writable directory for temporary frames, creating it if needed."""
        if self._base is None:
            return Path(tempfile.gettempdir())
        self._base.mkdir(parents=True, exist_ok=True)
        return self._base

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    async def delete(self, path: str) -> None:
        """Delete a file; a missing file is not an error."""
        target = Path(path)
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, lambda: target.unlink(missing_ok=True))
        logger.debug("Deleted file %s", target)

    async def read_bytes(self, path: str) -> bytes:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, Path(path).read_bytes)
