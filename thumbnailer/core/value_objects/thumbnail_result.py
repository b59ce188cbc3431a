"""ThumbnailResult value object - bytes on success, a reason on failure."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    TOOL_UNAVAILABLE = "tool_unavailable"
    TOOL_FAILED = "tool_failed"
    NO_OUTPUT = "no_output"
    IO_ERROR = "io_error"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ThumbnailResult:
    """Outcome of one extraction. Exactly one of ``data`` / ``failure`` is set."""

    timestamp_ms: int
    data: Optional[bytes] = None
    failure: Optional[FailureReason] = None
    detail: str = ""
    output_path: str = ""

    def __post_init__(self) -> None:
        if (self.data is None) == (self.failure is None):
            raise ValueError("ThumbnailResult needs either data or a failure reason")

    @property
    def ok(self) -> bool:
        return self.data is not None

    @property
    def size_kb(self) -> float:
        return len(self.data) / 1000 if self.data is not None else 0.0

    @classmethod
    def success(cls, timestamp_ms: int, data: bytes, output_path: str = "") -> ThumbnailResult:
        return cls(timestamp_ms=timestamp_ms, data=data, output_path=output_path)

    @classmethod
    def failed(
        cls,
        timestamp_ms: int,
        reason: FailureReason,
        detail: str = "",
        output_path: str = "",
    ) -> ThumbnailResult:
        return cls(
            timestamp_ms=timestamp_ms,
            failure=reason,
            detail=detail,
            output_path=output_path,
        )
