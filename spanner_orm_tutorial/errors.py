"""Error types raised by the tutorial itself.

Errors coming from the Spanner client (``google.api_core.exceptions``) are not
wrapped; they propagate unchanged so the caller sees the original RPC status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SpannerTutorialError(Exception):
    pass


class EmulatorStartError(SpannerTutorialError):
    """Raised when the emulator container cannot be started or never becomes ready.

    Args:
        image: Docker image that was being started.
        reason: Human-readable cause.
    """

    def __init__(self, image: str, reason: str) -> None:
        super().__init__(f"Failed to start Spanner emulator '{image}': {reason}")
        self.image = image
        self.reason = reason


class SchemaScriptError(SpannerTutorialError):
    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message if path is None else f"{message}: {path}")
        self.path = path
