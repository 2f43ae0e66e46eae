"""Persist screenshots to the output directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from filetype import guess

from .errors import ScreenshotWriteError

logger = logging.getLogger("visual_audit")


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        return kind.extension.lower()
    return None


class ScreenshotSink:
    """Writes screenshot bytes below ``output_root``, creating it on first use."""

    def __init__(self, output_root: Path) -> None:
        self.output_root = Path(output_root)
        self._prepared = False

    def _ensure_dir(self) -> None:
        if self._prepared:
            return
        if not self.output_root.exists():
            self.output_root.mkdir(parents=True, exist_ok=True)
            logger.info("Created directory: %s", self.output_root)
        self._prepared = True

    def write(self, filename: str, data: bytes) -> Path:
        if detect_image_format(data) is None:
            raise ScreenshotWriteError(f"Refusing to write {filename}: data is not an image")
        destination = self.output_root / filename
        try:
            self._ensure_dir()
            destination.write_bytes(data)
        except OSError as exc:
            raise ScreenshotWriteError(f"Failed to write {destination}: {exc}") from exc
        return destination
