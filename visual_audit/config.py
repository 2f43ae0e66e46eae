"""Configuration objects and constants for the visual audit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .models import PageDescriptor

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_OUTPUT_DIR = "screenshots"


@dataclass(frozen=True)
class Viewport:
    """Browser viewport size in CSS pixels."""

    width: int = 1440
    height: int = 900


@dataclass
class AuditConfig:
    """Top-level settings that control discovery, rendering and capture."""

    site_root: Path = Path(".")
    output_root: Path = Path(DEFAULT_OUTPUT_DIR)
    base_url: str = DEFAULT_BASE_URL
    viewport: Viewport = field(default_factory=Viewport)
    navigation_timeout: float = 30.0
    wait_until: str = "networkidle"
    wait_after_load: float = 0.5
    ready_selector: Optional[str] = None
    ready_timeout: float = 5.0
    sort_numeric: bool = False
    headless: bool = True

    def page_url(self, page: PageDescriptor) -> str:
        return f"{self.base_url.rstrip('/')}{page.url_path}"
