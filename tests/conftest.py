"""Fake Playwright objects so the pipeline can be exercised without a browser."""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from visual_audit.config import AuditConfig

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64

HEADER = "#global-header .header-container"
FOOTER = "#global-footer .footer-grid"
CARDS = ".change-card"

VISIBLE = {"x": 0, "y": 0, "width": 1440, "height": 120}
ZERO = {"x": 0, "y": 0, "width": 0, "height": 0}


class FakeElement:
    def __init__(self, box: Optional[dict]) -> None:
        self._box = box

    async def bounding_box(self) -> Optional[dict]:
        return self._box


class FakeResponse:
    def __init__(self, status: int = 200) -> None:
        self.status = status
        self.ok = 200 <= status < 400


class FakePage:
    """One tab whose DOM is swapped per URL."""

    def __init__(
        self,
        documents: Optional[Dict[str, Dict[str, List[Optional[dict]]]]] = None,
        timeouts: tuple = (),
    ) -> None:
        self.documents = documents or {}
        self.timeouts = set(timeouts)
        self.current: Dict[str, List[Optional[dict]]] = {}
        self.visited: List[str] = []
        self.goto_kwargs: List[dict] = []
        self.waits: List[float] = []
        self.screenshots = 0

    async def goto(self, url: str, **kwargs):
        self.visited.append(url)
        self.goto_kwargs.append(kwargs)
        if url in self.timeouts:
            raise PlaywrightTimeoutError(f"Timeout {kwargs.get('timeout')}ms exceeded.")
        self.current = self.documents.get(url, {})
        return FakeResponse()

    async def wait_for_timeout(self, ms: float) -> None:
        self.waits.append(ms)

    async def query_selector(self, selector: str) -> Optional[FakeElement]:
        boxes = self.current.get(selector)
        return FakeElement(boxes[0]) if boxes else None

    async def query_selector_all(self, selector: str) -> List[FakeElement]:
        return [FakeElement(box) for box in self.current.get(selector, [])]

    async def screenshot(self, full_page: bool = False) -> bytes:
        assert full_page
        self.screenshots += 1
        return PNG_BYTES


def healthy_document(cards: int = 3) -> Dict[str, List[Optional[dict]]]:
    return {HEADER: [VISIBLE], FOOTER: [VISIBLE], CARDS: [VISIBLE] * cards}


@pytest.fixture
def config(tmp_path) -> AuditConfig:
    site = tmp_path / "site"
    site.mkdir()
    return AuditConfig(site_root=site, output_root=tmp_path / "screenshots")
