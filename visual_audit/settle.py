"""Strategies for waiting until client-side components have mounted."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger("visual_audit")


@dataclass(frozen=True)
class FixedDelay:
    """Sleep for a fixed interval after load so deferred mounting can finish."""

    seconds: float = 0.5

    async def wait(self, page: Page) -> None:
        if self.seconds > 0:
            await page.wait_for_timeout(int(self.seconds * 1000))


@dataclass(frozen=True)
class SelectorReady:
    """Wait until a readiness marker is attached, then settle briefly.

    Falls back to the settle delay alone if the marker never shows up; the
    checks that follow report whatever did render.
    """

    selector: str
    timeout: float = 5.0
    settle: FixedDelay = FixedDelay(0.0)

    async def wait(self, page: Page) -> None:
        try:
            await page.wait_for_selector(
                self.selector, state="attached", timeout=self.timeout * 1000
            )
        except PlaywrightTimeoutError:
            logger.warning(
                "Readiness marker %s did not appear within %.1fs",
                self.selector,
                self.timeout,
            )
        await self.settle.wait(page)


SettleStrategy = Union[FixedDelay, SelectorReady]


def build_settle_strategy(
    wait_after_load: float,
    ready_selector: Optional[str] = None,
    ready_timeout: float = 5.0,
) -> SettleStrategy:
    delay = FixedDelay(wait_after_load)
    if ready_selector:
        return SelectorReady(ready_selector, timeout=ready_timeout, settle=delay)
    return delay
