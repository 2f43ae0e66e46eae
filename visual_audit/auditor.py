"""Per-page audit: navigate, settle, check, capture."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .checks import GENERIC_CHECKS, checks_for
from .config import AuditConfig
from .errors import NavigationError, ScreenshotWriteError
from .models import (
    AUDIT,
    NAVIGATION,
    SCREENSHOT,
    CheckResult,
    FailureReason,
    PageDescriptor,
    PageOutcome,
)
from .reporter import Reporter
from .settle import SettleStrategy, build_settle_strategy
from .sink import ScreenshotSink
from .utils import screenshot_filename

logger = logging.getLogger("visual_audit")


class PageAuditor:
    """Runs the full check sequence for one page on a live browser tab."""

    def __init__(
        self,
        config: AuditConfig,
        sink: ScreenshotSink,
        reporter: Optional[Reporter] = None,
        settle: Optional[SettleStrategy] = None,
    ) -> None:
        self.config = config
        self.sink = sink
        self.reporter = reporter or Reporter()
        self.settle = settle or build_settle_strategy(
            config.wait_after_load, config.ready_selector, config.ready_timeout
        )

    async def navigate(self, page: Page, url: str) -> None:
        timeout = self.config.navigation_timeout
        try:
            response = await page.goto(
                url, wait_until=self.config.wait_until, timeout=timeout * 1000
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationError(f"Timed out after {timeout:.1f}s loading {url}") from exc
        except PlaywrightError as exc:
            raise NavigationError(f"Failed to load {url}: {exc}") from exc
        if response is not None and not response.ok:
            logger.warning("%s answered with HTTP %s", url, response.status)

    async def run_checks(
        self, page: Page, descriptor: PageDescriptor, results: List[CheckResult]
    ) -> None:
        """Append generic then page-specific results to ``results`` as they complete."""
        logger.info("Verifying global components...")
        for check in GENERIC_CHECKS:
            result = await check.run(page)
            results.append(result)
            self.reporter.check(result)

        extra = checks_for(descriptor)
        if extra:
            logger.info("Running %s-specific checks...", descriptor.label)
        for check in extra:
            result = await check.run(page)
            results.append(result)
            self.reporter.check(result)

    async def capture(
        self, page: Page, descriptor: PageDescriptor
    ) -> Tuple[Optional[str], Optional[str]]:
        """Return ``(screenshot_path, error)``; exactly one of them is set."""
        filename = screenshot_filename(descriptor.label)
        try:
            data = await page.screenshot(full_page=True)
        except PlaywrightError as exc:
            return None, f"Screenshot capture failed: {exc}"
        try:
            path = self.sink.write(filename, data)
        except ScreenshotWriteError as exc:
            return None, str(exc)
        self.reporter.screenshot_saved(str(path))
        return str(path), None

    async def audit(self, page: Page, descriptor: PageDescriptor) -> PageOutcome:
        url = self.config.page_url(descriptor)
        self.reporter.page_started(descriptor, url)

        try:
            await self.navigate(page, url)
        except NavigationError as exc:
            outcome = PageOutcome(
                page=descriptor, failure=FailureReason(NAVIGATION, str(exc))
            )
            self.reporter.page_finished(outcome)
            return outcome

        results: List[CheckResult] = []
        failure: Optional[FailureReason] = None
        try:
            await self.settle.wait(page)
            await self.run_checks(page, descriptor, results)
        except PlaywrightError as exc:
            failure = FailureReason(AUDIT, str(exc))

        # Evidence is captured even when checks failed.
        screenshot_path, screenshot_error = await self.capture(page, descriptor)
        if screenshot_error and failure is None:
            failure = FailureReason(SCREENSHOT, screenshot_error)
        outcome = PageOutcome(
            page=descriptor,
            checks=tuple(results),
            screenshot_path=screenshot_path,
            failure=failure,
            screenshot_error=screenshot_error,
        )
        self.reporter.page_finished(outcome)
        return outcome
