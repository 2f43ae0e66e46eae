"""Run controller: discover pages once, then audit them one after another."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError

from .auditor import PageAuditor
from .config import AuditConfig
from .discovery import discover_pages
from .errors import LaunchError
from .models import PageDescriptor, RunReport
from .reporter import Reporter
from .sink import ScreenshotSink

logger = logging.getLogger("visual_audit")


async def launch_browser(playwright: Playwright, config: AuditConfig) -> Browser:
    try:
        return await playwright.chromium.launch(headless=config.headless)
    except PlaywrightError as exc:
        raise LaunchError(f"Could not start Chromium: {exc}") from exc


async def audit_pages(
    page: Page,
    pages: Sequence[PageDescriptor],
    auditor: PageAuditor,
) -> RunReport:
    """Audit ``pages`` sequentially on one tab, one outcome per page in order."""
    report = RunReport()
    for descriptor in pages:
        outcome = await auditor.audit(page, descriptor)
        report.outcomes.append(outcome)
    return report


async def run_audit(
    config: AuditConfig,
    reporter: Optional[Reporter] = None,
) -> RunReport:
    """Discover the site's pages and audit each in a single browser session.

    ``DiscoveryError`` and ``LaunchError`` propagate to the caller. The browser
    is not started when there is nothing to audit, and is always closed once
    it has been.
    """
    reporter = reporter or Reporter()
    reporter.run_started()

    pages = discover_pages(config.site_root, sort_numeric=config.sort_numeric)
    if not pages:
        reporter.nothing_to_audit(config.site_root)
        report = RunReport(nothing_to_audit=True)
        reporter.summary(report, config.output_root)
        return report
    reporter.pages_found(len(pages))

    auditor = PageAuditor(config, ScreenshotSink(config.output_root), reporter)
    async with async_playwright() as playwright:
        browser = await launch_browser(playwright, config)
        try:
            page = await browser.new_page(
                viewport={
                    "width": config.viewport.width,
                    "height": config.viewport.height,
                }
            )
            report = await audit_pages(page, pages, auditor)
        finally:
            await browser.close()
            logger.debug("Browser closed")

    reporter.summary(report, config.output_root)
    return report
