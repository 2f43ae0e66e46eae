"""Human-readable status lines for an audit run."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .models import SCREENSHOT, CheckResult, CheckStatus, PageDescriptor, PageOutcome, RunReport

_DEFAULT_LOGGER = logging.getLogger("visual_audit")


class Reporter:
    """Formats audit observations onto a logger.

    Success lines go out at INFO, failures at ERROR and critical failures at
    CRITICAL so they stay distinguishable in any log handler.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or _DEFAULT_LOGGER

    def run_started(self) -> None:
        self.logger.info("Starting visual audit...")

    def nothing_to_audit(self, root: Path) -> None:
        self.logger.error(
            "FAILED: No HTML files found to audit in %s. "
            "Expected top-level pages named like '1 Homepage.html'.",
            root,
        )

    def pages_found(self, count: int) -> None:
        self.logger.info("Found %d pages to audit.", count)

    def page_started(self, page: PageDescriptor, url: str) -> None:
        self.logger.info("Auditing %s at %s", page.label, url)

    def check(self, result: CheckResult) -> None:
        if result.count is not None:
            self._count_check(result)
            return
        if result.status is CheckStatus.FOUND:
            self.logger.info(
                "SUCCESS: %s (selector: %s) was found.", result.element_name, result.selector
            )
        elif result.status is CheckStatus.NOT_FOUND:
            self.logger.error(
                "FAILED: %s (selector: %s) was not found.",
                result.element_name,
                result.selector,
            )
        else:
            self.logger.error(
                "FAILED: %s (selector: %s) was found but is not visible (has no size).",
                result.element_name,
                result.selector,
            )

    def _count_check(self, result: CheckResult) -> None:
        if result.passed:
            self.logger.info("SUCCESS: Found %d %s.", result.count, result.element_name.lower())
        elif result.critical:
            self.logger.critical(
                "CRITICAL: No %s found (selector: %s). Components failed to render.",
                result.element_name.lower(),
                result.selector,
            )
        else:
            self.logger.error(
                "FAILED: Only %d %s found (selector: %s).",
                result.count,
                result.element_name.lower(),
                result.selector,
            )

    def screenshot_saved(self, path: str) -> None:
        self.logger.info("Screenshot saved to %s", path)

    def page_finished(self, outcome: PageOutcome) -> None:
        if outcome.screenshot_error:
            self.logger.error(
                "FAILED: Screenshot for %s was not saved: %s",
                outcome.page.label,
                outcome.screenshot_error,
            )
        if outcome.failure and outcome.failure.stage != SCREENSHOT:
            self.logger.error(
                "FAILED: Could not audit %s (%s)", outcome.page.label, outcome.failure
            )

    def summary(self, report: RunReport, output_root: Path) -> None:
        if report.nothing_to_audit:
            self.logger.error("Visual audit finished without auditing any pages.")
            return
        problems = len(report.failed_pages)
        log = self.logger.info if not problems else self.logger.warning
        log(
            "Visual audit complete: %d pages audited, %d with problems. "
            "Please review the images in %s",
            report.page_count,
            problems,
            output_root,
        )

    def fatal(self, exc: BaseException) -> None:
        self.logger.critical("Visual audit aborted: %s", exc)
