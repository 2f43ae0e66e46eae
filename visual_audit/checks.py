"""Catalogue of structural checks run against every page or a specific one."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from playwright.async_api import Page

from .models import CheckResult, CheckStatus, PageDescriptor
from .visibility import check_element


@dataclass(frozen=True)
class ElementCheck:
    """The first element matching ``selector`` must be present and visible."""

    name: str
    selector: str

    async def run(self, page: Page) -> CheckResult:
        return await check_element(page, self.selector, self.name)


@dataclass(frozen=True)
class CountCheck:
    """At least ``minimum`` elements must match ``selector``."""

    name: str
    selector: str
    minimum: int = 1
    critical: bool = False

    async def run(self, page: Page) -> CheckResult:
        matches = await page.query_selector_all(self.selector)
        count = len(matches)
        status = CheckStatus.FOUND if count >= self.minimum else CheckStatus.NOT_FOUND
        return CheckResult(
            element_name=self.name,
            selector=self.selector,
            status=status,
            count=count,
            critical=self.critical,
        )


GENERIC_CHECKS: Tuple[ElementCheck, ...] = (
    ElementCheck("Global Header", "#global-header .header-container"),
    ElementCheck("Global Footer", "#global-footer .footer-grid"),
)

# Keyed by PageDescriptor.page_id.
PAGE_CHECKS: Dict[str, Tuple[CountCheck, ...]] = {
    "homepage": (
        CountCheck("Homepage Cards", ".change-card", critical=True),
    ),
}


def checks_for(page: PageDescriptor) -> Sequence[CountCheck]:
    return PAGE_CHECKS.get(page.page_id, ())
