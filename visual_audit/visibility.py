"""Presence and on-screen size checks for rendered elements."""

from __future__ import annotations

import logging

from playwright.async_api import Page

from .models import CheckResult, CheckStatus

logger = logging.getLogger("visual_audit")


async def check_element(page: Page, selector: str, element_name: str) -> CheckResult:
    """Query ``selector`` once and classify the first match.

    An element missing from the document is ``NOT_FOUND``. One that exists but
    renders with no area (``display: none``, collapsed layout, detached) is
    ``FOUND_BUT_HIDDEN``. Only a box with positive width and height counts as
    ``FOUND``.
    """
    element = await page.query_selector(selector)
    if element is None:
        status = CheckStatus.NOT_FOUND
    else:
        box = await element.bounding_box()
        if box and box["width"] > 0 and box["height"] > 0:
            status = CheckStatus.FOUND
        else:
            status = CheckStatus.FOUND_BUT_HIDDEN
    logger.debug("%s (%s) -> %s", element_name, selector, status.value)
    return CheckResult(element_name=element_name, selector=selector, status=status)
