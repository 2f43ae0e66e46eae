"""Locate the top-level pages of the site that should be audited."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Union
from urllib.parse import quote

from .errors import DiscoveryError
from .models import PageDescriptor
from .utils import PAGE_EXTENSION, page_identifier, page_label

logger = logging.getLogger("visual_audit")

# "1 Homepage.html" is a page; "4A prison_oversight_page.html" is a sub-page.
_ELIGIBLE_PREFIX = re.compile(r"^\d\s")
_LEADING_NUMBER = re.compile(r"^(\d+)")


def is_eligible(filename: str) -> bool:
    """True for top-level page documents such as ``"2 Issues.html"``."""
    return filename.endswith(PAGE_EXTENSION) and bool(_ELIGIBLE_PREFIX.match(filename))


def _order_key(page: PageDescriptor) -> int:
    match = _LEADING_NUMBER.match(page.filename)
    return int(match.group(1)) if match else 0


def describe_page(filename: str) -> PageDescriptor:
    label = page_label(filename)
    return PageDescriptor(
        label=label,
        url_path="/" + quote(filename),
        page_id=page_identifier(label),
        filename=filename,
    )


def discover_pages(
    root: Union[str, Path],
    sort_numeric: bool = False,
) -> List[PageDescriptor]:
    """Return descriptors for every eligible page directly under ``root``.

    Pages come back in directory listing order unless ``sort_numeric`` is set,
    in which case they are stably sorted by their leading number.
    """
    root_path = Path(root)
    logger.info("Searching for HTML files in: %s", root_path.resolve())
    try:
        entries = os.listdir(root_path)
    except OSError as exc:
        raise DiscoveryError(f"Cannot list {root_path}: {exc}") from exc

    pages = [describe_page(name) for name in entries if is_eligible(name)]
    if sort_numeric:
        pages.sort(key=_order_key)
    logger.debug("Eligible pages: %s", ", ".join(page.filename for page in pages) or "none")
    return pages
