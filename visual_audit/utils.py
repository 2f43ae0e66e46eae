"""Helpers for turning page filenames into labels and file-safe names."""

from __future__ import annotations

import re

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
PAGE_EXTENSION = ".html"

_ORDER_PREFIX = re.compile(r"^\d+\s*")
_WORD_START = re.compile(r"\b\w")
_WHITESPACE = re.compile(r"\s+")


def slugify(value: str, fallback: str = "page") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only."""
    normalized = value.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def page_label(filename: str) -> str:
    """Turn ``"1 Homepage.html"`` or ``"3 get_involved.html"`` into a display label.

    The ordering prefix only fixes discovery order and never reaches the label.
    """
    stem = filename[: -len(PAGE_EXTENSION)] if filename.endswith(PAGE_EXTENSION) else filename
    stem = _ORDER_PREFIX.sub("", stem)
    stem = stem.replace("_", " ")
    return _WORD_START.sub(lambda match: match.group(0).upper(), stem)


def page_identifier(label: str) -> str:
    """Stable key used to look up page-specific checks."""
    return slugify(label)


def screenshot_filename(label: str) -> str:
    return _WHITESPACE.sub("-", label) + ".png"
