"""Command-line entry point for the visual audit."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_BASE_URL, DEFAULT_OUTPUT_DIR, AuditConfig, Viewport
from .errors import AuditError
from .reporter import Reporter
from .runner import run_audit

logger = logging.getLogger("visual_audit.cli")

EXIT_OK = 0
EXIT_PAGE_FAILURES = 1
EXIT_FATAL = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Render every top-level page of a locally served static site with "
            "Playwright, check its structural components and save full-page screenshots."
        ),
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help="Origin the site is served from",
    )
    parser.add_argument(
        "--root",
        default=Path("."),
        type=Path,
        help="Directory holding the page files ('1 Homepage.html', ...)",
    )
    parser.add_argument(
        "--output",
        default=Path(DEFAULT_OUTPUT_DIR),
        type=Path,
        help="Directory where screenshots should be written",
    )
    parser.add_argument("--width", type=int, default=1440, help="Viewport width")
    parser.add_argument("--height", type=int, default=900, help="Viewport height")
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Navigation timeout in seconds",
    )
    parser.add_argument(
        "--wait",
        type=float,
        default=0.5,
        help="Seconds to wait after network idle before running checks",
    )
    parser.add_argument(
        "--ready-selector",
        default=None,
        help="Wait for this selector to be attached before the settle delay",
    )
    parser.add_argument(
        "--ready-timeout",
        type=float,
        default=5.0,
        help="Seconds to wait for --ready-selector before giving up on it",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Order pages by their leading number instead of directory order",
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any page has problems",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    argv = list(sys.argv[1:] if argv is None else argv)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> AuditConfig:
    return AuditConfig(
        site_root=Path(args.root),
        output_root=Path(args.output),
        base_url=args.base_url,
        viewport=Viewport(args.width, args.height),
        navigation_timeout=args.timeout,
        wait_after_load=args.wait,
        ready_selector=args.ready_selector,
        ready_timeout=args.ready_timeout,
        sort_numeric=args.sort,
        headless=not args.headed,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = build_config(args)
    reporter = Reporter()
    try:
        report = asyncio.run(run_audit(config, reporter))
    except AuditError as exc:
        reporter.fatal(exc)
        return EXIT_FATAL

    if args.strict and not report.ok:
        logger.debug("Strict mode: %d pages with problems", len(report.failed_pages))
        return EXIT_PAGE_FAILURES
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
