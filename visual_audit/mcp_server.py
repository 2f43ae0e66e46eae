"""MCP server exposing the visual audit as a tool."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from mcp.server.fastmcp import FastMCP

from .config import DEFAULT_BASE_URL, DEFAULT_OUTPUT_DIR, AuditConfig
from .models import RunReport
from .runner import run_audit

logger = logging.getLogger("visual_audit.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="visual-audit")


def format_report(report: RunReport) -> str:
    """Plain-text summary of a run, one block per page."""
    if report.nothing_to_audit:
        return "No HTML files found to audit."

    lines: List[str] = []
    for outcome in report.outcomes:
        lines.append(f"{outcome.page.label} ({outcome.page.url_path}): "
                     f"{'ok' if outcome.ok else 'problems'}")
        if outcome.failure:
            lines.append(f"  failure: {outcome.failure}")
        for check in outcome.checks:
            marker = "CRITICAL" if check.critical and not check.passed else check.status.value
            suffix = f" x{check.count}" if check.count is not None else ""
            lines.append(f"  {check.element_name}{suffix}: {marker}")
        if outcome.screenshot_path:
            lines.append(f"  screenshot: {outcome.screenshot_path}")
        if outcome.screenshot_error:
            lines.append(f"  screenshot error: {outcome.screenshot_error}")
    lines.append(
        f"{report.page_count} pages audited, {len(report.failed_pages)} with problems."
    )
    return "\n".join(lines)


@mcp.tool()
async def audit(
    root: str,
    base_url: str = DEFAULT_BASE_URL,
    output: str = DEFAULT_OUTPUT_DIR,
) -> str:
    """Audit a locally served static site and return a text report."""

    site_root = Path(root).expanduser()
    if not site_root.is_dir():
        raise FileNotFoundError(f"Site root does not exist: {site_root}")

    config = AuditConfig(
        site_root=site_root,
        output_root=Path(output).expanduser().resolve(),
        base_url=base_url,
    )
    report = await run_audit(config)
    return format_report(report)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
