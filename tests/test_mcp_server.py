from visual_audit.discovery import describe_page
from visual_audit.mcp_server import format_report
from visual_audit.models import CheckResult, CheckStatus, FailureReason, PageOutcome, RunReport


def test_format_empty_report():
    assert format_report(RunReport(nothing_to_audit=True)) == "No HTML files found to audit."


def test_format_report_lists_pages_and_checks():
    report = RunReport(
        outcomes=[
            PageOutcome(
                page=describe_page("1 Homepage.html"),
                checks=(
                    CheckResult("Global Header", "#h", CheckStatus.FOUND),
                    CheckResult("Homepage Cards", ".change-card", CheckStatus.NOT_FOUND, count=0, critical=True),
                ),
                screenshot_path="screenshots/Homepage.png",
            ),
            PageOutcome(page=describe_page("2 Issues.html"), failure=FailureReason("navigation", "Timed out")),
        ]
    )

    text = format_report(report)

    assert "Homepage (/1%20Homepage.html): problems" in text
    assert "Homepage Cards x0: CRITICAL" in text
    assert "screenshot: screenshots/Homepage.png" in text
    assert "failure: navigation: Timed out" in text
    assert text.endswith("2 pages audited, 2 with problems.")
