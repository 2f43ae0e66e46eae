from pathlib import Path
from unittest import mock

import pytest

from visual_audit import cli
from visual_audit.discovery import describe_page
from visual_audit.errors import DiscoveryError
from visual_audit.models import FailureReason, PageOutcome, RunReport


@pytest.fixture(autouse=True)
def quiet_logging():
    with mock.patch.object(cli.logging, "basicConfig"):
        yield


def _fake_run(report=None, error=None):
    calls = []

    async def run_audit(config, reporter=None):
        calls.append(config)
        if error:
            raise error
        return report

    return run_audit, calls


def _failing_report():
    return RunReport(
        outcomes=[
            PageOutcome(page=describe_page("2 Issues.html"), failure=FailureReason("navigation", "x"))
        ]
    )


def test_defaults_without_arguments():
    config = cli.build_config(cli.parse_args([]))

    assert config.base_url == "http://localhost:8080"
    assert config.site_root == Path(".")
    assert config.output_root == Path("screenshots")
    assert (config.viewport.width, config.viewport.height) == (1440, 900)
    assert config.wait_after_load == 0.5
    assert config.ready_timeout == 5.0
    assert config.headless
    assert not config.sort_numeric


def test_page_failures_exit_zero_by_default():
    run_audit, calls = _fake_run(_failing_report())
    with mock.patch.object(cli, "run_audit", run_audit):
        assert cli.main([]) == cli.EXIT_OK
    assert len(calls) == 1


def test_strict_mode_signals_page_failures():
    run_audit, _ = _fake_run(_failing_report())
    with mock.patch.object(cli, "run_audit", run_audit):
        assert cli.main(["--strict"]) == cli.EXIT_PAGE_FAILURES


def test_fatal_error_exit_code():
    run_audit, _ = _fake_run(error=DiscoveryError("Cannot list site"))
    with mock.patch.object(cli, "run_audit", run_audit):
        assert cli.main(["--root", "site"]) == cli.EXIT_FATAL


def test_flags_reach_config():
    run_audit, calls = _fake_run(RunReport())
    argv = [
        "--base-url", "http://127.0.0.1:9000",
        "--output", "out",
        "--width", "390",
        "--height", "844",
        "--timeout", "5",
        "--ready-selector", "#app[data-mounted]",
        "--ready-timeout", "12.5",
        "--sort",
        "--headed",
    ]
    with mock.patch.object(cli, "run_audit", run_audit):
        cli.main(argv)

    config = calls[0]
    assert config.base_url == "http://127.0.0.1:9000"
    assert config.output_root == Path("out")
    assert (config.viewport.width, config.viewport.height) == (390, 844)
    assert config.navigation_timeout == 5.0
    assert config.ready_selector == "#app[data-mounted]"
    assert config.ready_timeout == 12.5
    assert config.sort_numeric
    assert not config.headless
