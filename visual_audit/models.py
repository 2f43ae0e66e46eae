"""Data models used throughout the audit pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class PageDescriptor:
    """A discovered page: display label, request path and check key."""

    label: str
    url_path: str
    page_id: str
    filename: str


class CheckStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    FOUND_BUT_HIDDEN = "found_but_hidden"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single structural check on a rendered page."""

    element_name: str
    selector: str
    status: CheckStatus
    count: Optional[int] = None
    critical: bool = False

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.FOUND


NAVIGATION = "navigation"
AUDIT = "audit"
SCREENSHOT = "screenshot"


@dataclass(frozen=True)
class FailureReason:
    """Why a page could not be audited completely.

    ``stage`` is one of:

    - ``"navigation"``: the page never loaded; no checks ran and no screenshot
      was taken.
    - ``"audit"``: the page loaded but the engine failed while settling or
      checking; results gathered before the error are kept.
    - ``"screenshot"``: the checks ran but the screenshot could not be
      captured or written.
    """

    stage: str
    message: str

    def __str__(self) -> str:
        return f"{self.stage}: {self.message}"


@dataclass(frozen=True)
class PageOutcome:
    """Everything recorded while auditing one page."""

    page: PageDescriptor
    checks: Tuple[CheckResult, ...] = ()
    screenshot_path: Optional[str] = None
    failure: Optional[FailureReason] = None
    screenshot_error: Optional[str] = None

    @property
    def navigation_failed(self) -> bool:
        return self.failure is not None and self.failure.stage == NAVIGATION

    @property
    def failed_checks(self) -> List[CheckResult]:
        return [check for check in self.checks if not check.passed]

    @property
    def ok(self) -> bool:
        return (
            self.failure is None
            and self.screenshot_error is None
            and not self.failed_checks
        )


@dataclass
class RunReport:
    """Ordered page outcomes for a single invocation."""

    outcomes: List[PageOutcome] = field(default_factory=list)
    nothing_to_audit: bool = False

    @property
    def page_count(self) -> int:
        return len(self.outcomes)

    @property
    def failed_pages(self) -> List[PageOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.nothing_to_audit and not self.failed_pages
