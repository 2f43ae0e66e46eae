"""Exception types raised by the audit pipeline."""

from __future__ import annotations


class AuditError(Exception):
    """Base class for audit errors."""


class DiscoveryError(AuditError):
    """The site root could not be listed. Fatal to the run."""


class LaunchError(AuditError):
    """The browser session could not be started. Fatal to the run."""


class NavigationError(AuditError):
    """A page failed to load or timed out. Scoped to that page."""


class ScreenshotWriteError(AuditError):
    """A screenshot could not be captured or persisted. Scoped to that page."""
