"""Custom exception hierarchy for dispatch_fu."""

from __future__ import annotations

from typing import Hashable


class DispatchFuError(Exception):
    """Base class for all dispatch_fu errors."""


class MalformedRegistrationsError(ValueError, DispatchFuError):
    """Raised when a registration sequence cannot be built into a table."""


class UnmatchedCaseError(LookupError, DispatchFuError):
    """Raised when the classifier computes a case with no registered handler."""

    def __init__(self, case_name: Hashable) -> None:
        self.case_name = case_name
        super().__init__(f"Computed case {case_name!r} not found in dispatch table.")


class ConfigError(ValueError, DispatchFuError):
    """Configuration validation errors."""
