"""Centralized constants for dispatch_fu."""

from __future__ import annotations

LOGGER_NAME = "dispatch_fu"

# Environment
ENV_LOG_LEVEL = "DISPATCH_FU_LOG_LEVEL"
ENV_LOG_FILE = "DISPATCH_FU_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Log events
EVENT_TABLE_BUILT = "table_built"
EVENT_CASE_OVERRIDDEN = "case_overridden"
EVENT_CASE_RESOLVED = "case_resolved"
EVENT_CASE_UNMATCHED = "case_unmatched"
