"""Reduction-based keyed dispatch: classify an input, run the handler for its case."""

import logging

from .config import DispatchConfig, load_config
from .constants import LOGGER_NAME
from .engine import build_and_resolve, build_table, dispatch, on, pair, resolve
from .errors import (
    ConfigError,
    DispatchFuError,
    MalformedRegistrationsError,
    UnmatchedCaseError,
)
from .logging_utils import setup_logging
from .models import Registration

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

__version__ = "0.9.0"

__all__ = [
    "ConfigError",
    "DispatchConfig",
    "DispatchFuError",
    "MalformedRegistrationsError",
    "Registration",
    "UnmatchedCaseError",
    "build_and_resolve",
    "build_table",
    "dispatch",
    "load_config",
    "on",
    "pair",
    "resolve",
    "setup_logging",
]
