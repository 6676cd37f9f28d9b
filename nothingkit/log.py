"""Severity-tagged messages written to standard error."""

from __future__ import annotations

import sys

SEVERITY_FAIL = "FAIL"
SEVERITY_WARN = "WARN"
SEVERITY_INFO = "INFO"


def _log(severity: str, message: str) -> None:
    sys.stderr.write(f"[{severity}] {message}")
    sys.stderr.flush()


def log_fail(message: str) -> None:
    """Report a failure. The message carries its own line ending."""
    _log(SEVERITY_FAIL, message)


def log_warn(message: str) -> None:
    """Report a warning. The message carries its own line ending."""
    _log(SEVERITY_WARN, message)


def log_info(message: str) -> None:
    """Report information. The message carries its own line ending."""
    _log(SEVERITY_INFO, message)