"""Pre-flight Checks Package"""

from semcommit.checks.preflight import PreflightGate, PreflightError, LINT_COMMAND

__all__ = [
    "PreflightGate",
    "PreflightError",
    "LINT_COMMAND",
]
