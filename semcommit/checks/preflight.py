"""Pre-flight gate: tests, then a zero-warning lint pass."""

from typing import Optional

from semcommit.config import DEFAULT_VERIFY_COMMAND
from semcommit.process import run_command

# Fixed on purpose, not read from config
LINT_COMMAND = (
    'cargo', 'clippy',
    '--all-targets',
    '--all-features',
    '--',
    '-D', 'warnings',
)


class PreflightError(Exception):
    """Raised when the pre-flight gate does not pass."""
    pass


class PreflightGate:
    """Runs the verify step and then the lint step, stopping at the first failure."""

    def __init__(self, verify_command=None, lint_command=LINT_COMMAND, runner=run_command):
        self.verify_command = list(verify_command or DEFAULT_VERIFY_COMMAND)
        self.lint_command = list(lint_command)
        self._runner = runner
        self.failed_step: Optional[str] = None

    def run(self) -> bool:
        """Return True only if both steps exit successfully.

        Output streams straight to the terminal; only exit status is looked at.
        """
        self.failed_step = None

        if not self._runner(self.verify_command).ok:
            self.failed_step = 'verify'
            return False

        if not self._runner(self.lint_command).ok:
            self.failed_step = 'lint'
            return False

        return True
